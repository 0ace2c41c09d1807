import pytest

from algorithms import (
    FAMILIES, REGISTRY, PathfindingAlgorithm, SortingAlgorithm, TraversalOrder,
    UnknownAlgorithmError, algorithms_by_family, get_algorithm, list_algorithms,
)


def test_registry_covers_every_family():
    counts = {family: len(algos) for family, algos in algorithms_by_family().items()}
    assert counts == {"sorting": 11, "searching": 5, "pathfinding": 5, "traversal": 3}
    assert len(REGISTRY) == 24


@pytest.mark.parametrize("name", ["astar", "A*", "a*", " A* ", PathfindingAlgorithm.ASTAR])
def test_lookup_by_key_label_or_enum(name):
    assert get_algorithm(name).key == "astar"


def test_lookup_by_traversal_enum():
    assert get_algorithm(TraversalOrder.POST_ORDER).key == "post_order"


def test_every_sorting_enum_resolves():
    assert [get_algorithm(e).key for e in SortingAlgorithm] == [a.key for a in list_algorithms("sorting")]


def test_unknown_algorithm():
    with pytest.raises(UnknownAlgorithmError):
        get_algorithm("bogo")
    assert issubclass(UnknownAlgorithmError, ValueError)


def test_unknown_family():
    with pytest.raises(ValueError):
        list_algorithms("graph-colouring")


def test_complexity_descriptors():
    assert get_algorithm("quick").complexity.worst == "O(n²)"
    assert get_algorithm("merge").complexity.space == "O(n)"
    assert get_algorithm("binary").complexity.average == "O(log n)"


@pytest.mark.parametrize("info", list(REGISTRY.values()), ids=lambda i: i.key)
def test_trace_text_is_the_pseudocode(info):
    assert info.family in FAMILIES
    assert info.pseudocode
    assert info.trace_text.splitlines() == info.pseudocode


def test_only_astar_and_greedy_take_a_heuristic():
    assert [a.key for a in REGISTRY.values() if a.has_heuristic] == ["astar", "greedy"]


def test_stable_sorts():
    stable = [a.key for a in list_algorithms("sorting") if a.stable]
    assert stable == ["bubble", "merge", "insertion", "cocktail", "gnome"]
    assert get_algorithm("counting").stable is False


def test_linear_is_the_only_search_without_sorted_input():
    assert [a.key for a in list_algorithms("searching") if not a.requires_sorted] == ["linear"]


def test_to_dict_is_json_friendly():
    data = get_algorithm("dijkstra").to_dict()
    assert data["family"] == "pathfinding"
    assert data["complexity"]["space"] == "O(V)"
    assert data["trace_text"].startswith(data["pseudocode"][0])
