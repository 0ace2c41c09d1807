import pytest

from algorithms import list_algorithms
from algorithms.searching import binary_search, interpolation_search, jump_search, linear_search
from algorithms.step import found_index

SORTED = [1, 3, 5, 7, 9, 11, 13, 15, 17, 19, 21, 23, 25]

SEARCHES = list_algorithms("searching")


@pytest.mark.parametrize("info", SEARCHES, ids=lambda i: i.key)
def test_finds_present_target(info):
    steps = list(info.fn(list(SORTED), 13))
    assert found_index(steps) == 6
    assert steps[-1].found == 6


@pytest.mark.parametrize("info", SEARCHES, ids=lambda i: i.key)
def test_missing_target_reports_no_found(info):
    steps = list(info.fn(list(SORTED), 8))
    assert found_index(steps) is None
    assert all(s.found is None for s in steps)


@pytest.mark.parametrize("info", SEARCHES, ids=lambda i: i.key)
@pytest.mark.parametrize("target", SORTED)
def test_every_element_is_found_at_its_index(info, target):
    steps = list(info.fn(list(SORTED), target))
    assert found_index(steps) == SORTED.index(target)


@pytest.mark.parametrize("info", SEARCHES, ids=lambda i: i.key)
@pytest.mark.parametrize("target", [-5, 0, 26, 100])
def test_out_of_range_targets_terminate_without_found(info, target):
    steps = list(info.fn(list(SORTED), target))
    assert steps
    assert found_index(steps) is None


@pytest.mark.parametrize("info", SEARCHES, ids=lambda i: i.key)
def test_empty_array(info):
    steps = list(info.fn([], 4))
    assert steps
    assert found_index(steps) is None


@pytest.mark.parametrize("info", SEARCHES, ids=lambda i: i.key)
def test_single_element(info):
    assert found_index(list(info.fn([4], 4))) == 0
    assert found_index(list(info.fn([4], 5))) is None


@pytest.mark.parametrize("info", SEARCHES, ids=lambda i: i.key)
def test_steps_reference_valid_lines_and_indices(info):
    for target in (1, 8, 13, 25):
        for step in info.fn(list(SORTED), target):
            assert 0 <= step.line < len(info.pseudocode)
            for idx in step.comparing or []:
                assert 0 <= idx < len(SORTED)
            if step.range is not None:
                low, high = step.range
                assert 0 <= low and high < len(SORTED)


def test_searches_do_not_mutate_input():
    arr = list(SORTED)
    for info in SEARCHES:
        list(info.fn(arr, 13))
    assert arr == SORTED


def test_linear_search_works_on_unsorted_input():
    steps = list(linear_search([9, 4, 7, 1], 7))
    assert found_index(steps) == 2


def test_binary_search_narrows_the_range():
    ranges = [s.range for s in binary_search(list(SORTED), 23) if s.range is not None]
    widths = [high - low for low, high in ranges]
    assert widths == sorted(widths, reverse=True)
    assert ranges[0] == (0, len(SORTED) - 1)


def test_interpolation_search_handles_all_equal_values():
    steps = list(interpolation_search([5, 5, 5, 5], 5))
    assert found_index(steps) == 0
    steps = list(interpolation_search([5, 5, 5, 5], 6))
    assert found_index(steps) is None


def test_jump_search_uses_sqrt_blocks():
    first = next(jump_search(list(range(16)), 10))
    assert first.variables["block"] == 4
