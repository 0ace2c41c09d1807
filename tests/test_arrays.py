import pytest

from algorithms.arrays import VALUE_MAX, VALUE_MIN, generate_pattern, generate_random, shuffled


def test_random_array_has_size_and_bounds():
    arr = generate_random(50, seed=1)
    assert len(arr) == 50
    assert all(VALUE_MIN <= v <= VALUE_MAX for v in arr)


def test_seeded_generation_is_reproducible():
    assert generate_random(20, seed=9) == generate_random(20, seed=9)
    assert generate_pattern(20, "nearly", seed=9) == generate_pattern(20, "nearly", seed=9)


def test_sorted_pattern():
    arr = generate_pattern(10, "sorted")
    assert len(arr) == 10
    assert arr == sorted(arr)
    assert arr[0] == VALUE_MIN


def test_reversed_pattern():
    arr = generate_pattern(10, "reversed")
    assert arr == sorted(arr, reverse=True)


def test_nearly_sorted_pattern_keeps_the_values():
    arr = generate_pattern(20, "nearly", seed=4)
    assert sorted(arr) == generate_pattern(20, "sorted")


@pytest.mark.parametrize("pattern", ["random", "sorted", "reversed", "nearly"])
def test_empty_pattern(pattern):
    assert generate_pattern(0, pattern) == []


def test_unknown_pattern_and_negative_size():
    with pytest.raises(ValueError):
        generate_pattern(5, "zigzag")
    with pytest.raises(ValueError):
        generate_random(-1)


def test_shuffle_is_a_permutation_of_a_copy():
    values = list(range(30))
    out = shuffled(values, seed=3)

    assert values == list(range(30))
    assert sorted(out) == values
    assert out == shuffled(values, seed=3)
    assert out != values
