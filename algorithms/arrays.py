"""
arrays.py — Input Array Factories
==================================
Working arrays for the sorting and searching pages.

    generate_random(size)             uniform values in [VALUE_MIN, VALUE_MAX]
    generate_pattern(size, pattern)   "random" | "sorted" | "reversed" | "nearly"
    shuffled(values)                  Fisher-Yates copy

Every factory takes an optional `seed` and draws from its own
`random.Random`, so a seeded call is reproducible and never touches the
module-level generator.
"""

import random
from typing import List, Optional, Sequence


VALUE_MIN = 5
VALUE_MAX = 104

PATTERNS = ("random", "sorted", "reversed", "nearly")

NEARLY_SWAP_CHANCE = 0.2


def _check_size(size: int) -> None:
    if size < 0:
        raise ValueError(f"Array size must not be negative, got {size}")


def generate_random(size: int, seed: Optional[int] = None) -> List[int]:
    _check_size(size)
    rng = random.Random(seed)
    return [rng.randint(VALUE_MIN, VALUE_MAX) for _ in range(size)]


def generate_pattern(size: int, pattern: str = "random", seed: Optional[int] = None) -> List[int]:
    """
    Evenly spaced values laid out by `pattern`:

        sorted    ascending ramp
        reversed  descending ramp
        nearly    ascending ramp, each slot swapped with a random slot
                  with probability NEARLY_SWAP_CHANCE
        random    same as generate_random()

    Raises:
        ValueError: unknown pattern or negative size.
    """
    if pattern not in PATTERNS:
        raise ValueError(f"Unknown pattern {pattern!r}; expected one of {PATTERNS}")
    _check_size(size)
    if pattern == "random":
        return generate_random(size, seed)

    span = VALUE_MAX - VALUE_MIN
    ramp = [VALUE_MIN + (i * span) // size for i in range(size)]
    if pattern == "reversed":
        ramp.reverse()
    elif pattern == "nearly":
        rng = random.Random(seed)
        for i in range(size):
            if rng.random() < NEARLY_SWAP_CHANCE:
                j = rng.randrange(size)
                ramp[i], ramp[j] = ramp[j], ramp[i]
    return ramp


def shuffled(values: Sequence[int], seed: Optional[int] = None) -> List[int]:
    """Fisher-Yates shuffle of a copy; `values` is left alone."""
    rng = random.Random(seed)
    out = list(values)
    for i in range(len(out) - 1, 0, -1):
        j = rng.randint(0, i)
        out[i], out[j] = out[j], out[i]
    return out
