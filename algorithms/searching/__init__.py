"""
algorithms/searching/
---------------------
Searching producers:

    producer(array: List[int], target: int) -> Generator[Step, None, None]

Success ends with a Step carrying `found`; a miss ends with a Step that
has no `found` at all.  Every producer except linear search expects
ascending input.
"""

from algorithms.searching.linear        import linear_search
from algorithms.searching.binary        import binary_search
from algorithms.searching.jump          import jump_search
from algorithms.searching.interpolation import interpolation_search
from algorithms.searching.exponential   import exponential_search

__all__ = [
    "linear_search",
    "binary_search",
    "jump_search",
    "interpolation_search",
    "exponential_search",
]
