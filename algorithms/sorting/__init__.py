"""
algorithms/sorting/
-------------------
One module per sorting producer.  Every producer has the signature

    producer(array: List[int]) -> Generator[Step, None, None]

sorts `array` IN PLACE, and finishes with a Step whose `array` is the
fully sorted list.
"""

from algorithms.sorting.bubble    import bubble_sort
from algorithms.sorting.quick     import quick_sort
from algorithms.sorting.merge     import merge_sort
from algorithms.sorting.selection import selection_sort
from algorithms.sorting.insertion import insertion_sort
from algorithms.sorting.heap      import heap_sort
from algorithms.sorting.shell     import shell_sort
from algorithms.sorting.cocktail  import cocktail_sort
from algorithms.sorting.gnome     import gnome_sort
from algorithms.sorting.comb      import comb_sort
from algorithms.sorting.counting  import counting_sort

__all__ = [
    "bubble_sort",
    "quick_sort",
    "merge_sort",
    "selection_sort",
    "insertion_sort",
    "heap_sort",
    "shell_sort",
    "cocktail_sort",
    "gnome_sort",
    "comb_sort",
    "counting_sort",
]
