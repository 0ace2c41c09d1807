"""
bubble.py — Bubble Sort
========================
Generator-based bubble sort.  Yields a Step at:
  1. The start of every outer pass
  2. Every adjacent comparison  →  `comparing = [j, j+1]`
  3. Every swap  →  fresh `array` snapshot
  4. The end of the run  →  final sorted snapshot

Stable: only strictly-greater neighbours are swapped.
"""

from typing import Generator, List

from algorithms.step import Step, snapshot, swap


# ---------------------------------------------------------------------------
# Pseudocode
# ---------------------------------------------------------------------------
PSEUDOCODE: List[str] = [
    "def bubble_sort(arr):",                 # 0
    "    n ← len(arr)",                      # 1
    "    for i in 0 … n-1:",                 # 2
    "        for j in 0 … n-i-2:",           # 3
    "            if arr[j] > arr[j + 1]:",   # 4
    "                swap(arr, j, j + 1)",   # 5
    "    return arr",                        # 6
]


# ---------------------------------------------------------------------------
# Generator
# ---------------------------------------------------------------------------
def bubble_sort(array: List[int]) -> Generator[Step, None, None]:
    """
    Sorts `array` in place, yielding a Step per event.

    The caller owns the list — clone it first if the original order
    must survive.
    """
    n = len(array)
    yield Step(line=1, variables={"n": n})

    for i in range(n):
        yield Step(line=2, variables={"i": i, "n": n})
        for j in range(n - i - 1):
            yield Step(line=4, comparing=[j, j + 1], variables={"i": i, "j": j, "n": n})
            if array[j] > array[j + 1]:
                swap(array, j, j + 1)
                yield Step(
                    line=5,
                    array=snapshot(array),
                    comparing=[j, j + 1],
                    variables={"i": i, "j": j, "n": n},
                )

    yield Step(line=6, array=snapshot(array), variables={"sorted": True})
