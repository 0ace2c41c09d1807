"""
comb.py — Comb Sort
====================
Bubble sort over a shrinking gap.  The gap starts at len(arr) and is
divided by SHRINK_FACTOR (floored, never below 1) before every pass.
The run ends after a full gap-1 pass that performs no swap.
"""

from typing import Generator, List

from algorithms.step import Step, snapshot, swap


SHRINK_FACTOR = 1.3

PSEUDOCODE: List[str] = [
    "def comb_sort(arr):",                                   # 0
    "    gap ← n; shrink ← 1.3; sorted ← False",             # 1
    "    while not sorted:",                                 # 2
    "        gap ← floor(gap / shrink)",                     # 3
    "        if gap <= 1: gap ← 1; sorted ← True",           # 4
    "        for i in 0 … n-gap-1:",                         # 5
    "            if arr[i] > arr[i + gap]:",                 # 6
    "                swap(arr, i, i + gap); sorted ← False", # 7
    "    return arr",                                        # 8
]


def comb_sort(array: List[int]) -> Generator[Step, None, None]:
    n = len(array)
    gap = n
    done = False
    yield Step(line=1, variables={"gap": gap, "sorted": done})

    while not done:
        gap = int(gap / SHRINK_FACTOR)
        if gap <= 1:
            gap = 1
            done = True
        yield Step(line=3, pivot=gap, variables={"gap": gap, "sorted": done})

        for i in range(n - gap):
            yield Step(line=6, comparing=[i, i + gap], pivot=gap, variables={"gap": gap, "sorted": done, "i": i})
            if array[i] > array[i + gap]:
                swap(array, i, i + gap)
                done = False
                yield Step(
                    line=7,
                    array=snapshot(array),
                    comparing=[i, i + gap],
                    pivot=gap,
                    variables={"gap": gap, "sorted": done, "i": i},
                )

    yield Step(line=8, array=snapshot(array), variables={"sorted": True})
