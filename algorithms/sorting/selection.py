"""
selection.py — Selection Sort
==============================
Tracks the running minimum of the unsorted tail (`pivot` points at it)
and swaps it into place only when it isn't already there.
"""

from typing import Generator, List

from algorithms.step import Step, snapshot, swap


PSEUDOCODE: List[str] = [
    "def selection_sort(arr):",                # 0
    "    for i in 0 … n-1:",                   # 1
    "        min_idx ← i",                     # 2
    "        for j in i+1 … n-1:",             # 3
    "            if arr[j] < arr[min_idx]:",   # 4
    "                min_idx ← j",             # 5
    "        if min_idx != i:",                # 6
    "            swap(arr, i, min_idx)",       # 7
    "    return arr",                          # 8
]


def selection_sort(array: List[int]) -> Generator[Step, None, None]:
    n = len(array)
    for i in range(n):
        min_idx = i
        yield Step(line=2, pivot=min_idx, variables={"i": i, "n": n, "min_idx": min_idx})

        for j in range(i + 1, n):
            yield Step(
                line=4,
                comparing=[j, min_idx],
                pivot=min_idx,
                variables={"i": i, "j": j, "min_idx": min_idx},
            )
            if array[j] < array[min_idx]:
                min_idx = j
                yield Step(
                    line=5,
                    comparing=[j],
                    pivot=min_idx,
                    variables={"i": i, "j": j, "min_idx": min_idx},
                )

        if min_idx != i:
            yield Step(line=6, comparing=[i, min_idx], pivot=min_idx, variables={"i": i, "min_idx": min_idx})
            swap(array, i, min_idx)
            yield Step(
                line=7,
                array=snapshot(array),
                comparing=[i, min_idx],
                variables={"i": i, "min_idx": min_idx},
            )

    yield Step(line=8, array=snapshot(array), variables={"sorted": True})
