"""
gnome.py — Gnome Sort
======================
A single index walks forward while neighbours are in order and steps
back one slot after swapping an inversion.  Stable.
"""

from typing import Generator, List

from algorithms.step import Step, snapshot, swap


PSEUDOCODE: List[str] = [
    "def gnome_sort(arr):",                                        # 0
    "    index ← 0",                                               # 1
    "    while index < n:",                                        # 2
    "        if index == 0 or arr[index] >= arr[index - 1]:",      # 3
    "            index ← index + 1",                               # 4
    "        else:",                                               # 5
    "            swap(arr, index, index - 1)",                     # 6
    "            index ← index - 1",                               # 7
    "    return arr",                                              # 8
]


def gnome_sort(array: List[int]) -> Generator[Step, None, None]:
    n = len(array)
    index = 0
    yield Step(line=1, variables={"index": index, "n": n})

    while index < n:
        if index == 0:
            index += 1
            yield Step(line=4, variables={"index": index, "n": n})
            continue

        yield Step(line=3, comparing=[index, index - 1], variables={"index": index, "n": n})
        if array[index] >= array[index - 1]:
            index += 1
            yield Step(line=4, variables={"index": index, "n": n})
        else:
            swap(array, index, index - 1)
            yield Step(
                line=6,
                array=snapshot(array),
                comparing=[index, index - 1],
                variables={"index": index, "n": n},
            )
            index -= 1

    yield Step(line=8, array=snapshot(array), variables={"sorted": True})
