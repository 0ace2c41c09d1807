"""
cocktail.py — Cocktail Shaker Sort
===================================
Bidirectional bubble sort.  The forward pass bubbles the max to the
right boundary, the backward pass bubbles the min to the left boundary;
both boundaries shrink by one per round.  A forward pass with no swap
ends the run early.
"""

from typing import Generator, List

from algorithms.step import Step, snapshot, swap


PSEUDOCODE: List[str] = [
    "def cocktail_sort(arr):",                                                 # 0
    "    start, end ← 0, n - 1; swapped ← True",                               # 1
    "    while swapped:",                                                      # 2
    "        swapped ← False",                                                 # 3
    "        for i in start … end-1:",                                         # 4
    "            if arr[i] > arr[i + 1]: swap(arr, i, i + 1); swapped ← True", # 5
    "        if not swapped: break",                                           # 6
    "        swapped ← False; end ← end - 1",                                  # 7
    "        for i in end-1 … start:",                                         # 8
    "            if arr[i] > arr[i + 1]: swap(arr, i, i + 1); swapped ← True", # 9
    "        start ← start + 1",                                               # 10
    "    return arr",                                                          # 11
]


def cocktail_sort(array: List[int]) -> Generator[Step, None, None]:
    start   = 0
    end     = len(array) - 1
    swapped = True
    yield Step(line=1, variables={"start": start, "end": end})

    while swapped:
        swapped = False
        yield Step(line=3, range=(start, end), variables={"swapped": swapped, "start": start, "end": end})

        for i in range(start, end):
            yield Step(line=5, comparing=[i, i + 1], variables={"swapped": swapped, "start": start, "end": end, "i": i})
            if array[i] > array[i + 1]:
                swap(array, i, i + 1)
                swapped = True
                yield Step(
                    line=5,
                    array=snapshot(array),
                    comparing=[i, i + 1],
                    variables={"swapped": swapped, "start": start, "end": end, "i": i},
                )

        if not swapped:
            yield Step(line=6, variables={"swapped": swapped})
            break

        swapped = False
        end -= 1
        yield Step(line=7, range=(start, end), variables={"swapped": swapped, "start": start, "end": end})

        for i in range(end - 1, start - 1, -1):
            yield Step(line=9, comparing=[i, i + 1], variables={"swapped": swapped, "start": start, "end": end, "i": i})
            if array[i] > array[i + 1]:
                swap(array, i, i + 1)
                swapped = True
                yield Step(
                    line=9,
                    array=snapshot(array),
                    comparing=[i, i + 1],
                    variables={"swapped": swapped, "start": start, "end": end, "i": i},
                )
        start += 1

    yield Step(line=11, array=snapshot(array), variables={"sorted": True})
