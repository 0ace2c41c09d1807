"""
insertion.py — Insertion Sort
==============================
Canonical shift-right-while-greater.  The key is hoisted once per outer
iteration; every shift is its own array snapshot so the UI can show the
hole travelling left.  Stable.
"""

from typing import Generator, List

from algorithms.step import Step, snapshot


PSEUDOCODE: List[str] = [
    "def insertion_sort(arr):",                   # 0
    "    for i in 1 … n-1:",                      # 1
    "        key ← arr[i]",                       # 2
    "        j ← i - 1",                          # 3
    "        while j >= 0 and arr[j] > key:",     # 4
    "            arr[j + 1] ← arr[j]",            # 5
    "            j ← j - 1",                      # 6
    "        arr[j + 1] ← key",                   # 7
    "    return arr",                             # 8
]


def insertion_sort(array: List[int]) -> Generator[Step, None, None]:
    n = len(array)
    for i in range(1, n):
        yield Step(line=1, pivot=i, variables={"i": i, "n": n})
        key = array[i]
        j = i - 1
        yield Step(line=2, comparing=[i], pivot=i, variables={"i": i, "j": j, "key": key})

        while j >= 0:
            yield Step(line=4, comparing=[j], pivot=i, variables={"i": i, "j": j, "key": key})
            if not array[j] > key:
                break
            array[j + 1] = array[j]
            yield Step(
                line=5,
                array=snapshot(array),
                comparing=[j, j + 1],
                variables={"i": i, "j": j, "key": key},
            )
            j -= 1

        array[j + 1] = key
        yield Step(
            line=7,
            array=snapshot(array),
            pivot=j + 1,
            variables={"i": i, "j": j + 1, "key": key},
        )

    yield Step(line=8, array=snapshot(array), variables={"sorted": True})
