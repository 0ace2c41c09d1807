"""
binary.py — Binary Search
==========================
Maintains an inclusive [low, high] window, probes mid = (low + high) // 2
and halves the window on every miss.  Expects ascending input.
"""

from typing import Generator, List

from algorithms.step import Step


PSEUDOCODE: List[str] = [
    "def binary_search(arr, target):",         # 0
    "    low, high ← 0, n - 1",                # 1
    "    while low <= high:",                  # 2
    "        mid ← (low + high) // 2",         # 3
    "        if arr[mid] == target: return mid",  # 4
    "        if arr[mid] < target: low ← mid + 1",  # 5
    "        else: high ← mid - 1",            # 6
    "    return -1",                           # 7
]


def binary_search(array: List[int], target: int) -> Generator[Step, None, None]:
    low, high = 0, len(array) - 1
    yield Step(line=1, variables={"low": low, "high": high})

    while low <= high:
        mid = (low + high) // 2
        yield Step(line=3, range=(low, high), variables={"low": low, "high": high, "mid": mid})
        yield Step(line=4, comparing=[mid], range=(low, high), variables={"mid": mid, "value": array[mid]})

        if array[mid] == target:
            yield Step(line=4, found=mid, variables={"mid": mid, "found": True})
            return

        if array[mid] < target:
            low = mid + 1
            yield Step(line=5, variables={"low": low, "high": high, "mid": mid, "action": "move low"})
        else:
            high = mid - 1
            yield Step(line=6, variables={"low": low, "high": high, "mid": mid, "action": "move high"})

    yield Step(line=7, variables={"found": False})
