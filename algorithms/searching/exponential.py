"""
exponential.py — Exponential Search
====================================
Checks index 0, then doubles a bound i while arr[i] <= target, and
finally binary-searches the window [i // 2, min(i, n - 1)].
"""

from typing import Generator, List

from algorithms.step import Step


PSEUDOCODE: List[str] = [
    "def exponential_search(arr, target):",                # 0
    "    if arr[0] == target: return 0",                   # 1
    "    i ← 1",                                           # 2
    "    while i < n and arr[i] <= target:",               # 3
    "        i ← i * 2",                                   # 4
    "    low, high ← i // 2, min(i, n - 1)",               # 5
    "    while low <= high:",                              # 6
    "        mid ← (low + high) // 2",                     # 7
    "        if arr[mid] == target: return mid",           # 8
    "        if arr[mid] < target: low ← mid + 1",         # 9
    "        else: high ← mid - 1",                        # 10
    "    return -1",                                       # 11
]


def exponential_search(array: List[int], target: int) -> Generator[Step, None, None]:
    n = len(array)
    if n == 0:
        yield Step(line=11, variables={"n": n, "found": False})
        return

    yield Step(line=1, comparing=[0], variables={"i": 0, "value": array[0], "target": target})
    if array[0] == target:
        yield Step(line=1, found=0, variables={"found": True})
        return

    i = 1
    yield Step(line=2, variables={"i": i})
    while i < n and array[i] <= target:
        yield Step(line=3, comparing=[i], variables={"i": i, "value": array[i], "status": "doubling"})
        i *= 2
        yield Step(line=4, variables={"i": i})

    low, high = i // 2, min(i, n - 1)
    yield Step(line=5, range=(low, high), variables={"low": low, "high": high, "i": i, "phase": "binary"})

    while low <= high:
        mid = (low + high) // 2
        yield Step(line=7, range=(low, high), variables={"low": low, "high": high, "mid": mid})
        yield Step(line=8, comparing=[mid], variables={"mid": mid, "value": array[mid]})

        if array[mid] == target:
            yield Step(line=8, found=mid, variables={"mid": mid, "found": True})
            return

        if array[mid] < target:
            low = mid + 1
            yield Step(line=9, variables={"low": low, "high": high, "mid": mid})
        else:
            high = mid - 1
            yield Step(line=10, variables={"low": low, "high": high, "mid": mid})

    yield Step(line=11, variables={"found": False})
