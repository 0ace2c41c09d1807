"""
linear.py — Linear Search
==========================
One index at a time, left to right.  Works on unsorted input.
`comparing` always holds exactly one index.
"""

from typing import Generator, List

from algorithms.step import Step


PSEUDOCODE: List[str] = [
    "def linear_search(arr, target):",      # 0
    "    for i in 0 … n-1:",                # 1
    "        if arr[i] == target:",         # 2
    "            return i",                 # 3
    "    return -1",                        # 4
]


def linear_search(array: List[int], target: int) -> Generator[Step, None, None]:
    for i, value in enumerate(array):
        yield Step(line=2, comparing=[i], variables={"i": i, "current": value, "target": target})
        if value == target:
            yield Step(line=3, found=i, variables={"i": i, "found": True})
            return
    yield Step(line=4, variables={"found": False})
