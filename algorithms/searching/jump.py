"""
jump.py — Jump Search
======================
Jumps ahead in blocks of floor(sqrt(n)) while the last value of the
current block is still below the target, then scans the located block
linearly.  Overrunning the array means "not found".
"""

import math
from typing import Generator, List

from algorithms.step import Step


PSEUDOCODE: List[str] = [
    "def jump_search(arr, target):",                       # 0
    "    block ← floor(sqrt(n)); step ← block; prev ← 0",  # 1
    "    while arr[min(step, n) - 1] < target:",           # 2
    "        prev ← step; step ← step + block",            # 3
    "        if prev >= n: return -1",                     # 4
    "    while arr[prev] < target:",                       # 5
    "        prev ← prev + 1",                             # 6
    "        if prev == min(step, n): return -1",          # 7
    "    if arr[prev] == target: return prev",             # 8
    "    return -1",                                       # 9
]


def jump_search(array: List[int], target: int) -> Generator[Step, None, None]:
    n = len(array)
    if n == 0:
        yield Step(line=9, variables={"n": n, "found": False})
        return

    block = math.isqrt(n)
    step  = block
    prev  = 0
    yield Step(line=1, variables={"n": n, "block": block, "step": step, "prev": prev})

    while array[min(step, n) - 1] < target:
        check = min(step, n) - 1
        yield Step(line=2, comparing=[check], variables={"prev": prev, "step": step, "check": check, "value": array[check]})
        prev = step
        step += block
        yield Step(line=3, variables={"prev": prev, "step": step})
        if prev >= n:
            yield Step(line=4, variables={"prev": prev, "status": "out of bounds", "found": False})
            return

    block_end = min(step, n) - 1
    yield Step(line=5, range=(prev, block_end), variables={"prev": prev, "step": step, "phase": "linear"})

    while array[prev] < target:
        yield Step(line=5, comparing=[prev], range=(prev, block_end), variables={"prev": prev, "value": array[prev]})
        prev += 1
        if prev == min(step, n):
            yield Step(line=7, variables={"prev": prev, "status": "not in block", "found": False})
            return

    yield Step(line=8, comparing=[prev], variables={"prev": prev, "value": array[prev]})
    if array[prev] == target:
        yield Step(line=8, found=prev, variables={"prev": prev, "found": True})
    else:
        yield Step(line=9, variables={"found": False})
