"""
interpolation.py — Interpolation Search
========================================
Probes where the target *should* sit if values were evenly spread:

    pos = low + (target - arr[low]) * (high - low) // (arr[high] - arr[low])

Two degenerate windows are guarded before the probe so the division
never sees a zero denominator:
  • low == high             – a single candidate left
  • arr[low] == arr[high]   – a flat run; the loop guard already proved
                              arr[low] <= target <= arr[high], so arr[low]
                              IS the target
"""

from typing import Generator, List

from algorithms.step import Step


PSEUDOCODE: List[str] = [
    "def interpolation_search(arr, target):",                                  # 0
    "    low, high ← 0, n - 1",                                                # 1
    "    while low <= high and arr[low] <= target <= arr[high]:",              # 2
    "        if low == high or arr[low] == arr[high]:",                        # 3
    "            return low if arr[low] == target else -1",                    # 4
    "        pos ← low + (target - arr[low]) * (high - low) // (arr[high] - arr[low])",  # 5
    "        if arr[pos] == target: return pos",                               # 6
    "        if arr[pos] < target: low ← pos + 1",                             # 7
    "        else: high ← pos - 1",                                            # 8
    "    return -1",                                                           # 9
]


def interpolation_search(array: List[int], target: int) -> Generator[Step, None, None]:
    low, high = 0, len(array) - 1
    yield Step(line=1, variables={"low": low, "high": high})

    while low <= high and array[low] <= target <= array[high]:
        yield Step(line=2, range=(low, high), variables={"low": low, "high": high, "target": target})

        if low == high or array[low] == array[high]:
            yield Step(line=3, comparing=[low], variables={"low": low, "high": high, "degenerate": True})
            if array[low] == target:
                yield Step(line=4, found=low, variables={"low": low, "found": True})
            else:
                yield Step(line=4, variables={"found": False})
            return

        pos = low + (target - array[low]) * (high - low) // (array[high] - array[low])
        yield Step(line=5, comparing=[pos], range=(low, high), variables={"low": low, "high": high, "pos": pos, "value": array[pos]})

        if array[pos] == target:
            yield Step(line=6, found=pos, variables={"pos": pos, "found": True})
            return

        if array[pos] < target:
            low = pos + 1
            yield Step(line=7, variables={"low": low, "high": high, "pos": pos, "action": "move low"})
        else:
            high = pos - 1
            yield Step(line=8, variables={"low": low, "high": high, "pos": pos, "action": "move high"})

    yield Step(line=9, variables={"found": False})
