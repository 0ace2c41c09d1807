"""
counting.py — Counting Sort
============================
Integer-only.  Builds a frequency table sized max - min + 1 (the min
offset means negative integers work too), then re-emits values in
order, one array write per step.

An empty input has no min / max: the producer yields a single trace
step and leaves the list untouched.
"""

from typing import Generator, List

from algorithms.step import Step, snapshot


PSEUDOCODE: List[str] = [
    "def counting_sort(arr):",                   # 0
    "    if arr is empty: return arr",           # 1
    "    lo, hi ← min(arr), max(arr)",           # 2
    "    count ← [0] * (hi - lo + 1)",           # 3
    "    for value in arr:",                     # 4
    "        count[value - lo] += 1",            # 5
    "    z ← 0",                                 # 6
    "    for v in lo … hi:",                     # 7
    "        while count[v - lo] > 0:",          # 8
    "            arr[z] ← v; z ← z + 1",         # 9
    "            count[v - lo] -= 1",            # 10
    "    return arr",                            # 11
]


def counting_sort(array: List[int]) -> Generator[Step, None, None]:
    if not array:
        yield Step(line=1, array=snapshot(array), variables={"empty": True})
        return

    lo, hi = min(array), max(array)
    count = [0] * (hi - lo + 1)
    yield Step(line=2, variables={"min": lo, "max": hi})
    yield Step(line=3, variables={"buckets": len(count)})

    for i, value in enumerate(array):
        yield Step(line=4, comparing=[i], variables={"i": i, "value": value, "min": lo})
        count[value - lo] += 1
        yield Step(line=5, variables={"i": i, "value": value, "count": count[value - lo]})

    z = 0
    yield Step(line=6, variables={"z": z})
    for v in range(lo, hi + 1):
        yield Step(line=7, variables={"v": v, "z": z, "min": lo, "max": hi})
        while count[v - lo] > 0:
            array[z] = v
            z += 1
            count[v - lo] -= 1
            yield Step(
                line=9,
                array=snapshot(array),
                comparing=[z - 1],
                variables={"v": v, "z": z, "count": count[v - lo]},
            )

    yield Step(line=11, array=snapshot(array), variables={"sorted": True})
