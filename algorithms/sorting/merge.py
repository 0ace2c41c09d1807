"""
merge.py — Merge Sort
======================
Top-down merge sort.  Split at (start + end) // 2, sort both halves,
then merge.  The merge takes from the left half on ties (`<=`), which
is what keeps the sort stable.

Recursion depth is log2(n), so plain `yield from` recursion is fine here.
"""

from typing import Generator, List

from algorithms.step import Step, snapshot


# ---------------------------------------------------------------------------
# Pseudocode
# ---------------------------------------------------------------------------
PSEUDOCODE: List[str] = [
    "def merge_sort(arr, start, end):",                               # 0
    "    if start >= end: return",                                    # 1
    "    mid ← (start + end) // 2",                                   # 2
    "    merge_sort(arr, start, mid)",                                # 3
    "    merge_sort(arr, mid + 1, end)",                              # 4
    "    merge(arr, start, mid, end)",                                # 5
    "",                                                               # 6
    "def merge(arr, start, mid, end):",                               # 7
    "    left, right ← arr[start … mid], arr[mid+1 … end]",           # 8
    "    i, j, k ← 0, 0, start",                                      # 9
    "    while i < len(left) and j < len(right):",                    # 10
    "        if left[i] <= right[j]: arr[k] ← left[i]; i ← i + 1",   # 11
    "        else: arr[k] ← right[j]; j ← j + 1",                     # 12
    "        k ← k + 1",                                              # 13
    "    copy left[i …] into arr[k …]",                               # 14
    "    copy right[j …] into arr[k …]",                              # 15
]


# ---------------------------------------------------------------------------
# Generator
# ---------------------------------------------------------------------------
def merge_sort(array: List[int]) -> Generator[Step, None, None]:
    yield from _sort(array, 0, len(array) - 1)
    yield Step(line=0, array=snapshot(array), variables={"sorted": True})


def _sort(array: List[int], start: int, end: int) -> Generator[Step, None, None]:
    yield Step(line=1, range=(start, end), variables={"start": start, "end": end})
    if start >= end:
        return

    mid = (start + end) // 2
    yield Step(line=2, variables={"start": start, "end": end, "mid": mid})

    yield Step(line=3, range=(start, mid), variables={"start": start, "end": end, "mid": mid})
    yield from _sort(array, start, mid)

    yield Step(line=4, range=(mid + 1, end), variables={"start": start, "end": end, "mid": mid})
    yield from _sort(array, mid + 1, end)

    yield Step(line=5, range=(start, end), variables={"start": start, "end": end, "mid": mid})
    yield from _merge(array, start, mid, end)


def _merge(array: List[int], start: int, mid: int, end: int) -> Generator[Step, None, None]:
    left  = array[start:mid + 1]
    right = array[mid + 1:end + 1]
    i = j = 0
    k = start

    while i < len(left) and j < len(right):
        yield Step(
            line=10,
            comparing=[start + i, mid + 1 + j],
            variables={"i": i, "j": j, "k": k, "left": left[i], "right": right[j]},
        )
        if left[i] <= right[j]:
            array[k] = left[i]
            i += 1
            yield Step(line=11, array=snapshot(array), comparing=[k], variables={"i": i, "j": j, "k": k})
        else:
            array[k] = right[j]
            j += 1
            yield Step(line=12, array=snapshot(array), comparing=[k], variables={"i": i, "j": j, "k": k})
        k += 1

    while i < len(left):
        array[k] = left[i]
        i += 1
        yield Step(line=14, array=snapshot(array), comparing=[k], variables={"i": i, "j": j, "k": k})
        k += 1

    while j < len(right):
        array[k] = right[j]
        j += 1
        yield Step(line=15, array=snapshot(array), comparing=[k], variables={"i": i, "j": j, "k": k})
        k += 1
