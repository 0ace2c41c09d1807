"""
heap.py — Heap Sort
====================
Phase 1 builds a max-heap bottom-up (n // 2 - 1 down to 0).
Phase 2 repeatedly swaps the root with the last unsorted slot and
sifts the new root down over the shrinking heap.

`_sift_down` is written as a loop rather than tail recursion; the
pseudocode still shows the recursive form students know.
"""

from typing import Generator, List

from algorithms.step import Step, snapshot, swap


PSEUDOCODE: List[str] = [
    "def heap_sort(arr):",                                                  # 0
    "    for i in n // 2 - 1 … 0:",                                         # 1
    "        sift_down(arr, n, i)",                                         # 2
    "    for end in n-1 … 1:",                                              # 3
    "        swap(arr, 0, end)",                                            # 4
    "        sift_down(arr, end, 0)",                                       # 5
    "    return arr",                                                       # 6
    "",                                                                     # 7
    "def sift_down(arr, size, i):",                                         # 8
    "    largest ← i; left ← 2i + 1; right ← 2i + 2",                       # 9
    "    if left < size and arr[left] > arr[largest]: largest ← left",      # 10
    "    if right < size and arr[right] > arr[largest]: largest ← right",   # 11
    "    if largest != i:",                                                 # 12
    "        swap(arr, i, largest)",                                        # 13
    "        sift_down(arr, size, largest)",                                # 14
]


def heap_sort(array: List[int]) -> Generator[Step, None, None]:
    n = len(array)

    yield Step(line=1, variables={"n": n, "phase": "build"})
    for i in range(n // 2 - 1, -1, -1):
        yield Step(line=2, pivot=i, variables={"i": i, "n": n})
        yield from _sift_down(array, n, i)

    yield Step(line=3, variables={"n": n, "phase": "extract"})
    for end in range(n - 1, 0, -1):
        yield Step(line=4, comparing=[0, end], variables={"end": end, "n": n})
        swap(array, 0, end)
        yield Step(line=4, array=snapshot(array), comparing=[0, end], variables={"end": end, "n": n})

        yield Step(line=5, variables={"end": end, "n": n})
        yield from _sift_down(array, end, 0)

    yield Step(line=6, array=snapshot(array), variables={"sorted": True})


def _sift_down(array: List[int], size: int, i: int) -> Generator[Step, None, None]:
    while True:
        largest = i
        left    = 2 * i + 1
        right   = 2 * i + 2
        yield Step(
            line=9,
            pivot=i,
            variables={"i": i, "size": size, "largest": largest, "left": left, "right": right},
        )

        if left < size:
            yield Step(line=10, comparing=[left, largest], variables={"i": i, "size": size, "largest": largest})
            if array[left] > array[largest]:
                largest = left

        if right < size:
            yield Step(line=11, comparing=[right, largest], variables={"i": i, "size": size, "largest": largest})
            if array[right] > array[largest]:
                largest = right

        if largest == i:
            return

        yield Step(line=12, variables={"i": i, "size": size, "largest": largest})
        swap(array, i, largest)
        yield Step(
            line=13,
            array=snapshot(array),
            comparing=[i, largest],
            variables={"i": i, "size": size, "largest": largest},
        )
        i = largest
