"""
shell.py — Shell Sort
======================
Gap sequence n/2, n/4, …, 1 (integer division), gapped insertion sort
inside each gap.  `pivot` carries the current gap.
"""

from typing import Generator, List

from algorithms.step import Step, snapshot


PSEUDOCODE: List[str] = [
    "def shell_sort(arr):",                                   # 0
    "    gap ← n // 2",                                       # 1
    "    while gap > 0:",                                     # 2
    "        for i in gap … n-1:",                            # 3
    "            temp ← arr[i]; j ← i",                       # 4
    "            while j >= gap and arr[j - gap] > temp:",    # 5
    "                arr[j] ← arr[j - gap]",                  # 6
    "                j ← j - gap",                            # 7
    "            arr[j] ← temp",                              # 8
    "        gap ← gap // 2",                                 # 9
    "    return arr",                                         # 10
]


def shell_sort(array: List[int]) -> Generator[Step, None, None]:
    n = len(array)
    gap = n // 2
    yield Step(line=1, pivot=gap, variables={"gap": gap, "n": n})

    while gap > 0:
        yield Step(line=2, pivot=gap, variables={"gap": gap, "n": n})
        for i in range(gap, n):
            temp = array[i]
            j = i
            yield Step(line=4, comparing=[i], pivot=gap, variables={"gap": gap, "i": i, "temp": temp})

            while j >= gap:
                yield Step(line=5, comparing=[j - gap, j], pivot=gap, variables={"gap": gap, "i": i, "j": j, "temp": temp})
                if not array[j - gap] > temp:
                    break
                array[j] = array[j - gap]
                yield Step(
                    line=6,
                    array=snapshot(array),
                    comparing=[j, j - gap],
                    pivot=gap,
                    variables={"gap": gap, "i": i, "j": j, "temp": temp},
                )
                j -= gap

            array[j] = temp
            yield Step(line=8, array=snapshot(array), pivot=gap, variables={"gap": gap, "i": i, "j": j, "temp": temp})

        gap //= 2
        yield Step(line=9, pivot=gap, variables={"gap": gap})

    yield Step(line=10, array=snapshot(array), variables={"sorted": True})
