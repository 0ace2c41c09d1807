"""
quick.py — Quick Sort (Lomuto partition)
=========================================
Last element of each range is the pivot; everything strictly smaller is
swapped to the front, then the pivot drops into its final slot.

The recursion is driven by an explicit range stack (same trick as the
iterative DFS) so an already-sorted input of any length never hits the
interpreter's recursion limit.  The right range is pushed before the
left one, which keeps the classic left-then-right visiting order.

Overlay fields:
  • range – (start, end) of the partition being processed
  • pivot – index of the pivot (end while partitioning, final slot after)
"""

from typing import Generator, List, Tuple

from algorithms.step import Step, snapshot, swap


# ---------------------------------------------------------------------------
# Pseudocode
# ---------------------------------------------------------------------------
PSEUDOCODE: List[str] = [
    "def quick_sort(arr):",                               # 0
    "    stack ← [(0, n - 1)]",                           # 1
    "    while stack is not empty:",                      # 2
    "        (start, end) ← stack.pop()",                 # 3
    "        if start >= end: continue",                  # 4
    "        pivot_value ← arr[end]",                     # 5
    "        pivot_index ← start",                        # 6
    "        for i in start … end-1:",                    # 7
    "            if arr[i] < pivot_value:",               # 8
    "                swap(arr, i, pivot_index)",          # 9
    "                pivot_index ← pivot_index + 1",      # 10
    "        swap(arr, pivot_index, end)",                # 11
    "        stack.push((pivot_index + 1, end))",         # 12
    "        stack.push((start, pivot_index - 1))",       # 13
    "    return arr",                                     # 14
]


# ---------------------------------------------------------------------------
# Generator
# ---------------------------------------------------------------------------
def quick_sort(array: List[int]) -> Generator[Step, None, None]:
    n = len(array)
    stack: List[Tuple[int, int]] = [(0, n - 1)]
    yield Step(line=1, variables={"n": n})

    while stack:
        start, end = stack.pop()
        yield Step(
            line=3,
            range=(start, end),
            variables={"start": start, "end": end, "pending": len(stack)},
        )
        if start >= end:
            continue

        pivot_value = array[end]
        pivot_index = start
        yield Step(
            line=5,
            pivot=end,
            variables={"start": start, "end": end, "pivot_value": pivot_value},
        )

        for i in range(start, end):
            vars_ = {
                "start": start, "end": end, "i": i,
                "pivot_index": pivot_index, "pivot_value": pivot_value,
            }
            yield Step(line=8, comparing=[i, end], pivot=end, variables=vars_)
            if array[i] < pivot_value:
                swap(array, i, pivot_index)
                yield Step(
                    line=9,
                    array=snapshot(array),
                    comparing=[i, pivot_index],
                    pivot=end,
                    variables=vars_,
                )
                pivot_index += 1

        swap(array, pivot_index, end)
        yield Step(
            line=11,
            array=snapshot(array),
            comparing=[pivot_index, end],
            pivot=pivot_index,
            variables={"start": start, "end": end, "pivot_index": pivot_index},
        )

        stack.append((pivot_index + 1, end))
        stack.append((start, pivot_index - 1))
        yield Step(
            line=13,
            pivot=pivot_index,
            variables={
                "left": f"{start}..{pivot_index - 1}",
                "right": f"{pivot_index + 1}..{end}",
            },
        )

    yield Step(line=14, array=snapshot(array), variables={"sorted": True})
