"""
dfs.py — Depth-First Search (grid)
===================================
LIFO stack.  A cell is marked visited when it is POPPED, not when it is
pushed, so the same cell can sit on the stack several times; the
latest push wins its back-link.  The path found is rarely the shortest.
"""

from typing import Generator, List, Optional

from algorithms.step import Step
from algorithms.pathfinding.common import endpoints, reconstruct_path, unsolvable
from grid import Grid, GridNode, Position


PSEUDOCODE: List[str] = [
    "def dfs(grid, start, end):",                          # 0
    "    stack ← [start]",                                 # 1
    "    while stack:",                                    # 2
    "        curr ← stack.pop()",                          # 3
    "        if curr == end: return get_path(end)",        # 4
    "        if not curr.visited:",                        # 5
    "            curr.visited ← True",                     # 6
    "            for nbr in neighbours(curr):",            # 7
    "                if not nbr.visited:",                 # 8
    "                    nbr.previous ← curr",             # 9
    "                    stack.push(nbr)",                 # 10
    "    return NOT FOUND",                                # 11
]


def dfs(
    grid: Grid,
    start: Position,
    end: Position,
    heuristic: Optional[str] = None,
) -> Generator[Step, None, None]:
    start_node, end_node, reason = endpoints(grid, start, end)
    if reason:
        yield unsolvable(11, reason)
        return

    start_node.distance = 0
    stack: List[GridNode] = [start_node]

    while stack:
        curr = stack.pop()
        yield Step(line=3, variables={"stack_size": len(stack) + 1, "row": curr.row, "col": curr.col})

        if curr is end_node:
            yield from reconstruct_path(grid, curr, 4, {
                "row": curr.row,
                "col": curr.col,
                "total_distance": curr.distance,
            })
            return

        if curr.is_visited:
            continue

        curr.is_visited = True
        yield Step(
            line=6,
            grid=grid.clone(),
            variables={"row": curr.row, "col": curr.col, "status": "exploring depth"},
        )

        for nbr in grid.neighbours(curr):
            if not nbr.is_visited:
                nbr.previous = grid.index_of(curr)
                nbr.distance = curr.distance + nbr.move_cost
                stack.append(nbr)
        yield Step(line=10, variables={"stack_size": len(stack)})

    yield Step(line=11, variables={"found": False})
