"""
bfs.py — Breadth-First Search (grid)
=====================================
FIFO queue; a cell is marked visited the moment it is enqueued, so no
cell is ever queued twice.  Finds the path with the fewest moves.  Mud
is still walkable but does not influence the order of exploration.
"""

from collections import deque
from typing import Deque, Generator, List, Optional

from algorithms.step import Step
from algorithms.pathfinding.common import endpoints, reconstruct_path, unsolvable
from grid import Grid, GridNode, Position


PSEUDOCODE: List[str] = [
    "def bfs(grid, start, end):",                          # 0
    "    queue ← [start]",                                 # 1
    "    start.visited ← True",                            # 2
    "    while queue:",                                    # 3
    "        curr ← queue.popleft()",                      # 4
    "        if curr == end: return get_path(end)",        # 5
    "        for nbr in neighbours(curr):",                # 6
    "            if not nbr.visited:",                     # 7
    "                nbr.visited, nbr.previous ← True, curr",  # 8
    "                queue.append(nbr)",                   # 9
    "    return NOT FOUND",                                # 10
]


def bfs(
    grid: Grid,
    start: Position,
    end: Position,
    heuristic: Optional[str] = None,
) -> Generator[Step, None, None]:
    start_node, end_node, reason = endpoints(grid, start, end)
    if reason:
        yield unsolvable(10, reason)
        return

    queue: Deque[GridNode] = deque([start_node])
    start_node.is_visited = True
    start_node.distance   = 0
    yield Step(line=2, grid=grid.clone(), variables={"row": start_node.row, "col": start_node.col})

    while queue:
        curr = queue.popleft()
        yield Step(line=4, variables={"queue_size": len(queue) + 1, "row": curr.row, "col": curr.col})

        if curr is end_node:
            yield from reconstruct_path(grid, curr, 5, {
                "row": curr.row,
                "col": curr.col,
                "total_distance": curr.distance,
            })
            return

        added = 0
        for nbr in grid.neighbours(curr):
            if not nbr.is_visited:
                nbr.is_visited = True
                nbr.previous   = grid.index_of(curr)
                nbr.distance   = curr.distance + nbr.move_cost
                queue.append(nbr)
                added += 1
        yield Step(
            line=9,
            grid=grid.clone(),
            variables={"row": curr.row, "col": curr.col, "neighbours_enqueued": added},
        )

    yield Step(line=10, variables={"found": False})
