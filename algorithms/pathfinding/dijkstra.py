"""
dijkstra.py — Dijkstra's Shortest-Path Algorithm (grid)
========================================================
Generator-based Dijkstra using a min-heap (heapq) keyed on
(distance, insertion order), so ties resolve first-in first-out.

Yields a Step at:
  1. Pop minimum-distance node
  2. Node marked visited           →  grid snapshot
  3. Neighbour relaxation summary
  4. Goal popped                   →  path reconstruction, one snapshot per node
  5. Heap empty                    →  NOT FOUND

Correctness note: movement costs are 1 or MUD_COST, never negative.
"""

import heapq
import itertools
from typing import Generator, List, Optional, Tuple

from algorithms.step import Step
from algorithms.pathfinding.common import endpoints, reconstruct_path, unsolvable
from grid import Grid, GridNode, Position


# ---------------------------------------------------------------------------
# Pseudocode
# ---------------------------------------------------------------------------
PSEUDOCODE: List[str] = [
    "def dijkstra(grid, start, end):",                     # 0
    "    start.distance ← 0",                              # 1
    "    pq ← [(0, start)]",                               # 2
    "    while pq is not empty:",                          # 3
    "        (d, curr) ← pq.pop_min()",                    # 4
    "        if curr.visited or d > curr.distance: continue",  # 5
    "        if curr == end: return get_path(end)",        # 6
    "        curr.visited ← True",                         # 7
    "        for nbr in neighbours(curr):",                # 8
    "            new_dist ← curr.distance + cost(nbr)",    # 9
    "            if new_dist < nbr.distance:",             # 10
    "                nbr.distance, nbr.previous ← new_dist, curr",  # 11
    "                pq.push((new_dist, nbr))",            # 12
    "    return NOT FOUND",                                # 13
]


# ---------------------------------------------------------------------------
# Generator
# ---------------------------------------------------------------------------
def dijkstra(
    grid: Grid,
    start: Position,
    end: Position,
    heuristic: Optional[str] = None,
) -> Generator[Step, None, None]:
    """
    Args:
        grid      : Prepared grid; mutated in place.
        start/end : (row, col) positions.
        heuristic : Ignored.  Accepted so every grid producer shares one signature.
    """
    start_node, end_node, reason = endpoints(grid, start, end)
    if reason:
        yield unsolvable(13, reason)
        return

    counter = itertools.count()
    start_node.distance = 0
    pq: List[Tuple[float, int, GridNode]] = [(0, next(counter), start_node)]
    yield Step(line=2, variables={"row": start_node.row, "col": start_node.col, "queue": 1})

    while pq:
        d, _, curr = heapq.heappop(pq)

        # stale entry
        if curr.is_visited or d > curr.distance:
            continue

        yield Step(
            line=4,
            variables={"row": curr.row, "col": curr.col, "dist": curr.distance, "queue": len(pq) + 1},
        )

        if curr is end_node:
            yield from reconstruct_path(grid, curr, 6, {
                "row": curr.row,
                "col": curr.col,
                "total_distance": curr.distance,
            })
            return

        curr.is_visited = True
        yield Step(
            line=7,
            grid=grid.clone(),
            variables={"row": curr.row, "col": curr.col, "status": "visiting"},
        )

        neighbours = grid.neighbours(curr)
        updated = 0
        for nbr in neighbours:
            if nbr.is_visited:
                continue
            new_dist = curr.distance + nbr.move_cost
            if new_dist < nbr.distance:
                nbr.distance = new_dist
                nbr.previous = grid.index_of(curr)
                heapq.heappush(pq, (new_dist, next(counter), nbr))
                updated += 1
        yield Step(line=11, variables={"neighbours_checked": len(neighbours), "updated": updated})

    yield Step(line=13, variables={"found": False})
