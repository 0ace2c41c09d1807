"""
astar.py — A* Search (grid)
============================
Dijkstra ordered by f = g + h instead of g alone, with a pluggable
heuristic ("manhattan" or "euclidean", see common.HEURISTICS).

Open-set policy: an improved node is pushed again rather than
decreased in place, so the heap may hold several entries for it.
Entries are discarded at pop time when the node is already closed or
the entry's f no longer matches the node's total_cost.
"""

import heapq
import itertools
from typing import Generator, List, Optional, Tuple

from algorithms.step import Step
from algorithms.pathfinding.common import (
    DEFAULT_HEURISTIC, endpoints, reconstruct_path, resolve_heuristic, unsolvable,
)
from grid import Grid, GridNode, Position


# ---------------------------------------------------------------------------
# Pseudocode
# ---------------------------------------------------------------------------
PSEUDOCODE: List[str] = [
    "def a_star(grid, start, end, h):",                    # 0
    "    start.g ← 0; start.f ← h(start, end)",            # 1
    "    open_set ← [(start.f, start)]",                   # 2
    "    while open_set:",                                 # 3
    "        (f, curr) ← open_set.pop_min()",              # 4
    "        if curr.closed or f > curr.f: continue",      # 5
    "        if curr == end: return get_path(end)",        # 6
    "        curr.closed ← True",                          # 7
    "        for nbr in neighbours(curr):",                # 8
    "            g ← curr.g + cost(nbr)",                  # 9
    "            if g < nbr.g:",                           # 10
    "                nbr.previous, nbr.g ← curr, g",       # 11
    "                nbr.f ← g + h(nbr, end)",             # 12
    "                open_set.push((nbr.f, nbr))",         # 13
    "    return NOT FOUND",                                # 14
]


# ---------------------------------------------------------------------------
# Generator
# ---------------------------------------------------------------------------
def astar(
    grid: Grid,
    start: Position,
    end: Position,
    heuristic: Optional[str] = DEFAULT_HEURISTIC,
) -> Generator[Step, None, None]:
    h_fn = resolve_heuristic(heuristic)

    start_node, end_node, reason = endpoints(grid, start, end)
    if reason:
        yield unsolvable(14, reason)
        return

    counter = itertools.count()
    start_node.distance   = 0
    start_node.heuristic  = h_fn(start_node, end_node)
    start_node.total_cost = start_node.heuristic
    open_set: List[Tuple[float, int, GridNode]] = [
        (start_node.total_cost, next(counter), start_node)
    ]
    yield Step(line=1, variables={
        "row": start_node.row, "col": start_node.col,
        "h_score": start_node.heuristic, "heuristic": (heuristic or DEFAULT_HEURISTIC).lower(),
    })

    while open_set:
        f, _, curr = heapq.heappop(open_set)

        if curr.is_visited or f > curr.total_cost:
            continue

        yield Step(line=4, variables={
            "open_set_size": len(open_set) + 1,
            "row": curr.row, "col": curr.col, "f_score": curr.total_cost,
        })

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
            variables={"row": curr.row, "col": curr.col, "g_score": curr.distance, "h_score": curr.heuristic},
        )

        neighbours = grid.neighbours(curr)
        for nbr in neighbours:
            if nbr.is_visited:
                continue
            g = curr.distance + nbr.move_cost
            if g < nbr.distance:
                nbr.previous   = grid.index_of(curr)
                nbr.distance   = g
                nbr.heuristic  = h_fn(nbr, end_node)
                nbr.total_cost = nbr.distance + nbr.heuristic
                heapq.heappush(open_set, (nbr.total_cost, next(counter), nbr))
        yield Step(line=13, variables={
            "neighbours_checked": len(neighbours),
            "open_set_size": len(open_set),
        })

    yield Step(line=14, variables={"found": False})
