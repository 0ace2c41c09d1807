"""
greedy_bfs.py — Greedy Best-First Search (grid)
================================================
Always expands the open node that *looks* closest to the goal, judged
by the heuristic alone.  Accumulated cost is never consulted, so the
path found may be longer (or muddier) than the optimum.  That is the
point of showing it next to A*.

A node enters the open set once; while it is still unexpanded its
back-link is moved to whichever node expanded next to it most recently.
"""

import heapq
import itertools
from typing import Generator, List, Optional, Set, Tuple

from algorithms.step import Step
from algorithms.pathfinding.common import (
    DEFAULT_HEURISTIC, endpoints, reconstruct_path, resolve_heuristic, unsolvable,
)
from grid import Grid, GridNode, Position


PSEUDOCODE: List[str] = [
    "def greedy_best_first(grid, start, end, h):",         # 0
    "    start.h ← h(start, end)",                         # 1
    "    open_set ← [start]",                              # 2
    "    while open_set:",                                 # 3
    "        curr ← open_set.pop_lowest_h()",              # 4
    "        if curr == end: return get_path(end)",        # 5
    "        curr.visited ← True",                         # 6
    "        for nbr in neighbours(curr):",                # 7
    "            if not nbr.visited:",                     # 8
    "                nbr.previous ← curr",                 # 9
    "                nbr.h ← h(nbr, end)",                 # 10
    "                if nbr not in open_set: open_set.push(nbr)",  # 11
    "    return NOT FOUND",                                # 12
]


def greedy_bfs(
    grid: Grid,
    start: Position,
    end: Position,
    heuristic: Optional[str] = DEFAULT_HEURISTIC,
) -> Generator[Step, None, None]:
    h_fn = resolve_heuristic(heuristic)

    start_node, end_node, reason = endpoints(grid, start, end)
    if reason:
        yield unsolvable(12, reason)
        return

    counter = itertools.count()
    start_node.distance  = 0
    start_node.heuristic = h_fn(start_node, end_node)
    open_set: List[Tuple[float, int, GridNode]] = [(start_node.heuristic, next(counter), start_node)]
    in_open: Set[int] = {grid.index_of(start_node)}
    yield Step(line=1, variables={"row": start_node.row, "col": start_node.col, "h_score": start_node.heuristic})

    while open_set:
        _, _, curr = heapq.heappop(open_set)
        in_open.discard(grid.index_of(curr))
        if curr.is_visited:
            continue

        yield Step(line=4, variables={
            "open_set_size": len(open_set) + 1,
            "h_score": curr.heuristic,
            "row": curr.row, "col": curr.col,
        })

        if curr is end_node:
            yield from reconstruct_path(grid, curr, 5, {
                "row": curr.row,
                "col": curr.col,
                "total_distance": curr.distance,
            })
            return

        curr.is_visited = True
        yield Step(line=6, grid=grid.clone(), variables={"row": curr.row, "col": curr.col, "status": "visiting"})

        neighbours = grid.neighbours(curr)
        for nbr in neighbours:
            if nbr.is_visited:
                continue
            nbr.previous  = grid.index_of(curr)
            nbr.distance  = curr.distance + nbr.move_cost
            nbr.heuristic = h_fn(nbr, end_node)
            idx = grid.index_of(nbr)
            if idx not in in_open:
                in_open.add(idx)
                heapq.heappush(open_set, (nbr.heuristic, next(counter), nbr))
        yield Step(line=11, variables={
            "neighbours_checked": len(neighbours),
            "open_set_size": len(open_set),
        })

    yield Step(line=12, variables={"found": False})
