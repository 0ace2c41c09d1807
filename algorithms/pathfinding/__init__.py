"""
algorithms/pathfinding/
-----------------------
Grid producers, all sharing one signature:

    producer(grid, start, end, heuristic=...) -> Generator[Step, None, None]

`start` / `end` are (row, col).  The grid is mutated in place, so hand
each run its own `grid.prepared()` copy.  Reaching the goal switches
into path reconstruction: one grid snapshot per path cell, then stop.
"""

from algorithms.pathfinding.common     import HEURISTICS, euclidean, manhattan, resolve_heuristic
from algorithms.pathfinding.dijkstra   import dijkstra
from algorithms.pathfinding.astar      import astar
from algorithms.pathfinding.greedy_bfs import greedy_bfs
from algorithms.pathfinding.bfs        import bfs
from algorithms.pathfinding.dfs        import dfs

__all__ = [
    "dijkstra", "astar", "greedy_bfs", "bfs", "dfs",
    "HEURISTICS", "manhattan", "euclidean", "resolve_heuristic",
]
