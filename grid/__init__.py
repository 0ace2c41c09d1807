"""
grid/
-----
Pathfinding data layer.  Public API:

    from grid import Grid, GridNode
    from grid import MUD_COST, NORMAL_COST
"""

from grid.node import GridNode, MUD_COST, NORMAL_COST, INF
from grid.grid import Grid, Position

__all__ = [
    "Grid",     "GridNode",  "Position",
    "MUD_COST", "NORMAL_COST", "INF",
]
