"""
common.py — Shared pathfinding pieces
======================================
Heuristics, endpoint validation and the path-reconstruction phase used
by every grid producer.

Heuristics take two GridNode objects and return a float:
  • manhattan  – |Δrow| + |Δcol|          (admissible on 4-connected grids)
  • euclidean  – √(Δrow² + Δcol²)         (admissible everywhere)
"""

import logging
import math
from typing import Callable, Dict, Generator, Optional, Tuple

from algorithms.step import Step
from grid import Grid, GridNode, Position

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Heuristics
# ---------------------------------------------------------------------------
def manhattan(a: GridNode, b: GridNode) -> float:
    return abs(a.row - b.row) + abs(a.col - b.col)

def euclidean(a: GridNode, b: GridNode) -> float:
    return math.sqrt((a.row - b.row) ** 2 + (a.col - b.col) ** 2)

HEURISTICS: Dict[str, Callable[[GridNode, GridNode], float]] = {
    "manhattan": manhattan,
    "euclidean": euclidean,
}

DEFAULT_HEURISTIC = "manhattan"


def resolve_heuristic(name: Optional[str]) -> Callable[[GridNode, GridNode], float]:
    """Look a heuristic up by name (case-insensitive).  None means the default."""
    key = (name or DEFAULT_HEURISTIC).lower()
    if key not in HEURISTICS:
        raise ValueError(
            f"Unknown heuristic {name!r}; expected one of {sorted(HEURISTICS)}"
        )
    return HEURISTICS[key]


# ---------------------------------------------------------------------------
# Endpoint validation
# ---------------------------------------------------------------------------
def endpoints(
    grid: Grid,
    start: Position,
    end: Position,
) -> Tuple[Optional[GridNode], Optional[GridNode], Optional[str]]:
    """
    Resolve (start, end) to nodes.  Returns (start_node, end_node, None) on
    success, or (None, None, reason) when the solve can't even begin.
    """
    if grid.is_empty:
        return None, None, "empty grid"
    if not grid.contains(*start):
        return None, None, f"start {tuple(start)} is outside the grid"
    if not grid.contains(*end):
        return None, None, f"end {tuple(end)} is outside the grid"
    start_node = grid.node(*start)
    if start_node.is_wall:
        return None, None, "start is a wall"
    return start_node, grid.node(*end), None


def unsolvable(line: int, reason: str) -> Step:
    logger.debug("Pathfinding aborted before the first expansion: %s", reason)
    return Step(line=line, variables={"found": False, "reason": reason})


# ---------------------------------------------------------------------------
# Path reconstruction phase
# ---------------------------------------------------------------------------
def reconstruct_path(
    grid: Grid,
    end_node: GridNode,
    line: int,
    final_vars: Dict,
) -> Generator[Step, None, None]:
    """
    Walk `previous` links from the goal back to the start, marking each
    node `is_path`, and yield one grid snapshot per node walked.
    """
    current: Optional[GridNode] = end_node
    path_length = 0
    while current is not None:
        current.is_path = True
        path_length += 1
        current = grid.previous_of(current)
        yield Step(
            line=line,
            grid=grid.clone(),
            variables={**final_vars, "found": True, "path_length": path_length},
        )
