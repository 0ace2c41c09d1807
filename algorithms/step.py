"""
step.py — Algorithm Step Snapshot
==================================
Every algorithm is a generator that yields Step objects.
A Step is a frozen-in-time picture of everything the visualizer
needs to render one frame:

    • Which pseudocode line is executing right now
    • The working array (sorting / searching) after a mutation
    • Which indices are being compared or touched
    • Where a search landed, and which [low, high] range is still live
    • The whole pathfinding grid (visited cells, path cells, distances)
    • Named loop counters / gap sizes for the variables panel

Design decisions:
  - Step is a plain frozen dataclass.  It is a SNAPSHOT — the algorithm
    generator is the only writer; the controller and renderer only read.
  - Every field is optional.  Many steps are "trace only" (just a line
    and some variables); consumers infer the kind of step from which
    fields are present.
  - "Not found" is expressed by `found is None`.  A literal -1 never
    appears in a Step; it only lives in the human-readable pseudocode.
  - Arrays are copied with `snapshot()` and grids with `Grid.clone()`
    before they go into a Step, so later mutation can't leak backwards.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence, Tuple


@dataclass(frozen=True)
class Step:
    """
    Attributes:
        line        : 0-based index into the algorithm's PSEUDOCODE list.
        array       : Full copy of the working sequence (only after a mutation,
                      or when a producer wants to show the current state).
        comparing   : Indices currently being compared / touched.
        found       : Index where a search succeeded.  None = not (yet) found.
        range       : Inclusive (low, high) bounds under consideration.
        pivot       : Structurally significant index — quicksort pivot,
                      selection/insertion anchor, shell/comb gap.
        grid        : Cloned pathfinding Grid.
        active_node : Tree node being visited (traversals only).
        variables   : Named scalars for the variables panel / tests.
    """

    line:        int                        = 0
    array:       Optional[List[int]]        = None
    comparing:   Optional[List[int]]        = None
    found:       Optional[int]              = None
    range:       Optional[Tuple[int, int]]  = None
    pivot:       Optional[int]              = None
    grid:        Optional[Any]              = None
    active_node: Optional[Any]              = None
    variables:   Dict[str, Any]             = field(default_factory=dict)

    @property
    def is_trace_only(self) -> bool:
        """True when the step carries no spatial delta (no array, no grid)."""
        return self.array is None and self.grid is None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "line":        self.line,
            "array":       list(self.array) if self.array is not None else None,
            "comparing":   list(self.comparing) if self.comparing is not None else None,
            "found":       self.found,
            "range":       list(self.range) if self.range is not None else None,
            "pivot":       self.pivot,
            "grid":        self.grid.to_dict() if self.grid is not None else None,
            "active_node": getattr(self.active_node, "value", None),
            "variables":   dict(self.variables),
        }


# ---------------------------------------------------------------------------
# Complexity — display-only asymptotic descriptor attached to each algorithm
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class Complexity:
    best:    str
    average: str
    worst:   str
    space:   str

    def to_dict(self) -> Dict[str, str]:
        return {
            "best":    self.best,
            "average": self.average,
            "worst":   self.worst,
            "space":   self.space,
        }


# ---------------------------------------------------------------------------
# Helpers shared by the producers
# ---------------------------------------------------------------------------
def snapshot(array: Sequence[int]) -> List[int]:
    """Copy of the working array, safe to hand to a Step."""
    return list(array)


def swap(array: List[int], i: int, j: int) -> None:
    array[i], array[j] = array[j], array[i]


def last_array(steps: Sequence[Step]) -> Optional[List[int]]:
    """The final `array` snapshot in a step sequence, or None if none was yielded."""
    for step in reversed(steps):
        if step.array is not None:
            return step.array
    return None


def found_index(steps: Sequence[Step]) -> Optional[int]:
    """The `found` index reported by a search run, or None."""
    for step in steps:
        if step.found is not None:
            return step.found
    return None
