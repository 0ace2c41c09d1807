"""
recorder.py — Run Recorder & Benchmarks
========================================
Exhausts a producer WITHOUT pacing, keeps every Step, and computes the
numbers the benchmark panel shows: step count, comparisons, writes,
search hit, nodes visited, path length / cost, wall time.

Usage:
    rec = Recorder()
    metrics = rec.record(get_algorithm("quick"), quick_sort(values))
    rec.export()                     # serialisable snapshot

Benchmarks:
    benchmark_sorting(values)            every sorting algorithm on a copy
    benchmark_searching(values, target)  every search on the sorted values
    benchmark_pathfinding(grid, s, e)    every pathfinder on a prepared copy,
                                         A* / Greedy once per heuristic

Comparison Mode:
    compare(left_metrics, right_metrics) → ComparisonResult
"""

import logging
import time
from dataclasses import asdict, dataclass, field
from typing import Any, Dict, Iterable, Iterator, List, Optional, Sequence

from algorithms import AlgoInfo, list_algorithms
from algorithms.pathfinding.common import HEURISTICS
from algorithms.step import Step, found_index
from grid import Grid, Position

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Metrics dataclass — what the benchmark panel renders
# ---------------------------------------------------------------------------
@dataclass
class RunMetrics:
    algo:          str            = ""
    label:         str            = ""
    total_steps:   int            = 0          # number of Steps yielded
    comparisons:   int            = 0          # steps highlighting indices
    writes:        int            = 0          # steps carrying an array or grid snapshot
    found:         Optional[int]  = None       # search hit
    nodes_visited: int            = 0
    path_length:   int            = 0          # cells on the reconstructed path
    path_cost:     int            = 0          # entry cost of that path, start excluded
    path_found:    bool           = False
    wall_time_ms:  float          = 0.0
    complexity:    Dict[str, str] = field(default_factory=dict)
    heuristic:     str            = ""         # for A* / Greedy

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


# ---------------------------------------------------------------------------
# ComparisonResult — side-by-side analytics
# ---------------------------------------------------------------------------
@dataclass
class ComparisonResult:
    left:  RunMetrics = field(default_factory=RunMetrics)
    right: RunMetrics = field(default_factory=RunMetrics)
    # derived
    winner_steps:       str = ""   # which run needed fewer steps
    winner_comparisons: str = ""
    winner_nodes:       str = ""   # which run visited fewer cells
    winner_path:        str = ""   # which run found the cheaper path


# ---------------------------------------------------------------------------
# Recorder
# ---------------------------------------------------------------------------
class Recorder:
    """
    Attributes:
        steps   : Full list of Steps from the last run.
        metrics : RunMetrics of the last run (None before the first).
    """

    def __init__(self):
        self.steps:   List[Step]           = []
        self.metrics: Optional[RunMetrics] = None
        self._info:   Optional[AlgoInfo]   = None

    def record(self, info: AlgoInfo, producer: Iterator[Step], heuristic: str = "") -> RunMetrics:
        """Exhaust `producer`, keep every step, compute metrics."""
        self._info = info
        start = time.perf_counter()
        self.steps = list(producer)
        wall_ms = (time.perf_counter() - start) * 1000

        self.metrics = self._compute_metrics(info, wall_ms, heuristic)
        logger.debug(
            "Recorded %s%s: %d steps in %.2f ms",
            info.label, f" ({heuristic})" if heuristic else "", len(self.steps), wall_ms,
        )
        return self.metrics

    # ------------------------------------------------------------------
    # Export (serialisable snapshot)
    # ------------------------------------------------------------------
    def export(self) -> Dict[str, Any]:
        if self.metrics is None or self._info is None:
            raise RuntimeError("Call record() first.")
        return {
            "algo":    self._info.key,
            "metrics": self.metrics.to_dict(),
            "steps":   [s.to_dict() for s in self.steps],
        }

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------
    def _compute_metrics(self, info: AlgoInfo, wall_ms: float, heuristic: str) -> RunMetrics:
        last_grid: Optional[Grid] = None
        for s in reversed(self.steps):
            if s.grid is not None:
                last_grid = s.grid
                break

        path_found = any(s.variables.get("found") is True for s in self.steps)
        path_length = len(last_grid.path_nodes()) if last_grid is not None else 0

        return RunMetrics(
            algo=info.key,
            label=info.label,
            total_steps=len(self.steps),
            comparisons=sum(1 for s in self.steps if s.comparing),
            writes=sum(1 for s in self.steps if not s.is_trace_only),
            found=found_index(self.steps),
            nodes_visited=last_grid.visited_count() if last_grid is not None else 0,
            path_length=path_length,
            path_cost=last_grid.path_cost() if last_grid is not None else 0,
            path_found=path_found and path_length > 0,
            wall_time_ms=round(wall_ms, 3),
            complexity=info.complexity.to_dict(),
            heuristic=heuristic,
        )


# ---------------------------------------------------------------------------
# Benchmarks
# ---------------------------------------------------------------------------
def benchmark_sorting(values: Sequence[int]) -> List[RunMetrics]:
    return [
        Recorder().record(info, info.fn(list(values)))
        for info in list_algorithms("sorting")
    ]


def benchmark_searching(values: Sequence[int], target: int) -> List[RunMetrics]:
    """Every search runs on the same ascending copy so the counts are comparable."""
    ordered = sorted(values)
    return [
        Recorder().record(info, info.fn(list(ordered), target))
        for info in list_algorithms("searching")
    ]


def benchmark_pathfinding(
    grid: Grid,
    start: Position,
    end: Position,
    heuristics: Iterable[str] = tuple(HEURISTICS),
) -> List[RunMetrics]:
    heuristics = list(heuristics)
    results: List[RunMetrics] = []
    for info in list_algorithms("pathfinding"):
        if info.has_heuristic:
            for h in heuristics:
                results.append(Recorder().record(info, info.fn(grid.prepared(), start, end, heuristic=h), heuristic=h))
        else:
            results.append(Recorder().record(info, info.fn(grid.prepared(), start, end)))
    return results


# ---------------------------------------------------------------------------
# Comparison helper
# ---------------------------------------------------------------------------
def _name(m: RunMetrics) -> str:
    return f"{m.label} ({m.heuristic})" if m.heuristic else m.label


def compare(left: RunMetrics, right: RunMetrics) -> ComparisonResult:
    """Given two RunMetrics, pick a winner per metric (lower is better)."""
    l_key, r_key = _name(left), _name(right)

    def winner(l_val, r_val):
        if l_val == r_val:
            return "tie"
        return l_key if l_val < r_val else r_key

    if left.path_found and right.path_found:
        winner_path = winner(left.path_cost, right.path_cost)
    elif left.path_found or right.path_found:
        winner_path = l_key if left.path_found else r_key
    else:
        winner_path = "tie"

    return ComparisonResult(
        left=left,
        right=right,
        winner_steps=winner(left.total_steps, right.total_steps),
        winner_comparisons=winner(left.comparisons, right.comparisons),
        winner_nodes=winner(left.nodes_visited, right.nodes_visited),
        winner_path=winner_path,
    )
