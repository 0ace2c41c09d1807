"""
engine/
-------
Playback & recording layer.

    from engine import PlaybackController, Recorder, compare
    from engine import ControllerTable          # one controller per client
"""

from engine.controller import (
    PlaybackController, ControllerState, VisualState,
    SPEED_PRESETS, DEFAULT_SPEED_MS, PAUSE_POLL_SECONDS,
)
from engine.recorder import (
    Recorder, RunMetrics, ComparisonResult, compare,
    benchmark_sorting, benchmark_searching, benchmark_pathfinding,
)
from engine.sessions import ControllerTable

__all__ = [
    "PlaybackController",
    "ControllerState",
    "VisualState",
    "SPEED_PRESETS",
    "DEFAULT_SPEED_MS",
    "PAUSE_POLL_SECONDS",
    "Recorder",
    "RunMetrics",
    "ComparisonResult",
    "compare",
    "benchmark_sorting",
    "benchmark_searching",
    "benchmark_pathfinding",
    "ControllerTable",
]
