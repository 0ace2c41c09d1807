"""
controller.py — Playback Controller
====================================
The PlaybackController is the ONLY object a UI talks to during a run.
It owns the producer, the published visual state (array / grid /
comparing / active line / found), and a scrubbable history of every
state it has published.

State machine:
    IDLE     →  run(p)               →  RUNNING
    IDLE     →  start_step_by_step(p) → PAUSED
    RUNNING  ⇄  toggle_pause()       ⇄  PAUSED
    RUNNING / PAUSED  →  producer exhausted  →  IDLE  (history kept)
    any      →  stop()               →  IDLE  (history cleared)

Concurrency:
  Single-threaded and cooperative.  `run()` is a coroutine: between two
  pulls it suspends on `asyncio.sleep(speed)`, and while paused it polls
  every PAUSE_POLL_SECONDS.  Cancellation is a generation counter bumped
  by `stop()`; a loop checks it before every pull and right after every
  sleep, and quietly exits once it no longer owns the current
  generation.  Hosts without an event loop call `tick()` on a timer.

  Only the controller mutates published state, and only one step at a
  time.  Pacing changes timing, never the outcome.
"""

import asyncio
import logging
import time
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Dict, Iterator, List, Optional, Tuple

from algorithms.step import Step

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# States
# ---------------------------------------------------------------------------
class ControllerState(Enum):
    IDLE    = "idle"
    RUNNING = "running"
    PAUSED  = "paused"


# ---------------------------------------------------------------------------
# Pacing (milliseconds per step)
# ---------------------------------------------------------------------------
SPEED_PRESETS: Dict[str, int] = {
    "slow":   1000,   # teaching mode
    "medium": 400,
    "fast":   150,    # demo mode
    "turbo":  50,
}

DEFAULT_SPEED_MS   = SPEED_PRESETS["medium"]
PAUSE_POLL_SECONDS = 0.05


# ---------------------------------------------------------------------------
# VisualState — one history entry
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class VisualState:
    """Everything the renderer shows, captured right after a step was applied."""

    line:        int                        = 0
    array:       Optional[List[int]]        = None
    grid:        Optional[Any]              = None
    comparing:   List[int]                  = field(default_factory=list)
    found:       Optional[int]              = None
    range:       Optional[Tuple[int, int]]  = None
    pivot:       Optional[int]              = None
    active_node: Optional[Any]              = None
    variables:   Dict[str, Any]             = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "line":        self.line,
            "array":       list(self.array) if self.array is not None else None,
            "grid":        self.grid.to_dict() if self.grid is not None else None,
            "comparing":   list(self.comparing),
            "found":       self.found,
            "range":       list(self.range) if self.range is not None else None,
            "pivot":       self.pivot,
            "active_node": getattr(self.active_node, "value", None),
            "variables":   dict(self.variables),
        }


# ---------------------------------------------------------------------------
# PlaybackController
# ---------------------------------------------------------------------------
class PlaybackController:
    """
    Attributes:
        array         : Published working array (replaced by steps that carry one).
        grid          : Published pathfinding grid (same rule).
        comparing     : Indices highlighted by the latest step.
        active_line   : Pseudocode line of the latest step.
        found         : Search hit of the latest step, else None.
        variables     : Variables of the latest step.
        speed_ms      : Pause between two pulls of the continuous loop.
        is_paused     : Pause flag.  True whenever nothing is running.
        history       : Every VisualState published since the producer was attached.
        history_index : Cursor into `history`; -1 before the first step.
        on_step       : Optional callback(VisualState) fired on every publish.
    """

    def __init__(
        self,
        array: Optional[List[int]] = None,
        grid: Optional[Any] = None,
        speed_ms: int = DEFAULT_SPEED_MS,
        on_step: Optional[Callable[[VisualState], None]] = None,
    ):
        self.array:         List[int]                 = list(array) if array is not None else []
        self.grid:          Optional[Any]             = grid
        self.comparing:     List[int]                 = []
        self.active_line:   int                       = 0
        self.found:         Optional[int]             = None
        self.range:         Optional[Tuple[int, int]] = None
        self.pivot:         Optional[int]             = None
        self.active_node:   Optional[Any]             = None
        self.variables:     Dict[str, Any]            = {}
        self.speed_ms:      int                       = DEFAULT_SPEED_MS
        self.is_paused:     bool                      = True
        self.history:       List[VisualState]         = []
        self.history_index: int                       = -1
        self.on_step:       Optional[Callable[[VisualState], None]] = on_step

        self._producer:    Optional[Iterator[Step]] = None
        self._finished:    Optional[Iterator[Step]] = None   # last producer that ran dry
        self._generation:  int                      = 0
        self._loop_owner:  Optional[int]            = None   # generation of the live run() loop
        self._last_tick:   float                    = 0.0

        self.set_speed(speed_ms)

    # ------------------------------------------------------------------
    # Read-only accessors
    # ------------------------------------------------------------------
    @property
    def has_active_producer(self) -> bool:
        return self._producer is not None

    @property
    def state(self) -> ControllerState:
        if self._producer is None:
            return ControllerState.IDLE
        return ControllerState.PAUSED if self.is_paused else ControllerState.RUNNING

    @property
    def current(self) -> Optional[VisualState]:
        if 0 <= self.history_index < len(self.history):
            return self.history[self.history_index]
        return None

    @property
    def can_step_back(self) -> bool:
        return self.history_index > 0

    def snapshot(self) -> VisualState:
        """The published state as a VisualState (also valid before any step)."""
        return VisualState(
            line=self.active_line,
            array=list(self.array),
            grid=self.grid,
            comparing=list(self.comparing),
            found=self.found,
            range=self.range,
            pivot=self.pivot,
            active_node=self.active_node,
            variables=dict(self.variables),
        )

    # ------------------------------------------------------------------
    # Data owned by the host
    # ------------------------------------------------------------------
    def load_array(self, values: List[int]) -> None:
        """Stop whatever is running and publish a new working array."""
        self.stop()
        self.array = list(values)

    def load_grid(self, grid: Any) -> None:
        self.stop()
        self.grid = grid

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    async def run(self, producer: Iterator[Step]) -> bool:
        """
        Drive `producer` to completion, pacing every pull by `speed_ms`.

        Passing the producer that is already attached resumes it instead
        of restarting.  Passing the producer that just ran dry is a no-op,
        so its history stays scrubbable.  Any other producer replaces the
        current one.

        Returns True when the producer was exhausted by this loop, False
        when the loop was cancelled, another loop already owns the run or
        the producer was already exhausted.
        """
        if producer is self._finished:
            logger.debug("run() on an exhausted producer: keeping its history")
            return False
        if producer is self._producer:
            self.is_paused = False
            if self._loop_owner == self._generation:
                logger.debug("run() on the attached producer: resuming the live loop")
                return False
        else:
            if self._producer is not None:
                self.stop()
            self._attach(producer)
            self.is_paused = False

        return await self._run_loop()

    def start_step_by_step(self, producer: Iterator[Step]) -> None:
        """Attach `producer` paused; the caller drives it with step_forward()."""
        if producer is self._producer or producer is self._finished:
            return
        if self._producer is not None:
            self.stop()
        self._attach(producer)
        self.is_paused = True

    def toggle_pause(self) -> bool:
        """Running ⇄ paused.  Returns the new pause flag.  No-op when idle."""
        if self._producer is None:
            return self.is_paused
        self.is_paused = not self.is_paused
        if not self.is_paused:
            self._last_tick = time.monotonic()
        logger.debug("Playback %s", "paused" if self.is_paused else "resumed")
        return self.is_paused

    def stop(self) -> None:
        """Cancel any run, drop the producer and clear history.  Array / grid stay."""
        self._generation += 1
        self._loop_owner  = None
        self._finished    = None
        if self._producer is not None:
            close = getattr(self._producer, "close", None)
            if close is not None:
                close()
            logger.info("Run stopped after %d step(s)", len(self.history))
        self._producer     = None
        self.history       = []
        self.history_index = -1
        self.active_line   = 0
        self.comparing     = []
        self.found         = None
        self.range         = None
        self.pivot         = None
        self.active_node   = None
        self.variables     = {}
        self.is_paused     = True

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------
    def step_forward(self) -> bool:
        """
        Replay the next cached history entry if the cursor is behind the
        head, otherwise pull exactly one new step.  Returns False when
        there is nothing left to show.
        """
        if self.history_index < len(self.history) - 1:
            self.history_index += 1
            self._restore(self.history[self.history_index])
            return True

        if self._producer is None:
            return False

        try:
            step = next(self._producer)
        except StopIteration:
            self._finish()
            return False
        except Exception:
            logger.exception("Producer raised after %d step(s)", len(self.history))
            self._finish()
            raise

        self._apply(step)
        state = self.snapshot()
        self.history.append(state)
        self.history_index = len(self.history) - 1
        self._notify(state)
        return True

    def step_backward(self) -> bool:
        """Move the cursor back one entry.  Never touches the producer."""
        if self.history_index <= 0:
            return False
        self.history_index -= 1
        self._restore(self.history[self.history_index])
        return True

    def goto(self, index: int) -> bool:
        """Jump the cursor to any recorded history entry."""
        if not 0 <= index < len(self.history):
            return False
        self.history_index = index
        self._restore(self.history[index])
        return True

    # ------------------------------------------------------------------
    # Speed
    # ------------------------------------------------------------------
    def set_speed(self, ms: int) -> None:
        self.speed_ms = max(0, int(ms))

    def set_speed_preset(self, preset: str) -> None:
        if preset not in SPEED_PRESETS:
            raise ValueError(f"Unknown speed preset {preset!r}; expected one of {sorted(SPEED_PRESETS)}")
        self.speed_ms = SPEED_PRESETS[preset]

    # ------------------------------------------------------------------
    # Tick  (call this from a timer when there is no event loop)
    # ------------------------------------------------------------------
    def tick(self, now: Optional[float] = None) -> bool:
        """
        Advance one step if running and at least `speed_ms` has elapsed
        since the last advance.  Does nothing while a run() loop owns the
        playback.  Returns True if a step was taken.
        """
        if self.state is not ControllerState.RUNNING or self._loop_owner is not None:
            return False
        now = time.monotonic() if now is None else now
        if (now - self._last_tick) * 1000 < self.speed_ms:
            return False
        self._last_tick = now
        return self.step_forward()

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------
    async def _run_loop(self) -> bool:
        generation = self._generation
        self._loop_owner = generation
        try:
            while True:
                if generation != self._generation:
                    return False
                if self.is_paused:
                    await asyncio.sleep(PAUSE_POLL_SECONDS)
                    continue
                if not self.step_forward():
                    return generation == self._generation
                await asyncio.sleep(self.speed_ms / 1000)
                if generation != self._generation:
                    return False
        finally:
            if self._loop_owner == generation:
                self._loop_owner = None

    def _attach(self, producer: Iterator[Step]) -> None:
        self._producer     = producer
        self._finished     = None
        self.history       = []
        self.history_index = -1
        self.active_line   = 0
        self.comparing     = []
        self.found         = None
        self.variables     = {}
        self._last_tick    = time.monotonic()
        logger.info("Producer attached")

    def _finish(self) -> None:
        """Producer exhausted: reset highlights, pause, keep history for scrubbing."""
        logger.info("Run finished after %d step(s)", len(self.history))
        self._finished   = self._producer
        self._producer   = None
        self.active_line = 0
        self.comparing   = []
        self.is_paused   = True

    def _apply(self, step: Step) -> None:
        if step.array is not None:
            self.array = step.array
        if step.grid is not None:
            self.grid = step.grid
        self.comparing   = list(step.comparing or [])
        self.active_line = step.line
        self.found       = step.found
        self.range       = step.range
        self.pivot       = step.pivot
        self.active_node = step.active_node
        self.variables   = dict(step.variables)

    def _restore(self, state: VisualState) -> None:
        if state.array is not None:
            self.array = list(state.array)
        self.grid        = state.grid
        self.comparing   = list(state.comparing)
        self.active_line = state.line
        self.found       = state.found
        self.range       = state.range
        self.pivot       = state.pivot
        self.active_node = state.active_node
        self.variables   = dict(state.variables)
        self._notify(state)

    def _notify(self, state: VisualState) -> None:
        if self.on_step is not None:
            self.on_step(state)
