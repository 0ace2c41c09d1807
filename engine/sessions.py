"""
sessions.py — Per-Session Controller Table
===========================================
Maps an opaque session id to its PlaybackController for hosts that
serve several clients from one process (the Flask adapter).

    table = ControllerTable(max_sessions=256, idle_seconds=1800)
    with table.checkout(sid) as controller:
        controller.step_forward()

Design decisions:
  - One lock per controller.  `checkout()` holds it for the whole block,
    so two request threads never pull from the same generator at once.
  - The table is bounded two ways: least-recently-used sessions beyond
    `max_sessions` are dropped, and so is any session idle for longer
    than `idle_seconds`.  A dropped controller is stopped first, which
    closes its producer and releases its history.
  - The table lock is only held for bookkeeping, never while a
    controller steps.  Eviction waits on the victim's own lock.
"""

import logging
import threading
import time
from collections import OrderedDict
from contextlib import contextmanager
from typing import Iterator, List, Optional, Tuple

from engine.controller import PlaybackController

logger = logging.getLogger(__name__)


class _Slot:
    __slots__ = ("controller", "lock", "last_seen")

    def __init__(self, now: float):
        self.controller: PlaybackController = PlaybackController()
        self.lock:       threading.Lock     = threading.Lock()
        self.last_seen:  float              = now


class ControllerTable:
    """
    Attributes:
        max_sessions : Upper bound on live controllers.
        idle_seconds : Sessions untouched for longer than this are evicted.
    """

    def __init__(self, max_sessions: int = 256, idle_seconds: float = 1800.0):
        if max_sessions < 1:
            raise ValueError("max_sessions must be at least 1")
        self.max_sessions: int   = max_sessions
        self.idle_seconds: float = idle_seconds
        self._slots: "OrderedDict[str, _Slot]" = OrderedDict()
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._slots)

    def __contains__(self, sid: object) -> bool:
        return sid in self._slots

    @contextmanager
    def checkout(self, sid: str, now: Optional[float] = None) -> Iterator[PlaybackController]:
        """Yield the controller for `sid` (created on first use) under its lock."""
        slot = self._touch(sid, time.monotonic() if now is None else now)
        with slot.lock:
            yield slot.controller

    def clear(self) -> None:
        with self._lock:
            victims = list(self._slots.items())
            self._slots.clear()
        for sid, slot in victims:
            self._drop(sid, slot)

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------
    def _touch(self, sid: str, now: float) -> _Slot:
        with self._lock:
            slot = self._slots.get(sid)
            if slot is None:
                slot = _Slot(now)
                self._slots[sid] = slot
                logger.info("New playback session %s", sid[:8])
            else:
                self._slots.move_to_end(sid)
                slot.last_seen = now
            victims = self._collect_victims(now)
        for victim_sid, victim in victims:
            self._drop(victim_sid, victim)
        return slot

    def _collect_victims(self, now: float) -> List[Tuple[str, _Slot]]:
        victims: List[Tuple[str, _Slot]] = []
        while len(self._slots) > self.max_sessions:
            victims.append(self._slots.popitem(last=False))
        for sid in [s for s, slot in self._slots.items() if now - slot.last_seen > self.idle_seconds]:
            victims.append((sid, self._slots.pop(sid)))
        return victims

    def _drop(self, sid: str, slot: _Slot) -> None:
        with slot.lock:
            slot.controller.stop()
        logger.info("Evicted playback session %s", sid[:8])
