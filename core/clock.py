"""core/clock.py — Frame scheduler.

Turns a monotonic millisecond clock into per-tick elapsed time.  The
app shell calls ``tick()`` once per display refresh, paused or not,
and hands the result to the active scene.

    sched = FrameScheduler()
    elapsed_ms = sched.tick()      # 0.0 on the very first call

After a long stall (window dragged, scene switched) call ``resync()``
so the next tick reports 0 instead of a stale delta.
"""

from __future__ import annotations
from typing import Callable
import pygame


class FrameScheduler:
    """Supplies elapsed wall time in ms between consecutive ticks."""

    def __init__(self, now: Callable[[], float] | None = None):
        # pygame.time.get_ticks(): ms since pygame.init()
        self._now = now or pygame.time.get_ticks
        self._last: float | None = None
        self.ticks = 0

    def resync(self) -> None:
        """Forget the baseline; the next ``tick()`` reports 0."""
        self._last = None

    def tick(self) -> float:
        now = float(self._now())
        if self._last is None:
            elapsed = 0.0
        else:
            # clock went backwards → treat as no time passed
            elapsed = max(0.0, now - self._last)
        self._last = now
        self.ticks += 1
        return elapsed
