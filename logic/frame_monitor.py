"""logic/frame_monitor.py — Frame-budget and throughput telemetry.

Pure observation: nothing here changes game state or throttles the
loop.  Each running tick reports its elapsed time; the monitor

  - flags ticks slower than the target frame time, and
  - once a second's worth of ticks has accumulated, reports the
    measured ticks-per-second and starts counting again.

Both go to the session ``DevLog`` (categories ``frame`` and ``fps``)
and to stdout.
"""

from __future__ import annotations
from typing import TYPE_CHECKING

from core.tuning import get as _tun

if TYPE_CHECKING:
    from components import DevLog


class FrameMonitor:

    def __init__(self, log: "DevLog | None" = None,
                 target_fps: float | None = None,
                 report_ms: float = 1000.0,
                 print_overruns: bool | None = None):
        if target_fps is None:
            target_fps = float(_tun("frame", "target_fps", 60.0))
        if print_overruns is None:
            print_overruns = bool(_tun("frame", "print_overruns", False))
        self.log = log
        self.target_fps = target_fps
        self.target_ms = 1000.0 / max(1.0, target_fps)
        self.report_ms = report_ms
        self.print_overruns = print_overruns
        self.accum_ms = 0.0
        self.frames = 0
        self.overruns = 0
        self.last_fps: float | None = None

    def observe(self, elapsed: float, *, t: float = 0.0) -> float | None:
        """Record one tick.  Returns the fps figure when one is reported."""
        if elapsed > self.target_ms:
            self.overruns += 1
            msg = (f"over budget: {elapsed:.2f}ms "
                   f"(target {self.target_ms:.2f}ms)")
            if self.log is not None:
                self.log.record("frame", msg, t=t,
                                details={"elapsed": elapsed})
            if self.print_overruns:
                print(f"[FRAME] {msg}")

        self.accum_ms += elapsed
        self.frames += 1
        if self.accum_ms < self.report_ms:
            return None

        fps = self.frames / self.accum_ms * 1000.0
        self.last_fps = fps
        msg = f"{fps:.1f} @ {self.target_ms:.2f}ms target"
        if self.log is not None:
            self.log.record("fps", msg, t=t,
                            details={"fps": fps, "frames": self.frames})
        print(f"[FPS] {msg}")
        self.accum_ms = 0.0
        self.frames = 0
        return fps
