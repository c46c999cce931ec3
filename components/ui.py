"""components.ui — Short-lived HUD overlays (damage numbers, victory banner).

Each overlay lives in a ``UiSlot``: either empty or holding exactly one
live instance.  Putting a new instance in a slot replaces the old one;
``expire()`` is the only way a slot becomes empty on its own.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Generic, TypeVar


@dataclass
class DamageText:
    value: str = ""
    timer: float = 800.0       # ms remaining
    max_timer: float = 800.0
    x: float = 0.0
    y: float = 0.0
    rise_px: float = 30.0      # total upward drift over the lifetime

    @property
    def rise(self) -> float:
        """Pixels drifted upward so far."""
        if self.max_timer <= 0:
            return 0.0
        frac = 1.0 - max(0.0, self.timer) / self.max_timer
        return frac * self.rise_px


@dataclass
class VictoryMessage:
    text: str = "Victory!"
    timer: float = 2500.0      # ms remaining
    max_timer: float = 2500.0

    @property
    def alpha(self) -> float:
        """Fade factor 0..1 for the banner."""
        if self.max_timer <= 0:
            return 0.0
        return max(0.0, min(1.0, self.timer / self.max_timer))


T = TypeVar("T", DamageText, VictoryMessage)


class UiSlot(Generic[T]):
    """Optional holder for a single timed overlay."""

    def __init__(self):
        self._item: T | None = None

    @property
    def present(self) -> bool:
        return self._item is not None

    @property
    def item(self) -> T | None:
        return self._item

    def show(self, item: T) -> None:
        self._item = item

    def clear(self) -> None:
        self._item = None

    def decay(self, elapsed: float) -> bool:
        """Count the timer down.  Returns True if the slot just expired."""
        if self._item is None:
            return False
        self._item.timer -= elapsed
        if self._item.timer <= 0:
            self.expire()
            return True
        return False

    def expire(self) -> None:
        self._item = None

    def __repr__(self) -> str:
        return f"UiSlot({self._item!r})"
