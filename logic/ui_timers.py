"""logic/ui_timers.py — Per-tick decay of the HUD overlays."""

from __future__ import annotations
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from components import UiSlot


def decay_ui_timers(elapsed: float, *slots: "UiSlot") -> int:
    """Count every present overlay down by *elapsed* ms.

    Overlays whose timer reaches zero are cleared.  Returns how many
    expired this tick.
    """
    expired = 0
    for slot in slots:
        if slot.decay(elapsed):
            expired += 1
    return expired
