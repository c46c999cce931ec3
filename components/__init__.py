"""components — Plain dataclasses holding session state, organised by domain.

Submodules
----------
entities   Player, Monster
level      Level
progress   Mark, TypingProgress
ui         DamageText, VictoryMessage, UiSlot
dev_log    DevLog

All public names are re-exported here so code can simply do
``from components import Monster``.
"""

# ── Entities ─────────────────────────────────────────────────────────
from components.entities import Player, Monster

# ── Level ────────────────────────────────────────────────────────────
from components.level import Level

# ── Typing ───────────────────────────────────────────────────────────
from components.progress import Mark, TypingProgress

# ── HUD overlays ─────────────────────────────────────────────────────
from components.ui import DamageText, VictoryMessage, UiSlot

# ── Telemetry ────────────────────────────────────────────────────────
from components.dev_log import DevLog

__all__ = [
    "Player", "Monster",
    "Level",
    "Mark", "TypingProgress",
    "DamageText", "VictoryMessage", "UiSlot",
    "DevLog",
]
