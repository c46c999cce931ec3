"""logic/player.py — Player movement, jump and gravity.

Velocity is set instantly each tick (no acceleration or friction) so
the same inputs and elapsed times always produce the same path.
"""

from __future__ import annotations
from typing import TYPE_CHECKING

from components import Player
from core.tuning import get as _tun

if TYPE_CHECKING:
    from components import Level
    from logic.input_state import InputState


def update_player(player: "Player", keys: "InputState", elapsed: float,
                  level: "Level") -> None:
    """Advance *player* by one tick of *elapsed* milliseconds."""
    # zero-length tick (first tick, resume): nothing moves
    if elapsed <= 0:
        return

    # ── Horizontal ───────────────────────────────────────────────────
    if keys.left:
        player.vx = -player.speed * elapsed
    elif keys.right:
        player.vx = player.speed * elapsed
    else:
        player.vx = 0.0

    # ── Jump ─────────────────────────────────────────────────────────
    if keys.jump and player.grounded:
        player.vy = player.jump_force
        player.grounded = False

    # ── Gravity + integration ────────────────────────────────────────
    player.vy += player.gravity * elapsed
    player.x += player.vx
    player.y += player.vy

    # ── Ground ───────────────────────────────────────────────────────
    ground = level.ground_y - player.height
    if player.y > ground:
        player.y = ground
        player.vy = 0.0
        player.grounded = True


def make_player(level: "Level") -> "Player":
    """Build the player from ``[player]`` tuning, standing on the ground."""
    height = float(_tun("player", "height", 32.0))
    return Player(
        x=float(_tun("player", "start_x", 100.0)),
        y=min(float(_tun("player", "start_y", 350.0)), level.ground_y - height),
        width=float(_tun("player", "width", 32.0)),
        height=height,
        speed=float(_tun("player", "speed", 0.2)),
        gravity=float(_tun("player", "gravity", 0.03)),
        jump_force=float(_tun("player", "jump_force", -10.0)),
        hp=float(_tun("player", "max_hp", 100.0)),
        max_hp=float(_tun("player", "max_hp", 100.0)),
    )
