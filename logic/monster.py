"""logic/monster.py — Monster timer decay and the canonical damage path.

Every code-path that hurts the monster (typed letters, the test-hit
key) should funnel through ``damage_monster()`` so that clamping,
hit-flash, shake and the alive flag stay consistent.
"""

from __future__ import annotations
from typing import TYPE_CHECKING

from components import Monster
from core.tuning import get as _tun

if TYPE_CHECKING:
    from components import Level


def update_monster(monster: "Monster", elapsed: float) -> None:
    """Decay the hit-flash and shake timers toward zero."""
    if monster.hit_flash > 0:
        monster.hit_flash = max(monster.hit_flash - elapsed, 0.0)
    if monster.shake_timer > 0:
        monster.shake_timer = max(monster.shake_timer - elapsed, 0.0)


def damage_monster(monster: "Monster", amount: float) -> int:
    """Deal *amount* damage.  Returns the hp actually removed.

    Dead monsters take no damage.  The amount is clamped so hp never
    drops below zero and negative amounts never heal.
    """
    if not monster.alive:
        return 0
    dealt = max(0, min(int(amount), monster.hp))
    if dealt == 0:
        return 0
    monster.hp -= dealt
    monster.hit_flash = monster.hit_flash_duration
    monster.shake_timer = monster.shake_duration

    if monster.hp <= 0:
        monster.hp = 0
        monster.alive = False
    return dealt


def reset_monster(monster: "Monster") -> None:
    """Back to full health, ready for another fight."""
    monster.hp = monster.max_hp
    monster.alive = True
    monster.victory_announced = False
    monster.hit_flash = 0.0
    monster.shake_timer = 0.0


def make_monster(level: "Level") -> "Monster":
    """Build the level's monster from ``[monster]`` tuning.

    Max hp follows the level's linear scaling rule.
    """
    max_hp = level.monster_max_hp(int(_tun("monster", "base_hp", 250)),
                                  int(_tun("monster", "hp_per_level", 50)))
    return Monster(
        x=float(_tun("monster", "x", 520.0)),
        y=float(_tun("monster", "y", 260.0)),
        width=float(_tun("monster", "width", 120.0)),
        height=float(_tun("monster", "height", 120.0)),
        name=str(_tun("monster", "name", "Training Dummy")),
        max_hp=max_hp,
        hp=max_hp,
        hit_flash_duration=float(_tun("monster", "hit_flash_ms", 120.0)),
        shake_duration=float(_tun("monster", "shake_ms", 140.0)),
        shake_magnitude=float(_tun("monster", "shake_magnitude", 5.0)),
    )
