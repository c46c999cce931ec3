"""components.entities — The player character and the monster."""

from __future__ import annotations
import random
from dataclasses import dataclass


@dataclass
class Player:
    """Side-scrolling player body plus its combat stats.

    Velocities are *per tick* displacements: ``vx`` is recomputed from
    ``speed * elapsed`` every tick, ``vy`` gains ``gravity * elapsed``.
    """
    x: float = 100.0
    y: float = 350.0
    vx: float = 0.0
    vy: float = 0.0
    width: float = 32.0
    height: float = 32.0
    speed: float = 0.2         # px per ms
    gravity: float = 0.03      # vy gain per ms
    jump_force: float = -10.0  # px per tick, negative is up
    grounded: bool = False
    score: float = 0.0
    hp: float = 100.0          # clamped [0, max_hp]
    max_hp: float = 100.0
    accuracy: float = 1.0      # correct / total typed, 1.0 before any typing
    damage_dealt: float = 0.0


@dataclass
class Monster:
    """The typing target.  Only transient timers tick on their own."""
    x: float = 520.0
    y: float = 260.0
    width: float = 120.0
    height: float = 120.0
    name: str = "Training Dummy"
    max_hp: int = 250
    hp: int = 250
    alive: bool = True
    current_word: str = ""
    victory_announced: bool = False
    hit_flash: float = 0.0             # ms remaining
    hit_flash_duration: float = 120.0
    shake_timer: float = 0.0           # ms remaining
    shake_duration: float = 140.0
    shake_magnitude: float = 5.0       # px at full shake

    def __post_init__(self):
        self.max_hp = max(1, int(self.max_hp))
        self.hp = max(0, min(int(self.hp), self.max_hp))
        self.alive = self.hp > 0

    @property
    def defeated(self) -> bool:
        return not self.alive

    @property
    def hp_ratio(self) -> float:
        return self.hp / self.max_hp

    def shake_offset(self, rng: random.Random | None = None) -> tuple[float, float]:
        """Random jitter for the renderer, fading with the shake timer."""
        if self.shake_timer <= 0:
            return 0.0, 0.0
        r = rng or random
        mag = (self.shake_timer / self.shake_duration) * self.shake_magnitude
        return (r.random() - 0.5) * mag, (r.random() - 0.5) * mag
