"""components.level — Static level geometry and the HP scaling rule."""

from __future__ import annotations
from dataclasses import dataclass, field


@dataclass
class Level:
    id: int = 1
    name: str = "Grassy Dojo"
    difficulty: str = "Easy"
    ground_y: float = 420.0
    # (x, y, w, h); drawn only, the player does not collide with these
    platforms: list[tuple[int, int, int, int]] = field(
        default_factory=lambda: [(200, 360, 100, 20), (400, 320, 80, 20)])

    def monster_max_hp(self, base: int, per_level: int = 0) -> int:
        """Linear scaling: level 1 gets *base*, each level adds *per_level*."""
        return max(1, int(base + per_level * (self.id - 1)))
