"""
collision.py — Collision rules.

Completely isolated from rendering and input.
Boxes are built in native pixels from fixed per-type insets that trace
the visible part of each sprite, not the full tile.  The insets are
calibration data for the current tileset, not derived geometry.
"""

from typing import Iterable, NamedTuple

from .config import (
    COL_WIDTH, ROW_HEIGHT,
    OBSTACLE_INSET_TOP, OBSTACLE_INSET_BOTTOM,
    PLAYER_INSET_SIDE, PLAYER_INSET_TOP,
)
from .model import Entity, Obstacle, Player


class Box(NamedTuple):
    left: float
    top: float
    right: float
    bottom: float

    def overlaps(self, other: "Box") -> bool:
        # Touching edges count as a hit
        return not (
            self.left > other.right or self.right < other.left
            or self.top > other.bottom or self.bottom < other.top
        )


def hitbox(entity: Entity) -> Box:
    """Bounding box for an entity, chosen by its type."""
    x, y = entity.x, entity.y
    if isinstance(entity, Obstacle):
        return Box(x, y + OBSTACLE_INSET_TOP,
                   x + COL_WIDTH, y + ROW_HEIGHT - OBSTACLE_INSET_BOTTOM)
    if isinstance(entity, Player):
        return Box(x + PLAYER_INSET_SIDE, y + PLAYER_INSET_TOP,
                   x + COL_WIDTH - PLAYER_INSET_SIDE, y + ROW_HEIGHT)
    return Box(x, y, x, y)


def collides(a: Entity, b: Entity) -> bool:
    return hitbox(a).overlaps(hitbox(b))


def check_collisions(obstacles: Iterable[Obstacle], player: Player) -> int:
    """
    Kill the player once for every obstacle touching it.

    All obstacles are tested against where the player stood when the
    check began, so two bugs hitting in the same frame count as two
    deaths.  Returns the number of hits.
    """
    hits = [o for o in obstacles if collides(o, player)]
    for _ in hits:
        player.die()
    return len(hits)
