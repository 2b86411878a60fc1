"""Shared constants, geometry and random helpers for the snake game."""

from __future__ import annotations

import random
from dataclasses import dataclass
from enum import Enum

TILE_SIZE = 10
SCALE_UNIT_SIZE = 50
WIDTH_RATIO = 16
HEIGHT_RATIO = 9


class GameObjectType(Enum):
    """Kinds of objects that can live in the game scene."""

    FOOD = 0
    WALL = 1


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle given by its top-left corner and size."""

    x: float
    y: float
    width: float
    height: float

    @property
    def left(self) -> float:
        return self.x

    @property
    def top(self) -> float:
        return self.y

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    @property
    def is_empty(self) -> bool:
        return self.width <= 0 or self.height <= 0

    def intersects(self, other: Rect) -> bool:
        """Return True if the two rectangles share an area larger than zero."""
        if self.is_empty or other.is_empty:
            return False
        return (
            self.left < other.right
            and other.left < self.right
            and self.top < other.bottom
            and other.top < self.bottom
        )

    def translated(self, dx: float, dy: float) -> Rect:
        """Return a copy of this rectangle moved by (dx, dy)."""
        return Rect(self.x + dx, self.y + dy, self.width, self.height)


_rng = random.SystemRandom()


def random_int(min_val: int, max_val: int) -> int:
    """Return a random integer in the closed range [min_val, max_val]."""
    if min_val > max_val:
        raise ValueError(f"empty range: {min_val} > {max_val}")
    return _rng.randint(min_val, max_val)


def scene_size() -> tuple[int, int]:
    """Return the (width, height) of the playing field in scene units."""
    return SCALE_UNIT_SIZE * WIDTH_RATIO, SCALE_UNIT_SIZE * HEIGHT_RATIO