"""Food items that the snake eats."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, ClassVar

from snakefeast.common import TILE_SIZE, GameObjectType, Rect


@dataclass(eq=False)
class Food:
    """A piece of food placed at a scene position."""

    RADIUS: ClassVar[float] = 3.0
    COLOR: ClassVar[tuple[int, int, int]] = (255, 0, 0)

    x: float
    y: float
    kind: GameObjectType = field(default=GameObjectType.FOOD, init=False)
    scene: Any = field(default=None, repr=False)

    @property
    def pos(self) -> tuple[float, float]:
        return (self.x, self.y)

    def bounding_rect(self) -> Rect:
        """The item's extent in its own coordinates."""
        return Rect(-TILE_SIZE, -TILE_SIZE, TILE_SIZE * 2, TILE_SIZE * 2)

    def scene_rect(self) -> Rect:
        """The item's extent in scene coordinates."""
        return self.bounding_rect().translated(self.x, self.y)

    def center(self) -> tuple[float, float]:
        """Scene position of the centre of the drawn dot."""
        half = TILE_SIZE // 2
        return (self.x + half, self.y + half)