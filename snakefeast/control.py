"""Game control: the scene that holds the items and the rules that drive them."""

from __future__ import annotations

import random
from enum import Enum, auto
from typing import Any

from snakefeast.common import TILE_SIZE, Rect, scene_size
from snakefeast.food import Food
from snakefeast.snake import Direction, Snake

TICK_INTERVAL_MS = 1000 // 33


class Key(Enum):
    """Keys the game reacts to."""

    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()
    W = auto()
    A = auto()
    S = auto()
    D = auto()
    SPACE = auto()


_KEY_DIRECTIONS = {
    Key.UP: Direction.UP,
    Key.W: Direction.UP,
    Key.DOWN: Direction.DOWN,
    Key.S: Direction.DOWN,
    Key.LEFT: Direction.LEFT,
    Key.A: Direction.LEFT,
    Key.RIGHT: Direction.RIGHT,
    Key.D: Direction.RIGHT,
    Key.SPACE: Direction.NO_MOVE,
}


class GameOver(Exception):
    """Raised by a tick once the snake has run into itself."""


class Scene:
    """A centred playing field holding the game items."""

    def __init__(self, width: int | None = None, height: int | None = None) -> None:
        default_w, default_h = scene_size()
        w = default_w if width is None else width
        h = default_h if height is None else height
        self.rect = Rect(-w / 2, -h / 2, w, h)
        self.items: list[Any] = []

    def add_item(self, item: Any) -> None:
        """Put an item into the scene."""
        if item in self.items:
            return
        self.items.append(item)
        item.scene = self

    def remove_item(self, item: Any) -> None:
        """Take an item out of the scene; raises ValueError if it is not there."""
        self.items.remove(item)
        item.scene = None

    def colliding_items(self, item: Any) -> list[Any]:
        """Other items whose extent overlaps the given item's extent."""
        area = item.scene_rect()
        return [
            other
            for other in self.items
            if other is not item and other.scene_rect().intersects(area)
        ]

    def advance(self) -> None:
        """Run both animation phases on every item that can advance."""
        snapshot = list(self.items)
        for phase in (0, 1):
            for item in snapshot:
                step = getattr(item, "advance", None)
                if step is not None:
                    step(phase)


class GameControl:
    """Owns the snake, places food and reacts to keys and collisions."""

    interval_ms = TICK_INTERVAL_MS

    def __init__(self, scene: Scene, rng: random.Random | None = None) -> None:
        self.scene = scene
        self.rng = rng if rng is not None else random.Random()
        self.paused = False
        self.game_over = False
        self.snake = Snake(self)
        scene.add_item(self.snake)
        self.add_new_food()

    def snake_ate_food(self, food: Food) -> None:
        """Remove the eaten food and put a new one on the field."""
        self.scene.remove_item(food)
        self.add_new_food()

    def snake_ate_itself(self) -> None:
        """Mark the game as lost; the next tick ends it."""
        self.game_over = True

    def handle_key(self, key: Key) -> None:
        """Turn or stop the snake according to the key pressed."""
        direction = _KEY_DIRECTIONS.get(key)
        if direction is not None:
            self.snake.set_move_direction(direction)

    def add_new_food(self) -> Food:
        """Place a food item at a random tile of the field and return it."""
        w, h = scene_size()
        cols, rows = w // TILE_SIZE, h // TILE_SIZE
        x = (self.rng.randrange(w) // TILE_SIZE - cols // 2) * TILE_SIZE
        y = (self.rng.randrange(h) // TILE_SIZE - rows // 2) * TILE_SIZE
        food = Food(x, y)
        self.scene.add_item(food)
        return food

    def tick(self) -> None:
        """Advance the scene once; raises GameOver when the game has ended."""
        if self.game_over:
            raise GameOver("the snake ate itself")
        self.scene.advance()
        if self.game_over:
            raise GameOver("the snake ate itself")