"""The snake: its movement, growth and collision handling."""

from __future__ import annotations

from collections import deque
from enum import Enum
from typing import Any, Protocol

from snakefeast.common import TILE_SIZE, GameObjectType, Rect

_QUEUE_LENGTH = 5
_INITIAL_GROWTH = 4
_SPEED = 5
_TICK_MASK = 0xFFFFFFFF

Point = tuple[float, float]


class Direction(Enum):
    """Movement directions, each with its unit step."""

    NO_MOVE = (0, 0)
    LEFT = (-1, 0)
    RIGHT = (1, 0)
    UP = (0, -1)
    DOWN = (0, 1)

    @property
    def opposite(self) -> Direction:
        dx, dy = self.value
        return Direction((-dx, -dy))


class _Controller(Protocol):
    def snake_ate_food(self, food: Any) -> None: ...

    def snake_ate_itself(self) -> None: ...


class Snake:
    """A snake that moves one tile every few ticks and grows when it eats."""

    COLOR = (255, 255, 0)
    OUTLINE = (0, 255, 0)

    def __init__(self, controller: _Controller) -> None:
        self.controller = controller
        self.scene: Any = None
        self.kind: GameObjectType | None = None
        self.head: Point = (0.0, 0.0)
        self.pos: Point = (0.0, 0.0)
        self.direction = Direction.NO_MOVE
        self.speed = _SPEED
        self.growing = _INITIAL_GROWTH
        self._tick_count = 0
        self._next_dirs: deque[Direction] = deque(maxlen=_QUEUE_LENGTH)
        self._tail: deque[Point] = deque()
        self._tail_set: set[Point] = set()

    @property
    def tail(self) -> tuple[Point, ...]:
        """Body segments from the neck to the tip, in scene coordinates."""
        return tuple(self._tail)

    @property
    def pending_directions(self) -> tuple[Direction, ...]:
        return tuple(self._next_dirs)

    def bounding_rect(self) -> Rect:
        """Box around all segments, in the snake's own coordinates."""
        xs = [self.head[0], *(x for x, _ in self._tail)]
        ys = [self.head[1], *(y for _, y in self._tail)]
        min_x, min_y = min(xs), min(ys)
        max_x, max_y = max(xs), max(ys)
        px, py = self.pos
        return Rect(
            min_x - px,
            min_y - py,
            max_x - min_x + TILE_SIZE,
            max_y - min_y + TILE_SIZE,
        )

    def scene_rect(self) -> Rect:
        """Box around all segments, in scene coordinates."""
        return self.bounding_rect().translated(*self.pos)

    def segments(self) -> list[Point]:
        """Head followed by the body, in scene coordinates."""
        return [self.head, *self._tail]

    def _accepts(self, direction: Direction) -> bool:
        return direction is not self.direction and direction is not self.direction.opposite

    def go_forward(self) -> None:
        """Move one tile if this tick is a moving tick."""
        tick = self._tick_count
        self._tick_count = (tick + 1) & _TICK_MASK
        if tick % self.speed:
            return
        while self._next_dirs:
            candidate = self._next_dirs.popleft()
            if self._accepts(candidate):
                self.direction = candidate
                break
        if self.direction is Direction.NO_MOVE:
            return

        self._tail.appendleft(self.head)
        self._tail_set.add(self.head)
        if self.growing > 0:
            self.growing -= 1
        else:
            self._tail_set.discard(self._tail[-1])
            self._tail.pop()

        dx, dy = self.direction.value
        x, y = self.head
        self.head = (x + dx * TILE_SIZE, y + dy * TILE_SIZE)

    def set_move_direction(self, direction: Direction) -> None:
        """Queue a direction change and apply it at once if it is a valid turn."""
        self._next_dirs.append(direction)
        if self._accepts(direction):
            self.direction = direction

    def advance(self, phase: int) -> None:
        """Scene animation hook: moves on the second phase only."""
        if not phase:
            return
        self.go_forward()
        self.pos = self.head
        self._handle_collision()

    def _handle_collision(self) -> None:
        items = self.scene.colliding_items(self) if self.scene is not None else []
        for item in items:
            if getattr(item, "kind", None) is GameObjectType.FOOD:
                self.growing += 1
                self.controller.snake_ate_food(item)
        if self.head in self._tail_set:
            self.controller.snake_ate_itself()