"""The game window: drawing the scene with pygame and running the main loop."""

from __future__ import annotations

import argparse
from typing import Any

import pygame

from snakefeast.common import TILE_SIZE, scene_size
from snakefeast.control import GameControl, GameOver, Key, Scene
from snakefeast.food import Food
from snakefeast.snake import Snake

GRAY = (160, 160, 164)
GRID_COLOR = (0, 128, 255)

_PYGAME_KEYS = {
    pygame.K_UP: Key.UP,
    pygame.K_DOWN: Key.DOWN,
    pygame.K_LEFT: Key.LEFT,
    pygame.K_RIGHT: Key.RIGHT,
    pygame.K_w: Key.W,
    pygame.K_a: Key.A,
    pygame.K_s: Key.S,
    pygame.K_d: Key.D,
    pygame.K_SPACE: Key.SPACE,
}


def make_tile() -> pygame.Surface:
    """A single background tile: gray with grid lines on its right and bottom edges."""
    tile = pygame.Surface((TILE_SIZE, TILE_SIZE))
    tile.fill(GRAY)
    last = TILE_SIZE - 1
    pygame.draw.line(tile, GRID_COLOR, (last, 0), (last, last))
    pygame.draw.line(tile, GRID_COLOR, (0, last), (last, last))
    return tile


def to_screen(x: float, y: float, scale: float) -> tuple[int, int]:
    """Convert scene coordinates to window pixel coordinates."""
    w, h = scene_size()
    return (round((x + w / 2) * scale), round((y + h / 2) * scale))


def key_from_pygame(key: int) -> Key | None:
    """The game key for a pygame key code, or None if the game ignores it."""
    return _PYGAME_KEYS.get(key)


def _scaled(length: float, scale: float) -> int:
    return max(1, round(length * scale))


def _draw_background(surface: pygame.Surface, scene: Scene, scale: float) -> None:
    size = _scaled(TILE_SIZE, scale)
    tile = pygame.transform.scale(make_tile(), (size, size))
    rect = scene.rect
    cols = int(rect.width // TILE_SIZE)
    rows = int(rect.height // TILE_SIZE)
    for col in range(cols):
        for row in range(rows):
            pos = to_screen(rect.left + col * TILE_SIZE, rect.top + row * TILE_SIZE, scale)
            surface.blit(tile, pos)


def _draw_snake(surface: pygame.Surface, snake: Snake, scale: float) -> None:
    size = _scaled(TILE_SIZE - 1, scale)
    for segment in snake.tail:
        pygame.draw.rect(surface, Snake.COLOR, pygame.Rect(to_screen(*segment, scale), (size, size)))
    head = pygame.Rect(to_screen(*snake.head, scale), (size, size))
    pygame.draw.rect(surface, Snake.COLOR, head)
    pygame.draw.rect(surface, Snake.OUTLINE, head, width=1)


def _draw_food(surface: pygame.Surface, food: Food, scale: float) -> None:
    centre = to_screen(*food.center(), scale)
    pygame.draw.circle(surface, Food.COLOR, centre, _scaled(Food.RADIUS, scale))


def draw_scene(surface: pygame.Surface, scene: Scene, scale: float) -> None:
    """Draw the tiled background and every item of the scene onto the surface."""
    _draw_background(surface, scene, scale)
    item: Any
    for item in scene.items:
        if isinstance(item, Food):
            _draw_food(surface, item, scale)
        elif isinstance(item, Snake):
            _draw_snake(surface, item, scale)


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="snakefeast", description="Play snake.")
    parser.add_argument("--scale", type=float, default=1.5, help="pixels per scene unit")
    args = parser.parse_args(argv)
    if args.scale <= 0:
        parser.error("--scale must be positive")
    return args


def main(argv: list[str] | None = None) -> int:
    """Open the game window and run until it is closed or the snake eats itself."""
    args = _parse_args(argv)
    scale = args.scale
    w, h = scene_size()
    pygame.display.init()
    try:
        screen = pygame.display.set_mode((_scaled(w, scale), _scaled(h, scale)))
        pygame.display.set_caption("snakefeast")
        scene = Scene()
        control = GameControl(scene)
        clock = pygame.time.Clock()
        while True:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    return 0
                if event.type == pygame.KEYDOWN:
                    key = key_from_pygame(event.key)
                    if key is not None:
                        control.handle_key(key)
            try:
                control.tick()
            except GameOver:
                return 0
            draw_scene(screen, scene, scale)
            pygame.display.flip()
            clock.tick(1000 / control.interval_ms)
    finally:
        pygame.display.quit()