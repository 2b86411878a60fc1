# snakefeast

A small arcade snake game. The snake crawls over a tiled board and grows
every time it eats a piece of food. The game ends as soon as its head runs
into its own body.

## Installing

```
pip install .
```

This pulls in `pygame`, which draws the board and reads the keyboard.

## Playing

```
snakefeast
```

The window is 800 × 450 board units. `--scale` sets how many pixels one
board unit takes on screen (default `1.5`; it must be positive):

```
snakefeast --scale 2
```

Controls:

| Key              | Action                  |
|------------------|-------------------------|
| Up / W           | move up                 |
| Down / S         | move down               |
| Left / A         | move left               |
| Right / D        | move right              |
| Space            | stop                    |

The snake starts still in the middle of the board and grows by four
segments over its first moves. It moves one tile every fifth tick, with a
tick about every 30 ms. It cannot turn straight back on itself. Up to five
key presses are queued, so quick turns are not lost. Food appears on a
random tile of the board. Each piece eaten makes the snake one segment
longer, and a new piece takes its place. The window closes when you close
it or when the snake bites itself.

## What the game does not do

There are no walls. The snake can crawl off the edge of the board and keep
going. There is no score, no pause and no game-over screen. Biting yourself
simply closes the window.

## Using the pieces

The game logic needs no window and can be driven directly:

```python
from snakefeast.control import GameControl, GameOver, Key, Scene

scene = Scene()
game = GameControl(scene)
game.handle_key(Key.RIGHT)
try:
    for _ in range(100):
        game.tick()
except GameOver:
    print("the snake bit itself")
print(game.snake.segments())
```

`GameControl` also takes an optional `random.Random` instance. Use it when
you need food placed in a repeatable way.

### Modules

- `snakefeast.common` holds:
  - the board constants (`TILE_SIZE`, `SCALE_UNIT_SIZE`, `WIDTH_RATIO`, `HEIGHT_RATIO`);
  - `GameObjectType`;
  - `Rect`, with `intersects` and `translated`;
  - `random_int`, which gives a value in a closed range;
  - `scene_size`.
- `snakefeast.snake` holds `Direction` and `Snake`, with `go_forward`, `set_move_direction`, `advance`, `segments`, `bounding_rect` and `scene_rect`.
- `snakefeast.food` holds `Food`, with `bounding_rect`, `scene_rect` and `center`.
- `snakefeast.control` holds:
  - `Scene`, with `add_item`, `remove_item`, `colliding_items` and `advance`;
  - `GameControl`, with `handle_key`, `tick`, `add_new_food`, `snake_ate_food` and `snake_ate_itself`;
  - `Key`;
  - `GameOver`, which `tick` raises once the snake has bitten itself.
- `snakefeast.app` holds the pygame front end. It has `make_tile`, `to_screen`, `key_from_pygame` and `draw_scene`, and `main` starts the game.

## Running the tests

```
pip install .[test]
pytest
```