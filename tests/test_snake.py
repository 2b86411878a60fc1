import pytest

from snakefeast.common import TILE_SIZE, Rect
from snakefeast.food import Food
from snakefeast.snake import Direction, Snake


class Recorder:
    def __init__(self):
        self.eaten = []
        self.self_bites = 0

    def snake_ate_food(self, food):
        self.eaten.append(food)

    def snake_ate_itself(self):
        self.self_bites += 1


class FakeScene:
    def __init__(self, items=()):
        self.items = list(items)

    def colliding_items(self, item):
        return [i for i in self.items if i is not item and i.scene_rect().intersects(item.scene_rect())]


@pytest.fixture
def controller():
    return Recorder()


@pytest.fixture
def snake(controller):
    return Snake(controller)


def step(snake):
    for _ in range(snake.speed):
        snake.advance(1)


def test_initial_state(snake):
    assert snake.head == (0.0, 0.0)
    assert snake.direction is Direction.NO_MOVE
    assert snake.tail == ()
    assert snake.bounding_rect() == Rect(0, 0, TILE_SIZE, TILE_SIZE)


def test_no_move_does_not_move(snake):
    step(snake)
    assert snake.head == (0.0, 0.0)
    assert snake.tail == ()


def test_moves_one_tile_right(snake):
    snake.set_move_direction(Direction.RIGHT)
    snake.go_forward()
    assert snake.head == (TILE_SIZE, 0)
    assert snake.tail == ((0.0, 0.0),)


def test_moves_only_on_every_speed_tick(snake):
    snake.set_move_direction(Direction.DOWN)
    heads = []
    for _ in range(snake.speed * 2):
        snake.go_forward()
        heads.append(snake.head)
    assert len(set(heads)) == 2
    assert snake.head == (0, 2 * TILE_SIZE)


def test_phase_zero_is_ignored(snake):
    snake.set_move_direction(Direction.LEFT)
    snake.advance(0)
    assert snake.head == (0.0, 0.0)
    snake.advance(1)
    assert snake.head == (-TILE_SIZE, 0)
    assert snake.pos == snake.head


def test_grows_then_keeps_length(snake):
    snake.set_move_direction(Direction.RIGHT)
    initial_growth = snake.growing
    for _ in range(initial_growth):
        step(snake)
    assert len(snake.tail) == initial_growth
    assert snake.growing == 0
    step(snake)
    step(snake)
    assert len(snake.tail) == initial_growth
    assert snake.tail[0] == (snake.head[0] - TILE_SIZE, 0)


def test_reverse_direction_is_ignored(snake):
    snake.set_move_direction(Direction.RIGHT)
    snake.set_move_direction(Direction.LEFT)
    assert snake.direction is Direction.RIGHT
    step(snake)
    step(snake)
    assert snake.head == (2 * TILE_SIZE, 0)


def test_stop_with_no_move(snake):
    snake.set_move_direction(Direction.UP)
    step(snake)
    snake.set_move_direction(Direction.NO_MOVE)
    head = snake.head
    step(snake)
    assert snake.direction is Direction.NO_MOVE
    assert snake.head == head


def test_direction_queue_is_bounded(snake):
    for _ in range(8):
        snake.set_move_direction(Direction.UP)
    assert len(snake.pending_directions) == 5


def test_queue_is_drained_on_move(snake):
    snake.set_move_direction(Direction.RIGHT)
    snake.set_move_direction(Direction.RIGHT)
    snake.go_forward()
    assert snake.pending_directions == ()


@pytest.mark.parametrize(
    "direction", [Direction.LEFT, Direction.RIGHT, Direction.UP, Direction.DOWN]
)
def test_opposite_direction_is_refused(snake, direction):
    snake.set_move_direction(direction)
    snake.set_move_direction(direction.opposite)
    assert snake.direction is direction


def test_segments_start_with_head(snake):
    snake.set_move_direction(Direction.DOWN)
    step(snake)
    step(snake)
    segs = snake.segments()
    assert segs[0] == snake.head
    assert segs[1:] == list(snake.tail)


def test_scene_rect_covers_all_segments(snake):
    snake.set_move_direction(Direction.RIGHT)
    step(snake)
    step(snake)
    snake.set_move_direction(Direction.DOWN)
    step(snake)
    r = snake.scene_rect()
    for x, y in snake.segments():
        assert r.left <= x and x + TILE_SIZE <= r.right
        assert r.top <= y and y + TILE_SIZE <= r.bottom


def test_bounding_rect_relative_to_pos(snake):
    snake.set_move_direction(Direction.LEFT)
    step(snake)
    step(snake)
    assert snake.bounding_rect().translated(*snake.pos) == snake.scene_rect()
    assert snake.bounding_rect().left == 0


def test_eats_colliding_food(snake, controller):
    food = Food(TILE_SIZE, 0)
    snake.scene = FakeScene([snake, food])
    snake.set_move_direction(Direction.RIGHT)
    before = snake.growing
    snake.advance(1)
    assert controller.eaten == [food]
    assert snake.growing == before


def test_ignores_distant_food(snake, controller):
    food = Food(20 * TILE_SIZE, 20 * TILE_SIZE)
    snake.scene = FakeScene([snake, food])
    snake.set_move_direction(Direction.RIGHT)
    before = snake.growing
    snake.advance(1)
    assert snake.head == (TILE_SIZE, 0)
    assert snake.growing == before - 1
    assert controller.eaten == []


def test_biting_itself_is_reported(snake, controller):
    for direction in (Direction.RIGHT, Direction.UP, Direction.LEFT):
        snake.set_move_direction(direction)
        step(snake)
    assert controller.self_bites == 0
    snake.set_move_direction(Direction.DOWN)
    step(snake)
    assert snake.head == (0, 0)
    assert controller.self_bites >= 1