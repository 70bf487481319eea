import random

import pytest

from ledsnake.game import (
    HEIGHT,
    WIDTH,
    Apple,
    Direction,
    Segment,
    Snake,
    SnakeGame,
)
from ledsnake.ledcontrol import LedControl, Opcode


def _game(seed=1):
    game = SnakeGame(LedControl(1), random.Random(seed))
    # Keep the apple away from the centre column the snake starts on.
    game.apple.x, game.apple.y = 0, 0
    return game


@pytest.mark.parametrize(
    "direction, expected",
    [
        (Direction.UP, (4, 3)),
        (Direction.DOWN, (4, 5)),
        (Direction.LEFT, (5, 4)),
        (Direction.RIGHT, (3, 4)),
    ],
)
def test_direction_steps_match_buttons(direction, expected):
    game = _game()
    game.steer(direction)
    game.tick()
    assert (game.snake.head.x, game.snake.head.y) == expected


def test_new_snake_is_one_segment_in_centre_heading_up():
    snake = Snake()
    assert len(snake) == 1
    assert (snake.head.x, snake.head.y) == (WIDTH // 2, HEIGHT // 2)
    assert snake.direction is Direction.UP


def test_game_wakes_the_display_and_sets_intensity():
    frames = []
    matrix = LedControl(1, frames.append)
    SnakeGame(matrix, random.Random(0))
    assert bytes([Opcode.SHUTDOWN, 1]) in frames
    assert bytes([Opcode.INTENSITY, 8]) in frames
    assert frames.index(bytes([Opcode.SHUTDOWN, 1])) > frames.index(bytes([Opcode.SHUTDOWN, 0]))


@pytest.mark.parametrize("direction", list(Direction))
def test_tick_moves_head_one_step(direction):
    game = _game()
    start = (game.snake.head.x, game.snake.head.y)
    game.steer(direction)
    assert game.tick() is False
    head = game.snake.head
    assert (head.x, head.y) == ((start[0] + direction.dx) % WIDTH, (start[1] + direction.dy) % HEIGHT)
    assert game.matrix.is_lit(0, head.x, head.y)
    assert not game.matrix.is_lit(0, *start)


def test_head_wraps_around_the_edge():
    game = _game()
    game.steer(Direction.RIGHT)
    start = (game.snake.head.x, game.snake.head.y)
    seen = set()
    for _ in range(WIDTH):
        game.tick()
        seen.add(game.snake.head.x)
    assert (game.snake.head.x, game.snake.head.y) == start
    assert seen == set(range(WIDTH))


def test_eating_grows_the_snake_behind_the_head():
    game = _game()
    head = game.snake.head
    start = (head.x, head.y)
    game.apple.x, game.apple.y = head.x, head.y - 1
    game.tick()
    assert len(game.snake) == 2
    tail = game.snake.body[1]
    assert (tail.x, tail.y) == start
    assert 0 <= game.apple.x < WIDTH and 0 <= game.apple.y < HEIGHT


def test_crashing_into_body_restarts_and_clears():
    game = _game()
    head = game.snake.head
    target = (head.x, (head.y - 1) % HEIGHT)
    game.snake.body.append(Segment(*target, *target))
    assert game.tick() is True
    assert len(game.snake) == 1
    assert (game.snake.head.x, game.snake.head.y) == (WIDTH // 2, HEIGHT // 2)
    assert game.matrix.rows(0) == (0,) * 8


def test_body_follows_head():
    game = _game()
    game.snake.grow()
    game.snake.grow()
    for _ in range(3):
        previous = [(part.x, part.y) for part in game.snake.body]
        game.tick()
        current = [(part.x, part.y) for part in game.snake.body]
        assert current[1:] == previous[:-1]


def test_has_hit_body():
    snake = Snake()
    snake.body = [Segment(1, 1), Segment(1, 2), Segment(2, 2)]
    assert snake.has_hit_body() is False
    snake.body.append(Segment(1, 1))
    assert snake.has_hit_body() is True


def test_grow_copies_tail_previous_cell():
    snake = Snake()
    snake.body = [Segment(3, 3, 3, 4)]
    snake.grow()
    assert snake.body[1] == Segment(3, 4, 3, 4)


def test_reset_restores_start():
    snake = Snake()
    snake.direction = Direction.DOWN
    snake.grow()
    snake.reset()
    assert len(snake) == 1
    assert snake.direction is Direction.UP


def test_segment_draw_lights_new_cell_and_clears_old():
    matrix = LedControl(1)
    segment = Segment(2, 3, 2, 3)
    segment.draw(matrix)
    assert matrix.is_lit(0, 2, 3)
    segment.save_position()
    segment.x = 5
    segment.draw(matrix)
    assert matrix.is_lit(0, 5, 3)
    assert not matrix.is_lit(0, 2, 3)


def test_apple_miss_changes_nothing():
    matrix = LedControl(1)
    apple = Apple(2, 6)
    apple.draw(matrix)
    assert apple.try_eat(matrix, 6, 2, random.Random(0)) is False
    assert (apple.x, apple.y) == (2, 6)
    assert matrix.is_lit(0, 2, 6)


def test_apple_hit_darkens_and_moves():
    matrix = LedControl(1)
    apple = Apple(2, 6)
    apple.draw(matrix)
    assert apple.try_eat(matrix, 2, 6, random.Random(3)) is True
    if (apple.x, apple.y) != (2, 6):
        assert not matrix.is_lit(0, 2, 6)
    assert 0 <= apple.x < WIDTH and 0 <= apple.y < HEIGHT


def test_apple_place_covers_the_board():
    rng = random.Random(42)
    apple = Apple()
    cells = set()
    for _ in range(2000):
        apple.place(rng)
        cells.add((apple.x, apple.y))
    assert cells == {(x, y) for x in range(WIDTH) for y in range(HEIGHT)}