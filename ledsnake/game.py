"""Snake on an 8x8 LED matrix, with a terminal front end."""

from __future__ import annotations

import argparse
import random
import time
from dataclasses import dataclass
from enum import Enum
from itertools import pairwise

from .ledcontrol import LedControl

WIDTH = 8
HEIGHT = 8
TICK_MS = 500


class Direction(Enum):
    """Step applied to the head on every tick, as (dx, dy)."""

    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (1, 0)
    RIGHT = (-1, 0)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]


@dataclass
class Segment:
    """One cell of the snake together with where it stood before the last move."""

    x: int
    y: int
    prev_x: int = 0
    prev_y: int = 0

    def save_position(self) -> None:
        """Remember the current cell as the previous one."""
        self.prev_x = self.x
        self.prev_y = self.y

    def draw(self, matrix: LedControl) -> None:
        """Light the current cell and darken the previous one if it moved."""
        matrix.set_led(0, self.x, self.y, True)
        if (self.x, self.y) != (self.prev_x, self.prev_y):
            matrix.set_led(0, self.prev_x, self.prev_y, False)


class Snake:
    """The snake's body, head first, and its heading."""

    def __init__(self) -> None:
        self.direction = Direction.UP
        self.body: list[Segment] = []
        self.reset()

    def reset(self) -> None:
        """Back to a single segment in the middle, heading up."""
        self.direction = Direction.UP
        self.body = [Segment(WIDTH // 2, HEIGHT // 2)]

    @property
    def head(self) -> Segment:
        return self.body[0]

    def __len__(self) -> int:
        return len(self.body)

    def grow(self) -> None:
        """Append a segment where the tail stood before its last move."""
        tail = self.body[-1]
        self.body.append(Segment(tail.prev_x, tail.prev_y, tail.prev_x, tail.prev_y))

    def has_hit_body(self) -> bool:
        """Whether the head shares a cell with another segment."""
        head = self.head
        return any((head.x, head.y) == (part.x, part.y) for part in self.body[1:])


@dataclass
class Apple:
    """The apple's cell."""

    x: int = 0
    y: int = 0

    def place(self, rng: random.Random) -> None:
        """Move the apple to a random cell."""
        self.x = rng.randrange(WIDTH)
        self.y = rng.randrange(HEIGHT)

    def try_eat(self, matrix: LedControl, x: int, y: int, rng: random.Random) -> bool:
        """If the apple is at ``x``/``y``, darken it, move it and return True."""
        if (x, y) != (self.x, self.y):
            return False
        matrix.set_led(0, self.x, self.y, False)
        self.place(rng)
        return True

    def draw(self, matrix: LedControl) -> None:
        """Light the apple's cell."""
        matrix.set_led(0, self.x, self.y, True)


class SnakeGame:
    """A running game drawn on device 0 of ``matrix``."""

    def __init__(self, matrix: LedControl, rng: random.Random | None = None) -> None:
        self.matrix = matrix
        self.rng = rng if rng is not None else random.Random()
        matrix.shutdown(0, False)
        matrix.set_intensity(0, 8)
        matrix.clear_display(0)
        self.snake = Snake()
        self.apple = Apple()
        self.apple.place(self.rng)

    def steer(self, direction: Direction) -> None:
        """Change the heading used from the next tick on."""
        self.snake.direction = direction

    def tick(self) -> bool:
        """Advance the game one step; return True if the snake crashed and restarted."""
        matrix = self.matrix
        snake = self.snake
        self.apple.draw(matrix)

        head = snake.head
        head.save_position()
        head.x = (head.x + snake.direction.dx) % WIDTH
        head.y = (head.y + snake.direction.dy) % HEIGHT
        head.draw(matrix)

        if self.apple.try_eat(matrix, head.x, head.y, self.rng):
            snake.grow()

        if snake.has_hit_body():
            snake.reset()
            self.apple.place(self.rng)
            matrix.clear_display(0)
            return True

        for previous, current in pairwise(snake.body):
            current.save_position()
            current.x = previous.prev_x
            current.y = previous.prev_y
            current.draw(matrix)
        return False


def _render(screen, matrix: LedControl) -> None:
    # The matrix is mounted turned: its rows run across the screen, mirrored.
    for y in range(HEIGHT):
        cells = ("#" if matrix.is_lit(0, WIDTH - 1 - sx, y) else "." for sx in range(WIDTH))
        screen.addstr(y, 0, " ".join(cells))
    screen.addstr(HEIGHT + 1, 0, "arrows steer, q quits")
    screen.refresh()


def _play(screen, delay: float, rng: random.Random) -> None:
    import curses

    try:
        curses.curs_set(0)
    except curses.error:
        pass
    screen.timeout(10)
    keys = {
        curses.KEY_UP: Direction.UP,
        curses.KEY_DOWN: Direction.DOWN,
        curses.KEY_LEFT: Direction.LEFT,
        curses.KEY_RIGHT: Direction.RIGHT,
    }
    game = SnakeGame(LedControl(1), rng)
    next_update = 0.0
    while True:
        key = screen.getch()
        if key in (ord("q"), 27):
            return
        if key in keys:
            game.steer(keys[key])
        now = time.monotonic()
        if now > next_update:
            next_update = now + delay
            game.tick()
            _render(screen, game.matrix)


def main(argv: list[str] | None = None) -> int:
    """Play snake in the terminal."""
    parser = argparse.ArgumentParser(prog="ledsnake", description="Snake on an 8x8 dot matrix.")
    parser.add_argument("--delay", type=int, default=TICK_MS, help="milliseconds between moves")
    parser.add_argument("--seed", type=int, default=None, help="seed for apple placement")
    args = parser.parse_args(argv)
    if args.delay <= 0:
        parser.error("--delay must be positive")

    import curses

    try:
        curses.wrapper(_play, args.delay / 1000, random.Random(args.seed))
    except KeyboardInterrupt:
        pass
    return 0