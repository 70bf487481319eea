# ledsnake

Snake played on an 8x8 LED matrix driven through an emulated MAX7219
controller, together with a small displayer that scrolls text across the
matrix one column at a time.

## Install

```
pip install .
```

For the test suite:

```
pip install ".[test]"
pytest
```

## Play

```
ledsnake
```

The game runs in the terminal through `curses`. The arrow keys steer;
`q` or Esc quits. The snake starts in the middle of the board moving up and
wraps around the edges. Eating an apple makes it one segment longer; running
into its own body starts a new game.

Options:

- `--delay MS` – milliseconds between moves (default 500, must be positive).
- `--seed N` – seed for apple placement, for a repeatable game.

## Library use

The pieces can be used on their own:

- `ledsnake.ledcontrol.LedControl(num_devices, transport)` keeps the LED
  state of up to eight chained 8x8 devices (a count outside 1..8 means 8).
  Every register write is turned into one frame of `2 * device_count` bytes,
  in the order they would be shifted out on the wire, and passed to
  `transport` as a `bytes` object; with no transport the frames are dropped.
  Register addresses are listed in the `Opcode` enum. Commands for a device
  or position out of range are ignored. `set_led`, `set_row`, `set_column`,
  `clear_display`, `shutdown`, `set_intensity`, `set_scan_limit`, and, for
  7-segment displays, `set_digit` and `set_char` change the state;
  `rows(addr)` and `is_lit(addr, row, col)` read it back and raise
  `ValueError` for an unknown device or position.
- `ledsnake.characters.glyph(char)` returns the eight row bytes of a letter
  `a`–`z` or a space, and raises `ValueError` for anything else.
- `ledsnake.text_displayer.TextDisplayer(matrix, is_reverse)` scrolls text
  across device 0: call `apply_text("hello", True)` once, then
  `display_text()` for each step. Text that is empty or 255 characters or
  longer is ignored; `display_text()` raises `RuntimeError` before any text
  has been applied.
- `ledsnake.game.SnakeGame(matrix, rng)` runs the game itself on device 0:
  `steer(Direction.UP)` changes the heading, `tick()` advances one step and
  returns `True` when the snake crashed and the game restarted.

```python
import random

from ledsnake.game import Direction, SnakeGame
from ledsnake.ledcontrol import LedControl

frames = []
matrix = LedControl(1, frames.append)
game = SnakeGame(matrix, random.Random(1))
game.steer(Direction.DOWN)
game.tick()
print(matrix.rows(0))
print(len(frames), "frames sent")
```

## What it does not do

There is no hardware access: `LedControl` only produces the byte frames,
and sending them to a real device is up to the transport you supply. The
terminal game needs the standard `curses` module, which is not available on
every platform. The game keeps no score or high-score table, and the
scrolling text displayer is not used by the `ledsnake` command.