"""Scrolls lower-case text across an 8x8 dot matrix, one column per frame."""

from __future__ import annotations

from .characters import GLYPHS, SPACE, Glyph
from .ledcontrol import ROWS_PER_DEVICE, LedControl

CHARACTER_WIDTH = 7
MAX_CHARACTERS = 255

_BYTE = 0xFF


class TextDisplayer:
    """Feeds the glyphs of a text into a row buffer and draws it on device 0.

    In forward mode each glyph is read from its lowest bit upwards and enters
    the matrix at the left edge, the text being walked from its last character
    to its first.  In reverse mode glyphs are read from bit 7 down to bit 1,
    enter at the right edge and the text is walked from first to last.
    """

    def __init__(self, matrix: LedControl, is_reverse: bool = False) -> None:
        self._matrix = matrix
        self._is_reverse = is_reverse
        # One slot more than the text limit: a trailing blank may land there.
        self._text: list[Glyph] = [SPACE] * (MAX_CHARACTERS + 1)
        self._buffer = [0] * ROWS_PER_DEVICE
        self._current_width = CHARACTER_WIDTH if is_reverse else 0
        self._current_char = 0
        self._length = 0

    def apply_text(self, text: str, add_new_line: bool = True) -> None:
        """Load ``text`` for scrolling.

        Empty text and text of 255 characters or more are ignored.  Characters
        without a glyph leave whatever glyph already stood at their position.
        With ``add_new_line`` one more character is scrolled after the text and
        a blank is stored in the slot after that one.
        """
        if not 0 < len(text) <= MAX_CHARACTERS - 1:
            return
        for position, char in enumerate(text):
            found = GLYPHS.get(char)
            if found is not None:
                self._text[position] = found
        if add_new_line:
            self._text[len(text) + 1] = SPACE
            self._length = len(text) + 1
        else:
            self._length = len(text)
        self._current_char = 0 if self._is_reverse else self._length - 1

    def display_text(self) -> None:
        """Advance the scroll by one column and draw the result."""
        if self._length == 0:
            raise RuntimeError("no text has been applied")
        self._write_to_buffer()
        self._draw_buffer()
        self._advance()

    def _write_to_buffer(self) -> None:
        rows = self._text[self._current_char]
        target = 0 if self._is_reverse else CHARACTER_WIDTH
        mask = 1 << target
        for index, row in enumerate(rows):
            if (row >> self._current_width) & 1:
                self._buffer[index] |= mask
            else:
                self._buffer[index] &= ~mask & _BYTE

    def _draw_buffer(self) -> None:
        for row, value in enumerate(self._buffer):
            self._matrix.set_row(0, row, value)

    def _advance(self) -> None:
        if self._is_reverse:
            self._current_width -= 1
            letter_passed = self._current_width == 0
        else:
            self._current_width += 1
            letter_passed = self._current_width > CHARACTER_WIDTH

        if letter_passed:
            self._current_width = CHARACTER_WIDTH if self._is_reverse else 0
            if self._is_reverse:
                self._current_char += 1
                if self._current_char == self._length:
                    self._current_char = 0
            else:
                self._current_char -= 1
                if self._current_char < 0:
                    self._current_char = self._length - 1

        if self._is_reverse:
            self._buffer = [(value << 1) & _BYTE for value in self._buffer]
        else:
            self._buffer = [value >> 1 for value in self._buffer]