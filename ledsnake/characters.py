"""5x7 glyphs for the letters shown on an 8x8 dot matrix."""

from __future__ import annotations

Glyph = tuple[int, int, int, int, int, int, int, int]

GLYPHS: dict[str, Glyph] = {
    "a": (0b01110000, 0b10001000, 0b10001000, 0b11111000, 0b10001000, 0b10001000, 0b10001000, 0b00000000),
    "b": (0b11110000, 0b10001000, 0b10001000, 0b11110000, 0b10001000, 0b10001000, 0b11110000, 0b00000000),
    "c": (0b01110000, 0b10001000, 0b10000000, 0b10000000, 0b10000000, 0b10001000, 0b01110000, 0b00000000),
    "d": (0b11110000, 0b10001000, 0b10001000, 0b10001000, 0b10001000, 0b10001000, 0b11110000, 0b00000000),
    "e": (0b11111000, 0b10000000, 0b10000000, 0b11110000, 0b10000000, 0b10000000, 0b11111000, 0b00000000),
    "f": (0b11111000, 0b10000000, 0b10000000, 0b11110000, 0b10000000, 0b10000000, 0b10000000, 0b00000000),
    "g": (0b01110000, 0b10001000, 0b10000000, 0b10000000, 0b10011000, 0b10001000, 0b01110000, 0b00000000),
    "h": (0b10001000, 0b10001000, 0b10001000, 0b11111000, 0b10001000, 0b10001000, 0b10001000, 0b00000000),
    "i": (0b01110000, 0b00100000, 0b00100000, 0b00100000, 0b00100000, 0b00100000, 0b01110000, 0b00000000),
    "j": (0b00111000, 0b00001000, 0b00001000, 0b00001000, 0b00001000, 0b01001000, 0b00110000, 0b00000000),
    "k": (0b10001000, 0b10010000, 0b10100000, 0b11000000, 0b10100000, 0b10010000, 0b10001000, 0b00000000),
    "l": (0b10000000, 0b10000000, 0b10000000, 0b10000000, 0b10000000, 0b10000000, 0b11111000, 0b00000000),
    "m": (0b10001000, 0b11011000, 0b10101000, 0b10101000, 0b10001000, 0b10001000, 0b10001000, 0b00000000),
    "n": (0b10001000, 0b10001000, 0b11001000, 0b10101000, 0b10011000, 0b10001000, 0b10001000, 0b00000000),
    "o": (0b01110000, 0b10001000, 0b10001000, 0b10001000, 0b10001000, 0b10001000, 0b01110000, 0b00000000),
    "p": (0b11110000, 0b10001000, 0b10001000, 0b11110000, 0b10000000, 0b10000000, 0b10000000, 0b00000000),
    "q": (0b01110000, 0b10001000, 0b10001000, 0b10001000, 0b10001000, 0b01110000, 0b00001000, 0b00000000),
    "r": (0b11110000, 0b10001000, 0b10001000, 0b11110000, 0b10100000, 0b10010000, 0b10001000, 0b00000000),
    "s": (0b01110000, 0b10001000, 0b10000000, 0b01110000, 0b00001000, 0b10001000, 0b01110000, 0b00000000),
    "t": (0b11111000, 0b00100000, 0b00100000, 0b00100000, 0b00100000, 0b00100000, 0b00100000, 0b00000000),
    "u": (0b10001000, 0b10001000, 0b10001000, 0b10001000, 0b10001000, 0b10001000, 0b01110000, 0b00000000),
    "v": (0b10001000, 0b10001000, 0b10001000, 0b10001000, 0b10001000, 0b01010000, 0b00100000, 0b00000000),
    "w": (0b10001000, 0b10001000, 0b10001000, 0b10001000, 0b10101000, 0b10101000, 0b01010000, 0b00000000),
    "x": (0b10001000, 0b10001000, 0b01010000, 0b00100000, 0b01010000, 0b10001000, 0b10001000, 0b00000000),
    "y": (0b10001000, 0b10001000, 0b10001000, 0b01111000, 0b00001000, 0b10001000, 0b01110000, 0b00000000),
    "z": (0b11111000, 0b00001000, 0b00010000, 0b00100000, 0b01000000, 0b10000000, 0b11111000, 0b00000000),
    " ": (0, 0, 0, 0, 0, 0, 0, 0),
}

SPACE: Glyph = GLYPHS[" "]


def glyph(char: str) -> Glyph:
    """Return the eight row bytes for a lower-case letter or a space."""
    try:
        return GLYPHS[char]
    except KeyError:
        raise ValueError(f"no glyph for character {char!r}") from None