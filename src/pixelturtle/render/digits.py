"""4x5 bitmap glyphs for the decimal digits.

Glyphs are stored row-major, top row first, ``1`` for ink. A number is laid
out left to right at a 5-pixel pitch (4 columns of glyph, 1 column of gap)
with its top row on the anchor's y and following rows below it.
"""

from __future__ import annotations

from math import ceil, log10
from typing import Iterator, Tuple

from pixelturtle.render.canvas import Canvas

__all__ = [
    "DIGIT_GLYPHS",
    "GLYPH_W",
    "GLYPH_H",
    "GLYPH_PITCH",
    "digit_count",
    "glyph_points",
    "draw_integer",
]

GLYPH_W = 4
GLYPH_H = 5
GLYPH_PITCH = 5

# fmt: off
DIGIT_GLYPHS: Tuple[Tuple[int, ...], ...] = (
    (0, 1, 1, 0,
     1, 0, 0, 1,
     1, 0, 0, 1,
     1, 0, 0, 1,
     0, 1, 1, 0),
    (0, 1, 1, 0,
     0, 0, 1, 0,
     0, 0, 1, 0,
     0, 0, 1, 0,
     0, 1, 1, 1),
    (1, 1, 1, 0,
     0, 0, 0, 1,
     0, 1, 1, 0,
     1, 0, 0, 0,
     1, 1, 1, 1),
    (1, 1, 1, 0,
     0, 0, 0, 1,
     0, 1, 1, 0,
     0, 0, 0, 1,
     1, 1, 1, 0),
    (0, 1, 0, 1,
     0, 1, 0, 1,
     0, 1, 1, 1,
     0, 0, 0, 1,
     0, 0, 0, 1),
    (1, 1, 1, 1,
     1, 0, 0, 0,
     1, 1, 1, 0,
     0, 0, 0, 1,
     1, 1, 1, 0),
    (0, 1, 1, 0,
     1, 0, 0, 0,
     1, 1, 1, 0,
     1, 0, 0, 1,
     0, 1, 1, 0),
    (1, 1, 1, 1,
     0, 0, 0, 1,
     0, 0, 1, 0,
     0, 1, 0, 0,
     0, 1, 0, 0),
    (0, 1, 1, 0,
     1, 0, 0, 1,
     0, 1, 1, 0,
     1, 0, 0, 1,
     0, 1, 1, 0),
    (0, 1, 1, 0,
     1, 0, 0, 1,
     0, 1, 1, 1,
     0, 0, 0, 1,
     0, 1, 1, 0),
)
# fmt: on


def digit_count(value: int) -> int:
    """Number of glyphs :func:`draw_integer` renders for *value*.

    Uses ``ceil(log10(value))`` above 9, so exact powers of ten come out one
    short (``10`` renders as a single ``0``).
    """
    if value > 9:
        return int(ceil(log10(value)))
    return 1


def glyph_points(digit: int, x: float, y: float) -> Iterator[Tuple[int, int]]:
    """Yield the ink pixels of *digit* with its top-left corner at *(x, y)*.

    Coordinates are truncated toward zero.
    """
    glyph = DIGIT_GLYPHS[digit]
    for row in range(GLYPH_H):
        for col in range(GLYPH_W):
            if glyph[row * GLYPH_W + col] == 1:
                yield int(x + col), int(y - row)


def draw_integer(canvas: Canvas, value: int, x: float, y: float) -> int:
    """Draw a non-negative integer with its top-left at *(x, y)*.

    Returns:
        The number of glyphs drawn.
    Raises:
        ValueError: *value* is negative.
    """
    value = int(value)
    if value < 0:
        raise ValueError(f"cannot draw negative integer {value}")
    ndigits = digit_count(value)
    for i in range(ndigits - 1, -1, -1):
        digit = value % 10
        for px, py in glyph_points(digit, x + i * GLYPH_PITCH, y):
            canvas.draw_pixel(px, py)
        value //= 10
    return ndigits
