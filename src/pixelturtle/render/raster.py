"""Integer rasterizers for lines and circles.

All algorithms work on integer pixel coordinates and use only the Python
standard library. Each shape has a point generator (useful for tests and
for callers that want the pixel set without drawing it) and a ``draw_*``
helper that feeds the points into a :class:`~pixelturtle.render.canvas.Canvas`.
"""

from __future__ import annotations

from math import floor
from typing import Iterator, Tuple

from pixelturtle.render.canvas import Canvas

__all__ = [
    "round_half_away",
    "line_points",
    "circle_points",
    "disc_points",
    "draw_line",
    "draw_circle",
    "fill_circle",
]

Point = Tuple[int, int]


def round_half_away(v: float) -> int:
    """Round to the nearest integer, halves away from zero.

    Python's built-in ``round`` rounds halves to even, which would shift
    line endpoints by a pixel for positions such as ``2.5``.
    """
    # v + 0.5 is inexact just below a half, so compare the fraction instead
    mag = abs(v)
    r = int(floor(mag))
    if mag - r >= 0.5:
        r += 1
    return r if v >= 0.0 else -r


def line_points(x0: int, y0: int, x1: int, y1: int) -> Iterator[Point]:
    """Yield the pixels of a Bresenham line from *(x0, y0)* to *(x1, y1)*.

    The start pixel is always produced, the end pixel is produced last.
    The axis with the larger absolute delta is walked one pixel at a time
    (ties walk the y axis); the error term starts at half the major delta,
    loses the minor delta each step and regains the major delta whenever
    it drops below zero, at which point the minor axis steps too.

    Args:
        x0: Start x.
        y0: Start y.
        x1: End x.
        y1: End y.
    Yields:
        ``(x, y)`` pixel coordinates.
    """
    abs_x = abs(x1 - x0)
    abs_y = abs(y1 - y0)
    off_x = 1 if x0 < x1 else -1
    off_y = 1 if y0 < y1 else -1
    x, y = x0, y0

    yield x, y
    if abs_x > abs_y:
        err = abs_x // 2
        while x != x1:
            err -= abs_y
            if err < 0:
                y += off_y
                err += abs_x
            x += off_x
            yield x, y
    else:
        err = abs_y // 2
        while y != y1:
            err -= abs_x
            if err < 0:
                x += off_x
                err += abs_y
            y += off_y
            yield x, y


def circle_points(cx: int, cy: int, radius: int) -> Iterator[Point]:
    """Yield midpoint-circle outline pixels, eight octants per step.

    Points on the octant boundaries (the axes and the diagonals) are
    yielded more than once.
    """
    x = radius
    y = 0
    decision = 1 - x
    while x >= y:
        yield x + cx, y + cy
        yield y + cx, x + cy
        yield -x + cx, y + cy
        yield -y + cx, x + cy
        yield -x + cx, -y + cy
        yield -y + cx, -x + cy
        yield x + cx, -y + cy
        yield y + cx, -x + cy
        y += 1
        if decision <= 0:
            decision += 2 * y + 1
        else:
            x -= 1
            decision += 2 * (y - x) + 1


def disc_points(cx: int, cy: int, radius: int) -> Iterator[Point]:
    """Yield the pixels strictly inside a circle by scanning its bounding box.

    The box spans ``[cx - r, cx + r)`` by ``[cy - r, cy + r)``; a point is
    kept when its squared distance to the center is below ``r * r``. There
    is no anti-aliasing, so the edge is blocky.
    """
    rad_sq = radius * radius
    for x in range(cx - radius, cx + radius):
        dx = x - cx
        for y in range(cy - radius, cy + radius):
            dy = y - cy
            if dx * dx + dy * dy < rad_sq:
                yield x, y


def draw_line(canvas: Canvas, x0: int, y0: int, x1: int, y1: int) -> None:
    for x, y in line_points(x0, y0, x1, y1):
        canvas.draw_pixel(x, y)


def fill_circle(canvas: Canvas, cx: int, cy: int, radius: int) -> None:
    for x, y in disc_points(cx, cy, radius):
        canvas.fill_pixel(x, y)


def draw_circle(
    canvas: Canvas, cx: int, cy: int, radius: int, filled: bool = False
) -> None:
    """Stroke a circle outline, filling the disc first when *filled*."""
    if filled:
        fill_circle(canvas, cx, cy, radius)
    for x, y in circle_points(cx, cy, radius):
        canvas.draw_pixel(x, y)
