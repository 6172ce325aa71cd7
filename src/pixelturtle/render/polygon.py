"""Scanline polygon fill using edge crossing points.

For every horizontal scanline the x-intercepts of the polygon's edges are
collected, sorted, and the pixels between each pair of intercepts are
filled. The edge test is half-open (``y_i < y <= y_j`` or the reverse) so a
vertex lying exactly on a scanline is counted once, not twice.

The fill is known to miss or occlude pixels along edges, most visibly at
acute vertices. :func:`fill_polygon` therefore re-strokes every edge with
the line rasterizer after filling.

Based on the public-domain fill algorithm by Darel Rex Finley (2007).
"""

from __future__ import annotations

import logging
from math import ceil, floor
from typing import List, Sequence, Tuple

from pixelturtle.core.errors import PolygonOverflowError
from pixelturtle.render.canvas import Canvas
from pixelturtle.render.raster import draw_line, round_half_away

__all__ = [
    "MAX_POLYGON_VERTICES",
    "scanline_intercepts",
    "scanline_spans",
    "fill_polygon",
    "stroke_polygon",
]

logger = logging.getLogger(__name__)

MAX_POLYGON_VERTICES = 128

Vertex = Tuple[float, float]


def _insertion_sort(values: List[float]) -> None:
    # lists here hold at most a polygon's worth of intercepts
    for i in range(1, len(values)):
        temp = values[i]
        j = i
        while j > 0 and temp < values[j - 1]:
            values[j] = values[j - 1]
            j -= 1
        values[j] = temp


def scanline_intercepts(
    vertices: Sequence[Vertex], y: int, capacity: int = MAX_POLYGON_VERTICES
) -> List[float]:
    """Return the sorted x-intercepts of the polygon edges with scanline *y*.

    Args:
        vertices: Polygon vertices in drawing order; the last vertex
            connects back to the first.
        y: Scanline row.
        capacity: Maximum number of intercepts one scanline may hold.
    Returns:
        Intercepts in ascending order.
    Raises:
        PolygonOverflowError: More than *capacity* intercepts were found.
    """
    nodes: List[float] = []
    fy = float(y)
    n = len(vertices)
    j = n - 1
    for i in range(n):
        xi, yi = vertices[i]
        xj, yj = vertices[j]
        if (yi < fy <= yj) or (yj < fy <= yi):
            nodes.append(xi + (fy - yi) / (yj - yi) * (xj - xi))
            if len(nodes) > capacity:
                raise PolygonOverflowError(len(nodes), capacity, y=y)
        j = i
    _insertion_sort(nodes)
    return nodes


def scanline_spans(nodes: Sequence[float]) -> List[Tuple[int, int]]:
    """Pair sorted intercepts into inclusive pixel spans.

    Each pair ``(a, b)`` covers x from ``floor(a) + 1`` to ``ceil(b) - 1``,
    i.e. only the pixels strictly between the two crossings. A trailing
    unpaired intercept is ignored; empty spans are dropped.
    """
    spans: List[Tuple[int, int]] = []
    for a, b in zip(nodes[0::2], nodes[1::2]):
        start = int(floor(a)) + 1
        stop = int(ceil(b)) - 1
        if start <= stop:
            spans.append((start, stop))
    return spans


def stroke_polygon(canvas: Canvas, vertices: Sequence[Vertex]) -> None:
    """Draw every edge of the closed polygon with rounded endpoints."""
    n = len(vertices)
    for i in range(n):
        x0, y0 = vertices[i]
        x1, y1 = vertices[(i + 1) % n]
        draw_line(
            canvas,
            round_half_away(x0),
            round_half_away(y0),
            round_half_away(x1),
            round_half_away(y1),
        )


def fill_polygon(
    canvas: Canvas,
    vertices: Sequence[Vertex],
    height: int,
    capacity: int = MAX_POLYGON_VERTICES,
) -> None:
    """Fill a polygon over a field of *height* rows, then re-stroke its edges.

    Scanlines run over ``[-height // 2, height // 2)``. Interior pixels are
    written with :meth:`Canvas.fill_pixel`, edges with
    :meth:`Canvas.draw_pixel`.

    Raises:
        PolygonOverflowError: A scanline produced more than *capacity*
            intercepts. Nothing is re-stroked in that case.
    """
    if not vertices:
        return
    half = height // 2
    for y in range(-half, half):
        nodes = scanline_intercepts(vertices, y, capacity)
        for start, stop in scanline_spans(nodes):
            for x in range(start, stop + 1):
                canvas.fill_pixel(x, y)
    logger.debug("filled polygon with %d vertices", len(vertices))
    stroke_polygon(canvas, vertices)
