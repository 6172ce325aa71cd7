"""Drawing-surface protocol shared by the rasterizers.

The rasterizers in :mod:`pixelturtle.render.raster` and
:mod:`pixelturtle.render.polygon` only need two primitives: plot a pixel in
the stroke color and plot a pixel in the fill color. Anything implementing
this protocol (the :class:`~pixelturtle.core.turtle.Turtle` engine, or a
recording fake in tests) can be drawn on.
"""

from __future__ import annotations

from typing import Protocol


class Canvas(Protocol):
    def draw_pixel(self, x: int, y: int) -> None:
        ...

    def fill_pixel(self, x: int, y: int) -> None:
        ...
