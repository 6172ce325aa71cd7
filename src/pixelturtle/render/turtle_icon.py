"""Turtle icon rendering.

Draws a small top-down turtle at the engine's current pose: four legs, a
head in the direction of travel, and a ringed shell. Every part is a pair of
discs, an outer one in the pen color and an inner one in the fill color that
was active when drawing started. The engine's state (pose, colors, pen,
fill flag) is identical before and after, and its backup slot is untouched.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Tuple

from pixelturtle.core.models import Color

if TYPE_CHECKING:  # pragma: no cover
    from pixelturtle.core.turtle import Turtle

# (forward, strafe-left) offsets of each leg, in pixels
LEG_OFFSETS: Tuple[Tuple[int, int], ...] = ((-7, -7), (-7, 7), (7, -7), (7, 7))
HEAD_OFFSET = 10
LIMB_OUTER_R = 5
LIMB_INNER_R = 3
# inner radii of the shell rings, outermost first; each ring is 2 px wide
SHELL_RADII: Tuple[int, ...] = (9, 5, 1)
SHELL_RING_W = 2


class TurtleIconRenderer:
    def __init__(self, turtle: "Turtle") -> None:
        self.turtle = turtle

    def _disc_pair(self, outer_r: int, inner_r: int, inner_color: Color) -> None:
        t = self.turtle
        t.set_fill_color(*t.state.pen_color)
        t.fill_circle(outer_r)
        t.set_fill_color(*inner_color)
        t.fill_circle(inner_r)

    def draw(self) -> None:
        t = self.turtle
        original = t.state
        inner = original.fill_color
        t.pen_up()
        try:
            for fwd, side in LEG_OFFSETS:
                here = t.state
                t.forward(fwd)
                t.strafe_left(side)
                self._disc_pair(LIMB_OUTER_R, LIMB_INNER_R, inner)
                t.restore(here)

            here = t.state
            t.forward(HEAD_OFFSET)
            self._disc_pair(LIMB_OUTER_R, LIMB_INNER_R, inner)
            t.restore(here)

            for r in SHELL_RADII:
                self._disc_pair(r + SHELL_RING_W, r, inner)
        finally:
            t.restore(original)
