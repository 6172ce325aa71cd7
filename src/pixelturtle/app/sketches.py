"""Built-in demo sketches used by ``pixelturtle demo``.

Each sketch draws onto an existing :class:`~pixelturtle.core.turtle.Turtle`
and assumes the default pose. They are sized for a 200x200 field but work
on any field (out-of-range pixels are simply dropped).
"""

from __future__ import annotations

from typing import Callable, Dict

from pixelturtle.core.turtle import Turtle

Sketch = Callable[[Turtle], None]


def square(t: Turtle) -> None:
    t.set_fill_color(255, 200, 0)
    t.pen_up()
    t.go_to(-40, -40)
    t.pen_down()
    t.begin_fill()
    for _ in range(4):
        t.forward(80)
        t.turn_left(90)
    t.end_fill()


def star(t: Turtle) -> None:
    t.set_pen_color(0, 0, 128)
    t.set_fill_color(255, 255, 0)
    t.pen_up()
    t.go_to(-60, 20)
    t.pen_down()
    t.begin_fill()
    for _ in range(5):
        t.forward(120)
        t.turn_right(144)
    t.end_fill()


def circles(t: Turtle) -> None:
    t.set_fill_color(0, 128, 255)
    for r in range(10, 90, 10):
        t.draw_circle(0, 0, r)
    t.begin_fill()
    t.draw_circle(0, 0, 8)
    t.end_fill()


def spiral(t: Turtle) -> None:
    t.set_pen_color(200, 0, 0)
    for step in range(1, 120):
        t.forward(step * 0.75)
        t.turn_left(29)


def digits(t: Turtle) -> None:
    t.pen_up()
    for row, value in enumerate((0, 7, 42, 123, 9876)):
        t.go_to(-40, 40 - row * 10)
        t.draw_integer(value)


def icon(t: Turtle) -> None:
    t.set_pen_color(0, 100, 0)
    t.set_fill_color(120, 200, 80)
    for heading in (0, 90, 180, 270):
        t.pen_up()
        t.go_to(0, 0)
        t.set_heading(heading)
        t.forward(50)
        t.draw_turtle_icon()


SKETCHES: Dict[str, Sketch] = {
    "square": square,
    "star": star,
    "circles": circles,
    "spiral": spiral,
    "digits": digits,
    "icon": icon,
}
