from __future__ import annotations

from pixelturtle.core.models import WHITE
from pixelturtle.core.turtle import Turtle
from pixelturtle.render.turtle_icon import TurtleIconRenderer

PEN = (0, 90, 0)
SHELL = (120, 200, 80)


def _prepare(t: Turtle) -> None:
    t.set_pen_color(*PEN)
    t.set_fill_color(*SHELL)


def test_icon_leaves_state_and_backup_alone(turtle: Turtle) -> None:
    _prepare(turtle)
    turtle.set_heading(30)
    turtle.begin_fill()
    slot = turtle.backup()
    turtle.pen_up()
    turtle.go_to(1.5, -2.5)
    before = turtle.state

    turtle.draw_turtle_icon()

    assert turtle.state == before
    turtle.restore()
    assert turtle.state == slot


def test_icon_shell_rings_alternate(turtle: Turtle) -> None:
    _prepare(turtle)
    turtle.draw_turtle_icon()
    assert turtle.get_pixel(0, 0) == SHELL
    assert turtle.get_pixel(2, 0) == PEN
    assert turtle.get_pixel(4, 0) == SHELL
    assert turtle.get_pixel(6, 0) == PEN
    assert turtle.get_pixel(8, 0) == SHELL
    assert turtle.get_pixel(10, 0) == PEN


def test_icon_head_faces_heading(turtle: Turtle) -> None:
    _prepare(turtle)
    turtle.draw_turtle_icon()
    assert turtle.get_pixel(12, 0) == SHELL
    assert turtle.get_pixel(14, 0) == PEN
    assert turtle.get_pixel(15, 0) == WHITE
    assert turtle.get_pixel(-12, 0) == WHITE

    turtle.clear()
    turtle.set_heading(90)
    turtle.draw_turtle_icon()
    assert turtle.get_pixel(0, 12) == SHELL
    assert turtle.get_pixel(12, 0) == WHITE


def test_icon_has_legs(turtle: Turtle) -> None:
    _prepare(turtle)
    turtle.draw_turtle_icon()
    assert turtle.get_pixel(-10, -9) == PEN
    assert turtle.get_pixel(-10, 9) == PEN
    assert turtle.get_pixel(9, -10) == PEN


def test_each_draw_uses_current_fill(turtle: Turtle) -> None:
    renderer = TurtleIconRenderer(turtle)
    _prepare(turtle)
    renderer.draw()
    assert turtle.get_pixel(0, 0) == SHELL

    turtle.set_fill_color(200, 0, 0)
    renderer.draw()
    assert turtle.get_pixel(0, 0) == (200, 0, 0)
    assert turtle.get_pixel(2, 0) == PEN
    assert turtle.state.fill_color == (200, 0, 0)
