from __future__ import annotations

import hypothesis.strategies as st
import pytest
from hypothesis import given, settings

from pixelturtle.core.turtle import Turtle
from pixelturtle.render.raster import (
    circle_points,
    disc_points,
    draw_circle,
    line_points,
    round_half_away,
)

coord = st.integers(min_value=-60, max_value=60)


class RecordingCanvas:
    def __init__(self) -> None:
        self.drawn: list[tuple[int, int]] = []
        self.filled: list[tuple[int, int]] = []

    def draw_pixel(self, x: int, y: int) -> None:
        self.drawn.append((x, y))

    def fill_pixel(self, x: int, y: int) -> None:
        self.filled.append((x, y))


@pytest.mark.parametrize(
    "v,expected",
    [
        (0.0, 0),
        (2.4, 2),
        (2.5, 3),
        (3.5, 4),
        (-2.5, -3),
        (-0.4, 0),
        (-7.6, -8),
        (0.49999999999999994, 0),
        (-0.49999999999999994, 0),
        (1.4999999999999998, 1),
        (-1.5, -2),
    ],
)
def test_round_half_away(v: float, expected: int) -> None:
    assert round_half_away(v) == expected


def test_dot_just_below_half_stays_on_pixel(turtle: Turtle, painted) -> None:
    turtle.pen_up()
    turtle.go_to(0.49999999999999994, -0.49999999999999994)
    turtle.dot()
    assert set(painted(turtle)) == {(0, 0)}


def test_horizontal_line_paints_six_pixels() -> None:
    assert list(line_points(0, 0, 5, 0)) == [(x, 0) for x in range(6)]


def test_line_on_turtle_paints_exactly_endpoints_span(turtle: Turtle, painted) -> None:
    turtle.draw_line(0, 0, 5, 0)
    assert set(painted(turtle)) == {(x, 0) for x in range(6)}


def test_single_point_line() -> None:
    assert list(line_points(3, -2, 3, -2)) == [(3, -2)]


def test_shallow_line_matches_bresenham() -> None:
    # err starts at 5 // 2 = 2 and loses 2 per step
    assert list(line_points(0, 0, 5, 2)) == [
        (0, 0),
        (1, 0),
        (2, 1),
        (3, 1),
        (4, 2),
        (5, 2),
    ]


def test_diagonal_tie_walks_y_axis() -> None:
    assert list(line_points(0, 0, 3, -3)) == [(0, 0), (1, -1), (2, -2), (3, -3)]


def test_reverse_direction() -> None:
    assert list(line_points(2, 0, -2, 0)) == [(2, 0), (1, 0), (0, 0), (-1, 0), (-2, 0)]


@settings(deadline=None, max_examples=150)
@given(x0=coord, y0=coord, x1=coord, y1=coord)
def test_line_is_connected_and_ends_on_target(x0: int, y0: int, x1: int, y1: int) -> None:
    pts = list(line_points(x0, y0, x1, y1))
    assert pts[0] == (x0, y0)
    assert pts[-1] == (x1, y1)
    assert len(pts) == max(abs(x1 - x0), abs(y1 - y0)) + 1
    for (ax, ay), (bx, by) in zip(pts, pts[1:]):
        assert max(abs(ax - bx), abs(ay - by)) == 1


def test_circle_octant_walk() -> None:
    first_octant = [(x, y) for x, y in list(circle_points(0, 0, 10))[0::8]]
    assert first_octant == [
        (10, 0),
        (10, 1),
        (10, 2),
        (10, 3),
        (9, 4),
        (9, 5),
        (8, 6),
        (7, 7),
    ]


@pytest.mark.parametrize("radius", [1, 5, 10, 17])
def test_circle_is_eightfold_symmetric(radius: int) -> None:
    pts = set(circle_points(0, 0, radius))
    for x, y in pts:
        for p in ((y, x), (-x, y), (x, -y), (-x, -y), (-y, x), (y, -x), (-y, -x)):
            assert p in pts


def test_circle_points_stay_near_radius() -> None:
    for x, y in circle_points(0, 0, 10):
        assert abs(x * x + y * y - 100) <= 10


def test_circle_offset_center() -> None:
    pts = set(circle_points(3, -4, 6))
    assert (9, -4) in pts
    assert (3, 2) in pts
    assert (-3, -4) in pts
    assert (3, -10) in pts


def test_disc_is_strictly_inside_half_open_box() -> None:
    pts = set(disc_points(0, 0, 3))
    assert (0, 0) in pts
    assert (-2, 2) in pts
    # squared distance 9 is not < 9
    assert (-3, 0) not in pts
    assert (0, -3) not in pts
    assert all(-3 <= x < 3 and -3 <= y < 3 for x, y in pts)
    assert all(x * x + y * y < 9 for x, y in pts)


def test_draw_circle_fills_before_outline() -> None:
    c = RecordingCanvas()
    draw_circle(c, 0, 0, 4, filled=True)
    assert set(c.filled) == set(disc_points(0, 0, 4))
    assert set(c.drawn) == set(circle_points(0, 0, 4))


def test_draw_circle_unfilled_only_strokes() -> None:
    c = RecordingCanvas()
    draw_circle(c, 0, 0, 4)
    assert c.filled == []


def test_turtle_circle_uses_fill_mode(turtle: Turtle) -> None:
    turtle.set_fill_color(255, 0, 0)
    turtle.begin_fill()
    turtle.draw_circle(0, 0, 6)
    assert turtle.get_pixel(0, 0) == (255, 0, 0)
    assert turtle.get_pixel(6, 0) == (0, 0, 0)


def test_fill_circle_overloads(turtle: Turtle, painted) -> None:
    turtle.set_fill_color(0, 0, 255)
    turtle.fill_circle(5, 5, 2)
    absolute = set(painted(turtle))
    assert absolute == set(disc_points(5, 5, 2))

    turtle.clear()
    turtle.pen_up()
    turtle.go_to(5.9, 5.9)
    turtle.fill_circle(2)
    assert set(painted(turtle)) == absolute

    with pytest.raises(TypeError):
        turtle.fill_circle(1, 2)
