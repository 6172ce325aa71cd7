from __future__ import annotations

import pytest
from pydantic import ValidationError

from pixelturtle.core.models import BLACK, GREEN, TurtleState, normalize_heading


@pytest.mark.parametrize(
    "deg,expected",
    [
        (0.0, 0.0),
        (370.0, 10.0),
        (360.0, 0.0),
        (-90.0, 270.0),
        (-720.0, 0.0),
        (725.5, 5.5),
    ],
)
def test_normalize_heading(deg: float, expected: float) -> None:
    assert normalize_heading(deg) == pytest.approx(expected)


def test_normalize_heading_tiny_negative_stays_below_360() -> None:
    h = normalize_heading(-1e-20)
    assert 0.0 <= h < 360.0


def test_state_defaults() -> None:
    s = TurtleState()
    assert (s.x, s.y, s.heading) == (0.0, 0.0, 0.0)
    assert s.pen_color == BLACK
    assert s.fill_color == GREEN
    assert s.pen_down is True
    assert s.filling is False


def test_state_is_frozen() -> None:
    s = TurtleState()
    with pytest.raises(ValidationError):
        s.x = 5.0  # type: ignore[misc]


def test_state_validates_heading_on_construction() -> None:
    assert TurtleState(heading=450.0).heading == 90.0
