from __future__ import annotations

from typing import Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

# (red, green, blue); channels are 0..255 and not range-checked
Color = Tuple[int, int, int]

BLACK: Color = (0, 0, 0)
WHITE: Color = (255, 255, 255)
GREEN: Color = (0, 255, 0)


def normalize_heading(deg: float) -> float:
    """Map an angle in degrees into [0, 360)."""
    h = float(deg) % 360.0
    # -tiny % 360.0 rounds up to exactly 360.0
    if h >= 360.0:
        h = 0.0
    return h


class TurtleState(BaseModel):
    """
    Immutable snapshot of the turtle's pose and drawing style.
    The engine keeps one current and one backup snapshot; callers may hold
    and pass back any number of their own.
    """

    model_config = ConfigDict(frozen=True)

    x: float = 0.0
    y: float = 0.0
    heading: float = Field(0.0, description="Degrees CCW from +x, in [0, 360)")
    pen_color: Color = BLACK
    fill_color: Color = GREEN
    pen_down: bool = True
    filling: bool = False

    @field_validator("heading")
    @classmethod
    def _normalize_heading(cls, v: float) -> float:
        return normalize_heading(v)

    def __repr__(self) -> str:  # pragma: no cover
        pen = "down" if self.pen_down else "up"
        return (
            f"TurtleState(({self.x:.2f}, {self.y:.2f}) @ {self.heading:.1f}deg, "
            f"pen {pen})"
        )
