"""Turtle graphics engine over a fixed-size RGB field.

A :class:`Turtle` owns one :class:`~pixelturtle.render.pixel_buffer.PixelBuffer`
and one pose. Moving with the pen down strokes a line from the old position
to the new one; while filling, every pen-down destination is also recorded
as a polygon vertex and :meth:`Turtle.end_fill` scanline-fills the result.

Coordinates are centered: ``(0, 0)`` is the middle of the field, +x is to
the right and +y is up. Heading 0 faces right and 90 faces up.

Example::

    from pixelturtle import Turtle

    with Turtle(200, 200) as t:
        t.set_fill_color(255, 0, 0)
        t.begin_fill()
        for _ in range(4):
            t.forward(50)
            t.turn_left(90)
        t.end_fill()
        t.save_bitmap("square.bmp")

The engine is single-threaded and synchronous; nothing here is locked.
"""

from __future__ import annotations

import logging
import math
from os import PathLike
from pathlib import Path
from typing import TYPE_CHECKING, List, Optional, Tuple, Union

from pixelturtle.core.errors import EngineClosedError, PolygonOverflowError
from pixelturtle.core.models import WHITE, Color, TurtleState, normalize_heading
from pixelturtle.export.bmp import write_bmp
from pixelturtle.export.video import DEFAULT_FRAME_PATTERN, FrameSequencer
from pixelturtle.render import digits, raster
from pixelturtle.render.pixel_buffer import PixelBuffer
from pixelturtle.render.polygon import MAX_POLYGON_VERTICES, fill_polygon
from pixelturtle.render.raster import round_half_away
from pixelturtle.render.turtle_icon import TurtleIconRenderer

if TYPE_CHECKING:  # pragma: no cover
    from pixelturtle.config import EngineConfig

__all__ = ["Turtle", "OOB_REPORT_LIMIT"]

logger = logging.getLogger(__name__)

OOB_REPORT_LIMIT = 100

StrPath = Union[str, PathLike]


def _rgb(red: int, green: int, blue: int) -> Color:
    # truncate to 8 bits like an unsigned char store
    return (int(red) & 0xFF, int(green) & 0xFF, int(blue) & 0xFF)


class Turtle:
    """Turtle state machine, rasterizer front-end and bitmap exporter."""

    def __init__(
        self,
        width: int,
        height: int,
        *,
        frame_dir: StrPath = ".",
        frame_pattern: str = DEFAULT_FRAME_PATTERN,
        frame_interval: int = 10,
        polygon_capacity: int = MAX_POLYGON_VERTICES,
        oob_report_limit: int = OOB_REPORT_LIMIT,
    ) -> None:
        self._polygon_capacity = int(polygon_capacity)
        self._oob_report_limit = int(oob_report_limit)
        self._video = FrameSequencer(frame_dir, frame_pattern, frame_interval)
        self._buffer: Optional[PixelBuffer] = None
        self._width = 0
        self._height = 0
        self._state = TurtleState()
        self._backup = TurtleState()
        self._vertices: List[Tuple[float, float]] = []
        self._oob_count = 0
        self.reinit(width, height)

    @classmethod
    def from_config(cls, cfg: "EngineConfig") -> "Turtle":
        return cls(
            cfg.width,
            cfg.height,
            frame_dir=cfg.frame_dir,
            frame_pattern=cfg.frame_pattern,
            frame_interval=cfg.frame_interval,
            polygon_capacity=cfg.polygon_capacity,
            oob_report_limit=cfg.oob_report_limit,
        )

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    def reinit(self, width: int, height: int) -> None:
        """Replace the field with a fresh white one and reset everything.

        The previous buffer is released, video is disabled, the
        out-of-bounds counter and the backup slot are cleared and the
        turtle returns to its default pose.
        """
        self._buffer = None
        self._buffer = PixelBuffer(width, height)
        self._width = self._buffer.width
        self._height = self._buffer.height
        self._oob_count = 0
        self._video.end()
        self._backup = TurtleState()
        self.reset()

    def close(self) -> None:
        """Release the pixel buffer. Safe to call more than once."""
        self._buffer = None
        self._video.end()

    @property
    def closed(self) -> bool:
        return self._buffer is None

    def __enter__(self) -> "Turtle":
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    @property
    def buffer(self) -> PixelBuffer:
        if self._buffer is None:
            raise EngineClosedError("turtle field has been released")
        return self._buffer

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def state(self) -> TurtleState:
        return self._state

    @property
    def x(self) -> float:
        return self._state.x

    @property
    def y(self) -> float:
        return self._state.y

    def get_x(self) -> float:
        return self._state.x

    def get_y(self) -> float:
        return self._state.y

    @property
    def heading(self) -> float:
        return self._state.heading

    @property
    def vertices(self) -> Tuple[Tuple[float, float], ...]:
        """Polygon vertices recorded since :meth:`begin_fill`."""
        return tuple(self._vertices)

    @property
    def out_of_bounds_count(self) -> int:
        return self._oob_count

    @property
    def video(self) -> FrameSequencer:
        return self._video

    def get_pixel(self, x: int, y: int) -> Color:
        return self.buffer.get(x, y)

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------
    def _update(self, **changes: object) -> None:
        self._state = self._state.model_copy(update=changes)

    def reset(self) -> None:
        """Return to the default pose: origin, heading 0, black pen, green
        fill, pen down, not filling."""
        self._state = TurtleState()
        self._vertices = []

    def backup(self) -> TurtleState:
        """Copy the current state into the backup slot and return it."""
        self._backup = self._state
        return self._backup

    def restore(self, state: Optional[TurtleState] = None) -> None:
        """Make *state* (default: the backup slot) the current state.

        Restoring before any :meth:`backup` yields the default pose.
        """
        self._state = self._backup if state is None else state

    def pen_up(self) -> None:
        self._update(pen_down=False)

    def pen_down(self) -> None:
        self._update(pen_down=True)

    def set_heading(self, angle: float) -> None:
        self._update(heading=normalize_heading(angle))

    def set_pen_color(self, red: int, green: int, blue: int) -> None:
        self._update(pen_color=_rgb(red, green, blue))

    def set_fill_color(self, red: int, green: int, blue: int) -> None:
        self._update(fill_color=_rgb(red, green, blue))

    # ------------------------------------------------------------------
    # Movement
    # ------------------------------------------------------------------
    def go_to(self, x: float, y: float) -> None:
        """Move to *(x, y)*, stroking a line when the pen is down.

        Accepts ints or floats. While filling with the pen down the
        destination is recorded as a polygon vertex (extra vertices past
        the polygon capacity are dropped).
        """
        st = self._state
        if st.pen_down:
            self.draw_line(
                round_half_away(st.x),
                round_half_away(st.y),
                round_half_away(x),
                round_half_away(y),
            )
        self._update(x=float(x), y=float(y))
        if (
            st.filling
            and st.pen_down
            and len(self._vertices) < self._polygon_capacity
        ):
            self._vertices.append((float(x), float(y)))

    def forward(self, pixels: float) -> None:
        radians = self._state.heading * math.pi / 180.0
        dx = math.cos(radians) * pixels
        dy = math.sin(radians) * pixels
        self.go_to(self._state.x + dx, self._state.y + dy)

    def backward(self, pixels: float) -> None:
        self.forward(-pixels)

    def turn_left(self, angle: float) -> None:
        self._update(heading=normalize_heading(self._state.heading + angle))

    def turn_right(self, angle: float) -> None:
        self.turn_left(-angle)

    def strafe_left(self, pixels: float) -> None:
        """Move sideways to the left, keeping the current heading."""
        self.turn_left(90)
        self.forward(pixels)
        self.turn_right(90)

    def strafe_right(self, pixels: float) -> None:
        self.turn_right(90)
        self.forward(pixels)
        self.turn_left(90)

    # ------------------------------------------------------------------
    # Filling
    # ------------------------------------------------------------------
    def begin_fill(self) -> None:
        """Start recording polygon vertices for :meth:`end_fill`."""
        self._update(filling=True)
        self._vertices = []

    def end_fill(self) -> None:
        """Fill the recorded polygon with the fill color and re-stroke it.

        Filling stops and the vertex list is consumed even if the fill
        fails.

        Raises:
            PolygonOverflowError: The vertex capacity was exceeded or a
                scanline produced more intercepts than it allows.
        """
        vertices = self._vertices
        self._vertices = []
        self._update(filling=False)
        if len(vertices) > self._polygon_capacity:
            raise PolygonOverflowError(
                len(vertices), self._polygon_capacity, what="vertices"
            )
        fill_polygon(self, vertices, self._height, self._polygon_capacity)

    # ------------------------------------------------------------------
    # Pixels and shapes
    # ------------------------------------------------------------------
    def dot(self) -> None:
        """Draw one pen-color pixel at the current position, pen or not."""
        self.draw_pixel(
            round_half_away(self._state.x), round_half_away(self._state.y)
        )

    def draw_pixel(self, x: int, y: int) -> None:
        """Plot *(x, y)* in the pen color.

        Points outside the field are dropped and counted; only the first
        ``oob_report_limit`` of them are logged. Each plotted pixel also
        advances the video frame counter.
        """
        buf = self.buffer
        if not buf.in_field(x, y):
            self._oob_count += 1
            if self._oob_count <= self._oob_report_limit:
                logger.warning("pixel out of bounds: (%d,%d)", x, y)
            return
        buf.set(x, y, self._state.pen_color)
        self._video.on_pixel(buf)

    def fill_pixel(self, x: int, y: int) -> None:
        """Plot *(x, y)* in the fill color; points off the array are dropped."""
        self.buffer.set(x, y, self._state.fill_color)

    def clear(self, color: Color = WHITE) -> None:
        self.buffer.clear(color)

    def draw_line(self, x0: int, y0: int, x1: int, y1: int) -> None:
        """Stroke a line between two points regardless of pose or pen."""
        raster.draw_line(self, int(x0), int(y0), int(x1), int(y1))

    def draw_circle(self, x: int, y: int, radius: int) -> None:
        """Stroke a circle; while filling, the disc is filled first."""
        raster.draw_circle(
            self, int(x), int(y), int(radius), filled=self._state.filling
        )

    def fill_circle(self, *args: int) -> None:
        """Fill a disc in the fill color.

        ``fill_circle(radius)`` centers the disc on the current position
        (truncated toward zero); ``fill_circle(x, y, radius)`` uses an
        explicit center.
        """
        if len(args) == 1:
            cx, cy, radius = int(self._state.x), int(self._state.y), args[0]
        elif len(args) == 3:
            cx, cy, radius = args
        else:
            raise TypeError(
                f"fill_circle() takes (radius) or (x, y, radius), got {len(args)} args"
            )
        raster.fill_circle(self, int(cx), int(cy), int(radius))

    def draw_turtle_icon(self) -> None:
        """Draw a turtle at the current pose; the state is left unchanged."""
        TurtleIconRenderer(self).draw()

    def draw_integer(self, value: int) -> int:
        """Draw a non-negative integer with its top-left at the current position.

        Returns:
            The number of digit glyphs drawn.
        """
        return digits.draw_integer(self, value, self._state.x, self._state.y)

    # ------------------------------------------------------------------
    # Export
    # ------------------------------------------------------------------
    def save_bitmap(self, path: StrPath) -> Path:
        """Write the field to *path* as a 24-bit BMP."""
        return write_bmp(path, self.buffer)

    def begin_video(self, pixels_per_frame: Optional[int] = None) -> None:
        """Emit a numbered frame every *pixels_per_frame* stroke pixels.

        Defaults to the ``frame_interval`` the engine was built with.
        """
        self._video.begin(pixels_per_frame)

    def save_frame(self) -> Path:
        """Write the field as the next numbered frame now."""
        return self._video.save_frame(self.buffer)

    def end_video(self) -> None:
        self._video.end()

    def __repr__(self) -> str:  # pragma: no cover
        status = "closed" if self.closed else f"{self._width}x{self._height}"
        return f"Turtle({status}, {self._state!r})"
