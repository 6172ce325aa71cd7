"""Owned RGB pixel grid addressed by centered coordinates.

The grid is a single row-major ``bytearray`` holding ``width * height`` RGB
triples. Row 0 is the bottom of the image (``y = -height // 2``), which is
also the row order of a bottom-up BMP, so the encoder can stream rows
without reordering.

Two bounds checks exist, matching the two ways pixels are written:

- :meth:`PixelBuffer.in_field` tests the centered range
  ``[-width//2, width//2] x [-height//2, height//2]`` (inclusive on both
  ends). Stroke writes are gated on it.
- :meth:`PixelBuffer.index_of` maps a coordinate to a flat index and returns
  ``None`` when the index falls outside the array. Every write is gated on
  it. On even-sized fields the inclusive right edge maps onto the first
  pixel of the next row; that is part of the addressing scheme.
"""

from __future__ import annotations

from typing import Iterator

from pixelturtle.core.errors import BufferAllocationError
from pixelturtle.core.models import WHITE, Color

__all__ = ["PixelBuffer"]


class PixelBuffer:
    """Fixed-size RGB field. Dimensions never change after construction."""

    __slots__ = ("_width", "_height", "_half_w", "_half_h", "_data")

    def __init__(self, width: int, height: int, color: Color = WHITE) -> None:
        width = int(width)
        height = int(height)
        if width <= 0 or height <= 0:
            raise ValueError(f"field size must be positive, got {width}x{height}")
        self._width = width
        self._height = height
        self._half_w = width // 2
        self._half_h = height // 2
        try:
            self._data = bytearray(bytes(color) * (width * height))
        except MemoryError as exc:
            raise BufferAllocationError(
                f"can't allocate memory for {width}x{height} turtle image"
            ) from exc

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def data(self) -> bytearray:
        """Raw RGB bytes, bottom row first."""
        return self._data

    def in_field(self, x: int, y: int) -> bool:
        return (
            -self._half_w <= x <= self._half_w and -self._half_h <= y <= self._half_h
        )

    def index_of(self, x: int, y: int) -> int | None:
        """Return the pixel index for *(x, y)* or ``None`` outside the array."""
        idx = self._width * (y + self._half_h) + (x + self._half_w)
        if 0 <= idx < self._width * self._height:
            return idx
        return None

    def set(self, x: int, y: int, color: Color) -> bool:
        """Write *color* at *(x, y)*; return False if the index is dropped."""
        idx = self.index_of(x, y)
        if idx is None:
            return False
        off = 3 * idx
        self._data[off : off + 3] = bytes(color)
        return True

    def get(self, x: int, y: int) -> Color:
        idx = self.index_of(x, y)
        if idx is None:
            raise IndexError(f"pixel ({x},{y}) is outside the field")
        off = 3 * idx
        r, g, b = self._data[off : off + 3]
        return (r, g, b)

    def clear(self, color: Color = WHITE) -> None:
        self._data[:] = bytes(color) * (self._width * self._height)

    def rows(self) -> Iterator[memoryview]:
        """Yield each row's RGB bytes, bottom row first."""
        stride = 3 * self._width
        view = memoryview(self._data)
        for start in range(0, len(self._data), stride):
            yield view[start : start + stride]

    def __repr__(self) -> str:  # pragma: no cover
        return f"PixelBuffer({self._width}x{self._height})"
