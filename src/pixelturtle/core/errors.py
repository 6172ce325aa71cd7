"""Exception hierarchy for the turtle engine.

Every condition that would otherwise abort a drawing session derives from
:class:`TurtleError` so callers (and the CLI) can catch them in one place
while still telling them apart.
"""

from __future__ import annotations

__all__ = [
    "TurtleError",
    "BufferAllocationError",
    "BitmapWriteError",
    "BitmapFormatError",
    "PolygonOverflowError",
    "EngineClosedError",
]


class TurtleError(Exception):
    """Base class for all engine errors."""


class BufferAllocationError(TurtleError, MemoryError):
    """The pixel buffer or a bitmap scratch row could not be allocated."""


class BitmapWriteError(TurtleError, OSError):
    """A bitmap could not be written to its destination path."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"could not write to file: {path} ({reason})")
        self.path = path
        self.reason = reason


class BitmapFormatError(TurtleError, ValueError):
    """A file is not a 24-bit uncompressed bitmap this package can read."""


class PolygonOverflowError(TurtleError):
    """A polygon produced more scanline intercepts than the fill can hold.

    This signals malformed or pathological polygon input; the fill is
    aborted rather than truncated.
    """

    def __init__(
        self, count: int, capacity: int, y: int | None = None, what: str = "intercepts"
    ) -> None:
        where = f" on scanline y={y}" if y is not None else ""
        super().__init__(
            f"too many {what} in fill algorithm{where}: {count} > {capacity}"
        )
        self.count = count
        self.capacity = capacity
        self.y = y


class EngineClosedError(TurtleError):
    """The engine's pixel buffer has been released."""
