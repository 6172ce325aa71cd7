"""Periodic frame snapshots for building animations.

While enabled, the sequencer is told about every stroke pixel the engine
draws. Each time the running pixel count (checked before it is incremented)
is a multiple of the configured interval, the whole field is written out as
the next numbered bitmap, so the very first pixel always produces frame 1.

Frame files are named from a printf-style pattern, ``frame%05d.bmp`` by
default, inside the configured frame directory::

    frames/frame00001.bmp
    frames/frame00002.bmp
    ...

Stitching them into a video is left to external tools (e.g. ffmpeg).
"""

from __future__ import annotations

import logging
from os import PathLike
from pathlib import Path
from typing import Optional, Union

from pixelturtle.export.bmp import write_bmp
from pixelturtle.render.pixel_buffer import PixelBuffer

__all__ = ["DEFAULT_FRAME_PATTERN", "FrameSequencer"]

logger = logging.getLogger(__name__)

DEFAULT_FRAME_PATTERN = "frame%05d.bmp"


class FrameSequencer:
    """Tracks drawn pixels and emits numbered frames at a fixed interval."""

    def __init__(
        self,
        frame_dir: Union[str, PathLike] = ".",
        pattern: str = DEFAULT_FRAME_PATTERN,
        interval: int = 10,
    ) -> None:
        """Initialize a disabled sequencer.

        Args:
            frame_dir: Directory frames are written into
            pattern: printf-style file name taking the frame number
            interval: Pixels per frame used when :meth:`begin` is called
                without one
        """
        self.frame_dir = Path(frame_dir)
        self.pattern = pattern
        self.default_interval = int(interval)
        self.interval = self.default_interval
        self.enabled = False
        self.frame_count = 0
        self.pixel_count = 0

    def begin(self, interval: Optional[int] = None) -> None:
        """Enable emission every *interval* pixels and reset both counters.

        Without *interval* the configured default is used.
        """
        interval = self.default_interval if interval is None else int(interval)
        if interval < 1:
            raise ValueError(f"pixels per frame must be >= 1, got {interval}")
        self.enabled = True
        self.frame_count = 0
        self.interval = interval
        self.pixel_count = 0
        logger.debug("video enabled: one frame per %d pixels", interval)

    def end(self) -> None:
        """Stop emitting frames. Counters keep their values."""
        self.enabled = False

    def next_path(self) -> Path:
        return self.frame_dir / (self.pattern % (self.frame_count + 1))

    def save_frame(self, buffer: PixelBuffer) -> Path:
        """Write *buffer* as the next numbered frame and return its path."""
        path = self.next_path()
        self.frame_count += 1
        write_bmp(path, buffer)
        logger.debug("saved frame %d to %s", self.frame_count, path)
        return path

    def on_pixel(self, buffer: PixelBuffer) -> Path | None:
        """Count one drawn pixel; emit a frame when the interval is hit."""
        if not self.enabled:
            return None
        due = self.pixel_count % self.interval == 0
        self.pixel_count += 1
        if due:
            return self.save_frame(buffer)
        return None
