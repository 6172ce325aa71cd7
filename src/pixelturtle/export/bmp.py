"""24-bit uncompressed BMP writer and reader.

File layout written by :func:`write_bmp` (all integers little-endian)::

    offset size field
    0      2    "BM"
    2      4    file size
    6      4    reserved (0)
    10     4    pixel data offset (54)
    14     4    info header size (40)
    18     4    width
    22     4    height (positive: rows stored bottom-up)
    26     2    planes (1)
    28     2    bits per pixel (24)
    30     4    compression (0)
    34     4    image data size
    38     16   x/y resolution, palette size, important colors (all 0)
    54     ...  rows, each BGR triples zero-padded to a multiple of 4 bytes

:func:`read_bmp` accepts that layout with either height sign and returns the
pixels bottom-up in RGB order, which is the layout of
:class:`~pixelturtle.render.pixel_buffer.PixelBuffer`.
"""

from __future__ import annotations

import logging
import struct
from dataclasses import dataclass
from os import PathLike
from pathlib import Path
from typing import BinaryIO, Iterable, Union

from pixelturtle.core.errors import (
    BitmapFormatError,
    BitmapWriteError,
    BufferAllocationError,
)
from pixelturtle.core.models import Color
from pixelturtle.render.pixel_buffer import PixelBuffer

__all__ = [
    "HEADER_SIZE",
    "BmpHeader",
    "Bitmap",
    "row_stride",
    "encode_header",
    "encode_rows",
    "write_bmp",
    "read_bmp",
]

logger = logging.getLogger(__name__)

StrPath = Union[str, PathLike]

FILE_HEADER_SIZE = 14
INFO_HEADER_SIZE = 40
HEADER_SIZE = FILE_HEADER_SIZE + INFO_HEADER_SIZE
_HEADER = struct.Struct("<2sIIIIiiHHIIiiII")


def row_stride(width: int) -> int:
    """Bytes per stored row: 3 per pixel, rounded up to a multiple of 4."""
    return (3 * width + 3) // 4 * 4


@dataclass(frozen=True, slots=True)
class BmpHeader:
    width: int
    height: int
    file_size: int
    data_offset: int = HEADER_SIZE
    planes: int = 1
    bit_count: int = 24
    compression: int = 0
    image_size: int = 0

    @property
    def top_down(self) -> bool:
        return self.height < 0


@dataclass(frozen=True, slots=True)
class Bitmap:
    """Decoded bitmap: RGB bytes, bottom row first."""

    header: BmpHeader
    pixels: bytes

    @property
    def width(self) -> int:
        return self.header.width

    @property
    def height(self) -> int:
        return abs(self.header.height)

    def pixel(self, col: int, row: int) -> Color:
        """RGB at column *col* of row *row* (row 0 is the bottom)."""
        off = 3 * (row * self.width + col)
        r, g, b = self.pixels[off : off + 3]
        return (r, g, b)


def encode_header(width: int, height: int) -> bytes:
    stride = row_stride(width)
    image_size = stride * height
    return _HEADER.pack(
        b"BM",
        HEADER_SIZE + image_size,
        0,
        HEADER_SIZE,
        INFO_HEADER_SIZE,
        width,
        height,
        1,
        24,
        0,
        image_size,
        0,
        0,
        0,
        0,
    )


def encode_rows(rows: Iterable[memoryview], width: int) -> Iterable[bytes]:
    """Convert RGB rows into padded BGR rows, reusing one scratch buffer."""
    stride = row_stride(width)
    n = 3 * width
    try:
        line = bytearray(stride)
    except MemoryError as exc:
        raise BufferAllocationError("can't allocate memory for BMP row") from exc
    for row in rows:
        rgb = bytes(row)
        line[0:n:3] = rgb[2::3]
        line[1:n:3] = rgb[1::3]
        line[2:n:3] = rgb[0::3]
        yield bytes(line)


def _write_stream(fh: BinaryIO, buffer: PixelBuffer) -> None:
    fh.write(encode_header(buffer.width, buffer.height))
    for line in encode_rows(buffer.rows(), buffer.width):
        fh.write(line)


def write_bmp(path: StrPath, buffer: PixelBuffer) -> Path:
    """Serialize *buffer* to *path* as a bottom-up 24-bit BMP.

    Raises:
        BitmapWriteError: The file cannot be opened or written.
        BufferAllocationError: The row scratch buffer cannot be allocated.
    """
    out = Path(path)
    try:
        with out.open("wb") as fh:
            _write_stream(fh, buffer)
    except OSError as exc:
        raise BitmapWriteError(str(out), exc.strerror or str(exc)) from exc
    logger.debug("wrote %dx%d bitmap to %s", buffer.width, buffer.height, out)
    return out


def _parse_header(raw: bytes) -> BmpHeader:
    if len(raw) < HEADER_SIZE:
        raise BitmapFormatError("file too short for a BMP header")
    (
        magic,
        file_size,
        _reserved,
        offset,
        info_size,
        width,
        height,
        planes,
        bit_count,
        compression,
        image_size,
        _xppm,
        _yppm,
        _clr_used,
        _clr_important,
    ) = _HEADER.unpack_from(raw)
    if magic != b"BM":
        raise BitmapFormatError(f"bad magic {magic!r}")
    if info_size < INFO_HEADER_SIZE:
        raise BitmapFormatError(f"unsupported info header size {info_size}")
    if bit_count != 24 or compression != 0:
        raise BitmapFormatError(
            f"only 24-bit uncompressed bitmaps are supported "
            f"(bits={bit_count}, compression={compression})"
        )
    if width <= 0 or height == 0:
        raise BitmapFormatError(f"bad dimensions {width}x{height}")
    return BmpHeader(
        width=width,
        height=height,
        file_size=file_size,
        data_offset=offset,
        planes=planes,
        bit_count=bit_count,
        compression=compression,
        image_size=image_size,
    )


def read_bmp(path: StrPath) -> Bitmap:
    """Load a 24-bit uncompressed BMP written by this module (or compatible).

    Raises:
        BitmapFormatError: The file is not a supported bitmap or is truncated.
    """
    raw = Path(path).read_bytes()
    header = _parse_header(raw)
    width = header.width
    height = abs(header.height)
    stride = row_stride(width)
    end = header.data_offset + stride * height
    if len(raw) < end:
        raise BitmapFormatError(f"pixel data truncated: {len(raw)} < {end} bytes")

    n = 3 * width
    pixels = bytearray(n * height)
    for i in range(height):
        start = header.data_offset + i * stride
        src = raw[start : start + n]
        row = height - 1 - i if header.top_down else i
        dst = row * n
        pixels[dst : dst + n : 3] = src[2::3]
        pixels[dst + 1 : dst + n : 3] = src[1::3]
        pixels[dst + 2 : dst + n : 3] = src[0::3]
    return Bitmap(header=header, pixels=bytes(pixels))
