from __future__ import annotations

import io
from typing import TYPE_CHECKING, BinaryIO

from .writer import BinaryWriter

if TYPE_CHECKING:
    from ..bitmap import Bitmap

FILE_HEADER_SIZE = 14
INFO_HEADER_SIZE = 40
COLOR_TABLE_SIZE = 8
PIXEL_DATA_OFFSET = FILE_HEADER_SIZE + INFO_HEADER_SIZE + COLOR_TABLE_SIZE

BMP_MAGIC = b"BM"
PLANES = 1
BITS_PER_PIXEL = 1
COMPRESSION_NONE = 0
PALETTE_COLORS = 2
# Palette entry order is fixed: index 0 then index 1.
COLOR_TABLE = (0x000000, 0xFFFFFF)


class BmpHeaderError(RuntimeError):
    """Header sections did not add up to the expected pixel data offset."""


def write_file_header(writer: BinaryWriter, image_size: int) -> None:
    """Write the 14-byte BITMAPFILEHEADER."""
    writer.write_bytes(BMP_MAGIC)
    writer.write_uint32_le(PIXEL_DATA_OFFSET + image_size)
    writer.write_uint32_le(0)
    writer.write_uint32_le(PIXEL_DATA_OFFSET)


def write_info_header(writer: BinaryWriter, width: int, height: int, image_size: int) -> None:
    """Write the 40-byte BITMAPINFOHEADER for a 1-bpp image."""
    writer.write_uint32_le(INFO_HEADER_SIZE)
    writer.write_int32_le(width)
    writer.write_int32_le(height)
    writer.write_uint16_le(PLANES)
    writer.write_uint16_le(BITS_PER_PIXEL)
    writer.write_uint32_le(COMPRESSION_NONE)
    writer.write_uint32_le(image_size)
    writer.write_int32_le(0)
    writer.write_int32_le(0)
    writer.write_uint32_le(PALETTE_COLORS)
    writer.write_uint32_le(PALETTE_COLORS)


def write_color_table(writer: BinaryWriter) -> None:
    for entry in COLOR_TABLE:
        writer.write_int32_le(entry)


def write_bmp(bitmap: "Bitmap", stream: BinaryIO) -> None:
    """Serialize ``bitmap`` as an uncompressed 1-bpp BMP into ``stream``.

    The stream is left open; the caller owns it.
    """
    writer = BinaryWriter(stream)
    buffer = bitmap.buffer
    write_file_header(writer, len(buffer))
    write_info_header(writer, bitmap.width, bitmap.height, len(buffer))
    write_color_table(writer)
    if writer.bytes_written != PIXEL_DATA_OFFSET:
        raise BmpHeaderError(f"Unexpected header length {writer.bytes_written}")
    writer.write_bytes(bytes(buffer))


def encode_bmp(bitmap: "Bitmap") -> bytes:
    """Return the BMP file contents for ``bitmap``."""
    out = io.BytesIO()
    write_bmp(bitmap, out)
    return out.getvalue()


def save_bmp(bitmap: "Bitmap", path: str) -> None:
    with open(path, "wb") as handle:
        write_bmp(bitmap, handle)
