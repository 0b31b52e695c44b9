from __future__ import annotations

from enum import Enum
from typing import BinaryIO, Tuple

from .bmp import save_bmp, write_bmp
from .color import BWColor


class RotateFlipType(Enum):
    ROTATE_NONE_FLIP_NONE = 0
    ROTATE_90_FLIP_NONE = 1
    ROTATE_180_FLIP_NONE = 2
    ROTATE_270_FLIP_NONE = 3
    ROTATE_NONE_FLIP_X = 4
    ROTATE_NONE_FLIP_Y = 5


def row_stride(width: int) -> int:
    """Bytes per row: 8 pixels per byte, padded to a multiple of 4 bytes."""
    return (((width + 7) // 8 + 3) // 4) * 4


class Bitmap:
    """Bit-packed 1-bpp image laid out the way BMP stores it (set bit = black)."""

    def __init__(self, width: int, height: int) -> None:
        if isinstance(width, bool) or isinstance(height, bool):
            raise ValueError("Width and height must be integers, not bool")
        if not isinstance(width, int) or not isinstance(height, int):
            raise ValueError("Width and height must be integers")
        if width <= 0 or height <= 0:
            raise ValueError(f"Invalid bitmap size {width}x{height}")
        self._width = width
        self._height = height
        self._stride = row_stride(width)
        self._buffer = bytearray(self._stride * height)

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def size(self) -> Tuple[int, int]:
        return self._width, self._height

    @property
    def stride(self) -> int:
        return self._stride

    @property
    def buffer(self) -> bytearray:
        return self._buffer

    def _locate(self, x: int, y: int) -> Tuple[int, int]:
        if not (0 <= x < self._width and 0 <= y < self._height):
            raise IndexError(f"Pixel ({x}, {y}) outside {self._width}x{self._height} bitmap")
        return y * self._stride + (x >> 3), 0x80 >> (x & 7)

    def get_pixel(self, x: int, y: int) -> BWColor:
        index, mask = self._locate(x, y)
        return BWColor.BLACK if self._buffer[index] & mask else BWColor.WHITE

    def set_pixel(self, x: int, y: int, color: BWColor) -> None:
        if not isinstance(color, BWColor):
            raise TypeError(f"Expected BWColor, got {type(color).__name__}")
        index, mask = self._locate(x, y)
        if color is BWColor.BLACK:
            self._buffer[index] |= mask
        else:
            self._buffer[index] &= ~mask & 0xFF

    def clone(self) -> "Bitmap":
        copy = Bitmap(self._width, self._height)
        copy._buffer[:] = self._buffer
        return copy

    def __copy__(self) -> "Bitmap":
        return self.clone()

    def __deepcopy__(self, memo: dict) -> "Bitmap":
        return self.clone()

    def rotate_flip(self, rotate_flip_type: RotateFlipType) -> None:
        raise NotImplementedError("Rotating or flipping a monochrome bitmap is not supported")

    def write_bmp(self, stream: BinaryIO) -> None:
        write_bmp(self, stream)

    def save_bmp(self, path: str) -> None:
        save_bmp(self, path)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Bitmap):
            return NotImplemented
        return self.size == other.size and self._buffer == other._buffer

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Bitmap(width={self._width}, height={self._height})"
