from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Tuple, Union

from PIL import ImageColor

RGB = Tuple[int, int, int]
ColorLike = Union[str, int, Tuple[int, ...]]

_WHITE_RGB: RGB = (255, 255, 255)
_BLACK_RGB: RGB = (0, 0, 0)


class Brush(Enum):
    WHITE = "white"
    BLACK = "black"


class BWColor(Enum):
    """Two-valued pixel color. Conversions are explicit, never implicit."""

    WHITE = "White"
    BLACK = "Black"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def from_bool(cls, value: bool) -> "BWColor":
        """Map ``True`` to white and ``False`` to black."""
        if not isinstance(value, bool):
            raise TypeError(f"Expected bool, got {type(value).__name__}")
        return cls.WHITE if value else cls.BLACK

    def to_bool(self) -> bool:
        return self is BWColor.WHITE

    @classmethod
    def from_brush(cls, brush: Brush) -> "BWColor":
        if not isinstance(brush, Brush):
            raise TypeError(f"Expected Brush, got {type(brush).__name__}")
        return cls.WHITE if brush is Brush.WHITE else cls.BLACK

    def to_brush(self) -> Brush:
        return Brush.WHITE if self is BWColor.WHITE else Brush.BLACK

    @classmethod
    def from_solid_brush(cls, brush: "SolidBrush") -> "BWColor":
        if not isinstance(brush, SolidBrush):
            raise TypeError(f"Expected SolidBrush, got {type(brush).__name__}")
        return brush.color

    def to_solid_brush(self) -> "SolidBrush":
        return SolidBrush(self)

    @classmethod
    def from_color(cls, value: ColorLike) -> "BWColor":
        """Convert a Pillow-style color (name, hex, RGB(A) tuple or 0/255 level).

        Only pure white and pure black are accepted; anything else raises
        ``ValueError``.
        """
        rgb = _to_rgb(value)
        if rgb == _WHITE_RGB:
            return cls.WHITE
        if rgb == _BLACK_RGB:
            return cls.BLACK
        raise ValueError(f"Unsupported color for a monochrome image: {value!r}")

    def to_color(self) -> RGB:
        return _WHITE_RGB if self is BWColor.WHITE else _BLACK_RGB


@dataclass(frozen=True)
class SolidBrush:
    color: BWColor

    def __post_init__(self) -> None:
        if not isinstance(self.color, BWColor):
            raise TypeError(f"Expected BWColor, got {type(self.color).__name__}")


def to_bw_color(value: Union[BWColor, Brush, SolidBrush, bool]) -> BWColor:
    """Normalize any of the supported brush-like values to a BWColor."""
    if isinstance(value, BWColor):
        return value
    if isinstance(value, Brush):
        return BWColor.from_brush(value)
    if isinstance(value, SolidBrush):
        return BWColor.from_solid_brush(value)
    if isinstance(value, bool):
        return BWColor.from_bool(value)
    raise TypeError(f"Unsupported color value: {value!r}")


def _to_rgb(value: ColorLike) -> RGB:
    if isinstance(value, bool):
        raise TypeError("Use BWColor.from_bool for boolean colors")
    if isinstance(value, str):
        return ImageColor.getrgb(value)[:3]
    if isinstance(value, int):
        if value not in (0, 255):
            raise ValueError(f"Unsupported color for a monochrome image: {value!r}")
        return (value, value, value)
    if isinstance(value, tuple) and len(value) in (3, 4):
        if len(value) == 4 and value[3] != 255:
            raise ValueError(f"Unsupported color for a monochrome image: {value!r}")
        return (value[0], value[1], value[2])
    raise TypeError(f"Unsupported color value: {value!r}")
