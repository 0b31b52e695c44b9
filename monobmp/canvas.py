from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple, Union

from .bitmap import Bitmap
from .color import Brush, BWColor, SolidBrush, to_bw_color

Fill = Union[BWColor, Brush, SolidBrush, bool]


@dataclass(frozen=True)
class Rectangle:
    x: int
    y: int
    width: int
    height: int

    def as_tuple(self) -> Tuple[int, int, int, int]:
        return self.x, self.y, self.width, self.height


class Canvas:
    """Drawing helper bound to a single Bitmap. Holds no drawing state."""

    def __init__(self, image: Bitmap) -> None:
        self._image = image

    @classmethod
    def from_image(cls, image: Bitmap) -> "Canvas":
        return cls(image)

    @property
    def image(self) -> Bitmap:
        return self._image

    def fill_rectangle(
        self,
        color: Fill,
        x: Union[int, Rectangle, Tuple[int, int, int, int]],
        y: Optional[int] = None,
        w: Optional[int] = None,
        h: Optional[int] = None,
    ) -> None:
        """Set every pixel in ``[x, x+w) x [y, y+h)`` to ``color``.

        Accepts either four ints or a single Rectangle / ``(x, y, w, h)``
        tuple. No clipping is done: pixels outside the bitmap raise
        ``IndexError``.
        """
        if isinstance(x, Rectangle):
            x, y, w, h = x.as_tuple()
        elif isinstance(x, tuple):
            x, y, w, h = x
        if y is None or w is None or h is None:
            raise TypeError("fill_rectangle needs x, y, w, h or a rectangle")
        bw = to_bw_color(color)
        image = self._image
        for i in range(w):
            for j in range(h):
                image.set_pixel(x + i, y + j, bw)

    def close(self) -> None:
        pass

    def __enter__(self) -> "Canvas":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
