from .bitmap import Bitmap, RotateFlipType, row_stride
from .bmp import BinaryWriter, BmpHeaderError, encode_bmp, save_bmp, write_bmp
from .canvas import Canvas, Rectangle
from .color import Brush, BWColor, SolidBrush, to_bw_color

__all__ = [
    "BinaryWriter",
    "Bitmap",
    "BmpHeaderError",
    "Brush",
    "BWColor",
    "Canvas",
    "encode_bmp",
    "Rectangle",
    "RotateFlipType",
    "row_stride",
    "save_bmp",
    "SolidBrush",
    "to_bw_color",
    "write_bmp",
]
