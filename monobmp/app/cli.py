from __future__ import annotations

import argparse
import os
import sys
from dataclasses import dataclass
from typing import List, Optional, Sequence

from ..bitmap import Bitmap
from ..canvas import Canvas, Rectangle
from ..color import BWColor
from ..rendering import load_bitmap

SUPPORTED_EXTENSIONS = {".png", ".jpg", ".jpeg", ".gif", ".bmp", ".tif", ".tiff"}


@dataclass
class ConvertSettings:
    width: Optional[int] = None
    dither: bool = True
    threshold: Optional[int] = None


def parse_rectangle(value: str) -> Rectangle:
    parts = value.split(",")
    if len(parts) != 4:
        raise argparse.ArgumentTypeError(f"Expected X,Y,W,H, got {value!r}")
    try:
        x, y, w, h = (int(part) for part in parts)
    except ValueError:
        raise argparse.ArgumentTypeError(f"Expected integers in X,Y,W,H, got {value!r}") from None
    return Rectangle(x, y, w, h)


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="monobmp",
        description="Write monochrome (1 bit per pixel) BMP files.",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    convert = sub.add_parser("convert", help="Convert an image file to a 1-bpp BMP")
    convert.add_argument("input", help="Source image (.png/.jpg/.gif/.bmp/.tif)")
    convert.add_argument("output", help="Destination .bmp path")
    convert.add_argument("--width", type=int, help="Resize to this width, keeping aspect ratio")
    convert.add_argument("--no-dither", action="store_true", help="Threshold instead of dithering")
    convert.add_argument("--threshold", type=int, help="Luminance threshold (0-255) used with --no-dither")

    blank = sub.add_parser("blank", help="Write a white BMP, optionally with black rectangles")
    blank.add_argument("width", type=int)
    blank.add_argument("height", type=int)
    blank.add_argument("output", help="Destination .bmp path")
    blank.add_argument(
        "--fill",
        metavar="X,Y,W,H",
        type=parse_rectangle,
        action="append",
        default=[],
        help="Black rectangle to paint (repeatable)",
    )
    return parser.parse_args(argv)


def _resolve_settings(args: argparse.Namespace) -> ConvertSettings:
    settings = ConvertSettings(width=args.width, dither=not args.no_dither)
    if args.threshold is not None:
        if not 0 <= args.threshold <= 255:
            raise ValueError("Threshold must be between 0 and 255")
        settings.threshold = args.threshold
    return settings


def _validate_input_path(path: str) -> None:
    ext = os.path.splitext(path)[1].lower()
    if ext not in SUPPORTED_EXTENSIONS:
        raise ValueError("Supported formats: " + ", ".join(sorted(SUPPORTED_EXTENSIONS)))
    if not os.path.isfile(path):
        raise FileNotFoundError(f"File not found: {path}")


def to_viewer_order(bitmap: Bitmap) -> Bitmap:
    """Return a copy that BMP readers display the way ``bitmap`` is drawn.

    Readers take a positive height as bottom-up rows and map a set bit to
    the second (white) palette entry, so rows are reversed and pixel bits
    inverted. Row padding stays zero.
    """
    out = Bitmap(bitmap.width, bitmap.height)
    stride = bitmap.stride
    row_bytes = (bitmap.width + 7) // 8
    tail_mask = (0xFF << (row_bytes * 8 - bitmap.width)) & 0xFF
    src = bitmap.buffer
    dst = out.buffer
    for row in range(bitmap.height):
        src_start = (bitmap.height - 1 - row) * stride
        dst_start = row * stride
        for i in range(row_bytes):
            dst[dst_start + i] = ~src[src_start + i] & 0xFF
        dst[dst_start + row_bytes - 1] &= tail_mask
    return out


def convert_file(args: argparse.Namespace) -> int:
    _validate_input_path(args.input)
    settings = _resolve_settings(args)
    bitmap = load_bitmap(
        args.input,
        width=settings.width,
        dither=settings.dither,
        threshold=settings.threshold,
    )
    to_viewer_order(bitmap).save_bmp(args.output)
    return 0


def build_blank(width: int, height: int, fills: List[Rectangle]) -> Bitmap:
    bitmap = Bitmap(width, height)
    with Canvas.from_image(bitmap) as canvas:
        for rect in fills:
            canvas.fill_rectangle(BWColor.BLACK, rect)
    return bitmap


def write_blank(args: argparse.Namespace) -> int:
    bitmap = build_blank(args.width, args.height, args.fill)
    to_viewer_order(bitmap).save_bmp(args.output)
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    try:
        if args.command == "convert":
            return convert_file(args)
        return write_blank(args)
    except Exception as exc:
        print(str(exc), file=sys.stderr)
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
