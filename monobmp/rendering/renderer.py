from __future__ import annotations

from typing import List, Optional

from PIL import Image, ImageOps

from ..bitmap import Bitmap


def image_to_bw_pixels(img: Image.Image, dither: bool, threshold: Optional[int] = None) -> List[int]:
    """Return row-major 0/1 pixels for ``img`` (1 = black)."""
    if dither:
        # Mode "1" packs bits in tobytes(); widen back to one byte per pixel.
        data = img.convert("1").convert("L").tobytes()
        return [1 if p == 0 else 0 for p in data]
    data = img.convert("L").tobytes()
    if threshold is None:
        avg = sum(data) / len(data) if data else 0
        threshold = int(max(0, min(255, avg - 13)))
    return [1 if p <= threshold else 0 for p in data]


def pack_row(line: List[int]) -> bytes:
    """Pack a 0/1 row into bytes, most significant bit = leftmost pixel."""
    out = bytearray()
    for i in range(0, len(line), 8):
        value = 0
        for bit, pix in enumerate(line[i : i + 8]):
            if pix:
                value |= 0x80 >> bit
        out.append(value)
    return bytes(out)


def pixels_to_bitmap(pixels: List[int], width: int) -> Bitmap:
    if width <= 0:
        raise ValueError("Width must be greater than zero")
    if not pixels or len(pixels) % width != 0:
        raise ValueError("Pixels length must be a non-zero multiple of width")
    height = len(pixels) // width
    bitmap = Bitmap(width, height)
    stride = bitmap.stride
    buffer = bitmap.buffer
    for row in range(height):
        packed = pack_row(pixels[row * width : (row + 1) * width])
        start = row * stride
        buffer[start : start + len(packed)] = packed
    return bitmap


def image_to_bitmap(img: Image.Image, dither: bool = True, threshold: Optional[int] = None) -> Bitmap:
    """Convert any Pillow image into a Bitmap."""
    pixels = image_to_bw_pixels(img, dither, threshold)
    return pixels_to_bitmap(pixels, img.width)


def bitmap_to_image(bitmap: Bitmap) -> Image.Image:
    """Return a mode "1" Pillow image; black pixels are 0, white are 255."""
    row_bytes = (bitmap.width + 7) // 8
    data = bytearray()
    for row in range(bitmap.height):
        start = row * bitmap.stride
        # Pillow's "1" mode stores set bits as white.
        data += bytes(~b & 0xFF for b in bitmap.buffer[start : start + row_bytes])
    return Image.frombytes("1", bitmap.size, bytes(data))


def _resize_to_width(img: Image.Image, width: int) -> Image.Image:
    if img.width == width:
        return img
    ratio = width / float(img.width)
    height = max(1, int(img.height * ratio))
    return img.resize((width, height), Image.LANCZOS)


def load_bitmap(
    path: str,
    width: Optional[int] = None,
    dither: bool = True,
    threshold: Optional[int] = None,
) -> Bitmap:
    """Open an image file with Pillow and convert it to a Bitmap."""
    with Image.open(path) as img:
        img = ImageOps.exif_transpose(img)
        img = img.copy()
    if img.mode not in ("RGB", "L", "1"):
        img = img.convert("RGB")
    if width is not None:
        if width <= 0:
            raise ValueError("Width must be greater than zero")
        img = _resize_to_width(img, width)
    return image_to_bitmap(img, dither=dither, threshold=threshold)
