from .renderer import (
    bitmap_to_image,
    image_to_bitmap,
    image_to_bw_pixels,
    load_bitmap,
    pack_row,
    pixels_to_bitmap,
)

__all__ = [
    "bitmap_to_image",
    "image_to_bitmap",
    "image_to_bw_pixels",
    "load_bitmap",
    "pack_row",
    "pixels_to_bitmap",
]
