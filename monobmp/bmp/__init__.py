from .encoding import (
    COLOR_TABLE,
    COLOR_TABLE_SIZE,
    FILE_HEADER_SIZE,
    INFO_HEADER_SIZE,
    PIXEL_DATA_OFFSET,
    BmpHeaderError,
    encode_bmp,
    save_bmp,
    write_bmp,
    write_color_table,
    write_file_header,
    write_info_header,
)
from .writer import BinaryWriter

__all__ = [
    "BinaryWriter",
    "BmpHeaderError",
    "COLOR_TABLE",
    "COLOR_TABLE_SIZE",
    "encode_bmp",
    "FILE_HEADER_SIZE",
    "INFO_HEADER_SIZE",
    "PIXEL_DATA_OFFSET",
    "save_bmp",
    "write_bmp",
    "write_color_table",
    "write_file_header",
    "write_info_header",
]
