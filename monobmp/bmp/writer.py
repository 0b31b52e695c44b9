from __future__ import annotations

from typing import BinaryIO


class BinaryWriter:
    """Little-endian fixed-width integer writer over a binary stream."""

    def __init__(self, stream: BinaryIO) -> None:
        self._stream = stream
        self._written = 0

    @property
    def bytes_written(self) -> int:
        return self._written

    def write_bytes(self, data: bytes) -> None:
        """Write all of ``data``; a short write raises ``OSError``."""
        count = self._stream.write(data)
        # Some file-like objects return None from write().
        if count is not None and count < len(data):
            raise OSError(f"Short write: {count} of {len(data)} bytes written")
        self._written += len(data)

    def write_uint16_le(self, value: int) -> None:
        self.write_bytes(value.to_bytes(2, "little", signed=False))

    def write_uint32_le(self, value: int) -> None:
        self.write_bytes(value.to_bytes(4, "little", signed=False))

    def write_int32_le(self, value: int) -> None:
        self.write_bytes(value.to_bytes(4, "little", signed=True))
