"""Absolute-offset reads over a seekable binary stream."""

from __future__ import annotations

import struct
from typing import BinaryIO

from scel_dict.errors import CorruptedDictError, ShortReadError

_U16 = struct.Struct("<H")


class ByteWindowReader:
    """Thin cursor wrapper around a caller-owned binary stream.

    The reader never closes the stream. Seek and I/O failures surface as
    :class:`CorruptedDictError`; a read that hits end-of-stream early raises the
    narrower :class:`ShortReadError` so callers can treat it as termination.
    """

    def __init__(self, stream: BinaryIO) -> None:
        self._stream = stream

    def seek_to(self, offset: int) -> None:
        """Move the cursor to an absolute offset.

        Args:
            offset: Byte offset from the start of the stream.

        Raises:
            CorruptedDictError: If the underlying stream cannot seek.
        """

        try:
            self._stream.seek(offset)
        except (OSError, ValueError) as exc:
            raise CorruptedDictError(f"dict file might be corrupted: seek to {offset} failed") from exc

    def position(self) -> int:
        """Return the current absolute cursor."""

        try:
            return self._stream.tell()
        except (OSError, ValueError) as exc:
            raise CorruptedDictError("dict file might be corrupted: tell failed") from exc

    def read_exact(self, size: int) -> bytes:
        """Read exactly ``size`` bytes from the current cursor.

        Args:
            size: Number of bytes to read.

        Returns:
            The bytes read.

        Raises:
            ShortReadError: If the stream ends before ``size`` bytes are read.
            CorruptedDictError: If the underlying stream fails.
        """

        start = self.position()
        chunks: list[bytes] = []
        remaining = size
        try:
            while remaining > 0:
                chunk = self._stream.read(remaining)
                if not chunk:
                    break
                chunks.append(chunk)
                remaining -= len(chunk)
        except (OSError, ValueError) as exc:
            raise CorruptedDictError(
                f"dict file might be corrupted: read at offset {start} failed"
            ) from exc

        data = b"".join(chunks)
        if len(data) < size:
            raise ShortReadError(offset=start, expected=size, received=len(data))
        return data

    def read_u16(self) -> int:
        """Read one little-endian unsigned 16-bit integer."""

        return _U16.unpack(self.read_exact(_U16.size))[0]
