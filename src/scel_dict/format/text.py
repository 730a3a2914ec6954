"""Text decoding helpers for UTF-16LE fields stored in SCEL files."""

from __future__ import annotations


def decode_utf16le(data: bytes) -> str:
    """Decode a UTF-16LE byte slice and trim NUL padding.

    Surrogate pairs are combined; malformed code units decode to U+FFFD. An odd
    trailing byte cannot form a code unit and is ignored.

    Args:
        data: Raw field bytes, usually NUL-padded to a fixed size.

    Returns:
        Decoded text with U+0000 stripped from both ends.
    """

    if len(data) % 2:
        data = data[:-1]
    return data.decode("utf-16-le", errors="replace").strip("\x00")


def strip_nul_bytes(data: bytes) -> str:
    """Decode an ASCII syllable stored as UTF-16 by dropping its NUL bytes.

    Args:
        data: Raw syllable payload such as ``b"x\\x00i\\x00"``.

    Returns:
        ASCII text such as ``xi``.
    """

    return data.replace(b"\x00", b"").decode("ascii", errors="replace")
