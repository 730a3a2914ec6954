"""Exceptions raised while decoding SCEL dictionaries."""

from __future__ import annotations


class ScelDictError(ValueError):
    """Base class for SCEL decoding failures."""


class InvalidDictError(ScelDictError):
    """The stream does not start with the SCEL file magic."""

    def __init__(self, message: str = "not a valid sogou dict") -> None:
        super().__init__(message)


class CorruptedDictError(ScelDictError):
    """The stream looks like a SCEL file but cannot be decoded."""

    def __init__(self, message: str = "dict file might be corrupted") -> None:
        super().__init__(message)


class ShortReadError(CorruptedDictError):
    """Fewer bytes were available than a read requested.

    Attributes:
        offset: Absolute offset where the read started.
        expected: Number of bytes requested.
        received: Number of bytes actually returned.
    """

    def __init__(self, offset: int, expected: int, received: int) -> None:
        super().__init__(
            f"dict file might be corrupted: expected {expected} bytes at offset {offset}, "
            f"got {received}"
        )
        self.offset = offset
        self.expected = expected
        self.received = received
