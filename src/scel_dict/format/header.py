"""Header parsing: file magic checks and fixed-offset metadata fields."""

from __future__ import annotations

from scel_dict.errors import CorruptedDictError, InvalidDictError, ShortReadError
from scel_dict.format.layout import (
    CATEGORY_OFFSET,
    CATEGORY_SIZE,
    DESCRIPTION_OFFSET,
    DESCRIPTION_SIZE,
    DICT_MAGIC,
    DICT_MAGIC_OFFSET,
    EXAMPLES_OFFSET,
    EXAMPLES_SIZE,
    NAME_OFFSET,
    NAME_SIZE,
    SYLLABLE_TABLE_MAGIC,
    SYLLABLE_TABLE_MAGIC_OFFSET,
)
from scel_dict.format.text import decode_utf16le
from scel_dict.io.byte_reader import ByteWindowReader
from scel_dict.models import ScelHeader


def _matches(reader: ByteWindowReader, offset: int, expected: bytes) -> bool:
    """Return whether ``expected`` is stored verbatim at ``offset``."""

    try:
        reader.seek_to(offset)
        actual = reader.read_exact(len(expected))
    except CorruptedDictError:
        return False
    return actual == expected


def check_dict_magic(reader: ByteWindowReader) -> None:
    """Ensure the stream starts with the SCEL file magic.

    Raises:
        InvalidDictError: If the magic is absent or different.
    """

    if not _matches(reader, DICT_MAGIC_OFFSET, DICT_MAGIC):
        raise InvalidDictError()


def check_syllable_table_magic(reader: ByteWindowReader) -> None:
    """Ensure the syllable table marker is present.

    Raises:
        CorruptedDictError: If the marker is absent or different.
    """

    if not _matches(reader, SYLLABLE_TABLE_MAGIC_OFFSET, SYLLABLE_TABLE_MAGIC):
        raise CorruptedDictError()


def read_text_field(reader: ByteWindowReader, offset: int, size: int) -> str:
    """Read and decode one NUL-padded UTF-16LE metadata field.

    Raises:
        CorruptedDictError: If the field extends past the end of the stream.
    """

    reader.seek_to(offset)
    try:
        raw = reader.read_exact(size)
    except ShortReadError as exc:
        raise CorruptedDictError(
            f"dict file might be corrupted: metadata field at offset {offset} is truncated"
        ) from exc
    return decode_utf16le(raw)


def parse_header(reader: ByteWindowReader) -> ScelHeader:
    """Validate both magic markers and extract the metadata strings.

    Args:
        reader: Reader over the whole SCEL stream.

    Returns:
        Decoded header metadata.

    Raises:
        InvalidDictError: If the file magic does not match.
        CorruptedDictError: If metadata is truncated or the syllable table
            marker does not match.
    """

    check_dict_magic(reader)

    header = ScelHeader(
        name=read_text_field(reader, NAME_OFFSET, NAME_SIZE),
        category=read_text_field(reader, CATEGORY_OFFSET, CATEGORY_SIZE),
        description=read_text_field(reader, DESCRIPTION_OFFSET, DESCRIPTION_SIZE),
        examples=read_text_field(reader, EXAMPLES_OFFSET, EXAMPLES_SIZE),
    )

    check_syllable_table_magic(reader)
    return header
