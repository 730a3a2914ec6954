"""Top-level orchestration for decoding SCEL dictionaries."""

from __future__ import annotations

import io
import logging
from pathlib import Path
from typing import BinaryIO, Iterable

from scel_dict.format.header import parse_header
from scel_dict.format.syllables import build_syllable_table
from scel_dict.format.words import decode_word_records
from scel_dict.io.byte_reader import ByteWindowReader
from scel_dict.models import ScelDictionary, ScelHeader, WordEntry

logger = logging.getLogger(__name__)


def assemble_dictionary(header: ScelHeader, entries: Iterable[WordEntry]) -> ScelDictionary:
    """Combine header metadata and word entries into the final dictionary.

    Entries are sorted by ascending weight; ties keep file order. Duplicates are
    preserved.

    Args:
        header: Decoded metadata.
        entries: Word entries in file order.

    Returns:
        Immutable dictionary value.
    """

    return ScelDictionary(
        name=header.name,
        category=header.category,
        description=header.description,
        examples=header.examples,
        items=tuple(sorted(entries, key=lambda entry: entry.weight)),
    )


def parse(stream: BinaryIO) -> ScelDictionary:
    """Decode a SCEL dictionary from a seekable binary stream.

    The stream is left open; its lifetime belongs to the caller.

    Args:
        stream: Seekable binary stream positioned anywhere.

    Returns:
        Decoded dictionary.

    Raises:
        InvalidDictError: If the stream is not a SCEL file.
        CorruptedDictError: If the stream is a damaged SCEL file.
    """

    reader = ByteWindowReader(stream)
    header = parse_header(reader)
    table = build_syllable_table(reader)
    entries = decode_word_records(reader, table)
    logger.debug("Decoded %d words from '%s'", len(entries), header.name)
    return assemble_dictionary(header, entries)


def parse_bytes(data: bytes) -> ScelDictionary:
    """Decode a SCEL dictionary held in memory."""

    return parse(io.BytesIO(data))


def parse_file(path: str | Path) -> ScelDictionary:
    """Open a ``.scel`` file and decode it.

    Args:
        path: Filesystem path of the dictionary.

    Returns:
        Decoded dictionary.

    Raises:
        FileNotFoundError: If ``path`` does not exist.
        InvalidDictError: If the file is not a SCEL file.
        CorruptedDictError: If the file is damaged.
    """

    with Path(path).open("rb") as handle:
        return parse(handle)
