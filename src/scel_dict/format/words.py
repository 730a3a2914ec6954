"""Word record decoding.

Word records start right after the syllable table and run to the end of the
stream. Each record is a group of words sharing one pinyin sequence::

    u16 count
    u16 pinyin block length P, then P / 2 u16 syllable indices
    count x (u16 W, W bytes UTF-16LE word, u16 X, X bytes weight)

Truncated tails are common in downloaded files and are treated as the end of
the word list rather than as corruption.
"""

from __future__ import annotations

import logging
from typing import Iterator

from scel_dict.errors import ShortReadError
from scel_dict.format.layout import WORD_RECORDS_OFFSET
from scel_dict.format.text import decode_utf16le
from scel_dict.io.byte_reader import ByteWindowReader
from scel_dict.models import SyllableTable, WordEntry

logger = logging.getLogger(__name__)

WEIGHT_SIZE = 2


def _read_pinyin(
    reader: ByteWindowReader, table: SyllableTable
) -> tuple[tuple[str, ...], tuple[str, ...]]:
    """Read one pinyin index block and resolve it through the syllable table.

    Indices missing from the table are skipped without a placeholder.

    Returns:
        ``(pinyin, abbr)`` tuples of equal length.
    """

    block_size = reader.read_u16()
    pinyin: list[str] = []
    for _ in range(block_size // 2):
        index = reader.read_u16()
        syllable = table.get(index)
        if not syllable:
            logger.debug("Skipping unknown syllable index %d", index)
            continue
        pinyin.append(syllable)
    if block_size % 2:
        reader.read_exact(1)

    return tuple(pinyin), tuple(syllable[0] for syllable in pinyin)


def _read_weight(raw: bytes) -> int:
    """Interpret the leading two bytes of a weight block as u16 LE."""

    return int.from_bytes(raw[:WEIGHT_SIZE], "little")


def _read_word(
    reader: ByteWindowReader, pinyin: tuple[str, ...], abbr: tuple[str, ...]
) -> WordEntry:
    """Read one word sub-record of the current group."""

    text = decode_utf16le(reader.read_exact(reader.read_u16()))
    weight = _read_weight(reader.read_exact(reader.read_u16()))
    return WordEntry(text=text, pinyin=pinyin, abbr=abbr, weight=weight)


def iter_word_records(reader: ByteWindowReader, table: SyllableTable) -> Iterator[WordEntry]:
    """Yield word entries in file order until the stream ends.

    End-of-stream at a record boundary or inside a record stops iteration; the
    incomplete record part is dropped while words already completed are kept.

    Args:
        reader: Reader over the whole SCEL stream.
        table: Syllable table built by
            :func:`scel_dict.format.syllables.build_syllable_table`.

    Yields:
        Word entries sharing the pinyin tuples of their group.

    Raises:
        CorruptedDictError: On I/O failures other than end-of-stream.
    """

    reader.seek_to(WORD_RECORDS_OFFSET)

    while True:
        try:
            count = reader.read_u16()
        except ShortReadError as exc:
            if exc.received:
                logger.debug("Discarding truncated word record at offset %d", exc.offset)
            return

        try:
            pinyin, abbr = _read_pinyin(reader, table)
        except ShortReadError as exc:
            logger.debug("Discarding truncated word record at offset %d", exc.offset)
            return

        for _ in range(count):
            try:
                entry = _read_word(reader, pinyin, abbr)
            except ShortReadError as exc:
                logger.debug("Discarding truncated word record at offset %d", exc.offset)
                return
            yield entry


def decode_word_records(reader: ByteWindowReader, table: SyllableTable) -> list[WordEntry]:
    """Decode every word record into a list in file order."""

    return list(iter_word_records(reader, table))
