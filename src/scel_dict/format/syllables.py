"""Syllable table decoding.

The table maps a 16-bit index to an ASCII pinyin syllable. Word records refer
to syllables by index, so the table has to be built before any word is read.
"""

from __future__ import annotations

import logging

from scel_dict.format.layout import SYLLABLE_TABLE_OFFSET, WORD_RECORDS_OFFSET
from scel_dict.format.text import strip_nul_bytes
from scel_dict.io.byte_reader import ByteWindowReader
from scel_dict.models import SyllableTable

logger = logging.getLogger(__name__)


def build_syllable_table(reader: ByteWindowReader) -> SyllableTable:
    """Read syllable records until the word record region begins.

    Each record is ``u16 index``, ``u16 byte length`` and the syllable stored as
    UTF-16LE ASCII. The payload is consumed in whole 2-byte units, so an odd
    length takes one extra byte. Later records with a repeated index replace
    earlier ones.

    Args:
        reader: Reader over the whole SCEL stream.

    Returns:
        Mapping of syllable index to spelling.

    Raises:
        CorruptedDictError: If the region ends in the middle of a record.
    """

    table: SyllableTable = {}
    reader.seek_to(SYLLABLE_TABLE_OFFSET)

    while reader.position() < WORD_RECORDS_OFFSET:
        index = reader.read_u16()
        size = reader.read_u16()
        table[index] = strip_nul_bytes(reader.read_exact(size + size % 2))

    logger.debug("Syllable table holds %d entries", len(table))
    return table
