"""Fixed byte layout of the SCEL file format."""

from __future__ import annotations

DICT_MAGIC = bytes([0x40, 0x15, 0x00, 0x00, 0x44, 0x43, 0x53, 0x01, 0x01, 0x00, 0x00, 0x00])
DICT_MAGIC_OFFSET = 0

SYLLABLE_TABLE_MAGIC = bytes([0x9D, 0x01, 0x00, 0x00])
SYLLABLE_TABLE_MAGIC_OFFSET = 5440

NAME_OFFSET, NAME_SIZE = 304, 520
CATEGORY_OFFSET, CATEGORY_SIZE = 824, 520
DESCRIPTION_OFFSET, DESCRIPTION_SIZE = 1344, 2048
EXAMPLES_OFFSET, EXAMPLES_SIZE = 3392, 2048

SYLLABLE_TABLE_OFFSET, SYLLABLE_TABLE_SIZE = 5444, 4324
WORD_RECORDS_OFFSET = SYLLABLE_TABLE_OFFSET + SYLLABLE_TABLE_SIZE
