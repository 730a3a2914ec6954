"""Shared fixtures that build SCEL byte images in memory."""

from __future__ import annotations

import struct
from typing import Callable, Sequence

import pytest

from scel_dict.format.layout import (
    CATEGORY_OFFSET,
    CATEGORY_SIZE,
    DESCRIPTION_OFFSET,
    DESCRIPTION_SIZE,
    DICT_MAGIC,
    EXAMPLES_OFFSET,
    EXAMPLES_SIZE,
    NAME_OFFSET,
    NAME_SIZE,
    SYLLABLE_TABLE_MAGIC,
    SYLLABLE_TABLE_MAGIC_OFFSET,
    SYLLABLE_TABLE_OFFSET,
    SYLLABLE_TABLE_SIZE,
    WORD_RECORDS_OFFSET,
)

FILLER_INDEX = 0xFFFF

# (syllable indices, [(word, weight), ...])
WordGroup = tuple[Sequence[int], Sequence[tuple[str, int]]]

PROGRAMMING_WORDS = [
    ("哈希", ("ha", "xi")),
    ("第一类对象", ("di", "yi", "lei", "dui", "xiang")),
    ("方法", ("fang", "fa")),
    ("初始化", ("chu", "shi", "hua")),
    ("伪变量", ("wei", "bian", "liang")),
    ("全局变量", ("quan", "ju", "bian", "liang")),
    ("局部变量", ("ju", "bu", "bian", "liang")),
    ("实例变量", ("shi", "li", "bian", "liang")),
    ("类变量", ("lei", "bian", "liang")),
    ("变量", ("bian", "liang")),
    ("常量", ("chang", "liang")),
    ("析构函数", ("xi", "gou", "han", "shu")),
    ("构造函数", ("gou", "zao", "han", "shu")),
    ("访问器", ("fang", "wen", "qi")),
    ("属性", ("shu", "xing")),
    ("成员方法", ("cheng", "yuan", "fang", "fa")),
    ("成员函数", ("cheng", "yuan", "han", "shu")),
    ("成员属性", ("cheng", "yuan", "shu", "xing")),
    ("成员", ("cheng", "yuan")),
    ("实例", ("shi", "li")),
    ("函数式", ("han", "shu", "shi")),
    ("面向过程", ("mian", "xiang", "guo", "cheng")),
    ("面向对象", ("mian", "xiang", "dui", "xiang")),
]


def _put_text(buf: bytearray, offset: int, size: int, value: str) -> None:
    encoded = value.encode("utf-16-le")
    assert len(encoded) <= size, f"metadata value too long for field at {offset}"
    buf[offset : offset + len(encoded)] = encoded


def _syllable_region(syllables: dict[int, str]) -> bytes:
    """Encode syllable records padded to fill the table region exactly."""

    records = [[index, spelling.encode("utf-16-le")] for index, spelling in syllables.items()]
    remaining = SYLLABLE_TABLE_SIZE - sum(4 + len(payload) for _, payload in records)
    assert remaining >= 0, "syllable table too large"
    if remaining == 2:
        records[-1][1] += b"\x00\x00"
    elif remaining:
        records.append([FILLER_INDEX, bytes(remaining - 4)])
    return b"".join(
        struct.pack("<HH", index, len(payload)) + payload for index, payload in records
    )


def encode_word_groups(groups: Sequence[WordGroup], weight_size: int = 2) -> bytes:
    """Encode word record groups; weights are padded to ``weight_size`` bytes."""

    out = bytearray()
    for indices, words in groups:
        out += struct.pack("<HH", len(words), 2 * len(indices))
        out += b"".join(struct.pack("<H", index) for index in indices)
        for text, weight in words:
            encoded = text.encode("utf-16-le")
            out += struct.pack("<H", len(encoded)) + encoded
            weight_block = struct.pack("<H", weight) + bytes(weight_size - 2)
            out += struct.pack("<H", weight_size) + weight_block
    return bytes(out)


def build_scel(
    syllables: dict[int, str] | None = None,
    groups: Sequence[WordGroup] = (),
    *,
    name: str = "",
    category: str = "",
    description: str = "",
    examples: str = "",
    weight_size: int = 2,
) -> bytes:
    """Build a complete SCEL byte image."""

    buf = bytearray(WORD_RECORDS_OFFSET)
    buf[0 : len(DICT_MAGIC)] = DICT_MAGIC
    _put_text(buf, NAME_OFFSET, NAME_SIZE, name)
    _put_text(buf, CATEGORY_OFFSET, CATEGORY_SIZE, category)
    _put_text(buf, DESCRIPTION_OFFSET, DESCRIPTION_SIZE, description)
    _put_text(buf, EXAMPLES_OFFSET, EXAMPLES_SIZE, examples)
    buf[SYLLABLE_TABLE_MAGIC_OFFSET:SYLLABLE_TABLE_OFFSET] = SYLLABLE_TABLE_MAGIC
    buf[SYLLABLE_TABLE_OFFSET:WORD_RECORDS_OFFSET] = _syllable_region(syllables or {})
    return bytes(buf) + encode_word_groups(groups, weight_size=weight_size)


def build_programming_scel() -> bytes:
    """Build the "programming" dictionary with words stored in reverse weight order."""

    spellings = sorted({syllable for _, pinyin in PROGRAMMING_WORDS for syllable in pinyin})
    syllables = {index: spelling for index, spelling in enumerate(spellings)}
    index_of = {spelling: index for index, spelling in syllables.items()}

    groups = [
        ([index_of[syllable] for syllable in pinyin], [(text, 100 + 10 * position)])
        for position, (text, pinyin) in reversed(list(enumerate(PROGRAMMING_WORDS)))
    ]
    return build_scel(
        syllables,
        groups,
        name="编程语言",
        category="计算机",
        description="程序设计常用术语",
        examples="面向对象 函数式",
    )


@pytest.fixture
def scel_builder() -> Callable[..., bytes]:
    """Return the SCEL byte image builder."""

    return build_scel


@pytest.fixture
def word_group_encoder() -> Callable[..., bytes]:
    """Return the word record group encoder."""

    return encode_word_groups


@pytest.fixture
def programming_scel() -> bytes:
    """Return the "programming" dictionary bytes."""

    return build_programming_scel()


@pytest.fixture
def programming_words() -> list[tuple[str, tuple[str, ...]]]:
    """Return expected ``(text, pinyin)`` pairs in ascending weight order."""

    return list(PROGRAMMING_WORDS)
