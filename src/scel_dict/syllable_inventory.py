"""Inventory of valid tone-free pinyin syllables, sourced from pypinyin.

SCEL syllable tables spell ``ü`` as ``v`` (``lv``, ``nve``), so the inventory
uses the same convention. The inventory is diagnostic only and never changes
decoded output.
"""

from __future__ import annotations

import unicodedata
from typing import Iterable

from pypinyin import constants as pypinyin_constants

from scel_dict.models import WordEntry

EXTRA_VALID_SYLLABLES = {"m", "n", "ng", "hm", "hng", "r", "ê"}


def to_scel_spelling(syllable: str) -> str:
    """Strip tone marks from one pinyin syllable and write ``ü`` as ``v``.

    Args:
        syllable: Tone-marked syllable such as ``lǜ`` or ``xiàng``.

    Returns:
        Lowercase tone-free spelling such as ``lv`` or ``xiang``.
    """

    decomposed = unicodedata.normalize("NFD", syllable.strip().lower())
    decomposed = decomposed.replace("u\u0308", "v")
    return "".join(ch for ch in decomposed if not unicodedata.combining(ch))


def _collect_known_syllables() -> frozenset[str]:
    """Collect tone-free syllables from pypinyin character and phrase dictionaries."""

    syllables: set[str] = set()
    for value in pypinyin_constants.PINYIN_DICT.values():
        for item in str(value).split(","):
            base = to_scel_spelling(item)
            if base:
                syllables.add(base)

    for phrase in pypinyin_constants.PHRASES_DICT.values():
        for syllable_group in phrase:
            for item in syllable_group:
                base = to_scel_spelling(item)
                if base:
                    syllables.add(base)

    syllables.update(to_scel_spelling(item) for item in EXTRA_VALID_SYLLABLES)
    return frozenset(syllables)


KNOWN_SYLLABLES = _collect_known_syllables()


def is_known_syllable(syllable: str) -> bool:
    """Return whether ``syllable`` is a recognised tone-free pinyin spelling."""

    return syllable.lower() in KNOWN_SYLLABLES


def find_unknown_syllables(entries: Iterable[WordEntry]) -> list[str]:
    """List syllables used by ``entries`` that are not valid pinyin.

    Args:
        entries: Decoded word entries.

    Returns:
        Sorted unique unknown syllables.
    """

    unknown: set[str] = set()
    for entry in entries:
        for syllable in entry.pinyin:
            if not is_known_syllable(syllable):
                unknown.add(syllable)
    return sorted(unknown)
