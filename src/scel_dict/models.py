"""Data models produced by the SCEL decoder.

Decoded values are frozen dataclasses holding tuples so a returned dictionary
cannot be mutated by callers and the decoder keeps no aliases to it.
"""

from __future__ import annotations

from dataclasses import dataclass, field

SyllableTable = dict[int, str]


@dataclass(frozen=True)
class WordEntry:
    """One Chinese word with its per-character pinyin and abbreviations.

    ``weight`` is the usage-frequency value stored next to the word. It is kept
    out of equality and ``repr`` because its only observable effect is the order
    of :attr:`ScelDictionary.items`.
    """

    text: str
    pinyin: tuple[str, ...]
    abbr: tuple[str, ...]
    weight: int = field(default=0, compare=False, repr=False)

    @property
    def abbreviation(self) -> str:
        """Return the leading letters joined, e.g. ``mxdx`` for 面向对象."""

        return "".join(self.abbr)

    @property
    def pinyin_text(self) -> str:
        """Return the space-separated pinyin string."""

        return " ".join(self.pinyin)


@dataclass(frozen=True)
class ScelHeader:
    """Metadata strings read from the fixed-offset header fields."""

    name: str
    category: str
    description: str
    examples: str


@dataclass(frozen=True)
class ScelDictionary:
    """A decoded SCEL dictionary.

    Attributes:
        name: Dictionary name.
        category: Category label shown by the input method.
        description: Free-form description.
        examples: Usage examples text.
        items: Word entries ordered by ascending weight.
    """

    name: str
    category: str
    description: str
    examples: str
    items: tuple[WordEntry, ...] = field(default_factory=tuple)
