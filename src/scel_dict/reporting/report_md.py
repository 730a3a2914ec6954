"""Markdown report generation for decoded dictionaries."""

from __future__ import annotations

from typing import Iterable, Sequence

from scel_dict.models import ScelDictionary
from scel_dict.syllable_inventory import find_unknown_syllables
from scel_dict.validation import (
    collect_length_counts,
    collect_syllable_counts,
    find_pinyin_mismatches,
)

TOP_SYLLABLES = 20


def _escape_cell(value: str) -> str:
    """Keep multi-line metadata inside one table cell."""

    return value.replace("|", "\\|").replace("\r\n", "<br>").replace("\n", "<br>")


def _markdown_table(headers: Sequence[str], rows: Iterable[Sequence[str]]) -> str:
    """Render a deterministic GitHub-flavored markdown table.

    Args:
        headers: Table header labels.
        rows: Table body rows as string sequences.

    Returns:
        Markdown table text.
    """

    line_header = "| " + " | ".join(headers) + " |"
    line_sep = "| " + " | ".join("---" for _ in headers) + " |"
    body = ["| " + " | ".join(row) + " |" for row in rows]
    return "\n".join([line_header, line_sep, *body])


def build_report_md(dictionary: ScelDictionary) -> str:
    """Build the markdown summary report for one decoded dictionary.

    Args:
        dictionary: Decoded dictionary.

    Returns:
        Full markdown content with summary tables.
    """

    items = list(dictionary.items)

    metadata_rows = [
        (label, _escape_cell(value))
        for label, value in (
            ("name", dictionary.name),
            ("category", dictionary.category),
            ("description", dictionary.description),
            ("examples", dictionary.examples),
            ("items", str(len(items))),
        )
    ]

    length_counts = collect_length_counts(items)
    length_rows = [(str(length), str(length_counts[length])) for length in sorted(length_counts)]

    syllable_counts = collect_syllable_counts(items)
    syllable_rows = [
        (syllable, str(syllable_counts[syllable]))
        for syllable in sorted(syllable_counts, key=lambda item: (-syllable_counts[item], item))[
            :TOP_SYLLABLES
        ]
    ]

    mismatch_rows = [
        (entry.text, entry.pinyin_text, str(len(entry.text)), str(len(entry.pinyin)))
        for entry in find_pinyin_mismatches(items)
    ]

    unknown_rows = [(syllable,) for syllable in find_unknown_syllables(items)]

    sections = [
        "# Dictionary Report",
        "",
        "## Metadata",
        _markdown_table(["field", "value"], metadata_rows),
        "",
        "## Words per length",
        _markdown_table(["length", "word_count"], length_rows),
        "",
        "## Most frequent syllables",
        _markdown_table(["syllable", "count"], syllable_rows),
        "",
        "## Pinyin length mismatches",
        _markdown_table(["text", "pinyin", "characters", "syllables"], mismatch_rows),
        "",
        "## Unknown syllables",
        _markdown_table(["syllable"], unknown_rows),
    ]

    return "\n".join(sections) + "\n"
