"""TSV and JSON writers for decoded dictionaries."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Sequence

from scel_dict.models import ScelDictionary, WordEntry

TSV_HEADER = ["text", "abbr", "pinyin"]


def write_tsv(
    entries: Sequence[WordEntry],
    output_path: Path,
    include_header: bool = True,
    include_weight: bool = False,
) -> None:
    """Write word entries to a TSV file using the canonical column order.

    Args:
        entries: Word entries to serialize.
        output_path: Destination TSV file path.
        include_header: Whether to include a header row.
        include_weight: Whether to append the raw weight column.
    """

    header = TSV_HEADER + ["weight"] if include_weight else TSV_HEADER
    with output_path.open("w", encoding="utf-8") as handle:
        if include_header:
            handle.write("\t".join(header))
            handle.write("\n")
        for entry in entries:
            row = [entry.text, entry.abbreviation, entry.pinyin_text]
            if include_weight:
                row.append(str(entry.weight))
            handle.write("\t".join(row))
            handle.write("\n")


def dictionary_to_dict(dictionary: ScelDictionary) -> dict[str, Any]:
    """Convert a dictionary into JSON-compatible primitives.

    Weights are internal and therefore omitted; item order carries them.
    """

    return {
        "name": dictionary.name,
        "category": dictionary.category,
        "description": dictionary.description,
        "examples": dictionary.examples,
        "items": [
            {"abbr": list(entry.abbr), "pinyin": list(entry.pinyin), "text": entry.text}
            for entry in dictionary.items
        ],
    }


def write_json(dictionary: ScelDictionary, output_path: Path) -> None:
    """Write a dictionary as a UTF-8 JSON document."""

    with output_path.open("w", encoding="utf-8") as handle:
        json.dump(dictionary_to_dict(dictionary), handle, ensure_ascii=False, indent=2)
        handle.write("\n")
