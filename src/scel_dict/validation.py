"""Validation helpers and statistics for decoded dictionaries."""

from __future__ import annotations

from collections import Counter
from typing import Sequence

from scel_dict.models import ScelDictionary, WordEntry

MAX_ERROR_PREVIEW = 25


def _entry_errors(idx: int, entry: WordEntry) -> list[str]:
    """Collect invariant violations for one entry."""

    errors: list[str] = []
    if not entry.text:
        errors.append(f"Item {idx}: empty text")
    if len(entry.pinyin) != len(entry.abbr):
        errors.append(
            f"Item {idx}: {len(entry.pinyin)} pinyin syllables but {len(entry.abbr)} abbreviations"
        )
    for syllable, letter in zip(entry.pinyin, entry.abbr):
        if not syllable:
            errors.append(f"Item {idx}: empty pinyin syllable in '{entry.text}'")
        elif letter != syllable[0]:
            errors.append(f"Item {idx}: abbreviation '{letter}' does not start '{syllable}'")
        elif not syllable.isascii():
            errors.append(f"Item {idx}: non-ASCII syllable '{syllable}'")
    if not 0 <= entry.weight <= 0xFFFF:
        errors.append(f"Item {idx}: weight {entry.weight} outside u16 range")
    return errors


def _is_utf8_encodable(value: str) -> bool:
    try:
        value.encode("utf-8")
    except UnicodeEncodeError:
        return False
    return True


def validate_dictionary(dictionary: ScelDictionary) -> None:
    """Validate decoded dictionary invariants.

    Checks per-entry pinyin/abbreviation alignment, ascending weight order and
    that every string survives UTF-8 encoding (lone surrogates do not).

    Args:
        dictionary: Decoded dictionary.

    Raises:
        ValueError: If any invariant is violated.
    """

    errors: list[str] = []
    for field_name in ("name", "category", "description", "examples"):
        if not _is_utf8_encodable(getattr(dictionary, field_name)):
            errors.append(f"Metadata field '{field_name}' is not valid UTF-8 text")

    previous_weight: int | None = None
    for idx, entry in enumerate(dictionary.items, start=1):
        errors.extend(_entry_errors(idx, entry))
        if not _is_utf8_encodable(entry.text):
            errors.append(f"Item {idx}: text is not valid UTF-8")
        if previous_weight is not None and entry.weight < previous_weight:
            errors.append(f"Item {idx}: weight {entry.weight} after {previous_weight}")
        previous_weight = entry.weight

    if errors:
        preview = "\n".join(f"- {item}" for item in errors[:MAX_ERROR_PREVIEW])
        rest = len(errors) - min(MAX_ERROR_PREVIEW, len(errors))
        more = f"\n- ... and {rest} more" if rest > 0 else ""
        raise ValueError(f"Dictionary validation failed with {len(errors)} errors:\n{preview}{more}")


def find_pinyin_mismatches(entries: Sequence[WordEntry]) -> list[WordEntry]:
    """Return entries whose character count differs from their syllable count.

    This happens when a record referenced syllable indices missing from the
    syllable table.
    """

    return [entry for entry in entries if len(entry.text) != len(entry.pinyin)]


def collect_syllable_counts(entries: Sequence[WordEntry]) -> dict[str, int]:
    """Count syllable occurrences across all entries.

    Args:
        entries: Decoded word entries.

    Returns:
        Dictionary of syllable to occurrence count.
    """

    counter: Counter[str] = Counter()
    for entry in entries:
        counter.update(entry.pinyin)
    return dict(counter)


def collect_length_counts(entries: Sequence[WordEntry]) -> dict[int, int]:
    """Count entries by word length in characters."""

    counter: Counter[int] = Counter()
    for entry in entries:
        counter[len(entry.text)] += 1
    return dict(counter)
