"""CLI entrypoint for decoding SCEL dictionaries."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Sequence

from scel_dict.errors import ScelDictError
from scel_dict.io.export import write_json, write_tsv
from scel_dict.models import ScelDictionary
from scel_dict.parser import parse_file
from scel_dict.reporting.report_md import build_report_md
from scel_dict.validation import collect_length_counts

OUTPUT_FORMATS = ("tsv", "json")


def _format_table(headers: Sequence[str], data_rows: Sequence[Sequence[str]]) -> str:
    """Format rows as an ASCII table for terminal output.

    Args:
        headers: Table headers.
        data_rows: Row values.

    Returns:
        Monospace table string.
    """

    widths = [len(header) for header in headers]
    for row in data_rows:
        for idx, value in enumerate(row):
            widths[idx] = max(widths[idx], len(value))

    header_line = " | ".join(header.ljust(widths[idx]) for idx, header in enumerate(headers))
    separator_line = "-+-".join("-" * width for width in widths)
    body_lines = [
        " | ".join(value.ljust(widths[idx]) for idx, value in enumerate(row)) for row in data_rows
    ]
    return "\n".join([header_line, separator_line, *body_lines])


def build_arg_parser() -> argparse.ArgumentParser:
    """Construct CLI argument parser.

    Returns:
        Configured parser for the decode command.
    """

    parser = argparse.ArgumentParser(description="Decode a Sogou pinyin .scel dictionary.")
    parser.add_argument("--scel", required=True, type=Path, help="Path to source .scel file.")
    parser.add_argument(
        "--output",
        type=Path,
        default=None,
        help="Destination file (default: print items to stdout).",
    )
    parser.add_argument(
        "--format",
        choices=OUTPUT_FORMATS,
        default="tsv",
        help="Output file format (default: tsv).",
    )
    parser.add_argument(
        "--report",
        type=Path,
        default=None,
        help="Optional markdown report output path.",
    )
    parser.add_argument(
        "--no-header", action="store_true", help="Do not write TSV header (TSV only)."
    )
    parser.add_argument(
        "--with-weight",
        action="store_true",
        help="Append the raw weight column to TSV output (TSV only).",
    )
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging.")
    return parser


def _print_items(dictionary: ScelDictionary) -> None:
    """Print items as ``text abbr [pinyin ...]`` lines."""

    for entry in dictionary.items:
        print(entry.text, entry.abbreviation, f"[{entry.pinyin_text}]")


def _print_summary(dictionary: ScelDictionary) -> None:
    """Print metadata and a word-length table."""

    print(f"Name: {dictionary.name}")
    print(f"Category: {dictionary.category}")
    print(f"Items: {len(dictionary.items)}")

    if not dictionary.items:
        return

    length_counts = collect_length_counts(dictionary.items)
    length_rows = [[str(length), str(length_counts[length])] for length in sorted(length_counts)]
    print("\nWords by length:")
    print(_format_table(["length", "word_count"], length_rows))


def main(argv: Sequence[str] | None = None) -> int:
    """Run CLI workflow from arguments through artifact generation.

    Args:
        argv: Optional argument list; defaults to ``sys.argv[1:]``.

    Returns:
        Zero exit status on success.
    """

    parser = build_arg_parser()
    args = parser.parse_args(argv)

    if args.format == "json" and (args.no_header or args.with_weight):
        parser.error("--no-header and --with-weight apply to TSV output only")

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if not args.scel.exists():
        raise SystemExit(f"SCEL file not found: {args.scel}")

    try:
        dictionary = parse_file(args.scel)
    except ScelDictError as exc:
        raise SystemExit(f"Failed to decode {args.scel}: {exc}") from exc

    if args.output is None:
        _print_items(dictionary)
    else:
        if args.format == "json":
            write_json(dictionary, args.output)
        else:
            write_tsv(
                dictionary.items,
                output_path=args.output,
                include_header=not args.no_header,
                include_weight=args.with_weight,
            )
        print(f"Wrote {len(dictionary.items)} items to {args.output}")
        _print_summary(dictionary)

    if args.report is not None:
        args.report.write_text(build_report_md(dictionary), encoding="utf-8")
        print(f"Wrote report to {args.report}")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
