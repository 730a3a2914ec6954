"""Unit tests for TSV and JSON serialization helpers."""

from __future__ import annotations

import json
from pathlib import Path

from scel_dict.io.export import TSV_HEADER, dictionary_to_dict, write_json, write_tsv
from scel_dict.models import ScelDictionary, WordEntry

ENTRY = WordEntry("面向对象", ("mian", "xiang", "dui", "xiang"), ("m", "x", "d", "x"), weight=42)


def test_write_tsv_uses_canonical_columns(tmp_path: Path) -> None:
    output = tmp_path / "out.tsv"

    write_tsv([ENTRY], output_path=output, include_header=True)
    lines = output.read_text(encoding="utf-8").splitlines()

    assert TSV_HEADER == ["text", "abbr", "pinyin"]
    assert lines[0].split("\t") == TSV_HEADER
    assert lines[1].split("\t") == ["面向对象", "mxdx", "mian xiang dui xiang"]


def test_write_tsv_optionally_appends_weight_without_header(tmp_path: Path) -> None:
    output = tmp_path / "out.tsv"

    write_tsv([ENTRY], output_path=output, include_header=False, include_weight=True)

    assert output.read_text(encoding="utf-8") == "面向对象\tmxdx\tmian xiang dui xiang\t42\n"


def test_write_json_keeps_chinese_text_unescaped(tmp_path: Path) -> None:
    dictionary = ScelDictionary("编程语言", "计算机", "", "", (ENTRY,))
    output = tmp_path / "out.json"

    write_json(dictionary, output)

    assert "面向对象" in output.read_text(encoding="utf-8")
    assert json.loads(output.read_text(encoding="utf-8")) == dictionary_to_dict(dictionary)
    assert dictionary_to_dict(dictionary)["items"] == [
        {"abbr": ["m", "x", "d", "x"], "pinyin": ["mian", "xiang", "dui", "xiang"], "text": "面向对象"}
    ]
