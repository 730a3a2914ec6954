"""Decoder for Sogou pinyin SCEL dictionary files."""

from .errors import CorruptedDictError, InvalidDictError, ScelDictError
from .models import ScelDictionary, WordEntry
from .parser import parse, parse_bytes, parse_file

__all__ = [
    "ScelDictionary",
    "WordEntry",
    "ScelDictError",
    "InvalidDictError",
    "CorruptedDictError",
    "parse",
    "parse_bytes",
    "parse_file",
]
