"""
Character normalization for n-gram extraction.

Every character is reduced to a canonical detection symbol according to the
Unicode block it belongs to. Whole scripts where syllable identity does not
matter for language identification (kana, Bopomofo, Hangul) collapse to a
single marker, rare CJK ideographs fold onto representative ideographs, and
punctuation, digits and control characters become the separator.

Example:
    >>> normalize("7")
    ' '
    >>> normalize("\\u0219") == "\\u015f"  # comma below => cedilla
    True
    >>> normalize_vi("A\\u0300") == "\\u00c0"
    True
"""

import re
from typing import Pattern

from langprobe.text.symbols import get_symbol_tables
from langprobe.text.unicode_block import (
    UNICODE_ARABIC,
    UNICODE_BASIC_LATIN,
    UNICODE_BOPOMOFO,
    UNICODE_BOPOMOFO_EXTENDED,
    UNICODE_CJK_UNIFIED_IDEOGRAPHS,
    UNICODE_GENERAL_PUNCTUATION,
    UNICODE_HANGUL_SYLLABLES,
    UNICODE_HIRAGANA,
    UNICODE_KATAKANA,
    UNICODE_LATIN_1_SUPPLEMENT,
    UNICODE_LATIN_EXTENDED_ADDITIONAL,
    UNICODE_LATIN_EXTENDED_B,
    unicode_block,
)

SEPARATOR = " "


def normalize(ch: str) -> str:
    """Map a single character to its detection symbol."""
    block = unicode_block(ch)
    if block is None:
        return ch

    if block == UNICODE_BASIC_LATIN:
        if ch < "A" or ("Z" < ch < "a") or "z" < ch:
            ch = SEPARATOR
    elif block == UNICODE_LATIN_1_SUPPLEMENT:
        if ch in get_symbol_tables().latin1_excluded:
            ch = SEPARATOR
    elif block == UNICODE_LATIN_EXTENDED_B:
        # Romanian: comma below => cedilla
        if ch == "\u0219":
            ch = "\u015f"
        elif ch == "\u021b":
            ch = "\u0163"
    elif block == UNICODE_GENERAL_PUNCTUATION:
        ch = SEPARATOR
    elif block == UNICODE_ARABIC:
        if ch == "\u06cc":
            ch = "\u064a"  # Farsi yeh => Arabic yeh
    elif block == UNICODE_LATIN_EXTENDED_ADDITIONAL:
        if ch >= "\u1ea0":
            ch = "\u1ec3"
    elif block == UNICODE_HIRAGANA:
        ch = "\u3042"
    elif block == UNICODE_KATAKANA:
        ch = "\u30a2"
    elif block in (UNICODE_BOPOMOFO, UNICODE_BOPOMOFO_EXTENDED):
        ch = "\u3105"
    elif block == UNICODE_CJK_UNIFIED_IDEOGRAPHS:
        ch = get_symbol_tables().cjk_map.get(ch, ch)
    elif block == UNICODE_HANGUL_SYLLABLES:
        ch = "\uac00"
    return ch


_vi_pattern = None


def _alphabet_with_dmark() -> Pattern:
    global _vi_pattern
    if _vi_pattern is None:
        tables = get_symbol_tables()
        _vi_pattern = re.compile(
            "([" + tables.vi_base_letters + "])([" + tables.vi_diacritic_marks + "])"
        )
    return _vi_pattern


def normalize_vi(text: str) -> str:
    """
    Compose Vietnamese base letters followed by a combining diacritical mark
    (U+0300, U+0301, U+0303, U+0309, U+0323) into the precomposed letter.
    """
    tables = get_symbol_tables()

    def repl(m):
        alphabet = tables.vi_base_letters.find(m.group(1))
        dmark = tables.vi_diacritic_marks.find(m.group(2))
        return tables.vi_composed[dmark][alphabet]

    return _alphabet_with_dmark().sub(repl, text)
