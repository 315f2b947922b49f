"""
Unicode block lookup for the blocks that carry a normalization rule.

Only blocks the normalizer treats specially are listed; every other
character has no block here and passes through normalization unchanged.
"""

from bisect import bisect_right
from typing import Optional

UNICODE_BASIC_LATIN = "Basic Latin"
UNICODE_LATIN_1_SUPPLEMENT = "Latin-1 Supplement"
UNICODE_LATIN_EXTENDED_B = "Latin Extended-B"
UNICODE_ARABIC = "Arabic"
UNICODE_LATIN_EXTENDED_ADDITIONAL = "Latin Extended Additional"
UNICODE_GENERAL_PUNCTUATION = "General Punctuation"
UNICODE_HIRAGANA = "Hiragana"
UNICODE_KATAKANA = "Katakana"
UNICODE_BOPOMOFO = "Bopomofo"
UNICODE_BOPOMOFO_EXTENDED = "Bopomofo Extended"
UNICODE_CJK_UNIFIED_IDEOGRAPHS = "CJK Unified Ideographs"
UNICODE_HANGUL_SYLLABLES = "Hangul Syllables"

# (name, first codepoint, last codepoint), sorted by first codepoint
_UNICODE_BLOCKS = (
    (UNICODE_BASIC_LATIN, 0x0000, 0x007F),
    (UNICODE_LATIN_1_SUPPLEMENT, 0x0080, 0x00FF),
    (UNICODE_LATIN_EXTENDED_B, 0x0180, 0x024F),
    (UNICODE_ARABIC, 0x0600, 0x06FF),
    (UNICODE_LATIN_EXTENDED_ADDITIONAL, 0x1E00, 0x1EFF),
    (UNICODE_GENERAL_PUNCTUATION, 0x2000, 0x206F),
    (UNICODE_HIRAGANA, 0x3040, 0x309F),
    (UNICODE_KATAKANA, 0x30A0, 0x30FF),
    (UNICODE_BOPOMOFO, 0x3100, 0x312F),
    (UNICODE_BOPOMOFO_EXTENDED, 0x31A0, 0x31BF),
    (UNICODE_CJK_UNIFIED_IDEOGRAPHS, 0x4E00, 0x9FFF),
    (UNICODE_HANGUL_SYLLABLES, 0xAC00, 0xD7AF),
)
_BLOCK_STARTS = [start for _, start, _ in _UNICODE_BLOCKS]


def unicode_block(ch: str) -> Optional[str]:
    """Return the name of the block containing ch, or None if it has no rule."""
    cp = ord(ch)
    pos = bisect_right(_BLOCK_STARTS, cp) - 1
    if pos < 0:
        return None
    name, start, end = _UNICODE_BLOCKS[pos]
    if start <= cp <= end:
        return name
    return None
