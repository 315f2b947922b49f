"""
Language profile model and noise pruning.

A profile holds the occurrence count of every 1-, 2- and 3-gram observed in
a language's training corpus, plus the total token count per gram length:

    {"name": "en", "freq": {"a": 3, "ab": 1}, "n_words": [9, 4, 1]}

n_words[k] is the token mass of grams of length k + 1.
"""

import re
from typing import Dict, List, Optional

from pydantic import BaseModel, Field, field_validator

ROMAN_RE = re.compile(r"[A-Za-z]")

N_GRAM_LENGTHS = 3
MINIMUM_FREQ = 2
LESS_FREQ_RATIO = 100000


class LanguageProfile(BaseModel):
    """N-gram statistics for one language."""

    name: Optional[str] = None
    freq: Dict[str, int] = Field(default_factory=dict)
    n_words: List[int] = Field(default_factory=lambda: [0] * N_GRAM_LENGTHS)

    @field_validator("n_words")
    @classmethod
    def validate_n_words(cls, v: List[int]) -> List[int]:
        if not v:
            return [0] * N_GRAM_LENGTHS
        if len(v) > N_GRAM_LENGTHS:
            raise ValueError(f"n_words holds at most {N_GRAM_LENGTHS} entries")
        return list(v) + [0] * (N_GRAM_LENGTHS - len(v))


def _discount(n_words: List[int], gram: str, count: int) -> None:
    if 1 <= len(gram) <= N_GRAM_LENGTHS:
        n_words[len(gram) - 1] -= count


def omit_less_freq(profile: LanguageProfile) -> LanguageProfile:
    """
    Return a copy of profile without rare grams.

    Grams seen at most max(n_words[0] // 100000, 2) times are removed. When
    the remaining single Roman letters carry less than a third of the unigram
    mass, every remaining gram containing a Roman letter is removed as well.
    Removed counts are subtracted from the matching n_words bucket.
    """
    if not profile.name:
        return profile.model_copy(deep=True)

    n_words = list(profile.n_words)
    threshold = max(n_words[0] // LESS_FREQ_RATIO, MINIMUM_FREQ)

    freq: Dict[str, int] = {}
    roman = 0
    for gram, count in profile.freq.items():
        if count <= threshold:
            _discount(n_words, gram, count)
            continue
        freq[gram] = count
        if ROMAN_RE.fullmatch(gram):
            roman += count

    if roman < n_words[0] // 3:
        for gram in [g for g in freq if ROMAN_RE.search(g)]:
            _discount(n_words, gram, freq.pop(gram))

    return LanguageProfile(name=profile.name, freq=freq, n_words=n_words)
