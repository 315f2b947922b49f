"""
Sliding-window n-gram extraction.

A window holds the last three normalized characters of the stream. It is
reset at every word boundary (separator) and tracks runs of consecutive
ASCII capitals, which are treated as acronyms and contribute no features.

Example:
    >>> window = NGramWindow()
    >>> add_char(window, "A")
    >>> get_ngram(window, 2)
    ' A'
    >>> extract_ngrams("ab", {"a", "b", "ab"})
    ['a', 'b', 'ab']
"""

from dataclasses import dataclass
from typing import Container, List, Optional

from langprobe.text.normalizer import SEPARATOR, normalize

N_GRAM = 3


def _is_ascii_capital(ch: str) -> bool:
    return "A" <= ch <= "Z"


@dataclass
class NGramWindow:
    """Transient extraction state: up to three recent symbols."""

    grams: str = SEPARATOR
    capital_word: bool = False


def add_char(window: NGramWindow, ch: str) -> None:
    """Feed one raw character into the window."""
    ch = normalize(ch)
    last_char = window.grams[-1]
    if last_char == SEPARATOR:
        window.grams = SEPARATOR
        window.capital_word = False
        if ch == SEPARATOR:
            return
    elif len(window.grams) >= N_GRAM:
        window.grams = window.grams[1:]
    window.grams += ch

    window.capital_word = _is_ascii_capital(ch) and _is_ascii_capital(last_char)


def get_ngram(window: NGramWindow, n: int) -> Optional[str]:
    """Return the trailing n-gram of the window, or None when there is none."""
    if window.capital_word:
        return None
    if n < 1 or n > N_GRAM or len(window.grams) < n:
        return None
    if n == 1:
        ch = window.grams[-1]
        return None if ch == SEPARATOR else ch
    gram = window.grams[-n:]
    if gram.strip(SEPARATOR) == "":
        return None
    return gram


def extract_ngrams(text: str, vocabulary: Container[str]) -> List[str]:
    """
    Extract every 1-, 2- and 3-gram of text that appears in vocabulary.

    Grams are returned in stream order; grams outside the vocabulary are
    dropped rather than scored.
    """
    ngrams: List[str] = []
    window = NGramWindow()
    for ch in text:
        add_char(window, ch)
        if window.capital_word:
            continue
        for n in range(1, N_GRAM + 1):
            gram = get_ngram(window, n)
            if gram and gram != SEPARATOR and gram in vocabulary:
                ngrams.append(gram)
    return ngrams
