"""
langprobe Text Module - Normalization and Feature Extraction.

This module turns raw text into the n-gram features scored by the
estimators.

Core Components:
    - TextPreprocessor: URL/e-mail stripping, Vietnamese composition,
      truncation and whitespace collapse applied on append
    - normalize: per-character canonicalization by Unicode block
    - normalize_vi: Vietnamese base letter + combining mark composition
    - extract_ngrams: sliding-window 1/2/3-gram extraction

Example:
    >>> from langprobe.text import TextPreprocessor, extract_ngrams
    >>> text = TextPreprocessor().process("Hello,  World")
    >>> extract_ngrams(text, {"e", "ll"})
    ['e', 'll']
"""

from .cleaners import TextPreprocessor
from .ngram import NGramWindow, add_char, extract_ngrams, get_ngram
from .normalizer import SEPARATOR, normalize, normalize_vi

__all__ = [
    "TextPreprocessor",
    "NGramWindow",
    "add_char",
    "get_ngram",
    "extract_ngrams",
    "SEPARATOR",
    "normalize",
    "normalize_vi",
]
