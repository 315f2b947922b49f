"""
langprobe - N-gram Language Detection

langprobe identifies the most probable natural language of a text snippet
from per-language n-gram frequency profiles. It is meant to be embedded in
text pipelines (search, moderation, localization) as a small
classification primitive.

Key Features:
    - Unicode-aware character normalization (CJK folding, kana, Hangul)
    - Vietnamese diacritic composition and URL/e-mail stripping
    - Sliding-window 1/2/3-gram extraction with acronym suppression
    - Randomized multi-trial Bayesian-like estimation with priors
    - Interchangeable pure-Python and numpy estimator backends
    - 55 bundled language profiles via langdetect

Modules:
    core: Configuration, logging and exceptions
    text: Normalization, preprocessing and n-gram extraction
    profiles: Profile model, pruning, registry and loading
    estimation: Estimator backends
    detector: Detector handle, ranking and one-shot detection
    cli: Command-line interface

Example:
    >>> from langprobe import build_registry, detect_language, load_profiles
    >>> registry = build_registry(load_profiles())
    >>> detect_language("Hello, World", registry, seed=1)
    'en'
"""

__version__ = "0.1.0"
__description__ = "N-gram language detection with pluggable estimator backends"

from langprobe.core.config.settings import Settings
from langprobe.core.logging.logger import get_logger
from langprobe.detector import (
    UNKNOWN_LANG,
    Detector,
    ScoredLanguage,
    create_detector,
    detect_language,
    rank,
)
from langprobe.profiles import (
    LanguageProfile,
    ProfileRegistry,
    build_registry,
    load_profile,
    load_profiles,
)

__all__ = [
    "Settings",
    "get_logger",
    "UNKNOWN_LANG",
    "Detector",
    "ScoredLanguage",
    "create_detector",
    "detect_language",
    "rank",
    "LanguageProfile",
    "ProfileRegistry",
    "build_registry",
    "load_profile",
    "load_profiles",
]
