"""
langprobe Profiles Module - Language Profiles and the Probability Registry.

Core Components:
    - LanguageProfile: per-language n-gram counts and token masses
    - omit_less_freq: pure pruning of rare and foreign-script grams
    - ProfileRegistry / build_registry: immutable gram => probability matrix
    - load_profile / load_profiles: JSON profile loading

Example:
    >>> from langprobe.profiles import build_registry, load_profiles
    >>> registry = build_registry(load_profiles(languages=["de", "en"]))
    >>> registry.lang_list
    ('de', 'en')
"""

from .loader import default_profiles_dir, load_profile, load_profiles
from .profile import LanguageProfile, omit_less_freq
from .registry import ProfileRegistry, build_registry

__all__ = [
    "LanguageProfile",
    "omit_less_freq",
    "ProfileRegistry",
    "build_registry",
    "default_profiles_dir",
    "load_profile",
    "load_profiles",
]
