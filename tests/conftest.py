"""
Pytest configuration and fixtures for langprobe tests
"""

import random
from collections import Counter
from typing import Any, Dict, List

import pytest

from langprobe.core.config.settings import Settings
from langprobe.profiles.loader import load_profiles
from langprobe.profiles.registry import ProfileRegistry, build_registry

TRAINING_EN = "a a a b b c c d e"
TRAINING_FR = "a b b c c c d d d"
TRAINING_JA = "\u3042 \u3042 \u3042 \u3044 \u3046 \u3048 \u3048"

JSON_LANG1 = (
    '{"freq":{"A":3,"B":6,"C":3,"AB":2,"BC":1,"ABC":2,"BBC":1,"CBA":1},'
    '"n_words":[12,3,4],"name":"lang1"}'
)
JSON_LANG2 = (
    '{"freq":{"A":6,"B":3,"C":3,"AA":3,"AB":2,"ABC":1,"ABA":1,"CAA":1},'
    '"n_words":[12,5,3],"name":"lang2"}'
)


def profile_from_training(name: str, training: str) -> Dict[str, Any]:
    """Build a unigram-only profile from space separated training tokens"""
    words = training.split(" ")
    return {"name": name, "freq": dict(Counter(words)), "n_words": [len(words), 0, 0]}


@pytest.fixture(scope="session")
def test_settings() -> Settings:
    """Test settings with deterministic detector defaults"""
    return Settings(
        ENVIRONMENT="testing",
        DEBUG=True,
        LOG_LEVEL="DEBUG",
        DETECTOR_SEED=1234,
    )


@pytest.fixture
def training_profiles() -> List[Dict[str, Any]]:
    """en/fr/ja toy profiles with a single length bucket each"""
    return [
        profile_from_training("en", TRAINING_EN),
        profile_from_training("fr", TRAINING_FR),
        profile_from_training("ja", TRAINING_JA),
    ]


@pytest.fixture
def training_registry(training_profiles) -> ProfileRegistry:
    """Registry built from the toy en/fr/ja profiles"""
    return build_registry(training_profiles)


@pytest.fixture
def rng() -> random.Random:
    """Seeded random source"""
    return random.Random(20240601)


@pytest.fixture(scope="session")
def corpus_registry() -> ProfileRegistry:
    """Registry over every profile bundled with langdetect"""
    return build_registry(load_profiles())


@pytest.fixture
def json_profiles() -> List[str]:
    """Two small profiles serialized as JSON strings"""
    return [JSON_LANG1, JSON_LANG2]
