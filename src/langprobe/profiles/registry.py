"""
Profile registry: the immutable gram => per-language probability matrix.

The registry is built once from a set of language profiles and shared by
every detector created from it. Registration order defines the language
index used by every probability vector:

    lang_list            = ("en", "fr", "ja")
    word_lang_prob_map   = {"a": (0.33, 0.11, 0.0), ...}

The accelerated estimator needs the same data as one contiguous numpy
matrix. That matrix is built lazily, once, under a lock, and is marked
read-only so detectors can share views of it.

Example:
    >>> registry = build_registry([
    ...     {"name": "en", "freq": {"a": 3, "b": 1}, "n_words": [4, 0, 0]},
    ...     {"name": "fr", "freq": {"a": 1, "b": 3}, "n_words": [4, 0, 0]},
    ... ])
    >>> registry.lang_list
    ('en', 'fr')
    >>> registry.word_lang_prob_map["a"]
    (0.75, 0.25)
"""

import threading
from types import MappingProxyType
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence, Tuple, Union

import numpy as np
from pydantic import ValidationError

from langprobe.core.exceptions.custom_exceptions import (
    DuplicateProfileError,
    ProfileError,
)
from langprobe.core.logging.logger import get_logger
from langprobe.profiles.profile import N_GRAM_LENGTHS, LanguageProfile, omit_less_freq

logger = get_logger(__name__)

ProfileInput = Union[LanguageProfile, Dict[str, Any]]


class ProfileRegistry:
    """
    Read-only language index and probability matrix.

    Attributes:
        lang_list: Registered language names, in registration order
        word_lang_prob_map: Gram => probability per language of lang_list
        profiles: Pruned copies of the registered profiles
    """

    def __init__(
        self,
        lang_list: Sequence[str],
        word_lang_prob_map: Mapping[str, Sequence[float]],
        profiles: Sequence[LanguageProfile] = (),
    ):
        self._lang_list = tuple(lang_list)
        self._word_lang_prob_map = MappingProxyType(
            {gram: tuple(vector) for gram, vector in word_lang_prob_map.items()}
        )
        self._profiles = tuple(profiles)

        self._matrix: Optional[np.ndarray] = None
        self._word_index: Optional[Mapping[str, int]] = None
        self._matrix_lock = threading.Lock()

    @property
    def lang_list(self) -> Tuple[str, ...]:
        return self._lang_list

    @property
    def word_lang_prob_map(self) -> Mapping[str, Tuple[float, ...]]:
        return self._word_lang_prob_map

    @property
    def profiles(self) -> Tuple[LanguageProfile, ...]:
        return self._profiles

    def __len__(self) -> int:
        return len(self._lang_list)

    def __contains__(self, gram: object) -> bool:
        return gram in self._word_lang_prob_map

    def matrix(self) -> Tuple[np.ndarray, Mapping[str, int]]:
        """
        Return the probability matrix as a read-only (grams x languages)
        float64 array, together with the gram => row index.
        """
        if self._matrix is None:
            with self._matrix_lock:
                if self._matrix is None:
                    self._word_index, self._matrix = self._build_matrix()
        return self._matrix, self._word_index

    def _build_matrix(self) -> Tuple[Mapping[str, int], np.ndarray]:
        grams = list(self._word_lang_prob_map)
        matrix = np.zeros((len(grams), len(self._lang_list)), dtype=np.float64)
        for row, gram in enumerate(grams):
            matrix[row] = self._word_lang_prob_map[gram]
        matrix.setflags(write=False)

        logger.debug(
            "Probability matrix built",
            shape=matrix.shape,
            nbytes=matrix.nbytes,
        )
        return MappingProxyType({gram: row for row, gram in enumerate(grams)}), matrix


def _to_profile(profile: ProfileInput) -> LanguageProfile:
    if isinstance(profile, LanguageProfile):
        return profile
    try:
        return LanguageProfile.model_validate(profile)
    except ValidationError as e:
        raise ProfileError(
            f"Invalid language profile: {e}",
            error_code="PROFILE_INVALID",
        ) from e


def build_registry(
    profiles: Union[ProfileInput, Iterable[ProfileInput]],
) -> ProfileRegistry:
    """
    Build a registry from one profile or a sequence of profiles.

    Each gram of length 1-3 gets a vector with one probability per profile,
    freq[gram] / n_words[len(gram) - 1]. Profiles are pruned after indexing;
    the matrix keeps the unpruned probabilities.

    Raises:
        ProfileError: If a profile is malformed or has no name
        DuplicateProfileError: If a language name is registered twice
    """
    if isinstance(profiles, (LanguageProfile, dict)):
        profiles = [profiles]
    validated = [_to_profile(p) for p in profiles]

    if not validated:
        logger.warning("Building a profile registry without any profile")

    lang_size = len(validated)
    lang_list: List[str] = []
    word_lang_prob_map: Dict[str, List[float]] = {}
    pruned: List[LanguageProfile] = []

    for index, profile in enumerate(validated):
        if not profile.name:
            raise ProfileError(
                "Language profile has no name",
                error_code="PROFILE_MISSING_NAME",
                details={"index": index},
            )
        if profile.name in lang_list:
            raise DuplicateProfileError(
                f"Duplicate language profile: {profile.name}",
                error_code="PROFILE_DUPLICATE",
                details={"lang": profile.name, "index": index},
            )
        lang_list.append(profile.name)

        empty_buckets = set()
        for gram, count in profile.freq.items():
            length = len(gram)
            if not 1 <= length <= N_GRAM_LENGTHS:
                continue
            vector = word_lang_prob_map.setdefault(gram, [0.0] * lang_size)
            n_words = profile.n_words[length - 1]
            if n_words > 0:
                vector[index] = count / n_words
            else:
                empty_buckets.add(length)

        if empty_buckets:
            logger.debug(
                "Gram length buckets without token mass",
                lang=profile.name,
                gram_lengths=sorted(empty_buckets),
            )

        pruned.append(omit_less_freq(profile))

    logger.debug(
        "Profile registry built",
        languages=lang_size,
        grams=len(word_lang_prob_map),
    )
    return ProfileRegistry(lang_list, word_lang_prob_map, pruned)
