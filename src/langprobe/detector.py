"""
Language detector handle and one-shot detection.

A Detector accumulates text, extracts its n-gram features and asks an
estimator backend for per-language probabilities, which are then ranked.
Detectors are cheap to create from a shared ProfileRegistry; the numpy
backend holds flat buffers for the detector's lifetime, so a detector should
be released when done, preferably with a ``with`` block.

Example:
    >>> registry = build_registry(load_profiles(languages=["de", "en", "fr"]))
    >>> with create_detector(registry, seed=42) as detector:
    ...     detector.append("Hallo, Welt, wie geht es Dir?")
    ...     detector.detect()
    'de'
    >>> detect_language("Hello, World", registry)
    'en'
"""

import math
import random
from dataclasses import dataclass, replace
from typing import Any, Iterable, List, Mapping, Optional, Sequence, Tuple, Union

from langprobe.core.config.settings import settings
from langprobe.core.exceptions.custom_exceptions import DetectorReleasedError, PriorError
from langprobe.core.logging.logger import bind_detection_context
from langprobe.estimation.base import BaseEstimator, EstimatorParams
from langprobe.estimation.manager import create_estimator
from langprobe.profiles.registry import ProfileInput, ProfileRegistry, build_registry
from langprobe.text.cleaners import TextPreprocessor
from langprobe.text.ngram import extract_ngrams

UNKNOWN_LANG = "unknown"


@dataclass(frozen=True)
class ScoredLanguage:
    """A language and its estimated probability."""

    lang: str
    prob: float

    def __str__(self) -> str:
        return f"{self.lang}:{self.prob}"


def rank(
    prob: Sequence[float],
    lang_list: Sequence[str],
    threshold: Optional[float] = None,
) -> List[ScoredLanguage]:
    """
    Pair probabilities with language names, keep those above threshold and
    sort them in descending order. Ties keep lang_list order.
    """
    if threshold is None:
        threshold = settings.DETECTOR_PROB_THRESHOLD
    ranked = [ScoredLanguage(lang, p) for lang, p in zip(lang_list, prob) if p > threshold]
    ranked.sort(key=lambda scored: scored.prob, reverse=True)
    return ranked


class Detector:
    """
    Stateful detection handle bound to one registry and one estimator.

    Args:
        registry: Shared profile registry
        estimator: Backend owned by this detector
        max_text_length: Characters kept per appended text
        prob_threshold: Minimum probability reported by get_probabilities()
    """

    def __init__(
        self,
        registry: ProfileRegistry,
        estimator: BaseEstimator,
        max_text_length: Optional[int] = None,
        prob_threshold: Optional[float] = None,
    ):
        self.registry = registry
        self.estimator = estimator
        self.preprocessor = TextPreprocessor(max_text_length)
        self.prob_threshold = prob_threshold
        self.logger = bind_detection_context(
            backend=estimator.name, languages=len(registry.lang_list)
        )

        self._text = ""
        self._prior: Optional[List[float]] = None
        self._lang_prob: Optional[List[float]] = None
        self._released = False

    def __enter__(self) -> "Detector":
        self._ensure_active()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> bool:
        self.release()
        return False

    @property
    def released(self) -> bool:
        return self._released

    @property
    def prior(self) -> Optional[Tuple[float, ...]]:
        """Normalized prior weights aligned to lang_list, if set."""
        return tuple(self._prior) if self._prior is not None else None

    def _ensure_active(self) -> None:
        if self._released:
            raise DetectorReleasedError(
                "Detector has been released",
                error_code="DETECTOR_RELEASED",
            )

    def append(self, text: str) -> None:
        """Clean text and add it to the detection buffer."""
        self._ensure_active()
        self._text += self.preprocessor(text)
        self._lang_prob = None

    def get_text(self) -> str:
        return self._text

    def set_alpha(self, alpha: float) -> None:
        self._ensure_active()
        self.estimator.params.alpha = alpha
        self._lang_prob = None

    def set_max_text_length(self, max_text_length: int) -> None:
        """Limit later appends to max_text_length characters (negative means 0)."""
        self._ensure_active()
        self.preprocessor.max_text_length = max_text_length

    def set_prior_map(self, prior_map: Mapping[str, float]) -> None:
        """
        Set prior weights by language name.

        Names that are not registered are ignored; registered languages
        missing from prior_map get weight 0. The stored weights sum to 1.

        Raises:
            PriorError: If a weight is negative, NaN or infinite, or all
                weights are zero
        """
        self._ensure_active()
        prior = [0.0] * len(self.registry.lang_list)
        total = 0.0
        for index, lang in enumerate(self.registry.lang_list):
            if lang not in prior_map:
                continue
            weight = float(prior_map[lang])
            if not math.isfinite(weight):
                raise PriorError(
                    "Prior probability must be a finite number",
                    error_code="PRIOR_INVALID",
                    details={"lang": lang, "prior": weight},
                )
            if weight < 0:
                raise PriorError(
                    "Prior probability must be non-negative",
                    error_code="PRIOR_NEGATIVE",
                    details={"lang": lang, "prior": weight},
                )
            prior[index] = weight
            total += weight

        if total <= 0:
            raise PriorError(
                "At least one non-zero prior probability is required",
                error_code="PRIOR_NO_MASS",
                details={"languages": sorted(prior_map)},
            )

        self._prior = [weight / total for weight in prior]
        self._lang_prob = None

    def detect(self) -> str:
        """Return the most probable language, or "unknown"."""
        probabilities = self.get_probabilities()
        if probabilities:
            return probabilities[0].lang
        return UNKNOWN_LANG

    def get_probabilities(self) -> List[ScoredLanguage]:
        """
        Return the ranked languages of the buffered text.

        Raises:
            NoFeaturesError: If the text has no n-gram known to the registry
            DetectorReleasedError: If the detector was released
        """
        self._ensure_active()
        if self._lang_prob is None:
            self._detect_block()
        return rank(self._lang_prob, self.registry.lang_list, self.prob_threshold)

    def _detect_block(self) -> None:
        ngrams = extract_ngrams(self._text, self.registry.word_lang_prob_map)
        self._lang_prob = self.estimator.estimate(ngrams, self._prior)
        self.logger.debug(
            "Detection complete",
            text_length=len(self._text),
            features=len(ngrams),
        )

    def release(self) -> None:
        """Release estimator buffers. Safe to call more than once."""
        if self._released:
            return
        self.estimator.release()
        self._released = True


def create_detector(
    registry: ProfileRegistry,
    *,
    params: Optional[EstimatorParams] = None,
    backend: Optional[str] = None,
    rng: Optional[random.Random] = None,
    seed: Optional[int] = None,
    max_text_length: Optional[int] = None,
    prob_threshold: Optional[float] = None,
) -> Detector:
    """
    Create a detector over registry.

    Args:
        params: Estimator parameters (copied; defaults from settings)
        backend: "reference" or "numpy" (defaults to DETECTOR_BACKEND)
        rng: Random source; takes precedence over seed
        seed: Seed for a new random.Random (defaults to DETECTOR_SEED)
        max_text_length: Characters kept per appended text
        prob_threshold: Minimum reported probability

    Raises:
        ConfigurationError: If the backend is not supported
    """
    if rng is None:
        rng = random.Random(seed if seed is not None else settings.DETECTOR_SEED)
    params = replace(params) if params is not None else EstimatorParams.from_settings()
    estimator = create_estimator(registry, backend=backend, params=params, rng=rng)
    return Detector(
        registry,
        estimator,
        max_text_length=max_text_length,
        prob_threshold=prob_threshold,
    )


def detect_language(
    text: str,
    profiles: Union[ProfileRegistry, ProfileInput, Iterable[ProfileInput]],
    priors: Optional[Mapping[str, float]] = None,
    **detector_options: Any,
) -> str:
    """
    Detect the language of text in one call.

    profiles may be a ready registry or anything build_registry() accepts.
    Remaining keyword arguments are passed to create_detector().
    """
    registry = profiles if isinstance(profiles, ProfileRegistry) else build_registry(profiles)
    with create_detector(registry, **detector_options) as detector:
        if priors:
            detector.set_prior_map(priors)
        detector.append(text)
        return detector.detect()
