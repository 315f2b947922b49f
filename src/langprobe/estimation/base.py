"""
Base classes for probability estimators.

An estimator turns the n-gram features of a text into one probability per
registered language. All backends run the same randomized algorithm:

    for each of n_trial trials:
        prob = prior (or uniform)
        trial_alpha = alpha + random() * alpha_width
        repeat:
            pick a gram uniformly at random from the features
            prob[j] *= trial_alpha / base_freq + P(gram | lang j)
            every 5th iteration (starting with the first) renormalize and
            stop once max(prob) > conv_threshold or the iteration limit is hit
        result += prob / n_trial

Backends draw from the same injectable random.Random in the same order, so
seeding the generator makes a detection reproducible on every backend.
"""

import random
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List, Optional, Sequence

from langprobe.core.config.settings import Settings, settings as default_settings
from langprobe.core.exceptions.custom_exceptions import NoFeaturesError
from langprobe.profiles.registry import ProfileRegistry

CONVERGENCE_CHECK_INTERVAL = 5


@dataclass
class EstimatorParams:
    """Tuning parameters of the randomized estimator."""

    alpha: float = 0.5
    alpha_width: float = 0.05
    n_trial: int = 7
    iteration_limit: int = 1000
    conv_threshold: float = 0.99999
    base_freq: int = 10000

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> "EstimatorParams":
        """Build parameters from the DETECTOR_* settings."""
        settings = settings or default_settings
        return cls(
            alpha=settings.DETECTOR_ALPHA,
            alpha_width=settings.DETECTOR_ALPHA_WIDTH,
            n_trial=settings.DETECTOR_N_TRIAL,
            iteration_limit=settings.DETECTOR_ITERATION_LIMIT,
            conv_threshold=settings.DETECTOR_CONV_THRESHOLD,
            base_freq=settings.DETECTOR_BASE_FREQ,
        )

    def trial_weight(self, rng: random.Random) -> float:
        """Draw a trial alpha and return the smoothing weight it implies."""
        trial_alpha = self.alpha + rng.random() * self.alpha_width
        return trial_alpha / self.base_freq


class BaseEstimator(ABC):
    """
    Abstract base class for all estimator backends.

    Args:
        registry: Registry whose matrix is scored against
        params: Estimator parameters (defaults from settings)
        rng: Random source; a fresh unseeded random.Random when omitted
    """

    name = "base"

    def __init__(
        self,
        registry: ProfileRegistry,
        params: Optional[EstimatorParams] = None,
        rng: Optional[random.Random] = None,
    ):
        self.registry = registry
        self.params = params or EstimatorParams.from_settings()
        self.rng = rng or random.Random()

    @abstractmethod
    def estimate(
        self, ngrams: Sequence[str], prior: Optional[Sequence[float]] = None
    ) -> List[float]:
        """
        Return the averaged per-language probabilities for ngrams.

        Args:
            ngrams: Extracted features, in stream order
            prior: Normalized starting weights aligned to registry.lang_list

        Raises:
            NoFeaturesError: If ngrams is empty
        """
        pass

    def release(self) -> None:
        """Free backend resources. Backends without resources do nothing."""

    def _check_features(self, ngrams: Sequence[str]) -> None:
        if not ngrams:
            raise NoFeaturesError(
                "No features in text",
                error_code="NO_FEATURES",
                details={"languages": len(self.registry.lang_list)},
            )

    def _draw_index(self, n: int) -> int:
        return int(self.rng.random() * n)
