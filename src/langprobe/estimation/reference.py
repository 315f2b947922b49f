"""
Pure-Python estimator backend.

Every operation is a plain loop over per-language lists. This backend is
the readable definition of the algorithm and the baseline the numpy backend
is checked against.
"""

from typing import List, Optional, Sequence

from langprobe.core.logging.logger import get_logger
from langprobe.estimation.base import CONVERGENCE_CHECK_INTERVAL, BaseEstimator

logger = get_logger(__name__)


def _init_probability(prior: Optional[Sequence[float]], lang_size: int) -> List[float]:
    if prior is not None:
        return list(prior)
    return [1.0 / lang_size] * lang_size


def _normalize_prob(prob: List[float]) -> float:
    """Normalize prob in place and return its maximum."""
    total = sum(prob)
    if total <= 0:
        return 0.0
    maxp = 0.0
    for j in range(len(prob)):
        prob[j] /= total
        if prob[j] > maxp:
            maxp = prob[j]
    return maxp


class ReferenceEstimator(BaseEstimator):
    """Sequential, list-based implementation of the randomized estimator."""

    name = "reference"

    def estimate(
        self, ngrams: Sequence[str], prior: Optional[Sequence[float]] = None
    ) -> List[float]:
        self._check_features(ngrams)

        params = self.params
        table = self.registry.word_lang_prob_map
        lang_size = len(self.registry.lang_list)
        n_ngrams = len(ngrams)
        lang_prob = [0.0] * lang_size

        for _ in range(params.n_trial):
            prob = _init_probability(prior, lang_size)
            weight = params.trial_weight(self.rng)

            i = 0
            while True:
                row = table.get(ngrams[self._draw_index(n_ngrams)])
                if row is not None:
                    for j in range(lang_size):
                        prob[j] *= weight + row[j]

                if i % CONVERGENCE_CHECK_INTERVAL == 0:
                    maxp = _normalize_prob(prob)
                    if maxp > params.conv_threshold or i >= params.iteration_limit:
                        break
                i += 1

            for j in range(lang_size):
                lang_prob[j] += prob[j] / params.n_trial

        logger.debug("Estimate complete", backend=self.name, features=n_ngrams)
        return lang_prob
