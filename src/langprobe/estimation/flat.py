"""
Flat-buffer estimator backend built on numpy.

The per-language inner loop of the estimator is replaced by whole-vector
operations over contiguous float64 buffers:

    matrix          (grams x languages) read-only view of the registry matrix
    output          (languages,) averaged result
    prior           (languages,) starting weights, when a prior is set
    prob            (languages,) working vector of the current trial
    feature_index   (features,) matrix row of every extracted gram, -1 if absent

All buffers except feature_index are acquired when the estimator is created
and held until release(). feature_index only lives for one estimate() call.

Random draws are consumed in exactly the order of the reference backend.
The updates between two convergence checks (iteration 0, then 1-5, 6-10,
...) are multiplied together in one step, so results match the reference
backend up to floating point rounding.
"""

from contextlib import contextmanager
from typing import Iterator, List, Optional, Sequence

import numpy as np

from langprobe.core.exceptions.custom_exceptions import DetectorReleasedError
from langprobe.core.logging.logger import get_logger
from langprobe.estimation.base import CONVERGENCE_CHECK_INTERVAL, BaseEstimator
from langprobe.profiles.registry import ProfileRegistry

logger = get_logger(__name__)


class FlatBuffers:
    """Contiguous numpy buffers sized from a registry."""

    def __init__(self, registry: ProfileRegistry):
        matrix, word_index = registry.matrix()
        self.lang_size = len(registry.lang_list)
        self.matrix: Optional[np.ndarray] = matrix.view()
        self.word_index = word_index
        self.output: Optional[np.ndarray] = np.zeros(self.lang_size, dtype=np.float64)
        self.prior: Optional[np.ndarray] = np.empty(self.lang_size, dtype=np.float64)
        self.prob: Optional[np.ndarray] = np.empty(self.lang_size, dtype=np.float64)
        self.has_prior = False
        self.feature_index: Optional[np.ndarray] = None
        self._released = False

        logger.debug(
            "Flat buffers acquired",
            languages=self.lang_size,
            grams=self.matrix.shape[0],
        )

    @property
    def released(self) -> bool:
        return self._released

    def ensure_active(self) -> None:
        if self._released:
            raise DetectorReleasedError(
                "Estimator buffers have been released",
                error_code="BUFFERS_RELEASED",
            )

    def load_prior(self, prior: Optional[Sequence[float]]) -> None:
        self.ensure_active()
        if prior is None:
            self.has_prior = False
        else:
            self.prior[:] = prior
            self.has_prior = True

    @contextmanager
    def features(self, ngrams: Sequence[str]) -> Iterator[np.ndarray]:
        """Scope a feature-index buffer to the enclosed block."""
        self.ensure_active()
        self.feature_index = np.fromiter(
            (self.word_index.get(gram, -1) for gram in ngrams),
            dtype=np.intp,
            count=len(ngrams),
        )
        try:
            yield self.feature_index
        finally:
            self.feature_index = None

    def release(self) -> None:
        """Drop every buffer. Safe to call more than once."""
        if self._released:
            return
        self.matrix = None
        self.word_index = None
        self.output = None
        self.prior = None
        self.prob = None
        self.feature_index = None
        self._released = True
        logger.debug("Flat buffers released", languages=self.lang_size)


def _normalize_prob(prob: np.ndarray) -> float:
    total = prob.sum()
    if total <= 0:
        return 0.0
    prob /= total
    return float(prob.max())


class NumpyEstimator(BaseEstimator):
    """Vectorized estimator over FlatBuffers."""

    name = "numpy"

    def __init__(self, registry, params=None, rng=None):
        super().__init__(registry, params, rng)
        self.buffers = FlatBuffers(registry)

    def release(self) -> None:
        self.buffers.release()

    def estimate(
        self, ngrams: Sequence[str], prior: Optional[Sequence[float]] = None
    ) -> List[float]:
        buffers = self.buffers
        buffers.ensure_active()
        self._check_features(ngrams)

        params = self.params
        n_ngrams = len(ngrams)
        buffers.load_prior(prior)
        buffers.output.fill(0.0)
        prob = buffers.prob

        with buffers.features(ngrams) as feature_index:
            for _ in range(params.n_trial):
                if buffers.has_prior:
                    prob[:] = buffers.prior
                else:
                    prob.fill(1.0 / buffers.lang_size)
                weight = params.trial_weight(self.rng)

                block_end, block_size = 0, 1
                while True:
                    picks = [self._draw_index(n_ngrams) for _ in range(block_size)]
                    rows = feature_index[picks]
                    rows = rows[rows >= 0]
                    if rows.size:
                        prob *= np.prod(weight + buffers.matrix[rows], axis=0)

                    maxp = _normalize_prob(prob)
                    if maxp > params.conv_threshold or block_end >= params.iteration_limit:
                        break
                    block_end += CONVERGENCE_CHECK_INTERVAL
                    block_size = CONVERGENCE_CHECK_INTERVAL

                buffers.output += prob / params.n_trial

        logger.debug("Estimate complete", backend=self.name, features=n_ngrams)
        return buffers.output.tolist()
