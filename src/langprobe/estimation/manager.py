"""
Estimator backend selection.

Backends are chosen by name, from DETECTOR_BACKEND unless given explicitly:

    reference   pure-Python loops (ReferenceEstimator)
    numpy       vectorized flat buffers (NumpyEstimator)

Example:
    >>> estimator = create_estimator(registry, backend="reference", rng=random.Random(7))
    >>> estimator.estimate(["a", "b"])
"""

import random
from typing import Optional

from langprobe.core.config.settings import SUPPORTED_BACKENDS, settings
from langprobe.core.exceptions.custom_exceptions import ConfigurationError
from langprobe.core.logging.logger import get_logger
from langprobe.estimation.base import BaseEstimator, EstimatorParams
from langprobe.estimation.flat import NumpyEstimator
from langprobe.estimation.reference import ReferenceEstimator
from langprobe.profiles.registry import ProfileRegistry

logger = get_logger(__name__)


def create_estimator(
    registry: ProfileRegistry,
    backend: Optional[str] = None,
    params: Optional[EstimatorParams] = None,
    rng: Optional[random.Random] = None,
) -> BaseEstimator:
    """
    Instantiate the estimator backend named by backend.

    Raises:
        ConfigurationError: If the backend name is not supported
    """
    backend_type = (backend or settings.DETECTOR_BACKEND).lower()

    if backend_type == "reference":
        estimator: BaseEstimator = ReferenceEstimator(registry, params, rng)
    elif backend_type == "numpy":
        estimator = NumpyEstimator(registry, params, rng)
    else:
        raise ConfigurationError(
            f"Unsupported estimator backend: {backend_type}",
            error_code="CONFIG_UNKNOWN_BACKEND",
            details={"backend": backend_type, "supported": list(SUPPORTED_BACKENDS)},
        )

    logger.debug("Estimator created", backend=backend_type)
    return estimator
