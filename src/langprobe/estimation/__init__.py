"""
langprobe Estimation Module - Randomized Language Probability Estimation.

Core Components:
    - EstimatorParams: alpha, jitter, trial count and convergence settings
    - BaseEstimator: scoring interface shared by all backends
    - ReferenceEstimator: pure-Python backend
    - NumpyEstimator / FlatBuffers: vectorized flat-buffer backend
    - create_estimator: backend selection by name
"""

from .base import BaseEstimator, EstimatorParams
from .flat import FlatBuffers, NumpyEstimator
from .manager import create_estimator
from .reference import ReferenceEstimator

__all__ = [
    "BaseEstimator",
    "EstimatorParams",
    "FlatBuffers",
    "NumpyEstimator",
    "ReferenceEstimator",
    "create_estimator",
]
