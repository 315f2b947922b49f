"""
Custom exception hierarchy for langprobe error handling.

Every failure the detection engine reports is a subclass of LangProbeError.
Each exception carries a human-readable message, a machine-readable error
code and a details dictionary with the values that caused the failure.

Exception Hierarchy:
    LangProbeError (base)
    ├── ConfigurationError: Invalid settings, config files or backend names
    ├── ProfileError: Unreadable or invalid language profiles
    │   └── DuplicateProfileError: Same language registered twice
    ├── DetectionError: Detection cannot produce a result
    │   ├── NoFeaturesError: Text yields no known n-gram
    │   └── DetectorReleasedError: Detector used after release()
    └── ValidationError: Invalid caller-supplied values
        └── PriorError: Negative or all-zero prior weights

Example:
    >>> try:
    ...     detector.detect()
    ... except NoFeaturesError as e:
    ...     logger.warning("Nothing to detect", error_code=e.error_code)
    >>>
    >>> raise ProfileError(
    ...     "Profile file is not valid JSON",
    ...     error_code="PROFILE_PARSE_ERROR",
    ...     details={"path": "/profiles/xx"},
    ... )
"""

from typing import Any, Dict, Optional


class LangProbeError(Exception):
    """
    Base exception class for all langprobe errors.

    Attributes:
        message (str): Human-readable error description
        error_code (str): Machine-readable error identifier
        details (Dict[str, Any]): Additional contextual information

    The error_code defaults to the class name when not given.
    """

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}


class ConfigurationError(LangProbeError):
    """
    Raised when configuration validation or setup fails.

    Common scenarios:
        - YAML/JSON parsing errors in detector config files
        - Unknown estimator backend names
        - Config values rejected by schema validation

    Example:
        >>> raise ConfigurationError(
        ...     "Unsupported estimator backend: gpu",
        ...     error_code="CONFIG_UNKNOWN_BACKEND",
        ...     details={"backend": "gpu", "supported": ["reference", "numpy"]},
        ... )
    """

    pass


class ProfileError(LangProbeError):
    """
    Raised when language profiles cannot be loaded or registered.

    Common scenarios:
        - Profile directory does not exist
        - Profile file is not valid JSON or misses required fields
        - A requested language has no profile file
    """

    pass


class DuplicateProfileError(ProfileError):
    """Raised when a language name is registered more than once"""

    pass


class DetectionError(LangProbeError):
    """Raised when a detection cannot be performed"""

    pass


class NoFeaturesError(DetectionError):
    """Raised when the text contains no n-gram known to the registry"""

    pass


class DetectorReleasedError(DetectionError):
    """Raised when a detector is used after its buffers were released"""

    pass


class ValidationError(LangProbeError):
    """Raised when caller-supplied values fail validation"""

    pass


class PriorError(ValidationError):
    """Raised when prior weights are negative or carry no mass"""

    pass
