"""
Core configuration management for langprobe.

This module provides centralized configuration management using Pydantic settings
with support for environment variables, type validation, and sensible defaults
for the detection engine. Every detector parameter that is not passed
explicitly falls back to the values defined here.

Classes:
    Settings: Main configuration class with all application settings

Environment Variables:
    Application settings can be overridden using environment variables with the
    same names as the class attributes (case-sensitive).

Example:
    >>> from langprobe.core.config.settings import Settings
    >>> settings = Settings()
    >>> print(settings.DETECTOR_N_TRIAL)
    7

Configuration Sections:
    - Application: Basic app configuration (name, version, environment)
    - Logging: Application logging configuration
    - Detector: Estimator parameters, text limits and backend selection
    - Profiles: Location of the language profile corpus
"""

from typing import Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

SUPPORTED_BACKENDS = ("reference", "numpy")


class Settings(BaseSettings):
    """
    Application settings with environment variable support.

    Attributes:
        APP_NAME: Application name identifier
        APP_VERSION: Current application version
        ENVIRONMENT: Deployment environment (development/staging/production)
        DEBUG: Enable debug mode with rich console logging

        LOG_LEVEL: Logging level (DEBUG/INFO/WARNING/ERROR/CRITICAL)
        LOG_FORMAT: Log format (json/text)
        LOG_FILE_PATH: Path for log file output (optional)

        DETECTOR_ALPHA: Smoothing strength added to every gram probability
        DETECTOR_ALPHA_WIDTH: Per-trial random jitter added to alpha
        DETECTOR_N_TRIAL: Number of independent estimation trials
        DETECTOR_ITERATION_LIMIT: Hard iteration cap per trial
        DETECTOR_CONV_THRESHOLD: Max probability at which a trial stops early
        DETECTOR_BASE_FREQ: Divisor applied to alpha in the update rule
        DETECTOR_PROB_THRESHOLD: Minimum probability reported by the ranker
        DETECTOR_BACKEND: Estimator backend ("reference" or "numpy")
        DETECTOR_SEED: Optional seed for reproducible detections
        MAX_TEXT_LENGTH: Characters kept from each appended text

        PROFILES_DIR: Directory of JSON language profiles (optional, defaults
            to the corpus bundled with langdetect)
    """

    # Application
    APP_NAME: str = "langprobe"
    APP_VERSION: str = "0.1.0"
    ENVIRONMENT: str = "development"
    DEBUG: bool = True

    # Logging Configuration
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "json"
    LOG_FILE_PATH: Optional[str] = None

    # Detector Configuration
    DETECTOR_ALPHA: float = 0.5
    DETECTOR_ALPHA_WIDTH: float = 0.05
    DETECTOR_N_TRIAL: int = 7
    DETECTOR_ITERATION_LIMIT: int = 1000
    DETECTOR_CONV_THRESHOLD: float = 0.99999
    DETECTOR_BASE_FREQ: int = 10000
    DETECTOR_PROB_THRESHOLD: float = 0.1
    DETECTOR_BACKEND: str = "numpy"
    DETECTOR_SEED: Optional[int] = None
    MAX_TEXT_LENGTH: int = 10000

    # Profiles
    PROFILES_DIR: Optional[str] = None

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """
        Validate logging level is a supported value.

        Ensures the log level is one of the standard Python logging
        levels. Converts to uppercase for consistency.

        Raises:
            ValueError: If log level is not supported
        """
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in valid_levels:
            raise ValueError(f"LOG_LEVEL must be one of: {valid_levels}")
        return v.upper()

    @field_validator("DETECTOR_BACKEND")
    @classmethod
    def validate_backend(cls, v: str) -> str:
        """Validate the estimator backend name."""
        if v.lower() not in SUPPORTED_BACKENDS:
            raise ValueError(f"DETECTOR_BACKEND must be one of: {SUPPORTED_BACKENDS}")
        return v.lower()

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",  # This will ignore extra fields from environment
    )


settings = Settings()
