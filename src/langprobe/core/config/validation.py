"""
Detector configuration file validation for langprobe.

Per-run detector options can be kept in a YAML or JSON file instead of being
passed one by one. This module describes that file with a Pydantic schema
and loads it, converting every failure into a ConfigurationError.

Example config (detector.yaml):
    alpha: 0.5
    max_text_length: 5000
    backend: numpy
    seed: 42
    languages: [de, en, fr]
    priors:
      de: 0.5
      en: 0.3
      fr: 0.2

Example Usage:
    >>> config = ConfigValidator.validate_file("detector.yaml")
    >>> print(config.backend)
    numpy
"""

import json
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml
from pydantic import BaseModel, ValidationError, field_validator

from langprobe.core.config.settings import SUPPORTED_BACKENDS
from langprobe.core.exceptions.custom_exceptions import ConfigurationError


class DetectorConfig(BaseModel):
    """Detector options schema"""

    alpha: Optional[float] = None
    max_text_length: Optional[int] = None
    backend: Optional[str] = None
    seed: Optional[int] = None
    languages: Optional[List[str]] = None
    priors: Optional[Dict[str, float]] = None

    @field_validator("backend")
    @classmethod
    def validate_backend(cls, v):
        if v is not None and v.lower() not in SUPPORTED_BACKENDS:
            raise ValueError(f"backend must be one of: {list(SUPPORTED_BACKENDS)}")
        return v.lower() if v is not None else v

    @field_validator("max_text_length")
    @classmethod
    def validate_max_text_length(cls, v):
        if v is not None and v <= 0:
            raise ValueError("max_text_length must be positive")
        return v

    @field_validator("languages")
    @classmethod
    def validate_unique_languages(cls, v):
        if v is not None and len(v) != len(set(v)):
            raise ValueError("languages must be unique")
        return v


class ConfigValidator:
    """Configuration validator for detector configs"""

    @staticmethod
    def load_config(file_path: str) -> Dict[str, Any]:
        """Load configuration from file"""
        path = Path(file_path)

        if not path.exists():
            raise ConfigurationError(
                f"Configuration file not found: {file_path}",
                error_code="CONFIG_FILE_NOT_FOUND",
                details={"path": str(path)},
            )

        if path.suffix.lower() not in [".yaml", ".yml", ".json"]:
            raise ConfigurationError(f"Unsupported file format: {path.suffix}")

        try:
            with open(path, "r", encoding="utf-8") as f:
                if path.suffix.lower() == ".json":
                    data = json.load(f)
                else:
                    data = yaml.safe_load(f)
        except (OSError, json.JSONDecodeError, yaml.YAMLError) as e:
            raise ConfigurationError(f"Failed to load configuration: {e}") from e

        return data or {}

    @staticmethod
    def validate_config(config: Dict[str, Any]) -> DetectorConfig:
        """Validate detector configuration"""
        try:
            return DetectorConfig(**config)
        except (TypeError, ValidationError) as e:
            raise ConfigurationError(f"Configuration validation failed: {e}") from e

    @staticmethod
    def validate_file(file_path: str) -> DetectorConfig:
        """Load and validate configuration file"""
        config = ConfigValidator.load_config(file_path)
        return ConfigValidator.validate_config(config)
