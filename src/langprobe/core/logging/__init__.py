"""
langprobe Logging Module - Structured Application Logging.

Structured logging for the detection engine, built on structlog with rich
console output in development and JSON output for log aggregation.

Components:
    - logger: Main logging configuration and factory functions

Example:
    >>> from langprobe.core.logging.logger import get_logger
    >>>
    >>> logger = get_logger(__name__)
    >>> logger.debug("Detection finished", language="de", features=42)
"""
