"""
Structured logging configuration for langprobe.

This module provides the logging infrastructure shared by every langprobe
module. It integrates structlog for key-value logging while remaining
compatible with standard Python logging.

setup_logging() runs when this module is first imported and calls
logging.basicConfig() on the root logger. With the default DEBUG=True (or
ENVIRONMENT=development) that installs a RichHandler on stderr, so an
application embedding the detector should configure its own logging first
or set DEBUG=False and ENVIRONMENT accordingly.

Functions:
    setup_logging(): Initialize logging configuration
    get_logger(name): Get configured logger instance

Configuration:
    Logging behavior is controlled by environment variables:
    - LOG_LEVEL: Minimum log level (DEBUG/INFO/WARNING/ERROR/CRITICAL)
    - LOG_FORMAT: Output format (json/text)
    - LOG_FILE_PATH: Optional file output path
    - DEBUG: Enable development mode with rich formatting

Example:
    >>> from langprobe.core.logging.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.info("Registry built", languages=55, grams=87601)
    >>> logger.warning("Input truncated", max_text_length=10000)
"""

import logging
import sys
from pathlib import Path

import structlog
from rich.console import Console
from rich.logging import RichHandler

from langprobe.core.config.settings import settings


def setup_logging() -> None:
    """
    Initialize logging configuration.

    Sets up structlog processors and the standard library handlers:
        - Development: Rich console handler with colors and formatting
        - Production: JSON-formatted stream handler for log aggregation
        - File: Optional file handler when LOG_FILE_PATH is configured

    Example:
        >>> from langprobe.core.logging.logger import setup_logging
        >>> setup_logging()  # Call once at application startup
    """

    # Configure structlog processors
    processors = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="ISO"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    if settings.LOG_FORMAT.lower() == "json":
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        context_class=dict,
        cache_logger_on_first_use=True,
    )

    handlers = []

    if settings.DEBUG or settings.ENVIRONMENT == "development":
        console = Console(stderr=True)
        rich_handler = RichHandler(
            console=console,
            show_time=True,
            show_level=True,
            show_path=True,
            markup=True,
            rich_tracebacks=True,
        )
        rich_handler.setLevel(settings.LOG_LEVEL)
        handlers.append(rich_handler)
    else:
        # Production: JSON formatted logs
        stream_handler = logging.StreamHandler(sys.stderr)
        stream_handler.setLevel(settings.LOG_LEVEL)
        handlers.append(stream_handler)

    if settings.LOG_FILE_PATH:
        file_path = Path(settings.LOG_FILE_PATH)
        file_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(file_path)
        file_handler.setLevel(settings.LOG_LEVEL)
        handlers.append(file_handler)

    logging.basicConfig(
        level=settings.LOG_LEVEL,
        handlers=handlers,
        format="%(message)s",
    )


def get_logger(name: str) -> structlog.BoundLogger:
    """
    Get a configured structured logger instance.

    Args:
        name (str): Logger name, typically __name__ of the calling module

    Returns:
        structlog.BoundLogger: Configured logger instance

    Note:
        If logging hasn't been configured yet, this function will
        automatically call setup_logging() to ensure proper initialization.
    """
    if not structlog.is_configured():
        setup_logging()
    return structlog.get_logger(name)


def bind_detection_context(**context) -> structlog.BoundLogger:
    """
    Create a logger with bound detection context.

    Useful when a caller runs many detections and wants every log line of
    one of them tagged, e.g. with a document id.

    Example:
        >>> logger = bind_detection_context(document_id="doc-42")
        >>> logger.info("Detection started")
    """
    logger = get_logger(__name__)
    return logger.bind(**context)


# Setup logging on import
setup_logging()
