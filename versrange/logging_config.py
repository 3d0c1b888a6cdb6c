"""Logging configuration for versrange.

The package logger only carries a NullHandler until the application opts in
with configure_logging(); records then go to stderr as text or JSON lines.
"""

import json
import logging
import sys
from datetime import datetime, timezone
from typing import TYPE_CHECKING, Any, Dict, Optional

if TYPE_CHECKING:
    from .config import Config

LOGGER_NAME = "versrange"


def setup_logging() -> logging.Logger:
    """
    Create the package logger without emitting anything by default.

    Returns:
        Package logger instance
    """
    logger = logging.getLogger(LOGGER_NAME)

    # Avoid duplicate handlers
    if not any(isinstance(handler, logging.NullHandler) for handler in logger.handlers):
        logger.addHandler(logging.NullHandler())

    return logger


def configure_logging(config: Optional["Config"] = None) -> logging.Logger:
    """
    Send package log records to stderr using a configuration.

    Args:
        config: Configuration to apply. Loaded from the environment when omitted.

    Returns:
        The configured logger instance

    Raises:
        ConfigurationError: If the configuration loaded from the environment is invalid
    """
    if config is None:
        from .config import load_config

        config = load_config()

    level = getattr(logging, config.log_level.upper())
    handler = _stream_handler()
    if handler is None:
        handler = logging.StreamHandler(sys.stderr)
        logger.addHandler(handler)

    logger.setLevel(level)
    handler.setLevel(level)
    handler.setFormatter(_build_formatter(config.structured_logging))

    return logger


def _stream_handler() -> Optional[logging.StreamHandler]:
    for handler in logger.handlers:
        if isinstance(handler, logging.StreamHandler):
            return handler
    return None


def _build_formatter(structured: bool) -> logging.Formatter:
    if structured:
        return StructuredFormatter()
    return logging.Formatter("[%(asctime)s] %(levelname)s - %(name)s - %(message)s", datefmt="%Y-%m-%d %H:%M:%S")


class StructuredFormatter(logging.Formatter):
    """One JSON object per record, timestamps in UTC."""

    def format(self, record: logging.LogRecord) -> str:
        log_entry: Dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "module": record.module,
            "message": record.getMessage(),
        }

        if record.exc_info:
            log_entry["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_entry)


# Global logger instance
logger = setup_logging()
