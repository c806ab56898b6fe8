"""
Logging configuration and utilities for aptly-tool.

This module provides logging setup, the wrapping formatter and a filter that
keeps the GPG passphrase out of every log record.
"""

import logging
from typing import Optional, Set

from .constants import MAX_LOG_LINE_LENGTH

# ============================================================================
# Logging Configuration Constants
# ============================================================================

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"

REDACTED = "[REDACTED]"

# ============================================================================
# Custom Formatters and Filters
# ============================================================================


class WrappingFormatter(logging.Formatter):
    """
    Formatter that wraps long log messages at word boundaries.

    aptly error bodies and request dumps can be long single lines; wrapping
    keeps them readable in CI logs.
    """

    def __init__(
        self, fmt: Optional[str] = None, datefmt: Optional[str] = None, width: int = MAX_LOG_LINE_LENGTH
    ) -> None:
        """
        Initialize the wrapping formatter.

        Args:
            fmt: Format string for log messages
            datefmt: Date format string
            width: Maximum width for log message wrapping
        """
        super().__init__(fmt, datefmt)
        self.width = width

    def format(self, record: logging.LogRecord) -> str:
        formatted = super().format(record)
        if len(formatted) <= self.width:
            return formatted

        lines = []
        current_line = ""
        for word in formatted.split():
            if len(current_line + " " + word) <= self.width:
                current_line += (" " + word) if current_line else word
            else:
                if current_line:
                    lines.append(current_line)
                current_line = word
        if current_line:
            lines.append(current_line)

        return "\n".join(lines)


class SecretRedactionFilter(logging.Filter):
    """Replace registered secret values in log records with a placeholder."""

    def __init__(self) -> None:
        super().__init__()
        self._secrets: Set[str] = set()

    def add_secret(self, secret: str) -> None:
        """Register a value that must never be logged."""
        if secret:
            self._secrets.add(secret)

    def filter(self, record: logging.LogRecord) -> bool:
        if not self._secrets:
            return True

        try:
            message = record.getMessage()
        except (TypeError, ValueError):
            # Left for the handler to report as a logging error
            return True
        redacted = message
        for secret in self._secrets:
            redacted = redacted.replace(secret, REDACTED)

        if redacted != message:
            record.msg = redacted
            record.args = None
        return True


_redaction_filter = SecretRedactionFilter()


def register_secret(secret: str) -> None:
    """
    Register a secret (e.g. the signing passphrase) for redaction.

    Args:
        secret: Value to mask in all subsequent log output
    """
    _redaction_filter.add_secret(secret)


# ============================================================================
# Logging Setup Functions
# ============================================================================


def setup_logging(verbosity: int = 0, use_wrapping: bool = False) -> None:
    """
    Setup logging configuration with multi-level verbosity.

    Args:
        verbosity: Verbosity level (0=WARNING, 1=INFO, 2=DEBUG, 3+=DEBUG with HTTP logs)
        use_wrapping: If True, use wrapping formatter for long messages

    Verbosity Levels:
        0 (default): WARNING - Only warnings, errors and stage progress lines
        1 (-d):      INFO - Stage start/completion and aptly reports
        2 (-dd):     DEBUG - Request details and resolved parameters
        3+ (-ddd):   DEBUG - Maximum verbosity including httpx request logs
    """
    if verbosity == 0:
        level = logging.WARNING
    elif verbosity == 1:
        level = logging.INFO
    else:
        level = logging.DEBUG

    root_logger = logging.getLogger()
    if use_wrapping:
        handler = logging.StreamHandler()
        handler.setFormatter(WrappingFormatter(fmt=LOG_FORMAT))
        root_logger.handlers.clear()
        root_logger.addHandler(handler)
        root_logger.setLevel(level)
    else:
        logging.basicConfig(level=level, format=LOG_FORMAT)

    for handler in root_logger.handlers:
        if _redaction_filter not in handler.filters:
            handler.addFilter(_redaction_filter)

    # httpx logs every request at INFO; only show it at maximum verbosity
    http_level = logging.DEBUG if verbosity >= 3 else logging.WARNING
    logging.getLogger("httpx").setLevel(http_level)
    logging.getLogger("httpcore").setLevel(http_level)


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance with the given name.

    Args:
        name: Name for the logger (typically __name__)

    Returns:
        Logger instance
    """
    return logging.getLogger(name)


__all__ = [
    "WrappingFormatter",
    "SecretRedactionFilter",
    "register_secret",
    "setup_logging",
    "get_logger",
]
