"""
Error handling utilities for standardized error logging.

Every failure surfaces as a single diagnostic line; tracebacks are only
emitted at DEBUG level.
"""

import logging
import traceback

import httpx

from .constants import (
    HTTP_STATUS_FORBIDDEN,
    HTTP_STATUS_NOT_FOUND,
    HTTP_STATUS_SERVER_ERROR,
    HTTP_STATUS_UNAUTHORIZED,
)


def _status_code(error: httpx.HTTPError) -> int:
    """Best-effort status code extraction from an httpx error."""
    if isinstance(error, httpx.HTTPStatusError):
        return error.response.status_code
    message = str(error)
    for code in (HTTP_STATUS_UNAUTHORIZED, HTTP_STATUS_FORBIDDEN, HTTP_STATUS_NOT_FOUND):
        if str(code) in message:
            return code
    if any(code in message for code in ("500", "502", "503", "504")):
        return HTTP_STATUS_SERVER_ERROR
    return 0


def handle_http_error(error: httpx.HTTPError, operation: str, *, log_traceback: bool = True) -> None:
    """
    Handle HTTP errors with standardized logging.

    Args:
        error: The HTTP error to handle
        operation: Description of the operation that failed
        log_traceback: Whether to log the full traceback at DEBUG level
    """
    status = _status_code(error)

    if status == HTTP_STATUS_UNAUTHORIZED:
        logging.error(
            "Authentication failed during %s: Invalid credentials. "
            "Please check username/password in the configuration file.",
            operation,
        )
    elif status == HTTP_STATUS_FORBIDDEN:
        logging.error(
            "Authentication failed during %s: You don't have permission to access this resource.",
            operation,
        )
    elif status == HTTP_STATUS_NOT_FOUND:
        logging.error("Resource not found during %s: %s", operation, error)
    elif status >= HTTP_STATUS_SERVER_ERROR:
        logging.error("Server error during %s: %s", operation, error)
    elif isinstance(error, httpx.TransportError):
        logging.error("Unable to reach aptly during %s: %s", operation, error)
    else:
        logging.error("HTTP error during %s: %s", operation, error)

    if log_traceback:
        logging.debug("Traceback: %s", traceback.format_exc())


def handle_generic_error(error: Exception, operation: str, *, log_traceback: bool = True) -> None:
    """
    Handle generic errors with standardized logging.

    Args:
        error: The exception to handle
        operation: Description of the operation that failed
        log_traceback: Whether to log the full traceback at DEBUG level
    """
    logging.error("Unexpected error during %s: %s", operation, error)

    if log_traceback:
        logging.debug("Traceback: %s", traceback.format_exc())


__all__ = [
    "handle_http_error",
    "handle_generic_error",
]
