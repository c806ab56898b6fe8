"""
Session utilities for aptly operations.

This module creates the HTTP client shared by every aptly API call.
"""

from typing import Optional, Tuple

import httpx
from httpx import HTTPTransport

from .constants import CONNECT_RETRIES, DEFAULT_CONNECT_TIMEOUT, DEFAULT_TIMEOUT


def create_session(
    timeout: float = DEFAULT_TIMEOUT,
    auth: Optional[Tuple[str, str]] = None,
    retries: int = CONNECT_RETRIES,
) -> httpx.Client:
    """
    Create an httpx client for talking to the aptly API.

    Args:
        timeout: Total timeout in seconds (default: 120)
        auth: Optional (username, password) for HTTP basic auth
        retries: Transport-level connection retries (default: none)

    Returns:
        Configured httpx.Client

    Example:
        >>> client = create_session(timeout=60.0)
        >>> response = client.get("http://aptly.example.com/api/repos")
    """
    transport = HTTPTransport(retries=retries)
    timeout_config = httpx.Timeout(timeout, connect=DEFAULT_CONNECT_TIMEOUT)

    return httpx.Client(
        transport=transport,
        timeout=timeout_config,
        follow_redirects=True,
        auth=httpx.BasicAuth(*auth) if auth else None,
        headers={"Accept": "application/json"},
    )


__all__ = ["create_session"]
