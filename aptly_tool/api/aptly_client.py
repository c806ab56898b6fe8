"""
aptly API client for uploading, snapshotting and publishing packages.

This module provides the main AptlyClient class, which is composed using the
mixin pattern to provide specialized functionality:

Mixins:
    - FileManagerMixin: Upload directories (``/files``)
    - RepositoryManagerMixin: Local repos and snapshots (``/repos``)
    - PublishManagerMixin: Published repositories (``/publish``)

AptlyClient also satisfies the RepositoryDirectory protocol, so it can be
handed straight to the argument resolver.
"""

import json
import logging
from typing import Any, Optional

import httpx

from ..models.settings import AptlySettings
from ..utils.config_manager import ConfigManager
from ..utils.constants import HTTP_STATUS_SERVER_ERROR, SENSITIVE_FIELDS
from ..utils.session import create_session
from .file_manager import FileManagerMixin
from .publish_manager import PublishManagerMixin
from .repository_manager import RepositoryManagerMixin


def _redact(data: Any) -> Any:
    """Return a copy of a JSON value with sensitive fields masked."""
    if isinstance(data, dict):
        return {k: "[REDACTED]" if k in SENSITIVE_FIELDS else _redact(v) for k, v in data.items()}
    if isinstance(data, list):
        return [_redact(item) for item in data]
    return data


class AptlyClient(FileManagerMixin, RepositoryManagerMixin, PublishManagerMixin):
    """
    A client for interacting with the aptly REST API.

    API documentation: https://www.aptly.info/doc/api/

    All paths are relative to ``settings.api_url``, which already includes
    the ``/api`` root, e.g. ``http://aptly.service.consul:8080/api``.
    """

    def __init__(self, settings: AptlySettings) -> None:
        """Initialize the aptly client.

        Args:
            settings: Connection settings
        """
        self.settings = settings
        self.base_url = settings.api_url
        self.timeout = settings.timeout
        self.session = self._create_session()
        logging.debug("AptlyClient initialized for %s", self.base_url)

    def _create_session(self) -> httpx.Client:
        """Create the HTTP session, with basic auth when configured."""
        auth = (str(self.settings.username), str(self.settings.password)) if self.settings.has_basic_auth else None
        return create_session(timeout=self.timeout, auth=auth)

    @classmethod
    def create_from_config_file(cls, path: Optional[str] = None, **overrides: Any) -> "AptlyClient":
        """
        Create a client from the aptly-tool configuration file.

        Args:
            path: Config file path (default: ``~/.config/aptly-tool/config.toml``)
            **overrides: Setting values taking precedence over the file (None is ignored)
        """
        return cls(ConfigManager(path).settings(**overrides))

    def close(self) -> None:
        """Close the session and release all connections."""
        if self.session:
            self.session.close()
            logging.debug("AptlyClient session closed and connections released")

    def __enter__(self) -> "AptlyClient":
        """Context manager entry."""
        return self

    def __exit__(self, exc_type: Optional[type], exc_val: Optional[BaseException], exc_tb: Optional[Any]) -> None:
        """Context manager exit - ensures session is closed."""
        self.close()

    def _url(self, endpoint: str) -> str:
        """
        Build a fully qualified URL for a given API endpoint.

        Args:
            endpoint: API path relative to the API root (e.g., "repos")

        Returns:
            Complete URL
        """
        return f"{self.base_url}/{endpoint.lstrip('/')}"

    def _log_request_body(self, request: httpx.Request) -> None:
        """Log request body with sensitive fields redacted."""
        content_type = request.headers.get("content-type", "")
        if "multipart" in content_type:
            logging.error("  Request Body: <multipart/form-data - file upload>")
            return
        try:
            body = json.loads(request.content or b"null")
            logging.error("  Request Body: %s", _redact(body))
        except (ValueError, httpx.RequestNotRead):
            logging.error("  Request Body: <not logged>")

    def _log_server_error(self, response: httpx.Response, operation: str) -> None:
        """Log detailed information for server errors (5xx)."""
        logging.error("=" * 80)
        logging.error("SERVER ERROR (%s) during %s", response.status_code, operation)
        logging.error("=" * 80)
        request = response.request
        logging.error("REQUEST DETAILS:")
        logging.error("  Method: %s", request.method)
        logging.error("  URL: %s", request.url)
        self._log_request_body(request)
        logging.error("RESPONSE DETAILS:")
        logging.error("  Status Code: %s", response.status_code)
        text = response.text
        logging.error("  Response Body: %s", f"{text[:500]}..." if len(text) > 500 else text)
        logging.error("=" * 80)

    def check_response(self, response: httpx.Response, operation: str = "request") -> None:
        """
        Check if a response is successful, raise exception if not.

        Raises:
            httpx.HTTPStatusError: For any non-2xx response
        """
        if response.is_success:
            return

        if response.status_code >= HTTP_STATUS_SERVER_ERROR:
            self._log_server_error(response, operation)
        else:
            logging.debug("Client error during %s: %s - %s", operation, response.status_code, response.text)

        raise httpx.HTTPStatusError(
            f"Failed to {operation}: {response.status_code} - {response.text.strip()}",
            request=response.request,
            response=response,
        )


__all__ = ["AptlyClient"]
