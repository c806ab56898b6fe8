"""
Upload directory operations for the aptly API.

https://www.aptly.info/doc/api/files/
"""

import logging
import os
from typing import Any, Callable, List

import httpx

from ..utils.constants import UPLOAD_FIELD_NAME
from ..utils.logging_utils import format_file_size
from ..utils.response_utils import parse_optional_list


class FileManagerMixin:
    """Mixin that uploads files into aptly upload directories."""

    # Required attributes
    _url: Callable[[str], str]
    session: Any  # httpx.Client
    timeout: float

    def check_response(self, response: httpx.Response, operation: str = "request") -> None:
        """Check a response, raise on failure."""
        ...  # pragma: no cover - defined in implementation

    def upload_file(self, upload_dir: str, file_path: str) -> List[str]:
        """
        Upload a file into an upload directory.

        ``POST /files/{dir}`` with a multipart body; the directory is
        created on demand.

        Args:
            upload_dir: Upload directory name
            file_path: Local path of the file to upload

        Returns:
            Paths aptly stored, e.g. ``["pkg_1.0_all.deb/pkg_1.0_all.deb"]``

        Raises:
            httpx.HTTPError: If the upload fails
        """
        url = self._url(f"files/{upload_dir}")
        file_name = os.path.basename(file_path)

        logging.debug("Uploading %s (%s) to %s", file_name, format_file_size(os.path.getsize(file_path)), url)
        with open(file_path, "rb") as fp:
            response = self.session.post(
                url,
                files={UPLOAD_FIELD_NAME: (file_name, fp, "application/vnd.debian.binary-package")},
                timeout=self.timeout,
            )
        self.check_response(response, f"upload {file_name}")

        stored = parse_optional_list(response, "upload file")
        logging.debug("aptly stored: %s", stored)
        return [str(path) for path in stored]


__all__ = ["FileManagerMixin"]
