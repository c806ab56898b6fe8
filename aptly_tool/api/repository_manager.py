"""
Local repository and snapshot operations for the aptly API.

https://www.aptly.info/doc/api/repos/
https://www.aptly.info/doc/api/snapshots/
"""

import logging
from typing import Any, Callable, List, Optional

import httpx

from ..models.aptly_api import AddFilesResponse, LocalRepoResponse, SnapshotCreateRequest, SnapshotResponse
from ..utils.response_utils import parse_model_list, parse_optional_model


class RepositoryManagerMixin:
    """Mixin that provides local repo and snapshot operations for aptly."""

    # Required attributes
    _url: Callable[[str], str]
    session: Any  # httpx.Client
    timeout: float

    def check_response(self, response: httpx.Response, operation: str = "request") -> None:
        """Check a response, raise on failure."""
        ...  # pragma: no cover - defined in implementation

    def list_repos(self) -> List[LocalRepoResponse]:
        """
        List local repositories.

        ``GET /repos``

        Raises:
            httpx.HTTPError: If the request fails
        """
        response = self.session.get(self._url("repos"), timeout=self.timeout)
        self.check_response(response, "list local repos")
        return parse_model_list(response, LocalRepoResponse, "list local repos")

    def add_uploaded_files(self, repo_name: str, upload_dir: str) -> AddFilesResponse:
        """
        Import the files of an upload directory into a local repo.

        ``POST /repos/{name}/file/{dir}``. aptly answers 200 even when it
        refuses individual files; those are listed in ``FailedFiles``.

        Args:
            repo_name: Local repo to add the packages to
            upload_dir: Upload directory holding the packages

        Returns:
            aptly's add report

        Raises:
            httpx.HTTPError: If the request fails
        """
        response = self.session.post(self._url(f"repos/{repo_name}/file/{upload_dir}"), timeout=self.timeout)
        self.check_response(response, f"add {upload_dir} to local repo {repo_name}")

        report = parse_optional_model(response, AddFilesResponse, "add files to local repo") or AddFilesResponse()
        for added in report.report.added:
            logging.info("aptly: %s", added)
        for warning in report.report.warnings:
            logging.warning("aptly: %s", warning)
        if report.has_failures:
            for failed in report.failed_files:
                logging.error("aptly failed to add file: %s", failed)
            logging.error("aptly refused %d file(s) from %s", len(report.failed_files), upload_dir)
        return report

    def create_snapshot(self, repo_name: str, snapshot_name: str) -> Optional[SnapshotResponse]:
        """
        Snapshot the current contents of a local repo.

        ``POST /repos/{name}/snapshots``

        Args:
            repo_name: Local repo to snapshot
            snapshot_name: Name of the new snapshot

        Returns:
            The created snapshot, or None if aptly's answer does not parse

        Raises:
            httpx.HTTPError: If the request fails (aptly answers 400 when the name is taken)
        """
        body = SnapshotCreateRequest(name=snapshot_name).to_payload()
        response = self.session.post(self._url(f"repos/{repo_name}/snapshots"), json=body, timeout=self.timeout)
        self.check_response(response, f"create snapshot {snapshot_name}")
        return parse_optional_model(response, SnapshotResponse, "create snapshot")


__all__ = ["RepositoryManagerMixin"]
