"""
Published repository operations for the aptly API.

https://www.aptly.info/doc/api/publish/
"""

from typing import Any, Callable, List, Optional

import httpx

from ..models.aptly_api import (
    PublishedRepoResponse,
    PublishSwitchRequest,
    SigningOptions,
    SnapshotRef,
)
from ..utils.constants import DEFAULT_COMPONENT
from ..utils.response_utils import parse_model_list, parse_optional_model


class PublishManagerMixin:
    """Mixin that lists and switches published repositories."""

    # Required attributes
    _url: Callable[[str], str]
    session: Any  # httpx.Client
    timeout: float

    def check_response(self, response: httpx.Response, operation: str = "request") -> None:
        """Check a response, raise on failure."""
        ...  # pragma: no cover - defined in implementation

    def list_publish_endpoints(self) -> List[PublishedRepoResponse]:
        """
        List published repositories.

        ``GET /publish``

        Raises:
            httpx.HTTPError: If the request fails
        """
        response = self.session.get(self._url("publish"), timeout=self.timeout)
        self.check_response(response, "list published repos")
        return parse_model_list(response, PublishedRepoResponse, "list published repos")

    def switch_published_snapshot(
        self,
        prefix: str,
        distribution: str,
        snapshot_name: str,
        passphrase: str,
        *,
        component: str = DEFAULT_COMPONENT,
    ) -> Optional[PublishedRepoResponse]:
        """
        Switch a published repository to serve another snapshot.

        ``PUT /publish/{prefix}:/{distribution}``, signing in batch mode.

        Args:
            prefix: Publish prefix, e.g. ``s3:ubuntu``
            distribution: Published distribution, e.g. ``bionic``
            snapshot_name: Snapshot to serve
            passphrase: GPG key passphrase
            component: Component to serve the snapshot under

        Returns:
            The updated published repository, or None if aptly's answer does not parse

        Raises:
            httpx.HTTPError: If the request fails
        """
        body = PublishSwitchRequest(
            signing=SigningOptions(passphrase=passphrase),
            snapshots=[SnapshotRef(component=component, name=snapshot_name)],
        ).to_payload()
        response = self.session.put(self._url(f"publish/{prefix}:/{distribution}"), json=body, timeout=self.timeout)
        self.check_response(response, f"publish snapshot {snapshot_name} to {prefix}:/{distribution}")
        return parse_optional_model(response, PublishedRepoResponse, "publish snapshot")


__all__ = ["PublishManagerMixin"]
