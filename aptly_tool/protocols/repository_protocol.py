"""
Repository directory protocol.

The argument resolver validates local repos, publish prefixes and
distributions against what the aptly server currently knows. It only needs
read access to two listings, so it depends on this protocol rather than on
the full API client; tests can pass a plain in-memory object.
"""

from typing import List, Protocol, runtime_checkable

from ..models.aptly_api import LocalRepoResponse, PublishedRepoResponse


@runtime_checkable
class RepositoryDirectory(Protocol):
    """Read-only view of the local repos and published repos on an aptly server."""

    def list_repos(self) -> List[LocalRepoResponse]:
        """
        List local repositories.

        Returns:
            Every local repo known to the server, reserved ones included
        """
        ...

    def list_publish_endpoints(self) -> List[PublishedRepoResponse]:
        """
        List published repositories.

        Returns:
            Every published repo, each carrying its storage endpoint and distribution
        """
        ...


__all__ = ["RepositoryDirectory"]
