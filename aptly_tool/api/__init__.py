"""
aptly API client modules.

This package provides the client for interacting with the aptly API:
- Main aptly client composed from the managers below
- Specialized managers for upload directories, local repos/snapshots and published repos
"""

from .aptly_client import AptlyClient
from .file_manager import FileManagerMixin
from .publish_manager import PublishManagerMixin
from .repository_manager import RepositoryManagerMixin

# Import aptly API models for convenience
from ..models.aptly_api import (
    AddFilesResponse,
    LocalRepoResponse,
    PublishedRepoResponse,
    SnapshotResponse,
)

__all__ = [
    "AptlyClient",
    "FileManagerMixin",
    "PublishManagerMixin",
    "RepositoryManagerMixin",
    # API Models
    "AddFilesResponse",
    "LocalRepoResponse",
    "PublishedRepoResponse",
    "SnapshotResponse",
]
