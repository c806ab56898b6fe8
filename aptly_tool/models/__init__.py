"""
Pydantic models for aptly-tool.

This package contains all Pydantic models used in the application:
- aptly_api: Models for aptly API requests and responses
- base, context, settings, validation, results: Domain models
"""

# aptly API Models
from .aptly_api import (
    AptlyBaseModel,
    AptlyRequestModel,
    LocalRepoResponse,
    AddReport,
    AddFilesResponse,
    SnapshotCreateRequest,
    SnapshotResponse,
    PublishSource,
    PublishedRepoResponse,
    SigningOptions,
    SnapshotRef,
    PublishSwitchRequest,
)

# Domain Models
from .base import AptlyToolBaseModel
from .context import PublishContext
from .settings import AptlySettings
from .validation import ValidationResult
from .results import PublishResult

__all__ = [
    # aptly API Models
    "AptlyBaseModel",
    "AptlyRequestModel",
    "LocalRepoResponse",
    "AddReport",
    "AddFilesResponse",
    "SnapshotCreateRequest",
    "SnapshotResponse",
    "PublishSource",
    "PublishedRepoResponse",
    "SigningOptions",
    "SnapshotRef",
    "PublishSwitchRequest",
    # Domain Models
    "AptlyToolBaseModel",
    "PublishContext",
    "AptlySettings",
    "ValidationResult",
    "PublishResult",
]
