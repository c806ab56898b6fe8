"""
Pydantic models for aptly API requests and responses.

aptly speaks PascalCase JSON; models expose snake_case attributes and map
them with aliases. Responses tolerate extra fields, requests are dumped
with ``by_alias=True``.

API documentation: https://www.aptly.info/doc/api/
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from ..utils.constants import DEFAULT_COMPONENT


# ============================================================================
# Base Models
# ============================================================================


class AptlyBaseModel(BaseModel):
    """Base model for all aptly API responses."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)  # Allow extra fields from API


class AptlyRequestModel(BaseModel):
    """Base model for request bodies sent to aptly."""

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    def to_payload(self) -> dict:
        """Serialize to the JSON body aptly expects."""
        return self.model_dump(by_alias=True)


# ============================================================================
# Local Repository Models
# ============================================================================


class LocalRepoResponse(AptlyBaseModel):
    """Entry from ``GET /repos``."""

    name: str = Field(alias="Name")
    comment: Optional[str] = Field(default=None, alias="Comment")
    default_distribution: Optional[str] = Field(default=None, alias="DefaultDistribution")
    default_component: Optional[str] = Field(default=None, alias="DefaultComponent")


class AddReport(AptlyBaseModel):
    """Per-file report returned when adding uploaded files to a repo."""

    warnings: List[str] = Field(default_factory=list, alias="Warnings")
    added: List[str] = Field(default_factory=list, alias="Added")
    removed: List[str] = Field(default_factory=list, alias="Removed")


class AddFilesResponse(AptlyBaseModel):
    """Response from ``POST /repos/{name}/file/{dir}``."""

    failed_files: List[str] = Field(default_factory=list, alias="FailedFiles")
    report: AddReport = Field(default_factory=AddReport, alias="Report")

    @property
    def has_failures(self) -> bool:
        """Check if aptly refused any of the uploaded files."""
        return bool(self.failed_files)


# ============================================================================
# Snapshot Models
# ============================================================================


class SnapshotCreateRequest(AptlyRequestModel):
    """Body for ``POST /repos/{name}/snapshots``."""

    name: str = Field(alias="Name")


class SnapshotResponse(AptlyBaseModel):
    """Snapshot description returned by aptly."""

    name: str = Field(alias="Name")
    created_at: Optional[str] = Field(default=None, alias="CreatedAt")
    description: Optional[str] = Field(default=None, alias="Description")


# ============================================================================
# Publish Models
# ============================================================================


class PublishSource(AptlyBaseModel):
    """A component/snapshot pair served by a published repository."""

    component: str = Field(default=DEFAULT_COMPONENT, alias="Component")
    name: str = Field(alias="Name")


class PublishedRepoResponse(AptlyBaseModel):
    """Entry from ``GET /publish``."""

    storage: str = Field(default="", alias="Storage")
    prefix: str = Field(default=".", alias="Prefix")
    distribution: str = Field(default="", alias="Distribution")
    source_kind: Optional[str] = Field(default=None, alias="SourceKind")
    sources: List[PublishSource] = Field(default_factory=list, alias="Sources")
    architectures: List[str] = Field(default_factory=list, alias="Architectures")


class SigningOptions(AptlyRequestModel):
    """GPG signing options for publish operations."""

    passphrase: str = Field(alias="Passphrase", repr=False)
    batch: bool = Field(default=True, alias="Batch")


class SnapshotRef(AptlyRequestModel):
    """Snapshot reference inside a publish switch request."""

    component: str = Field(default=DEFAULT_COMPONENT, alias="Component")
    name: str = Field(alias="Name")


class PublishSwitchRequest(AptlyRequestModel):
    """Body for ``PUT /publish/{prefix}:/{distribution}``."""

    signing: SigningOptions = Field(alias="Signing")
    snapshots: List[SnapshotRef] = Field(alias="Snapshots")


__all__ = [
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
]
