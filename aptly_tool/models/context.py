"""Context models for aptly-tool publish operations."""

from pathlib import Path

from pydantic import ConfigDict, Field

from ..utils.constants import DEFAULT_COMPONENT
from .base import AptlyToolBaseModel


class PublishContext(AptlyToolBaseModel):
    """
    Fully resolved parameters for one publish run.

    Built once by the argument resolver and handed to the publish pipeline;
    every pipeline request is derived from these values alone.

    Attributes:
        package_file: Path to the .deb package to publish
        package_identifier: Base filename of the package, used as the upload directory
        local_repo: aptly local repository receiving the package
        snapshot_name: Name of the snapshot created from the local repo
        publish_prefix: Storage endpoint of the published repo (e.g. ``s3:ubuntu``)
        distribution: Distribution of the published repo (e.g. ``bionic``)
        passphrase: GPG key passphrase used to sign the publish
        component: Component the snapshot is published under
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    package_file: Path
    package_identifier: str
    local_repo: str
    snapshot_name: str
    publish_prefix: str
    distribution: str = Field(min_length=1)
    passphrase: str = Field(repr=False)
    component: str = DEFAULT_COMPONENT


__all__ = ["PublishContext"]
