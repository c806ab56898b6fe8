"""Settings model for the aptly connection and publishing conventions."""

from typing import List, Optional

from pydantic import Field, field_validator

from ..utils.constants import (
    DEFAULT_API_URL,
    DEFAULT_COMPONENT,
    DEFAULT_STORAGE_TYPE,
    DEFAULT_TIMEOUT,
    RESERVED_REPO_NAMES,
)
from .base import AptlyToolBaseModel


class AptlySettings(AptlyToolBaseModel):
    """
    Effective settings after merging defaults, config file and CLI overrides.

    Attributes:
        api_url: Root URL of the aptly API (e.g. ``http://aptly:8080/api``)
        timeout: Request timeout in seconds
        username: Optional HTTP basic auth user
        password: Optional HTTP basic auth password
        storage_type: Storage backend type used to build publish prefixes
        component: Component snapshots are published under
        reserved_names: Repository names that are never publish targets
    """

    api_url: str = DEFAULT_API_URL
    timeout: float = Field(default=DEFAULT_TIMEOUT, gt=0)
    username: Optional[str] = None
    password: Optional[str] = Field(default=None, repr=False)
    storage_type: str = DEFAULT_STORAGE_TYPE
    component: str = DEFAULT_COMPONENT
    reserved_names: List[str] = Field(default_factory=lambda: list(RESERVED_REPO_NAMES))

    @field_validator("api_url")
    @classmethod
    def validate_api_url(cls, v: str) -> str:
        """Require an http(s) URL and drop any trailing slash."""
        if not v.startswith(("http://", "https://")):
            raise ValueError(f"api_url must be an http(s) URL, got: {v}")
        return v.rstrip("/")

    @property
    def has_basic_auth(self) -> bool:
        """Check if HTTP basic auth credentials are configured."""
        return bool(self.username) and self.password is not None


__all__ = ["AptlySettings"]
