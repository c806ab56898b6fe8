"""Base model for aptly-tool's own data (not aptly API payloads)."""

from pydantic import BaseModel, ConfigDict


class AptlyToolBaseModel(BaseModel):
    """
    Base model for settings, resolved contexts and results.

    Unknown fields are rejected so a typo in the configuration file fails
    loudly, and assignments are validated like construction.
    """

    model_config = ConfigDict(extra="forbid", frozen=False, validate_assignment=True)


__all__ = ["AptlyToolBaseModel"]
