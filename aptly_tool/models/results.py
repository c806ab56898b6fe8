"""Result models for publish pipeline runs."""

from typing import List, Optional

from pydantic import Field

from .base import AptlyToolBaseModel


class PublishResult(AptlyToolBaseModel):
    """
    Outcome of a publish pipeline run.

    Attributes:
        completed_stages: Stages that finished successfully, in order
        failed_stage: Stage that failed, if any
        error: Description of the failure, if any
        fatal: Whether the failure should make the run exit non-zero
    """

    completed_stages: List[str] = Field(default_factory=list)
    failed_stage: Optional[str] = None
    error: Optional[str] = None
    fatal: bool = False

    @property
    def succeeded(self) -> bool:
        """True if every stage completed."""
        return self.failed_stage is None

    @property
    def exit_ok(self) -> bool:
        """True if the run should exit with status 0."""
        return self.succeeded or not self.fatal

    def mark_completed(self, stage: str) -> None:
        """Record a completed stage."""
        self.completed_stages = self.completed_stages + [stage]

    def mark_failed(self, stage: str, error: str, *, fatal: bool) -> None:
        """Record the failed stage."""
        self.failed_stage = stage
        self.error = error
        self.fatal = fatal


__all__ = ["PublishResult"]
