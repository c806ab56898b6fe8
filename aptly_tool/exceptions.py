"""
Exception types for aptly-tool.

Network failures are reported as ``httpx.HTTPError``; the types here cover
failures that belong to this tool's own workflow and carry the exit code the
CLI should terminate with.
"""

from typing import Iterable, List


class AptlyToolError(Exception):
    """Base class for aptly-tool errors with an associated exit code."""

    exit_code: int = 1


class ResolutionError(AptlyToolError):
    """
    Raised when publish arguments cannot be resolved.

    Collects every argument and validation problem found so they can be
    reported together instead of one at a time.

    Attributes:
        errors: Human-readable description of each problem
    """

    def __init__(self, errors: Iterable[str]) -> None:
        self.errors: List[str] = list(errors)
        super().__init__("; ".join(self.errors) or "Unable to resolve publish arguments")


__all__ = ["AptlyToolError", "ResolutionError"]
