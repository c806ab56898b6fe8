"""Validation result models."""

from typing import List

from pydantic import Field

from .base import AptlyToolBaseModel


class ValidationResult(AptlyToolBaseModel):
    """
    Result of validation operations.

    Attributes:
        is_valid: Whether validation passed
        errors: List of validation error messages
    """

    is_valid: bool = True
    errors: List[str] = Field(default_factory=list)

    @property
    def error_count(self) -> int:
        """Number of validation errors."""
        return len(self.errors)

    @property
    def has_errors(self) -> bool:
        """Check if there are any errors."""
        return len(self.errors) > 0

    def add_error(self, error: str) -> None:
        """Add a validation error."""
        self.errors = self.errors + [error]  # Create new list to avoid mutation issues
        self.is_valid = False

    def extend(self, other: "ValidationResult") -> None:
        """Merge the errors of another result into this one."""
        for error in other.errors:
            self.add_error(error)


__all__ = ["ValidationResult"]
