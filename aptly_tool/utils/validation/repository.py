"""
Repository target validation utilities.

Each check compares a name derived from the command line against the
listing the aptly server returned and, on mismatch, describes the valid
choices so the user can correct the invocation.
"""

from typing import Iterable, Optional

from ...models.validation import ValidationResult


def _choices(values: Iterable[str]) -> str:
    joined = ", ".join(values)
    return joined or "none"


def validate_local_repo(
    local_repo: Optional[str], available: Iterable[str], *, flag: str = "--local-repo"
) -> ValidationResult:
    """
    Validate that the local repo was given and is one of the available repos.

    Args:
        local_repo: Local repo name from the command line, or None
        available: Non-reserved local repo names reported by aptly
        flag: Name of the CLI flag, used in the "missing" message

    Returns:
        ValidationResult describing the problem, if any
    """
    result = ValidationResult()
    available = list(available)

    if not local_repo:
        result.add_error(f"You must declare the local repo you wish to add the package to using the {flag} flag")
    elif local_repo not in available:
        result.add_error(f"Local repo '{local_repo}' appears invalid. Valid local repos: {_choices(available)}")

    return result


def validate_publish_prefix(prefix: str, available: Iterable[str]) -> ValidationResult:
    """
    Validate a derived publish prefix against the published storage endpoints.

    Args:
        prefix: Derived prefix, e.g. ``s3:ubuntu``
        available: Non-reserved storage endpoints reported by aptly

    Returns:
        ValidationResult describing the problem, if any
    """
    result = ValidationResult()
    available = list(available)

    if prefix not in available:
        result.add_error(f"Unable to derive publish prefix. Found '{prefix}', valid: {_choices(available)}")

    return result


def validate_distribution(distribution: str, prefix: str, available: Iterable[str]) -> ValidationResult:
    """
    Validate a derived distribution against those published under a prefix.

    An empty distribution means the local repo name had no hyphen; it is
    always rejected.

    Args:
        distribution: Derived distribution, e.g. ``bionic``
        prefix: Publish prefix the distribution belongs to
        available: Distributions aptly publishes under ``prefix``

    Returns:
        ValidationResult describing the problem, if any
    """
    result = ValidationResult()
    available = list(available)

    if not distribution:
        result.add_error(
            "Unable to derive distribution. Local repo names must look like '<endpoint>-<distribution>'"
        )
    elif distribution not in available:
        result.add_error(
            f"Unable to derive distribution. Found '{distribution}', valid for {prefix}: {_choices(available)}"
        )

    return result


__all__ = ["validate_local_repo", "validate_publish_prefix", "validate_distribution"]
