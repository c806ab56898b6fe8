"""
Protocols for type safety.

This package provides protocols that define the interfaces collaborators
must satisfy, enabling type checking and substitution in tests.
"""

from .repository_protocol import RepositoryDirectory

__all__ = ["RepositoryDirectory"]
