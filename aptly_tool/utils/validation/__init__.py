"""
Validation utilities for aptly publishing.

Modules:
    - file: Package file validation
    - repository: Local repo, publish prefix and distribution validation
"""

from .file import validate_package_file
from .repository import validate_distribution, validate_local_repo, validate_publish_prefix

__all__ = [
    "validate_package_file",
    "validate_local_repo",
    "validate_publish_prefix",
    "validate_distribution",
]
