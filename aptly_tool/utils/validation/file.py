"""
Package file validation utilities.

Problems are collected into a ``ValidationResult`` instead of raised, so the
caller can report them together with every other argument problem.
"""

import logging
import os
from typing import Optional

from ...models.validation import ValidationResult
from ..constants import PACKAGE_FILE_SUFFIX
from ..logging_utils import format_file_size


def validate_package_file(package_file: Optional[str], *, flag: str = "--package") -> ValidationResult:
    """
    Validate that a package path was given, exists, is readable and is a .deb.

    Args:
        package_file: Path supplied on the command line, or None
        flag: Name of the CLI flag, used in the "missing" message

    Returns:
        ValidationResult describing every problem found

    Example:
        >>> validate_package_file(None).errors
        ['You must declare the package file you wish to publish using the --package flag']
    """
    result = ValidationResult()

    if not package_file:
        result.add_error(f"You must declare the package file you wish to publish using the {flag} flag")
        return result

    if not os.path.isfile(package_file):
        result.add_error(f"Package file '{package_file}' not found")
    elif not os.access(package_file, os.R_OK):
        result.add_error(f"Cannot read package file '{package_file}'")
    else:
        logging.debug("Package file '%s': %s", package_file, format_file_size(os.path.getsize(package_file)))

    name = os.path.basename(package_file)
    if not name.endswith(PACKAGE_FILE_SUFFIX) or len(name) == len(PACKAGE_FILE_SUFFIX):
        result.add_error(f"Package file appears invalid. Expected '*{PACKAGE_FILE_SUFFIX}', found: '{package_file}'")

    return result


__all__ = ["validate_package_file"]
