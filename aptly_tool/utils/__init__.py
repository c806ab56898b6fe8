"""
Utility modules for aptly-tool operations.

Modules that depend on the models (config_manager, argument_resolver,
validation) are imported from their own submodules.
"""

from .logger import setup_logging, WrappingFormatter, get_logger, register_secret
from .session import create_session
from .naming import (
    filter_reserved,
    is_reserved,
    package_identifier,
    publish_distribution,
    publish_prefix,
    snapshot_name,
    split_local_repo_name,
)

from . import constants
from . import error_handling
from . import logging_utils
from . import response_utils

__all__ = [
    "setup_logging",
    "WrappingFormatter",
    "get_logger",
    "register_secret",
    "create_session",
    "filter_reserved",
    "is_reserved",
    "package_identifier",
    "publish_distribution",
    "publish_prefix",
    "snapshot_name",
    "split_local_repo_name",
    "constants",
    "error_handling",
    "logging_utils",
    "response_utils",
]
