"""
Aptly Tool - A Python client for publishing Debian packages through the aptly API.

This package uploads a built .deb to an aptly server, adds it to a local
repository, snapshots that repository and switches the matching published
repository over to the new snapshot.
"""

from ._version import __version__

__author__ = "Platform Engineering Team"
__email__ = "platform-engineering@example.com"

# Import main classes and functions for easy access
from .api import AptlyClient
from .services import PublishPipeline
from .utils import setup_logging, WrappingFormatter, get_logger
from .utils.argument_resolver import ArgumentResolver
from .cli import main as cli_main, cli as cli_group

__all__ = [
    "__version__",
    "AptlyClient",
    "PublishPipeline",
    "ArgumentResolver",
    "setup_logging",
    "WrappingFormatter",
    "get_logger",
    "cli_main",
    "cli_group",
]
