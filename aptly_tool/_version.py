"""Version information for aptly-tool."""

__version__ = "1.0.0"
