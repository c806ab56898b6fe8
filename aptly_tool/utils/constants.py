"""
Central constants for the aptly-tool package.

This module consolidates all constants used throughout the codebase
to eliminate magic numbers and strings.
"""

# ============================================================================
# Repository and Publishing Conventions
# ============================================================================

# Repository names reserved for caching third-party packages; never a publish target
RESERVED_REPO_NAMES = ["upstream"]

# Storage backend type used to build the publish prefix (e.g. "s3:ubuntu")
DEFAULT_STORAGE_TYPE = "s3"

# Component the published repository serves the snapshot under
DEFAULT_COMPONENT = "main"

# Separator between the publish prefix token and the distribution in a local repo name
REPO_NAME_SEPARATOR = "-"

# Timestamp format appended to snapshot names (minute resolution)
SNAPSHOT_TIMESTAMP_FORMAT = "%Y%m%d%H%M"

# ============================================================================
# File and Path Constants
# ============================================================================

# Required suffix of package files
PACKAGE_FILE_SUFFIX = ".deb"

# Multipart field name aptly expects for uploaded files
UPLOAD_FIELD_NAME = "file"

# ============================================================================
# API and Network Constants
# ============================================================================

# Default aptly API root
DEFAULT_API_URL = "http://aptly.service.consul:8080/api"

# Default timeout for HTTP requests (seconds)
DEFAULT_TIMEOUT = 120

# Connect timeout (seconds)
DEFAULT_CONNECT_TIMEOUT = 10.0

# Pipeline stages are never retried, transport included
CONNECT_RETRIES = 0

# ============================================================================
# Logging and Display Constants
# ============================================================================

# Maximum log line length (characters)
# Set to 114 to fit standard terminal width (120) minus prefix/margin
MAX_LOG_LINE_LENGTH = 114

# Width for separator lines in console output
SEPARATOR_WIDTH = 80

# Keys whose values must never appear in logs
SENSITIVE_FIELDS = ["Passphrase", "passphrase", "password"]

# ============================================================================
# Exit Codes
# ============================================================================

# Standard exit codes for CLI commands
EXIT_SUCCESS = 0
EXIT_GENERAL_ERROR = 1
EXIT_USER_INTERRUPT = 130  # User pressed Ctrl+C

# ============================================================================
# Default Paths and Environment
# ============================================================================

# Default aptly-tool configuration file path
DEFAULT_CONFIG_PATH = "~/.config/aptly-tool/config.toml"

# Configuration file section holding aptly settings
CONFIG_SECTION = "aptly"

# Environment variables honoured by the CLI
ENV_API_URL = "APTLY_API_URL"
ENV_PASSPHRASE = "APTLY_PASSPHRASE"

# ============================================================================
# HTTP Status Codes
# ============================================================================

HTTP_STATUS_UNAUTHORIZED = 401
HTTP_STATUS_FORBIDDEN = 403
HTTP_STATUS_NOT_FOUND = 404
HTTP_STATUS_SERVER_ERROR = 500


__all__ = [
    # Repository and Publishing
    "RESERVED_REPO_NAMES",
    "DEFAULT_STORAGE_TYPE",
    "DEFAULT_COMPONENT",
    "REPO_NAME_SEPARATOR",
    "SNAPSHOT_TIMESTAMP_FORMAT",
    # File and Path
    "PACKAGE_FILE_SUFFIX",
    "UPLOAD_FIELD_NAME",
    # API and Network
    "DEFAULT_API_URL",
    "DEFAULT_TIMEOUT",
    "DEFAULT_CONNECT_TIMEOUT",
    "CONNECT_RETRIES",
    # Logging and Display
    "MAX_LOG_LINE_LENGTH",
    "SEPARATOR_WIDTH",
    "SENSITIVE_FIELDS",
    # Exit Codes
    "EXIT_SUCCESS",
    "EXIT_GENERAL_ERROR",
    "EXIT_USER_INTERRUPT",
    # Default Paths and Environment
    "DEFAULT_CONFIG_PATH",
    "CONFIG_SECTION",
    "ENV_API_URL",
    "ENV_PASSPHRASE",
    # HTTP Status Codes
    "HTTP_STATUS_UNAUTHORIZED",
    "HTTP_STATUS_FORBIDDEN",
    "HTTP_STATUS_NOT_FOUND",
    "HTTP_STATUS_SERVER_ERROR",
]
