"""
Configuration management utilities.

This module loads the optional TOML configuration file and merges it with
defaults and command line overrides into an ``AptlySettings`` model.

Example configuration::

    [aptly]
    api_url = "http://aptly.service.consul:8080/api"
    timeout = 60
    username = "ci"
    password = "secret"
"""

import logging
import tomllib
from pathlib import Path
from typing import Any, Dict, Optional

from ..models.settings import AptlySettings
from .constants import CONFIG_SECTION, DEFAULT_CONFIG_PATH


class ConfigManager:
    """
    Manages configuration loading and access.

    Unlike the aptly API itself, the configuration file is optional: when
    the default file does not exist the built-in defaults apply. An
    explicitly given path must exist.
    """

    def __init__(self, config_path: Optional[str] = None) -> None:
        """
        Initialize the configuration manager.

        Args:
            config_path: Path to configuration file. If None, uses default path.
        """
        self.explicit = config_path is not None
        self.config_path = Path(config_path or DEFAULT_CONFIG_PATH).expanduser()
        self._config: Optional[Dict[str, Any]] = None

    def load(self) -> Dict[str, Any]:
        """
        Load configuration from file.

        Returns:
            Dictionary containing configuration data (empty if the default
            file does not exist)

        Raises:
            FileNotFoundError: If an explicitly given config file doesn't exist
            ValueError: If config file is invalid
        """
        if self._config is not None:
            return self._config

        if not self.config_path.exists():
            if self.explicit:
                raise FileNotFoundError(f"Configuration file not found: {self.config_path}")
            logging.debug("No configuration file at %s, using defaults", self.config_path)
            self._config = {}
            return self._config

        try:
            with open(self.config_path, "rb") as f:
                self._config = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise ValueError(f"Invalid TOML in configuration file {self.config_path}: {e}") from e
        except OSError as e:
            raise ValueError(f"Failed to load configuration from {self.config_path}: {e}") from e

        logging.debug("Loaded configuration from %s", self.config_path)
        return self._config

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get a configuration value by key.

        Supports nested keys using dot notation (e.g., "aptly.api_url").

        Args:
            key: Configuration key (supports dot notation for nested keys)
            default: Default value if key not found

        Returns:
            Configuration value or default
        """
        value: Any = self.load()
        for k in key.split("."):
            if not isinstance(value, dict) or k not in value:
                return default
            value = value[k]
        return default if value is None else value

    def get_section(self, section: str) -> Dict[str, Any]:
        """
        Get an entire configuration section.

        Args:
            section: Section name (e.g., "aptly")

        Returns:
            Dictionary containing section data, or empty dict if section not found
        """
        section_data = self.get(section, {})
        return section_data if isinstance(section_data, dict) else {}

    def settings(self, **overrides: Any) -> AptlySettings:
        """
        Build effective settings from the ``[aptly]`` section and overrides.

        Overrides whose value is None are ignored, so unset CLI options fall
        through to the file and then to the defaults.

        Args:
            **overrides: Setting values taking precedence over the file

        Returns:
            Validated AptlySettings

        Raises:
            ValueError: If the merged settings are invalid
        """
        values = dict(self.get_section(CONFIG_SECTION))
        values.update({k: v for k, v in overrides.items() if v is not None})
        try:
            return AptlySettings(**values)
        except ValueError as e:
            raise ValueError(f"Invalid configuration in {self.config_path}: {e}") from e


__all__ = ["ConfigManager"]
