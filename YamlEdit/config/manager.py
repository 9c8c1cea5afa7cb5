"""
Configuration manager for YamlEdit.

This module implements the ConfigManager class that holds YamlEdit's own
settings (logging and YAML output options). The settings are kept in a
Document, so hierarchical keys and merging of configuration files use the same
path and merge rules as the documents YamlEdit edits.
"""

import os
from pathlib import Path
from typing import Any, Dict, Optional

from YamlEdit.config.defaults import DEFAULT_CONFIG
from YamlEdit.config.schema import validate_config
from YamlEdit.document import Document, join_path
from YamlEdit.document.path import ROOT_PATH
from YamlEdit.exceptions import ConfigError, YamlEditError
from YamlEdit.utils.logging import get_logger

# Environment variable naming an explicit configuration file
CONFIG_ENV_VAR = 'YAMLEDIT_CONFIG'
CONFIG_FILE_NAME = 'yamledit.yml'

class ConfigManager:
    """
    Configuration manager for YamlEdit.

    Implements a singleton pattern to ensure only one configuration
    instance exists across the application.

    Features:
    - Hierarchical key access (e.g., "output.indent")
    - Deep merging of configuration files over the defaults
    - Loading from YAML or JSON files
    - Configuration validation

    Attributes:
        _instance (ConfigManager): The singleton instance
        _config (Document): The configuration document
        logger: The logger instance
    """
    _instance = None

    def __new__(cls) -> 'ConfigManager':
        if cls._instance is None:
            cls._instance = super(ConfigManager, cls).__new__(cls)
            cls._instance._initialize()
        return cls._instance

    def _initialize(self) -> None:
        """Reset the configuration to the default values."""
        self._config = Document(DEFAULT_CONFIG)
        self.logger = get_logger(__name__)

    @staticmethod
    def _key_path(key: str) -> str:
        return join_path(ROOT_PATH, *key.split('.'))

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get a configuration value using dot notation.

        Args:
            key (str): Hierarchical key using dot notation (e.g., "logging.level")
            default (Any, optional): Value returned if the key is not found. Defaults to None.

        Returns:
            Any: A copy of the configuration value if found, otherwise the default value.

        Examples:
            >>> config = get_config()
            >>> config.get("output.indent")
            2
        """
        if not key:
            return default
        return self._config.get(self._key_path(key), default)

    def set(self, key: str, value: Any) -> None:
        """
        Set a configuration value using dot notation.

        Creates intermediate sections if they don't exist.

        Args:
            key (str): Hierarchical key using dot notation (e.g., "logging.level")
            value (Any): Value to set

        Examples:
            >>> config = get_config()
            >>> config.set("output.explicit_end", False)
        """
        if not key:
            return
        self._config.set(self._key_path(key), value)

    def get_logging_settings(self) -> Dict[str, Any]:
        """
        Get the logging settings.

        Returns:
            Dict[str, Any]: Dictionary with logging settings (level, format, file)
        """
        return {
            "level": self.get("logging.level", "warning"),
            "format": self.get("logging.format", "text"),
            "file": self.get("logging.file")
        }

    def get_dump_options(self) -> Dict[str, Any]:
        """
        Get the YAML output options.

        Returns:
            Dict[str, Any]: Keyword arguments for Document.dump and Document.write_file
        """
        return self.get("output", {})

    def find_config_file(self) -> Optional[Path]:
        """
        Find the configuration file in standard locations.

        Searches for a configuration file in the following order:
        1. The file named by the YAMLEDIT_CONFIG environment variable
        2. Current working directory: ./yamledit.yml
        3. User's home directory: ~/.yamledit/yamledit.yml

        Returns:
            Optional[Path]: Path to the configuration file if found, None otherwise
        """
        search_locations = [
            Path.cwd() / CONFIG_FILE_NAME,
            Path.home() / '.yamledit' / CONFIG_FILE_NAME,
        ]

        env_path = os.environ.get(CONFIG_ENV_VAR)
        if env_path:
            search_locations.insert(0, Path(env_path))

        for path in search_locations:
            if path.is_file():
                self.logger.debug(f"Found configuration file at: {path}")
                return path

        self.logger.debug("No configuration file found in standard locations")
        return None

    def load_config(self) -> bool:
        """
        Load configuration from the first available standard location.

        If no file is found, or the file found is invalid, the current
        configuration is kept.

        Returns:
            bool: True if a configuration file was found and loaded, False otherwise
        """
        config_path = self.find_config_file()

        if not config_path:
            self.logger.debug("No configuration file found, using defaults")
            return False

        try:
            self._config = self._merged_with_defaults(config_path)
        except YamlEditError as e:
            self.logger.warning(f"Ignoring configuration file {config_path}: {e}")
            return False

        self.logger.info(f"Loaded configuration from {config_path}")
        return True

    def _merged_with_defaults(self, path: Path) -> Document:
        settings = Document.from_file(path)

        errors = validate_config(settings.to_dict())
        if errors:
            raise ConfigError(
                f"Configuration validation errors: {errors}",
                context={"file": str(path), "errors": errors},
            )

        config = Document(DEFAULT_CONFIG)
        config.merge(settings)
        return config


# Global function to get the config manager instance
def get_config() -> ConfigManager:
    """
    Get the singleton ConfigManager instance.

    Returns:
        ConfigManager: The singleton ConfigManager instance

    Examples:
        >>> from YamlEdit.config import get_config
        >>> indent = get_config().get("output.indent")
    """
    return ConfigManager()
