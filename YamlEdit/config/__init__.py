"""
YamlEdit Configuration System.

This package holds YamlEdit's own settings (logging and YAML output options)
with support for hierarchical keys, merging of configuration files over the
defaults, and validation.

Usage:
    from YamlEdit.config import get_config

    # Get a configuration value
    indent = get_config().get("output.indent")

    # Set a configuration value
    get_config().set("logging.level", "debug")

    # Load configuration from standard locations
    get_config().load_config()
"""

from YamlEdit.config.manager import ConfigManager, get_config
from YamlEdit.config.schema import validate_config

__all__ = ["ConfigManager", "get_config", "validate_config"]
