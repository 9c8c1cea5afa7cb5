"""
Default configuration values for YamlEdit.

This module defines the settings used when no YamlEdit configuration file is
found. These values serve as fallbacks and define the base configuration
structure.

Default configuration values can be overridden by:
1. Configuration files (yamledit.yml, or the file named by YAMLEDIT_CONFIG)
2. Logging environment variables (YAMLEDIT_LOG_LEVEL, YAMLEDIT_LOG_FORMAT, YAMLEDIT_LOG_FILE)
3. Programmatic configuration via the ConfigManager
"""

from typing import Dict, Any

from YamlEdit.document.codec import DEFAULT_DUMP_OPTIONS

# Default logging configuration
LOGGING_DEFAULTS: Dict[str, Any] = {
    # Logging level: 'debug', 'info', 'warning', 'error', 'critical'
    "level": "warning",
    # Logging format: 'json', 'text'
    "format": "text",
    # Log file path (null = log to stderr only)
    "file": None
}

# Default YAML output configuration, passed to the YAML emitter
OUTPUT_DEFAULTS: Dict[str, Any] = {
    # Write the '---' document start marker
    "explicit_start": DEFAULT_DUMP_OPTIONS["explicit_start"],
    # Write the '...' document end marker
    "explicit_end": DEFAULT_DUMP_OPTIONS["explicit_end"],
    # Indentation of nested blocks
    "indent": DEFAULT_DUMP_OPTIONS["indent"],
    # Preferred maximum line width
    "width": DEFAULT_DUMP_OPTIONS["width"],
    # Write non-ASCII characters as they are instead of escaping them
    "allow_unicode": DEFAULT_DUMP_OPTIONS["allow_unicode"],
    # Use flow style ({a: 1}) for collections instead of block style
    "default_flow_style": DEFAULT_DUMP_OPTIONS["default_flow_style"]
}

# Complete default configuration structure
DEFAULT_CONFIG: Dict[str, Dict[str, Any]] = {
    "logging": LOGGING_DEFAULTS,
    "output": OUTPUT_DEFAULTS
}
