"""
YamlEdit - merge YAML and JSON configuration data at arbitrary paths.

This module provides tools for loading YAML/JSON data, addressing nested
values with a restricted path syntax, and deep-merging one data tree into
another at a target path.

Key Components:
- Document: YAML/JSON document with get/set/merge and YAML serialization
- MergeService: Merge workflow used by the yaml-edit command
- CLI: The yaml-edit command-line tool

Usage Examples:
    # Merging documents
    from YamlEdit import Document
    target = Document("config.yaml")
    target.merge(Document("overrides.yaml"))
    target.write_file("config.yaml")

    # Reading and writing nested values
    target.set("$.server.port", 8080)
    port = target.get("$.server.port")

    # Setting the log level
    from YamlEdit import set_log_level
    set_log_level('debug')
"""

__version__ = '1.0.0'

# Import and configure logging early
from YamlEdit.utils.logging import get_logger, set_log_level, configure_logging

# Import configuration system
from YamlEdit.config import get_config

from YamlEdit.document import Document, MergeEngine
from YamlEdit.services import MergeService, MergeSource
from YamlEdit.exceptions import (
    YamlEditError,
    ParseError,
    PathError,
    InvalidPathError,
    UnsupportedPathError,
    PathNotFoundError,
    CliUsageError,
    ConfigError,
)

# Get a logger for the main package
logger = get_logger(__name__)

# Export key classes and functions for public API
__all__ = [
    'Document', 'MergeEngine', 'MergeService', 'MergeSource',
    'YamlEditError', 'ParseError', 'PathError', 'InvalidPathError',
    'UnsupportedPathError', 'PathNotFoundError', 'CliUsageError', 'ConfigError',
    'get_config', 'get_logger', 'set_log_level', 'configure_logging',
]
