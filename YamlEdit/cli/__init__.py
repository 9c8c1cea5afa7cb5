"""
Command-line interface module for the YamlEdit package.

This module provides the yaml-edit command-line tool, which merges YAML or
JSON sources into a target file.

Key Components:
- main: Main entry point for the CLI
- cli: The click command
- parse_source_groups: Grouping of --src/--srcPath/--targetPath arguments
"""

from YamlEdit.cli.commands import cli, main
from YamlEdit.cli.arguments import parse_source_groups

__all__ = ['cli', 'main', 'parse_source_groups']
