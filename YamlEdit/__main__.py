#!/usr/bin/env python3
"""
Main entry point for the YamlEdit package when run as a module.

This module provides the entry point for running the YamlEdit package as a module
using `python -m YamlEdit`. It delegates to the CLI's main function.

Example:
    $ python -m YamlEdit --src defaults.yaml --src '{"server": {"port": 8080}}' config.yaml
    $ python -m YamlEdit --src secrets.yaml --srcPath $.db --targetPath $.services.api.db config.yaml
"""

import sys
from YamlEdit.utils.logging import get_logger

# Get a logger for this module
logger = get_logger(__name__)

def main():
    """Main entry point for the YamlEdit package."""
    try:
        from YamlEdit.cli.commands import main as cli_main
        return cli_main()
    except Exception as e:
        from YamlEdit.utils import handle_exception

        # Usage, parse and path errors are reported by the CLI itself;
        # anything reaching this point is unexpected
        error = handle_exception(
            e,
            log=logger,
            user_message="An error occurred while running yaml-edit.",
        )

        print(f"Error: {error.user_message}", file=sys.stderr)
        print("Technical details have been logged.", file=sys.stderr)
        sys.exit(error.exit_code)

if __name__ == "__main__":
    main()
