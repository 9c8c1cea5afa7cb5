"""
Command-line interface (CLI) for the YamlEdit package.

This module provides the yaml-edit command, which merges YAML or JSON
sources into a target file.
"""

import os
import sys

import click

from YamlEdit import __version__
from YamlEdit.cli.arguments import USAGE, parse_source_groups
from YamlEdit.config import get_config
from YamlEdit.exceptions import CliUsageError, YamlEditError
from YamlEdit.services import MergeService
from YamlEdit.utils import log_error
from YamlEdit.utils.logging import LOG_LEVEL_ENV_VAR, configure_logging, get_logger, set_log_level

# Get a logger for this module
logger = get_logger(__name__)

# Keep the usage block as written instead of letting click rewrap it
HELP_EPILOG = "\b\n" + USAGE.replace("\n\n", "\n\n\b\n")

# Apply the log level if specified in the command options
def apply_log_level(ctx, param, value):
    if value:
        set_log_level(value)
    return value

# Add an option for setting the log level
def log_level_option(f):
    return click.option('--log-level',
                        type=click.Choice(['debug', 'info', 'warning', 'error', 'critical'], case_sensitive=False),
                        callback=apply_log_level,
                        expose_value=False,
                        help='Set the logging level')(f)

@click.command(
    'yaml-edit',
    context_settings={'ignore_unknown_options': True},
    epilog=HELP_EPILOG,
)
@click.argument('args', nargs=-1, type=click.UNPROCESSED,
                metavar='[--src SRC [--srcPath PATH] [--targetPath PATH]]... TARGET_FILE')
@log_level_option
@click.version_option(__version__, prog_name='yaml-edit')
@click.pass_context
def cli(ctx, args):
    """
    Merge YAML or JSON sources into TARGET_FILE.

    Each --src is loaded, the subtree at its --srcPath is extracted and merged
    into TARGET_FILE at its --targetPath. Objects are merged key by key,
    sequences and scalars replace existing values. TARGET_FILE is only
    written when every source merged successfully.
    """
    try:
        sources, target_file = parse_source_groups(args)
    except CliUsageError as e:
        logger.debug(f"{e.error_code}: {e.message}")
        raise click.UsageError(e.message, ctx=ctx)

    try:
        service = MergeService(target_file, get_config().get_dump_options())
        service.merge_all(sources)
        service.write()
    except YamlEditError as e:
        log_error(e, "Error merging into target file")
        raise click.ClickException(e.message)

    logger.info(f"Merged {len(sources)} source(s) into {target_file}")

def main():
    """Main entry point for the yaml-edit command-line interface."""
    # Load configuration before executing the command
    config = get_config()
    config.load_config()

    # Setup logging from configuration; --log-level overrides the level
    settings = config.get_logging_settings()
    configure_logging(
        level=None if LOG_LEVEL_ENV_VAR in os.environ else settings["level"],
        use_json=settings["format"] == "json",
        log_file=settings["file"],
    )

    logger.debug("Configuration loaded successfully")

    return cli(prog_name='yaml-edit')

if __name__ == '__main__':
    sys.exit(main())
