"""
Utility functions for the YamlEdit package.

This module provides utility functions used across the YamlEdit package,
including error logging and conversion into the YamlEdit exception hierarchy.
"""

import traceback
from typing import Any, Optional, Type

from YamlEdit.exceptions import YamlEditError
from YamlEdit.utils.logging import get_logger

# Get a logger for this module
logger = get_logger(__name__)

def log_error(error: Exception, additional_context: Optional[str] = None) -> None:
    """
    Log an error message at error level and its traceback at debug level.

    Args:
        error: The exception that occurred
        additional_context: Optional additional context about where the error occurred

    Example:
        >>> try:
        ...     document.get("$.missing")
        ... except PathNotFoundError as e:
        ...     log_error(e, "Error reading source")
    """
    error_message = str(error)

    if additional_context:
        logger.error(f"{additional_context}: {error_message}")
    else:
        logger.error(f"Error: {error_message}")

    logger.debug(f"Traceback: {traceback.format_exc()}")

def handle_exception(
    error: Exception,
    log: Any = None,
    error_class: Type[YamlEditError] = YamlEditError,
    user_message: Optional[str] = None,
) -> YamlEditError:
    """
    Convert an arbitrary exception into a YamlEditError and log it.

    YamlEdit errors are passed through unchanged; anything else is wrapped in
    `error_class` with the original exception kept as the cause.

    Args:
        error: The exception to handle
        log: Logger used to report the error (defaults to this module's logger)
        error_class: Exception class used to wrap foreign exceptions
        user_message: User-facing message for wrapped exceptions

    Returns:
        The YamlEditError describing the failure
    """
    log = log or logger

    if isinstance(error, YamlEditError):
        converted = error
    else:
        converted = error_class(
            message=f"{error.__class__.__name__}: {error}",
            user_message=user_message,
            cause=error,
        )

    log.error(f"{converted.error_code}: {converted.message}")
    if converted.traceback:
        log.debug(f"Traceback: {converted.traceback}")
    return converted
