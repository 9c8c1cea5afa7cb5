"""
Custom exceptions for the YamlEdit package.

This module defines a hierarchical exception system that provides:
1. Specific, technical error information for debugging and logging
2. User-friendly error messages for end-users
3. Error codes for consistent error identification
4. Optional context information for additional debugging
"""

from typing import Optional, Dict, Any
import traceback
import sys

class YamlEditError(Exception):
    """Base exception for all YamlEdit errors."""

    # Default values
    exit_code = 1
    error_code = "YE-GENERIC-ERROR"
    user_message = "An unexpected error occurred."

    def __init__(
        self,
        message: str = None,
        user_message: str = None,
        error_code: str = None,
        exit_code: int = None,
        context: Dict[str, Any] = None,
        cause: Exception = None,
        include_traceback: bool = True
    ):
        # Technical message for logs
        self.message = message or self.__class__.__doc__ or "An error occurred."
        super().__init__(self.message)

        # User-friendly message
        self.user_message = user_message or self.__class__.user_message

        # Error codes
        self.error_code = error_code or self.__class__.error_code
        self.exit_code = exit_code or self.__class__.exit_code

        # Additional context
        self.context = context or {}
        self.cause = cause

        # Capture traceback if requested
        self.traceback = None
        if include_traceback:
            self.traceback = traceback.format_exc() if sys.exc_info()[0] else None

    def to_dict(self) -> Dict[str, Any]:
        """Convert the exception to a dictionary for structured output."""
        error_dict = {
            "error_code": self.error_code,
            "message": self.user_message,
            "exit_code": self.exit_code,
        }

        # Include technical details only in debug mode or for logging
        if self.context.get('debug'):
            error_dict["technical_details"] = {
                "message": self.message,
                "context": self.context,
            }
            if self.traceback:
                error_dict["technical_details"]["traceback"] = self.traceback
            if self.cause:
                error_dict["technical_details"]["cause"] = str(self.cause)

        return error_dict


# Parse Errors - 1000 range
class ParseError(YamlEditError):
    """Exception raised when a source is neither valid YAML nor JSON or cannot be read."""
    error_code = "YE-PARSE-1001"
    user_message = "The input could not be parsed as YAML or JSON."


# Path Errors - 2000 range
class PathError(YamlEditError):
    """Base exception for all path-related errors."""
    error_code = "YE-PATH-2000"
    user_message = "The path could not be used."


class InvalidPathError(PathError):
    """Exception raised when a path is malformed."""
    error_code = "YE-PATH-2001"
    user_message = "The path is malformed."


class UnsupportedPathError(InvalidPathError):
    """Exception raised when a path does not begin at the root node."""
    error_code = "YE-PATH-2002"
    user_message = "Only paths beginning at the root node ($.) are supported."


class PathNotFoundError(PathError):
    """Exception raised when a path does not exist in a document."""
    error_code = "YE-PATH-2003"
    user_message = "No such path."


# CLI Errors - 3000 range
class CliUsageError(YamlEditError):
    """Exception raised when command-line arguments are used incorrectly."""
    exit_code = 2
    error_code = "YE-CLI-3001"
    user_message = "Invalid command-line arguments."


# System Errors - 4000 range
class ConfigError(YamlEditError):
    """Exception raised when there's an error in the YamlEdit settings."""
    error_code = "YE-SYS-4001"
    user_message = "The YamlEdit configuration is invalid."
