"""Enhanced error handling for CLI commands."""

import sys
import traceback
from typing import Optional

import click
from pydantic import ValidationError

from tradiestop.cli.utils.formatters import format_error, format_warning
from tradiestop.services.exceptions import (
    ApiConnectionError,
    ApiError,
    NotAuthenticatedError,
)
from tradiestop.validators.transition_rules import (
    InvalidTransitionError,
    PermissionDeniedError,
)

LOGIN_HINT = "Run 'tradiestop login' and try again"


class CLIError(Exception):
    """Base exception for CLI errors with user-friendly messages."""

    def __init__(self, message: str, recovery_hint: Optional[str] = None):
        """
        Initialize CLI error.

        Args:
            message: Error message to display
            recovery_hint: Optional hint for recovering from the error
        """
        self.message = message
        self.recovery_hint = recovery_hint
        super().__init__(message)


class ConfigurationError(CLIError):
    """Error related to configuration issues."""

    pass


class APIError(CLIError):
    """Error talking to the marketplace API."""

    pass


class DataValidationError(CLIError):
    """Error related to data validation."""

    pass


class ProcessingError(CLIError):
    """Error related to data processing."""

    pass


class ActionFailedError(ProcessingError):
    """An action failed and its error toast has already been printed."""

    def __init__(self, message: str = "The action did not complete"):
        super().__init__(message)


class NotLoggedInError(CLIError):
    def __init__(
        self,
        message: str = "You are not logged in",
        recovery_hint: Optional[str] = LOGIN_HINT,
    ):
        super().__init__(message, recovery_hint)


class AccessDeniedError(CLIError):
    """The logged-in user's role may not use a command."""

    pass


def _echo(message: str, hint: Optional[str] = None) -> None:
    click.echo(format_error(message))
    if hint:
        click.echo(format_warning(f"Hint: {hint}"))


def _handle_http_error(error: ApiError) -> int:
    status_code = error.status_code

    if status_code == 401:
        _echo(f"Authentication Failed: {error.message}", LOGIN_HINT)
        return 5

    elif status_code == 403:
        _echo(
            f"Permission Denied: {error.message}",
            "Your account is not allowed to do this",
        )
        return 6

    elif status_code == 404:
        _echo(
            f"Resource Not Found: {error.message}",
            "Check the id; list records with 'tradiestop bookings' or similar",
        )
        return 7

    elif status_code == 429:
        _echo(
            "Rate Limit Exceeded",
            "Wait a few minutes before retrying",
        )
        return 8

    else:
        click.echo(format_error(f"API Error (HTTP {status_code})"))
        click.echo(format_warning(f"Details: {error.message}"))
        return 9


def handle_cli_error(error: Exception, debug: bool = False) -> int:
    """
    Handle CLI errors with user-friendly messages.

    Args:
        error: The exception that occurred
        debug: Whether to show full stack trace

    Returns:
        Exit code (1-9 for different error types)
    """
    if isinstance(error, ConfigurationError):
        _echo(f"Configuration Error: {error.message}", error.recovery_hint)
        return 1

    elif isinstance(error, APIError):
        _echo(f"API Error: {error.message}", error.recovery_hint)
        return 2

    elif isinstance(error, DataValidationError):
        _echo(f"Data Validation Error: {error.message}", error.recovery_hint)
        return 3

    elif isinstance(error, ProcessingError):
        _echo(f"Processing Error: {error.message}", error.recovery_hint)
        return 4

    elif isinstance(error, NotLoggedInError):
        _echo(error.message, error.recovery_hint)
        return 5

    elif isinstance(error, AccessDeniedError):
        _echo(f"Permission Denied: {error.message}", error.recovery_hint)
        return 6

    elif isinstance(error, NotAuthenticatedError):
        _echo(f"Authentication Failed: {error}", LOGIN_HINT)
        return 5

    elif isinstance(error, PermissionDeniedError):
        _echo(f"Permission Denied: {error}")
        return 6

    elif isinstance(error, (InvalidTransitionError, ValidationError)):
        _echo(f"Data Validation Error: {error}")
        return 3

    elif isinstance(error, ApiConnectionError):
        _echo(
            f"API Error: {error.message}",
            "Check that the server is running and API_BASE_URL is correct",
        )
        return 2

    elif isinstance(error, ApiError):
        if error.status_code is None:
            _echo(f"API Error: {error.message}")
            return 2
        return _handle_http_error(error)

    # Handle click.Abort (user cancellation)
    elif isinstance(error, click.Abort):
        click.echo(format_warning("\nOperation cancelled by user"))
        return 130  # Standard exit code for SIGINT

    else:
        click.echo(format_error(f"Unexpected Error: {type(error).__name__}"))
        click.echo(str(error))

        if debug:
            click.echo("\nFull stack trace:")
            click.echo(traceback.format_exc())
        else:
            click.echo(format_warning("\nRun with --debug flag for full stack trace"))

        return 255


def with_error_handling(debug: bool = False):
    """
    Context manager adding standardized error handling to CLI commands.

    Args:
        debug: Whether to show full stack traces

    Example:
        @click.command()
        def my_command():
            with with_error_handling(get_state().debug):
                ...
    """

    class ErrorHandler:
        def __init__(self, show_debug: bool):
            self.show_debug = show_debug

        def __enter__(self):
            return self

        def __exit__(self, exc_type, exc_val, exc_tb):
            if exc_val is None or isinstance(exc_val, click.exceptions.Exit):
                return False
            exit_code = handle_cli_error(exc_val, self.show_debug)
            sys.exit(exit_code)

    return ErrorHandler(debug)
