"""Unit tests for CLI error handling and exit codes."""

import click
import pytest
from pydantic import ValidationError

from tradiestop.cli.error_handlers import (
    AccessDeniedError,
    ActionFailedError,
    APIError,
    ConfigurationError,
    DataValidationError,
    NotLoggedInError,
    handle_cli_error,
    with_error_handling,
)
from tradiestop.models import Role, User
from tradiestop.models.enums import BookingStatus
from tradiestop.services.exceptions import (
    ApiConnectionError,
    ApiError,
    NotAuthenticatedError,
)
from tradiestop.validators.transition_rules import (
    InvalidTransitionError,
    PermissionDeniedError,
)


def _validation_error() -> ValidationError:
    try:
        User(id="x", role="Plumber", name="X")
    except ValidationError as e:
        return e
    raise AssertionError("User accepted an unknown role")


class TestHandleCliError:
    """Test suite for the exit code of each error type."""

    @pytest.mark.parametrize(
        "error,code",
        [
            (ConfigurationError("bad"), 1),
            (APIError("down"), 2),
            (DataValidationError("bad input"), 3),
            (ActionFailedError(), 4),
            (NotLoggedInError(), 5),
            (AccessDeniedError("no"), 6),
            (NotAuthenticatedError("gone"), 5),
            (PermissionDeniedError("not yours"), 6),
            (InvalidTransitionError(Role.CLIENT, BookingStatus.COMPLETED, BookingStatus.CANCELLED), 3),
            (ApiConnectionError("refused"), 2),
            (ApiError("no status"), 2),
            (ApiError("expired", 401), 5),
            (ApiError("forbidden", 403), 6),
            (ApiError("missing", 404), 7),
            (ApiError("slow down", 429), 8),
            (ApiError("boom", 500), 9),
            (click.Abort(), 130),
            (RuntimeError("surprise"), 255),
        ],
    )
    def test_exit_codes(self, error, code, capsys):
        assert handle_cli_error(error) == code

    def test_pydantic_validation_error(self, capsys):
        assert handle_cli_error(_validation_error()) == 3
        assert "Data Validation Error" in capsys.readouterr().out

    def test_message_and_hint(self, capsys):
        handle_cli_error(NotLoggedInError())

        out = capsys.readouterr().out
        assert "You are not logged in" in out
        assert "Hint: Run 'tradiestop login' and try again" in out

    def test_http_error_details(self, capsys):
        handle_cli_error(ApiError("Database unavailable", 503))

        out = capsys.readouterr().out
        assert "API Error (HTTP 503)" in out
        assert "Details: Database unavailable" in out

    def test_unexpected_error_suggests_debug(self, capsys):
        handle_cli_error(RuntimeError("surprise"))
        assert "Run with --debug flag" in capsys.readouterr().out

    def test_unexpected_error_trace_in_debug(self, capsys):
        try:
            raise RuntimeError("surprise")
        except RuntimeError as e:
            handle_cli_error(e, debug=True)

        out = capsys.readouterr().out
        assert "Full stack trace" in out
        assert "RuntimeError: surprise" in out


class TestWithErrorHandling:
    """Test suite for the error handling context manager."""

    def test_passes_through_without_error(self):
        with with_error_handling():
            value = 1
        assert value == 1

    def test_exits_with_code(self, capsys):
        with pytest.raises(SystemExit) as excinfo:
            with with_error_handling():
                raise AccessDeniedError("Admins only")

        assert excinfo.value.code == 6
        assert "Permission Denied: Admins only" in capsys.readouterr().out

    def test_click_exit_is_not_intercepted(self):
        with pytest.raises(click.exceptions.Exit):
            with with_error_handling():
                raise click.exceptions.Exit(0)
