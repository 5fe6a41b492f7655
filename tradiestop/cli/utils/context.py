"""Access to the MarketplaceApp from inside CLI commands."""

from typing import Optional

import click
from pydantic import ValidationError

from tradiestop.app import MarketplaceApp
from tradiestop.cli.error_handlers import (
    AccessDeniedError,
    ActionFailedError,
    ConfigurationError,
    NotLoggedInError,
)
from tradiestop.cli.utils.formatters import format_toast, format_warning
from tradiestop.models.enums import Role
from tradiestop.models.user import Session


class CliState:
    """Object stored on the click context by the root group.

    The app is built on first use so that ``--help`` works without a
    valid configuration.
    """

    def __init__(self, debug: bool = False, app: Optional[MarketplaceApp] = None):
        self.debug = debug
        self._app = app

    @property
    def app(self) -> MarketplaceApp:
        if self._app is None:
            try:
                self._app = MarketplaceApp()
            except ValidationError as e:
                raise ConfigurationError(
                    f"Invalid settings: {e.error_count()} problem(s)\n{e}",
                    recovery_hint="Check the TradieStop variables in your .env file",
                ) from e
        return self._app


def get_state() -> CliState:
    return click.get_current_context().ensure_object(CliState)


def get_app(load_data: bool = True) -> MarketplaceApp:
    """The app of this invocation, with fresh data when logged in."""
    app = get_state().app
    if load_data:
        app.refresh()
        if app.data.error:
            click.echo(format_warning(f"Data may be out of date: {app.data.error}"))
    return app


def require_login(app: MarketplaceApp, *roles: Role) -> Session:
    """Current user, optionally restricted to some roles."""
    user = app.auth.current_user
    if user is None:
        raise NotLoggedInError()
    if roles and user.role not in roles:
        allowed = " or ".join(role.value for role in roles)
        raise AccessDeniedError(
            f"This command is only available to {allowed} accounts",
            recovery_hint=f"You are logged in as {user.id} ({user.role.value})",
        )
    return user


def echo_toasts(app: MarketplaceApp) -> None:
    for toast in app.toasts.drain():
        click.echo(format_toast(toast))


def conclude(app: MarketplaceApp, succeeded: bool) -> None:
    """Print the toasts of an action; a failed action ends with exit code 4."""
    echo_toasts(app)
    if not succeeded:
        raise ActionFailedError()
