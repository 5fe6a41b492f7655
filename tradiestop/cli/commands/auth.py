"""Session commands: login, logout, whoami and signup."""

from typing import Optional

import click

from tradiestop.cli.error_handlers import with_error_handling
from tradiestop.cli.utils.context import conclude, get_app, get_state, require_login
from tradiestop.cli.utils.formatters import format_info, format_table
from tradiestop.models.enums import TRADIE_PROFESSIONS, Role
from tradiestop.models.user import SignupForm
from tradiestop.views.navigation import sidebar_items

ROLE_CHOICES = [Role.CLIENT.value, Role.TRADIE.value]


@click.command(name="login")
@click.option("--user-id", prompt="User ID", help="Your login identifier")
@click.option("--password", prompt=True, hide_input=True, help="Your password")
def login(user_id: str, password: str):
    """Log in and remember the session for later commands.

    Example:
        tradiestop login --user-id client-1
    """
    with with_error_handling(get_state().debug):
        app = get_app(load_data=False)
        conclude(app, app.auth_controller.login(user_id, password))


@click.command(name="logout")
def logout():
    """Forget the stored session."""
    with with_error_handling(get_state().debug):
        app = get_app(load_data=False)
        app.auth_controller.logout()
        conclude(app, True)


@click.command(name="whoami")
def whoami():
    """Show the logged-in user and the pages available to them."""
    with with_error_handling(get_state().debug):
        app = get_app(load_data=False)
        user = require_login(app)
        click.echo(
            format_table(
                ["Field", "Value"],
                [
                    ["User ID", user.id],
                    ["Name", user.name],
                    ["Role", user.role.value],
                    ["Joined", user.joined_date or "-"],
                ],
            )
        )
        click.echo(format_info("Pages: " + ", ".join(sidebar_items(user.role))))


@click.command(name="signup")
@click.option("--user-id", prompt="User ID", help="Login identifier to register")
@click.option("--name", prompt="Full name", help="Display name")
@click.option(
    "--role",
    type=click.Choice(ROLE_CHOICES, case_sensitive=False),
    default=Role.CLIENT.value,
    show_default=True,
    help="Account type",
)
@click.option(
    "--profession",
    type=click.Choice(TRADIE_PROFESSIONS, case_sensitive=False),
    default=None,
    help="Trade (tradies only)",
)
@click.option("--password", prompt=True, hide_input=True)
@click.option("--confirm-password", prompt="Confirm password", hide_input=True)
def signup(
    user_id: str,
    name: str,
    role: str,
    profession: Optional[str],
    password: str,
    confirm_password: str,
):
    """Create an account and log in with it.

    Example:
        tradiestop signup --user-id bob --name "Bob Builder" \\
            --role Tradie --profession Builder
    """
    with with_error_handling(get_state().debug):
        app = get_app(load_data=False)
        form = SignupForm(
            user_id=user_id,
            name=name,
            password=password,
            confirm_password=confirm_password,
            role=Role(role),
            profession=profession,
        )
        conclude(app, app.auth_controller.signup(form))
