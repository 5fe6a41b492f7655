"""Admin user management commands."""

from typing import Optional

import click

from tradiestop.cli.error_handlers import with_error_handling
from tradiestop.cli.utils.context import conclude, get_app, get_state, require_login
from tradiestop.cli.utils.formatters import format_info, format_table
from tradiestop.models.enums import TRADIE_PROFESSIONS, Role
from tradiestop.models.user import SignupForm
from tradiestop.views.users import search_users


@click.command(name="users")
@click.option("--search", default=None, help="Filter by name or user id")
def list_users(search: Optional[str]):
    """List marketplace accounts (admins).

    Example:
        tradiestop users --search ali
    """
    with with_error_handling(get_state().debug):
        app = get_app()
        require_login(app, Role.ADMIN)
        users = search_users(app.data.data, search)
        if not users:
            click.echo(format_info("No users match."))
            return
        click.echo(
            format_table(
                ["ID", "Name", "Role", "Joined", "Suspended"],
                [
                    [u.id, u.name, u.role.value, u.joined_date, "yes" if u.suspended else ""]
                    for u in users
                ],
            )
        )


@click.command(name="user-add")
@click.option("--user-id", prompt="User ID")
@click.option("--name", prompt="Full name")
@click.option(
    "--role",
    type=click.Choice([role.value for role in Role], case_sensitive=False),
    default=Role.CLIENT.value,
    show_default=True,
)
@click.option(
    "--profession",
    type=click.Choice(TRADIE_PROFESSIONS, case_sensitive=False),
    default=None,
    help="Trade of a tradie account",
)
@click.option("--password", prompt=True, hide_input=True)
def add_user(
    user_id: str, name: str, role: str, profession: Optional[str], password: str
):
    """Create an account on someone's behalf (admins)."""
    with with_error_handling(get_state().debug):
        app = get_app()
        require_login(app, Role.ADMIN)
        form = SignupForm(
            user_id=user_id,
            name=name,
            password=password,
            role=Role(role),
            profession=profession,
        )
        conclude(app, app.users.add_user(form) is not None)


@click.command(name="user-delete")
@click.argument("user_id")
@click.option("--yes", is_flag=True, help="Delete without asking for confirmation")
def delete_user(user_id: str, yes: bool):
    """Delete an account (admins)."""
    with with_error_handling(get_state().debug):
        app = get_app()
        require_login(app, Role.ADMIN)
        if not yes:
            click.confirm(f"Delete user {user_id}?", abort=True)
        conclude(app, app.users.delete_user(user_id))
