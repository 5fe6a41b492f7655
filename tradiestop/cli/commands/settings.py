"""Account settings commands: profile and company details."""

from typing import Optional

import click

from tradiestop.cli.error_handlers import with_error_handling
from tradiestop.cli.utils.context import conclude, get_app, get_state, require_login
from tradiestop.cli.utils.formatters import format_info, format_table
from tradiestop.models.enums import Role

COMPANY_FIELDS = ("name", "address", "phone", "email", "tax_id", "logo_url")


@click.command(name="profile")
@click.option("--name", default=None, help="New display name")
@click.option("--image-url", default=None, help="New avatar URL")
def profile(name: Optional[str], image_url: Optional[str]):
    """Show your profile, or update it when options are given.

    Example:
        tradiestop profile --name "Alice Smith"
    """
    with with_error_handling(get_state().debug):
        app = get_app()
        user = require_login(app)
        if name is None and image_url is None:
            click.echo(
                format_table(
                    ["Field", "Value"],
                    [
                        ["User ID", user.id],
                        ["Name", user.name],
                        ["Role", user.role.value],
                        ["Avatar", user.image_url or "-"],
                    ],
                )
            )
            return
        conclude(app, app.settings.save_profile(name=name, image_url=image_url))


@click.command(name="company")
@click.option("--name", default=None, help="Company name")
@click.option("--address", default=None)
@click.option("--phone", default=None)
@click.option("--email", default=None)
@click.option("--tax-id", default=None, help="Tax number printed on invoices")
@click.option("--logo-url", default=None)
def company(**updates: Optional[str]):
    """Show or update the company details printed on your invoices (tradies)."""
    with with_error_handling(get_state().debug):
        app = get_app()
        require_login(app, Role.TRADIE)
        details = app.settings.company_details()
        if details is None:
            app.toasts.error("No tradie profile found for your account.")
            conclude(app, False)
            return

        changes = {key: value for key, value in updates.items() if value is not None}
        if not changes:
            click.echo(
                format_table(
                    ["Field", "Value"],
                    [
                        [field.replace("_", " ").title(), getattr(details, field) or "-"]
                        for field in COMPANY_FIELDS
                    ],
                )
            )
            return

        click.echo(format_info(f"Updating {', '.join(sorted(changes))}"))
        conclude(
            app, app.settings.save_company_details(details.model_copy(update=changes))
        )
