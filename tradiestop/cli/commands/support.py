"""Support ticket commands."""

import click

from tradiestop.cli.error_handlers import with_error_handling
from tradiestop.cli.utils.context import conclude, get_app, get_state, require_login
from tradiestop.cli.utils.formatters import format_info, format_status, format_table
from tradiestop.models.enums import Role, SupportTicketStatus


@click.command(name="tickets")
@click.option("--open-only", is_flag=True, help="Hide closed tickets")
def list_tickets(open_only: bool):
    """List support tickets (all of them for admins, your own otherwise)."""
    with with_error_handling(get_state().debug):
        app = get_app()
        user = require_login(app)
        tickets = app.data.data.support_tickets
        if user.role != Role.ADMIN:
            tickets = [t for t in tickets if t.user_id == user.id]
        if open_only:
            tickets = [t for t in tickets if t.status == SupportTicketStatus.OPEN]

        if not tickets:
            click.echo(format_info("No support tickets."))
            return
        click.echo(
            format_table(
                ["ID", "From", "Role", "Subject", "Date", "Status"],
                [
                    [
                        t.id,
                        t.user_name,
                        t.user_role.value,
                        t.subject,
                        t.date,
                        format_status(t.status),
                    ]
                    for t in tickets
                ],
            )
        )


@click.command(name="ticket-open")
@click.option("--subject", prompt=True, help="Short summary of the problem")
@click.option("--description", prompt=True, help="What happened")
def open_ticket(subject: str, description: str):
    """Ask the TradieStop team for help."""
    with with_error_handling(get_state().debug):
        app = get_app()
        require_login(app)
        conclude(app, app.support.open_ticket(subject, description) is not None)


@click.command(name="ticket-close")
@click.argument("ticket_id")
def close_ticket(ticket_id: str):
    """Mark a support ticket as closed (admins)."""
    with with_error_handling(get_state().debug):
        app = get_app()
        require_login(app, Role.ADMIN)
        conclude(app, app.support.close_ticket(ticket_id))
