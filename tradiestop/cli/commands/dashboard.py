"""Dashboard and messages commands."""

from typing import Optional

import click

from tradiestop.cli.error_handlers import with_error_handling
from tradiestop.cli.utils.context import echo_toasts, get_app, get_state, require_login
from tradiestop.cli.utils.formatters import (
    format_chart,
    format_heading,
    format_info,
    format_status,
    format_table,
)
from tradiestop.models.enums import Role
from tradiestop.views.dashboards import admin_dashboard, client_dashboard, tradie_dashboard
from tradiestop.views.messages import contacts_for
from tradiestop.views.navigation import header_items


def _bookings_table(bookings, counterpart: str) -> str:
    rows = []
    for b in bookings:
        party = b.client_name if counterpart == "Client" else b.tradie_name
        rows.append([b.id, party, b.service_date, format_status(b.status)])
    return format_table(["ID", counterpart, "Date", "Status"], rows)


def _show_client(app, user, search: Optional[str]) -> None:
    board = client_dashboard(app.data.data, user, query=search)
    click.echo(format_heading("My bookings"))
    if board.bookings:
        click.echo(_bookings_table(board.bookings, "Tradie"))
    else:
        click.echo(format_info("No bookings yet."))

    click.echo(format_heading(f"Tradies matching '{search}'" if search else "Find a tradie"))
    if board.tradies:
        click.echo(
            format_table(
                ["ID", "Name", "Profession", "Rating", "Reviews", "Availability"],
                [
                    [
                        t.id,
                        t.name,
                        t.profession,
                        f"{t.rating:.1f}",
                        str(t.reviews_count),
                        t.availability or "-",
                    ]
                    for t in board.tradies
                ],
            )
        )
    else:
        click.echo(format_info("No tradies found."))

    click.echo(format_heading("Messages"))
    for message in board.messages:
        click.echo(f"  {message.sender_name}: {message.snippet} ({message.timestamp})")
    if not board.messages:
        click.echo(format_info("No messages."))

    click.echo(format_heading("Monthly spending"))
    click.echo(format_chart(board.spending))


def _show_tradie(app, user) -> None:
    board = tradie_dashboard(app.data.data, user)
    click.echo(
        format_table(
            ["New requests", "Upcoming", "Completed", "Rating"],
            [
                [
                    str(len(board.new_requests)),
                    str(len(board.upcoming)),
                    str(board.completed_count),
                    f"{board.rating:.1f} ({board.reviews_count} reviews)",
                ]
            ],
        )
    )
    click.echo(format_heading("New job requests"))
    if board.new_requests:
        click.echo(_bookings_table(board.new_requests, "Client"))
    else:
        click.echo(format_info("No new requests."))

    click.echo(format_heading("Upcoming jobs"))
    if board.upcoming:
        click.echo(_bookings_table(board.upcoming, "Client"))
    else:
        click.echo(format_info("Nothing scheduled."))

    click.echo(format_heading("Latest reviews"))
    for review in board.latest_reviews:
        click.echo(f"  {review.rating}/5 {review.reviewer_name}: {review.comment}")
    if not board.latest_reviews:
        click.echo(format_info("No reviews yet."))

    click.echo(format_heading("Monthly earnings"))
    click.echo(format_chart(board.earnings))


def _show_admin(app) -> None:
    board = admin_dashboard(app.data.data)
    click.echo(
        format_table(
            ["Clients", "Tradies", "Bookings", "Open tickets"],
            [
                [
                    str(board.client_count),
                    str(board.tradie_count),
                    str(board.booking_count),
                    str(board.open_ticket_count),
                ]
            ],
        )
    )
    click.echo(format_heading("Latest support tickets"))
    if board.latest_tickets:
        click.echo(
            format_table(
                ["ID", "From", "Subject", "Status"],
                [
                    [t.id, t.user_name, t.subject, format_status(t.status)]
                    for t in board.latest_tickets
                ],
            )
        )
    else:
        click.echo(format_info("No tickets."))
    click.echo(format_heading("Bookings per month"))
    click.echo(format_chart(board.bookings_chart))
    click.echo(format_heading("User growth"))
    click.echo(format_chart(board.user_growth))


@click.command(name="dashboard")
@click.option("--search", default=None, help="Search tradies by name or profession (clients)")
def dashboard(search: Optional[str]):
    """Show the dashboard of your role.

    Example:
        tradiestop dashboard --search plumber
    """
    with with_error_handling(get_state().debug):
        app = get_app()
        user = require_login(app)
        click.echo(format_heading(f"Welcome, {user.name}"))
        click.echo(format_info(" | ".join(header_items(user.role))))
        unread = app.notifications.unread_count
        if unread:
            click.echo(format_info(f"{unread} unread notification(s)"))

        if user.role == Role.CLIENT:
            _show_client(app, user, search)
        elif user.role == Role.TRADIE:
            _show_tradie(app, user)
        else:
            _show_admin(app)
        echo_toasts(app)


@click.command(name="messages")
def messages():
    """List the people you can message."""
    with with_error_handling(get_state().debug):
        app = get_app()
        user = require_login(app)
        contacts = contacts_for(app.data.data, user)
        if not contacts:
            click.echo(format_info("No contacts yet."))
            return
        click.echo(
            format_table(
                ["ID", "Name", ""],
                [[c.id, c.name, c.snippet] for c in contacts],
            )
        )
