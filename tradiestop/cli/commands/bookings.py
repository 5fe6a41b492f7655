"""Booking commands: list, request, status changes and rescheduling."""

from typing import Optional

import click

from tradiestop.cli.error_handlers import DataValidationError, with_error_handling
from tradiestop.cli.utils.context import conclude, get_app, get_state, require_login
from tradiestop.cli.utils.formatters import (
    format_heading,
    format_info,
    format_status,
    format_table,
)
from tradiestop.models.enums import Role
from tradiestop.validators.transition_rules import BookingAction
from tradiestop.views.bookings import BookingTab, booking_rows, page_title, tabs_for

STATUS_ACTIONS = {
    "accept": BookingAction.ACCEPT,
    "decline": BookingAction.DECLINE,
    "complete": BookingAction.COMPLETE,
    "cancel": BookingAction.CANCEL,
}


@click.command(name="bookings")
@click.option(
    "--tab",
    type=click.Choice([tab.value for tab in BookingTab], case_sensitive=False),
    default=None,
    help="Upcoming (default), Completed, Cancelled or All (admins)",
)
def list_bookings(tab: Optional[str]):
    """List your bookings, newest service date first.

    Example:
        tradiestop bookings --tab Completed
    """
    with with_error_handling(get_state().debug):
        app = get_app()
        user = require_login(app)
        selected = BookingTab(tab) if tab else tabs_for(user.role)[0]
        try:
            rows = booking_rows(app.data.data, user, selected)
        except ValueError as e:
            raise DataValidationError(
                str(e),
                recovery_hint="Choose one of: "
                + ", ".join(t.value for t in tabs_for(user.role)),
            ) from e

        click.echo(format_heading(f"{page_title(user.role)}: {selected.value}"))
        if not rows:
            click.echo(format_info("No bookings in this tab."))
            return

        other_party = "Client" if user.role == Role.TRADIE else "Tradie"
        table = []
        for row in rows:
            booking = row.booking
            party = (
                booking.client_name
                if user.role == Role.TRADIE
                else f"{booking.tradie_name} ({booking.tradie_profession})"
            )
            if user.role == Role.ADMIN:
                party = f"{booking.client_name} -> {booking.tradie_name}"
            table.append(
                [
                    booking.id,
                    party,
                    booking.service_date,
                    format_status(booking.status),
                    row.invoice_id or "-",
                    ", ".join(action.value for action in row.actions) or "-",
                ]
            )
        headers = [
            "ID",
            "Parties" if user.role == Role.ADMIN else other_party,
            "Date",
            "Status",
            "Invoice",
            "Actions",
        ]
        click.echo(format_table(headers, table))


@click.command(name="book")
@click.argument("tradie_id")
@click.option("--date", "day", required=True, help="Service date (YYYY-MM-DD)")
@click.option("--time", default="09:00", show_default=True, help="Start time (HH:MM)")
@click.option("--details", prompt="Job details", help="What needs doing")
def book(tradie_id: str, day: str, time: str, details: str):
    """Request a booking with a tradie.

    Example:
        tradiestop book tradie-1 --date 2024-06-15 --time 09:00 --details "Leaking tap"
    """
    with with_error_handling(get_state().debug):
        app = get_app()
        require_login(app, Role.CLIENT)
        booking = app.bookings.request_booking(tradie_id, day, time, details)
        conclude(app, booking is not None)


@click.command(name="booking")
@click.argument("action", type=click.Choice(list(STATUS_ACTIONS)))
@click.argument("booking_id")
def change_booking(action: str, booking_id: str):
    """Accept, decline, complete or cancel a booking.

    Example:
        tradiestop booking accept booking-1
    """
    with with_error_handling(get_state().debug):
        app = get_app()
        require_login(app)
        conclude(app, app.bookings.perform(booking_id, STATUS_ACTIONS[action]))


@click.command(name="reschedule")
@click.argument("booking_id")
@click.option("--date", "day", required=True, help="New service date (YYYY-MM-DD)")
@click.option("--time", default="09:00", show_default=True, help="New start time (HH:MM)")
def reschedule(booking_id: str, day: str, time: str):
    """Move one of your open bookings to another date."""
    with with_error_handling(get_state().debug):
        app = get_app()
        require_login(app, Role.CLIENT)
        conclude(app, app.bookings.reschedule(booking_id, day, time))
