"""Review commands."""

import click

from tradiestop.cli.error_handlers import with_error_handling
from tradiestop.cli.utils.context import conclude, get_app, get_state, require_login
from tradiestop.cli.utils.formatters import format_heading, format_info, format_table
from tradiestop.models.enums import Role
from tradiestop.views.reviews import reviews_view


def _stars(rating: int) -> str:
    return "★" * rating + "☆" * (5 - rating)


@click.command(name="reviews")
def list_reviews():
    """Show reviews about and by you, and jobs still waiting for your review."""
    with with_error_handling(get_state().debug):
        app = get_app()
        user = require_login(app)
        view = reviews_view(app.data.data, user)

        if user.role != Role.ADMIN:
            click.echo(format_heading("Awaiting your review"))
            if view.pending:
                who = "Tradie" if user.role == Role.CLIENT else "Client"
                click.echo(
                    format_table(
                        ["Booking", who, "Date"],
                        [
                            [
                                b.id,
                                b.tradie_name if user.role == Role.CLIENT else b.client_name,
                                b.service_date,
                            ]
                            for b in view.pending
                        ],
                    )
                )
            else:
                click.echo(format_info("Nothing to review."))
            click.echo()

        click.echo(format_heading("Tradie reviews"))
        if view.tradie_reviews:
            click.echo(
                format_table(
                    ["Tradie", "By", "Rating", "Comment", "Date"],
                    [
                        [r.tradie_name, r.reviewer_name, _stars(r.rating), r.comment, r.date]
                        for r in view.tradie_reviews
                    ],
                )
            )
        else:
            click.echo(format_info("No reviews yet."))
        click.echo()

        click.echo(format_heading("Client reviews"))
        if view.client_reviews:
            click.echo(
                format_table(
                    ["Client", "By", "Rating", "Comment", "Date"],
                    [
                        [r.client_name, r.reviewer_name, _stars(r.rating), r.comment, r.date]
                        for r in view.client_reviews
                    ],
                )
            )
        else:
            click.echo(format_info("No reviews yet."))


@click.command(name="review")
@click.argument("booking_id")
@click.option(
    "--rating",
    type=click.IntRange(1, 5),
    prompt="Rating (1-5)",
    help="Stars from 1 to 5",
)
@click.option("--comment", prompt=True, help="What went well or badly")
def write_review(booking_id: str, rating: int, comment: str):
    """Review a completed job (clients rate the tradie, tradies the client).

    Example:
        tradiestop review booking-3 --rating 5 --comment "Quick and tidy"
    """
    with with_error_handling(get_state().debug):
        app = get_app()
        require_login(app, Role.CLIENT, Role.TRADIE)
        booking = app.data.data.find_booking(booking_id)
        if booking is None:
            app.toasts.error(f"Booking {booking_id} not found.")
            conclude(app, False)
            return
        conclude(app, app.reviews.write_review(booking, rating, comment) is not None)
