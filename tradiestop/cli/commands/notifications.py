"""Notification commands."""

import time

import click

from tradiestop.cli.error_handlers import with_error_handling
from tradiestop.cli.utils.context import echo_toasts, get_app, get_state, require_login
from tradiestop.cli.utils.formatters import format_info, format_table, format_warning
from tradiestop.models.notification import Notification
from tradiestop.views.navigation import resolve_page


def _row(notification: Notification) -> list:
    marker = "" if notification.read else click.style("●", fg="blue")
    return [
        marker,
        notification.message,
        resolve_page(notification.link),
        notification.timestamp,
    ]


@click.command(name="notifications")
@click.option("--mark-read", is_flag=True, help="Mark all notifications as read")
@click.option(
    "--watch",
    is_flag=True,
    help="Keep polling and print new notifications until interrupted",
)
def notifications(mark_read: bool, watch: bool):
    """Show your notifications.

    Example:
        tradiestop notifications --mark-read
    """
    with with_error_handling(get_state().debug):
        app = get_app(load_data=False)
        require_login(app)
        center = app.notifications
        center.fetch()

        items = center.notifications
        if items:
            click.echo(format_table(["", "Message", "Opens", "When"], [_row(n) for n in items]))
        else:
            click.echo(format_info("No notifications."))
        click.echo(format_info(f"{center.unread_count} unread"))

        if mark_read and center.unread_count:
            center.mark_all_as_read()
            if center.unread_count:
                click.echo(format_warning("Could not mark notifications as read."))
            else:
                click.echo(format_info("All notifications marked as read."))

        if watch:
            _watch(app)
        echo_toasts(app)


def _watch(app) -> None:
    center = app.notifications
    seen = {n.id for n in center.notifications}
    click.echo(format_info(f"Watching every {center.poll_interval:g}s, Ctrl+C to stop"))
    center.start_polling()
    try:
        while True:
            time.sleep(center.poll_interval)
            for notification in center.notifications:
                if notification.id not in seen:
                    seen.add(notification.id)
                    click.echo(f"{notification.timestamp}  {notification.message}")
    except KeyboardInterrupt:
        click.echo()
    finally:
        center.stop_polling()
