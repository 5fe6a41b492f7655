"""Invoice commands: create, preview, mark paid and list payments."""

import datetime as dt
from typing import Optional, Tuple

import click

from tradiestop.calculators.currency import format_currency
from tradiestop.cli.error_handlers import DataValidationError, with_error_handling
from tradiestop.cli.utils.context import (
    conclude,
    echo_toasts,
    get_app,
    get_state,
    require_login,
)
from tradiestop.cli.utils.formatters import (
    format_heading,
    format_info,
    format_status,
    format_table,
)
from tradiestop.controllers.invoice_controller import THEME_COLORS
from tradiestop.models.enums import Role
from tradiestop.views.payments import payments_view
from tradiestop.writers.invoice_preview_writer import render_invoice_preview


def parse_item_option(value: str) -> Tuple[str, str, str]:
    """Split ``DESCRIPTION:QTY:PRICE``; the description may contain colons.

    Raises:
        DataValidationError: If quantity or price is missing
    """
    parts = value.rsplit(":", 2)
    if len(parts) != 3:
        raise DataValidationError(
            f"Invalid line item {value!r}",
            recovery_hint="Use --item 'Description:quantity:unit price'",
        )
    description, quantity, price = parts
    return description.strip(), quantity.strip(), price.strip()


@click.command(name="invoice-create")
@click.argument("booking_id")
@click.option(
    "--item",
    "items",
    multiple=True,
    help="Line item as 'Description:quantity:unit price' (repeatable)",
)
@click.option("--notes", default=None, help="Notes printed under the items")
@click.option("--tax-rate", default=None, help="Tax rate in percent")
@click.option("--due-date", default=None, help="Due date (YYYY-MM-DD)")
@click.option("--client-address", default=None, help="Billing address of the client")
@click.option(
    "--theme",
    type=click.Choice(list(THEME_COLORS), case_sensitive=False),
    default=None,
    help="Accent colour of the invoice",
)
@click.option("--footer", default=None, help="Footer notes, e.g. payment terms")
@click.option("--yes", is_flag=True, help="Create without asking for confirmation")
def create_invoice(
    booking_id: str,
    items: Tuple[str, ...],
    notes: Optional[str],
    tax_rate: Optional[str],
    due_date: Optional[str],
    client_address: Optional[str],
    theme: Optional[str],
    footer: Optional[str],
    yes: bool,
):
    """Invoice a completed job.

    Without --item the job description is billed as one item at $0.00.

    Example:
        tradiestop invoice-create booking-3 --item "Labour:2:85" \\
            --item "Parts:1:$42.50" --client-address "1 Main St"
    """
    with with_error_handling(get_state().debug):
        app = get_app()
        require_login(app, Role.TRADIE)
        controller = app.invoices

        draft = controller.start_draft(booking_id)
        if draft is None:
            conclude(app, False)
            return

        for index, raw in enumerate(items):
            description, quantity, price = parse_item_option(raw)
            if index > 0:
                controller.add_item(draft)
            controller.update_item(draft, index, "description", description)
            controller.update_item(draft, index, "quantity", quantity)
            controller.update_item(draft, index, "unit_price", price)

        if tax_rate is not None:
            controller.set_tax_rate(draft, tax_rate)
        if notes is not None:
            draft.notes = notes
        if client_address is not None:
            draft.client_address = client_address
        if footer is not None:
            draft.footer_notes = footer
        if theme is not None:
            draft.theme_color = THEME_COLORS[theme]
        if due_date is not None:
            try:
                draft.due_date = dt.date.fromisoformat(due_date)
            except ValueError as e:
                raise DataValidationError(
                    f"Invalid due date {due_date!r}", recovery_hint="Use YYYY-MM-DD"
                ) from e

        totals = controller.totals(draft)
        click.echo(format_heading(f"Invoice {draft.invoice_number} for {draft.client_name}"))
        click.echo(
            format_table(
                ["Description", "Qty", "Unit Price"],
                [
                    [item.description, f"{item.quantity.normalize():f}", format_currency(item.unit_price)]
                    for item in draft.items
                ],
            )
        )
        click.echo(
            f"Subtotal {format_currency(totals.subtotal)}  "
            f"Tax {format_currency(totals.tax)}  "
            f"Total {format_currency(totals.total)}"
        )
        if not yes and not click.confirm("Create this invoice?", default=True):
            raise click.Abort()

        invoice = controller.submit(draft)
        conclude(app, invoice is not None)


@click.command(name="invoice-preview")
@click.argument("invoice_id")
@click.option("--width", default=72, show_default=True, help="Line width")
def preview_invoice(invoice_id: str, width: int):
    """Print an invoice as a text document."""
    with with_error_handling(get_state().debug):
        app = get_app()
        require_login(app)
        invoice = app.data.data.find_invoice(invoice_id)
        if invoice is None:
            app.toasts.error(f"Invoice {invoice_id} not found.")
            conclude(app, False)
            return
        click.echo(render_invoice_preview(invoice, width=width))


@click.command(name="invoice-pay")
@click.argument("invoice_id")
def pay_invoice(invoice_id: str):
    """Mark an invoice as paid."""
    with with_error_handling(get_state().debug):
        app = get_app()
        require_login(app, Role.TRADIE, Role.ADMIN)
        conclude(app, app.invoices.mark_as_paid(invoice_id))


@click.command(name="payments")
def payments():
    """List your invoices; tradies also see their earnings summary."""
    with with_error_handling(get_state().debug):
        app = get_app()
        user = require_login(app)
        view = payments_view(app.data.data, user)
        echo_toasts(app)

        if view.summary is not None:
            click.echo(format_heading("Earnings"))
            click.echo(
                format_table(
                    ["Total Earnings", "Pending", "Overdue", "Invoices"],
                    [
                        [
                            format_currency(view.summary.total_earnings),
                            format_currency(view.summary.pending_amount),
                            format_currency(view.summary.overdue_amount),
                            str(view.summary.invoice_count),
                        ]
                    ],
                )
            )
            click.echo()

        click.echo(format_heading("Invoices"))
        if not view.invoices:
            click.echo(format_info("No invoices yet."))
            return
        counterpart = "Client" if user.role == Role.TRADIE else "Tradie"
        rows = []
        for invoice in view.invoices:
            party = invoice.client.name if user.role == Role.TRADIE else invoice.tradie.name
            rows.append(
                [
                    invoice.id,
                    invoice.invoice_number,
                    party,
                    invoice.issue_date,
                    invoice.due_date,
                    format_currency(invoice.total),
                    format_status(invoice.status),
                ]
            )
        click.echo(
            format_table(
                ["ID", "Number", counterpart, "Issued", "Due", "Total", "Status"], rows
            )
        )
