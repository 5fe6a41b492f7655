"""Invoice drafting, submission and payment.

A draft is prefilled from the completed booking and the tradie's company
details, edited line by line with the same parse rules a browser number field
applies, and turned into the creation payload with display-formatted dates.
"""

import datetime as dt
import logging
import time
from decimal import Decimal
from typing import Callable, Optional, Union

from tradiestop.calculators.currency import (
    format_display_date,
    parse_amount,
    parse_quantity,
)
from tradiestop.calculators.invoice_calculator import (
    InvoiceTotals,
    calculate_invoice_totals,
)
from tradiestop.config.settings import TradieStopConfig, get_config
from tradiestop.controllers.base import ACTION_ERRORS, PageController
from tradiestop.models.enums import BookingStatus, PaymentStatus, Role
from tradiestop.models.invoice import (
    Invoice,
    InvoiceCreationPayload,
    InvoiceDraft,
    LineItem,
)
from tradiestop.validators.input_validators import InputValidator
from tradiestop.validators.transition_rules import (
    PermissionDeniedError,
    validate_payment_transition,
)

logger = logging.getLogger(__name__)

DEFAULT_NOTES = "Thank you for your business!"
DEFAULT_THEME_COLOR = "#334155"

# Colour choices of the invoice editor
THEME_COLORS = {
    "Slate": "#334155",
    "Blue": "#2563eb",
    "Green": "#16a34a",
    "Red": "#dc2626",
    "Indigo": "#4f46e5",
    "Teal": "#0d9488",
    "Rose": "#e11d48",
}

EDITABLE_ITEM_FIELDS = ("description", "quantity", "unit_price")


def generate_invoice_number(now_ms: Optional[int] = None) -> str:
    """``INV-`` followed by the last six digits of a millisecond timestamp.

    Example:
        >>> generate_invoice_number(1718445600123)
        'INV-600123'
    """
    if now_ms is None:
        now_ms = int(time.time() * 1000)
    return f"INV-{str(now_ms)[-6:]}"


class InvoiceController(PageController):
    """
    Create invoices for completed jobs and mark them paid.

    Example:
        >>> draft = controller.start_draft("b1")  # doctest: +SKIP
        >>> controller.update_item(draft, 0, "unit_price", "$120.00")  # doctest: +SKIP
        >>> controller.totals(draft).total  # doctest: +SKIP
        Decimal('132.00')
    """

    def __init__(
        self,
        *args,
        config: Optional[TradieStopConfig] = None,
        validator: Optional[InputValidator] = None,
        today: Optional[Callable[[], dt.date]] = None,
        **kwargs,
    ):
        super().__init__(*args, **kwargs)
        self.config = config or get_config()
        self.validator = validator or InputValidator()
        self._today = today or dt.date.today

    def start_draft(self, booking_id: str) -> Optional[InvoiceDraft]:
        """Prefill a draft for a completed booking of the current tradie.

        Returns None (with a toast) when the booking cannot be invoiced.
        """
        booking = self.data.data.find_booking(booking_id)
        if booking is None:
            self.toasts.error(f"Booking {booking_id} not found.")
            return None

        user = self.user
        if user is None or user.role != Role.TRADIE or booking.tradie_id != user.id:
            self.toasts.error("Only the tradie who did the job can invoice it.")
            return None
        if booking.status != BookingStatus.COMPLETED:
            self.toasts.error("Only completed jobs can be invoiced.")
            return None
        if self.data.data.invoice_for_booking(booking_id) is not None:
            self.toasts.info("An invoice already exists for this booking.")
            return None

        tradie = self.data.data.find_tradie(user.id)
        issue_date = self._today()
        due_days = self.config.invoice_due_days
        return InvoiceDraft(
            booking_id=booking.id,
            items=[LineItem(description=booking.details, quantity=1, unit_price=0)],
            notes=DEFAULT_NOTES,
            client_name=booking.client_name,
            invoice_number=generate_invoice_number(),
            issue_date=issue_date,
            due_date=issue_date + dt.timedelta(days=due_days),
            tax_rate=self.config.default_tax_rate,
            theme_color=DEFAULT_THEME_COLOR,
            footer_notes=f"Payment is due within {due_days} days.",
            logo_url=tradie.company_details.logo_url if tradie else "",
        )

    def add_item(self, draft: InvoiceDraft) -> None:
        draft.items = draft.items + [LineItem(description="", quantity=1, unit_price=0)]

    def remove_item(self, draft: InvoiceDraft, index: int) -> None:
        if not 0 <= index < len(draft.items):
            raise IndexError(f"No line item at position {index + 1}")
        draft.items = [item for i, item in enumerate(draft.items) if i != index]

    def update_item(
        self,
        draft: InvoiceDraft,
        index: int,
        field: str,
        value: Union[str, int, float, Decimal],
    ) -> None:
        """Edit one field of a line item.

        Quantities and prices accept formatted input (``"$1,200.50"``);
        anything without a leading number becomes 0.
        """
        if field not in EDITABLE_ITEM_FIELDS:
            raise ValueError(f"Unknown line item field {field!r}")
        if not 0 <= index < len(draft.items):
            raise IndexError(f"No line item at position {index + 1}")

        if field == "description":
            parsed = str(value)
        elif field == "quantity":
            parsed = parse_quantity(value)
        else:
            parsed = parse_amount(value)

        items = list(draft.items)
        items[index] = items[index].model_copy(update={field: parsed})
        draft.items = items

    def set_tax_rate(self, draft: InvoiceDraft, value: Union[str, Decimal]) -> None:
        draft.tax_rate = parse_amount(value)

    def totals(self, draft: InvoiceDraft) -> InvoiceTotals:
        return calculate_invoice_totals(draft.items, draft.tax_rate)

    def build_payload(self, draft: InvoiceDraft) -> InvoiceCreationPayload:
        return InvoiceCreationPayload(
            booking_id=draft.booking_id,
            items=draft.items,
            notes=draft.notes,
            client_name=draft.client_name,
            client_address=draft.client_address,
            invoice_number=draft.invoice_number,
            issue_date=format_display_date(draft.issue_date),
            due_date=format_display_date(draft.due_date),
            tax_rate=draft.tax_rate,
            theme_color=draft.theme_color,
            footer_notes=draft.footer_notes,
            logo_url=draft.logo_url,
        )

    def submit(self, draft: InvoiceDraft) -> Optional[Invoice]:
        """Validate the draft and create the invoice.

        Returns:
            The created invoice, or None after toasting the problem
        """
        if not self._report_invalid(self.validator.validate_invoice_draft(draft)):
            return None
        try:
            invoice = self.data.create_invoice(self.build_payload(draft))
        except ACTION_ERRORS as e:
            self._report_failure("Failed to create invoice.", e)
            return None
        logger.info(
            f"Created invoice {invoice.invoice_number} for booking {draft.booking_id}"
        )
        self.toasts.success("Invoice created successfully!")
        return invoice

    def mark_as_paid(self, invoice_id: str) -> bool:
        """Record payment of an invoice (issuing tradie or admin only)."""
        invoice = self.data.data.find_invoice(invoice_id)
        if invoice is None:
            self.toasts.error(f"Invoice {invoice_id} not found.")
            return False
        try:
            user = self.auth.require_user()
            if user.role != Role.ADMIN and not (
                user.role == Role.TRADIE and invoice.tradie.id == user.id
            ):
                raise PermissionDeniedError(
                    "Only the issuing tradie can mark an invoice as paid"
                )
            validate_payment_transition(user.role, invoice.status, PaymentStatus.PAID)
            self.data.mark_invoice_as_paid(invoice_id)
        except ACTION_ERRORS as e:
            self._report_failure("Failed to mark invoice as paid.", e)
            return False
        self.toasts.success(f"Invoice {invoice.invoice_number} marked as paid.")
        return True
