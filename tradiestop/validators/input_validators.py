"""Validators for the forms users fill in.

Each ``validate_*`` method returns a ValidationReport instead of raising, so
the caller can show every problem at once or toast the first one.
"""

import re
from decimal import Decimal
from typing import Iterable, Optional

from tradiestop.calculators.invoice_calculator import calculate_invoice_totals
from tradiestop.models.booking import Booking
from tradiestop.models.enums import TRADIE_PROFESSIONS, BookingStatus, Role
from tradiestop.models.invoice import InvoiceDraft
from tradiestop.models.user import SignupForm, User
from tradiestop.validators.validation_report import ValidationReport

HEX_COLOUR = re.compile(r"^#[0-9a-fA-F]{6}$")
MAX_LINE_AMOUNT = Decimal("1000000000")


class InputValidator:
    """Validation of user input before it is sent to the API.

    Example:
        >>> validator = InputValidator()
        >>> report = validator.validate_support_ticket("", "Printer on fire")
        >>> report.first_error_message()
        'Please enter a subject.'
    """

    def validate_invoice_draft(self, draft: InvoiceDraft) -> ValidationReport:
        """Validate an invoice draft before it is created.

        Checks:
        - at least one line item
        - every item has a description, quantity > 0 and unit price >= 0
    - no line amount exceeds MAX_LINE_AMOUNT
        - tax rate between 0 and 100
        - due date not before the issue date
        - invoice number present and theme colour in ``#rrggbb`` form

        A zero total is reported as a warning.
        """
        report = ValidationReport()
        context = {"booking": draft.booking_id}

        if not draft.items:
            report.add_error("items", "Add at least one line item.", [], context)

        for index, item in enumerate(draft.items):
            prefix = f"items[{index}]."
            if not item.description.strip():
                report.add_error(
                    f"{prefix}description",
                    f"Item {index + 1} needs a description.",
                    item.description,
                    context,
                )
            if item.quantity <= 0:
                report.add_error(
                    f"{prefix}quantity",
                    f"Item {index + 1} quantity must be greater than zero.",
                    item.quantity,
                    context,
                )
            if item.unit_price < 0:
                report.add_error(
                    f"{prefix}unit_price",
                    f"Item {index + 1} price cannot be negative.",
                    item.unit_price,
                    context,
                )
            if abs(item.quantity * item.unit_price) > MAX_LINE_AMOUNT:
                report.add_error(
                    f"{prefix}unit_price",
                    f"Item {index + 1} amount is too large.",
                    item.unit_price,
                    context,
                )

        if not Decimal("0") <= draft.tax_rate <= Decimal("100"):
            report.add_error(
                "tax_rate", "Tax rate must be between 0 and 100.", draft.tax_rate
            )

        if draft.due_date < draft.issue_date:
            report.add_error(
                "due_date",
                f"Due date ({draft.due_date}) cannot be before the issue date "
                f"({draft.issue_date}).",
                draft.due_date,
            )

        if not draft.invoice_number.strip():
            report.add_error(
                "invoice_number", "Invoice number is required.", draft.invoice_number
            )

        if not HEX_COLOUR.match(draft.theme_color):
            report.add_error(
                "theme_color",
                "Theme colour must look like #334155.",
                draft.theme_color,
            )

        if report.is_valid():
            totals = calculate_invoice_totals(draft.items, draft.tax_rate)
            if totals.total == 0:
                report.add_warning("total", "Invoice total is zero.", totals.total)

        return report

    def validate_review(
        self,
        booking: Booking,
        reviewer: User,
        rating: int,
        comment: str,
        reviewed_booking_ids: Iterable[str] = (),
    ) -> ValidationReport:
        """Validate a review in either direction.

        A client reviews the tradie of one of their bookings, a tradie reviews
        the client. The booking must be completed and not yet reviewed in
        that direction.

        Args:
            booking: The booking being reviewed
            reviewer: Current user writing the review
            rating: Stars, 1 to 5
            comment: Review text
            reviewed_booking_ids: Booking ids already reviewed in the same
                direction
        """
        report = ValidationReport()
        context = {"booking": booking.id}

        valid_rating = isinstance(rating, int) and not isinstance(rating, bool)
        if not valid_rating or not 1 <= rating <= 5:
            report.add_error("rating", "Please select a rating from 1 to 5.", rating)
        if not comment or not comment.strip():
            report.add_error("comment", "Please write a comment.", comment)

        if booking.status != BookingStatus.COMPLETED:
            report.add_error(
                "booking",
                "Only completed jobs can be reviewed.",
                booking.status.value,
                context,
            )

        if reviewer.role == Role.CLIENT:
            party_id = booking.client_id
        elif reviewer.role == Role.TRADIE:
            party_id = booking.tradie_id
        else:
            party_id = None
        if party_id != reviewer.id:
            report.add_error(
                "reviewer",
                "You can only review your own bookings.",
                reviewer.id,
                context,
            )

        if booking.id in set(reviewed_booking_ids):
            report.add_error(
                "booking", "This job has already been reviewed.", booking.id, context
            )

        return report

    def validate_booking_request(
        self,
        requester: User,
        tradie_id: str,
        details: str,
        tradie_ids: Optional[Iterable[str]] = None,
    ) -> ValidationReport:
        """Validate a client's booking request.

        ``tradie_ids``, when given, lists the tradies that can be booked.
        """
        report = ValidationReport()
        if not details or not details.strip():
            report.add_error(
                "details", "Please provide some details about the job.", details
            )
        if not tradie_id:
            report.add_error("tradie_id", "Please choose a tradie.", tradie_id)
        elif tradie_id == requester.id:
            report.add_error("tradie_id", "You cannot book yourself.", tradie_id)
        elif tradie_ids is not None and tradie_id not in set(tradie_ids):
            report.add_error("tradie_id", f"Unknown tradie {tradie_id!r}.", tradie_id)
        return report

    def validate_signup(self, form: SignupForm) -> ValidationReport:
        """Validate the signup or add-user form.

        Messages and their order match what the signup page shows; the
        admin form has no password confirmation.
        """
        report = ValidationReport()

        if (
            form.confirm_password is not None
            and form.password != form.confirm_password
        ):
            report.add_error("confirm_password", "Passwords do not match.")

        if not (form.user_id.strip() and form.name.strip() and form.password):
            report.add_error("form", "All fields are required.")

        # The admin form has neither a confirmation nor a profession field
        if form.role == Role.TRADIE and form.confirm_password is not None:
            if not form.profession:
                report.add_error("profession", "Please select a profession.")
            elif form.profession not in TRADIE_PROFESSIONS:
                report.add_error(
                    "profession",
                    f"Unknown profession {form.profession!r}.",
                    form.profession,
                )

        return report

    def validate_support_ticket(
        self, subject: Optional[str], description: Optional[str]
    ) -> ValidationReport:
        report = ValidationReport()
        if not subject or not subject.strip():
            report.add_error("subject", "Please enter a subject.", subject)
        if not description or not description.strip():
            report.add_error(
                "description", "Please describe the problem.", description
            )
        return report
