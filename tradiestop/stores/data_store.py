"""Role-scoped application data and the mutations that keep it current.

Every mutation calls the API first and merges the response into the local
snapshot only when the call succeeded. API errors are logged and re-raised;
turning them into user-facing messages is the controllers' job. ``fetch_data``
is the exception: it records its error instead of raising.
"""

import logging
from typing import Optional

from pydantic import ValidationError

from tradiestop.calculators.invoice_calculator import reconcile_invoice_totals
from tradiestop.models.app_data import AppData
from tradiestop.models.booking import Booking
from tradiestop.models.enums import (
    BookingStatus,
    PaymentStatus,
    Role,
    SupportTicketStatus,
)
from tradiestop.models.invoice import Invoice, InvoiceCreationPayload
from tradiestop.models.review import (
    ClientReview,
    ClientReviewSubmission,
    Review,
    ReviewSubmission,
)
from tradiestop.models.support import SupportTicket
from tradiestop.models.tradie import CompanyDetails
from tradiestop.models.user import User
from tradiestop.services.exceptions import ApiError
from tradiestop.services.marketplace_api import MarketplaceApi
from tradiestop.stores.auth_store import AuthStore
from tradiestop.validators.transition_rules import PermissionDeniedError

logger = logging.getLogger(__name__)


def _replace_by_id(records: list, updated) -> list:
    return [updated if record.id == updated.id else record for record in records]


class DataStore:
    """
    Local copy of ``/data/all`` for the logged-in user.

    Attributes:
        data: Current snapshot; empty while logged out
        is_loading: True while a fetch is in flight
        error: The error of the last failed fetch, else None
    """

    def __init__(self, api: MarketplaceApi, auth: AuthStore):
        self.api = api
        self.auth = auth
        self.data = AppData()
        self.is_loading = False
        self.error: Optional[Exception] = None

    def fetch_data(self) -> None:
        """Replace the snapshot with a fresh one; no-op when logged out.

        A failure is recorded in ``error`` and logged, not raised.
        """
        if not self.auth.is_authenticated:
            return
        self.is_loading = True
        self.error = None
        try:
            self.data = self.api.fetch_all_data()
        except ApiError as e:
            self.error = e
            logger.error(f"Failed to fetch data: {e}")
            return
        except ValidationError as e:
            self.error = e
            logger.error(
                f"Failed to read data from the server: {e.error_count()} invalid field(s)"
            )
            logger.debug(str(e))
            return
        finally:
            self.is_loading = False

        for invoice in self.data.invoices:
            self._check_invoice_totals(invoice)
        logger.debug(
            f"Loaded {len(self.data.bookings)} bookings, "
            f"{len(self.data.invoices)} invoices, {len(self.data.users)} users"
        )

    def clear(self) -> None:
        self.data = AppData()
        self.error = None

    def _check_invoice_totals(self, invoice: Invoice) -> None:
        mismatches = reconcile_invoice_totals(invoice)
        if mismatches:
            logger.warning(
                f"Invoice {invoice.invoice_number or invoice.id} totals differ "
                f"from its line items: {', '.join(mismatches)}"
            )

    # --- Bookings ---

    def update_booking_status(self, booking_id: str, status: BookingStatus) -> Booking:
        try:
            booking = self.api.update_booking_status(booking_id, status)
        except ApiError as e:
            logger.error(f"Failed to update booking status: {e}")
            raise
        self.data.bookings = _replace_by_id(self.data.bookings, booking)
        return booking

    def reschedule_booking(self, booking_id: str, new_date: str) -> Booking:
        try:
            booking = self.api.reschedule_booking(booking_id, new_date)
        except ApiError as e:
            logger.error(f"Failed to reschedule booking: {e}")
            raise
        self.data.bookings = _replace_by_id(self.data.bookings, booking)
        return booking

    def create_booking(self, tradie_id: str, service_date: str, details: str) -> Booking:
        try:
            booking = self.api.create_booking(tradie_id, service_date, details)
        except ApiError as e:
            logger.error(f"Failed to create booking: {e}")
            raise
        self.data.bookings = [booking] + self.data.bookings
        return booking

    # --- Support ---

    def update_ticket_status(
        self, ticket_id: str, status: SupportTicketStatus
    ) -> SupportTicket:
        try:
            ticket = self.api.update_ticket_status(ticket_id, status)
        except ApiError as e:
            logger.error(f"Failed to update ticket status: {e}")
            raise
        self.data.support_tickets = _replace_by_id(self.data.support_tickets, ticket)
        return ticket

    def create_support_ticket(self, subject: str, description: str) -> SupportTicket:
        try:
            ticket = self.api.create_support_ticket(subject, description)
        except ApiError as e:
            logger.error(f"Failed to create support ticket: {e}")
            raise
        self.data.support_tickets = [ticket] + self.data.support_tickets
        return ticket

    # --- Reviews ---

    def add_review(self, review: ReviewSubmission) -> Review:
        try:
            created = self.api.add_review(review)
        except ApiError as e:
            logger.error(f"Failed to add review: {e}")
            raise
        self.data.reviews = self.data.reviews + [created]
        return created

    def add_client_review(self, review: ClientReviewSubmission) -> ClientReview:
        try:
            created = self.api.add_client_review(review)
        except ApiError as e:
            logger.error(f"Failed to add client review: {e}")
            raise
        self.data.client_reviews = self.data.client_reviews + [created]
        return created

    # --- Users ---

    def add_user(self, user_data: dict) -> User:
        """Create a user, then refetch so every list includes them."""
        try:
            user = self.api.create_user(user_data)
        except ApiError as e:
            logger.error(f"Failed to add user: {e}")
            raise
        self.fetch_data()
        return user

    def delete_user(self, user_id: str) -> None:
        try:
            self.api.delete_user(user_id)
        except ApiError as e:
            logger.error(f"Failed to delete user: {e}")
            raise
        self.data.users = [u for u in self.data.users if u.id != user_id]
        self.data.tradies = [t for t in self.data.tradies if t.id != user_id]

    def update_user_profile(
        self, name: Optional[str] = None, image_url: Optional[str] = None
    ) -> User:
        """Update the current user's name and/or avatar.

        The change is applied to both the user list and, for tradies, the
        public tradie profile.
        """
        current = self.auth.require_user()
        try:
            updated = self.api.update_user_profile(name=name, image_url=image_url)
        except ApiError as e:
            logger.error(f"Failed to update profile: {e}")
            raise

        updates = {}
        if name is not None:
            updates["name"] = name
        if image_url is not None:
            updates["image_url"] = image_url

        self.data.users = [
            updated if u.id == current.id else u for u in self.data.users
        ]
        self.data.tradies = [
            t.model_copy(update=updates) if t.id == current.id else t
            for t in self.data.tradies
        ]
        return updated

    def update_company_details(self, details: CompanyDetails) -> None:
        current = self.auth.require_user()
        if current.role != Role.TRADIE:
            raise PermissionDeniedError("User is not a tradie")
        try:
            tradie = self.api.update_company_details(details)
        except ApiError as e:
            logger.error(f"Failed to update company details: {e}")
            raise
        self.data.tradies = [
            tradie if t.id == current.id else t for t in self.data.tradies
        ]

    # --- Invoices ---

    def create_invoice(self, payload: InvoiceCreationPayload) -> Invoice:
        try:
            invoice = self.api.create_invoice(payload)
        except ApiError as e:
            logger.error(f"Failed to create invoice: {e}")
            raise
        self._check_invoice_totals(invoice)
        self.data.invoices = [invoice] + self.data.invoices
        return invoice

    def mark_invoice_as_paid(self, invoice_id: str) -> Invoice:
        try:
            invoice = self.api.update_invoice_status(invoice_id, PaymentStatus.PAID)
        except ApiError as e:
            logger.error(f"Failed to mark invoice as paid: {e}")
            raise
        self.data.invoices = _replace_by_id(self.data.invoices, invoice)
        return invoice
