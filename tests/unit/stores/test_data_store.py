"""
Unit tests for DataStore.
"""

import logging
from unittest.mock import Mock

import pytest
from pydantic import ValidationError

from tradiestop.models import (
    AppData,
    Booking,
    BookingStatus,
    CompanyDetails,
    Invoice,
    PaymentStatus,
    Review,
    ReviewSubmission,
    SupportTicket,
    SupportTicketStatus,
    Tradie,
    User,
)
from tradiestop.services.exceptions import ApiError
from tradiestop.services.marketplace_api import MarketplaceApi
from tradiestop.stores.auth_store import AuthStore
from tradiestop.stores.data_store import DataStore
from tradiestop.validators.transition_rules import PermissionDeniedError


@pytest.fixture
def api():
    return Mock(spec=MarketplaceApi)


@pytest.fixture
def auth(client_session):
    auth = Mock(spec=AuthStore)
    auth.is_authenticated = True
    auth.require_user.return_value = client_session
    return auth


@pytest.fixture
def store(api, auth, app_data):
    store = DataStore(api, auth)
    store.data = app_data
    return store


class TestFetchData:
    """Test cases for fetching the snapshot."""

    def test_fetch_replaces_snapshot(self, api, auth, app_data):
        api.fetch_all_data.return_value = app_data
        store = DataStore(api, auth)

        store.fetch_data()

        assert store.data is app_data
        assert store.error is None
        assert store.is_loading is False

    def test_fetch_skipped_when_logged_out(self, api, auth):
        auth.is_authenticated = False
        store = DataStore(api, auth)

        store.fetch_data()

        api.fetch_all_data.assert_not_called()
        assert store.data == AppData()

    def test_fetch_failure_keeps_old_data(self, store, api, app_data):
        api.fetch_all_data.side_effect = ApiError("Server down", 500)

        store.fetch_data()

        assert store.data is app_data
        assert isinstance(store.error, ApiError)
        assert store.is_loading is False

    def test_unreadable_payload_is_recorded(self, store, api, app_data, app_data_payload):
        app_data_payload["bookings"][0]["status"] = "InProgress"
        with pytest.raises(ValidationError) as exc_info:
            AppData.model_validate(app_data_payload)
        api.fetch_all_data.side_effect = exc_info.value

        store.fetch_data()

        assert store.data is app_data
        assert isinstance(store.error, ValidationError)
        assert store.is_loading is False

    def test_mismatched_invoice_totals_are_logged(
        self, api, auth, app_data_payload, caplog
    ):
        app_data_payload["invoices"][0]["total"] = 999
        api.fetch_all_data.return_value = AppData.model_validate(app_data_payload)
        store = DataStore(api, auth)

        with caplog.at_level(logging.WARNING, logger="tradiestop.stores.data_store"):
            store.fetch_data()

        assert "INV-600123 totals differ from its line items: total" in caplog.text

    def test_clear(self, store):
        store.error = ApiError("x")
        store.clear()

        assert store.data == AppData()
        assert store.error is None


class TestBookingMutations:
    """Test cases for booking updates."""

    def test_update_status_replaces_booking(self, store, api):
        confirmed = store.data.find_booking("booking-1").model_copy(
            update={"status": BookingStatus.CONFIRMED}
        )
        api.update_booking_status.return_value = confirmed

        store.update_booking_status("booking-1", BookingStatus.CONFIRMED)

        api.update_booking_status.assert_called_once_with(
            "booking-1", BookingStatus.CONFIRMED
        )
        assert store.data.find_booking("booking-1").status == BookingStatus.CONFIRMED
        assert len(store.data.bookings) == 5

    def test_failed_update_leaves_data_untouched(self, store, api):
        api.update_booking_status.side_effect = ApiError("Forbidden", 403)

        with pytest.raises(ApiError):
            store.update_booking_status("booking-1", BookingStatus.CONFIRMED)

        assert store.data.find_booking("booking-1").status == BookingStatus.REQUESTED

    def test_reschedule(self, store, api):
        moved = store.data.find_booking("booking-2").model_copy(
            update={"service_date": "July 1, 2024, 09:00"}
        )
        api.reschedule_booking.return_value = moved

        store.reschedule_booking("booking-2", "July 1, 2024, 09:00")

        assert store.data.find_booking("booking-2").service_date == "July 1, 2024, 09:00"

    def test_create_booking_is_prepended(self, store, api):
        new = Booking(
            id="booking-9",
            client_id="client-1",
            tradie_id="tradie-2",
            status=BookingStatus.REQUESTED,
        )
        api.create_booking.return_value = new

        store.create_booking("tradie-2", "July 1, 2024, 09:00", "Fan")

        assert store.data.bookings[0] is new


class TestOtherMutations:
    def test_close_ticket(self, store, api):
        closed = store.data.find_ticket("ticket-1").model_copy(
            update={"status": SupportTicketStatus.CLOSED}
        )
        api.update_ticket_status.return_value = closed

        store.update_ticket_status("ticket-1", SupportTicketStatus.CLOSED)

        assert store.data.find_ticket("ticket-1").status == SupportTicketStatus.CLOSED

    def test_create_ticket_is_prepended(self, store, api):
        ticket = SupportTicket(
            id="ticket-3", user_id="client-1", user_role="Client", subject="Help"
        )
        api.create_support_ticket.return_value = ticket

        store.create_support_ticket("Help", "Please")

        assert store.data.support_tickets[0] is ticket

    def test_add_review_is_appended(self, store, api):
        review = Review(
            id="r2",
            booking_id="booking-3",
            reviewer_id="client-1",
            tradie_id="tradie-1",
            rating=4,
        )
        api.add_review.return_value = review
        submission = ReviewSubmission(
            booking_id="booking-3", tradie_id="tradie-1", rating=4, comment="Good"
        )

        store.add_review(submission)

        assert store.data.reviews[-1] is review
        assert len(store.data.reviews) == 2

    def test_add_user_refetches(self, store, api, app_data):
        api.create_user.return_value = User(id="new", role="Client", name="New")
        api.fetch_all_data.return_value = app_data

        user = store.add_user({"id": "new"})

        assert user.id == "new"
        api.fetch_all_data.assert_called_once()

    def test_delete_user_removes_tradie_profile(self, store, api):
        store.delete_user("tradie-1")

        assert store.data.find_user("tradie-1") is None
        assert store.data.find_tradie("tradie-1") is None

    def test_delete_user_failure_keeps_user(self, store, api):
        api.delete_user.side_effect = ApiError("Not found", 404)

        with pytest.raises(ApiError):
            store.delete_user("tradie-1")

        assert store.data.find_user("tradie-1") is not None

    def test_update_profile_updates_tradie_card(self, store, api, auth, tradie_session):
        auth.require_user.return_value = tradie_session
        api.update_user_profile.return_value = User(
            id="tradie-1", role="Tradie", name="Robert"
        )

        store.update_user_profile(name="Robert")

        assert store.data.find_user("tradie-1").name == "Robert"
        assert store.data.find_tradie("tradie-1").name == "Robert"
        assert store.data.find_tradie("tradie-2").name == "Eve Sparks"

    def test_company_details_for_tradies_only(self, store, api):
        with pytest.raises(PermissionDeniedError):
            store.update_company_details(CompanyDetails(name="Alice Co"))

        api.update_company_details.assert_not_called()

    def test_company_details_replace_tradie(self, store, api, auth, tradie_session):
        auth.require_user.return_value = tradie_session
        updated = Tradie(
            id="tradie-1",
            name="Bob Builder",
            company_details=CompanyDetails(name="Bob & Sons"),
        )
        api.update_company_details.return_value = updated

        store.update_company_details(CompanyDetails(name="Bob & Sons"))

        assert store.data.find_tradie("tradie-1").company_details.name == "Bob & Sons"


class TestInvoiceMutations:
    def test_create_invoice_is_prepended(self, store, api, invoice_payload):
        invoice = Invoice.model_validate({**invoice_payload, "id": "inv-2"})
        api.create_invoice.return_value = invoice

        store.create_invoice(Mock())

        assert store.data.invoices[0] is invoice

    def test_mark_as_paid(self, store, api, invoice_payload):
        store.data.invoices[0].status = PaymentStatus.PENDING
        api.update_invoice_status.return_value = Invoice.model_validate(invoice_payload)

        invoice = store.mark_invoice_as_paid("inv-1")

        api.update_invoice_status.assert_called_once_with("inv-1", PaymentStatus.PAID)
        assert invoice.status == PaymentStatus.PAID
        assert store.data.find_invoice("inv-1").status == PaymentStatus.PAID
