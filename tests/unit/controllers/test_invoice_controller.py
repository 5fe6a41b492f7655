"""
Unit tests for InvoiceController.
"""

import datetime as dt
from decimal import Decimal

import pytest

from tradiestop.controllers.invoice_controller import (
    DEFAULT_NOTES,
    InvoiceController,
    generate_invoice_number,
)
from tradiestop.models import (
    Booking,
    BookingStatus,
    Invoice,
    LineItem,
    PaymentStatus,
    Role,
)
from tradiestop.services.exceptions import ApiError


@pytest.fixture
def controller(stores, test_config):
    return InvoiceController(*stores, config=test_config, today=lambda: dt.date(2024, 6, 1))


@pytest.fixture
def uninvoiced(data):
    """A completed job of tradie-1 with no invoice yet."""
    booking = Booking(
        id="booking-7",
        client_id="client-1",
        client_name="Alice Walker",
        tradie_id="tradie-1",
        service_date="May 28, 2024, 10:00",
        status=BookingStatus.COMPLETED,
        details="Fix hot water system",
    )
    data.data.bookings = data.data.bookings + [booking]
    return booking


def test_generate_invoice_number():
    assert generate_invoice_number(1718445600123) == "INV-600123"
    assert generate_invoice_number().startswith("INV-")


class TestStartDraft:
    """Test cases for prefilling a draft."""

    def test_prefilled_from_booking(self, controller, login_as, uninvoiced):
        login_as(Role.TRADIE)

        draft = controller.start_draft("booking-7")

        assert draft.booking_id == "booking-7"
        assert [i.description for i in draft.items] == ["Fix hot water system"]
        assert draft.items[0].quantity == Decimal("1")
        assert draft.items[0].unit_price == Decimal("0")
        assert draft.notes == DEFAULT_NOTES
        assert draft.client_name == "Alice Walker"
        assert draft.issue_date == dt.date(2024, 6, 1)
        assert draft.due_date == dt.date(2024, 6, 16)
        assert draft.tax_rate == Decimal("10")
        assert draft.footer_notes == "Payment is due within 15 days."
        assert draft.invoice_number.startswith("INV-")

    def test_only_owning_tradie(self, controller, login_as, uninvoiced, toast_messages):
        login_as(Role.CLIENT)

        assert controller.start_draft("booking-7") is None
        assert toast_messages() == ["Only the tradie who did the job can invoice it."]

    def test_only_completed_bookings(self, controller, login_as, toast_messages):
        login_as(Role.TRADIE)

        assert controller.start_draft("booking-2") is None
        assert toast_messages() == ["Only completed jobs can be invoiced."]

    def test_existing_invoice(self, controller, login_as, toast_messages):
        login_as(Role.TRADIE)

        assert controller.start_draft("booking-3") is None
        assert toast_messages() == ["An invoice already exists for this booking."]

    def test_unknown_booking(self, controller, login_as, toast_messages):
        login_as(Role.TRADIE)

        assert controller.start_draft("nope") is None
        assert toast_messages() == ["Booking nope not found."]


class TestEditing:
    """Test cases for editing line items."""

    @pytest.fixture
    def draft(self, controller, login_as, uninvoiced):
        login_as(Role.TRADIE)
        return controller.start_draft("booking-7")

    def test_formatted_input_is_parsed(self, controller, draft):
        controller.update_item(draft, 0, "unit_price", "$1,200.50")
        controller.update_item(draft, 0, "quantity", "2")

        assert draft.items[0].unit_price == Decimal("1200.50")
        assert controller.totals(draft).subtotal == Decimal("2401.00")
        assert controller.totals(draft).tax == Decimal("240.10")
        assert controller.totals(draft).total == Decimal("2641.10")

    def test_garbage_reads_as_zero(self, controller, draft):
        controller.update_item(draft, 0, "quantity", "lots")
        assert draft.items[0].quantity == Decimal("0")

    def test_text_before_digits_reads_as_zero(self, controller, draft):
        controller.update_item(draft, 0, "quantity", "x5")
        controller.update_item(draft, 0, "unit_price", "about 40")

        assert draft.items[0].quantity == Decimal("0")
        assert draft.items[0].unit_price == Decimal("0")

    def test_huge_amount_is_rejected_not_crashed(
        self, controller, draft, api, toast_messages
    ):
        controller.update_item(draft, 0, "unit_price", "100000000000000000000000000")

        assert controller.totals(draft).subtotal == Decimal(
            "100000000000000000000000000.00"
        )
        assert controller.submit(draft) is None
        assert toast_messages() == ["Item 1 amount is too large."]
        api.create_invoice.assert_not_called()

    def test_add_and_remove(self, controller, draft):
        controller.add_item(draft)
        controller.update_item(draft, 1, "description", "Parts")

        assert [i.description for i in draft.items] == ["Fix hot water system", "Parts"]

        controller.remove_item(draft, 0)
        assert [i.description for i in draft.items] == ["Parts"]

    def test_bad_positions_and_fields(self, controller, draft):
        with pytest.raises(IndexError):
            controller.remove_item(draft, 3)
        with pytest.raises(IndexError):
            controller.update_item(draft, -1, "quantity", 1)
        with pytest.raises(ValueError):
            controller.update_item(draft, 0, "id", "x")

    def test_set_tax_rate(self, controller, draft):
        controller.set_tax_rate(draft, "15%")
        assert draft.tax_rate == Decimal("15")

    def test_payload_uses_display_dates(self, controller, draft):
        payload = controller.build_payload(draft)
        body = payload.to_api()

        assert body["issueDate"] == "June 1, 2024"
        assert body["dueDate"] == "June 16, 2024"
        assert body["bookingId"] == "booking-7"
        assert body["items"][0]["description"] == "Fix hot water system"


class TestSubmit:
    """Test cases for creating the invoice."""

    @pytest.fixture
    def draft(self, controller, login_as, uninvoiced):
        login_as(Role.TRADIE)
        draft = controller.start_draft("booking-7")
        draft.items = [LineItem(description="Labour", quantity=2, unit_price=85)]
        return draft

    def test_submit(self, controller, api, data, draft, invoice_payload, toast_messages):
        created = Invoice.model_validate(
            {**invoice_payload, "id": "inv-7", "bookingId": "booking-7"}
        )
        api.create_invoice.return_value = created

        assert controller.submit(draft) is created

        assert data.data.invoice_for_booking("booking-7") is created
        assert toast_messages() == ["Invoice created successfully!"]

    def test_invalid_draft_not_sent(self, controller, api, draft, toast_messages):
        draft.items = []

        assert controller.submit(draft) is None

        api.create_invoice.assert_not_called()
        assert toast_messages() == ["Add at least one line item."]

    def test_api_failure(self, controller, api, draft, toast_messages):
        api.create_invoice.side_effect = ApiError("Server down", 500)

        assert controller.submit(draft) is None
        assert toast_messages() == ["Failed to create invoice."]


class TestMarkAsPaid:
    """Test cases for recording payment."""

    @pytest.fixture
    def pending(self, data, invoice_payload):
        data.data.invoices = [Invoice.model_validate({**invoice_payload, "status": "Pending"})]
        return data.data.invoices[0]

    def test_issuing_tradie(self, controller, api, login_as, pending, invoice_payload, toast_messages):
        login_as(Role.TRADIE)
        api.update_invoice_status.return_value = Invoice.model_validate(invoice_payload)

        assert controller.mark_as_paid("inv-1") is True

        api.update_invoice_status.assert_called_once_with("inv-1", PaymentStatus.PAID)
        assert toast_messages() == ["Invoice INV-600123 marked as paid."]

    def test_admin(self, controller, api, login_as, pending, invoice_payload):
        login_as(Role.ADMIN)
        api.update_invoice_status.return_value = Invoice.model_validate(invoice_payload)

        assert controller.mark_as_paid("inv-1") is True

    def test_client_cannot(self, controller, api, login_as, pending, toast_messages):
        login_as(Role.CLIENT)

        assert controller.mark_as_paid("inv-1") is False

        api.update_invoice_status.assert_not_called()
        assert toast_messages() == ["Failed to mark invoice as paid."]

    def test_already_paid(self, controller, api, login_as):
        login_as(Role.TRADIE)

        assert controller.mark_as_paid("inv-1") is False
        api.update_invoice_status.assert_not_called()

    def test_unknown_invoice(self, controller, login_as, toast_messages):
        login_as(Role.TRADIE)

        assert controller.mark_as_paid("inv-9") is False
        assert toast_messages() == ["Invoice inv-9 not found."]
