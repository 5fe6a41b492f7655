"""Unit tests for the booking commands."""

import pytest


@pytest.fixture
def booking_payload(app_data_payload):
    def _make(booking_id, **changes):
        booking = next(b for b in app_data_payload["bookings"] if b["id"] == booking_id)
        return {**booking, **changes}

    return _make


class TestListBookings:
    """Test suite for the bookings command."""

    def test_not_logged_in(self, run):
        assert run(["bookings"]).exit_code == 5

    def test_client_upcoming_by_default(self, run):
        result = run(["bookings"], role="client")

        assert result.exit_code == 0
        assert "My Bookings: Upcoming" in result.output
        assert result.output.index("booking-2") < result.output.index("booking-1")
        assert "booking-3" not in result.output
        assert "Bob Builder (Plumber)" in result.output

    def test_tradie_completed_tab(self, run):
        result = run(["bookings", "--tab", "completed"], role="tradie")

        assert result.exit_code == 0
        assert "My Schedule: Completed" in result.output
        assert "booking-3" in result.output
        assert "inv-1" in result.output
        assert "Alice Walker" in result.output

    def test_admin_all_tab(self, run):
        result = run(["bookings", "--tab", "All"], role="admin")

        assert result.exit_code == 0
        assert "Alice Walker -> Eve Sparks" in result.output
        assert "booking-5" in result.output

    def test_all_tab_is_admin_only(self, run):
        result = run(["bookings", "--tab", "All"], role="client")

        assert result.exit_code == 3
        assert "Choose one of: Upcoming, Completed, Cancelled" in result.output

    def test_empty_tab(self, run, app_data_payload):
        app_data_payload["bookings"] = []

        result = run(["bookings"], role="client")

        assert result.exit_code == 0
        assert "No bookings in this tab." in result.output

    def test_stale_data_warning(self, run, server):
        server.route("GET", "/data/all", 500, {"message": "Database unavailable"})

        result = run(["bookings"], role="client")

        assert "Data may be out of date" in result.output

    def test_unreadable_data_is_a_warning(self, run, app_data_payload):
        app_data_payload["bookings"][0]["status"] = "InProgress"

        result = run(["bookings"], role="client")

        assert result.exit_code == 0
        assert "Data may be out of date" in result.output


class TestBook:
    """Test suite for the book command."""

    def test_request_booking(self, run, server, booking_payload):
        server.route(
            "POST",
            "/bookings",
            payload=booking_payload(
                "booking-5",
                id="booking-9",
                status="Requested",
                serviceDate="July 1, 2024, 08:00",
            ),
        )

        result = run(
            ["book", "tradie-2", "--date", "2024-07-01", "--time", "08:00", "--details", "Ceiling fan"],
            role="client",
        )

        assert result.exit_code == 0
        assert "Booking request sent successfully!" in result.output
        assert server.requested("POST", "/bookings") == [
            {
                "tradieId": "tradie-2",
                "serviceDate": "July 1, 2024, 08:00",
                "details": "Ceiling fan",
            }
        ]

    def test_clients_only(self, run, server):
        result = run(
            ["book", "tradie-2", "--date", "2024-07-01", "--details", "Fan"], role="tradie"
        )

        assert result.exit_code == 6
        assert server.requested("POST", "/bookings") == []

    def test_unknown_tradie(self, run, server):
        result = run(
            ["book", "tradie-9", "--date", "2024-07-01", "--details", "Fan"], role="client"
        )

        assert result.exit_code == 4
        assert "Unknown tradie 'tradie-9'." in result.output
        assert server.requested("POST", "/bookings") == []

    def test_invalid_time(self, run):
        result = run(
            ["book", "tradie-2", "--date", "2024-07-01", "--time", "25:00", "--details", "Fan"],
            role="client",
        )

        assert result.exit_code == 4
        assert "Failed to send booking request." in result.output


class TestChangeBooking:
    """Test suite for the booking status command."""

    def test_tradie_accepts(self, run, server, booking_payload):
        server.route(
            "PUT",
            "/bookings/booking-1/status",
            payload=booking_payload("booking-1", status="Confirmed"),
        )

        result = run(["booking", "accept", "booking-1"], role="tradie")

        assert result.exit_code == 0
        assert "Booking has been confirmed." in result.output
        assert server.requested("PUT", "/bookings/booking-1/status") == [
            {"status": "Confirmed"}
        ]

    def test_client_cannot_accept(self, run, server):
        result = run(["booking", "accept", "booking-1"], role="client")

        assert result.exit_code == 4
        assert "Failed to update booking." in result.output
        assert server.requested("PUT", "/bookings/booking-1/status") == []

    def test_unknown_booking(self, run):
        result = run(["booking", "cancel", "booking-9"], role="client")

        assert result.exit_code == 4
        assert "Booking booking-9 not found." in result.output

    def test_unknown_action(self, run):
        result = run(["booking", "archive", "booking-1"], role="client")
        assert result.exit_code == 2

    def test_server_rejects(self, run, server):
        server.route("PUT", "/bookings/booking-1/status", 500, {"message": "boom"})

        result = run(["booking", "cancel", "booking-1"], role="client")

        assert result.exit_code == 4
        assert len(server.requested("PUT", "/bookings/booking-1/status")) == 1


class TestReschedule:
    def test_client_reschedules(self, run, server, booking_payload):
        server.route(
            "PUT",
            "/bookings/booking-2/reschedule",
            payload=booking_payload("booking-2", serviceDate="June 28, 2024, 10:30"),
        )

        result = run(
            ["reschedule", "booking-2", "--date", "2024-06-28", "--time", "10:30"],
            role="client",
        )

        assert result.exit_code == 0
        assert "Booking rescheduled successfully!" in result.output
        assert server.requested("PUT", "/bookings/booking-2/reschedule") == [
            {"newDate": "June 28, 2024, 10:30"}
        ]

    def test_completed_booking_cannot_move(self, run, server):
        result = run(["reschedule", "booking-3", "--date", "2024-06-28"], role="client")

        assert result.exit_code == 4
        assert "Failed to reschedule booking." in result.output
        assert server.requested("PUT", "/bookings/booking-3/reschedule") == []
