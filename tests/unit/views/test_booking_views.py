"""
Unit tests for the bookings page selectors.
"""

import pytest

from tradiestop.models import Booking, BookingStatus, Role
from tradiestop.validators.transition_rules import BookingAction
from tradiestop.views.bookings import (
    BookingTab,
    booking_rows,
    bookings_for_user,
    filter_bookings,
    page_title,
    sort_by_service_date,
    tabs_for,
    upcoming_for_tradie,
)


def _ids(rows):
    return [row.booking.id for row in rows]


class TestTabsAndTitles:
    def test_only_admins_get_all_tab_first(self):
        assert tabs_for(Role.ADMIN)[0] == BookingTab.ALL
        assert BookingTab.ALL not in tabs_for(Role.CLIENT)
        assert tabs_for(Role.TRADIE) == [
            BookingTab.UPCOMING,
            BookingTab.COMPLETED,
            BookingTab.CANCELLED,
        ]

    def test_page_title(self):
        assert page_title(Role.TRADIE) == "My Schedule"
        assert page_title(Role.CLIENT) == "My Bookings"
        assert page_title(Role.ADMIN) == "My Bookings"


class TestScoping:
    """Test cases for which bookings a user sees."""

    def test_client_sees_own(self, app_data, client_session):
        assert len(bookings_for_user(app_data, client_session)) == 5

    def test_tradie_sees_own_jobs(self, app_data, tradie_session):
        ids = [b.id for b in bookings_for_user(app_data, tradie_session)]
        assert ids == ["booking-1", "booking-2", "booking-3"]

    def test_admin_sees_all(self, app_data, admin_session):
        assert len(bookings_for_user(app_data, admin_session)) == 5

    def test_logged_out_sees_nothing(self, app_data):
        assert bookings_for_user(app_data, None) == []
        assert booking_rows(app_data, None) == []


class TestSortingAndFiltering:
    def test_newest_first_and_undated_last(self):
        bookings = [
            Booking(id="old", client_id="c", tradie_id="t", status="Requested",
                    service_date="January 2, 2024, 09:00"),
            Booking(id="tbd", client_id="c", tradie_id="t", status="Requested",
                    service_date="sometime"),
            Booking(id="new", client_id="c", tradie_id="t", status="Requested",
                    service_date="March 2, 2024, 09:00"),
        ]

        assert [b.id for b in sort_by_service_date(bookings)] == ["new", "old", "tbd"]
        assert [b.id for b in sort_by_service_date(bookings, newest_first=False)] == [
            "old",
            "new",
            "tbd",
        ]

    def test_filter_by_tab(self, app_data):
        upcoming = filter_bookings(app_data.bookings, BookingTab.UPCOMING)
        assert {b.status for b in upcoming} == {BookingStatus.REQUESTED, BookingStatus.CONFIRMED}
        assert len(filter_bookings(app_data.bookings, BookingTab.ALL)) == 5


class TestBookingRows:
    """Test cases for the rows and their actions."""

    def test_client_upcoming(self, app_data, client_session):
        rows = booking_rows(app_data, client_session)

        assert _ids(rows) == ["booking-2", "booking-1"]
        assert rows[0].actions == [BookingAction.RESCHEDULE]
        assert rows[1].actions == [BookingAction.RESCHEDULE, BookingAction.CANCEL]

    def test_client_completed_links_invoice(self, app_data, client_session):
        rows = booking_rows(app_data, client_session, BookingTab.COMPLETED)

        assert _ids(rows) == ["booking-3", "booking-4"]
        assert rows[0].invoice_id == "inv-1"
        assert rows[1].invoice_id is None
        assert rows[1].actions == [BookingAction.VIEW_INVOICE]

    def test_tradie_actions(self, app_data, tradie_session):
        upcoming = booking_rows(app_data, tradie_session)
        completed = booking_rows(app_data, tradie_session, BookingTab.COMPLETED)

        assert upcoming[0].actions == [BookingAction.COMPLETE]
        assert upcoming[1].actions == [BookingAction.DECLINE, BookingAction.ACCEPT]
        assert completed[0].actions == [BookingAction.VIEW_INVOICE]

    def test_admin_all_tab(self, app_data, admin_session):
        rows = booking_rows(app_data, admin_session, BookingTab.ALL)

        assert _ids(rows) == ["booking-2", "booking-1", "booking-3", "booking-4", "booking-5"]
        assert rows[0].actions == [BookingAction.CANCEL]
        assert rows[4].actions == []

    def test_all_tab_for_non_admin(self, app_data, client_session):
        with pytest.raises(ValueError, match="only available to admins"):
            booking_rows(app_data, client_session, BookingTab.ALL)

    def test_upcoming_for_tradie(self, app_data):
        assert [b.id for b in upcoming_for_tradie(app_data, "tradie-1")] == ["booking-2"]

    def test_upcoming_for_tradie_soonest_first_undated_last(self, app_data):
        app_data.bookings = app_data.bookings + [
            Booking(id="tbd", client_id="client-1", tradie_id="tradie-1",
                    status="Confirmed", service_date="when convenient"),
            Booking(id="soon", client_id="client-1", tradie_id="tradie-1",
                    status="Confirmed", service_date="January 2, 2024, 09:00"),
        ]

        upcoming = [b.id for b in upcoming_for_tradie(app_data, "tradie-1")]

        assert upcoming == ["soon", "booking-2", "tbd"]
