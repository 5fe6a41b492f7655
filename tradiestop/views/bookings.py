"""Bookings page: role-scoped, tab-filtered, newest first."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional

from tradiestop.calculators.currency import parse_service_date
from tradiestop.models.app_data import AppData
from tradiestop.models.booking import Booking
from tradiestop.models.enums import BookingStatus, Role
from tradiestop.models.user import User
from tradiestop.validators.transition_rules import (
    BookingAction,
    available_booking_actions,
)


class BookingTab(str, Enum):
    UPCOMING = "Upcoming"
    COMPLETED = "Completed"
    CANCELLED = "Cancelled"
    ALL = "All"


TAB_STATUSES = {
    BookingTab.UPCOMING: (BookingStatus.REQUESTED, BookingStatus.CONFIRMED),
    BookingTab.COMPLETED: (BookingStatus.COMPLETED,),
    BookingTab.CANCELLED: (BookingStatus.CANCELLED,),
}


@dataclass
class BookingRow:
    """A booking as listed, with the actions offered to the current user."""

    booking: Booking
    invoice_id: Optional[str] = None
    actions: List[BookingAction] = field(default_factory=list)


def tabs_for(role: Role) -> List[BookingTab]:
    """Tabs shown to a role; only admins get "All", as the first tab."""
    tabs = [BookingTab.UPCOMING, BookingTab.COMPLETED, BookingTab.CANCELLED]
    return [BookingTab.ALL] + tabs if role == Role.ADMIN else tabs


def page_title(role: Role) -> str:
    return "My Schedule" if role == Role.TRADIE else "My Bookings"


def bookings_for_user(data: AppData, user: Optional[User]) -> List[Booking]:
    """Client: own bookings. Tradie: own jobs. Admin: everything."""
    if user is None:
        return []
    if user.role == Role.CLIENT:
        return [b for b in data.bookings if b.client_id == user.id]
    if user.role == Role.TRADIE:
        return [b for b in data.bookings if b.tradie_id == user.id]
    return list(data.bookings)


def sort_by_service_date(
    bookings: List[Booking], newest_first: bool = True
) -> List[Booking]:
    """Order by service date; unparseable dates last either way."""
    dated = [(parse_service_date(b.service_date), b) for b in bookings]
    known = sorted(
        (pair for pair in dated if pair[0] is not None),
        key=lambda pair: pair[0],
        reverse=newest_first,
    )
    unknown = [b for when, b in dated if when is None]
    return [b for _, b in known] + unknown


def invoice_ids_by_booking(data: AppData) -> Dict[str, str]:
    return {invoice.booking_id: invoice.id for invoice in data.invoices}


def filter_bookings(bookings: List[Booking], tab: BookingTab) -> List[Booking]:
    if tab == BookingTab.ALL:
        return list(bookings)
    statuses = TAB_STATUSES[tab]
    return [b for b in bookings if b.status in statuses]


def booking_rows(
    data: AppData, user: Optional[User], tab: BookingTab = BookingTab.UPCOMING
) -> List[BookingRow]:
    """Everything the bookings page lists for a tab.

    Raises:
        ValueError: If a non-admin asks for the "All" tab
    """
    if user is None:
        return []
    if tab not in tabs_for(user.role):
        raise ValueError(f"The {tab.value} tab is only available to admins")

    invoices = invoice_ids_by_booking(data)
    bookings = filter_bookings(
        sort_by_service_date(bookings_for_user(data, user)), tab
    )
    return [
        BookingRow(
            booking=b,
            invoice_id=invoices.get(b.id),
            actions=available_booking_actions(user.role, b, invoices.get(b.id)),
        )
        for b in bookings
    ]


def upcoming_for_tradie(data: AppData, tradie_id: str) -> List[Booking]:
    """Confirmed jobs of a tradie, soonest first."""
    jobs = [
        b
        for b in data.bookings
        if b.tradie_id == tradie_id and b.status == BookingStatus.CONFIRMED
    ]
    return sort_by_service_date(jobs, newest_first=False)
