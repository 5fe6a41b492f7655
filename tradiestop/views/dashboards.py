"""Dashboard contents for each role."""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Callable, List, Optional, TypeVar

from tradiestop.aggregators.monthly_aggregator import MonthlyAggregator
from tradiestop.calculators.currency import parse_service_date
from tradiestop.models.app_data import AppData
from tradiestop.models.booking import Booking
from tradiestop.models.enums import BookingStatus, Role, SupportTicketStatus
from tradiestop.models.notification import ChartData, Message
from tradiestop.models.review import Review
from tradiestop.models.support import SupportTicket
from tradiestop.models.tradie import Tradie
from tradiestop.models.user import User
from tradiestop.views.bookings import bookings_for_user

FEATURED_TRADIES = 3
LATEST_COUNT = 5

T = TypeVar("T")


@dataclass
class ClientDashboard:
    bookings: List[Booking] = field(default_factory=list)
    tradies: List[Tradie] = field(default_factory=list)
    messages: List[Message] = field(default_factory=list)
    spending: ChartData = field(default_factory=ChartData)


@dataclass
class TradieDashboard:
    new_requests: List[Booking] = field(default_factory=list)
    upcoming: List[Booking] = field(default_factory=list)
    completed_count: int = 0
    rating: Decimal = Decimal("0")
    reviews_count: int = 0
    latest_reviews: List[Review] = field(default_factory=list)
    earnings: ChartData = field(default_factory=ChartData)


@dataclass
class AdminDashboard:
    client_count: int = 0
    tradie_count: int = 0
    booking_count: int = 0
    open_ticket_count: int = 0
    latest_tickets: List[SupportTicket] = field(default_factory=list)
    bookings_chart: ChartData = field(default_factory=ChartData)
    user_growth: ChartData = field(default_factory=ChartData)


def latest(records: List[T], date_of: Callable[[T], str], count: int = LATEST_COUNT) -> List[T]:
    """The ``count`` most recent records; undated records come last."""
    dated = [r for r in records if parse_service_date(date_of(r)) is not None]
    undated = [r for r in records if parse_service_date(date_of(r)) is None]
    dated.sort(key=lambda r: parse_service_date(date_of(r)), reverse=True)
    return (dated + undated)[:count]


def search_tradies(
    tradies: List[Tradie], query: Optional[str] = None, exclude_id: Optional[str] = None
) -> List[Tradie]:
    """Tradies matching ``query`` by name or profession.

    Without a query only the first few tradies are featured.
    """
    candidates = [t for t in tradies if t.id != exclude_id]
    needle = (query or "").strip().lower()
    if not needle:
        return candidates[:FEATURED_TRADIES]
    return [
        t
        for t in candidates
        if needle in t.name.lower() or needle in t.profession.lower()
    ]


def client_dashboard(
    data: AppData,
    user: User,
    query: Optional[str] = None,
    aggregator: Optional[MonthlyAggregator] = None,
) -> ClientDashboard:
    aggregator = aggregator or MonthlyAggregator()
    return ClientDashboard(
        bookings=bookings_for_user(data, user),
        tradies=search_tradies(data.tradies, query, exclude_id=user.id),
        messages=list(data.messages),
        spending=aggregator.monthly_spending(data.invoices, user.id),
    )


def tradie_dashboard(
    data: AppData, user: User, aggregator: Optional[MonthlyAggregator] = None
) -> TradieDashboard:
    aggregator = aggregator or MonthlyAggregator()
    jobs = [b for b in data.bookings if b.tradie_id == user.id]
    profile = data.find_tradie(user.id)
    return TradieDashboard(
        new_requests=[b for b in jobs if b.status == BookingStatus.REQUESTED],
        upcoming=[b for b in jobs if b.status == BookingStatus.CONFIRMED],
        completed_count=sum(1 for b in jobs if b.status == BookingStatus.COMPLETED),
        rating=profile.rating if profile else Decimal("0"),
        reviews_count=profile.reviews_count if profile else 0,
        latest_reviews=latest(
            [r for r in data.reviews if r.tradie_id == user.id], lambda r: r.date
        ),
        earnings=aggregator.monthly_earnings(data.invoices, user.id),
    )


def admin_dashboard(
    data: AppData, aggregator: Optional[MonthlyAggregator] = None
) -> AdminDashboard:
    aggregator = aggregator or MonthlyAggregator()
    return AdminDashboard(
        client_count=sum(1 for u in data.users if u.role == Role.CLIENT),
        tradie_count=sum(1 for u in data.users if u.role == Role.TRADIE),
        booking_count=len(data.bookings),
        open_ticket_count=sum(
            1 for t in data.support_tickets if t.status == SupportTicketStatus.OPEN
        ),
        latest_tickets=latest(list(data.support_tickets), lambda t: t.date),
        bookings_chart=aggregator.monthly_bookings(data.bookings),
        user_growth=aggregator.user_growth(data.users),
    )
