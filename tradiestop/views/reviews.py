"""Reviews page selectors.

Feedback goes both ways: clients review tradies (``Review``) and tradies
review clients (``ClientReview``). Which of them a user sees depends on the
side they are on.
"""

from dataclasses import dataclass, field
from typing import List, Optional

from tradiestop.models.app_data import AppData
from tradiestop.models.booking import Booking
from tradiestop.models.enums import BookingStatus, Role
from tradiestop.models.review import ClientReview, Review
from tradiestop.models.user import User
from tradiestop.views.bookings import sort_by_service_date


@dataclass
class ReviewsView:
    tradie_reviews: List[Review] = field(default_factory=list)
    client_reviews: List[ClientReview] = field(default_factory=list)
    pending: List[Booking] = field(default_factory=list)


def tradie_reviews_for(data: AppData, user: Optional[User]) -> List[Review]:
    if user is None:
        return []
    if user.role == Role.CLIENT:
        return [r for r in data.reviews if r.reviewer_id == user.id]
    if user.role == Role.TRADIE:
        return [r for r in data.reviews if r.tradie_id == user.id]
    return list(data.reviews)


def client_reviews_for(data: AppData, user: Optional[User]) -> List[ClientReview]:
    if user is None:
        return []
    if user.role == Role.TRADIE:
        return [r for r in data.client_reviews if r.reviewer_id == user.id]
    if user.role == Role.CLIENT:
        return [r for r in data.client_reviews if r.client_id == user.id]
    return list(data.client_reviews)


def reviewed_booking_ids(data: AppData, user: Optional[User]) -> set:
    """Bookings the user has already written a review for."""
    if user is None:
        return set()
    if user.role == Role.TRADIE:
        return {r.booking_id for r in data.client_reviews if r.reviewer_id == user.id}
    return {r.booking_id for r in data.reviews if r.reviewer_id == user.id}


def pending_reviews(data: AppData, user: Optional[User]) -> List[Booking]:
    """Completed bookings of mine that I have not reviewed yet.

    Admins never write reviews, so they have nothing pending.
    """
    if user is None or user.role == Role.ADMIN:
        return []
    done = reviewed_booking_ids(data, user)
    if user.role == Role.CLIENT:
        mine = [b for b in data.bookings if b.client_id == user.id]
    else:
        mine = [b for b in data.bookings if b.tradie_id == user.id]
    return sort_by_service_date(
        [b for b in mine if b.status == BookingStatus.COMPLETED and b.id not in done]
    )


def reviews_view(data: AppData, user: Optional[User]) -> ReviewsView:
    return ReviewsView(
        tradie_reviews=tradie_reviews_for(data, user),
        client_reviews=client_reviews_for(data, user),
        pending=pending_reviews(data, user),
    )
