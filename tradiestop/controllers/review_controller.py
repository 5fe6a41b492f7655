"""Writing reviews in both directions."""

import logging
from typing import Optional, Union

from pydantic import ValidationError

from tradiestop.controllers.base import ACTION_ERRORS, PageController
from tradiestop.models.booking import Booking
from tradiestop.models.enums import Role
from tradiestop.models.review import (
    ClientReview,
    ClientReviewSubmission,
    Review,
    ReviewSubmission,
)
from tradiestop.validators.input_validators import InputValidator

logger = logging.getLogger(__name__)


class ReviewController(PageController):
    """
    Clients review the tradie of a finished job, tradies review the client.
    The direction follows the current user's role.
    """

    def __init__(self, *args, validator: Optional[InputValidator] = None, **kwargs):
        super().__init__(*args, **kwargs)
        self.validator = validator or InputValidator()

    def write_review(
        self, booking: Booking, rating: int, comment: str
    ) -> Optional[Union[Review, ClientReview]]:
        user = self.user
        if user is None:
            self.toasts.error("Please log in to write a review.")
            return None

        app_data = self.data.data
        if user.role == Role.TRADIE:
            reviewed = (r.booking_id for r in app_data.client_reviews)
        else:
            reviewed = (r.booking_id for r in app_data.reviews)
        report = self.validator.validate_review(booking, user, rating, comment, reviewed)
        if not self._report_invalid(report):
            return None

        try:
            if user.role == Role.TRADIE:
                created = self.data.add_client_review(
                    ClientReviewSubmission(
                        booking_id=booking.id,
                        client_id=booking.client_id,
                        client_name=booking.client_name,
                        rating=rating,
                        comment=comment.strip(),
                    )
                )
                success_message = "Client review submitted successfully!"
            else:
                created = self.data.add_review(
                    ReviewSubmission(
                        booking_id=booking.id,
                        tradie_id=booking.tradie_id,
                        tradie_name=booking.tradie_name,
                        rating=rating,
                        comment=comment.strip(),
                    )
                )
                success_message = "Review submitted successfully!"
        except ACTION_ERRORS + (ValidationError,) as e:
            self._report_failure("Failed to submit review.", e)
            return None

        self.toasts.success(success_message)
        return created
