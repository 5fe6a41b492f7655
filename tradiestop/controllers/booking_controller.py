"""Booking page actions: status changes, rescheduling and new requests."""

import datetime as dt
import logging
from typing import Optional, Union

from tradiestop.calculators.currency import format_service_date
from tradiestop.controllers.base import ACTION_ERRORS, PageController
from tradiestop.models.booking import Booking
from tradiestop.models.enums import BookingStatus
from tradiestop.validators.input_validators import InputValidator
from tradiestop.validators.transition_rules import (
    ACTION_TARGETS,
    BookingAction,
    PermissionDeniedError,
    can_reschedule,
    validate_transition,
)

logger = logging.getLogger(__name__)

UPDATE_FAILED = "Failed to update booking."


class BookingController(PageController):
    """
    Accept, decline, complete, cancel, reschedule and request bookings.

    Every action returns True on success. Failures are toasted and logged.
    """

    def __init__(self, *args, validator: Optional[InputValidator] = None, **kwargs):
        super().__init__(*args, **kwargs)
        self.validator = validator or InputValidator()

    def _find(self, booking_id: str) -> Optional[Booking]:
        booking = self.data.data.find_booking(booking_id)
        if booking is None:
            self.toasts.error(f"Booking {booking_id} not found.")
        return booking

    def set_status(self, booking_id: str, status: BookingStatus) -> bool:
        """Move a booking to ``status`` if the current role may do so."""
        booking = self._find(booking_id)
        if booking is None:
            return False
        try:
            user = self.auth.require_user()
            validate_transition(user.role, booking.status, status)
            self.data.update_booking_status(booking_id, status)
        except ACTION_ERRORS as e:
            self._report_failure(UPDATE_FAILED, e)
            return False
        self.toasts.success(f"Booking has been {status.value.lower()}.")
        return True

    def perform(self, booking_id: str, action: BookingAction) -> bool:
        """Run a status-changing BookingAction."""
        if action not in ACTION_TARGETS:
            raise ValueError(f"{action.value} does not change the booking status")
        return self.set_status(booking_id, ACTION_TARGETS[action])

    def accept(self, booking_id: str) -> bool:
        return self.set_status(booking_id, BookingStatus.CONFIRMED)

    def decline(self, booking_id: str) -> bool:
        return self.set_status(booking_id, BookingStatus.CANCELLED)

    def complete(self, booking_id: str) -> bool:
        return self.set_status(booking_id, BookingStatus.COMPLETED)

    def cancel(self, booking_id: str) -> bool:
        return self.set_status(booking_id, BookingStatus.CANCELLED)

    def reschedule(
        self,
        booking_id: str,
        day: Union[str, dt.date],
        time: Union[str, dt.time] = "09:00",
    ) -> bool:
        """Move an open booking of the current client to a new date and time."""
        booking = self._find(booking_id)
        if booking is None:
            return False
        try:
            user = self.auth.require_user()
            if not can_reschedule(user.role, booking.status):
                raise PermissionDeniedError(
                    f"{user.role.value} cannot reschedule a "
                    f"{booking.status.value.lower()} booking"
                )
            new_date = format_service_date(day, time)
            self.data.reschedule_booking(booking_id, new_date)
        except ACTION_ERRORS + (ValueError,) as e:
            self._report_failure("Failed to reschedule booking.", e)
            return False
        self.toasts.success("Booking rescheduled successfully!")
        return True

    def request_booking(
        self,
        tradie_id: str,
        day: Union[str, dt.date],
        time: Union[str, dt.time],
        details: str,
    ) -> Optional[Booking]:
        """Send a booking request from the current client to a tradie."""
        user = self.user
        if user is None:
            self.toasts.error("Please log in to book a tradie.")
            return None
        known = [t.id for t in self.data.data.tradies] or None
        if not self._report_invalid(
            self.validator.validate_booking_request(user, tradie_id, details, known)
        ):
            return None
        try:
            service_date = format_service_date(day, time)
            booking = self.data.create_booking(tradie_id, service_date, details.strip())
        except ACTION_ERRORS + (ValueError,) as e:
            self._report_failure("Failed to send booking request.", e)
            return None
        self.toasts.success("Booking request sent successfully!")
        return booking
