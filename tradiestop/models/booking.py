"""Booking model."""

from pydantic import Field

from tradiestop.models.base import BaseDataModel
from tradiestop.models.enums import BookingStatus


class Booking(BaseDataModel):
    """A scheduled engagement between a client and a tradie.

    ``service_date`` is the display string the API stores, e.g.
    ``"June 15, 2024, 09:00"``; see ``calculators.currency.parse_service_date``
    for sorting.

    Example:
        >>> booking = Booking(
        ...     id="b1", client_id="c1", client_name="Alice",
        ...     tradie_id="t1", tradie_name="Bob", tradie_profession="Plumber",
        ...     service_date="June 15, 2024, 09:00",
        ...     status=BookingStatus.REQUESTED, details="Leaking tap",
        ... )
        >>> booking.to_api()["tradieId"]
        't1'
    """

    id: str = Field(..., min_length=1)
    client_id: str
    client_name: str = ""
    client_image_url: str = ""
    tradie_id: str
    tradie_name: str = ""
    tradie_profession: str = ""
    tradie_image_url: str = ""
    service_date: str = ""
    status: BookingStatus
    details: str = ""

    @property
    def is_open(self) -> bool:
        """True while the booking can still change status."""
        return self.status in (BookingStatus.REQUESTED, BookingStatus.CONFIRMED)
