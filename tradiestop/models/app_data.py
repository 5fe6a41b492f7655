"""The role-scoped snapshot returned by ``GET /data/all``."""

from typing import List, Optional

from pydantic import Field

from tradiestop.models.base import BaseDataModel
from tradiestop.models.booking import Booking
from tradiestop.models.invoice import Invoice
from tradiestop.models.notification import Message
from tradiestop.models.review import ClientReview, Review
from tradiestop.models.support import SupportTicket
from tradiestop.models.tradie import Tradie
from tradiestop.models.user import User


class AppData(BaseDataModel):
    """Everything the current user is allowed to see.

    The server decides the scope by role; an empty AppData is the logged-out
    state.
    """

    users: List[User] = Field(default_factory=list)
    tradies: List[Tradie] = Field(default_factory=list)
    bookings: List[Booking] = Field(default_factory=list)
    messages: List[Message] = Field(default_factory=list)
    invoices: List[Invoice] = Field(default_factory=list)
    reviews: List[Review] = Field(default_factory=list)
    client_reviews: List[ClientReview] = Field(default_factory=list)
    support_tickets: List[SupportTicket] = Field(default_factory=list)

    def find_booking(self, booking_id: str) -> Optional[Booking]:
        return next((b for b in self.bookings if b.id == booking_id), None)

    def find_invoice(self, invoice_id: str) -> Optional[Invoice]:
        return next((i for i in self.invoices if i.id == invoice_id), None)

    def find_tradie(self, tradie_id: str) -> Optional[Tradie]:
        return next((t for t in self.tradies if t.id == tradie_id), None)

    def find_user(self, user_id: str) -> Optional[User]:
        return next((u for u in self.users if u.id == user_id), None)

    def find_ticket(self, ticket_id: str) -> Optional[SupportTicket]:
        return next((t for t in self.support_tickets if t.id == ticket_id), None)

    def invoice_for_booking(self, booking_id: str) -> Optional[Invoice]:
        return next((i for i in self.invoices if i.booking_id == booking_id), None)
