"""
Typed operations of the marketplace API.

Every method sends one request through ApiClient and validates the response
into the matching model. API errors propagate to the caller.
"""

import logging
from typing import List, Optional
from urllib.parse import quote

from tradiestop.models.app_data import AppData
from tradiestop.models.booking import Booking
from tradiestop.models.enums import BookingStatus, PaymentStatus, SupportTicketStatus
from tradiestop.models.invoice import Invoice, InvoiceCreationPayload
from tradiestop.models.notification import Notification
from tradiestop.models.review import (
    ClientReview,
    ClientReviewSubmission,
    Review,
    ReviewSubmission,
)
from tradiestop.models.support import SupportTicket
from tradiestop.models.tradie import CompanyDetails, Tradie
from tradiestop.models.user import Session, User
from tradiestop.services.api_client import ApiClient

logger = logging.getLogger(__name__)


def _path_id(value: str) -> str:
    return quote(str(value), safe="")


class MarketplaceApi:
    """
    One method per API endpoint.

    Example:
        >>> api = MarketplaceApi(ApiClient("http://localhost:5001/api"))
        >>> session = api.login("client-1", "secret")  # doctest: +SKIP
    """

    def __init__(self, client: ApiClient):
        self.client = client

    # --- Auth ---

    def login(self, user_id: str, password: str) -> Session:
        data = self.client.post(
            "/auth/login", {"userId": user_id, "password": password}
        )
        return Session.model_validate(data)

    def create_user(self, user_data: dict) -> User:
        """Create an account (signup page and admin "Add user")."""
        return User.model_validate(self.client.post("/auth/signup", user_data))

    # --- Reads ---

    def fetch_all_data(self) -> AppData:
        return AppData.model_validate(self.client.get("/data/all") or {})

    def fetch_notifications(self) -> List[Notification]:
        data = self.client.get("/data/notifications") or []
        return [Notification.model_validate(item) for item in data]

    # --- Mutations ---

    def mark_notifications_read(self) -> None:
        self.client.put("/data/notifications/read")

    def update_booking_status(self, booking_id: str, status: BookingStatus) -> Booking:
        data = self.client.put(
            f"/bookings/{_path_id(booking_id)}/status", {"status": status.value}
        )
        return Booking.model_validate(data)

    def reschedule_booking(self, booking_id: str, new_date: str) -> Booking:
        data = self.client.put(
            f"/bookings/{_path_id(booking_id)}/reschedule", {"newDate": new_date}
        )
        return Booking.model_validate(data)

    def create_booking(self, tradie_id: str, service_date: str, details: str) -> Booking:
        data = self.client.post(
            "/bookings",
            {"tradieId": tradie_id, "serviceDate": service_date, "details": details},
        )
        return Booking.model_validate(data)

    def update_ticket_status(
        self, ticket_id: str, status: SupportTicketStatus
    ) -> SupportTicket:
        data = self.client.put(
            f"/support/{_path_id(ticket_id)}/status", {"status": status.value}
        )
        return SupportTicket.model_validate(data)

    def create_support_ticket(self, subject: str, description: str) -> SupportTicket:
        data = self.client.post(
            "/support", {"subject": subject, "description": description}
        )
        return SupportTicket.model_validate(data)

    def add_review(self, review: ReviewSubmission) -> Review:
        return Review.model_validate(self.client.post("/reviews", review.to_api()))

    def add_client_review(self, review: ClientReviewSubmission) -> ClientReview:
        data = self.client.post("/reviews/client", review.to_api())
        return ClientReview.model_validate(data)

    def update_user_profile(
        self, name: Optional[str] = None, image_url: Optional[str] = None
    ) -> User:
        updates = {}
        if name is not None:
            updates["name"] = name
        if image_url is not None:
            updates["imageUrl"] = image_url
        return User.model_validate(self.client.put("/users/profile", updates))

    def delete_user(self, user_id: str) -> None:
        self.client.delete(f"/users/{_path_id(user_id)}")

    def update_company_details(self, details: CompanyDetails) -> Tradie:
        data = self.client.put("/tradies/company-details", details.to_api())
        return Tradie.model_validate(data)

    def create_invoice(self, payload: InvoiceCreationPayload) -> Invoice:
        return Invoice.model_validate(self.client.post("/invoices", payload.to_api()))

    def update_invoice_status(self, invoice_id: str, status: PaymentStatus) -> Invoice:
        data = self.client.put(
            f"/invoices/{_path_id(invoice_id)}/status", {"status": status.value}
        )
        return Invoice.model_validate(data)
