"""Data models for the TradieStop client.

This package contains Pydantic models for every record exchanged with the
marketplace API:
- BaseDataModel: Base class with camelCase aliasing
- User, Session: Accounts and the logged-in session
- Tradie, CompanyDetails: Tradesperson profiles
- Booking: Client/tradie engagements
- Invoice, InvoiceItem, LineItem: Billing documents
- Review, ClientReview: Feedback in both directions
- SupportTicket, Notification, Message: Support and messaging
- AppData: The ``/data/all`` snapshot
"""

from tradiestop.models.app_data import AppData
from tradiestop.models.base import BaseDataModel, Money
from tradiestop.models.booking import Booking
from tradiestop.models.enums import (
    TRADIE_PROFESSIONS,
    BookingStatus,
    PaymentStatus,
    Role,
    SupportTicketStatus,
    ToastType,
)
from tradiestop.models.invoice import (
    Invoice,
    InvoiceClient,
    InvoiceCreationPayload,
    InvoiceDraft,
    InvoiceItem,
    InvoiceTradie,
    LineItem,
)
from tradiestop.models.notification import ChartData, Message, Notification, ToastMessage
from tradiestop.models.review import (
    ClientReview,
    ClientReviewSubmission,
    Review,
    ReviewSubmission,
)
from tradiestop.models.support import SupportTicket
from tradiestop.models.tradie import CompanyDetails, Tradie
from tradiestop.models.user import Session, SignupForm, User

__all__ = [
    "AppData",
    "BaseDataModel",
    "Booking",
    "BookingStatus",
    "ChartData",
    "ClientReview",
    "ClientReviewSubmission",
    "CompanyDetails",
    "Invoice",
    "InvoiceClient",
    "InvoiceCreationPayload",
    "InvoiceDraft",
    "InvoiceItem",
    "InvoiceTradie",
    "LineItem",
    "Message",
    "Money",
    "Notification",
    "PaymentStatus",
    "Review",
    "ReviewSubmission",
    "Role",
    "Session",
    "SignupForm",
    "SupportTicket",
    "SupportTicketStatus",
    "TRADIE_PROFESSIONS",
    "ToastMessage",
    "ToastType",
    "Tradie",
    "User",
]
