"""Enumerations shared by the marketplace records.

Values are the exact strings the API sends and expects.
"""

from enum import Enum


class Role(str, Enum):
    CLIENT = "Client"
    TRADIE = "Tradie"
    ADMIN = "Admin"


class BookingStatus(str, Enum):
    REQUESTED = "Requested"
    CONFIRMED = "Confirmed"
    CANCELLED = "Cancelled"
    COMPLETED = "Completed"


class PaymentStatus(str, Enum):
    PAID = "Paid"
    PENDING = "Pending"
    OVERDUE = "Overdue"


class SupportTicketStatus(str, Enum):
    OPEN = "Open"
    CLOSED = "Closed"


class ToastType(str, Enum):
    SUCCESS = "success"
    ERROR = "error"
    INFO = "info"


TRADIE_PROFESSIONS = (
    "Electrician",
    "Plumber",
    "Carpenter",
    "Painter",
    "Landscaper",
    "HVAC Technician",
    "Roofer",
    "Builder",
    "Handyman",
    "Cleaner",
)
