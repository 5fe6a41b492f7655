"""Notification, message and toast models."""

from typing import List, Optional

from pydantic import Field

from tradiestop.models.base import BaseDataModel
from tradiestop.models.enums import ToastType


class Notification(BaseDataModel):
    """A server-side notification for one user.

    ``link`` names the page to open when the notification is followed
    (e.g. ``"Bookings"``).
    """

    id: str
    user_id: str
    message: str
    link: Optional[str] = None
    read: bool = False
    timestamp: str = ""


class Message(BaseDataModel):
    """Preview of a conversation shown on the client dashboard."""

    id: str
    sender_name: str
    snippet: str = ""
    timestamp: str = ""
    avatar_url: str = ""


class ToastMessage(BaseDataModel):
    """A transient status message shown to the user after an action."""

    id: str
    message: str
    type: ToastType = ToastType.INFO
    expires_at: float = 0.0


class ChartData(BaseDataModel):
    """Labels and values of a bar chart."""

    labels: List[str] = Field(default_factory=list)
    data: List[float] = Field(default_factory=list)
