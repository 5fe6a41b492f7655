"""Support ticket model."""

from pydantic import Field

from tradiestop.models.base import BaseDataModel
from tradiestop.models.enums import Role, SupportTicketStatus


class SupportTicket(BaseDataModel):
    """A help request raised by any user and handled by admins."""

    id: str = Field(..., min_length=1)
    user_id: str
    user_name: str = ""
    user_role: Role
    subject: str
    description: str = ""
    status: SupportTicketStatus = SupportTicketStatus.OPEN
    date: str = ""
