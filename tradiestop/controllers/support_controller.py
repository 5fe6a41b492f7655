"""Support tickets: raising them and closing them."""

import logging
from typing import Optional

from tradiestop.controllers.base import ACTION_ERRORS, PageController
from tradiestop.models.enums import SupportTicketStatus
from tradiestop.models.support import SupportTicket
from tradiestop.validators.input_validators import InputValidator
from tradiestop.validators.transition_rules import validate_ticket_transition

logger = logging.getLogger(__name__)


class SupportController(PageController):
    def __init__(self, *args, validator: Optional[InputValidator] = None, **kwargs):
        super().__init__(*args, **kwargs)
        self.validator = validator or InputValidator()

    def open_ticket(self, subject: str, description: str) -> Optional[SupportTicket]:
        """Raise a ticket as the current user."""
        if self.user is None:
            self.toasts.error("Please log in to contact support.")
            return None
        report = self.validator.validate_support_ticket(subject, description)
        if not self._report_invalid(report):
            return None
        try:
            ticket = self.data.create_support_ticket(
                subject.strip(), description.strip()
            )
        except ACTION_ERRORS as e:
            self._report_failure("Failed to submit support ticket.", e)
            return None
        self.toasts.success("Support ticket submitted successfully!")
        return ticket

    def close_ticket(self, ticket_id: str) -> bool:
        ticket = self.data.data.find_ticket(ticket_id)
        if ticket is None:
            self.toasts.error(f"Ticket {ticket_id} not found.")
            return False
        try:
            user = self.auth.require_user()
            validate_ticket_transition(
                user.role, ticket.status, SupportTicketStatus.CLOSED
            )
            self.data.update_ticket_status(ticket_id, SupportTicketStatus.CLOSED)
        except ACTION_ERRORS as e:
            self._report_failure("Failed to update ticket.", e)
            return False
        self.toasts.success("Ticket has been marked as closed.")
        return True
