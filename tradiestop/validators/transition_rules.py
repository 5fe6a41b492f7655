"""Status transition rules for bookings, support tickets and invoices.

The server enforces these rules; the client mirrors them to decide which
actions to offer and to refuse obviously illegal requests before sending
them.
"""

from enum import Enum
from typing import Dict, FrozenSet, List, Optional, Tuple

from tradiestop.models.booking import Booking
from tradiestop.models.enums import (
    BookingStatus,
    PaymentStatus,
    Role,
    SupportTicketStatus,
)


class InvalidTransitionError(ValueError):
    """Raised when a status change is not allowed for the acting role."""

    def __init__(self, role: Role, current: Enum, target: Enum) -> None:
        self.role = role
        self.current = current
        self.target = target
        super().__init__(
            f"{role.value} cannot move from {current.value} to {target.value}"
        )


class PermissionDeniedError(Exception):
    """Raised when the current user's role may not perform an action."""


class BookingAction(str, Enum):
    """Actions the bookings page offers for a single booking."""

    ACCEPT = "accept"
    DECLINE = "decline"
    COMPLETE = "complete"
    CANCEL = "cancel"
    RESCHEDULE = "reschedule"
    CREATE_INVOICE = "create_invoice"
    VIEW_INVOICE = "view_invoice"


# Target status of each transition action
ACTION_TARGETS: Dict[BookingAction, BookingStatus] = {
    BookingAction.ACCEPT: BookingStatus.CONFIRMED,
    BookingAction.DECLINE: BookingStatus.CANCELLED,
    BookingAction.COMPLETE: BookingStatus.COMPLETED,
    BookingAction.CANCEL: BookingStatus.CANCELLED,
}

BOOKING_TRANSITIONS: Dict[Tuple[Role, BookingStatus], FrozenSet[BookingStatus]] = {
    (Role.TRADIE, BookingStatus.REQUESTED): frozenset(
        {BookingStatus.CONFIRMED, BookingStatus.CANCELLED}
    ),
    (Role.TRADIE, BookingStatus.CONFIRMED): frozenset({BookingStatus.COMPLETED}),
    (Role.CLIENT, BookingStatus.REQUESTED): frozenset({BookingStatus.CANCELLED}),
    (Role.ADMIN, BookingStatus.REQUESTED): frozenset({BookingStatus.CANCELLED}),
    (Role.ADMIN, BookingStatus.CONFIRMED): frozenset({BookingStatus.CANCELLED}),
}

TICKET_TRANSITIONS: Dict[SupportTicketStatus, FrozenSet[SupportTicketStatus]] = {
    SupportTicketStatus.OPEN: frozenset({SupportTicketStatus.CLOSED}),
    SupportTicketStatus.CLOSED: frozenset(),
}

PAYMENT_TRANSITIONS: Dict[PaymentStatus, FrozenSet[PaymentStatus]] = {
    PaymentStatus.PENDING: frozenset({PaymentStatus.PAID, PaymentStatus.OVERDUE}),
    PaymentStatus.OVERDUE: frozenset({PaymentStatus.PAID}),
    PaymentStatus.PAID: frozenset(),
}

RESCHEDULABLE = frozenset({BookingStatus.REQUESTED, BookingStatus.CONFIRMED})


def allowed_transitions(role: Role, status: BookingStatus) -> FrozenSet[BookingStatus]:
    """Statuses a booking in ``status`` may move to when ``role`` acts.

    Example:
        >>> sorted(s.value for s in allowed_transitions(Role.TRADIE, BookingStatus.REQUESTED))
        ['Cancelled', 'Confirmed']
    """
    return BOOKING_TRANSITIONS.get((role, status), frozenset())


def can_transition(role: Role, current: BookingStatus, target: BookingStatus) -> bool:
    return target in allowed_transitions(role, current)


def validate_transition(
    role: Role, current: BookingStatus, target: BookingStatus
) -> None:
    """Raise InvalidTransitionError unless the booking move is allowed."""
    if not can_transition(role, current, target):
        raise InvalidTransitionError(role, current, target)


def can_reschedule(role: Role, status: BookingStatus) -> bool:
    """Only clients reschedule, and only bookings that are still open."""
    return role == Role.CLIENT and status in RESCHEDULABLE


def can_close_ticket(status: SupportTicketStatus) -> bool:
    return SupportTicketStatus.CLOSED in TICKET_TRANSITIONS[status]


def validate_ticket_transition(
    role: Role, current: SupportTicketStatus, target: SupportTicketStatus
) -> None:
    if target not in TICKET_TRANSITIONS[current]:
        raise InvalidTransitionError(role, current, target)


def validate_payment_transition(
    role: Role, current: PaymentStatus, target: PaymentStatus
) -> None:
    if target not in PAYMENT_TRANSITIONS[current]:
        raise InvalidTransitionError(role, current, target)


def available_booking_actions(
    role: Role, booking: Booking, existing_invoice_id: Optional[str] = None
) -> List[BookingAction]:
    """Actions offered for a booking, in the order the page shows them.

    Args:
        role: Role of the current user
        booking: The booking being displayed
        existing_invoice_id: Id of the invoice issued for the booking, if any

    Returns:
        Ordered list of BookingAction; empty for terminal bookings with
        nothing to show

    Example:
        >>> booking = Booking(
        ...     id="b1", client_id="c1", tradie_id="t1",
        ...     status=BookingStatus.COMPLETED,
        ... )
        >>> available_booking_actions(Role.TRADIE, booking)
        [<BookingAction.CREATE_INVOICE: 'create_invoice'>]
    """
    status = booking.status
    actions: List[BookingAction] = []

    if role == Role.TRADIE:
        if status == BookingStatus.REQUESTED:
            actions.extend([BookingAction.DECLINE, BookingAction.ACCEPT])
        elif status == BookingStatus.CONFIRMED:
            actions.append(BookingAction.COMPLETE)
        elif status == BookingStatus.COMPLETED:
            actions.append(
                BookingAction.VIEW_INVOICE
                if existing_invoice_id
                else BookingAction.CREATE_INVOICE
            )
    elif role == Role.CLIENT:
        if can_reschedule(role, status):
            actions.append(BookingAction.RESCHEDULE)
        if status == BookingStatus.REQUESTED:
            actions.append(BookingAction.CANCEL)
        if status == BookingStatus.COMPLETED:
            actions.append(BookingAction.VIEW_INVOICE)
    elif role == Role.ADMIN:
        if can_transition(role, status, BookingStatus.CANCELLED):
            actions.append(BookingAction.CANCEL)

    return actions
