"""Validation layer for user input and status transitions."""

from tradiestop.validators.input_validators import InputValidator
from tradiestop.validators.transition_rules import (
    BookingAction,
    InvalidTransitionError,
    PermissionDeniedError,
    allowed_transitions,
    available_booking_actions,
    can_close_ticket,
    can_reschedule,
    can_transition,
    validate_payment_transition,
    validate_ticket_transition,
    validate_transition,
)
from tradiestop.validators.validation_report import (
    ValidationIssue,
    ValidationReport,
    ValidationSeverity,
)

__all__ = [
    "BookingAction",
    "InputValidator",
    "InvalidTransitionError",
    "PermissionDeniedError",
    "ValidationIssue",
    "ValidationReport",
    "ValidationSeverity",
    "allowed_transitions",
    "available_booking_actions",
    "can_close_ticket",
    "can_reschedule",
    "can_transition",
    "validate_payment_transition",
    "validate_ticket_transition",
    "validate_transition",
]
