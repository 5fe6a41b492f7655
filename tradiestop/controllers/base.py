"""Shared plumbing of the page controllers."""

import logging
from typing import Optional

from tradiestop.models.user import Session
from tradiestop.services.exceptions import ApiError, NotAuthenticatedError
from tradiestop.stores.auth_store import AuthStore
from tradiestop.stores.data_store import DataStore
from tradiestop.stores.toast_center import ToastCenter
from tradiestop.validators.transition_rules import (
    InvalidTransitionError,
    PermissionDeniedError,
)
from tradiestop.validators.validation_report import ValidationReport

logger = logging.getLogger(__name__)

# Errors a page action reports as a toast instead of propagating
ACTION_ERRORS = (
    ApiError,
    InvalidTransitionError,
    PermissionDeniedError,
    NotAuthenticatedError,
)


class PageController:
    """Base class: access to the stores plus toast helpers."""

    def __init__(self, auth: AuthStore, data: DataStore, toasts: ToastCenter):
        self.auth = auth
        self.data = data
        self.toasts = toasts

    @property
    def user(self) -> Optional[Session]:
        return self.auth.current_user

    def _report_failure(self, message: str, error: Exception) -> None:
        logger.error(f"{message} ({type(error).__name__}: {error})")
        self.toasts.error(message)

    def _report_invalid(self, report: ValidationReport) -> bool:
        """Toast the first error of a report; True when the input is valid."""
        for warning in report.get_warnings():
            logger.info(f"Validation warning: {warning}")
        if report.is_valid():
            return True
        logger.debug(report.format())
        self.toasts.error(report.first_error_message())
        return False
