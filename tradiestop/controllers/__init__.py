"""Page-level actions: validate input, call the stores, report via toasts."""

from tradiestop.controllers.auth_controller import AuthController
from tradiestop.controllers.base import ACTION_ERRORS, PageController
from tradiestop.controllers.booking_controller import BookingController
from tradiestop.controllers.invoice_controller import (
    THEME_COLORS,
    InvoiceController,
    generate_invoice_number,
)
from tradiestop.controllers.review_controller import ReviewController
from tradiestop.controllers.settings_controller import SettingsController
from tradiestop.controllers.support_controller import SupportController
from tradiestop.controllers.user_admin_controller import UserAdminController

__all__ = [
    "ACTION_ERRORS",
    "AuthController",
    "BookingController",
    "InvoiceController",
    "PageController",
    "ReviewController",
    "SettingsController",
    "SupportController",
    "THEME_COLORS",
    "UserAdminController",
    "generate_invoice_number",
]
