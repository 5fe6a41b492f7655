"""Login, signup and logout as the login and signup pages perform them."""

import logging

from tradiestop.controllers.base import PageController
from tradiestop.models.user import SignupForm
from tradiestop.stores.notification_center import NotificationCenter
from tradiestop.validators.input_validators import InputValidator

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Invalid credentials. Please try again."
MISSING_CREDENTIALS = "Please enter both User ID and Password."
UNKNOWN_SIGNUP_ERROR = "An unknown error occurred during signup."


class AuthController(PageController):
    """
    Session lifecycle. Data and notifications are loaded after a successful
    login and cleared on logout.
    """

    def __init__(self, *args, notifications: NotificationCenter, **kwargs):
        super().__init__(*args, **kwargs)
        self.notifications = notifications
        self.validator = InputValidator()

    def login(self, user_id: str, password: str) -> bool:
        if not user_id or not password:
            self.toasts.error(MISSING_CREDENTIALS)
            return False
        if not self.auth.login(user_id.strip(), password):
            self.toasts.error(INVALID_CREDENTIALS)
            return False
        self.data.fetch_data()
        self.notifications.fetch()
        self.toasts.success(f"Welcome back, {self.user.name}!")
        return True

    def signup(self, form: SignupForm) -> bool:
        if not self._report_invalid(self.validator.validate_signup(form)):
            return False
        result = self.auth.signup(form)
        if not result.success:
            message = result.error or UNKNOWN_SIGNUP_ERROR
            logger.warning(f"Signup of {form.user_id} failed: {message}")
            self.toasts.error(message)
            return False
        self.data.fetch_data()
        self.notifications.fetch()
        self.toasts.success(f"Welcome to TradieStop, {self.user.name}!")
        return True

    def logout(self) -> None:
        self.notifications.stop_polling()
        self.notifications.clear()
        self.data.clear()
        self.auth.logout()
        self.toasts.info("You have been logged out.")
