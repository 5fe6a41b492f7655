"""Application wiring: one object holding the stores and controllers.

The CLI (and any other front end) builds a MarketplaceApp once and works
through its controllers; the stores are shared between them.
"""

import logging
from typing import Optional

import requests

from tradiestop.config.settings import TradieStopConfig, get_config
from tradiestop.controllers import (
    AuthController,
    BookingController,
    InvoiceController,
    ReviewController,
    SettingsController,
    SupportController,
    UserAdminController,
)
from tradiestop.services import ApiClient, MarketplaceApi, RetryHandler, SessionStore
from tradiestop.stores import AuthStore, DataStore, NotificationCenter, ToastCenter
from tradiestop.validators import InputValidator

logger = logging.getLogger(__name__)


class MarketplaceApp:
    """Stores and controllers of one signed-in (or signed-out) user.

    Attributes:
        config: Settings the app was built from
        api: Typed endpoint wrapper
        auth: Current session
        data: Role-scoped data snapshot
        notifications: Notification list and poller
        toasts: Pending toast messages
    """

    def __init__(
        self,
        config: Optional[TradieStopConfig] = None,
        session: Optional[requests.Session] = None,
    ):
        """
        Args:
            config: Settings; the global configuration when omitted
            session: HTTP session handed to the API client (tests)
        """
        self.config = config or get_config()
        self.session_store = SessionStore(self.config.session_file)
        self.client = ApiClient(
            self.config.api_base_url,
            token_provider=self.session_store.token,
            timeout=self.config.request_timeout,
            retry_handler=RetryHandler(
                max_retries=self.config.max_retries,
                base_delay=self.config.retry_delay,
            ),
            session=session,
        )
        self.api = MarketplaceApi(self.client)

        self.auth = AuthStore(self.api, self.session_store)
        self.data = DataStore(self.api, self.auth)
        self.notifications = NotificationCenter(
            self.api, self.auth, poll_interval=self.config.notification_poll_interval
        )
        self.toasts = ToastCenter()

        validator = InputValidator()
        shared = (self.auth, self.data, self.toasts)
        self.auth_controller = AuthController(*shared, notifications=self.notifications)
        self.bookings = BookingController(*shared, validator=validator)
        self.invoices = InvoiceController(*shared, config=self.config, validator=validator)
        self.reviews = ReviewController(*shared, validator=validator)
        self.support = SupportController(*shared, validator=validator)
        self.users = UserAdminController(*shared, validator=validator)
        self.settings = SettingsController(*shared)

        logger.debug(f"Marketplace app ready for {self.config.api_base_url}")

    def refresh(self) -> None:
        """Reload data and notifications of the logged-in user."""
        if not self.auth.is_authenticated:
            return
        self.data.fetch_data()
        self.notifications.fetch()

    def close(self) -> None:
        self.notifications.stop_polling()
        self.client.close()
