"""Notifications of the logged-in user, refreshed on a fixed interval."""

import logging
import threading
from typing import List, Optional

from pydantic import ValidationError

from tradiestop.models.notification import Notification
from tradiestop.services.exceptions import ApiError
from tradiestop.services.marketplace_api import MarketplaceApi
from tradiestop.stores.auth_store import AuthStore

logger = logging.getLogger(__name__)


class NotificationCenter:
    """
    Keeps the notification list and polls the API for new ones.

    Polling runs on a daemon thread at a fixed interval with no backoff.
    A failed fetch is logged and the previous list is kept.

    Example:
        >>> center = NotificationCenter(api, auth, poll_interval=15)  # doctest: +SKIP
        >>> center.start_polling()  # doctest: +SKIP
        >>> center.unread_count  # doctest: +SKIP
        2
    """

    def __init__(
        self, api: MarketplaceApi, auth: AuthStore, poll_interval: float = 15.0
    ):
        self.api = api
        self.auth = auth
        self.poll_interval = poll_interval
        self.is_loading = False
        self._notifications: List[Notification] = []
        self._lock = threading.Lock()
        self._stop = threading.Event()
        self._thread: Optional[threading.Thread] = None

    @property
    def notifications(self) -> List[Notification]:
        with self._lock:
            return list(self._notifications)

    @property
    def unread_count(self) -> int:
        with self._lock:
            return sum(1 for n in self._notifications if not n.read)

    def fetch(self) -> None:
        """Replace the list with the server's; cleared when logged out."""
        if not self.auth.is_authenticated:
            self.clear()
            return
        self.is_loading = True
        try:
            notifications = self.api.fetch_notifications()
        except (ApiError, ValidationError) as e:
            logger.error(f"Failed to fetch notifications: {e}")
            return
        finally:
            self.is_loading = False
        with self._lock:
            self._notifications = notifications

    def mark_all_as_read(self) -> None:
        """Mark everything read on the server, then locally."""
        if not self.auth.is_authenticated:
            return
        try:
            self.api.mark_notifications_read()
        except ApiError as e:
            logger.error(f"Failed to mark notifications as read: {e}")
            return
        with self._lock:
            self._notifications = [
                n.model_copy(update={"read": True}) for n in self._notifications
            ]

    def clear(self) -> None:
        with self._lock:
            self._notifications = []

    def start_polling(self) -> None:
        """Fetch now, then every ``poll_interval`` seconds until stopped."""
        if self._thread is not None and self._thread.is_alive():
            return
        self._stop.clear()
        self.fetch()
        self._thread = threading.Thread(
            target=self._poll_loop, name="notification-poller", daemon=True
        )
        self._thread.start()
        logger.debug(f"Polling notifications every {self.poll_interval}s")

    def _poll_loop(self) -> None:
        while not self._stop.wait(self.poll_interval):
            self.fetch()

    def stop_polling(self) -> None:
        self._stop.set()
        if self._thread is not None:
            self._thread.join(timeout=self.poll_interval)
            self._thread = None

    @property
    def is_polling(self) -> bool:
        return self._thread is not None and self._thread.is_alive()
