"""Short-lived status messages shown after user actions."""

import itertools
import threading
import time
from typing import Callable, List, Optional

from tradiestop.models.enums import ToastType
from tradiestop.models.notification import ToastMessage

TOAST_LIFETIME = 5.0


class ToastCenter:
    """
    Queue of toasts, each expiring ``lifetime`` seconds after it was added.

    Example:
        >>> toasts = ToastCenter()
        >>> toast = toasts.add_toast("Booking has been confirmed.", ToastType.SUCCESS)
        >>> [t.message for t in toasts.active()]
        ['Booking has been confirmed.']
    """

    def __init__(
        self,
        lifetime: float = TOAST_LIFETIME,
        clock: Optional[Callable[[], float]] = None,
    ):
        self.lifetime = lifetime
        self._clock = clock or time.monotonic
        self._toasts: List[ToastMessage] = []
        self._ids = itertools.count(1)
        self._lock = threading.Lock()

    def add_toast(
        self, message: str, type: ToastType = ToastType.INFO
    ) -> ToastMessage:
        toast = ToastMessage(
            id=str(next(self._ids)),
            message=message,
            type=ToastType(type),
            expires_at=self._clock() + self.lifetime,
        )
        with self._lock:
            self._toasts.append(toast)
        return toast

    def success(self, message: str) -> ToastMessage:
        return self.add_toast(message, ToastType.SUCCESS)

    def error(self, message: str) -> ToastMessage:
        return self.add_toast(message, ToastType.ERROR)

    def info(self, message: str) -> ToastMessage:
        return self.add_toast(message, ToastType.INFO)

    def dismiss(self, toast_id: str) -> None:
        with self._lock:
            self._toasts = [t for t in self._toasts if t.id != toast_id]

    def active(self) -> List[ToastMessage]:
        """Toasts that have not expired yet, oldest first."""
        now = self._clock()
        with self._lock:
            self._toasts = [t for t in self._toasts if t.expires_at > now]
            return list(self._toasts)

    def drain(self) -> List[ToastMessage]:
        """Return the active toasts and clear the queue."""
        toasts = self.active()
        with self._lock:
            self._toasts = []
        return toasts
