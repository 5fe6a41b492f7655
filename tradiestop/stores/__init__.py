"""State containers for the session, marketplace data, notifications and toasts."""

from tradiestop.stores.auth_store import AuthStore, SignupResult
from tradiestop.stores.data_store import DataStore
from tradiestop.stores.notification_center import NotificationCenter
from tradiestop.stores.toast_center import TOAST_LIFETIME, ToastCenter

__all__ = [
    "AuthStore",
    "DataStore",
    "NotificationCenter",
    "SignupResult",
    "TOAST_LIFETIME",
    "ToastCenter",
]
