"""
Fixtures wiring real stores to a mocked MarketplaceApi.
"""

from unittest.mock import Mock

import pytest

from tradiestop.models import Role
from tradiestop.services.marketplace_api import MarketplaceApi
from tradiestop.services.session_store import SessionStore
from tradiestop.stores import AuthStore, DataStore, NotificationCenter, ToastCenter


@pytest.fixture
def api():
    api = Mock(spec=MarketplaceApi)
    api.fetch_notifications.return_value = []
    return api


@pytest.fixture
def auth(api, tmp_path):
    return AuthStore(api, SessionStore(tmp_path / "session.json"))


@pytest.fixture
def data(api, auth, app_data):
    store = DataStore(api, auth)
    store.data = app_data
    return store


@pytest.fixture
def toasts():
    return ToastCenter()


@pytest.fixture
def notifications(api, auth):
    return NotificationCenter(api, auth)


@pytest.fixture
def stores(auth, data, toasts):
    """Positional arguments of every PageController."""
    return auth, data, toasts


@pytest.fixture
def login_as(auth, client_session, tradie_session, admin_session):
    """Set the current user without going through the API."""
    sessions = {
        Role.CLIENT: client_session,
        Role.TRADIE: tradie_session,
        Role.ADMIN: admin_session,
    }

    def _login(role):
        auth.current_user = sessions[Role(role)]
        return auth.current_user

    return _login


@pytest.fixture
def toast_messages(toasts):
    """Messages of the toasts currently shown."""

    def _messages():
        return [t.message for t in toasts.active()]

    return _messages
