"""
Unit tests for AuthController.
"""

import pytest

from tradiestop.controllers.auth_controller import (
    INVALID_CREDENTIALS,
    MISSING_CREDENTIALS,
    AuthController,
)
from tradiestop.models import AppData, Role, SignupForm, User
from tradiestop.services.exceptions import ApiError


@pytest.fixture
def controller(stores, notifications):
    return AuthController(*stores, notifications=notifications)


class TestLogin:
    """Test cases for logging in and out."""

    def test_missing_credentials(self, controller, api, toast_messages):
        assert controller.login("client-1", "") is False

        assert toast_messages() == [MISSING_CREDENTIALS]
        api.login.assert_not_called()

    def test_invalid_credentials(self, controller, api, toast_messages):
        api.login.side_effect = ApiError("Invalid credentials", 401)

        assert controller.login("client-1", "wrong") is False

        assert toast_messages() == [INVALID_CREDENTIALS]

    def test_success_loads_data(self, controller, api, client_session, app_data, toast_messages):
        api.login.return_value = client_session
        api.fetch_all_data.return_value = app_data

        assert controller.login(" client-1 ", "secret") is True

        api.login.assert_called_once_with("client-1", "secret")
        api.fetch_all_data.assert_called_once()
        api.fetch_notifications.assert_called_once()
        assert toast_messages() == ["Welcome back, Alice Walker!"]

    def test_logout_clears_everything(self, controller, auth, data, login_as, toast_messages):
        login_as(Role.CLIENT)

        controller.logout()

        assert auth.current_user is None
        assert data.data == AppData()
        assert toast_messages() == ["You have been logged out."]


class TestSignup:
    """Test cases for signing up."""

    def test_invalid_form_is_not_sent(self, controller, api, toast_messages):
        form = SignupForm(user_id="x", name="X", password="a", confirm_password="b")

        assert controller.signup(form) is False

        assert toast_messages() == ["Passwords do not match."]
        api.create_user.assert_not_called()

    def test_server_error_is_shown(self, controller, api, toast_messages):
        api.create_user.side_effect = ApiError("User ID already exists", 409)
        form = SignupForm(user_id="x", name="X", password="a", confirm_password="a")

        assert controller.signup(form) is False

        assert toast_messages() == ["User ID already exists"]

    def test_success_logs_in(self, controller, api, client_session, app_data, toast_messages):
        api.create_user.return_value = User(
            id="client-1", role=Role.CLIENT, name="Alice Walker", password="a"
        )
        api.login.return_value = client_session
        api.fetch_all_data.return_value = app_data
        form = SignupForm(
            user_id="client-1", name="Alice Walker", password="a", confirm_password="a"
        )

        assert controller.signup(form) is True

        assert toast_messages() == ["Welcome to TradieStop, Alice Walker!"]
