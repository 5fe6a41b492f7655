"""Authentication state: the logged-in user and their persisted session."""

import logging
from dataclasses import dataclass
from typing import Any, Optional

from tradiestop.models.user import Session, SignupForm
from tradiestop.services.exceptions import ApiError, NotAuthenticatedError
from tradiestop.services.marketplace_api import MarketplaceApi
from tradiestop.services.session_store import SessionStore
from tradiestop.utils.logging_utils import log_function_call

logger = logging.getLogger(__name__)

SIGNUP_FAILED_MESSAGE = "Failed to create user."


@dataclass
class SignupResult:
    """Outcome of a signup attempt; ``error`` carries the API message."""

    success: bool
    error: Optional[str] = None


class AuthStore:
    """
    Holds the current user and keeps it in sync with the session file.

    Example:
        >>> store = AuthStore(api, SessionStore(path))  # doctest: +SKIP
        >>> store.login("client-1", "secret")  # doctest: +SKIP
        True
    """

    def __init__(self, api: MarketplaceApi, session_store: SessionStore):
        self.api = api
        self.session_store = session_store
        self.is_loading = False
        self.current_user: Optional[Session] = session_store.load()

    @property
    def token(self) -> Optional[str]:
        return self.current_user.token if self.current_user else None

    @property
    def is_authenticated(self) -> bool:
        return self.current_user is not None

    def require_user(self) -> Session:
        """Return the current user or raise NotAuthenticatedError."""
        if self.current_user is None:
            raise NotAuthenticatedError("No user logged in")
        return self.current_user

    @log_function_call
    def login(self, user_id: str, password: str) -> bool:
        """Log in and persist the session.

        Returns:
            True on success; failures are logged and return False
        """
        self.is_loading = True
        try:
            session = self.api.login(user_id, password)
        except ApiError as e:
            logger.error(f"Login failed: {e}")
            return False
        finally:
            self.is_loading = False

        self.current_user = session
        self.session_store.save(session)
        logger.info(f"Logged in as {session.id} ({session.role.value})")
        return True

    def logout(self) -> None:
        if self.current_user:
            logger.info(f"Logging out {self.current_user.id}")
        self.current_user = None
        self.session_store.clear()

    def signup(self, form: SignupForm) -> SignupResult:
        """Create an account, then log in with the password the server echoes.

        Returns:
            SignupResult; on API failure ``error`` holds the server message
        """
        self.is_loading = True
        try:
            new_user = self.api.create_user(form.to_signup_body())
        except ApiError as e:
            logger.error(f"Signup failed: {e}")
            return SignupResult(success=False, error=e.message)
        finally:
            self.is_loading = False

        if not new_user.password:
            return SignupResult(success=False, error=SIGNUP_FAILED_MESSAGE)
        return SignupResult(success=self.login(new_user.id, new_user.password))

    def update_current_user(self, **updates: Any) -> None:
        """Merge field updates into the stored session.

        Unknown fields are ignored; no-op when logged out.
        """
        if self.current_user is None:
            return
        known = {k: v for k, v in updates.items() if k in Session.model_fields}
        self.current_user = self.current_user.model_copy(update=known)
        self.session_store.save(self.current_user)
