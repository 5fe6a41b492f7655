"""Admin user management: adding and deleting accounts."""

import logging
from typing import Optional

from tradiestop.controllers.base import ACTION_ERRORS, PageController
from tradiestop.models.enums import Role
from tradiestop.models.user import SignupForm, User
from tradiestop.validators.input_validators import InputValidator
from tradiestop.validators.transition_rules import PermissionDeniedError

logger = logging.getLogger(__name__)


class UserAdminController(PageController):
    """Admin-only actions of the users page."""

    def __init__(self, *args, validator: Optional[InputValidator] = None, **kwargs):
        super().__init__(*args, **kwargs)
        self.validator = validator or InputValidator()

    def _require_admin(self) -> User:
        user = self.auth.require_user()
        if user.role != Role.ADMIN:
            raise PermissionDeniedError("Only admins can manage users")
        return user

    def add_user(self, form: SignupForm) -> Optional[User]:
        """Create an account; the admin form has no password confirmation."""
        form = form.model_copy(update={"confirm_password": None})
        if not self._report_invalid(self.validator.validate_signup(form)):
            return None
        try:
            self._require_admin()
            user = self.data.add_user(form.to_signup_body())
        except ACTION_ERRORS as e:
            # The server message (e.g. a taken user id) is what the admin sees
            message = getattr(e, "message", None) or "Failed to create user."
            self._report_failure(message, e)
            return None
        self.toasts.success("User created successfully!")
        return user

    def delete_user(self, user_id: str) -> bool:
        target = self.data.data.find_user(user_id)
        name = target.name if target else user_id
        try:
            admin = self._require_admin()
            if admin.id == user_id:
                raise PermissionDeniedError("Admins cannot delete their own account")
            self.data.delete_user(user_id)
        except ACTION_ERRORS as e:
            self._report_failure("Failed to delete user.", e)
            return False
        self.toasts.success(f"User {name} deleted successfully.")
        return True
