"""Settings page: profile and company details."""

import logging
from typing import Optional

from tradiestop.controllers.base import ACTION_ERRORS, PageController
from tradiestop.models.tradie import CompanyDetails

logger = logging.getLogger(__name__)


class SettingsController(PageController):
    def save_profile(
        self, name: Optional[str] = None, image_url: Optional[str] = None
    ) -> bool:
        """Update name and/or avatar, in the data snapshot and the session."""
        if name is not None and not name.strip():
            self.toasts.error("Name cannot be empty.")
            return False
        try:
            updated = self.data.update_user_profile(
                name=name.strip() if name is not None else None, image_url=image_url
            )
        except ACTION_ERRORS as e:
            self._report_failure("Failed to update profile.", e)
            return False
        self.auth.update_current_user(name=updated.name, image_url=updated.image_url)
        self.toasts.success("Profile updated successfully!")
        return True

    def company_details(self) -> Optional[CompanyDetails]:
        """Company details of the current tradie, if any."""
        user = self.user
        if user is None:
            return None
        tradie = self.data.data.find_tradie(user.id)
        return tradie.company_details if tradie else None

    def save_company_details(self, details: CompanyDetails) -> bool:
        try:
            self.data.update_company_details(details)
        except ACTION_ERRORS as e:
            self._report_failure("Failed to update details.", e)
            return False
        self.toasts.success("Company details updated successfully!")
        return True
