"""Profile display, editing, photo upload and password change."""

from __future__ import annotations

from typing import Any, Optional

from .auth import TokenStore, end_session
from .errors import AuthError
from .gateway import BudgetApiGateway
from .logging_setup import get_logger
from .models import Profile
from .validation import validate_password_change, validate_photo, validate_profile_update

logger = get_logger(__name__)


class ProfileService:
    """Keeps the last known profile and applies confirmed changes to it."""

    def __init__(self, gateway: BudgetApiGateway, tokens: TokenStore, profile: Optional[Profile] = None):
        self.gateway = gateway
        self.tokens = tokens
        self.profile = profile if profile is not None else Profile()

    def _call(self, method, *args: Any):
        try:
            return method(*args)
        except AuthError as exc:
            end_session(self.tokens, exc)
            raise

    def load(self) -> Profile:
        self.profile = self._call(self.gateway.get_profile)
        return self.profile

    def refresh_photo_url(self) -> Profile:
        url = self._call(self.gateway.get_profile_photo_url)
        if url:
            self.profile = self.profile.with_photo(url)
        return self.profile

    def update(self, **form: Any) -> Profile:
        update = validate_profile_update(**form)
        self.profile = self._call(self.gateway.update_profile, update)
        logger.info("Profile updated for %s", self.profile.username)
        return self.profile

    def upload_photo(self, filename: str, content: bytes, content_type: str) -> str:
        """Upload a new photo and return the server's confirmation message."""
        validate_photo(content, content_type)
        result = self._call(self.gateway.upload_profile_photo, filename, content, content_type)
        self.profile = self.profile.with_photo(result.file_url)
        logger.info("Profile photo updated")
        return result.message

    def change_password(self, current_password: str, new_password: str, confirmation_password: str) -> str:
        fields = validate_password_change(current_password, new_password, confirmation_password)
        message = self._call(self.gateway.change_password, *fields)
        logger.info("Password changed")
        return message
