"""User settings service."""

from dataclasses import dataclass
from typing import Protocol

from meal_tracker.domain.settings import SETTINGS_FIELDS, UserSettings


class UserSettingsRepository(Protocol):
    """Persistence interface for user settings.

    ``update_settings`` must merge atomically per user id.
    """

    def get_settings(self, user_id: int) -> UserSettings | None:
        """Return the user's settings if stored."""

    def update_settings(
        self, user_id: int, changes: dict[str, object]
    ) -> UserSettings:
        """Merge fields into the stored settings, starting from defaults."""


@dataclass
class UserSettingsService:
    """Service for user settings."""

    repository: UserSettingsRepository

    def get_settings(self, user_id: int) -> UserSettings:
        """Return stored settings, persisting defaults on first access."""
        stored = self.repository.get_settings(user_id)
        if stored is not None:
            return stored
        return self.repository.update_settings(user_id, {})

    def update_settings(
        self, user_id: int, changes: dict[str, object]
    ) -> UserSettings:
        """Merge known fields into the user's settings."""
        fields = {key: value for key, value in changes.items() if key in SETTINGS_FIELDS}
        return self.repository.update_settings(user_id, fields)

    def is_admin(self, user_id: int) -> bool:
        """Return True when the user's settings grant admin access."""
        return self.get_settings(user_id).is_admin
