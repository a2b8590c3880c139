"""Supabase repository for user settings."""

from dataclasses import asdict, dataclass, replace
from datetime import UTC, datetime

from supabase import Client

from meal_tracker.domain.settings import SETTINGS_FIELDS, UserSettings
from meal_tracker.services.user_settings import UserSettingsRepository


@dataclass
class SupabaseUserSettingsRepository(UserSettingsRepository):
    """Supabase implementation for user settings.

    Updates of an existing row only send the changed columns, so concurrent
    partial updates do not overwrite each other.
    """

    client: Client

    def get_settings(self, user_id: int) -> UserSettings | None:
        """Return the stored settings for a user."""
        response = (
            self.client.table("user_settings")
            .select("*")
            .eq("user_id", user_id)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_settings(response.data[0])

    def update_settings(
        self, user_id: int, changes: dict[str, object]
    ) -> UserSettings:
        """Update changed columns, creating the row from defaults if missing."""
        updated_at = datetime.now(tz=UTC).isoformat()
        if changes:
            response = (
                self.client.table("user_settings")
                .update({**changes, "updated_at": updated_at})
                .eq("user_id", user_id)
                .execute()
            )
            if response.data:
                return _parse_settings(response.data[0])
        current = self.get_settings(user_id)
        if current is not None and not changes:
            return current
        settings = replace(current or UserSettings(), **changes)
        payload = asdict(settings)
        payload["user_id"] = user_id
        payload["updated_at"] = updated_at
        self.client.table("user_settings").upsert(payload).execute()
        return settings


def _parse_settings(row: dict[str, object]) -> UserSettings:
    return UserSettings(
        **{key: value for key, value in row.items() if key in SETTINGS_FIELDS}
    )
