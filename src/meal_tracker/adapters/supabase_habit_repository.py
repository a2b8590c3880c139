"""Supabase repository for habits."""

from dataclasses import dataclass
from datetime import datetime

from supabase import Client

from meal_tracker.domain.habits import Habit
from meal_tracker.services.habits import HabitRepository

_COLUMNS = (
    "id, user_id, name, description, type, frequency, time_of_day, start_date, "
    "status, streak_days, background_color"
)


@dataclass
class SupabaseHabitRepository(HabitRepository):
    """Supabase implementation for habits."""

    client: Client

    def list_habits(self, user_id: int) -> list[Habit]:
        """Return a user's habits ordered by id."""
        response = (
            self.client.table("habits")
            .select(_COLUMNS)
            .eq("user_id", user_id)
            .order("id", desc=False)
            .execute()
        )
        return [_parse_habit(row) for row in response.data or []]

    def create_habit(
        self, user_id: int, payload: dict[str, object], start_date: datetime
    ) -> Habit:
        """Insert a habit row and return it."""
        row = dict(payload)
        row["user_id"] = user_id
        row["start_date"] = start_date.isoformat()
        response = self.client.table("habits").insert(row).execute()
        if not response.data:
            raise RuntimeError("Failed to create habit")
        return _parse_habit(response.data[0])

    def update_habit(
        self, user_id: int, habit_id: int, changes: dict[str, object]
    ) -> Habit | None:
        """Update habit columns and return the row."""
        response = (
            self.client.table("habits")
            .update(changes)
            .eq("user_id", user_id)
            .eq("id", habit_id)
            .execute()
        )
        if not response.data:
            return None
        return _parse_habit(response.data[0])

    def delete_habit(self, user_id: int, habit_id: int) -> bool:
        """Delete a habit row."""
        response = (
            self.client.table("habits")
            .delete()
            .eq("user_id", user_id)
            .eq("id", habit_id)
            .execute()
        )
        return bool(response.data)

    def list_user_ids(self) -> list[int]:
        """Return distinct owners of habit rows."""
        response = self.client.table("habits").select("user_id").execute()
        return sorted({int(row["user_id"]) for row in response.data or []})


def _parse_habit(row: dict[str, object]) -> Habit:
    return Habit(
        id=int(row["id"]),
        user_id=int(row["user_id"]),
        name=str(row.get("name", "")),
        description=row.get("description"),
        type=str(row.get("type") or "diet"),
        frequency=row.get("frequency"),
        time_of_day=row.get("time_of_day"),
        start_date=datetime.fromisoformat(str(row["start_date"])),
        status=str(row.get("status") or "active"),
        streak_days=int(row.get("streak_days") or 0),
        background_color=str(row.get("background_color") or "blue"),
    )
