"""Supabase repository for goals and challenges."""

from dataclasses import dataclass

from supabase import Client

from meal_tracker.domain.habits import Challenge, Goal
from meal_tracker.services.goals import GoalRepository


@dataclass
class SupabaseGoalRepository(GoalRepository):
    """Supabase implementation for goals and challenges."""

    client: Client

    def list_goals(self, user_id: int) -> list[Goal]:
        """Return a user's goals."""
        response = (
            self.client.table("goals")
            .select("id, name, current, target, unit, color, completed")
            .eq("user_id", user_id)
            .order("id", desc=False)
            .execute()
        )
        return [
            Goal(
                id=int(row["id"]),
                name=str(row.get("name", "")),
                current=float(row.get("current", 0)),
                target=float(row.get("target", 0)),
                unit=str(row.get("unit") or ""),
                color=str(row.get("color") or ""),
                completed=bool(row.get("completed", False)),
            )
            for row in response.data or []
        ]

    def list_challenges(self, user_id: int) -> list[Challenge]:
        """Return a user's challenges."""
        response = (
            self.client.table("challenges")
            .select("id, title, description, current, target, bg_color")
            .eq("user_id", user_id)
            .order("id", desc=False)
            .execute()
        )
        return [
            Challenge(
                id=int(row["id"]),
                title=str(row.get("title", "")),
                description=str(row.get("description") or ""),
                current=int(row.get("current", 0)),
                target=int(row.get("target", 0)),
                bg_color=str(row.get("bg_color") or ""),
            )
            for row in response.data or []
        ]
