"""Habit tracking service."""

import logging
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Protocol

from meal_tracker.domain.habits import HABIT_FIELDS, Habit

_logger = logging.getLogger(__name__)


class HabitRepository(Protocol):
    """Persistence interface for per-user habit collections."""

    def list_habits(self, user_id: int) -> list[Habit]:
        """Return a user's habits in insertion order."""

    def create_habit(
        self, user_id: int, payload: dict[str, object], start_date: datetime
    ) -> Habit:
        """Create a habit starting at ``start_date`` and return it."""

    def update_habit(
        self, user_id: int, habit_id: int, changes: dict[str, object]
    ) -> Habit | None:
        """Replace the given fields of a habit and return it."""

    def delete_habit(self, user_id: int, habit_id: int) -> bool:
        """Delete a habit, returning False when it does not exist."""

    def list_user_ids(self) -> list[int]:
        """Return ids of users that own a habit collection."""


@dataclass
class HabitService:
    """Application service for habit CRUD."""

    repository: HabitRepository

    def list_habits(self, user_id: int) -> list[Habit]:
        """Return the user's habits."""
        return self.repository.list_habits(user_id)

    def create_habit(self, user_id: int, payload: dict[str, object]) -> Habit:
        """Create an active habit with an empty streak starting now."""
        fields = _known_fields(payload)
        fields["status"] = "active"
        fields["streak_days"] = 0
        habit = self.repository.create_habit(
            user_id, fields, start_date=datetime.now(tz=UTC)
        )
        _logger.info("Habit created: user_id=%s habit_id=%s", user_id, habit.id)
        return habit

    def update_habit(
        self, user_id: int, habit_id: int, changes: dict[str, object]
    ) -> Habit | None:
        """Apply a partial update to a habit."""
        return self.repository.update_habit(user_id, habit_id, _known_fields(changes))

    def delete_habit(self, user_id: int, habit_id: int) -> bool:
        """Delete one of the user's habits."""
        return self.repository.delete_habit(user_id, habit_id)


def _known_fields(payload: dict[str, object]) -> dict[str, object]:
    return {key: value for key, value in payload.items() if key in HABIT_FIELDS}
