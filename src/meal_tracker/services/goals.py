"""Read-only goals and challenges."""

from dataclasses import dataclass
from typing import Protocol

from meal_tracker.domain.habits import Challenge, Goal


class GoalRepository(Protocol):
    """Persistence interface for goals and challenges."""

    def list_goals(self, user_id: int) -> list[Goal]:
        """Return a user's daily goals."""

    def list_challenges(self, user_id: int) -> list[Challenge]:
        """Return a user's challenges."""


@dataclass
class GoalService:
    """Service for goal and challenge listings."""

    repository: GoalRepository

    def list_goals(self, user_id: int) -> list[Goal]:
        """Return the user's goals."""
        return self.repository.list_goals(user_id)

    def list_challenges(self, user_id: int) -> list[Challenge]:
        """Return the user's challenges."""
        return self.repository.list_challenges(user_id)
