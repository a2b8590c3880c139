"""Admin domain models."""

from dataclasses import dataclass


@dataclass(frozen=True)
class AdminUserSummary:
    """Usage summary of a single user."""

    user_id: int
    meal_count: int
    habit_count: int
    calorie_average: float
