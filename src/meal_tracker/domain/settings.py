"""User settings domain model."""

from dataclasses import dataclass, fields


@dataclass(frozen=True)
class UserSettings:
    """Display preferences and daily nutrition goals for a user."""

    theme: str = "light"
    accent_color: str = "blue"
    calorie_goal: int = 2000
    protein_goal: int = 150
    carbs_goal: int = 200
    fat_goal: int = 65
    measurement_unit: str = "metric"
    notifications: bool = True
    language: str = "english"
    is_admin: bool = False


SETTINGS_FIELDS = frozenset(item.name for item in fields(UserSettings))
