"""Domain models for habits, goals and challenges."""

from dataclasses import dataclass
from datetime import datetime

HABIT_FIELDS = frozenset(
    {
        "name",
        "description",
        "type",
        "frequency",
        "time_of_day",
        "status",
        "streak_days",
        "background_color",
    }
)


@dataclass(frozen=True)
class Habit:
    """A recurring habit tracked by a user."""

    id: int
    user_id: int
    name: str
    description: str | None
    type: str
    frequency: str | None
    time_of_day: str | None
    start_date: datetime
    status: str = "active"
    streak_days: int = 0
    background_color: str = "blue"


@dataclass(frozen=True)
class Goal:
    """Daily goal with progress toward a target."""

    id: int
    name: str
    current: float
    target: float
    unit: str
    color: str
    completed: bool = False


@dataclass(frozen=True)
class Challenge:
    """Multi-day challenge with progress counters."""

    id: int
    title: str
    description: str
    current: int
    target: int
    bg_color: str
