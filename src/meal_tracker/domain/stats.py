"""Domain models for statistics."""

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class DailyTotals:
    """Daily total macros."""

    day: date
    calories: float
    protein: float
    carbs: float
    fat: float
    meal_count: int = 0


@dataclass(frozen=True)
class GoalProgress:
    """Consumption against one daily goal."""

    consumed: float
    goal: float
    remaining: float
    percent: float


@dataclass(frozen=True)
class DailySummary:
    """Daily totals compared with the user's goals."""

    totals: DailyTotals
    calories: GoalProgress
    protein: GoalProgress
    carbs: GoalProgress
    fat: GoalProgress


@dataclass(frozen=True)
class PeriodSummary:
    """Aggregated totals for a period."""

    daily: list[DailyTotals]
    avg_calories: float
    avg_protein: float
    avg_carbs: float
    avg_fat: float
