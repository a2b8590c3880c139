"""Statistics over logged meals."""

from dataclasses import dataclass
from datetime import date, timedelta

from meal_tracker.domain.meals import UserMeal
from meal_tracker.domain.stats import (
    DailySummary,
    DailyTotals,
    GoalProgress,
    PeriodSummary,
)
from meal_tracker.services.meals import MealLogService
from meal_tracker.services.nutrition import round_tenth
from meal_tracker.services.user_settings import UserSettingsService

WEEK_DAYS = 7


@dataclass
class StatsService:
    """Service for daily and weekly nutrition statistics."""

    meal_log_service: MealLogService
    user_settings_service: UserSettingsService

    def get_daily_summary(self, user_id: int, day: date) -> DailySummary:
        """Return a day's totals compared with the user's goals."""
        totals = _aggregate_day(day, self.meal_log_service.list_meals(user_id))
        settings = self.user_settings_service.get_settings(user_id)
        return DailySummary(
            totals=totals,
            calories=_progress(totals.calories, settings.calorie_goal),
            protein=_progress(totals.protein, settings.protein_goal),
            carbs=_progress(totals.carbs, settings.carbs_goal),
            fat=_progress(totals.fat, settings.fat_goal),
        )

    def get_week(self, user_id: int, end: date) -> PeriodSummary:
        """Return totals and averages for the seven days ending at ``end``."""
        start = end - timedelta(days=WEEK_DAYS - 1)
        return _aggregate_period(
            start, WEEK_DAYS, self.meal_log_service.list_meals(user_id)
        )


def _aggregate_day(day: date, meals: list[UserMeal]) -> DailyTotals:
    total = DailyTotals(day=day, calories=0, protein=0, carbs=0, fat=0)
    key = day.isoformat()
    for meal in meals:
        if meal.date != key:
            continue
        nutrition = meal.total_nutrition
        total = DailyTotals(
            day=day,
            calories=total.calories + nutrition.calories,
            protein=round_tenth(total.protein + nutrition.protein),
            carbs=round_tenth(total.carbs + nutrition.carbs),
            fat=round_tenth(total.fat + nutrition.fat),
            meal_count=total.meal_count + 1,
        )
    return total


def _aggregate_period(start: date, days: int, meals: list[UserMeal]) -> PeriodSummary:
    daily = [_aggregate_day(start + timedelta(days=offset), meals) for offset in range(days)]
    total_days = max(len(daily), 1)
    return PeriodSummary(
        daily=daily,
        avg_calories=sum(entry.calories for entry in daily) / total_days,
        avg_protein=sum(entry.protein for entry in daily) / total_days,
        avg_carbs=sum(entry.carbs for entry in daily) / total_days,
        avg_fat=sum(entry.fat for entry in daily) / total_days,
    )


def _progress(consumed: float, goal: float) -> GoalProgress:
    percent = round_tenth(consumed / goal * 100) if goal > 0 else 0.0
    return GoalProgress(
        consumed=consumed,
        goal=goal,
        remaining=max(goal - consumed, 0),
        percent=percent,
    )
