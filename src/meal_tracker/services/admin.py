"""Admin service for reporting."""

from collections import Counter
from dataclasses import dataclass

from meal_tracker.domain.admin import AdminUserSummary
from meal_tracker.domain.meals import UserMeal
from meal_tracker.services.habits import HabitRepository
from meal_tracker.services.meals import MealRepository

TOP_LIMIT = 5


@dataclass
class AdminService:
    """Service for admin dashboards."""

    meal_repository: MealRepository
    habit_repository: HabitRepository

    def list_users(self) -> list[AdminUserSummary]:
        """Return usage summaries for every user with stored data."""
        summaries = []
        for user_id in self._user_ids():
            meals = self.meal_repository.list_meals(user_id)
            habits = self.habit_repository.list_habits(user_id)
            summaries.append(
                AdminUserSummary(
                    user_id=user_id,
                    meal_count=len(meals),
                    habit_count=len(habits),
                    calorie_average=_daily_calorie_average(meals),
                )
            )
        return summaries

    def get_analytics(self) -> dict[str, object]:
        """Return aggregate meal and habit analytics across users."""
        user_ids = self._user_ids()
        ingredient_counts: Counter[str] = Counter()
        method_counts: Counter[str] = Counter()
        habit_types: Counter[str] = Counter()
        meal_total = 0
        habit_total = 0
        for user_id in user_ids:
            meals = self.meal_repository.list_meals(user_id)
            meal_total += len(meals)
            for meal in meals:
                for line in meal.ingredients:
                    ingredient_counts[line.name] += 1
                    if line.cooking_method:
                        method_counts[line.cooking_method] += 1
            habits = self.habit_repository.list_habits(user_id)
            habit_total += len(habits)
            habit_types.update(habit.type for habit in habits)

        user_count = max(len(user_ids), 1)
        return {
            "user_count": len(user_ids),
            "nutrition": {
                "meal_logs_total": meal_total,
                "avg_meals_per_user": round(meal_total / user_count, 1),
                "popular_ingredients": _top(ingredient_counts),
                "popular_cooking_methods": _top(method_counts),
            },
            "habits": {
                "total_habits": habit_total,
                "avg_habits_per_user": round(habit_total / user_count, 1),
                "popular_habit_types": _top(habit_types),
            },
        }

    def _user_ids(self) -> list[int]:
        ids = set(self.meal_repository.list_user_ids())
        ids.update(self.habit_repository.list_user_ids())
        return sorted(ids)


def _daily_calorie_average(meals: list[UserMeal]) -> float:
    per_day: Counter[str] = Counter()
    for meal in meals:
        per_day[meal.date] += meal.total_nutrition.calories
    if not per_day:
        return 0.0
    return round(sum(per_day.values()) / len(per_day), 1)


def _top(counts: Counter[str]) -> list[dict[str, object]]:
    return [
        {"name": name, "count": count}
        for name, count in counts.most_common(TOP_LIMIT)
    ]
