"""Tests for admin reporting."""

from meal_tracker.adapters.memory_store import (
    InMemoryHabitRepository,
    InMemoryMealRepository,
    InMemoryStore,
)
from meal_tracker.domain.catalog import IngredientUsage
from meal_tracker.domain.meals import MealDraft
from meal_tracker.services.admin import AdminService
from meal_tracker.services.habits import HabitService
from meal_tracker.services.meals import MealLogService


def _seed(store: InMemoryStore, meal_log_service: MealLogService) -> None:
    for _ in range(2):
        meal_log_service.log_premade_meal(
            7, 1, meal_type="Dinner", time="7:00 PM", date="2026-03-02"
        )
    meal_log_service.log_meal(
        8,
        MealDraft(
            name="Chicken",
            meal_type="Lunch",
            time="1:00 PM",
            date="2026-03-02",
            usages=(IngredientUsage(ingredient_id=1, quantity=100),),
        ),
    )
    habits = HabitService(InMemoryHabitRepository(store))
    habits.create_habit(9, {"name": "No sugar", "type": "diet"})
    habits.create_habit(9, {"name": "Veg", "type": "diet"})
    habits.create_habit(9, {"name": "Walk", "type": "exercise"})


def test_list_users_summaries(
    store: InMemoryStore, meal_log_service: MealLogService
) -> None:
    _seed(store, meal_log_service)
    service = AdminService(
        meal_repository=InMemoryMealRepository(store),
        habit_repository=InMemoryHabitRepository(store),
    )

    users = service.list_users()

    assert [user.user_id for user in users] == [7, 8, 9]
    assert users[0].meal_count == 2
    assert users[0].calorie_average == 784.0
    assert users[1].calorie_average == 165.0
    assert users[2].habit_count == 3
    assert users[2].calorie_average == 0.0


def test_analytics_counts_ingredients_and_habits(
    store: InMemoryStore, meal_log_service: MealLogService
) -> None:
    _seed(store, meal_log_service)
    service = AdminService(
        meal_repository=InMemoryMealRepository(store),
        habit_repository=InMemoryHabitRepository(store),
    )

    analytics = service.get_analytics()

    assert analytics["user_count"] == 3
    nutrition = analytics["nutrition"]
    assert nutrition["meal_logs_total"] == 3
    assert nutrition["avg_meals_per_user"] == 1.0
    assert nutrition["popular_ingredients"][0] == {"name": "Chicken Breast", "count": 3}
    assert nutrition["popular_cooking_methods"][0] == {"name": "Grilled", "count": 2}
    habits = analytics["habits"]
    assert habits["total_habits"] == 3
    assert habits["popular_habit_types"] == [
        {"name": "diet", "count": 2},
        {"name": "exercise", "count": 1},
    ]


def test_analytics_without_users(store: InMemoryStore) -> None:
    service = AdminService(
        meal_repository=InMemoryMealRepository(store),
        habit_repository=InMemoryHabitRepository(store),
    )

    analytics = service.get_analytics()

    assert analytics["user_count"] == 0
    assert analytics["nutrition"]["avg_meals_per_user"] == 0.0
