"""Tests for Supabase adapter implementations."""

from dataclasses import dataclass, field
from datetime import UTC, datetime

from meal_tracker.adapters.supabase_goal_repository import SupabaseGoalRepository
from meal_tracker.adapters.supabase_habit_repository import SupabaseHabitRepository
from meal_tracker.adapters.supabase_meal_repository import SupabaseMealRepository
from meal_tracker.adapters.supabase_user_settings_repository import (
    SupabaseUserSettingsRepository,
)
from meal_tracker.domain.catalog import NutritionTotal
from meal_tracker.domain.meals import MealDraft, MealIngredientLine
from meal_tracker.domain.settings import UserSettings


@dataclass
class FakeResponse:
    data: list[dict[str, object]] | None


@dataclass
class FakeTable:
    name: str
    response_queue: dict[str, list[list[dict[str, object]]]] = field(
        default_factory=lambda: {
            "select": [],
            "insert": [],
            "update": [],
            "upsert": [],
            "delete": [],
        }
    )
    last_payload: object | None = None
    last_filters: list[tuple[str, object]] = field(default_factory=list)

    def queue(self, action: str, data: list[dict[str, object]]) -> None:
        self.response_queue[action].append(data)

    def select(self, *_args) -> "FakeTable":
        self._action = "select"
        return self

    def insert(self, payload) -> "FakeTable":  # type: ignore[no-untyped-def]
        self._action = "insert"
        self.last_payload = payload
        return self

    def update(self, payload) -> "FakeTable":  # type: ignore[no-untyped-def]
        self._action = "update"
        self.last_payload = payload
        return self

    def upsert(self, payload) -> "FakeTable":  # type: ignore[no-untyped-def]
        self._action = "upsert"
        self.last_payload = payload
        return self

    def delete(self) -> "FakeTable":
        self._action = "delete"
        return self

    def eq(self, column: str, value) -> "FakeTable":  # type: ignore[no-untyped-def]
        self.last_filters.append((column, value))
        return self

    def limit(self, _count: int) -> "FakeTable":
        return self

    def order(self, _column: str, desc: bool = False) -> "FakeTable":
        return self

    def execute(self) -> FakeResponse:
        action = getattr(self, "_action", "select")
        queue = self.response_queue.get(action, [])
        data = queue.pop(0) if queue else []
        return FakeResponse(data=data)


@dataclass
class FakeSupabaseClient:
    tables: dict[str, FakeTable] = field(default_factory=dict)

    def table(self, name: str) -> FakeTable:
        if name not in self.tables:
            self.tables[name] = FakeTable(name=name)
        return self.tables[name]


MEAL_ROW = {
    "id": 3,
    "user_id": 7,
    "name": "Dinner",
    "meal_type": "Dinner",
    "time": "7:00 PM",
    "date": "2026-03-02",
    "ingredients": [
        {"name": "Salmon", "quantity": "150g", "calories": 328, "cooking_method": "Baked"}
    ],
    "total_nutrition": {"calories": 328, "protein": 30, "carbs": 0, "fat": 19.5},
}


def test_supabase_meal_repository_create_serializes_snapshot() -> None:
    client = FakeSupabaseClient()
    table = client.table("user_meals")
    table.queue("insert", [MEAL_ROW])

    repository = SupabaseMealRepository(client)
    meal = repository.create_meal(
        7,
        MealDraft(
            name="Dinner",
            meal_type="Dinner",
            time="7:00 PM",
            date="2026-03-02",
            ingredients=(
                MealIngredientLine(
                    name="Salmon", quantity="150g", calories=328, cooking_method="Baked"
                ),
            ),
            total_nutrition=NutritionTotal(calories=328, protein=30, carbs=0, fat=19.5),
        ),
    )

    assert isinstance(table.last_payload, dict)
    assert table.last_payload["user_id"] == 7
    assert table.last_payload["total_nutrition"]["calories"] == 328
    assert table.last_payload["ingredients"][0]["cooking_method"] == "Baked"
    assert meal.id == 3
    assert meal.ingredients[0].name == "Salmon"
    assert meal.total_nutrition.fat == 19.5


def test_supabase_meal_repository_queries_are_scoped_to_user() -> None:
    client = FakeSupabaseClient()
    table = client.table("user_meals")
    table.queue("select", [MEAL_ROW])
    table.queue("update", [])
    table.queue("delete", [{"id": 3}])

    repository = SupabaseMealRepository(client)
    fetched = repository.get_meal(7, 3)
    updated = repository.update_meal(7, 3, {"name": "Late dinner"})
    deleted = repository.delete_meal(7, 3)

    assert fetched is not None
    assert fetched.date == "2026-03-02"
    assert updated is None
    assert deleted is True
    assert ("user_id", 7) in table.last_filters
    assert ("id", 3) in table.last_filters


def test_supabase_meal_repository_lists_owners() -> None:
    client = FakeSupabaseClient()
    client.table("user_meals").queue(
        "select", [{"user_id": 8}, {"user_id": 7}, {"user_id": 8}]
    )

    assert SupabaseMealRepository(client).list_user_ids() == [7, 8]


def test_supabase_habit_repository() -> None:
    client = FakeSupabaseClient()
    table = client.table("habits")
    started = datetime(2026, 3, 2, tzinfo=UTC)
    table.queue(
        "insert",
        [
            {
                "id": 1,
                "user_id": 7,
                "name": "Walk",
                "type": "exercise",
                "start_date": started.isoformat(),
                "status": "active",
                "streak_days": 0,
            }
        ],
    )

    repository = SupabaseHabitRepository(client)
    habit = repository.create_habit(7, {"name": "Walk", "type": "exercise"}, started)

    assert table.last_payload["start_date"] == started.isoformat()
    assert habit.start_date == started
    assert habit.background_color == "blue"
    assert repository.delete_habit(7, 1) is False


def test_supabase_user_settings_repository() -> None:
    client = FakeSupabaseClient()
    table = client.table("user_settings")
    table.queue("select", [{"user_id": 7, "theme": "dark", "calorie_goal": 1800}])

    repository = SupabaseUserSettingsRepository(client)
    settings = repository.get_settings(7)

    assert settings == UserSettings(theme="dark", calorie_goal=1800)
    assert repository.get_settings(8) is None


def test_supabase_settings_update_sends_only_changed_columns() -> None:
    client = FakeSupabaseClient()
    table = client.table("user_settings")
    table.queue("update", [{"user_id": 7, "theme": "dark", "calorie_goal": 1800}])

    repository = SupabaseUserSettingsRepository(client)
    updated = repository.update_settings(7, {"calorie_goal": 1800})

    assert updated == UserSettings(theme="dark", calorie_goal=1800)
    assert isinstance(table.last_payload, dict)
    assert set(table.last_payload) == {"calorie_goal", "updated_at"}
    assert ("user_id", 7) in table.last_filters


def test_supabase_settings_update_creates_missing_row() -> None:
    client = FakeSupabaseClient()
    table = client.table("user_settings")

    repository = SupabaseUserSettingsRepository(client)
    updated = repository.update_settings(7, {"theme": "dark"})

    assert updated == UserSettings(theme="dark")
    assert isinstance(table.last_payload, dict)
    assert table.last_payload["user_id"] == 7
    assert table.last_payload["theme"] == "dark"
    assert table.last_payload["calorie_goal"] == 2000
    assert "updated_at" in table.last_payload


def test_supabase_goal_repository() -> None:
    client = FakeSupabaseClient()
    client.table("goals").queue(
        "select",
        [{"id": 1, "name": "Water", "current": 3, "target": 8, "unit": "glasses", "color": "bg-blue-500"}],
    )
    client.table("challenges").queue(
        "select",
        [{"id": 2, "title": "Hydration", "description": "", "current": 1, "target": 10, "bg_color": "x"}],
    )

    repository = SupabaseGoalRepository(client)

    assert repository.list_goals(7)[0].completed is False
    assert repository.list_challenges(7)[0].target == 10
