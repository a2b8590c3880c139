"""Process-wide in-memory store with per-user locking."""

import itertools
import threading
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass, field, replace
from datetime import UTC, date, datetime

from meal_tracker import seed_data
from meal_tracker.domain.catalog import NutritionTotal
from meal_tracker.domain.habits import Challenge, Goal, Habit
from meal_tracker.domain.meals import MealDraft, MealIngredientLine, UserMeal
from meal_tracker.domain.settings import UserSettings
from meal_tracker.services.goals import GoalRepository
from meal_tracker.services.habits import HabitRepository
from meal_tracker.services.meals import MealRepository
from meal_tracker.services.user_settings import UserSettingsRepository


class KeyedLocks:
    """One lock per key, created on first use."""

    def __init__(self) -> None:
        self._guard = threading.Lock()
        self._locks: dict[int, threading.Lock] = {}

    @contextmanager
    def hold(self, key: int) -> Iterator[None]:
        """Hold the lock for ``key`` for the duration of the block."""
        with self._guard:
            lock = self._locks.setdefault(key, threading.Lock())
        with lock:
            yield


@dataclass
class InMemoryStore:
    """Per-user collections shared by the in-memory repositories."""

    meals: dict[int, list[UserMeal]] = field(default_factory=dict)
    habits: dict[int, list[Habit]] = field(default_factory=dict)
    settings: dict[int, UserSettings] = field(default_factory=dict)
    goals: dict[int, list[Goal]] = field(default_factory=dict)
    challenges: dict[int, list[Challenge]] = field(default_factory=dict)
    locks: KeyedLocks = field(default_factory=KeyedLocks)
    _meal_ids: Iterator[int] = field(default_factory=lambda: itertools.count(1))
    _habit_ids: Iterator[int] = field(default_factory=lambda: itertools.count(1))
    _id_lock: threading.Lock = field(default_factory=threading.Lock)

    def next_meal_id(self) -> int:
        with self._id_lock:
            return next(self._meal_ids)

    def next_habit_id(self) -> int:
        with self._id_lock:
            return next(self._habit_ids)


@dataclass
class InMemoryMealRepository(MealRepository):
    """Meal repository over an in-memory store."""

    store: InMemoryStore

    def list_meals(self, user_id: int) -> list[UserMeal]:
        """Return a copy of the user's meals."""
        with self.store.locks.hold(user_id):
            return list(self.store.meals.get(user_id, []))

    def get_meal(self, user_id: int, meal_id: int) -> UserMeal | None:
        """Return a meal by id."""
        with self.store.locks.hold(user_id):
            for meal in self.store.meals.get(user_id, []):
                if meal.id == meal_id:
                    return meal
        return None

    def create_meal(self, user_id: int, draft: MealDraft) -> UserMeal:
        """Append a meal to the user's collection."""
        meal = UserMeal(
            id=self.store.next_meal_id(),
            user_id=user_id,
            name=draft.name,
            meal_type=draft.meal_type,
            time=draft.time,
            date=draft.date,
            ingredients=tuple(draft.ingredients),
            total_nutrition=draft.total_nutrition,
        )
        with self.store.locks.hold(user_id):
            self.store.meals.setdefault(user_id, []).append(meal)
        return meal

    def update_meal(
        self, user_id: int, meal_id: int, changes: dict[str, object]
    ) -> UserMeal | None:
        """Replace fields of a meal in place."""
        with self.store.locks.hold(user_id):
            meals = self.store.meals.get(user_id, [])
            for index, meal in enumerate(meals):
                if meal.id == meal_id:
                    updated = replace(meal, **changes)
                    meals[index] = updated
                    return updated
        return None

    def delete_meal(self, user_id: int, meal_id: int) -> bool:
        """Remove a meal from the user's collection."""
        with self.store.locks.hold(user_id):
            meals = self.store.meals.get(user_id, [])
            for index, meal in enumerate(meals):
                if meal.id == meal_id:
                    del meals[index]
                    return True
        return False

    def list_user_ids(self) -> list[int]:
        """Return users that have a meal collection."""
        return list(self.store.meals)


@dataclass
class InMemoryHabitRepository(HabitRepository):
    """Habit repository over an in-memory store."""

    store: InMemoryStore

    def list_habits(self, user_id: int) -> list[Habit]:
        """Return a copy of the user's habits."""
        with self.store.locks.hold(user_id):
            return list(self.store.habits.get(user_id, []))

    def create_habit(
        self, user_id: int, payload: dict[str, object], start_date: datetime
    ) -> Habit:
        """Append a habit to the user's collection."""
        habit = Habit(
            id=self.store.next_habit_id(),
            user_id=user_id,
            name=str(payload.get("name") or ""),
            description=payload.get("description"),
            type=str(payload.get("type") or "diet"),
            frequency=payload.get("frequency"),
            time_of_day=payload.get("time_of_day"),
            start_date=start_date,
            status=str(payload.get("status") or "active"),
            streak_days=int(payload.get("streak_days") or 0),
            background_color=str(payload.get("background_color") or "blue"),
        )
        with self.store.locks.hold(user_id):
            self.store.habits.setdefault(user_id, []).append(habit)
        return habit

    def update_habit(
        self, user_id: int, habit_id: int, changes: dict[str, object]
    ) -> Habit | None:
        """Replace fields of a habit in place."""
        with self.store.locks.hold(user_id):
            habits = self.store.habits.get(user_id, [])
            for index, habit in enumerate(habits):
                if habit.id == habit_id:
                    updated = replace(habit, **changes)
                    habits[index] = updated
                    return updated
        return None

    def delete_habit(self, user_id: int, habit_id: int) -> bool:
        """Remove a habit from the user's collection."""
        with self.store.locks.hold(user_id):
            habits = self.store.habits.get(user_id, [])
            for index, habit in enumerate(habits):
                if habit.id == habit_id:
                    del habits[index]
                    return True
        return False

    def list_user_ids(self) -> list[int]:
        """Return users that have a habit collection."""
        return list(self.store.habits)


@dataclass
class InMemoryUserSettingsRepository(UserSettingsRepository):
    """Settings repository over an in-memory store."""

    store: InMemoryStore

    def get_settings(self, user_id: int) -> UserSettings | None:
        """Return stored settings, if any."""
        return self.store.settings.get(user_id)

    def update_settings(
        self, user_id: int, changes: dict[str, object]
    ) -> UserSettings:
        """Merge fields into the user's settings under the user lock."""
        with self.store.locks.hold(user_id):
            current = self.get_settings(user_id) or UserSettings()
            updated = replace(current, **changes)
            self.store.settings[user_id] = updated
        return updated


@dataclass
class InMemoryGoalRepository(GoalRepository):
    """Goal and challenge repository over an in-memory store."""

    store: InMemoryStore

    def list_goals(self, user_id: int) -> list[Goal]:
        """Return the user's goals."""
        return list(self.store.goals.get(user_id, []))

    def list_challenges(self, user_id: int) -> list[Challenge]:
        """Return the user's challenges."""
        return list(self.store.challenges.get(user_id, []))


def seed_demo_user(store: InMemoryStore, today: date | None = None) -> None:
    """Populate the demo user's meals, habits, goals and challenges."""
    user_id = seed_data.DEMO_USER_ID
    day = (today or datetime.now(tz=UTC).date()).isoformat()
    meals = InMemoryMealRepository(store)
    for row in seed_data.DEMO_MEALS:
        meals.create_meal(
            user_id,
            MealDraft(
                name=row["name"],
                meal_type=row["meal_type"],
                time=row["time"],
                date=day,
                ingredients=tuple(
                    MealIngredientLine(**line) for line in row["ingredients"]
                ),
                total_nutrition=NutritionTotal(**row["total_nutrition"]),
            ),
        )
    habits = InMemoryHabitRepository(store)
    started = datetime.now(tz=UTC)
    for row in seed_data.DEMO_HABITS:
        habits.create_habit(user_id, row, start_date=started)
    store.goals[user_id] = [Goal(**row) for row in seed_data.DEMO_GOALS]
    store.challenges[user_id] = [Challenge(**row) for row in seed_data.DEMO_CHALLENGES]
    store.settings[user_id] = UserSettings()
