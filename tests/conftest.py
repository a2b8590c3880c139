"""Shared test fixtures."""

import pytest

from meal_tracker.adapters.memory_store import (
    InMemoryGoalRepository,
    InMemoryHabitRepository,
    InMemoryMealRepository,
    InMemoryStore,
    InMemoryUserSettingsRepository,
)
from meal_tracker.config import Settings
from meal_tracker.containers import AppContainer, Repositories, build_container
from meal_tracker.services.catalog import ReferenceCatalog, build_catalog
from meal_tracker.services.meals import MealLogService
from meal_tracker.services.nutrition import NutritionService

USER_HEADERS = {"X-User-Id": "7"}
OTHER_USER_HEADERS = {"X-User-Id": "8"}
ADMIN_HEADERS = {"X-Admin-Token": "admin-token"}


@pytest.fixture
def settings() -> Settings:
    return Settings(admin_token="admin-token", seed_demo_data=False)


@pytest.fixture
def catalog() -> ReferenceCatalog:
    return build_catalog()


@pytest.fixture
def store() -> InMemoryStore:
    return InMemoryStore()


@pytest.fixture
def meal_log_service(
    catalog: ReferenceCatalog, store: InMemoryStore
) -> MealLogService:
    return MealLogService(
        nutrition_service=NutritionService(catalog),
        catalog=catalog,
        repository=InMemoryMealRepository(store),
    )


@pytest.fixture
def container(settings: Settings, store: InMemoryStore) -> AppContainer:
    repositories = Repositories(
        meals=InMemoryMealRepository(store),
        habits=InMemoryHabitRepository(store),
        goals=InMemoryGoalRepository(store),
        settings=InMemoryUserSettingsRepository(store),
    )
    return build_container(settings, repositories=repositories)
