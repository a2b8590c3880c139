"""Dependency container wiring for the application."""

from dataclasses import dataclass

from supabase import create_client

from meal_tracker.adapters.memory_store import (
    InMemoryGoalRepository,
    InMemoryHabitRepository,
    InMemoryMealRepository,
    InMemoryStore,
    InMemoryUserSettingsRepository,
    seed_demo_user,
)
from meal_tracker.adapters.supabase_goal_repository import SupabaseGoalRepository
from meal_tracker.adapters.supabase_habit_repository import SupabaseHabitRepository
from meal_tracker.adapters.supabase_meal_repository import SupabaseMealRepository
from meal_tracker.adapters.supabase_user_settings_repository import (
    SupabaseUserSettingsRepository,
)
from meal_tracker.config import Settings
from meal_tracker.services.admin import AdminService
from meal_tracker.services.assistant import AssistantService
from meal_tracker.services.catalog import ReferenceCatalog, build_catalog
from meal_tracker.services.goals import GoalRepository, GoalService
from meal_tracker.services.habits import HabitRepository, HabitService
from meal_tracker.services.matcher import MealMatcherService
from meal_tracker.services.meals import MealLogService, MealRepository
from meal_tracker.services.nutrition import NutritionService
from meal_tracker.services.stats import StatsService
from meal_tracker.services.user_settings import (
    UserSettingsRepository,
    UserSettingsService,
)


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    catalog: ReferenceCatalog
    nutrition_service: NutritionService
    matcher_service: MealMatcherService
    meal_log_service: MealLogService
    habit_service: HabitService
    goal_service: GoalService
    user_settings_service: UserSettingsService
    stats_service: StatsService
    assistant_service: AssistantService
    admin_service: AdminService


@dataclass
class Repositories:
    """Storage backends used by the services."""

    meals: MealRepository
    habits: HabitRepository
    goals: GoalRepository
    settings: UserSettingsRepository


def build_repositories(settings: Settings) -> Repositories:
    """Select Supabase when configured, otherwise the in-memory store."""
    if settings.uses_supabase:
        client = create_client(settings.supabase_url, settings.supabase_service_key)
        return Repositories(
            meals=SupabaseMealRepository(client),
            habits=SupabaseHabitRepository(client),
            goals=SupabaseGoalRepository(client),
            settings=SupabaseUserSettingsRepository(client),
        )
    store = InMemoryStore()
    if settings.seed_demo_data:
        seed_demo_user(store)
    return Repositories(
        meals=InMemoryMealRepository(store),
        habits=InMemoryHabitRepository(store),
        goals=InMemoryGoalRepository(store),
        settings=InMemoryUserSettingsRepository(store),
    )


def build_container(
    settings: Settings | None = None, repositories: Repositories | None = None
) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    resolved_repositories = repositories or build_repositories(resolved_settings)
    catalog = build_catalog()
    nutrition_service = NutritionService(catalog)
    meal_log_service = MealLogService(
        nutrition_service=nutrition_service,
        catalog=catalog,
        repository=resolved_repositories.meals,
    )
    user_settings_service = UserSettingsService(resolved_repositories.settings)
    stats_service = StatsService(
        meal_log_service=meal_log_service,
        user_settings_service=user_settings_service,
    )

    return AppContainer(
        settings=resolved_settings,
        catalog=catalog,
        nutrition_service=nutrition_service,
        matcher_service=MealMatcherService(catalog),
        meal_log_service=meal_log_service,
        habit_service=HabitService(resolved_repositories.habits),
        goal_service=GoalService(resolved_repositories.goals),
        user_settings_service=user_settings_service,
        stats_service=stats_service,
        assistant_service=AssistantService(stats_service),
        admin_service=AdminService(
            meal_repository=resolved_repositories.meals,
            habit_repository=resolved_repositories.habits,
        ),
    )
