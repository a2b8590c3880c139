"""Tests for the templated assistant."""

from datetime import date

import pytest

from meal_tracker.adapters.memory_store import (
    InMemoryStore,
    InMemoryUserSettingsRepository,
)
from meal_tracker.domain.catalog import NutritionTotal
from meal_tracker.domain.meals import MealDraft
from meal_tracker.services.assistant import AssistantService
from meal_tracker.services.meals import MealLogService
from meal_tracker.services.stats import StatsService
from meal_tracker.services.user_settings import UserSettingsService


@pytest.fixture
def assistant_service(
    meal_log_service: MealLogService, store: InMemoryStore
) -> AssistantService:
    stats_service = StatsService(
        meal_log_service=meal_log_service,
        user_settings_service=UserSettingsService(InMemoryUserSettingsRepository(store)),
    )
    return AssistantService(stats_service)


def test_reply_picks_topic_by_keyword(assistant_service: AssistantService) -> None:
    assert "meal plan" in assistant_service.reply("What should I EAT?").message
    assert "strength training" in assistant_service.reply("Any workout tips").message
    assert "7-8 hours" in assistant_service.reply("I feel tired").message


def test_reply_falls_back(assistant_service: AssistantService) -> None:
    reply = assistant_service.reply("hello")

    assert reply.message.startswith("Thank you for your message.")
    assert reply.timestamp.tzinfo is not None


def test_analysis_without_meals(assistant_service: AssistantService) -> None:
    analysis = assistant_service.analyze_day(7, date(2026, 3, 2))

    assert analysis.suggestions == ["No meals logged for this day yet."]


def test_analysis_flags_low_and_high_intake(
    assistant_service: AssistantService, meal_log_service: MealLogService
) -> None:
    meal_log_service.log_meal(
        7,
        MealDraft(
            name="Feast",
            meal_type="Dinner",
            time="8:00 PM",
            date="2026-03-02",
            total_nutrition=NutritionTotal(calories=2500, protein=200, carbs=100, fat=30),
        ),
    )

    analysis = assistant_service.analyze_day(7, date(2026, 3, 2))

    assert len(analysis.suggestions) == 3
    assert analysis.suggestions[0].startswith("Your protein intake is above your goal")
    assert analysis.suggestions[1].startswith("Your fat intake is at 46.2%")
    assert analysis.suggestions[2] == "You are over your calorie goal for the day."
