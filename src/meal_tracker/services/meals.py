"""Meal logging service."""

import logging
from collections.abc import Sequence
from dataclasses import dataclass, replace
from typing import Protocol

from meal_tracker.domain.catalog import IngredientUsage, NutritionTotal
from meal_tracker.domain.meals import MealDraft, MealIngredientLine, UserMeal
from meal_tracker.services.catalog import ReferenceCatalog
from meal_tracker.services.nutrition import NutritionService

MEAL_FIELDS = frozenset(
    {"name", "meal_type", "time", "date", "ingredients", "total_nutrition"}
)

_logger = logging.getLogger(__name__)


class MealRepository(Protocol):
    """Persistence interface for per-user meal collections.

    Implementations must make each mutation atomic per user id.
    """

    def list_meals(self, user_id: int) -> list[UserMeal]:
        """Return a user's meals in insertion order."""

    def get_meal(self, user_id: int, meal_id: int) -> UserMeal | None:
        """Return a single meal owned by the user, if present."""

    def create_meal(self, user_id: int, draft: MealDraft) -> UserMeal:
        """Store a resolved meal draft and return the created meal."""

    def update_meal(
        self, user_id: int, meal_id: int, changes: dict[str, object]
    ) -> UserMeal | None:
        """Replace the given fields of a meal and return it."""

    def delete_meal(self, user_id: int, meal_id: int) -> bool:
        """Delete a meal, returning False when it does not exist."""

    def list_user_ids(self) -> list[int]:
        """Return ids of users that own a meal collection."""


@dataclass
class MealLogService:
    """Computes nutrition snapshots and persists user meals."""

    nutrition_service: NutritionService
    catalog: ReferenceCatalog
    repository: MealRepository

    def list_meals(self, user_id: int, day: str | None = None) -> list[UserMeal]:
        """Return a user's meals, optionally only those on an ISO date."""
        meals = self.repository.list_meals(user_id)
        if day is None:
            return meals
        return [meal for meal in meals if meal.date == day]

    def get_meal(self, user_id: int, meal_id: int) -> UserMeal | None:
        """Return one of the user's meals."""
        return self.repository.get_meal(user_id, meal_id)

    def log_meal(self, user_id: int, draft: MealDraft) -> UserMeal:
        """Persist a meal, computing its snapshot when usages are given."""
        if draft.usages:
            lines, total = self._snapshot(draft.usages)
            draft = replace(draft, usages=(), ingredients=lines, total_nutrition=total)
        meal = self.repository.create_meal(user_id, draft)
        _logger.info(
            "Meal logged: user_id=%s meal_id=%s calories=%s",
            user_id,
            meal.id,
            meal.total_nutrition.calories,
        )
        return meal

    def log_premade_meal(
        self, user_id: int, premade_id: int, meal_type: str, time: str, date: str
    ) -> UserMeal | None:
        """Log a pre-made meal with its catalog nutrition."""
        premade = self.catalog.find_premade_meal(premade_id)
        if premade is None:
            return None
        lines, _ = self._snapshot(premade.ingredients)
        draft = MealDraft(
            name=premade.name,
            meal_type=meal_type,
            time=time,
            date=date,
            ingredients=lines,
            total_nutrition=premade.total_nutrition,
        )
        return self.log_meal(user_id, draft)

    def update_meal(
        self,
        user_id: int,
        meal_id: int,
        changes: dict[str, object],
        usages: Sequence[IngredientUsage] | None = None,
    ) -> UserMeal | None:
        """Apply a partial update to a meal.

        The nutrition snapshot is recomputed only when new usages are passed.
        """
        fields = {key: value for key, value in changes.items() if key in MEAL_FIELDS}
        if usages is not None:
            lines, total = self._snapshot(usages)
            fields["ingredients"] = lines
            fields["total_nutrition"] = total
        updated = self.repository.update_meal(user_id, meal_id, fields)
        if updated is None:
            _logger.info("Meal not found: user_id=%s meal_id=%s", user_id, meal_id)
        return updated

    def delete_meal(self, user_id: int, meal_id: int) -> bool:
        """Delete one of the user's meals."""
        return self.repository.delete_meal(user_id, meal_id)

    def _snapshot(
        self, usages: Sequence[IngredientUsage]
    ) -> tuple[tuple[MealIngredientLine, ...], NutritionTotal]:
        lines: list[MealIngredientLine] = []
        for usage in usages:
            contribution = self.nutrition_service.compute_line(usage)
            ingredient = self.catalog.find_ingredient(usage.ingredient_id)
            if contribution is None or ingredient is None:
                continue
            method = (
                self.catalog.find_cooking_method(usage.cooking_method_id)
                if usage.cooking_method_id is not None
                else None
            )
            lines.append(
                MealIngredientLine(
                    name=ingredient.name,
                    quantity=f"{usage.quantity:g}g",
                    calories=contribution.calories,
                    cooking_method=method.name if method else None,
                )
            )
        return tuple(lines), self.nutrition_service.compute(usages)
