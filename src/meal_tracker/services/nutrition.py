"""Nutrition aggregation over the reference catalog."""

import logging
import math
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Protocol

from meal_tracker.domain.catalog import (
    CookingMethod,
    Ingredient,
    IngredientUsage,
    NutritionTotal,
)

_logger = logging.getLogger(__name__)


class CatalogLookup(Protocol):
    """Read-only lookups the aggregator needs."""

    def find_ingredient(self, ingredient_id: int) -> Ingredient | None:
        """Return an ingredient by id, if present."""

    def find_cooking_method(self, cooking_method_id: int) -> CookingMethod | None:
        """Return a cooking method by id, if present."""


def aggregate_nutrition(
    usages: Iterable[IngredientUsage], catalog: CatalogLookup
) -> NutritionTotal:
    """Reduce ingredient usages to a single rounded nutrition total.

    Quantities are grams against the catalog's per-100g values. The cooking
    method multiplier scales calories only. Usages that reference an unknown
    ingredient contribute nothing; an unknown or missing cooking method counts
    as a multiplier of 1.
    """
    calories = 0.0
    protein = 0.0
    carbs = 0.0
    fat = 0.0
    for usage in usages:
        ingredient = catalog.find_ingredient(usage.ingredient_id)
        if ingredient is None:
            _logger.debug(
                "Skipping usage with unknown ingredient_id=%s", usage.ingredient_id
            )
            continue
        multiplier = _calorie_multiplier(catalog, usage.cooking_method_id)
        factor = usage.quantity / 100.0
        per_unit = ingredient.nutrition_per_unit
        calories += per_unit.calories * factor * multiplier
        protein += per_unit.protein * factor
        carbs += per_unit.carbs * factor
        fat += per_unit.fat * factor

    return NutritionTotal(
        calories=round_half_up(calories),
        protein=round_tenth(protein),
        carbs=round_tenth(carbs),
        fat=round_tenth(fat),
    )


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves toward positive infinity."""
    return math.floor(value + 0.5)


def round_tenth(value: float) -> float:
    """Round to one decimal place, halves toward positive infinity."""
    return math.floor(value * 10 + 0.5) / 10


def _calorie_multiplier(catalog: CatalogLookup, cooking_method_id: int | None) -> float:
    if cooking_method_id is None:
        return 1.0
    method = catalog.find_cooking_method(cooking_method_id)
    if method is None:
        return 1.0
    return method.calorie_multiplier


@dataclass
class NutritionService:
    """Computes nutrition totals against a fixed catalog."""

    catalog: CatalogLookup

    def compute(self, usages: Iterable[IngredientUsage]) -> NutritionTotal:
        """Return the aggregate nutrition for a list of usages."""
        return aggregate_nutrition(usages, self.catalog)

    def compute_line(self, usage: IngredientUsage) -> NutritionTotal | None:
        """Return one usage's contribution, or None when its ingredient is unknown."""
        if self.catalog.find_ingredient(usage.ingredient_id) is None:
            return None
        return aggregate_nutrition([usage], self.catalog)
