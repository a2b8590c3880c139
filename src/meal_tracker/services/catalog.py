"""Read-only reference catalog of ingredients, cooking methods and meals."""

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field

from meal_tracker import seed_data
from meal_tracker.domain.catalog import (
    CookingMethod,
    Ingredient,
    IngredientUsage,
    MacroValues,
    PremadeMeal,
)
from meal_tracker.services.nutrition import aggregate_nutrition

_logger = logging.getLogger(__name__)


@dataclass
class ReferenceCatalog:
    """In-memory catalog loaded once at startup."""

    ingredients: tuple[Ingredient, ...]
    cooking_methods: tuple[CookingMethod, ...]
    premade_meals: tuple[PremadeMeal, ...] = ()
    _ingredients_by_id: dict[int, Ingredient] = field(init=False, repr=False)
    _methods_by_id: dict[int, CookingMethod] = field(init=False, repr=False)
    _meals_by_id: dict[int, PremadeMeal] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._ingredients_by_id = {item.id: item for item in self.ingredients}
        self._methods_by_id = {item.id: item for item in self.cooking_methods}
        self._meals_by_id = {item.id: item for item in self.premade_meals}

    def find_ingredient(self, ingredient_id: int) -> Ingredient | None:
        """Return an ingredient by id, if present."""
        return self._ingredients_by_id.get(ingredient_id)

    def find_cooking_method(self, cooking_method_id: int) -> CookingMethod | None:
        """Return a cooking method by id, if present."""
        return self._methods_by_id.get(cooking_method_id)

    def find_premade_meal(self, meal_id: int) -> PremadeMeal | None:
        """Return a pre-made meal by id, if present."""
        return self._meals_by_id.get(meal_id)

    def search_ingredients(self, query: str | None = None) -> list[Ingredient]:
        """Match the query against name or category, case-insensitively."""
        if not query:
            return list(self.ingredients)
        needle = query.lower()
        return [
            item
            for item in self.ingredients
            if needle in item.name.lower() or needle in item.category.lower()
        ]

    def list_cooking_methods(self) -> list[CookingMethod]:
        """Return all cooking methods in catalog order."""
        return list(self.cooking_methods)

    def search_premade_meals(self, query: str | None = None) -> list[PremadeMeal]:
        """Match the query against meal name or category, case-insensitively."""
        if not query:
            return list(self.premade_meals)
        needle = query.lower()
        return [
            meal
            for meal in self.premade_meals
            if needle in meal.name.lower() or needle in meal.category.lower()
        ]


def build_catalog(
    ingredients: Sequence[dict[str, object]] = seed_data.INGREDIENTS,
    cooking_methods: Sequence[dict[str, object]] = seed_data.COOKING_METHODS,
    premade_meals: Sequence[dict[str, object]] = seed_data.PREMADE_MEALS,
) -> ReferenceCatalog:
    """Build the catalog from seed rows.

    Pre-made meal totals are derived from their ingredient lists so that they
    always agree with the aggregator.
    """
    base = ReferenceCatalog(
        ingredients=tuple(_parse_ingredient(row) for row in ingredients),
        cooking_methods=tuple(_parse_cooking_method(row) for row in cooking_methods),
    )
    meals = []
    for row in premade_meals:
        usages = tuple(
            IngredientUsage(
                ingredient_id=int(ingredient_id),
                quantity=float(quantity),
                cooking_method_id=cooking_method_id,
            )
            for ingredient_id, quantity, cooking_method_id in row["ingredients"]
        )
        meals.append(
            PremadeMeal(
                id=int(row["id"]),
                name=str(row["name"]),
                category=str(row["category"]),
                ingredients=usages,
                total_nutrition=aggregate_nutrition(usages, base),
            )
        )
    catalog = ReferenceCatalog(
        ingredients=base.ingredients,
        cooking_methods=base.cooking_methods,
        premade_meals=tuple(meals),
    )
    _logger.info(
        "Catalog loaded: ingredients=%s cooking_methods=%s premade_meals=%s",
        len(catalog.ingredients),
        len(catalog.cooking_methods),
        len(catalog.premade_meals),
    )
    return catalog


def _parse_ingredient(row: dict[str, object]) -> Ingredient:
    return Ingredient(
        id=int(row["id"]),
        name=str(row["name"]),
        category=str(row.get("category") or ""),
        nutrition_per_unit=MacroValues(
            calories=float(row.get("calories", 0.0)),
            protein=float(row.get("protein", 0.0)),
            carbs=float(row.get("carbs", 0.0)),
            fat=float(row.get("fat", 0.0)),
        ),
        unit=str(row.get("unit") or "100g"),
    )


def _parse_cooking_method(row: dict[str, object]) -> CookingMethod:
    return CookingMethod(
        id=int(row["id"]),
        name=str(row["name"]),
        calorie_multiplier=float(row.get("calorie_multiplier", 1.0)),
        description=str(row.get("description") or ""),
    )
