"""Suggest a pre-made meal from manually typed ingredient names."""

from collections.abc import Sequence
from dataclasses import dataclass

from meal_tracker.domain.catalog import PremadeMeal
from meal_tracker.services.catalog import ReferenceCatalog

MIN_TYPED_INGREDIENTS = 2
MATCH_THRESHOLD = 0.5


def suggest_premade_meal(
    meal_name: str | None,
    typed_ingredient_names: Sequence[str],
    catalog: ReferenceCatalog,
) -> PremadeMeal | None:
    """Return the first pre-made meal that at least half matches the typed names.

    A catalog ingredient matches when a typed name is a substring of its name
    or the other way around, ignoring case.
    """
    if (
        not meal_name
        or len(typed_ingredient_names) < MIN_TYPED_INGREDIENTS
        or not catalog.premade_meals
    ):
        return None

    typed = [name.lower() for name in typed_ingredient_names if name]
    if len(typed) < MIN_TYPED_INGREDIENTS:
        return None

    for meal in catalog.premade_meals:
        if not meal.ingredients:
            continue
        match_count = 0
        for usage in meal.ingredients:
            ingredient = catalog.find_ingredient(usage.ingredient_id)
            if ingredient is None:
                continue
            catalog_name = ingredient.name.lower()
            if any(name in catalog_name or catalog_name in name for name in typed):
                match_count += 1
        if match_count / len(meal.ingredients) >= MATCH_THRESHOLD:
            return meal
    return None


@dataclass
class MealMatcherService:
    """Suggests pre-made meals while a user enters a meal by hand."""

    catalog: ReferenceCatalog

    def suggest(
        self, meal_name: str | None, typed_ingredient_names: Sequence[str]
    ) -> PremadeMeal | None:
        """Return a suggested pre-made meal, if one is similar enough."""
        return suggest_premade_meal(meal_name, typed_ingredient_names, self.catalog)
