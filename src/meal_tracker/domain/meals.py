"""Domain models for meal logging."""

from dataclasses import dataclass, field

from meal_tracker.domain.catalog import IngredientUsage, NutritionTotal


@dataclass(frozen=True)
class MealIngredientLine:
    """Display snapshot of one ingredient in a logged meal."""

    name: str
    quantity: str
    calories: float
    cooking_method: str | None = None


@dataclass(frozen=True)
class UserMeal:
    """A meal logged by a user with its nutrition snapshot."""

    id: int
    user_id: int
    name: str
    meal_type: str
    time: str
    date: str
    ingredients: tuple[MealIngredientLine, ...]
    total_nutrition: NutritionTotal


@dataclass(frozen=True)
class MealDraft:
    """Meal submitted for logging.

    When ``usages`` is non-empty the nutrition snapshot and display lines are
    computed from the catalog; otherwise ``ingredients`` and
    ``total_nutrition`` are stored as entered.
    """

    name: str
    meal_type: str
    time: str
    date: str
    usages: tuple[IngredientUsage, ...] = ()
    ingredients: tuple[MealIngredientLine, ...] = ()
    total_nutrition: NutritionTotal = field(default_factory=NutritionTotal.zero)
