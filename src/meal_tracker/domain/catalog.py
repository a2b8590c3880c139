"""Reference catalog and nutrition domain models."""

from dataclasses import dataclass


@dataclass(frozen=True)
class MacroValues:
    """Calories and macros per 100 grams of an ingredient."""

    calories: float
    protein: float
    carbs: float
    fat: float


@dataclass(frozen=True)
class Ingredient:
    """Catalog ingredient with nutrition on a per-100g basis."""

    id: int
    name: str
    category: str
    nutrition_per_unit: MacroValues
    unit: str = "100g"


@dataclass(frozen=True)
class CookingMethod:
    """Preparation technique carrying a calorie-only multiplier."""

    id: int
    name: str
    calorie_multiplier: float
    description: str


@dataclass(frozen=True)
class IngredientUsage:
    """An ingredient, a quantity in grams and an optional cooking method."""

    ingredient_id: int
    quantity: float
    cooking_method_id: int | None = None


@dataclass(frozen=True)
class NutritionTotal:
    """Aggregate nutrition for a list of usages."""

    calories: int
    protein: float
    carbs: float
    fat: float

    @classmethod
    def zero(cls) -> "NutritionTotal":
        return cls(calories=0, protein=0.0, carbs=0.0, fat=0.0)


@dataclass(frozen=True)
class PremadeMeal:
    """Fixed combination of ingredient usages with its nutrition total."""

    id: int
    name: str
    category: str
    ingredients: tuple[IngredientUsage, ...]
    total_nutrition: NutritionTotal
