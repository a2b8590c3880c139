"""Pydantic models for API request payloads."""

import datetime as dt

from pydantic import BaseModel, Field

from meal_tracker.domain.catalog import IngredientUsage, NutritionTotal
from meal_tracker.domain.meals import MealDraft, MealIngredientLine


class IngredientUsageIn(BaseModel):
    """Ingredient usage entry: grams of an ingredient, optionally cooked."""

    ingredient_id: int
    quantity: float = Field(ge=0)
    cooking_method_id: int | None = None

    def to_domain(self) -> IngredientUsage:
        return IngredientUsage(
            ingredient_id=self.ingredient_id,
            quantity=self.quantity,
            cooking_method_id=self.cooking_method_id,
        )


class NutritionTotalIn(BaseModel):
    """Manually entered nutrition totals."""

    calories: int = Field(default=0, ge=0)
    protein: float = Field(default=0.0, ge=0)
    carbs: float = Field(default=0.0, ge=0)
    fat: float = Field(default=0.0, ge=0)

    def to_domain(self) -> NutritionTotal:
        return NutritionTotal(
            calories=self.calories,
            protein=self.protein,
            carbs=self.carbs,
            fat=self.fat,
        )


class MealIngredientLineIn(BaseModel):
    """Free-form ingredient line for manual meal entry."""

    name: str
    quantity: str = ""
    calories: float = Field(default=0.0, ge=0)
    cooking_method: str | None = None

    def to_domain(self) -> MealIngredientLine:
        return MealIngredientLine(
            name=self.name,
            quantity=self.quantity,
            calories=self.calories,
            cooking_method=self.cooking_method,
        )


class CalculateNutritionRequest(BaseModel):
    """Usages to aggregate without logging a meal."""

    ingredients: list[IngredientUsageIn]


class SuggestionRequest(BaseModel):
    """In-progress manual meal entry."""

    name: str = ""
    ingredient_names: list[str] = Field(default_factory=list)


class MealCreateRequest(BaseModel):
    """Meal to log, either from usages or as manual lines and totals."""

    name: str = Field(min_length=1)
    meal_type: str
    time: str
    date: dt.date
    usages: list[IngredientUsageIn] = Field(default_factory=list)
    ingredients: list[MealIngredientLineIn] = Field(default_factory=list)
    total_nutrition: NutritionTotalIn | None = None

    def to_domain(self) -> MealDraft:
        totals = self.total_nutrition or NutritionTotalIn()
        return MealDraft(
            name=self.name,
            meal_type=self.meal_type,
            time=self.time,
            date=self.date.isoformat(),
            usages=tuple(usage.to_domain() for usage in self.usages),
            ingredients=tuple(line.to_domain() for line in self.ingredients),
            total_nutrition=totals.to_domain(),
        )


class MealUpdateRequest(BaseModel):
    """Partial meal update; only fields that are sent are replaced."""

    name: str | None = Field(default=None, min_length=1)
    meal_type: str | None = None
    time: str | None = None
    date: dt.date | None = None
    usages: list[IngredientUsageIn] | None = None
    ingredients: list[MealIngredientLineIn] | None = None
    total_nutrition: NutritionTotalIn | None = None

    def changes(self) -> dict[str, object]:
        """Return the sent fields converted to domain values."""
        sent = self.model_fields_set
        changes: dict[str, object] = {}
        for key in ("name", "meal_type", "time"):
            if key in sent and getattr(self, key) is not None:
                changes[key] = getattr(self, key)
        if "date" in sent and self.date is not None:
            changes["date"] = self.date.isoformat()
        if "ingredients" in sent and self.ingredients is not None:
            changes["ingredients"] = tuple(line.to_domain() for line in self.ingredients)
        if "total_nutrition" in sent and self.total_nutrition is not None:
            changes["total_nutrition"] = self.total_nutrition.to_domain()
        return changes

    def usage_list(self) -> list[IngredientUsage] | None:
        if self.usages is None:
            return None
        return [usage.to_domain() for usage in self.usages]


class PremadeMealLogRequest(BaseModel):
    """Log a pre-made meal as one of the user's meals."""

    premade_meal_id: int
    meal_type: str
    time: str
    date: dt.date


class HabitCreateRequest(BaseModel):
    """New habit payload."""

    name: str = Field(min_length=1)
    description: str | None = None
    type: str = "diet"
    frequency: str | None = None
    time_of_day: str | None = None
    background_color: str = "blue"


class HabitUpdateRequest(BaseModel):
    """Partial habit update."""

    name: str | None = Field(default=None, min_length=1)
    description: str | None = None
    type: str | None = None
    frequency: str | None = None
    time_of_day: str | None = None
    status: str | None = None
    streak_days: int | None = Field(default=None, ge=0)
    background_color: str | None = None


class SettingsUpdateRequest(BaseModel):
    """Partial settings update."""

    theme: str | None = None
    accent_color: str | None = None
    calorie_goal: int | None = Field(default=None, ge=0)
    protein_goal: int | None = Field(default=None, ge=0)
    carbs_goal: int | None = Field(default=None, ge=0)
    fat_goal: int | None = Field(default=None, ge=0)
    measurement_unit: str | None = None
    notifications: bool | None = None
    language: str | None = None


class AssistantMessageRequest(BaseModel):
    """Message sent to the assistant."""

    message: str
