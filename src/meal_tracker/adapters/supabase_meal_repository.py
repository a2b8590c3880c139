"""Supabase repository for user meals."""

from dataclasses import asdict, dataclass

from supabase import Client

from meal_tracker.domain.catalog import NutritionTotal
from meal_tracker.domain.meals import MealDraft, MealIngredientLine, UserMeal
from meal_tracker.services.meals import MealRepository

_COLUMNS = "id, user_id, name, meal_type, time, date, ingredients, total_nutrition"


@dataclass
class SupabaseMealRepository(MealRepository):
    """Supabase implementation for user meals.

    Each mutation is a single-row statement, so no client-side locking is
    needed per user.
    """

    client: Client

    def list_meals(self, user_id: int) -> list[UserMeal]:
        """Return a user's meals ordered by id."""
        response = (
            self.client.table("user_meals")
            .select(_COLUMNS)
            .eq("user_id", user_id)
            .order("id", desc=False)
            .execute()
        )
        return [_parse_meal(row) for row in response.data or []]

    def get_meal(self, user_id: int, meal_id: int) -> UserMeal | None:
        """Return a meal by id."""
        response = (
            self.client.table("user_meals")
            .select(_COLUMNS)
            .eq("user_id", user_id)
            .eq("id", meal_id)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_meal(response.data[0])

    def create_meal(self, user_id: int, draft: MealDraft) -> UserMeal:
        """Insert a meal row and return it."""
        response = (
            self.client.table("user_meals")
            .insert(
                {
                    "user_id": user_id,
                    "name": draft.name,
                    "meal_type": draft.meal_type,
                    "time": draft.time,
                    "date": draft.date,
                    "ingredients": [asdict(line) for line in draft.ingredients],
                    "total_nutrition": asdict(draft.total_nutrition),
                }
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create meal")
        return _parse_meal(response.data[0])

    def update_meal(
        self, user_id: int, meal_id: int, changes: dict[str, object]
    ) -> UserMeal | None:
        """Update meal columns and return the row."""
        payload = dict(changes)
        if "ingredients" in payload:
            payload["ingredients"] = [asdict(line) for line in payload["ingredients"]]
        if "total_nutrition" in payload:
            payload["total_nutrition"] = asdict(payload["total_nutrition"])
        if not payload:
            return self.get_meal(user_id, meal_id)
        response = (
            self.client.table("user_meals")
            .update(payload)
            .eq("user_id", user_id)
            .eq("id", meal_id)
            .execute()
        )
        if not response.data:
            return None
        return _parse_meal(response.data[0])

    def delete_meal(self, user_id: int, meal_id: int) -> bool:
        """Delete a meal row."""
        response = (
            self.client.table("user_meals")
            .delete()
            .eq("user_id", user_id)
            .eq("id", meal_id)
            .execute()
        )
        return bool(response.data)

    def list_user_ids(self) -> list[int]:
        """Return distinct owners of meal rows."""
        response = self.client.table("user_meals").select("user_id").execute()
        return sorted({int(row["user_id"]) for row in response.data or []})


def _parse_meal(row: dict[str, object]) -> UserMeal:
    totals = row.get("total_nutrition") or {}
    return UserMeal(
        id=int(row["id"]),
        user_id=int(row["user_id"]),
        name=str(row.get("name", "")),
        meal_type=str(row.get("meal_type", "")),
        time=str(row.get("time", "")),
        date=str(row.get("date", "")),
        ingredients=tuple(
            MealIngredientLine(
                name=str(line.get("name", "")),
                quantity=str(line.get("quantity", "")),
                calories=float(line.get("calories", 0.0)),
                cooking_method=line.get("cooking_method"),
            )
            for line in row.get("ingredients") or []
        ),
        total_nutrition=NutritionTotal(
            calories=int(totals.get("calories", 0)),
            protein=float(totals.get("protein", 0.0)),
            carbs=float(totals.get("carbs", 0.0)),
            fat=float(totals.get("fat", 0.0)),
        ),
    )
