"""Reference catalog and nutrition endpoints."""

from fastapi import APIRouter, Depends, HTTPException, status

from meal_tracker.api.dependencies import get_container, require_user
from meal_tracker.api.models import CalculateNutritionRequest, SuggestionRequest
from meal_tracker.containers import AppContainer
from meal_tracker.domain.catalog import (
    CookingMethod,
    Ingredient,
    NutritionTotal,
    PremadeMeal,
)

router = APIRouter(prefix="/api", tags=["catalog"], dependencies=[Depends(require_user)])


@router.get("/ingredients")
async def search_ingredients(
    q: str | None = None, container: AppContainer = Depends(get_container)
) -> list[Ingredient]:
    """Search ingredients by name or category."""
    return container.catalog.search_ingredients(q)


@router.get("/ingredients/{ingredient_id}")
async def get_ingredient(
    ingredient_id: int, container: AppContainer = Depends(get_container)
) -> Ingredient:
    """Return a single ingredient."""
    ingredient = container.catalog.find_ingredient(ingredient_id)
    if ingredient is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Ingredient not found"
        )
    return ingredient


@router.get("/cooking-methods")
async def list_cooking_methods(
    container: AppContainer = Depends(get_container),
) -> list[CookingMethod]:
    """Return all cooking methods."""
    return container.catalog.list_cooking_methods()


@router.get("/premade-meals")
async def search_premade_meals(
    q: str | None = None, container: AppContainer = Depends(get_container)
) -> list[PremadeMeal]:
    """Search pre-made meals by name or category."""
    return container.catalog.search_premade_meals(q)


@router.post("/premade-meals/suggestion")
async def suggest_premade_meal(
    payload: SuggestionRequest, container: AppContainer = Depends(get_container)
) -> dict[str, PremadeMeal | None]:
    """Suggest a pre-made meal similar to a meal being typed in."""
    suggestion = container.matcher_service.suggest(
        payload.name, payload.ingredient_names
    )
    return {"suggestion": suggestion}


@router.get("/premade-meals/{meal_id}")
async def get_premade_meal(
    meal_id: int, container: AppContainer = Depends(get_container)
) -> PremadeMeal:
    """Return a single pre-made meal."""
    meal = container.catalog.find_premade_meal(meal_id)
    if meal is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Pre-made meal not found"
        )
    return meal


@router.post("/calculate-nutrition")
async def calculate_nutrition(
    payload: CalculateNutritionRequest,
    container: AppContainer = Depends(get_container),
) -> NutritionTotal:
    """Aggregate nutrition for ingredient usages without logging a meal."""
    return container.nutrition_service.compute(
        [usage.to_domain() for usage in payload.ingredients]
    )
