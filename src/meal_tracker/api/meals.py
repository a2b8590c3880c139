"""Meal logging endpoints."""

import datetime as dt

from fastapi import APIRouter, Depends, HTTPException, Response, status

from meal_tracker.api.dependencies import get_container, require_user
from meal_tracker.api.models import (
    MealCreateRequest,
    MealUpdateRequest,
    PremadeMealLogRequest,
)
from meal_tracker.containers import AppContainer
from meal_tracker.domain.meals import UserMeal

router = APIRouter(prefix="/api/meals", tags=["meals"])


def _not_found() -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Meal not found")


@router.get("")
async def list_meals(
    date: dt.date | None = None,
    user_id: int = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> list[UserMeal]:
    """Return the user's meals, optionally for a single date."""
    day = date.isoformat() if date else None
    return container.meal_log_service.list_meals(user_id, day)


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_meal(
    payload: MealCreateRequest,
    user_id: int = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> UserMeal:
    """Log a meal for the user."""
    return container.meal_log_service.log_meal(user_id, payload.to_domain())


@router.post("/from-premade", status_code=status.HTTP_201_CREATED)
async def create_meal_from_premade(
    payload: PremadeMealLogRequest,
    user_id: int = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> UserMeal:
    """Log a pre-made meal for the user."""
    meal = container.meal_log_service.log_premade_meal(
        user_id,
        payload.premade_meal_id,
        meal_type=payload.meal_type,
        time=payload.time,
        date=payload.date.isoformat(),
    )
    if meal is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Pre-made meal not found"
        )
    return meal


@router.get("/{meal_id}")
async def get_meal(
    meal_id: int,
    user_id: int = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> UserMeal:
    """Return one of the user's meals."""
    meal = container.meal_log_service.get_meal(user_id, meal_id)
    if meal is None:
        raise _not_found()
    return meal


@router.put("/{meal_id}")
async def update_meal(
    meal_id: int,
    payload: MealUpdateRequest,
    user_id: int = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> UserMeal:
    """Replace the sent fields of a meal."""
    meal = container.meal_log_service.update_meal(
        user_id, meal_id, payload.changes(), usages=payload.usage_list()
    )
    if meal is None:
        raise _not_found()
    return meal


@router.delete("/{meal_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_meal(
    meal_id: int,
    user_id: int = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> Response:
    """Delete one of the user's meals."""
    if not container.meal_log_service.delete_meal(user_id, meal_id):
        raise _not_found()
    return Response(status_code=status.HTTP_204_NO_CONTENT)
