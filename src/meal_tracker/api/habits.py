"""Habit, goal, challenge and settings endpoints."""

from fastapi import APIRouter, Depends, HTTPException, Response, status

from meal_tracker.api.dependencies import get_container, require_user
from meal_tracker.api.models import (
    HabitCreateRequest,
    HabitUpdateRequest,
    SettingsUpdateRequest,
)
from meal_tracker.containers import AppContainer
from meal_tracker.domain.habits import Challenge, Goal, Habit
from meal_tracker.domain.settings import UserSettings

router = APIRouter(prefix="/api", tags=["habits"])


@router.get("/habits")
async def list_habits(
    user_id: int = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> list[Habit]:
    """Return the user's habits."""
    return container.habit_service.list_habits(user_id)


@router.post("/habits", status_code=status.HTTP_201_CREATED)
async def create_habit(
    payload: HabitCreateRequest,
    user_id: int = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> Habit:
    """Create a habit for the user."""
    return container.habit_service.create_habit(user_id, payload.model_dump())


@router.put("/habits/{habit_id}")
async def update_habit(
    habit_id: int,
    payload: HabitUpdateRequest,
    user_id: int = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> Habit:
    """Replace the sent fields of a habit."""
    habit = container.habit_service.update_habit(
        user_id, habit_id, payload.model_dump(exclude_unset=True, exclude_none=True)
    )
    if habit is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Habit not found"
        )
    return habit


@router.delete("/habits/{habit_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_habit(
    habit_id: int,
    user_id: int = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> Response:
    """Delete one of the user's habits."""
    if not container.habit_service.delete_habit(user_id, habit_id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Habit not found"
        )
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/goals")
async def list_goals(
    user_id: int = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> list[Goal]:
    """Return the user's goals."""
    return container.goal_service.list_goals(user_id)


@router.get("/challenges")
async def list_challenges(
    user_id: int = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> list[Challenge]:
    """Return the user's challenges."""
    return container.goal_service.list_challenges(user_id)


@router.get("/settings")
async def get_settings(
    user_id: int = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> UserSettings:
    """Return the user's settings."""
    return container.user_settings_service.get_settings(user_id)


@router.put("/settings")
async def update_settings(
    payload: SettingsUpdateRequest,
    user_id: int = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> UserSettings:
    """Merge the sent fields into the user's settings."""
    return container.user_settings_service.update_settings(
        user_id, payload.model_dump(exclude_unset=True, exclude_none=True)
    )


@router.get("/admin/check")
async def admin_check(
    user_id: int = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> dict[str, bool]:
    """Report whether the user's settings grant admin access."""
    return {"is_admin": container.user_settings_service.is_admin(user_id)}
