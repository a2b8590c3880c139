"""Admin API endpoints with simple token auth."""

from fastapi import APIRouter, Depends, Header, HTTPException, status

from meal_tracker.api.dependencies import get_container
from meal_tracker.containers import AppContainer
from meal_tracker.domain.admin import AdminUserSummary

router = APIRouter(prefix="/admin", tags=["admin"])


def _get_admin_token(container: AppContainer = Depends(get_container)) -> str:
    return container.settings.admin_token


async def require_admin(
    x_admin_token: str | None = Header(default=None),
    admin_token: str = Depends(_get_admin_token),
) -> None:
    """Ensure requests include a valid admin token."""
    if not x_admin_token or x_admin_token != admin_token:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED)


@router.get("/health", dependencies=[Depends(require_admin)])
async def admin_health() -> dict[str, str]:
    """Admin health check endpoint."""
    return {"status": "ok"}


@router.get("/users", dependencies=[Depends(require_admin)])
async def list_users(
    container: AppContainer = Depends(get_container),
) -> dict[str, list[AdminUserSummary]]:
    """Return users with usage summaries."""
    return {"users": container.admin_service.list_users()}


@router.get("/analytics", dependencies=[Depends(require_admin)])
async def analytics(
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Return aggregate meal and habit analytics."""
    return container.admin_service.get_analytics()
