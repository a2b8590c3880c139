"""Shared request dependencies."""

from fastapi import Header, HTTPException, Request, status

from meal_tracker.containers import AppContainer


def get_container(request: Request) -> AppContainer:
    """Return the dependency container attached to the app."""
    return request.app.state.container


async def require_user(x_user_id: str | None = Header(default=None)) -> int:
    """Resolve the per-user key from the X-User-Id header."""
    if not x_user_id or not x_user_id.strip().isdigit():
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED)
    user_id = int(x_user_id.strip())
    if user_id <= 0:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED)
    return user_id
