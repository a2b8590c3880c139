"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from meal_tracker.api.admin import router as admin_router
from meal_tracker.api.catalog import router as catalog_router
from meal_tracker.api.habits import router as habits_router
from meal_tracker.api.insights import router as insights_router
from meal_tracker.api.meals import router as meals_router
from meal_tracker.app_logging import configure_logging
from meal_tracker.config import parse_log_level
from meal_tracker.containers import AppContainer


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(parse_log_level(container.settings.log_level))
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        logger.info(
            "Starting meal tracker: environment=%s storage=%s",
            container.settings.environment,
            "supabase" if container.settings.uses_supabase else "memory",
        )
        yield
        logger.info("Stopping meal tracker")

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    app.include_router(catalog_router)
    app.include_router(meals_router)
    app.include_router(habits_router)
    app.include_router(insights_router)
    app.include_router(admin_router)

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    return app
