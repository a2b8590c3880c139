"""Stats and assistant endpoints."""

import datetime as dt

from fastapi import APIRouter, Depends

from meal_tracker.api.dependencies import get_container, require_user
from meal_tracker.api.models import AssistantMessageRequest
from meal_tracker.containers import AppContainer
from meal_tracker.domain.stats import DailySummary, PeriodSummary
from meal_tracker.services.assistant import AssistantReply, NutritionAnalysis

router = APIRouter(prefix="/api", tags=["insights"])


def _today() -> dt.date:
    return dt.datetime.now(tz=dt.UTC).date()


@router.get("/stats/daily")
async def daily_stats(
    date: dt.date | None = None,
    user_id: int = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> DailySummary:
    """Return a day's totals against the user's goals."""
    return container.stats_service.get_daily_summary(user_id, date or _today())


@router.get("/stats/week")
async def weekly_stats(
    end: dt.date | None = None,
    user_id: int = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> PeriodSummary:
    """Return the seven days ending at ``end``."""
    return container.stats_service.get_week(user_id, end or _today())


@router.post("/ai/generate-response")
async def generate_response(
    payload: AssistantMessageRequest,
    _user_id: int = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> AssistantReply:
    """Return a templated assistant reply."""
    return container.assistant_service.reply(payload.message)


@router.get("/ai/nutritional-analysis")
async def nutritional_analysis(
    date: dt.date | None = None,
    user_id: int = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> NutritionAnalysis:
    """Return suggestions for a day's meals."""
    return container.assistant_service.analyze_day(user_id, date or _today())
