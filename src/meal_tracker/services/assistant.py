"""Templated assistant replies and meal analysis."""

from dataclasses import dataclass, field
from datetime import UTC, date, datetime

from meal_tracker.domain.stats import DailySummary
from meal_tracker.services.stats import StatsService

_TOPIC_REPLIES = (
    (
        ("meal", "food", "eat"),
        "Based on your meal history, your protein intake has been good, but you "
        "might benefit from more vegetables. Would you like me to suggest a "
        "balanced meal plan for tomorrow?",
    ),
    (
        ("workout", "exercise"),
        "For your goals, I recommend adding one more strength training session "
        "this week. Would you like me to create a workout that targets your "
        "specific goals?",
    ),
    (
        ("sleep", "tired"),
        "For optimal health, aim for 7-8 hours of sleep per night. Try "
        "establishing a consistent bedtime routine and limiting screen time "
        "before bed.",
    ),
)

_FALLBACK_REPLY = (
    "Thank you for your message. Your consistency with logging meals is "
    "excellent. Is there anything specific about your health journey you'd "
    "like insights on?"
)

# Share of a daily goal below which a nutrient is reported as low.
LOW_PERCENT = 50.0
HIGH_PERCENT = 110.0


@dataclass(frozen=True)
class AssistantReply:
    """Reply text with the time it was produced."""

    message: str
    timestamp: datetime


@dataclass(frozen=True)
class NutritionAnalysis:
    """Daily summary with plain-language suggestions."""

    summary: DailySummary
    suggestions: list[str] = field(default_factory=list)


@dataclass
class AssistantService:
    """Keyword-driven assistant; no model inference is involved."""

    stats_service: StatsService

    def reply(self, message: str) -> AssistantReply:
        """Pick a templated reply for the first matching topic."""
        text = message.lower()
        for keywords, response in _TOPIC_REPLIES:
            if any(keyword in text for keyword in keywords):
                return AssistantReply(message=response, timestamp=datetime.now(tz=UTC))
        return AssistantReply(message=_FALLBACK_REPLY, timestamp=datetime.now(tz=UTC))

    def analyze_day(self, user_id: int, day: date) -> NutritionAnalysis:
        """Compare a day's meals with the user's goals."""
        summary = self.stats_service.get_daily_summary(user_id, day)
        suggestions: list[str] = []
        if summary.totals.meal_count == 0:
            suggestions.append("No meals logged for this day yet.")
            return NutritionAnalysis(summary=summary, suggestions=suggestions)
        for label, progress in (
            ("protein", summary.protein),
            ("carbs", summary.carbs),
            ("fat", summary.fat),
        ):
            if progress.percent < LOW_PERCENT:
                suggestions.append(
                    f"Your {label} intake is at {progress.percent:g}% of your goal; "
                    f"consider adding {progress.remaining:g} g."
                )
            elif progress.percent > HIGH_PERCENT:
                suggestions.append(
                    f"Your {label} intake is above your goal "
                    f"({progress.percent:g}%)."
                )
        if summary.calories.percent > HIGH_PERCENT:
            suggestions.append("You are over your calorie goal for the day.")
        return NutritionAnalysis(summary=summary, suggestions=suggestions)
