"""Tests for stats and assistant endpoints."""

from fastapi.testclient import TestClient

from meal_tracker.api.app import create_app
from meal_tracker.containers import AppContainer
from tests.conftest import USER_HEADERS


def _log_chicken(client: TestClient) -> None:
    client.post(
        "/api/meals",
        json={
            "name": "Lunch",
            "meal_type": "Lunch",
            "time": "12:00 PM",
            "date": "2026-03-02",
            "usages": [{"ingredient_id": 1, "quantity": 200}],
        },
        headers=USER_HEADERS,
    )


def test_daily_stats(container: AppContainer) -> None:
    client = TestClient(create_app(container))
    _log_chicken(client)

    response = client.get(
        "/api/stats/daily", params={"date": "2026-03-02"}, headers=USER_HEADERS
    )

    assert response.status_code == 200
    data = response.json()
    assert data["totals"]["calories"] == 330
    assert data["totals"]["meal_count"] == 1
    assert data["calories"]["percent"] == 16.5
    assert data["protein"]["consumed"] == 62.0


def test_weekly_stats(container: AppContainer) -> None:
    client = TestClient(create_app(container))
    _log_chicken(client)

    response = client.get(
        "/api/stats/week", params={"end": "2026-03-04"}, headers=USER_HEADERS
    )

    data = response.json()
    assert [entry["day"] for entry in data["daily"]][-1] == "2026-03-04"
    assert data["daily"][4]["calories"] == 330


def test_generate_response(container: AppContainer) -> None:
    client = TestClient(create_app(container))

    response = client.post(
        "/api/ai/generate-response",
        json={"message": "How much sleep do I need?"},
        headers=USER_HEADERS,
    )

    assert response.status_code == 200
    assert "7-8 hours" in response.json()["message"]
    assert "timestamp" in response.json()


def test_nutritional_analysis(container: AppContainer) -> None:
    client = TestClient(create_app(container))
    _log_chicken(client)

    response = client.get(
        "/api/ai/nutritional-analysis",
        params={"date": "2026-03-02"},
        headers=USER_HEADERS,
    )

    data = response.json()
    assert data["summary"]["totals"]["calories"] == 330
    assert any(item.startswith("Your carbs intake is at 0%") for item in data["suggestions"])
