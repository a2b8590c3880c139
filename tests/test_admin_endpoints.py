"""Tests for admin endpoints."""

from fastapi.testclient import TestClient

from meal_tracker.api.app import create_app
from meal_tracker.containers import AppContainer
from tests.conftest import ADMIN_HEADERS, USER_HEADERS


def test_admin_health_requires_token(container: AppContainer) -> None:
    client = TestClient(create_app(container))

    assert client.get("/admin/health").status_code == 401
    assert (
        client.get("/admin/health", headers={"X-Admin-Token": "wrong"}).status_code
        == 401
    )


def test_admin_health_accepts_valid_token(container: AppContainer) -> None:
    client = TestClient(create_app(container))

    response = client.get("/admin/health", headers=ADMIN_HEADERS)

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_admin_users_endpoint(container: AppContainer) -> None:
    client = TestClient(create_app(container))
    client.post(
        "/api/meals/from-premade",
        json={"premade_meal_id": 1, "meal_type": "Dinner", "time": "7:00 PM", "date": "2026-03-02"},
        headers=USER_HEADERS,
    )

    response = client.get("/admin/users", headers=ADMIN_HEADERS)

    assert response.status_code == 200
    assert response.json()["users"] == [
        {"user_id": 7, "meal_count": 1, "habit_count": 0, "calorie_average": 392.0}
    ]


def test_admin_analytics_endpoint(container: AppContainer) -> None:
    client = TestClient(create_app(container))
    client.post("/api/habits", json={"name": "Walk", "type": "exercise"}, headers=USER_HEADERS)

    response = client.get("/admin/analytics", headers=ADMIN_HEADERS)

    assert response.status_code == 200
    data = response.json()
    assert data["user_count"] == 1
    assert data["habits"]["popular_habit_types"] == [{"name": "exercise", "count": 1}]
    assert data["nutrition"]["meal_logs_total"] == 0
