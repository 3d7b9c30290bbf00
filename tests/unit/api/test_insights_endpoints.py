"""Tests for the stateless insights endpoints."""

import pytest
from fastapi.testclient import TestClient

from lifetrack.main import app


@pytest.fixture
def client():
    return TestClient(app)


def _sessions(n: int) -> list[dict]:
    return [
        {
            "id": f"s{i}",
            "timestamp": f"2026-02-{i + 1:02d}T07:30:00",
            "program_tag": "PUSH",
            "exercise_entries": [{"exercise_name": "Chest Press", "weight": 50 + i, "completed": True}],
        }
        for i in range(n)
    ]


def _steady_week() -> dict:
    days = [f"2026-03-{d:02d}" for d in range(9, 16)]
    return {
        "meals": [
            {"date": d, "meal_type": "dinner",
             "items": [{"calories": 2000, "protein": 150, "carbs": 200, "fat": 65}]}
            for d in days
        ],
        "water_logs": [{"date": d, "amount_ml": 2500} for d in days],
    }


class TestHealth:
    def test_health(self, client):
        resp = client.get("/health")
        assert resp.status_code == 200
        assert resp.json()["status"] == "healthy"

    def test_info(self, client):
        assert client.get("/info").json()["project name"] == "LifeTrack Insights"


class TestWorkoutEndpoint:
    def test_cycle_and_sessions(self, client):
        resp = client.post("/api/v1/insights/workouts", json={"sessions": _sessions(18)})
        assert resp.status_code == 200
        body = resp.json()
        assert body["cycle"]["current_week"] == 6
        assert body["cycle"]["is_deload_week"] is True
        assert body["total_sessions"] == 18
        assert body["sessions"][1]["is_pr"] is True

    def test_empty_snapshot(self, client):
        body = client.post("/api/v1/insights/workouts", json={}).json()
        assert body["cycle"]["current_week"] == 0
        assert body["sessions"] == []

    def test_calendar_strategy(self, client):
        resp = client.post("/api/v1/insights/workouts?strategy=calendar", json={"sessions": _sessions(10)})
        assert resp.json()["cycle"]["current_week"] == 2

    def test_unknown_strategy_is_400(self, client):
        resp = client.post("/api/v1/insights/workouts?strategy=lunar", json={"sessions": _sessions(1)})
        assert resp.status_code == 400
        assert "lunar" in resp.json()["detail"]

    def test_null_weight_entry_skipped(self, client):
        session = {
            "id": "s0",
            "timestamp": "2026-02-01T07:30:00",
            "program_tag": "PUSH",
            "exercise_entries": [
                {"exercise_name": "Chest Press", "weight": None},
                {"exercise_name": "Shoulder Press", "weight": 40, "completed": True},
            ],
        }
        resp = client.post("/api/v1/insights/workouts", json={"sessions": [session]})
        assert resp.status_code == 200
        processed = resp.json()["sessions"][0]
        # Shoulder Press: 1 set × 10 reps × 40 kg
        assert processed["total_volume"] == 400
        assert [e["name"] for e in processed["exercises"]] == ["Shoulder Press"]
        assert len(processed["raw_entries"]) == 2

    def test_invalid_payload_is_422(self, client):
        resp = client.post("/api/v1/insights/workouts", json={"sessions": [{"id": "x"}]})
        assert resp.status_code == 422


class TestNutritionEndpoint:
    def test_goals_absent_defaults_used(self, client):
        resp = client.post("/api/v1/insights/nutrition?as_of=2026-03-15", json=_steady_week())
        assert resp.status_code == 200
        body = resp.json()
        assert body["goals"]["calories_target"] == 2000
        assert body["score"]["overall"] == 100
        assert body["score"]["grade"] == "A+"
        assert len(body["weekly_data"]) == 7
        assert body["weekly_data"][-1]["day_name"] == "Sunday"

    def test_custom_goals(self, client):
        payload = dict(_steady_week(), goals={"calories_target": 2600})
        body = client.post("/api/v1/insights/nutrition?as_of=2026-03-15", json=payload).json()
        assert body["goals"]["calories_target"] == 2600
        assert body["score"]["breakdown"]["calorie_accuracy"] == 0

    def test_window_days(self, client):
        body = client.post("/api/v1/insights/nutrition?as_of=2026-03-15&days=3", json=_steady_week()).json()
        assert len(body["daily_totals"]) == 3

    @pytest.mark.parametrize("days", [0, 91])
    def test_window_days_bounds(self, client, days):
        resp = client.post(f"/api/v1/insights/nutrition?days={days}", json={})
        assert resp.status_code == 422
