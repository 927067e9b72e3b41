"""Request payload builders and small API helpers for tests."""

from __future__ import annotations

from datetime import date, datetime, timedelta, timezone

from httpx import AsyncClient

API = "/api/v1"


def iso_days_ago(days: int) -> str:
    return (datetime.now(timezone.utc) - timedelta(days=days)).isoformat()


def workout_payload(**overrides) -> dict:
    payload = {
        "title": "Leg day",
        "date": iso_days_ago(1),
        "duration": 30,
        "type": "Strength",
        "exercises": [
            {"name": "Squat", "sets": 5, "reps": 5, "weight": 100},
            {"name": "Lunge", "sets": 3, "reps": 12},
        ],
        "notes": "felt strong",
    }
    payload.update(overrides)
    return payload


def goal_payload(**overrides) -> dict:
    payload = {
        "title": "Run 10k",
        "description": "Under an hour",
        "targetDate": (date.today() + timedelta(days=30)).isoformat(),
        "category": "Cardio",
    }
    payload.update(overrides)
    return payload


async def stats(client: AsyncClient) -> dict:
    resp = await client.get(f"{API}/users/profile")
    assert resp.status_code == 200, resp.text
    return resp.json()["stats"]


async def create_workout(client: AsyncClient, **overrides) -> dict:
    resp = await client.post(f"{API}/workouts", json=workout_payload(**overrides))
    assert resp.status_code == 201, resp.text
    return resp.json()


async def create_goal(client: AsyncClient, **overrides) -> dict:
    resp = await client.post(f"{API}/goals", json=goal_payload(**overrides))
    assert resp.status_code == 201, resp.text
    return resp.json()
