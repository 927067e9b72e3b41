"""Profile read (lazy creation) and update."""

from __future__ import annotations

from sqlalchemy import delete, func, select

from factories import API
from fittrack.core.security import hash_password
from fittrack.models.profile import Profile
from fittrack.models.user import User


async def test_lazy_profile_creation_is_stable(db, make_client):
    db.add(User(name="Dana", email="dana@example.com", password_hash=hash_password("secret123")))
    await db.commit()

    client = await make_client()
    resp = await client.post(f"{API}/auth/login", json={"email": "dana@example.com", "password": "secret123"})
    assert resp.status_code == 200

    first = await client.get(f"{API}/users/profile")
    assert first.status_code == 200
    body = first.json()
    assert (body["name"], body["email"]) == ("Dana", "dana@example.com")
    assert body["stats"] == {"workoutsCompleted": 0, "goalsAchieved": 0, "longestStreak": 0, "totalMinutes": 0}
    assert body["preferences"] == {"weightUnit": "lbs", "heightUnit": "cm", "notificationsEnabled": True}

    second = await client.get(f"{API}/users/profile")
    assert second.json()["id"] == body["id"]

    count = await db.execute(select(func.count(Profile.id)))
    assert count.scalar_one() == 1


async def test_register_creates_profile(client, db):
    count = await db.execute(select(func.count(Profile.id)))
    assert count.scalar_one() == 1


async def test_update_profile_fields_and_mirror_user(client):
    resp = await client.put(
        f"{API}/users/profile",
        json={"name": "Ana B", "email": "ANA.B@example.com", "weight": 61.5, "weightUnit": "kg",
              "notificationsEnabled": False},
    )
    assert resp.status_code == 200
    body = resp.json()
    assert body["name"] == "Ana B"
    assert body["email"] == "ana.b@example.com"
    assert body["measurements"]["weight"] == 61.5
    assert body["measurements"]["height"] == 0
    assert body["preferences"] == {"weightUnit": "kg", "heightUnit": "cm", "notificationsEnabled": False}

    me = (await client.get(f"{API}/users/me")).json()
    assert (me["name"], me["email"]) == ("Ana B", "ana.b@example.com")
    assert "passwordHash" not in me


async def test_update_profile_ignores_stats(client):
    resp = await client.put(f"{API}/users/profile", json={"stats": {"workoutsCompleted": 99}, "height": 170})
    assert resp.status_code == 200
    assert resp.json()["stats"]["workoutsCompleted"] == 0
    assert resp.json()["measurements"]["height"] == 170


async def test_update_profile_rejects_taken_email(client, other_client):
    resp = await client.put(f"{API}/users/profile", json={"email": "ben@example.com"})
    assert resp.status_code == 400
    assert resp.json() == {"message": "Email already in use"}


async def test_update_creates_missing_profile(client, db):
    await db.execute(delete(Profile))
    await db.commit()

    resp = await client.put(f"{API}/users/profile", json={"height": 180})
    assert resp.status_code == 200
    assert resp.json()["measurements"]["height"] == 180
    assert resp.json()["name"] == "Ana"
