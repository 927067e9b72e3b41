"""Stats delta rules and their application to the profile row."""

from __future__ import annotations

import pytest
from sqlalchemy import select

from fittrack.core.security import hash_password
from fittrack.db.session import async_session_maker
from fittrack.models.profile import Profile
from fittrack.models.user import User
from fittrack.services.stats import (
    NO_CHANGE,
    StatsDelta,
    apply_stats_delta,
    goal_delta,
    workout_delta,
)


@pytest.mark.parametrize(
    "was, now, expected",
    [
        (False, True, StatsDelta(workouts_completed=1, total_minutes=45)),
        (True, False, StatsDelta(workouts_completed=-1, total_minutes=-30)),
        (False, False, NO_CHANGE),
        (True, True, StatsDelta(total_minutes=15)),
    ],
)
def test_workout_delta_transitions(was, now, expected):
    # 30 minutes counted before the write, 45 after it
    assert workout_delta(was, now, 30, 45) == expected


@pytest.mark.parametrize(
    "was, now, expected",
    [
        (False, True, StatsDelta(goals_achieved=1)),
        (True, False, StatsDelta(goals_achieved=-1)),
        (False, False, NO_CHANGE),
        (True, True, NO_CHANGE),
    ],
)
def test_goal_delta_transitions(was, now, expected):
    assert goal_delta(was, now) == expected


def test_empty_delta_is_falsy():
    assert not StatsDelta()
    assert StatsDelta(total_minutes=-5)
    assert not workout_delta(True, True, 30, 30)


async def _user_without_profile(db) -> User:
    user = User(name="Cleo", email="cleo@example.com", password_hash=hash_password("secret123"))
    db.add(user)
    await db.commit()
    return user


async def _profile(user_id) -> Profile | None:
    # Read through a separate session so nothing comes from db's identity map
    async with async_session_maker() as session:
        result = await session.execute(select(Profile).where(Profile.user_id == user_id))
        return result.scalar_one_or_none()


async def test_apply_creates_missing_profile_then_applies(db):
    user = await _user_without_profile(db)

    await apply_stats_delta(db, user.id, StatsDelta(workouts_completed=1, total_minutes=40))
    await db.commit()

    profile = await _profile(user.id)
    assert profile is not None
    assert (profile.workouts_completed, profile.total_minutes, profile.goals_achieved) == (1, 40, 0)
    assert profile.name == "Cleo"


async def test_apply_accumulates(db):
    user = await _user_without_profile(db)

    await apply_stats_delta(db, user.id, StatsDelta(goals_achieved=1))
    await apply_stats_delta(db, user.id, StatsDelta(goals_achieved=1))
    await apply_stats_delta(db, user.id, StatsDelta(goals_achieved=-1))
    await db.commit()

    profile = await _profile(user.id)
    assert profile.goals_achieved == 1


async def test_empty_delta_does_not_create_profile(db):
    user = await _user_without_profile(db)

    await apply_stats_delta(db, user.id, NO_CHANGE)
    await db.commit()

    assert await _profile(user.id) is None
