"""Profile lookup with lazy creation."""

from __future__ import annotations

import logging
import uuid

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from fittrack.core.exceptions import NotFoundError
from fittrack.models.profile import Profile
from fittrack.models.user import User

logger = logging.getLogger(__name__)


async def get_profile(db: AsyncSession, user_id: uuid.UUID) -> Profile | None:
    result = await db.execute(select(Profile).where(Profile.user_id == user_id))
    return result.scalar_one_or_none()


def new_profile_for(user: User) -> Profile:
    """Default profile seeded from the user: zero stats, default measurements and preferences."""
    return Profile(
        user_id=user.id,
        name=user.name,
        email=user.email,
        join_date=user.created_at,
        workouts_completed=0,
        goals_achieved=0,
        longest_streak=0,
        total_minutes=0,
    )


async def get_or_create_profile(db: AsyncSession, user_id: uuid.UUID) -> Profile:
    """Return the user's profile, creating it on first access.

    The insert runs in a savepoint; if a concurrent request created the row
    first, the unique user_id constraint fails and the existing row is returned.
    """
    profile = await get_profile(db, user_id)
    if profile:
        return profile

    user = await db.get(User, user_id)
    if not user:
        raise NotFoundError("User not found")

    profile = new_profile_for(user)
    try:
        async with db.begin_nested():
            db.add(profile)
    except IntegrityError:
        logger.info("Profile for user %s created concurrently; using existing row", user_id)
        existing = await get_profile(db, user_id)
        if existing is None:
            raise
        return existing
    logger.info("Created profile for user %s", user_id)
    return profile
