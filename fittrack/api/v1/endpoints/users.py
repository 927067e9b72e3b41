"""Current user and profile endpoints."""

from __future__ import annotations

import uuid

from fastapi import APIRouter, Depends
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from fittrack.api.deps import get_current_user_id
from fittrack.core.exceptions import NotFoundError, ValidationFailedError
from fittrack.db.session import get_db
from fittrack.models.user import User
from fittrack.schemas.auth import UserRead
from fittrack.schemas.profile import ProfileRead, ProfileUpdate
from fittrack.services.profiles import get_or_create_profile

router = APIRouter()


@router.get("/me", response_model=UserRead)
async def get_me(
    db: AsyncSession = Depends(get_db),
    user_id: uuid.UUID = Depends(get_current_user_id),
):
    user = await db.get(User, user_id)
    if not user:
        raise NotFoundError("User not found")
    return user


@router.get("/profile", response_model=ProfileRead)
async def get_user_profile(
    db: AsyncSession = Depends(get_db),
    user_id: uuid.UUID = Depends(get_current_user_id),
):
    """The caller's profile; created with zero stats on first access."""
    profile = await get_or_create_profile(db, user_id)
    return ProfileRead.from_profile(profile)


@router.put("/profile", response_model=ProfileRead)
async def update_user_profile(
    payload: ProfileUpdate,
    db: AsyncSession = Depends(get_db),
    user_id: uuid.UUID = Depends(get_current_user_id),
):
    """Update profile details; name/email changes are mirrored onto the user record."""
    data = payload.model_dump(exclude_unset=True, exclude_none=True)
    if "email" in data:
        data["email"] = data["email"].strip().lower()
        taken = await db.execute(select(User.id).where(User.email == data["email"], User.id != user_id))
        if taken.scalar_one_or_none() is not None:
            raise ValidationFailedError("Email already in use")

    profile = await get_or_create_profile(db, user_id)
    for k, v in data.items():
        setattr(profile, k, v)

    if "name" in data or "email" in data:
        user = await db.get(User, user_id)
        if user:
            user.name = data.get("name", user.name)
            user.email = data.get("email", user.email)

    await db.flush()
    return ProfileRead.from_profile(profile)
