"""Register / login / logout / refresh. The JWT travels in an http-only cookie."""

from __future__ import annotations

import logging
import uuid
from datetime import timedelta

from fastapi import APIRouter, Depends, Request, Response
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from fittrack.core.config import get_settings
from fittrack.core.exceptions import AuthenticationError, ValidationFailedError
from fittrack.core.security import create_access_token, decode_access_token, hash_password, verify_password
from fittrack.db.session import get_db
from fittrack.models.user import User
from fittrack.schemas.auth import AuthResponse, UserLogin, UserRead, UserRegister
from fittrack.schemas.common import MessageResponse
from fittrack.services.profiles import new_profile_for

logger = logging.getLogger(__name__)
router = APIRouter()


def _set_auth_cookie(response: Response, user_id: uuid.UUID) -> None:
    settings = get_settings()
    response.set_cookie(
        key=settings.auth_cookie_name,
        value=create_access_token(user_id),
        max_age=int(timedelta(days=settings.jwt_expire_days).total_seconds()),
        httponly=True,
        secure=settings.is_production,
        samesite="strict",
    )


@router.post("/register", response_model=AuthResponse)
async def register(payload: UserRegister, response: Response, db: AsyncSession = Depends(get_db)):
    """Create the account and its (zero-stat) profile, then sign in."""
    existing = await db.execute(select(User.id).where(User.email == payload.email))
    if existing.scalar_one_or_none() is not None:
        raise ValidationFailedError("User already exists")

    user = User(name=payload.name, email=payload.email, password_hash=hash_password(payload.password))
    db.add(user)
    try:
        await db.flush()
    except IntegrityError:
        raise ValidationFailedError("User already exists") from None
    db.add(new_profile_for(user))
    await db.flush()

    _set_auth_cookie(response, user.id)
    logger.info("Registered user %s", user.id)
    return AuthResponse(user=UserRead.model_validate(user))


@router.post("/login", response_model=AuthResponse)
async def login(payload: UserLogin, response: Response, db: AsyncSession = Depends(get_db)):
    result = await db.execute(select(User).where(User.email == payload.email))
    user = result.scalar_one_or_none()
    if not user or not verify_password(payload.password, user.password_hash):
        logger.info("Failed login for %s", payload.email)
        raise AuthenticationError("Invalid credentials")
    _set_auth_cookie(response, user.id)
    return AuthResponse(user=UserRead.model_validate(user))


@router.post("/logout", response_model=MessageResponse)
async def logout(response: Response):
    response.delete_cookie(get_settings().auth_cookie_name)
    return MessageResponse(message="Logged out successfully")


@router.post("/refresh-token", response_model=MessageResponse)
async def refresh_token(request: Request, response: Response, db: AsyncSession = Depends(get_db)):
    """Re-issue the cookie for a still-valid token whose user still exists."""
    token = request.cookies.get(get_settings().auth_cookie_name)
    if not token:
        raise AuthenticationError("No token, authorization denied")
    user_id = decode_access_token(token)
    user = await db.get(User, user_id)
    if not user:
        raise AuthenticationError("User not found")
    _set_auth_cookie(response, user.id)
    return MessageResponse(message="Token refreshed")
