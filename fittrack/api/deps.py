"""Request dependencies shared by endpoints."""

from __future__ import annotations

import uuid

from fastapi import Request

from fittrack.core.config import get_settings
from fittrack.core.exceptions import AuthenticationError
from fittrack.core.security import decode_access_token


def _token_from_request(request: Request) -> str | None:
    # Cookie first, Authorization: Bearer as fallback
    token = request.cookies.get(get_settings().auth_cookie_name)
    if token:
        return token
    scheme, _, credentials = request.headers.get("Authorization", "").partition(" ")
    if scheme.lower() == "bearer" and credentials:
        return credentials.strip()
    return None


async def get_current_user_id(request: Request) -> uuid.UUID:
    """Authenticated caller's user id. The id is trusted as-is by the handlers."""
    token = _token_from_request(request)
    if not token:
        raise AuthenticationError("No token, authorization denied")
    return decode_access_token(token)
