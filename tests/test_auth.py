"""Registration, login, token transport and refresh."""

from __future__ import annotations

from datetime import timedelta

import pytest

from factories import API
from fittrack.core.exceptions import AuthenticationError
from fittrack.core.security import create_access_token, decode_access_token


async def test_register_sets_cookie_and_returns_user(make_client):
    client = await make_client()
    resp = await client.post(f"{API}/auth/register",
                             json={"name": "Ana", "email": "Ana@Example.com", "password": "secret123"})
    assert resp.status_code == 200
    user = resp.json()["user"]
    assert (user["name"], user["email"]) == ("Ana", "ana@example.com")
    assert "token" in resp.cookies

    me = await client.get(f"{API}/users/me")
    assert me.status_code == 200
    assert me.json()["id"] == user["id"]


async def test_duplicate_email_rejected(client):
    resp = await client.post(f"{API}/auth/register",
                             json={"name": "Again", "email": "ana@example.com", "password": "secret123"})
    assert resp.status_code == 400
    assert resp.json() == {"message": "User already exists"}


async def test_login_with_bad_credentials(client, make_client):
    anonymous = await make_client()
    for body in ({"email": "ana@example.com", "password": "wrong-pass"},
                 {"email": "nobody@example.com", "password": "secret123"}):
        resp = await anonymous.post(f"{API}/auth/login", json=body)
        assert resp.status_code == 401
        assert resp.json() == {"message": "Invalid credentials"}


async def test_bearer_header_fallback(client, make_client):
    login = await client.post(f"{API}/auth/login", json={"email": "ana@example.com", "password": "secret123"})
    token = login.cookies["token"]

    header_only = await make_client()
    resp = await header_only.get(f"{API}/users/me", headers={"Authorization": f"Bearer {token}"})
    assert resp.status_code == 200
    assert resp.json()["email"] == "ana@example.com"


async def test_invalid_token_rejected(make_client):
    anonymous = await make_client()
    resp = await anonymous.get(f"{API}/dashboard", headers={"Authorization": "Bearer not.a.jwt"})
    assert resp.status_code == 401
    assert resp.json() == {"message": "Token is not valid"}


async def test_logout_clears_cookie(client):
    resp = await client.post(f"{API}/auth/logout")
    assert resp.status_code == 200
    assert resp.json() == {"message": "Logged out successfully"}
    assert (await client.get(f"{API}/users/me")).status_code == 401


async def test_refresh_token(client, make_client):
    resp = await client.post(f"{API}/auth/refresh-token")
    assert resp.status_code == 200
    assert resp.json() == {"message": "Token refreshed"}

    anonymous = await make_client()
    assert (await anonymous.post(f"{API}/auth/refresh-token")).status_code == 401


def test_expired_token_is_invalid():
    import uuid

    token = create_access_token(uuid.uuid4(), expires_in=timedelta(seconds=-1))
    with pytest.raises(AuthenticationError):
        decode_access_token(token)
