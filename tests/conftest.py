from __future__ import annotations

import os
import tempfile
from pathlib import Path

# Settings are read once at import time, so point them at a throwaway SQLite file first
_DB_DIR = tempfile.mkdtemp(prefix="fittrack-tests-")
os.environ["DATABASE_DSN"] = f"sqlite+aiosqlite:///{Path(_DB_DIR) / 'test.db'}"
os.environ["JWT_SECRET"] = "test-secret"
os.environ["ENVIRONMENT"] = "test"
os.environ["LOG_LEVEL"] = "WARNING"

import pytest_asyncio  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402

import fittrack.models  # noqa: E402, F401 - register all tables
from fittrack.db.base import Base  # noqa: E402
from fittrack.db.session import async_session_maker, engine  # noqa: E402
from factories import API  # noqa: E402
from fittrack.main import app  # noqa: E402


@pytest_asyncio.fixture(autouse=True)
async def _schema():
    """Fresh tables for every test."""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)
    yield


@pytest_asyncio.fixture
async def db():
    async with async_session_maker() as session:
        yield session


@pytest_asyncio.fixture
async def make_client():
    """Each client keeps its own cookie jar, i.e. acts as one signed-in user."""
    clients: list[AsyncClient] = []

    async def _make() -> AsyncClient:
        c = AsyncClient(transport=ASGITransport(app=app), base_url="http://test")
        clients.append(c)
        return c

    yield _make
    for c in clients:
        await c.aclose()


@pytest_asyncio.fixture
async def signup(make_client):
    async def _signup(email: str = "ana@example.com", name: str = "Ana", password: str = "secret123") -> AsyncClient:
        client = await make_client()
        resp = await client.post(f"{API}/auth/register", json={"name": name, "email": email, "password": password})
        assert resp.status_code == 200, resp.text
        return client

    return _signup


@pytest_asyncio.fixture
async def client(signup):
    return await signup()


@pytest_asyncio.fixture
async def other_client(signup):
    return await signup(email="ben@example.com", name="Ben")
