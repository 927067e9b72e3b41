"""Async database engine and session factory."""

from collections.abc import AsyncGenerator
from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import NullPool

from fittrack.core.config import Settings, get_settings

settings = get_settings()


def _engine_options(cfg: Settings) -> dict[str, Any]:
    # SQLite (dev/tests) gets a fresh connection per checkout; pool sizing is PostgreSQL only
    if cfg.async_database_url.startswith("sqlite"):
        return {"poolclass": NullPool, "echo": cfg.debug}
    return {
        "pool_size": cfg.database_pool_size,
        "max_overflow": cfg.database_max_overflow,
        "echo": cfg.debug,
    }


engine = create_async_engine(settings.async_database_url, **_engine_options(settings))

async_session_maker = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
    autocommit=False,
    autoflush=False,
)


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """Dependency that yields an async DB session.

    One transaction per request: entity writes and stats deltas commit together
    or roll back together.
    """
    async with async_session_maker() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()
