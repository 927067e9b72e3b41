"""Alembic environment for the FitTrack schema.

The database URL always comes from fittrack settings (DATABASE_* / DATABASE_DSN),
never from alembic.ini. SQLite migrations run in batch mode.
"""

from logging.config import fileConfig

from alembic import context
from sqlalchemy import create_engine, pool

import fittrack.models  # noqa: F401 - populate Base.metadata
from fittrack.core.config import get_settings
from fittrack.db.base import Base

if context.config.config_file_name is not None:
    fileConfig(context.config.config_file_name)

DATABASE_URL = get_settings().database_url


def _configure(**kwargs) -> None:
    context.configure(
        target_metadata=Base.metadata,
        compare_type=True,
        render_as_batch=DATABASE_URL.startswith("sqlite"),
        **kwargs,
    )
    with context.begin_transaction():
        context.run_migrations()


def run_migrations_offline() -> None:
    """Emit SQL to stdout instead of connecting."""
    _configure(url=DATABASE_URL, literal_binds=True, dialect_opts={"paramstyle": "named"})


def run_migrations_online() -> None:
    engine = create_engine(DATABASE_URL, poolclass=pool.NullPool)
    try:
        with engine.connect() as connection:
            _configure(connection=connection)
    finally:
        engine.dispose()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
