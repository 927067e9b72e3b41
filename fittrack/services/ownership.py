"""Entity lookup with ownership check."""

from __future__ import annotations

import uuid
from typing import Any, TypeVar

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from fittrack.core.exceptions import ForbiddenError, NotFoundError

T = TypeVar("T")


def parse_id(raw_id: str, label: str) -> uuid.UUID:
    """Malformed ids are reported exactly like unknown ones."""
    try:
        return uuid.UUID(raw_id)
    except (TypeError, ValueError):
        raise NotFoundError(f"{label} not found") from None


async def get_owned(
    db: AsyncSession,
    model: type[T],
    raw_id: str,
    user_id: uuid.UUID,
    label: str,
    options: tuple[Any, ...] = (),
) -> T:
    """Load model by id; NotFoundError if absent or malformed, ForbiddenError if owned by someone else."""
    entity_id = parse_id(raw_id, label)
    stmt = select(model).where(model.id == entity_id)
    if options:
        stmt = stmt.options(*options)
    result = await db.execute(stmt)
    entity = result.scalar_one_or_none()
    if entity is None:
        raise NotFoundError(f"{label} not found")
    if entity.user_id != user_id:
        raise ForbiddenError("User not authorized")
    return entity
