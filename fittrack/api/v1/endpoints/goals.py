"""Goal CRUD endpoints."""

from __future__ import annotations

import logging
import uuid

from fastapi import APIRouter, Depends
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from fittrack.api.deps import get_current_user_id
from fittrack.core.constants import GOAL_PROGRESS_COMPLETE
from fittrack.db.session import get_db
from fittrack.models.goal import Goal
from fittrack.schemas.goal import GoalCreate, GoalRead, GoalUpdate
from fittrack.services.ownership import get_owned
from fittrack.services.stats import apply_stats_delta, goal_delta

logger = logging.getLogger(__name__)
router = APIRouter()


@router.get("", response_model=list[GoalRead])
async def list_goals(
    db: AsyncSession = Depends(get_db),
    user_id: uuid.UUID = Depends(get_current_user_id),
):
    """All of the caller's goals, nearest target date first."""
    result = await db.execute(
        select(Goal).where(Goal.user_id == user_id).order_by(Goal.target_date.asc())
    )
    return list(result.scalars().all())


@router.post("", response_model=GoalRead, status_code=201)
async def create_goal(
    payload: GoalCreate,
    db: AsyncSession = Depends(get_db),
    user_id: uuid.UUID = Depends(get_current_user_id),
):
    goal = Goal(user_id=user_id, **payload.model_dump())
    db.add(goal)
    await db.flush()
    await apply_stats_delta(db, user_id, goal_delta(False, goal.completed))
    return goal


@router.get("/{goal_id}", response_model=GoalRead)
async def get_goal(
    goal_id: str,
    db: AsyncSession = Depends(get_db),
    user_id: uuid.UUID = Depends(get_current_user_id),
):
    return await get_owned(db, Goal, goal_id, user_id, "Goal")


@router.patch("/{goal_id}", response_model=GoalRead)
async def update_goal(
    goal_id: str,
    payload: GoalUpdate,
    db: AsyncSession = Depends(get_db),
    user_id: uuid.UUID = Depends(get_current_user_id),
):
    """Partial update. Setting completed here does not touch progress (only toggle does)."""
    goal = await get_owned(db, Goal, goal_id, user_id, "Goal")
    was_completed = goal.completed

    data = payload.model_dump(exclude_unset=True, exclude_none=True)
    for k, v in data.items():
        setattr(goal, k, v)
    await db.flush()

    await apply_stats_delta(db, user_id, goal_delta(was_completed, data.get("completed", was_completed)))
    return goal


@router.put("/{goal_id}/toggle-complete", response_model=GoalRead)
async def toggle_goal_complete(
    goal_id: str,
    db: AsyncSession = Depends(get_db),
    user_id: uuid.UUID = Depends(get_current_user_id),
):
    """Flip completed. Completing forces progress to 100; un-completing keeps progress as is."""
    goal = await get_owned(db, Goal, goal_id, user_id, "Goal")
    was_completed = goal.completed
    goal.completed = not was_completed
    if goal.completed:
        goal.progress = GOAL_PROGRESS_COMPLETE
    await db.flush()
    await apply_stats_delta(db, user_id, goal_delta(was_completed, goal.completed))
    return goal


@router.delete("/{goal_id}", status_code=204)
async def delete_goal(
    goal_id: str,
    db: AsyncSession = Depends(get_db),
    user_id: uuid.UUID = Depends(get_current_user_id),
):
    goal = await get_owned(db, Goal, goal_id, user_id, "Goal")
    await apply_stats_delta(db, user_id, goal_delta(goal.completed, False))
    await db.delete(goal)
    logger.info("Deleted goal %s for user %s", goal.id, user_id)
    return None
