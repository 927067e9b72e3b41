"""Workout CRUD endpoints. Every completed-flag change goes through services.stats."""

from __future__ import annotations

import logging
import uuid
from datetime import datetime

from fastapi import APIRouter, Depends, Query
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from fittrack.api.deps import get_current_user_id
from fittrack.db.session import get_db
from fittrack.models.workout import Workout, WorkoutExercise
from fittrack.schemas.workout import ExerciseCreate, WorkoutCreate, WorkoutRead, WorkoutUpdate
from fittrack.services.ownership import get_owned
from fittrack.services.stats import apply_stats_delta, workout_delta

logger = logging.getLogger(__name__)
router = APIRouter()

WITH_EXERCISES = (selectinload(Workout.exercises),)
# Columns a PATCH may set back to null
CLEARABLE_FIELDS = {"notes"}


def _build_exercises(items: list[ExerciseCreate]) -> list[WorkoutExercise]:
    return [WorkoutExercise(position=i, **item.model_dump()) for i, item in enumerate(items)]


async def _get_owned_workout(db: AsyncSession, workout_id: str, user_id: uuid.UUID) -> Workout:
    return await get_owned(db, Workout, workout_id, user_id, "Workout", options=WITH_EXERCISES)


@router.get("", response_model=list[WorkoutRead])
async def list_workouts(
    db: AsyncSession = Depends(get_db),
    user_id: uuid.UUID = Depends(get_current_user_id),
    skip: int = Query(0, ge=0),
    limit: int = Query(100, ge=1, le=500),
    from_date: datetime | None = None,
    to_date: datetime | None = None,
):
    """List the caller's workouts, newest first, optionally filtered by date range."""
    stmt = select(Workout).where(Workout.user_id == user_id).options(*WITH_EXERCISES)
    if from_date:
        stmt = stmt.where(Workout.date >= from_date)
    if to_date:
        stmt = stmt.where(Workout.date <= to_date)
    stmt = stmt.order_by(Workout.date.desc()).offset(skip).limit(limit)
    result = await db.execute(stmt)
    return list(result.scalars().all())


@router.post("", response_model=WorkoutRead, status_code=201)
async def create_workout(
    payload: WorkoutCreate,
    db: AsyncSession = Depends(get_db),
    user_id: uuid.UUID = Depends(get_current_user_id),
):
    """Log a workout. Counts toward stats immediately if created as completed."""
    data = payload.model_dump(exclude={"exercises"})
    workout = Workout(user_id=user_id, exercises=_build_exercises(payload.exercises), **data)
    db.add(workout)
    await db.flush()
    await apply_stats_delta(db, user_id, workout_delta(False, workout.completed, 0, workout.duration))
    return workout


@router.get("/{workout_id}", response_model=WorkoutRead)
async def get_workout(
    workout_id: str,
    db: AsyncSession = Depends(get_db),
    user_id: uuid.UUID = Depends(get_current_user_id),
):
    """Get one of the caller's workouts with its exercises."""
    return await _get_owned_workout(db, workout_id, user_id)


@router.patch("/{workout_id}", response_model=WorkoutRead)
async def update_workout(
    workout_id: str,
    payload: WorkoutUpdate,
    db: AsyncSession = Depends(get_db),
    user_id: uuid.UUID = Depends(get_current_user_id),
):
    """Partial update.

    The stats delta compares the completed flag as stored before this write
    with the value requested in the payload. A workout that stays completed
    only moves total minutes by its duration change. notes may be cleared with null.
    """
    workout = await _get_owned_workout(db, workout_id, user_id)
    was_completed = workout.completed
    duration_before = workout.duration

    data = {
        k: v
        for k, v in payload.model_dump(exclude_unset=True, exclude={"exercises"}).items()
        if v is not None or k in CLEARABLE_FIELDS
    }
    for k, v in data.items():
        setattr(workout, k, v)
    if payload.exercises is not None:
        workout.exercises = _build_exercises(payload.exercises)
    await db.flush()

    is_completed = data.get("completed", was_completed)
    await apply_stats_delta(
        db, user_id, workout_delta(was_completed, is_completed, duration_before, workout.duration)
    )
    return workout


@router.put("/{workout_id}/toggle-complete", response_model=WorkoutRead)
async def toggle_workout_complete(
    workout_id: str,
    db: AsyncSession = Depends(get_db),
    user_id: uuid.UUID = Depends(get_current_user_id),
):
    """Flip completed; always a real transition, so always one delta."""
    workout = await _get_owned_workout(db, workout_id, user_id)
    was_completed = workout.completed
    workout.completed = not was_completed
    await db.flush()
    await apply_stats_delta(
        db, user_id, workout_delta(was_completed, workout.completed, workout.duration, workout.duration)
    )
    return workout


@router.delete("/{workout_id}", status_code=204)
async def delete_workout(
    workout_id: str,
    db: AsyncSession = Depends(get_db),
    user_id: uuid.UUID = Depends(get_current_user_id),
):
    """Delete a workout; a completed one is first taken out of the stats."""
    workout = await _get_owned_workout(db, workout_id, user_id)
    await apply_stats_delta(db, user_id, workout_delta(workout.completed, False, workout.duration, 0))
    await db.delete(workout)
    logger.info("Deleted workout %s for user %s", workout.id, user_id)
    return None
