"""Dashboard: recent workouts, active goals and stats in one read-only response."""

from __future__ import annotations

import uuid
from datetime import datetime, timedelta, timezone

from fastapi import APIRouter, Depends
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from fittrack.api.deps import get_current_user_id
from fittrack.core.constants import (
    CALORIES_PER_MINUTE,
    DASHBOARD_ACTIVE_GOALS,
    DASHBOARD_RECENT_WORKOUTS,
    WEEK_WINDOW_DAYS,
)
from fittrack.db.session import get_db
from fittrack.models.goal import Goal
from fittrack.models.workout import Workout
from fittrack.schemas.dashboard import DashboardRead, DashboardStats
from fittrack.schemas.goal import GoalRead
from fittrack.schemas.workout import WorkoutRead
from fittrack.services.profiles import get_profile

router = APIRouter()


@router.get("", response_model=DashboardRead)
async def get_dashboard(
    db: AsyncSession = Depends(get_db),
    user_id: uuid.UUID = Depends(get_current_user_id),
):
    """
    Cumulative numbers (goals achieved, total minutes) come from the cached
    profile stats; workouts_this_week is always counted live because it is a
    sliding window. A missing profile reads as zeros and is not created here.
    """
    recent = await db.execute(
        select(Workout)
        .where(Workout.user_id == user_id)
        .options(selectinload(Workout.exercises))
        .order_by(Workout.date.desc())
        .limit(DASHBOARD_RECENT_WORKOUTS)
    )
    goals = await db.execute(
        select(Goal)
        .where(Goal.user_id == user_id, Goal.completed.is_(False))
        .order_by(Goal.target_date.asc())
        .limit(DASHBOARD_ACTIVE_GOALS)
    )

    cutoff = datetime.now(timezone.utc) - timedelta(days=WEEK_WINDOW_DAYS)
    this_week = await db.execute(
        select(func.count(Workout.id)).where(
            Workout.user_id == user_id,
            Workout.date >= cutoff,
            Workout.completed.is_(True),
        )
    )

    profile = await get_profile(db, user_id)
    stats = DashboardStats(workouts_this_week=this_week.scalar_one())
    if profile:
        stats.completed_goals = profile.goals_achieved
        stats.streak_days = profile.longest_streak
        stats.calories_burned = profile.total_minutes * CALORIES_PER_MINUTE
        stats.workouts_completed = profile.workouts_completed
        stats.total_minutes = profile.total_minutes

    return DashboardRead(
        recent_activities=[WorkoutRead.model_validate(w) for w in recent.scalars().all()],
        goals=[GoalRead.model_validate(g) for g in goals.scalars().all()],
        stats=stats,
    )
