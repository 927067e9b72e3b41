"""Profile stats aggregate maintenance.

The stats columns on Profile cache facts derivable from the user's workouts
and goals:

    workouts_completed == count(workouts where completed)
    total_minutes      == sum(workout.duration where completed)
    goals_achieved     == count(goals where completed)

Every handler that creates, updates, toggles or deletes a workout or goal
computes a StatsDelta from the entity's completed flag (and, for workouts,
duration) before and after the call and passes it to apply_stats_delta. The
delta is applied as a single UPDATE ... SET col = col + :n so concurrent
requests for the same user never lose increments.
"""

from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass

from sqlalchemy import update
from sqlalchemy.ext.asyncio import AsyncSession

from fittrack.models.profile import Profile
from fittrack.services.profiles import get_or_create_profile

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StatsDelta:
    """Signed change to the stats aggregate."""

    workouts_completed: int = 0
    total_minutes: int = 0
    goals_achieved: int = 0

    def __bool__(self) -> bool:
        return bool(self.workouts_completed or self.total_minutes or self.goals_achieved)


NO_CHANGE = StatsDelta()


def workout_delta(
    was_completed: bool,
    is_completed: bool,
    duration_before: int,
    duration_after: int,
) -> StatsDelta:
    """Delta for a workout whose completed flag goes from was_completed to is_completed.

    Create is (False -> completed), delete is (completed -> False). Minutes added
    on completion are the duration after the write; minutes removed on
    un-completion are the duration that was counted, i.e. before the write.
    A workout that stays completed contributes only its duration change.
    """
    if not was_completed and is_completed:
        return StatsDelta(workouts_completed=1, total_minutes=duration_after)
    if was_completed and not is_completed:
        return StatsDelta(workouts_completed=-1, total_minutes=-duration_before)
    if was_completed and is_completed:
        return StatsDelta(total_minutes=duration_after - duration_before)
    return NO_CHANGE


def goal_delta(was_completed: bool, is_completed: bool) -> StatsDelta:
    """Delta for a goal whose completed flag goes from was_completed to is_completed."""
    if not was_completed and is_completed:
        return StatsDelta(goals_achieved=1)
    if was_completed and not is_completed:
        return StatsDelta(goals_achieved=-1)
    return NO_CHANGE


async def apply_stats_delta(db: AsyncSession, user_id: uuid.UUID, delta: StatsDelta) -> None:
    """Atomically add delta to the user's profile stats. No-op for an empty delta.

    If the user has no profile yet it is created first, so a delta is never dropped.
    """
    if not delta:
        return

    values = {}
    if delta.workouts_completed:
        values["workouts_completed"] = Profile.workouts_completed + delta.workouts_completed
    if delta.total_minutes:
        values["total_minutes"] = Profile.total_minutes + delta.total_minutes
    if delta.goals_achieved:
        values["goals_achieved"] = Profile.goals_achieved + delta.goals_achieved
    stmt = update(Profile).where(Profile.user_id == user_id).values(**values)

    result = await db.execute(stmt)
    if result.rowcount == 0:
        await get_or_create_profile(db, user_id)
        result = await db.execute(stmt)
    logger.debug("Applied stats delta %s for user %s (rows=%s)", delta, user_id, result.rowcount)
