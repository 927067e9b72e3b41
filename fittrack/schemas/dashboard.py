"""Dashboard response schema."""

from fittrack.schemas.common import APIModel
from fittrack.schemas.goal import GoalRead
from fittrack.schemas.workout import WorkoutRead


class DashboardStats(APIModel):
    workouts_this_week: int = 0
    completed_goals: int = 0
    streak_days: int = 0
    calories_burned: int = 0
    workouts_completed: int = 0
    total_minutes: int = 0


class DashboardRead(APIModel):
    recent_activities: list[WorkoutRead] = []
    goals: list[GoalRead] = []
    stats: DashboardStats
