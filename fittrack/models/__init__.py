"""ORM models - import all so Base.metadata is complete for migrations."""

from fittrack.models.goal import Goal
from fittrack.models.profile import Profile
from fittrack.models.user import User
from fittrack.models.workout import Workout, WorkoutExercise

__all__ = [
    "Goal",
    "Profile",
    "User",
    "Workout",
    "WorkoutExercise",
]
