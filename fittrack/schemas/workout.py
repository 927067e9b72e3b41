"""Workout and WorkoutExercise schemas."""

from datetime import datetime
from uuid import UUID

from pydantic import ConfigDict, Field

from fittrack.core.enums import WorkoutType
from fittrack.schemas.common import APIModel


class ExerciseBase(APIModel):
    name: str = Field(..., min_length=1, max_length=255)
    sets: int = Field(..., ge=1)
    reps: int = Field(..., ge=1)
    weight: float | None = Field(None, ge=0)
    duration: int | None = Field(None, ge=0)
    notes: str | None = Field(None, max_length=500)


class ExerciseCreate(ExerciseBase):
    pass


class ExerciseRead(ExerciseBase):
    model_config = ConfigDict(from_attributes=True)
    id: UUID


class WorkoutBase(APIModel):
    title: str = Field(..., min_length=1, max_length=255)
    date: datetime
    duration: int = Field(..., ge=1, description="Minutes")
    type: WorkoutType
    notes: str | None = None


class WorkoutCreate(WorkoutBase):
    exercises: list[ExerciseCreate] = []
    completed: bool = False


class WorkoutUpdate(APIModel):
    """Partial update. Omitted fields are left as stored; null clears notes and is ignored elsewhere."""

    title: str | None = Field(None, min_length=1, max_length=255)
    date: datetime | None = None
    duration: int | None = Field(None, ge=1)
    type: WorkoutType | None = None
    notes: str | None = None
    exercises: list[ExerciseCreate] | None = None
    completed: bool | None = None


class WorkoutRead(WorkoutBase):
    model_config = ConfigDict(from_attributes=True)
    id: UUID
    user_id: UUID
    exercises: list[ExerciseRead] = []
    completed: bool
    created_at: datetime
