"""Goal schemas."""

from datetime import date, datetime
from uuid import UUID

from pydantic import ConfigDict, Field

from fittrack.core.enums import GoalCategory
from fittrack.schemas.common import APIModel


class GoalBase(APIModel):
    title: str = Field(..., min_length=1, max_length=255)
    description: str = Field(..., min_length=1)
    target_date: date
    category: GoalCategory


class GoalCreate(GoalBase):
    progress: int = Field(0, ge=0, le=100)
    completed: bool = False


class GoalUpdate(APIModel):
    """Partial update. completed and progress are accepted independently of each other.

    Every goal column is required, so null is treated like an omitted field.
    """

    title: str | None = Field(None, min_length=1, max_length=255)
    description: str | None = Field(None, min_length=1)
    target_date: date | None = None
    category: GoalCategory | None = None
    progress: int | None = Field(None, ge=0, le=100)
    completed: bool | None = None


class GoalRead(GoalBase):
    model_config = ConfigDict(from_attributes=True)
    id: UUID
    user_id: UUID
    progress: int
    completed: bool
    created_at: datetime
