"""Profile schemas. Flat columns on the model, nested objects on the wire."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING, Optional
from uuid import UUID

from pydantic import Field

from fittrack.core.enums import HeightUnit, WeightUnit
from fittrack.schemas.common import EMAIL_PATTERN, APIModel

if TYPE_CHECKING:
    from fittrack.models.profile import Profile


class ProfileStats(APIModel):
    workouts_completed: int = 0
    goals_achieved: int = 0
    longest_streak: int = 0
    total_minutes: int = 0


class ProfileMeasurements(APIModel):
    weight: float = 0
    height: float = 0
    resting_heart_rate: float = 0


class ProfilePreferences(APIModel):
    weight_unit: WeightUnit = WeightUnit.LBS
    height_unit: HeightUnit = HeightUnit.CM
    notifications_enabled: bool = True


class ProfileRead(APIModel):
    id: UUID
    user_id: UUID
    name: str
    email: str
    join_date: datetime
    stats: ProfileStats
    measurements: ProfileMeasurements
    preferences: ProfilePreferences

    @classmethod
    def from_profile(cls, profile: "Profile") -> "ProfileRead":
        return cls(
            id=profile.id,
            user_id=profile.user_id,
            name=profile.name,
            email=profile.email,
            join_date=profile.join_date,
            stats=ProfileStats(
                workouts_completed=profile.workouts_completed,
                goals_achieved=profile.goals_achieved,
                longest_streak=profile.longest_streak,
                total_minutes=profile.total_minutes,
            ),
            measurements=ProfileMeasurements(
                weight=profile.weight,
                height=profile.height,
                resting_heart_rate=profile.resting_heart_rate,
            ),
            preferences=ProfilePreferences(
                weight_unit=profile.weight_unit,
                height_unit=profile.height_unit,
                notifications_enabled=profile.notifications_enabled,
            ),
        )


class ProfileUpdate(APIModel):
    """Flat payload as sent by the profile form. Stats are not writable here."""

    name: Optional[str] = Field(None, min_length=1, max_length=255)
    email: Optional[str] = Field(None, pattern=EMAIL_PATTERN, max_length=255)
    weight: Optional[float] = Field(None, ge=0)
    height: Optional[float] = Field(None, ge=0)
    resting_heart_rate: Optional[float] = Field(None, ge=0)
    weight_unit: Optional[WeightUnit] = None
    height_unit: Optional[HeightUnit] = None
    notifications_enabled: Optional[bool] = None
