"""Profile model: per-user details plus the cached stats aggregate."""

from __future__ import annotations

import uuid
from datetime import datetime, timezone

from sqlalchemy import Boolean, DateTime, Enum, Float, ForeignKey, Integer, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from fittrack.core.enums import HeightUnit, WeightUnit
from fittrack.db.base import Base


class Profile(Base):
    """One-to-one with User (unique user_id).

    The stats columns are a cache over the user's workouts and goals. They are
    only ever changed through services.stats.apply_stats_delta, never assigned.
    longest_streak is carried but not derived by any handler.
    """

    __tablename__ = "profiles"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    user_id: Mapped[uuid.UUID] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"), nullable=False, unique=True
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False)
    join_date: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=lambda: datetime.now(timezone.utc)
    )

    # Stats aggregate
    workouts_completed: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    goals_achieved: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    longest_streak: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    total_minutes: Mapped[int] = mapped_column(Integer, default=0, nullable=False)

    # Measurements
    weight: Mapped[float] = mapped_column(Float, default=0, nullable=False)
    height: Mapped[float] = mapped_column(Float, default=0, nullable=False)
    resting_heart_rate: Mapped[float] = mapped_column(Float, default=0, nullable=False)

    # Preferences
    weight_unit: Mapped[WeightUnit] = mapped_column(Enum(WeightUnit), default=WeightUnit.LBS, nullable=False)
    height_unit: Mapped[HeightUnit] = mapped_column(Enum(HeightUnit), default=HeightUnit.CM, nullable=False)
    notifications_enabled: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)

    user: Mapped["User"] = relationship("User", back_populates="profile")
