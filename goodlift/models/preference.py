"""Per-exercise preferences: last-used weight and target reps."""

from __future__ import annotations

from datetime import datetime, timezone

from sqlalchemy import DateTime, Float, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from goodlift.core.constants import DEFAULT_TARGET_REPS
from goodlift.db.base import Base


class ExercisePreference(Base):
    """Keyed by exercise name so history survives catalog re-imports."""

    __tablename__ = "exercise_preferences"

    exercise_name: Mapped[str] = mapped_column(String(255), primary_key=True)
    weight: Mapped[float] = mapped_column(Float, default=0.0, nullable=False)
    target_reps: Mapped[int] = mapped_column(Integer, default=DEFAULT_TARGET_REPS, nullable=False)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
    )
