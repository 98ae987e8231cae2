"""Favorite workouts - saved generated workouts that can be reloaded."""

from __future__ import annotations

from datetime import datetime, timezone
import uuid

from sqlalchemy import JSON, DateTime, Enum, ForeignKey, Integer, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from goodlift.core.enums import WorkoutType
from goodlift.db.base import Base


class FavoriteWorkout(Base):
    """Saved workout structure (name, type, equipment filter, exercises in order)."""

    __tablename__ = "favorite_workouts"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    workout_type: Mapped[WorkoutType] = mapped_column(Enum(WorkoutType), nullable=False)
    equipment: Mapped[list] = mapped_column(JSON, default=lambda: ["all"], nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=lambda: datetime.now(timezone.utc)
    )

    exercises: Mapped[list["FavoriteExercise"]] = relationship(
        "FavoriteExercise",
        back_populates="favorite",
        cascade="all, delete-orphan",
        order_by="FavoriteExercise.position",
    )


class FavoriteExercise(Base):
    """Exercise slot in a favorite (by name, so favorites survive catalog edits)."""

    __tablename__ = "favorite_exercises"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    favorite_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("favorite_workouts.id", ondelete="CASCADE"), nullable=False
    )
    exercise_name: Mapped[str] = mapped_column(String(255), nullable=False)
    position: Mapped[int] = mapped_column(Integer, default=0)

    favorite: Mapped["FavoriteWorkout"] = relationship("FavoriteWorkout", back_populates="exercises")
