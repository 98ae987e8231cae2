"""Favorite workout schemas."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from goodlift.core.constants import MAX_EXERCISES_PER_SESSION
from goodlift.core.enums import WorkoutType


class FavoriteExerciseRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)
    exercise_name: str
    position: int


class FavoriteWorkoutBase(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)


class FavoriteWorkoutCreate(FavoriteWorkoutBase):
    workout_type: WorkoutType
    equipment: list[str] = Field(default_factory=lambda: ["all"])
    exercise_names: list[str] = Field(..., min_length=1, max_length=MAX_EXERCISES_PER_SESSION)


class FavoriteWorkoutUpdate(BaseModel):
    name: str | None = Field(None, min_length=1, max_length=255)


class FavoriteWorkoutRead(FavoriteWorkoutBase):
    model_config = ConfigDict(from_attributes=True)
    id: UUID
    workout_type: WorkoutType
    equipment: list[str]
    created_at: datetime
    exercises: list[FavoriteExerciseRead] = []
