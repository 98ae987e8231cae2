"""Completed-session (workout log) schemas."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from goodlift.core.constants import MAX_EXERCISES_PER_SESSION, MAX_SETS_PER_EXERCISE_PER_SESSION
from goodlift.core.enums import WorkoutType


class CompletedSet(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    weight: float = Field(default=0.0, ge=0)
    reps: int = Field(default=0, ge=0)


class ExerciseLog(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    sets: list[CompletedSet] = Field(..., min_length=1, max_length=MAX_SETS_PER_EXERCISE_PER_SESSION)


class WorkoutLogCreate(BaseModel):
    workout_type: WorkoutType
    performed_at: datetime | None = None
    duration_seconds: int = Field(default=0, ge=0)
    notes: str | None = None
    exercises: list[ExerciseLog] = Field(..., min_length=1, max_length=MAX_EXERCISES_PER_SESSION)


class WorkoutSetRead(CompletedSet):
    id: UUID
    exercise_name: str
    set_order: int


class WorkoutRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    workout_type: WorkoutType
    performed_at: datetime
    duration_seconds: int
    notes: str | None = None
    sets: list[WorkoutSetRead] = []


class ProgressionNotice(BaseModel):
    """Weight bump earned by hitting target reps on every set."""

    exercise: str
    old_weight: float
    new_weight: float
    increase: float


class WorkoutLogResult(BaseModel):
    workout: WorkoutRead
    progressions: list[ProgressionNotice] = []


class WorkoutStats(BaseModel):
    total_workouts: int
    total_duration_seconds: int
