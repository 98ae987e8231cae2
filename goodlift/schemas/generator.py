"""Workout generation and substitution schemas."""

from pydantic import BaseModel, Field, field_validator

from goodlift.core.constants import MAX_EXERCISES_PER_SESSION
from goodlift.core.enums import ExperienceLevel, WorkoutType
from goodlift.schemas.exercise import ExerciseRecord


class PlannedExercise(BaseModel):
    """Exercise slot in a generated workout with its set/rep/weight targets."""

    exercise: ExerciseRecord
    sets: int = Field(..., ge=1)
    target_reps: int = Field(..., ge=1)
    suggested_weight: float = Field(default=0.0, ge=0)
    superset_index: int = Field(default=0, ge=0)


class GeneratedWorkout(BaseModel):
    workout_type: WorkoutType
    equipment: list[str]
    exercises: list[PlannedExercise] = []


class GenerateWorkoutRequest(BaseModel):
    workout_type: WorkoutType = WorkoutType.FULL
    equipment: list[str] = Field(default_factory=lambda: ["all"])
    superset_config: list[int] | None = Field(
        None, description="Exercises per superset, e.g. [3, 3, 2]. Defaults to pairs."
    )
    experience_level: ExperienceLevel = ExperienceLevel.INTERMEDIATE
    seed: int | None = Field(None, description="Seed for reproducible selection")

    @field_validator("superset_config")
    @classmethod
    def _check_superset_config(cls, value: list[int] | None) -> list[int] | None:
        if value is None:
            return value
        if not value or any(size < 1 for size in value):
            raise ValueError("superset_config needs at least one superset and every size must be >= 1")
        if sum(value) > MAX_EXERCISES_PER_SESSION:
            raise ValueError(f"At most {MAX_EXERCISES_PER_SESSION} exercises per workout")
        return value


class SubstituteRequest(BaseModel):
    """Replace the exercise at `index` of the current workout."""

    exercise_names: list[str] = Field(..., min_length=1, max_length=MAX_EXERCISES_PER_SESSION)
    index: int = Field(..., ge=0)
    equipment: list[str] = Field(default_factory=lambda: ["all"])
    seed: int | None = None


class SubstituteResponse(BaseModel):
    index: int
    previous: str
    replacement: PlannedExercise
    exercise_names: list[str]
