"""Progress chart schemas."""

from datetime import datetime

from pydantic import BaseModel

from goodlift.core.enums import ProgressionMode


class ProgressionPointRead(BaseModel):
    date: datetime
    value: float


class ExerciseProgressionRead(BaseModel):
    exercise_name: str
    mode: ProgressionMode
    points: list[ProgressionPointRead]
    min_value: float
