"""Exercise preference (weight / target reps) schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from goodlift.core.constants import DEFAULT_TARGET_REPS


class PreferenceValue(BaseModel):
    """Last-used weight and target reps for one exercise."""

    model_config = ConfigDict(from_attributes=True)

    weight: float = Field(default=0.0, ge=0)
    target_reps: int = Field(default=DEFAULT_TARGET_REPS, ge=1)


class PreferenceUpdate(BaseModel):
    weight: float | None = Field(None, ge=0)
    target_reps: int | None = Field(None, ge=1)


class PreferenceRead(PreferenceValue):
    exercise_name: str
    updated_at: datetime | None = None
