"""Exercise schemas.

Catalog JSON uses the spreadsheet column headers ("Exercise Name", "Primary Muscle", ...);
snake_case keys and ORM rows validate too.
"""

from uuid import UUID

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class ExerciseRecord(BaseModel):
    """Immutable catalog record consumed by the generator and substitution services."""

    model_config = ConfigDict(frozen=True, from_attributes=True, str_strip_whitespace=True)

    name: str = Field(..., min_length=1, max_length=255, validation_alias=AliasChoices("name", "Exercise Name"))
    primary_muscle: str = Field(
        default="", max_length=100, validation_alias=AliasChoices("primary_muscle", "Primary Muscle")
    )
    secondary_muscles: str = Field(
        default="", max_length=255, validation_alias=AliasChoices("secondary_muscles", "Secondary Muscles")
    )
    equipment: str = Field(default="", max_length=100, validation_alias=AliasChoices("equipment", "Equipment"))
    exercise_type: str = Field(
        default="", max_length=50, validation_alias=AliasChoices("exercise_type", "Exercise Type")
    )
    modification: str | None = Field(
        default=None, validation_alias=AliasChoices("modification", "Modification")
    )
    demo_url: str | None = Field(
        default=None,
        max_length=500,
        validation_alias=AliasChoices("demo_url", "YouTube_Demonstration_Link"),
    )


class ExerciseCreate(ExerciseRecord):
    pass


class ExerciseRead(ExerciseRecord):
    id: UUID


class ExerciseImportResult(BaseModel):
    created: int
    skipped: int
