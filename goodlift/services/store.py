"""DB-backed collaborators for the pure services: catalog, preferences, favorites."""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from goodlift.models.exercise import Exercise
from goodlift.models.favorite import FavoriteExercise
from goodlift.models.preference import ExercisePreference
from goodlift.schemas.preference import PreferenceValue
from goodlift.services.catalog import ExerciseCatalog


async def load_catalog(db: AsyncSession) -> ExerciseCatalog:
    """Whole exercise table as a catalog, ordered by name."""
    result = await db.execute(select(Exercise).order_by(Exercise.name))
    return ExerciseCatalog.from_records(result.scalars().all())


async def load_preferences(db: AsyncSession, names: list[str] | None = None) -> dict[str, PreferenceValue]:
    stmt = select(ExercisePreference)
    if names is not None:
        stmt = stmt.where(ExercisePreference.exercise_name.in_(names))
    result = await db.execute(stmt)
    return {row.exercise_name: PreferenceValue.model_validate(row) for row in result.scalars().all()}


async def favorite_exercise_names(db: AsyncSession) -> set[str]:
    """Names of every exercise that appears in at least one favorite workout."""
    result = await db.execute(select(FavoriteExercise.exercise_name).distinct())
    return set(result.scalars().all())


async def upsert_preference(
    db: AsyncSession,
    exercise_name: str,
    weight: float | None = None,
    target_reps: int | None = None,
) -> ExercisePreference:
    pref = await db.get(ExercisePreference, exercise_name)
    if pref is None:
        pref = ExercisePreference(exercise_name=exercise_name)
        db.add(pref)
    if weight is not None:
        pref.weight = weight
    if target_reps is not None:
        pref.target_reps = target_reps
    await db.flush()
    await db.refresh(pref)
    return pref


async def import_exercises(db: AsyncSession, catalog: ExerciseCatalog) -> int:
    """Insert catalog records whose names are not stored yet; returns how many were added."""
    result = await db.execute(select(Exercise.name))
    known = set(result.scalars().all())
    created = 0
    for record in catalog:
        if record.name in known:
            continue
        db.add(Exercise(**record.model_dump()))
        known.add(record.name)
        created += 1
    await db.flush()
    return created
