"""Workout generation and single-exercise substitution."""

from __future__ import annotations

import random

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

from goodlift.core.config import get_settings
from goodlift.core.errors import EmptyCatalogError, NoAlternativeError, UnknownWorkoutTypeError
from goodlift.db.session import get_db
from goodlift.schemas.generator import (
    GeneratedWorkout,
    GenerateWorkoutRequest,
    PlannedExercise,
    SubstituteRequest,
    SubstituteResponse,
)
from goodlift.services.store import favorite_exercise_names, load_catalog, load_preferences
from goodlift.services.substitution import substitute_exercise
from goodlift.services.workout_generator import generate_workout

router = APIRouter()
settings = get_settings()


@router.post("/workout", response_model=GeneratedWorkout)
async def create_generated_workout(
    payload: GenerateWorkoutRequest,
    db: AsyncSession = Depends(get_db),
):
    """Generate a workout for the split, paired into supersets, with weights from preferences."""
    catalog = await load_catalog(db)
    preferences = await load_preferences(db)
    try:
        return generate_workout(
            catalog,
            payload.workout_type,
            equipment=payload.equipment,
            superset_config=payload.superset_config,
            experience_level=payload.experience_level,
            preferences=preferences,
            sets_per_exercise=settings.sets_per_exercise,
            default_target_reps=settings.default_target_reps,
            rng=random.Random(payload.seed),
        )
    except (EmptyCatalogError, UnknownWorkoutTypeError) as e:
        raise HTTPException(status_code=422, detail=str(e)) from None


@router.post("/substitute", response_model=SubstituteResponse)
async def substitute(
    payload: SubstituteRequest,
    db: AsyncSession = Depends(get_db),
):
    """Swap one exercise for another of the same muscle, biased toward favorites."""
    if payload.index >= len(payload.exercise_names):
        raise HTTPException(status_code=422, detail="index is outside the workout")
    catalog = await load_catalog(db)
    workout = []
    for name in payload.exercise_names:
        record = catalog.get(name)
        if record is None:
            raise HTTPException(status_code=404, detail=f"Exercise not found: {name}")
        workout.append(record)

    favorites = await favorite_exercise_names(db)
    try:
        updated = substitute_exercise(
            catalog,
            workout,
            payload.index,
            equipment=payload.equipment,
            favorites=favorites,
            rng=random.Random(payload.seed),
            max_attempts=settings.max_substitution_attempts,
        )
    except (EmptyCatalogError, NoAlternativeError) as e:
        raise HTTPException(status_code=422, detail=str(e)) from None

    replacement = updated[payload.index]
    prefs = await load_preferences(db, [replacement.name])
    pref = prefs.get(replacement.name)
    return SubstituteResponse(
        index=payload.index,
        previous=workout[payload.index].name,
        replacement=PlannedExercise(
            exercise=replacement,
            sets=settings.sets_per_exercise,
            target_reps=pref.target_reps if pref else settings.default_target_reps,
            suggested_weight=pref.weight if pref else 0.0,
        ),
        exercise_names=[exercise.name for exercise in updated],
    )
