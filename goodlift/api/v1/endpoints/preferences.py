"""Per-exercise preferences: remembered weight and target reps."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from goodlift.db.session import get_db
from goodlift.models.preference import ExercisePreference
from goodlift.schemas.preference import PreferenceRead, PreferenceUpdate
from goodlift.services.store import upsert_preference

router = APIRouter()


@router.get("", response_model=list[PreferenceRead])
async def list_preferences(db: AsyncSession = Depends(get_db)):
    result = await db.execute(select(ExercisePreference).order_by(ExercisePreference.exercise_name))
    return list(result.scalars().all())


@router.get("/{exercise_name}", response_model=PreferenceRead)
async def get_preference(
    exercise_name: str,
    db: AsyncSession = Depends(get_db),
):
    pref = await db.get(ExercisePreference, exercise_name)
    if not pref:
        raise HTTPException(status_code=404, detail="No preference stored for this exercise")
    return pref


@router.put("/{exercise_name}", response_model=PreferenceRead)
async def put_preference(
    exercise_name: str,
    payload: PreferenceUpdate,
    db: AsyncSession = Depends(get_db),
):
    """Set weight and/or target reps; fields left out keep their stored value."""
    return await upsert_preference(db, exercise_name, weight=payload.weight, target_reps=payload.target_reps)


@router.delete("/{exercise_name}", status_code=204)
async def delete_preference(
    exercise_name: str,
    db: AsyncSession = Depends(get_db),
):
    pref = await db.get(ExercisePreference, exercise_name)
    if not pref:
        raise HTTPException(status_code=404, detail="No preference stored for this exercise")
    await db.delete(pref)
    return None
