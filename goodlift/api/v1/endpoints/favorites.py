"""Favorite workouts - save a generated workout and reload it later."""

from __future__ import annotations

import uuid

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from goodlift.core.config import get_settings
from goodlift.db.session import get_db
from goodlift.models.favorite import FavoriteExercise, FavoriteWorkout
from goodlift.schemas.favorite import FavoriteWorkoutCreate, FavoriteWorkoutRead, FavoriteWorkoutUpdate
from goodlift.schemas.generator import GeneratedWorkout
from goodlift.services.equipment import EquipmentFilter
from goodlift.services.store import load_catalog, load_preferences
from goodlift.services.workout_generator import plan_workout

router = APIRouter()
settings = get_settings()


def _favorite_query():
    return select(FavoriteWorkout).options(selectinload(FavoriteWorkout.exercises))


async def _get_favorite(db: AsyncSession, favorite_id: uuid.UUID) -> FavoriteWorkout:
    result = await db.execute(
        _favorite_query().where(FavoriteWorkout.id == favorite_id).execution_options(populate_existing=True)
    )
    favorite = result.scalar_one_or_none()
    if not favorite:
        raise HTTPException(status_code=404, detail="Favorite not found")
    return favorite


@router.get("", response_model=list[FavoriteWorkoutRead])
async def list_favorites(
    db: AsyncSession = Depends(get_db),
    skip: int = 0,
    limit: int = 50,
):
    """List favorite workouts, newest first."""
    result = await db.execute(
        _favorite_query().order_by(FavoriteWorkout.created_at.desc()).offset(skip).limit(limit)
    )
    return list(result.scalars().all())


@router.post("", response_model=FavoriteWorkoutRead, status_code=201)
async def create_favorite(
    payload: FavoriteWorkoutCreate,
    db: AsyncSession = Depends(get_db),
):
    """Save a workout (exercise order preserved)."""
    favorite = FavoriteWorkout(
        name=payload.name,
        workout_type=payload.workout_type,
        equipment=EquipmentFilter.parse(payload.equipment).as_list(),
    )
    db.add(favorite)
    await db.flush()
    for position, name in enumerate(payload.exercise_names):
        db.add(FavoriteExercise(favorite_id=favorite.id, exercise_name=name, position=position))
    await db.flush()
    return await _get_favorite(db, favorite.id)


@router.get("/{favorite_id}", response_model=FavoriteWorkoutRead)
async def get_favorite(
    favorite_id: uuid.UUID,
    db: AsyncSession = Depends(get_db),
):
    """Get a favorite with its exercises."""
    return await _get_favorite(db, favorite_id)


@router.post("/{favorite_id}/load", response_model=GeneratedWorkout)
async def load_favorite(
    favorite_id: uuid.UUID,
    db: AsyncSession = Depends(get_db),
):
    """Rebuild the saved workout with current weights; exercises no longer in the catalog are skipped."""
    favorite = await _get_favorite(db, favorite_id)
    catalog = await load_catalog(db)
    exercises = [catalog.get(fe.exercise_name) for fe in favorite.exercises]
    exercises = [ex for ex in exercises if ex is not None]
    if not exercises:
        raise HTTPException(status_code=422, detail="None of this favorite's exercises are in the catalog")
    preferences = await load_preferences(db, [ex.name for ex in exercises])
    return plan_workout(
        exercises,
        favorite.workout_type,
        favorite.equipment,
        preferences=preferences,
        sets_per_exercise=settings.sets_per_exercise,
        default_target_reps=settings.default_target_reps,
    )


@router.patch("/{favorite_id}", response_model=FavoriteWorkoutRead)
async def update_favorite(
    favorite_id: uuid.UUID,
    payload: FavoriteWorkoutUpdate,
    db: AsyncSession = Depends(get_db),
):
    """Rename a favorite."""
    favorite = await _get_favorite(db, favorite_id)
    for k, v in payload.model_dump(exclude_unset=True).items():
        setattr(favorite, k, v)
    await db.flush()
    return await _get_favorite(db, favorite_id)


@router.delete("/{favorite_id}", status_code=204)
async def delete_favorite(
    favorite_id: uuid.UUID,
    db: AsyncSession = Depends(get_db),
):
    favorite = await db.get(FavoriteWorkout, favorite_id)
    if not favorite:
        raise HTTPException(status_code=404, detail="Favorite not found")
    await db.delete(favorite)
    return None
