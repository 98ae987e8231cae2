"""Completed workout log: save a session, apply progressive overload, browse history."""

from __future__ import annotations

import logging
import uuid
from datetime import datetime, timezone

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from goodlift.core.config import get_settings
from goodlift.db.session import get_db
from goodlift.models.workout import Workout, WorkoutSet
from goodlift.schemas.workout import (
    ProgressionNotice,
    WorkoutLogCreate,
    WorkoutLogResult,
    WorkoutRead,
    WorkoutStats,
)
from goodlift.services.progression import apply_session_progression
from goodlift.services.store import load_catalog, load_preferences, upsert_preference

router = APIRouter()
logger = logging.getLogger(__name__)
settings = get_settings()


def _workout_query():
    return select(Workout).options(selectinload(Workout.sets))


@router.get("", response_model=list[WorkoutRead])
async def list_workouts(
    db: AsyncSession = Depends(get_db),
    skip: int = 0,
    limit: int = 50,
    from_date: datetime | None = None,
    to_date: datetime | None = None,
):
    """List logged workouts (newest first), optionally filtered by date range."""
    stmt = _workout_query()
    if from_date:
        stmt = stmt.where(Workout.performed_at >= from_date)
    if to_date:
        stmt = stmt.where(Workout.performed_at <= to_date)
    stmt = stmt.order_by(Workout.performed_at.desc()).offset(skip).limit(limit)
    result = await db.execute(stmt)
    return list(result.scalars().all())


@router.get("/stats", response_model=WorkoutStats)
async def workout_stats(db: AsyncSession = Depends(get_db)):
    """Totals derived from the log so they never drift from history."""
    result = await db.execute(
        select(func.count(Workout.id), func.coalesce(func.sum(Workout.duration_seconds), 0))
    )
    count, duration = result.one()
    return WorkoutStats(total_workouts=int(count or 0), total_duration_seconds=int(duration or 0))


@router.post("", response_model=WorkoutLogResult, status_code=201)
async def log_workout(
    payload: WorkoutLogCreate,
    db: AsyncSession = Depends(get_db),
):
    """Save a completed session and update per-exercise weights.

    Every exercise whose last set was weighted stores that weight for next time;
    when all sets hit the target reps (and enough sets were done) the stored
    weight is bumped by the muscle/equipment increment. Beating the target on
    every set raises the stored target reps to the lowest rep count logged.
    """
    names = [entry.name for entry in payload.exercises]
    if len(set(names)) != len(names):
        raise HTTPException(status_code=422, detail="Each exercise may appear only once per workout")

    workout = Workout(
        workout_type=payload.workout_type,
        performed_at=payload.performed_at or datetime.now(timezone.utc),
        duration_seconds=payload.duration_seconds,
        notes=payload.notes,
    )
    db.add(workout)
    await db.flush()

    order = 0
    for entry in payload.exercises:
        for completed in entry.sets:
            db.add(
                WorkoutSet(
                    workout_id=workout.id,
                    exercise_name=entry.name,
                    set_order=order,
                    weight=completed.weight,
                    reps=completed.reps,
                )
            )
            order += 1
    await db.flush()

    catalog = await load_catalog(db)
    preferences = await load_preferences(db, names)
    decisions = apply_session_progression(
        {entry.name: entry.sets for entry in payload.exercises},
        catalog,
        preferences,
        default_target_reps=settings.default_target_reps,
        sets_required=settings.sets_per_exercise,
    )
    for decision in decisions:
        await upsert_preference(
            db,
            decision.exercise_name,
            weight=decision.new_weight,
            target_reps=decision.new_target_reps,
        )

    result = await db.execute(
        _workout_query().where(Workout.id == workout.id).execution_options(populate_existing=True)
    )
    saved = result.scalar_one()
    logger.info("Logged %s workout %s with %d sets", saved.workout_type.value, saved.id, order)
    return WorkoutLogResult(
        workout=WorkoutRead.model_validate(saved),
        progressions=[
            ProgressionNotice(
                exercise=d.exercise_name,
                old_weight=d.previous_weight,
                new_weight=d.new_weight,
                increase=d.increase,
            )
            for d in decisions
            if d.progressed
        ],
    )


@router.get("/{workout_id}", response_model=WorkoutRead)
async def get_workout(
    workout_id: uuid.UUID,
    db: AsyncSession = Depends(get_db),
):
    """Get a logged workout with all sets."""
    result = await db.execute(_workout_query().where(Workout.id == workout_id))
    workout = result.scalar_one_or_none()
    if not workout:
        raise HTTPException(status_code=404, detail="Workout not found")
    return workout


@router.delete("/{workout_id}", status_code=204)
async def delete_workout(
    workout_id: uuid.UUID,
    db: AsyncSession = Depends(get_db),
):
    """Delete a workout and its sets (stored weights are left as they are)."""
    workout = await db.get(Workout, workout_id)
    if not workout:
        raise HTTPException(status_code=404, detail="Workout not found")
    await db.delete(workout)
    return None
