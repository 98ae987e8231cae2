"""Per-exercise progress charts and last-session context."""

from __future__ import annotations

from collections import defaultdict

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy import distinct, select
from sqlalchemy.ext.asyncio import AsyncSession

from goodlift.core.constants import PROGRESSION_HISTORY_LIMIT
from goodlift.core.enums import ProgressionMode
from goodlift.db.session import get_db
from goodlift.models.workout import Workout, WorkoutSet
from goodlift.schemas.progress import ExerciseProgressionRead, ProgressionPointRead
from goodlift.schemas.workout import CompletedSet
from goodlift.services.progression import exercise_progression

router = APIRouter()

# Weight charts start a little below the lightest session; rep charts start at zero
CHART_WEIGHT_PADDING = 5.0


@router.get("/exercises", response_model=list[str])
async def list_logged_exercises(db: AsyncSession = Depends(get_db)):
    """Names of every exercise that has at least one logged set."""
    result = await db.execute(select(distinct(WorkoutSet.exercise_name)).order_by(WorkoutSet.exercise_name))
    return list(result.scalars().all())


@router.get("/exercises/{exercise_name}", response_model=ExerciseProgressionRead)
async def get_exercise_progression(
    exercise_name: str,
    mode: ProgressionMode = ProgressionMode.WEIGHT,
    limit: int = PROGRESSION_HISTORY_LIMIT,
    db: AsyncSession = Depends(get_db),
):
    """Best weight (or reps) per session for the most recent sessions, oldest first."""
    result = await db.execute(
        select(WorkoutSet, Workout.performed_at)
        .join(Workout, Workout.id == WorkoutSet.workout_id)
        .where(WorkoutSet.exercise_name == exercise_name)
        .order_by(Workout.performed_at, WorkoutSet.set_order)
    )
    sessions: dict = defaultdict(list)
    dates = {}
    for s, performed_at in result.all():
        sessions[s.workout_id].append(CompletedSet.model_validate(s))
        dates[s.workout_id] = performed_at

    points = exercise_progression(
        ((dates[wid], sets) for wid, sets in sessions.items()),
        mode=mode,
        limit=limit if limit > 0 else None,
    )
    if not points:
        raise HTTPException(status_code=404, detail="No progress data for this exercise")

    lowest = min(p.value for p in points)
    min_value = max(0.0, lowest - CHART_WEIGHT_PADDING) if mode is ProgressionMode.WEIGHT else 0.0
    return ExerciseProgressionRead(
        exercise_name=exercise_name,
        mode=mode,
        points=[ProgressionPointRead(date=p.date, value=p.value) for p in points],
        min_value=min_value,
    )


@router.get("/exercises/{exercise_name}/previous-session")
async def get_previous_session_sets(
    exercise_name: str,
    db: AsyncSession = Depends(get_db),
):
    """
    Sets for this exercise from the most recent workout that included it,
    so the client can show "last time you did X".
    """
    subq = (
        select(Workout.id)
        .join(WorkoutSet, WorkoutSet.workout_id == Workout.id)
        .where(WorkoutSet.exercise_name == exercise_name)
        .order_by(Workout.performed_at.desc())
        .limit(1)
        .scalar_subquery()
    )
    result = await db.execute(
        select(WorkoutSet, Workout.performed_at)
        .join(Workout, Workout.id == WorkoutSet.workout_id)
        .where(WorkoutSet.exercise_name == exercise_name, WorkoutSet.workout_id == subq)
        .order_by(WorkoutSet.set_order)
    )
    rows = result.all()
    if not rows:
        return {"workout_id": None, "sets": [], "message": "No previous session for this exercise."}

    first_set, performed_at = rows[0]
    return {
        "workout_id": first_set.workout_id,
        "performed_at": performed_at.isoformat() if performed_at else None,
        "sets": [{"set_order": s.set_order, "weight": s.weight, "reps": s.reps} for s, _ in rows],
    }
