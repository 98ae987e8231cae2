"""Exercise catalog endpoints."""

from __future__ import annotations

import logging
import uuid

from fastapi import APIRouter, Body, Depends, HTTPException, Query
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from goodlift.core.errors import CatalogError
from goodlift.db.session import get_db
from goodlift.models.exercise import Exercise
from goodlift.schemas.exercise import ExerciseCreate, ExerciseImportResult, ExerciseRead
from goodlift.services import store
from goodlift.services.catalog import ExerciseCatalog

router = APIRouter()
logger = logging.getLogger(__name__)


@router.get("", response_model=list[ExerciseRead])
async def list_exercises(
    db: AsyncSession = Depends(get_db),
    category: str | None = None,
    equipment: list[str] | None = Query(None),
    skip: int = 0,
    limit: int = 200,
):
    """List exercises, optionally narrowed to a muscle category and equipment."""
    result = await db.execute(select(Exercise).order_by(Exercise.name))
    rows = {row.name: row for row in result.scalars().all()}
    catalog = ExerciseCatalog.from_records(rows.values())
    matching = [rows[ex.name] for ex in catalog.filter(category, equipment)]
    return matching[skip : skip + limit]


@router.get("/equipment", response_model=list[str])
async def list_equipment(db: AsyncSession = Depends(get_db)):
    """Distinct equipment names, for building the equipment filter."""
    catalog = await store.load_catalog(db)
    return catalog.equipment_options()


@router.post("", response_model=ExerciseRead, status_code=201)
async def create_exercise(
    payload: ExerciseCreate,
    db: AsyncSession = Depends(get_db),
):
    """Add one exercise to the catalog."""
    existing = await db.execute(select(Exercise).where(Exercise.name == payload.name))
    if existing.scalar_one_or_none():
        raise HTTPException(status_code=409, detail="Exercise with this name already exists")
    exercise = Exercise(**payload.model_dump())
    db.add(exercise)
    await db.flush()
    await db.refresh(exercise)
    return exercise


@router.post("/import", response_model=ExerciseImportResult, status_code=201)
async def import_exercises(
    records: list[dict] = Body(...),
    db: AsyncSession = Depends(get_db),
):
    """Bulk import catalog records (spreadsheet column headers or snake_case). Existing names are skipped."""
    try:
        catalog = ExerciseCatalog.from_records(records)
    except CatalogError as e:
        raise HTTPException(status_code=422, detail=str(e)) from None
    created = await store.import_exercises(db, catalog)
    skipped = len(records) - created
    logger.info("Imported %d exercises (%d skipped)", created, skipped)
    return ExerciseImportResult(created=created, skipped=skipped)


@router.get("/{exercise_id}", response_model=ExerciseRead)
async def get_exercise(
    exercise_id: uuid.UUID,
    db: AsyncSession = Depends(get_db),
):
    """Get a single exercise by id."""
    exercise = await db.get(Exercise, exercise_id)
    if not exercise:
        raise HTTPException(status_code=404, detail="Exercise not found")
    return exercise


@router.delete("/{exercise_id}", status_code=204)
async def delete_exercise(
    exercise_id: uuid.UUID,
    db: AsyncSession = Depends(get_db),
):
    """Delete an exercise (logged history keeps the name)."""
    exercise = await db.get(Exercise, exercise_id)
    if not exercise:
        raise HTTPException(status_code=404, detail="Exercise not found")
    await db.delete(exercise)
    return None
