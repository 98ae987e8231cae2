"""In-session tools: next-set suggestion and rep-range weight conversion (pure logic, no DB)."""

from fastapi import APIRouter, HTTPException, Query
from pydantic import BaseModel

from goodlift.core.enums import SuggestionKind
from goodlift.services.progression import (
    next_set_suggestion,
    rep_change_description,
    weight_for_rep_change,
)

router = APIRouter()


class NextSetResponse(BaseModel):
    suggested_weight: float
    kind: SuggestionKind
    message: str


class RepChangeResponse(BaseModel):
    weight: float
    current_reps: int
    target_reps: int
    suggested_weight: float
    description: str


@router.get("/next-set", response_model=NextSetResponse)
async def next_set(
    weight: float = Query(..., gt=0),
    reps_completed: int = Query(..., gt=0),
    target_reps: int = Query(..., gt=0),
):
    """
    Weight to try on the next set: +5 when the target was hit exactly or by one rep,
    +10 when it was beaten by two or more, same weight otherwise.
    """
    suggestion = next_set_suggestion(weight, reps_completed, target_reps)
    if suggestion is None:
        raise HTTPException(status_code=422, detail="weight, reps_completed and target_reps are required")
    return NextSetResponse(
        suggested_weight=suggestion.suggested_weight,
        kind=suggestion.kind,
        message=suggestion.message,
    )


@router.get("/rep-change", response_model=RepChangeResponse)
async def rep_change(
    weight: float = Query(..., gt=0),
    current_reps: int = Query(...),
    target_reps: int = Query(...),
):
    """Scale a working weight to a different rep range (6, 8, 10, 12 or 15 reps)."""
    suggested = weight_for_rep_change(weight, current_reps, target_reps)
    if suggested is None:
        raise HTTPException(status_code=422, detail="Supported rep ranges are 6, 8, 10, 12 and 15")
    return RepChangeResponse(
        weight=weight,
        current_reps=current_reps,
        target_reps=target_reps,
        suggested_weight=suggested,
        description=rep_change_description(current_reps, target_reps),
    )
