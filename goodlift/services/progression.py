"""Progressive overload: weight bumps after a session and in-session hints.

A completed exercise earns a weight increase when every logged set reached the
target reps and at least the configured number of sets was done. The increase
depends on body region and equipment class (dumbbells and kettlebells jump in
bigger steps for legs, smaller for barbells on the upper body).
"""

from __future__ import annotations

import logging
import math
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass
from datetime import datetime

from goodlift.core.constants import (
    DEFAULT_TARGET_REPS,
    NEXT_SET_BIG_JUMP,
    NEXT_SET_SMALL_JUMP,
    PROGRESSION_HISTORY_LIMIT,
    SETS_PER_EXERCISE,
    WEIGHT_INCREMENTS,
)
from goodlift.core.enums import ProgressionMode, SuggestionKind
from goodlift.schemas.preference import PreferenceValue
from goodlift.schemas.workout import CompletedSet
from goodlift.services.catalog import ExerciseCatalog, muscle_category

logger = logging.getLogger(__name__)

UPPER_BODY_CATEGORIES = frozenset({"Chest", "Back", "Shoulders", "Biceps", "Triceps"})
LOWER_BODY_CATEGORIES = frozenset({"Quads", "Hamstrings", "Glutes", "Calves"})

# Rep target -> share of one-rep max
REP_TO_PERCENTAGE = {6: 85, 8: 80, 10: 75, 12: 70, 15: 65}
SMALL_PLATE_LIMIT = 35.0
MIN_WEIGHT = 2.5


@dataclass(frozen=True)
class ProgressionDecision:
    """What to store after a session; None fields leave the stored value alone."""

    exercise_name: str
    previous_weight: float
    new_weight: float | None
    new_target_reps: int | None = None

    @property
    def increase(self) -> float:
        if self.new_weight is None:
            return 0.0
        return self.new_weight - self.previous_weight

    @property
    def progressed(self) -> bool:
        return self.increase > 0


@dataclass(frozen=True)
class NextSetSuggestion:
    suggested_weight: float
    kind: SuggestionKind
    message: str


@dataclass(frozen=True)
class ProgressionPoint:
    date: datetime
    value: float


def body_region(primary_muscle: str) -> str | None:
    category = muscle_category(primary_muscle)
    if category in UPPER_BODY_CATEGORIES:
        return "upper"
    if category in LOWER_BODY_CATEGORIES:
        return "lower"
    return None


def is_dumbbell_class(equipment: str) -> bool:
    text = (equipment or "").lower()
    return "dumbbell" in text or "kettlebell" in text


def weight_increment(primary_muscle: str, equipment: str) -> float:
    """Increase (lbs) earned by meeting targets; 0 for core, cardio and unknown muscles."""
    region = body_region(primary_muscle)
    if region is None:
        return 0.0
    equipment_class = "dumbbell" if is_dumbbell_class(equipment) else "barbell"
    return WEIGHT_INCREMENTS[region][equipment_class]


def evaluate_progression(
    exercise_name: str,
    sets: Sequence[CompletedSet],
    target_reps: int,
    increment: float,
    sets_required: int = SETS_PER_EXERCISE,
) -> ProgressionDecision | None:
    """Weight and target reps to remember for next time, or None when nothing changes.

    The weight is kept only when the last set was weighted. Beating the target on
    every set raises the target reps to the session's lowest rep count.
    """
    if not sets:
        return None
    last_weight = sets[-1].weight
    min_reps = min(s.reps for s in sets)
    new_target_reps = min_reps if min_reps > target_reps else None
    if last_weight <= 0:
        if new_target_reps is None:
            return None
        return ProgressionDecision(exercise_name, 0.0, None, new_target_reps)
    met_target = len(sets) >= sets_required and min_reps >= target_reps
    new_weight = last_weight + increment if met_target and increment > 0 else last_weight
    return ProgressionDecision(exercise_name, last_weight, new_weight, new_target_reps)


def apply_session_progression(
    exercises: Mapping[str, Sequence[CompletedSet]],
    catalog: ExerciseCatalog,
    preferences: Mapping[str, PreferenceValue],
    default_target_reps: int = DEFAULT_TARGET_REPS,
    sets_required: int = SETS_PER_EXERCISE,
) -> list[ProgressionDecision]:
    """Evaluate every exercise of a completed session against its target reps."""
    decisions = []
    for name, sets in exercises.items():
        pref = preferences.get(name)
        target_reps = pref.target_reps if pref else default_target_reps
        record = catalog.get(name)
        increment = weight_increment(record.primary_muscle, record.equipment) if record else 0.0
        decision = evaluate_progression(name, sets, target_reps, increment, sets_required)
        if decision is None:
            continue
        if decision.progressed:
            logger.info(
                "Progressive overload for %s: %.1f -> %.1f", name, decision.previous_weight, decision.new_weight
            )
        if decision.new_target_reps is not None:
            logger.info("Target reps for %s raised to %d", name, decision.new_target_reps)
        decisions.append(decision)
    return decisions


def next_set_suggestion(weight: float, reps_completed: int, target_reps: int) -> NextSetSuggestion | None:
    """In-session hint for the next set; None when any input is missing or zero."""
    if not weight or not reps_completed or not target_reps:
        return None
    over = reps_completed - target_reps
    if over >= 2:
        suggested = weight + NEXT_SET_BIG_JUMP
        return NextSetSuggestion(
            suggested,
            SuggestionKind.EXCELLENT,
            f"Excellent! You exceeded target by {over} reps. Try {suggested:g}lbs next set",
        )
    if over == 1:
        suggested = weight + NEXT_SET_SMALL_JUMP
        return NextSetSuggestion(suggested, SuggestionKind.GOOD, f"Nice! Try {suggested:g}lbs next set")
    if over == 0:
        suggested = weight + NEXT_SET_SMALL_JUMP
        return NextSetSuggestion(suggested, SuggestionKind.SUCCESS, f"Great job! Try {suggested:g}lbs next set")
    return NextSetSuggestion(
        weight,
        SuggestionKind.MAINTAIN,
        f"Keep going! Try {weight:g}lbs again to hit {target_reps} reps",
    )


def round_to_increment(weight: float) -> float:
    """Nearest loadable weight: 2.5 lb steps up to 35, 5 lb steps above; never below 2.5."""
    if weight <= 0:
        return MIN_WEIGHT
    step = 2.5 if weight <= SMALL_PLATE_LIMIT else 5.0
    return max(MIN_WEIGHT, math.floor(weight / step + 0.5) * step)


def weight_for_rep_change(weight: float, current_reps: int, target_reps: int) -> float | None:
    """Scale a working weight to a new rep target via %1RM; None for unsupported inputs."""
    if not weight or weight <= 0:
        return None
    if current_reps not in REP_TO_PERCENTAGE or target_reps not in REP_TO_PERCENTAGE:
        return None
    if current_reps == target_reps:
        return weight
    return round_to_increment(weight * REP_TO_PERCENTAGE[target_reps] / REP_TO_PERCENTAGE[current_reps])


def rep_change_description(current_reps: int, target_reps: int) -> str:
    if current_reps not in REP_TO_PERCENTAGE or target_reps not in REP_TO_PERCENTAGE:
        return ""
    if current_reps == target_reps:
        return "No change"
    current = REP_TO_PERCENTAGE[current_reps]
    change = (REP_TO_PERCENTAGE[target_reps] - current) / current * 100
    if change > 0:
        return f"{round(change)}% heavier"
    return f"{abs(round(change))}% lighter"


def exercise_progression(
    history: Iterable[tuple[datetime, Sequence[CompletedSet]]],
    mode: ProgressionMode | str = ProgressionMode.WEIGHT,
    limit: int | None = PROGRESSION_HISTORY_LIMIT,
) -> list[ProgressionPoint]:
    """Best weight (or reps) per session, oldest first; sessions with nothing recorded are dropped."""
    mode = ProgressionMode(mode)
    points = []
    for performed_at, sets in history:
        if not sets:
            continue
        if mode is ProgressionMode.WEIGHT:
            value = max(s.weight or 0 for s in sets)
        else:
            value = max(s.reps or 0 for s in sets)
        if value > 0:
            points.append(ProgressionPoint(performed_at, float(value)))
    points.sort(key=lambda point: point.date)
    if limit:
        points = points[-limit:]
    return points
