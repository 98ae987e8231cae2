"""Swap a single exercise in a workout for another one hitting the same muscle."""

from __future__ import annotations

import logging
import random
from collections.abc import Collection, Sequence

from goodlift.core.constants import FAVORITE_WEIGHT, MAX_SUBSTITUTION_ATTEMPTS
from goodlift.core.errors import EmptyCatalogError, NoAlternativeError
from goodlift.schemas.exercise import ExerciseRecord
from goodlift.services.catalog import ExerciseCatalog, movement_type, normalize_muscle
from goodlift.services.equipment import EquipmentFilter

logger = logging.getLogger(__name__)


def biased_pool(candidates: Sequence[ExerciseRecord], favorites: Collection[str]) -> list[ExerciseRecord]:
    """Candidates with every favorite repeated FAVORITE_WEIGHT times."""
    pool: list[ExerciseRecord] = []
    for exercise in candidates:
        pool.extend([exercise] * (FAVORITE_WEIGHT if exercise.name in favorites else 1))
    return pool


def _candidate_passes(
    pool: list[ExerciseRecord],
    current: ExerciseRecord,
    in_workout: set[str],
) -> list[list[ExerciseRecord]]:
    """Progressively relaxed candidate lists, tried in order."""
    same_type = [ex for ex in pool if movement_type(ex) == movement_type(current)]
    return [
        [ex for ex in same_type if ex.name not in in_workout],
        same_type,
        [ex for ex in pool if ex.name not in in_workout],
    ]


def substitute_exercise(
    catalog: ExerciseCatalog,
    workout: Sequence[ExerciseRecord],
    index: int,
    equipment: EquipmentFilter | str | list[str] | None = None,
    favorites: Collection[str] = frozenset(),
    rng: random.Random | None = None,
    max_attempts: int = MAX_SUBSTITUTION_ATTEMPTS,
) -> list[ExerciseRecord]:
    """Return a copy of `workout` with `workout[index]` replaced.

    The replacement shares the current exercise's primary muscle and passes the
    equipment filter. The first attempt also keeps the movement type and avoids
    exercises already in the workout; the second allows duplicates; the third
    allows any movement type. Favorites are twice as likely to be drawn.
    """
    if not len(catalog):
        raise EmptyCatalogError("Exercise catalog not loaded")
    if not 0 <= index < len(workout):
        raise IndexError(f"Exercise index {index} out of range for workout of {len(workout)}")

    rng = rng or random.Random()
    equipment = EquipmentFilter.parse(equipment)
    current = workout[index]
    pool = [
        exercise
        for exercise in catalog.by_muscle.get(normalize_muscle(current.primary_muscle), ())
        if exercise.name != current.name and equipment.matches(exercise.equipment)
    ]
    in_workout = {exercise.name for exercise in workout}

    passes = _candidate_passes(pool, current, in_workout)
    for attempt, candidates in enumerate(passes[:max_attempts], start=1):
        if not candidates:
            logger.debug("Substitution attempt %d for %s found no candidates", attempt, current.name)
            continue
        chosen = rng.choice(biased_pool(candidates, favorites))
        logger.info("Substituted %s with %s (attempt %d)", current.name, chosen.name, attempt)
        updated = list(workout)
        updated[index] = chosen
        return updated

    raise NoAlternativeError(f"No alternative exercises available for {current.name}")
