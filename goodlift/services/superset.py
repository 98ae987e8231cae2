"""Superset pairing: group exercises so opposing muscles alternate back to back."""

from __future__ import annotations

from collections.abc import Callable, Sequence

from goodlift.schemas.exercise import ExerciseRecord
from goodlift.services.catalog import normalize_muscle

OPPOSING_MUSCLES = {
    "Chest": "Lats",
    "Lats": "Chest",
    "Quads": "Hamstrings",
    "Hamstrings": "Quads",
    "Biceps": "Triceps",
    "Triceps": "Biceps",
    "Shoulders": "Lats",
}


def _find(items: Sequence[ExerciseRecord], predicate: Callable[[ExerciseRecord], bool]) -> int:
    for index, item in enumerate(items):
        if predicate(item):
            return index
    return -1


def group_supersets(
    exercises: Sequence[ExerciseRecord],
    superset_config: Sequence[int] | None = None,
) -> list[list[ExerciseRecord]]:
    """Greedy grouping.

    Each superset starts with the next remaining exercise. Its second slot goes to the
    first exercise hitting the opposing muscle; other slots (and the second when no
    opposing exercise is left) go to the first exercise whose muscle is not yet in the
    superset, falling back to the next exercise. Without a config exercises are paired.
    Exercises left over after the config is used up become single-exercise groups.
    """
    remaining = list(exercises)
    if superset_config is None:
        superset_config = [2] * (len(remaining) // 2)

    groups: list[list[ExerciseRecord]] = []
    for size in superset_config:
        if not remaining:
            break
        first = remaining.pop(0)
        group = [first]
        opposing = OPPOSING_MUSCLES.get(normalize_muscle(first.primary_muscle))

        while len(group) < size and remaining:
            index = -1
            if len(group) == 1 and opposing:
                index = _find(remaining, lambda ex: opposing in ex.primary_muscle)
            if index == -1:
                index = _find(
                    remaining,
                    lambda ex: not any(
                        normalize_muscle(ex.primary_muscle) in member.primary_muscle for member in group
                    ),
                )
            if index == -1:
                index = 0
            group.append(remaining.pop(index))
        groups.append(group)

    groups.extend([exercise] for exercise in remaining)
    return groups


def pair_exercises(
    exercises: Sequence[ExerciseRecord],
    superset_config: Sequence[int] | None = None,
) -> list[ExerciseRecord]:
    """Flat superset order; always a permutation of the input."""
    return [exercise for group in group_supersets(exercises, superset_config) for exercise in group]
