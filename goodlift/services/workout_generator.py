"""Workout generation: per-muscle quotas, equipment filtering and randomized selection.

Quotas are proportional to the requested exercise count so superset layouts of any
size keep the same balance (e.g. upper body is roughly 3/8 chest, 3/8 back, the rest
arms). Lower-body and full-body splits add a little randomness to the quad/hamstring
share so consecutive sessions differ.
"""

from __future__ import annotations

import logging
import math
import random
from collections import Counter
from collections.abc import Mapping, Sequence

from goodlift.core.constants import DEFAULT_TARGET_REPS, EXERCISES_PER_WORKOUT, SETS_PER_EXERCISE
from goodlift.core.enums import ExerciseType, ExperienceLevel, WorkoutType
from goodlift.core.errors import EmptyCatalogError, UnknownWorkoutTypeError
from goodlift.schemas.exercise import ExerciseRecord
from goodlift.schemas.generator import GeneratedWorkout, PlannedExercise
from goodlift.schemas.preference import PreferenceValue
from goodlift.services.catalog import ExerciseCatalog, movement_type
from goodlift.services.equipment import EquipmentFilter
from goodlift.services.superset import group_supersets

logger = logging.getLogger(__name__)

_BASE_COUNTS = {
    ExperienceLevel.BEGINNER: {
        WorkoutType.FULL: 6,
        WorkoutType.UPPER: 6,
        WorkoutType.LOWER: 6,
        WorkoutType.PUSH: 7,
        WorkoutType.PULL: 7,
        WorkoutType.LEGS: 7,
    },
    ExperienceLevel.INTERMEDIATE: {workout_type: 8 for workout_type in WorkoutType},
    ExperienceLevel.ADVANCED: {
        WorkoutType.FULL: 9,
        WorkoutType.UPPER: 10,
        WorkoutType.LOWER: 10,
        WorkoutType.PUSH: 10,
        WorkoutType.PULL: 10,
        WorkoutType.LEGS: 10,
    },
}

_BALANCED_TYPES = (ExerciseType.COMPOUND.value, ExerciseType.ISOLATION.value)


def _workout_type(value: WorkoutType | str) -> WorkoutType:
    try:
        return WorkoutType(value)
    except ValueError:
        raise UnknownWorkoutTypeError(f"Unknown workout type: {value}") from None


def optimal_exercise_count(
    workout_type: WorkoutType | str,
    experience_level: ExperienceLevel | str = ExperienceLevel.INTERMEDIATE,
) -> int:
    """Exercise count for a session (4-7 sets per muscle group at 3-4 sets per exercise)."""
    try:
        level = ExperienceLevel(experience_level)
        return _BASE_COUNTS[level][WorkoutType(workout_type)]
    except (KeyError, ValueError):
        return EXERCISES_PER_WORKOUT


def muscle_quotas(
    workout_type: WorkoutType | str,
    total: int,
    rng: random.Random | None = None,
) -> list[tuple[str, int]]:
    """(muscle, count) pairs in fill order. Counts are clamped at zero."""
    rng = rng or random.Random()
    workout_type = _workout_type(workout_type)
    n = total

    if workout_type is WorkoutType.UPPER:
        chest = math.ceil(n * 0.375)
        lats = math.ceil(n * 0.375)
        biceps = math.floor(n * 0.125)
        quotas = [("Chest", chest), ("Lats", lats), ("Biceps", biceps), ("Triceps", n - chest - lats - biceps)]
    elif workout_type in (WorkoutType.LOWER, WorkoutType.LEGS):
        quads = math.ceil(n * (0.375 + rng.random() * 0.125))
        hams = math.floor(n * 0.25) + rng.randrange(2)
        quotas = [("Quads", quads), ("Hamstrings", hams), ("Core", n - quads - hams)]
    elif workout_type is WorkoutType.FULL:
        chest = math.ceil(n * 0.25)
        lats = math.ceil(n * 0.25)
        quads = math.ceil(n * 0.25)
        hams = math.floor(n * 0.125) + rng.randrange(2)
        quotas = [
            ("Chest", chest),
            ("Lats", lats),
            ("Quads", quads),
            ("Hamstrings", hams),
            ("Core", n - chest - lats - quads - hams),
        ]
    elif workout_type is WorkoutType.PUSH:
        chest = math.ceil(n * 0.375)
        delts = math.ceil(n * 0.375)
        quotas = [("Chest", chest), ("Delts", delts), ("Triceps", n - chest - delts)]
    else:
        lats = math.ceil(n * 0.5)
        rear_delts = math.ceil(n * 0.25)
        quotas = [("Lats", lats), ("Rear Delts", rear_delts), ("Biceps", n - lats - rear_delts)]

    return [(muscle, max(0, count)) for muscle, count in quotas]


def _available(
    catalog: ExerciseCatalog,
    muscle: str,
    exclude: Sequence[ExerciseRecord],
    equipment: EquipmentFilter,
) -> list[ExerciseRecord]:
    taken = {exercise.name for exercise in exclude}
    return [
        exercise
        for exercise in catalog.by_muscle.get(muscle, ())
        if exercise.name not in taken and equipment.matches(exercise.equipment)
    ]


def _compounds_first(exercises: list[ExerciseRecord]) -> list[ExerciseRecord]:
    return sorted(exercises, key=lambda ex: movement_type(ex) != ExerciseType.COMPOUND.value)


def _balance_types(
    picked: list[ExerciseRecord],
    available: list[ExerciseRecord],
    rng: random.Random,
) -> list[ExerciseRecord]:
    """Swap in a compound and an isolation movement when the pool has them and the pick lacks them."""
    picked = list(picked)
    for wanted in _BALANCED_TYPES:
        if any(movement_type(ex) == wanted for ex in picked):
            continue
        candidates = [ex for ex in available if movement_type(ex) == wanted and ex not in picked]
        if not candidates:
            continue
        counts = Counter(movement_type(ex) for ex in picked)
        # never give up the only representative of a balanced type
        replaceable = [
            i
            for i, ex in enumerate(picked)
            if not (movement_type(ex) in _BALANCED_TYPES and counts[movement_type(ex)] == 1)
        ]
        if not replaceable:
            continue
        victim = max(replaceable, key=lambda i: (counts[movement_type(picked[i])], i))
        picked[victim] = rng.choice(candidates)
    return picked


def pick_exercises(
    catalog: ExerciseCatalog,
    muscle: str,
    count: int,
    exclude: Sequence[ExerciseRecord] = (),
    equipment: EquipmentFilter | str | list[str] | None = None,
    rng: random.Random | None = None,
) -> list[ExerciseRecord]:
    """Up to `count` distinct exercises for a muscle, skipping names already in `exclude`."""
    if count <= 0:
        return []
    rng = rng or random.Random()
    available = _available(catalog, muscle, exclude, EquipmentFilter.parse(equipment))

    if len(available) < count:
        logger.warning(
            "Insufficient exercises for %s. Available: %d, Requested: %d", muscle, len(available), count
        )
        return _compounds_first(available)

    picked = rng.sample(available, count)
    if count >= 2:
        picked = _balance_types(picked, available, rng)
    return _compounds_first(picked)


def generate_exercise_list(
    catalog: ExerciseCatalog,
    workout_type: WorkoutType | str,
    equipment: EquipmentFilter | str | list[str] | None = None,
    total: int = EXERCISES_PER_WORKOUT,
    rng: random.Random | None = None,
) -> list[ExerciseRecord]:
    """Fill muscle quotas, then top up from random muscles until `total` or the catalog runs dry."""
    rng = rng or random.Random()
    equipment = EquipmentFilter.parse(equipment)
    workout: list[ExerciseRecord] = []

    for muscle, count in muscle_quotas(workout_type, total, rng):
        workout.extend(pick_exercises(catalog, muscle, count, workout, equipment, rng))

    muscles = list(catalog.by_muscle)
    while len(workout) < total and muscles:
        muscle = rng.choice(muscles)
        available = _available(catalog, muscle, workout, equipment)
        if not available:
            muscles.remove(muscle)
            continue
        workout.append(rng.choice(available))

    if len(workout) < total:
        logger.warning("Generated %d of %d requested exercises for %s", len(workout), total, workout_type)
    return workout[:total]


def generate_workout(
    catalog: ExerciseCatalog,
    workout_type: WorkoutType | str,
    equipment: EquipmentFilter | str | list[str] | None = None,
    superset_config: Sequence[int] | None = None,
    experience_level: ExperienceLevel | str = ExperienceLevel.INTERMEDIATE,
    preferences: Mapping[str, PreferenceValue] | None = None,
    sets_per_exercise: int = SETS_PER_EXERCISE,
    default_target_reps: int = DEFAULT_TARGET_REPS,
    rng: random.Random | None = None,
) -> GeneratedWorkout:
    """Select exercises, order them into supersets and attach set/rep/weight targets."""
    if not len(catalog):
        raise EmptyCatalogError("Exercise catalog is empty. Cannot generate workout.")
    rng = rng or random.Random()
    workout_type = _workout_type(workout_type)
    equipment = EquipmentFilter.parse(equipment)
    preferences = preferences or {}

    if superset_config:
        total = sum(superset_config)
    else:
        total = optimal_exercise_count(workout_type, experience_level)

    exercises = generate_exercise_list(catalog, workout_type, equipment, total, rng)
    workout = plan_workout(
        exercises,
        workout_type,
        equipment,
        group_supersets(exercises, superset_config),
        preferences,
        sets_per_exercise,
        default_target_reps,
    )
    logger.info(
        "Generated %s workout with %d exercises (equipment=%s)",
        workout_type.value,
        len(workout.exercises),
        ",".join(equipment.as_list()),
    )
    return workout


def plan_workout(
    exercises: Sequence[ExerciseRecord],
    workout_type: WorkoutType | str,
    equipment: EquipmentFilter | str | list[str] | None,
    groups: Sequence[Sequence[ExerciseRecord]] | None = None,
    preferences: Mapping[str, PreferenceValue] | None = None,
    sets_per_exercise: int = SETS_PER_EXERCISE,
    default_target_reps: int = DEFAULT_TARGET_REPS,
) -> GeneratedWorkout:
    """Attach sets, target reps and remembered weight to already chosen exercises.

    `groups` are the supersets in order; when omitted every exercise keeps its
    position and consecutive pairs share a superset.
    """
    preferences = preferences or {}
    if groups is None:
        groups = [exercises[i : i + 2] for i in range(0, len(exercises), 2)]
    planned: list[PlannedExercise] = []
    for superset_index, group in enumerate(groups):
        for exercise in group:
            pref = preferences.get(exercise.name)
            planned.append(
                PlannedExercise(
                    exercise=exercise,
                    sets=sets_per_exercise,
                    target_reps=pref.target_reps if pref else default_target_reps,
                    suggested_weight=pref.weight if pref else 0.0,
                    superset_index=superset_index,
                )
            )
    return GeneratedWorkout(
        workout_type=_workout_type(workout_type),
        equipment=EquipmentFilter.parse(equipment).as_list(),
        exercises=planned,
    )
