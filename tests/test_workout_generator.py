import logging
import random
from collections import Counter

import pytest

from goodlift.core.enums import ExperienceLevel, WorkoutType
from goodlift.core.errors import EmptyCatalogError, UnknownWorkoutTypeError
from goodlift.schemas.exercise import ExerciseRecord
from goodlift.schemas.preference import PreferenceValue
from goodlift.services.catalog import ExerciseCatalog, normalize_muscle
from goodlift.services.workout_generator import (
    generate_exercise_list,
    generate_workout,
    muscle_quotas,
    optimal_exercise_count,
    pick_exercises,
    plan_workout,
)


def make_exercise(name, muscle, exercise_type="Compound", equipment="Barbell"):
    return ExerciseRecord(name=name, primary_muscle=muscle, exercise_type=exercise_type, equipment=equipment)


def test_upper_quotas():
    assert muscle_quotas("upper", 8) == [("Chest", 3), ("Lats", 3), ("Biceps", 1), ("Triceps", 1)]


def test_push_and_pull_quotas():
    assert muscle_quotas(WorkoutType.PUSH, 8) == [("Chest", 3), ("Delts", 3), ("Triceps", 2)]
    assert muscle_quotas(WorkoutType.PULL, 8) == [("Lats", 4), ("Rear Delts", 2), ("Biceps", 2)]


@pytest.mark.parametrize("workout_type", list(WorkoutType))
@pytest.mark.parametrize("total", [4, 6, 8, 10])
def test_quotas_cover_total(workout_type, total):
    for seed in range(10):
        quotas = muscle_quotas(workout_type, total, random.Random(seed))
        # a clamped remainder can overshoot by one; the exercise list is truncated later
        assert total <= sum(count for _, count in quotas) <= total + 1
        assert all(count >= 0 for _, count in quotas)


def test_randomized_lower_and_full_quotas_stay_in_range():
    for seed in range(30):
        rng = random.Random(seed)
        quotas = dict(muscle_quotas("legs", 8, rng))
        assert quotas["Quads"] in (3, 4)
        assert quotas["Hamstrings"] in (2, 3)
        full = dict(muscle_quotas("full", 8, rng))
        assert full["Chest"] == full["Lats"] == full["Quads"] == 2
        assert full["Hamstrings"] in (1, 2)


def test_negative_quotas_are_clamped():
    assert muscle_quotas("pull", 1) == [("Lats", 1), ("Rear Delts", 1), ("Biceps", 0)]


def test_unknown_workout_type():
    with pytest.raises(UnknownWorkoutTypeError):
        muscle_quotas("cardio", 8)


def test_optimal_exercise_count():
    assert optimal_exercise_count("full", "beginner") == 6
    assert optimal_exercise_count("legs", ExperienceLevel.BEGINNER) == 7
    assert optimal_exercise_count("push", "intermediate") == 8
    assert optimal_exercise_count("full", "advanced") == 9
    assert optimal_exercise_count("upper", "advanced") == 10
    assert optimal_exercise_count("upper", "elite") == 8


def test_pick_exercises_returns_whole_pool_when_short(caplog):
    catalog = ExerciseCatalog(
        [make_exercise("Curl", "Biceps", "Isolation"), make_exercise("Chin-Up", "Biceps")]
    )
    with caplog.at_level(logging.WARNING):
        picked = pick_exercises(catalog, "Biceps", 3, rng=random.Random(1))
    assert [ex.name for ex in picked] == ["Chin-Up", "Curl"]
    assert "Insufficient exercises for Biceps" in caplog.text


def test_pick_exercises_excludes_and_filters():
    catalog = ExerciseCatalog(
        [
            make_exercise("Bench", "Chest"),
            make_exercise("DB Press", "Chest", equipment="Dumbbell"),
            make_exercise("DB Fly", "Chest", "Isolation", equipment="Dumbbell"),
        ]
    )
    picked = pick_exercises(catalog, "Chest", 1, exclude=[catalog.get("DB Fly")], equipment="dumbbell")
    assert [ex.name for ex in picked] == ["DB Press"]
    assert pick_exercises(catalog, "Chest", 0) == []


def test_pick_exercises_balances_movement_types():
    catalog = ExerciseCatalog(
        [make_exercise(f"Press {i}", "Chest") for i in range(5)]
        + [make_exercise("Fly", "Chest", "Isolation")]
    )
    for seed in range(25):
        picked = pick_exercises(catalog, "Chest", 2, rng=random.Random(seed))
        assert [ex.exercise_type for ex in picked] == ["Compound", "Isolation"]
        assert len({ex.name for ex in picked}) == 2


def test_exercise_list_has_no_duplicates_and_respects_total(catalog):
    for workout_type in WorkoutType:
        for seed in range(5):
            exercises = generate_exercise_list(catalog, workout_type, total=8, rng=random.Random(seed))
            names = [ex.name for ex in exercises]
            assert len(names) == 8
            assert len(set(names)) == 8


def test_upper_workout_follows_quotas(catalog):
    exercises = generate_exercise_list(catalog, "upper", total=8, rng=random.Random(3))
    counts = Counter(normalize_muscle(ex.primary_muscle) for ex in exercises)
    assert counts == {"Chest": 3, "Lats": 3, "Biceps": 1, "Triceps": 1}


def test_equipment_filter_tops_up_from_other_muscles(catalog):
    exercises = generate_exercise_list(catalog, "upper", equipment=["dumbbell"], total=8, rng=random.Random(5))
    assert len(exercises) == 8
    assert all("dumbbell" in ex.equipment.lower() for ex in exercises)


def test_small_catalog_returns_everything_it_has():
    catalog = ExerciseCatalog(
        [make_exercise("Bench", "Chest"), make_exercise("Row", "Lats"), make_exercise("Curl", "Biceps")]
    )
    exercises = generate_exercise_list(catalog, "upper", total=8, rng=random.Random(0))
    assert sorted(ex.name for ex in exercises) == ["Bench", "Curl", "Row"]


def test_generate_workout_attaches_targets(catalog):
    prefs = {"Barbell Bench Press": PreferenceValue(weight=135, target_reps=8)}
    workout = generate_workout(
        catalog,
        "push",
        superset_config=[3, 3, 2],
        preferences=prefs,
        rng=random.Random(11),
    )
    assert workout.workout_type is WorkoutType.PUSH
    assert workout.equipment == ["all"]
    assert [p.superset_index for p in workout.exercises] == [0, 0, 0, 1, 1, 1, 2, 2]
    for planned in workout.exercises:
        assert planned.sets == 3
        if planned.exercise.name == "Barbell Bench Press":
            assert (planned.suggested_weight, planned.target_reps) == (135, 8)
        else:
            assert (planned.suggested_weight, planned.target_reps) == (0.0, 12)


def test_generate_workout_uses_experience_level_without_config(catalog):
    workout = generate_workout(catalog, "upper", experience_level="advanced", rng=random.Random(2))
    assert len(workout.exercises) == 10
    assert [p.superset_index for p in workout.exercises] == [0, 0, 1, 1, 2, 2, 3, 3, 4, 4]


def test_generate_workout_is_reproducible_with_seed(catalog):
    first = generate_workout(catalog, "full", rng=random.Random(99))
    second = generate_workout(catalog, "full", rng=random.Random(99))
    assert first == second


def test_generate_workout_empty_catalog():
    with pytest.raises(EmptyCatalogError):
        generate_workout(ExerciseCatalog(), "upper")


def test_plan_workout_pairs_in_given_order(catalog):
    exercises = [catalog.get("Back Squat"), catalog.get("Plank"), catalog.get("Lying Leg Curl")]
    workout = plan_workout(exercises, "legs", ["Dumbbells"], sets_per_exercise=4)
    assert [p.exercise.name for p in workout.exercises] == ["Back Squat", "Plank", "Lying Leg Curl"]
    assert [p.superset_index for p in workout.exercises] == [0, 0, 1]
    assert workout.equipment == ["dumbbell"]
    assert all(p.sets == 4 for p in workout.exercises)


@pytest.mark.parametrize("workout_type", [WorkoutType.UPPER, WorkoutType.PUSH, WorkoutType.PULL])
def test_fixed_splits_sum_exactly(workout_type):
    for total in range(4, 13):
        assert sum(count for _, count in muscle_quotas(workout_type, total)) == total
