from goodlift.schemas.exercise import ExerciseRecord
from goodlift.services.superset import group_supersets, pair_exercises


def ex(name, muscle):
    return ExerciseRecord(name=name, primary_muscle=muscle, exercise_type="Compound", equipment="Barbell")


def names(groups):
    return [[e.name for e in group] for group in groups]


def test_pairs_opposing_muscles():
    exercises = [ex("Bench", "Chest"), ex("Curl", "Biceps"), ex("Row", "Lats"), ex("Pushdown", "Triceps")]
    assert names(group_supersets(exercises)) == [["Bench", "Row"], ["Curl", "Pushdown"]]


def test_opposing_match_uses_contains():
    exercises = [ex("Squat", "Quads"), ex("Press", "Chest"), ex("Leg Curl", "Hamstrings (Lower)")]
    assert names(group_supersets(exercises, [2])) == [["Squat", "Leg Curl"], ["Press"]]


def test_shoulders_pair_with_lats():
    exercises = [ex("OHP", "Shoulders"), ex("Lateral", "Shoulders"), ex("Pulldown", "Lats")]
    assert names(group_supersets(exercises, [2, 1])) == [["OHP", "Pulldown"], ["Lateral"]]


def test_falls_back_to_a_different_muscle_then_to_next():
    exercises = [ex("Bench", "Chest"), ex("Fly", "Chest"), ex("Plank", "Core"), ex("Dip", "Chest")]
    assert names(group_supersets(exercises, [2, 2])) == [["Bench", "Plank"], ["Fly", "Dip"]]


def test_larger_supersets_avoid_repeating_a_muscle():
    exercises = [
        ex("Bench", "Chest"),
        ex("Fly", "Chest"),
        ex("Row", "Lats"),
        ex("Curl", "Biceps"),
    ]
    assert names(group_supersets(exercises, [3, 1])) == [["Bench", "Row", "Curl"], ["Fly"]]


def test_leftovers_are_kept_unpaired():
    exercises = [ex(f"E{i}", "Core") for i in range(5)]
    groups = group_supersets(exercises, [2])
    assert names(groups) == [["E0", "E1"], ["E2"], ["E3"], ["E4"]]


def test_config_larger_than_input():
    exercises = [ex("A", "Chest"), ex("B", "Lats"), ex("C", "Quads"), ex("D", "Core")]
    assert [len(g) for g in group_supersets(exercises, [3, 3])] == [3, 1]


def test_pair_exercises_is_a_permutation():
    exercises = [
        ex("Squat", "Quads"),
        ex("Bench", "Chest"),
        ex("Curl", "Biceps"),
        ex("RDL", "Hamstrings"),
        ex("Row", "Lats"),
        ex("Pushdown", "Triceps"),
        ex("Plank", "Core"),
    ]
    paired = pair_exercises(exercises, (2, 2, 2, 2))
    assert sorted(e.name for e in paired) == sorted(e.name for e in exercises)
    assert [e.name for e in paired][:6] == ["Squat", "RDL", "Bench", "Row", "Curl", "Pushdown"]


def test_empty_input():
    assert group_supersets([]) == []
    assert pair_exercises([], [2, 2]) == []
