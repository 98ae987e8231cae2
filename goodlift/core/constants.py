"""Application constants."""

# Workout shape
SETS_PER_EXERCISE = 3
EXERCISES_PER_WORKOUT = 8
DEFAULT_TARGET_REPS = 12

# Substitution
MAX_SUBSTITUTION_ATTEMPTS = 3
FAVORITE_WEIGHT = 2  # favorites appear this many times in the draw pool

# Session limits (validation)
MAX_EXERCISES_PER_SESSION = 20
MAX_SETS_PER_EXERCISE_PER_SESSION = 10

# Progress charts show at most this many sessions
PROGRESSION_HISTORY_LIMIT = 10

# Progressive overload increments (lbs) by body region and equipment class
WEIGHT_INCREMENTS = {
    "upper": {"dumbbell": 5.0, "barbell": 2.5},
    "lower": {"dumbbell": 10.0, "barbell": 5.0},
}

# In-session next-set hints (lbs)
NEXT_SET_SMALL_JUMP = 5.0
NEXT_SET_BIG_JUMP = 10.0
