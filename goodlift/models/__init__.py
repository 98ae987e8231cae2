"""ORM models - import all so Base.metadata is complete for migrations."""

from goodlift.models.exercise import Exercise
from goodlift.models.favorite import FavoriteExercise, FavoriteWorkout
from goodlift.models.preference import ExercisePreference
from goodlift.models.workout import Workout, WorkoutSet

__all__ = [
    "Exercise",
    "ExercisePreference",
    "FavoriteExercise",
    "FavoriteWorkout",
    "Workout",
    "WorkoutSet",
]
