"""Shared enums for models and API."""

from enum import Enum


class WorkoutType(str, Enum):
    """Session split the generator builds for."""

    UPPER = "upper"
    LOWER = "lower"
    FULL = "full"
    PUSH = "push"
    PULL = "pull"
    LEGS = "legs"


class ExerciseType(str, Enum):
    """Movement class used to keep compound/isolation balance."""

    COMPOUND = "compound"
    ISOLATION = "isolation"


class ExperienceLevel(str, Enum):
    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"


class ProgressionMode(str, Enum):
    """Metric tracked on progress charts."""

    WEIGHT = "weight"
    REPS = "reps"


class SuggestionKind(str, Enum):
    """Tone of an in-session next-set hint."""

    SUCCESS = "success"  # hit target exactly
    GOOD = "good"  # one rep over
    EXCELLENT = "excellent"  # two or more over
    MAINTAIN = "maintain"  # below target
