"""Domain errors raised by services; routers map them to HTTP responses."""


class GoodLiftError(Exception):
    """Base class for all domain errors."""


class CatalogError(GoodLiftError):
    """Exercise catalog could not be read or parsed."""


class EmptyCatalogError(GoodLiftError):
    """No exercises available to build a workout from."""


class UnknownWorkoutTypeError(GoodLiftError):
    """Workout type has no muscle quota table."""


class NoAlternativeError(GoodLiftError):
    """Substitution found no replacement exercise."""
