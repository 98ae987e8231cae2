"""Exercise catalog: parse static exercise records and group them by primary muscle.

Primary muscles in the catalog carry detail in parentheses ("Chest (Upper)"); the
generator groups on the bare muscle name, while list filters use the coarser
categories in MUSCLE_CATEGORY_MAP.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable, Iterator, Mapping
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from goodlift.core.errors import CatalogError
from goodlift.schemas.exercise import ExerciseRecord
from goodlift.services.equipment import EquipmentFilter

logger = logging.getLogger(__name__)

MUSCLE_CATEGORY_MAP: dict[str, tuple[str, ...]] = {
    "Chest": ("Chest",),
    "Back": ("Lats", "Traps", "Back", "Upper Back", "Lower Back", "Rhomboids", "Erector Spinae"),
    "Biceps": ("Biceps", "Forearms"),
    "Triceps": ("Triceps",),
    "Shoulders": ("Shoulders", "Delts", "Front Delts", "Rear Delts"),
    "Core": ("Core", "Obliques", "Hip Flexors"),
    "Quads": ("Quads",),
    "Hamstrings": ("Hamstrings",),
    "Calves": ("Calves",),
    "Glutes": ("Glutes", "Adductors"),
    "All": ("Full Body", "All"),
}

MUSCLE_TO_CATEGORY = {
    muscle: category for category, muscles in MUSCLE_CATEGORY_MAP.items() for muscle in muscles
}


def normalize_muscle(primary_muscle: str) -> str:
    """'Chest (Upper)' -> 'Chest'."""
    return (primary_muscle or "").split("(")[0].strip()


def muscle_category(primary_muscle: str) -> str:
    """Simplified category for a detailed muscle; unknown muscles map to themselves."""
    muscle = normalize_muscle(primary_muscle)
    return MUSCLE_TO_CATEGORY.get(muscle, muscle)


def movement_type(exercise: ExerciseRecord) -> str:
    return exercise.exercise_type.strip().lower()


def _raw_name(raw: Mapping[str, Any]) -> str:
    value = raw.get("Exercise Name", raw.get("name"))
    return str(value).strip() if value is not None else ""


class ExerciseCatalog:
    """Read-only collection of exercise records indexed by muscle and by name."""

    def __init__(self, exercises: Iterable[ExerciseRecord] = ()):
        self._exercises: tuple[ExerciseRecord, ...] = tuple(exercises)
        grouped: dict[str, list[ExerciseRecord]] = {}
        by_name: dict[str, ExerciseRecord] = {}
        for exercise in self._exercises:
            grouped.setdefault(normalize_muscle(exercise.primary_muscle), []).append(exercise)
            by_name.setdefault(exercise.name, exercise)
        self._by_muscle = {muscle: tuple(items) for muscle, items in grouped.items()}
        self._by_name = by_name

    @classmethod
    def from_records(cls, records: Iterable[Any]) -> ExerciseCatalog:
        """Build from catalog dicts, ExerciseRecord instances or ORM rows.

        Dict rows without a name are skipped (blank spreadsheet lines).
        """
        parsed: list[ExerciseRecord] = []
        skipped = 0
        for index, raw in enumerate(records):
            if isinstance(raw, ExerciseRecord):
                parsed.append(raw)
                continue
            if isinstance(raw, Mapping) and not _raw_name(raw):
                skipped += 1
                continue
            try:
                parsed.append(ExerciseRecord.model_validate(raw))
            except ValidationError as exc:
                raise CatalogError(f"Invalid exercise record at index {index}: {exc}") from exc
        if skipped:
            logger.debug("Skipped %d catalog rows without a name", skipped)
        return cls(parsed)

    def __len__(self) -> int:
        return len(self._exercises)

    def __iter__(self) -> Iterator[ExerciseRecord]:
        return iter(self._exercises)

    def __contains__(self, name: object) -> bool:
        return name in self._by_name

    @property
    def exercises(self) -> tuple[ExerciseRecord, ...]:
        return self._exercises

    @property
    def by_muscle(self) -> Mapping[str, tuple[ExerciseRecord, ...]]:
        return self._by_muscle

    def get(self, name: str) -> ExerciseRecord | None:
        return self._by_name.get(name)

    def filter(
        self,
        category: str | None = None,
        equipment: EquipmentFilter | str | list[str] | None = None,
    ) -> list[ExerciseRecord]:
        """Exercises in a muscle category (or 'all') that pass the equipment filter."""
        equipment = EquipmentFilter.parse(equipment)
        result = []
        for exercise in self._exercises:
            if category and category.lower() != "all" and muscle_category(exercise.primary_muscle) != category:
                continue
            if equipment.matches(exercise.equipment):
                result.append(exercise)
        return result

    def equipment_options(self) -> list[str]:
        return sorted({exercise.equipment for exercise in self._exercises if exercise.equipment})


def load_catalog_file(path: str | Path) -> ExerciseCatalog:
    """Parse a JSON array of exercise records."""
    path = Path(path)
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError as exc:
        raise CatalogError(f"Catalog file not found: {path}") from exc
    except json.JSONDecodeError as exc:
        raise CatalogError(f"Catalog file is not valid JSON: {path} ({exc})") from exc
    if not isinstance(data, list):
        raise CatalogError(f"Catalog file must contain a JSON array, got {type(data).__name__}")
    catalog = ExerciseCatalog.from_records(data)
    logger.info("Loaded %d exercises across %d muscles from %s", len(catalog), len(catalog.by_muscle), path)
    return catalog
