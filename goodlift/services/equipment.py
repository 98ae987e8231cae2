"""Equipment filter: user-selected equipment categories used to narrow exercise choice."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

# UI labels that are plural or more specific than the catalog's equipment text
EQUIPMENT_ALIASES = {
    "cable machine": "cable",
    "dumbbells": "dumbbell",
    "barbells": "barbell",
    "kettlebells": "kettlebell",
}


@dataclass(frozen=True)
class EquipmentFilter:
    """Case-insensitive substring match against any selected equipment; empty means all."""

    selected: tuple[str, ...] = ()

    @classmethod
    def parse(cls, value: EquipmentFilter | str | Iterable[str] | None) -> EquipmentFilter:
        if isinstance(value, EquipmentFilter):
            return value
        if value is None:
            return cls()
        values = [value] if isinstance(value, str) else list(value)
        cleaned = [v.strip().lower() for v in values if v and v.strip()]
        if not cleaned or "all" in cleaned:
            return cls()
        return cls(tuple(EQUIPMENT_ALIASES.get(v, v) for v in cleaned))

    @property
    def is_all(self) -> bool:
        return not self.selected

    def matches(self, equipment: str | None) -> bool:
        if self.is_all:
            return True
        text = (equipment or "").lower()
        return any(choice in text for choice in self.selected)

    def as_list(self) -> list[str]:
        return list(self.selected) if self.selected else ["all"]
