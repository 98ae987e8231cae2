"""Exercise model - one catalog record (immutable once imported)."""

from __future__ import annotations

import uuid

from sqlalchemy import String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from goodlift.db.base import Base


class Exercise(Base):
    """Catalog exercise with primary muscle, equipment and movement type."""

    __tablename__ = "exercises"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    name: Mapped[str] = mapped_column(String(255), nullable=False, unique=True, index=True)
    primary_muscle: Mapped[str] = mapped_column(String(100), nullable=False, index=True)
    secondary_muscles: Mapped[str] = mapped_column(String(255), default="", nullable=False)
    equipment: Mapped[str] = mapped_column(String(100), default="", nullable=False)
    exercise_type: Mapped[str] = mapped_column(String(50), default="", nullable=False)  # compound / isolation
    modification: Mapped[str | None] = mapped_column(Text, nullable=True)
    demo_url: Mapped[str | None] = mapped_column(String(500), nullable=True)
