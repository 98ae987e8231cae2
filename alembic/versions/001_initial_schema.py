"""Initial schema: exercises, preferences, workouts, workout_sets, favorites.

Revision ID: 001
Revises:
Create Date: 2026-10-18

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

workout_type = sa.Enum("UPPER", "LOWER", "FULL", "PUSH", "PULL", "LEGS", name="workouttype")


def upgrade() -> None:
    op.create_table(
        "exercises",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("primary_muscle", sa.String(length=100), nullable=False),
        sa.Column("secondary_muscles", sa.String(length=255), nullable=False),
        sa.Column("equipment", sa.String(length=100), nullable=False),
        sa.Column("exercise_type", sa.String(length=50), nullable=False),
        sa.Column("modification", sa.Text(), nullable=True),
        sa.Column("demo_url", sa.String(length=500), nullable=True),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_exercises_name"), "exercises", ["name"], unique=True)
    op.create_index(op.f("ix_exercises_primary_muscle"), "exercises", ["primary_muscle"], unique=False)

    op.create_table(
        "exercise_preferences",
        sa.Column("exercise_name", sa.String(length=255), nullable=False),
        sa.Column("weight", sa.Float(), nullable=False),
        sa.Column("target_reps", sa.Integer(), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=True),
        sa.PrimaryKeyConstraint("exercise_name"),
    )

    op.create_table(
        "workouts",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("workout_type", workout_type, nullable=False),
        sa.Column("performed_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("duration_seconds", sa.Integer(), nullable=False),
        sa.Column("notes", sa.Text(), nullable=True),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_workouts_performed_at", "workouts", ["performed_at"], unique=False)

    op.create_table(
        "workout_sets",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("workout_id", sa.Uuid(), nullable=False),
        sa.Column("exercise_name", sa.String(length=255), nullable=False),
        sa.Column("set_order", sa.Integer(), nullable=True),
        sa.Column("weight", sa.Float(), nullable=False),
        sa.Column("reps", sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(["workout_id"], ["workouts.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_workout_sets_workout_id", "workout_sets", ["workout_id"], unique=False)
    op.create_index("ix_workout_sets_exercise_name", "workout_sets", ["exercise_name"], unique=False)

    op.create_table(
        "favorite_workouts",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("workout_type", workout_type, nullable=False),
        sa.Column("equipment", sa.JSON(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=True),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_favorite_workouts_name"), "favorite_workouts", ["name"], unique=False)

    op.create_table(
        "favorite_exercises",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("favorite_id", sa.Uuid(), nullable=False),
        sa.Column("exercise_name", sa.String(length=255), nullable=False),
        sa.Column("position", sa.Integer(), nullable=True),
        sa.ForeignKeyConstraint(["favorite_id"], ["favorite_workouts.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )


def downgrade() -> None:
    op.drop_table("favorite_exercises")
    op.drop_index(op.f("ix_favorite_workouts_name"), table_name="favorite_workouts")
    op.drop_table("favorite_workouts")
    op.drop_index("ix_workout_sets_exercise_name", table_name="workout_sets")
    op.drop_index("ix_workout_sets_workout_id", table_name="workout_sets")
    op.drop_table("workout_sets")
    op.drop_index("ix_workouts_performed_at", table_name="workouts")
    op.drop_table("workouts")
    op.drop_table("exercise_preferences")
    op.drop_index(op.f("ix_exercises_primary_muscle"), table_name="exercises")
    op.drop_index(op.f("ix_exercises_name"), table_name="exercises")
    op.drop_table("exercises")
    workout_type.drop(op.get_bind(), checkfirst=True)
