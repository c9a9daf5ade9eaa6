"""create users, workouts, exercises and goals tables

Revision ID: 20260301_create_fitness_tables
Revises:
Create Date: 2026-03-01
"""

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = "20260301_create_fitness_tables"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("id", sa.String(64), primary_key=True),
        sa.Column("username", sa.String(255), nullable=True),
        sa.Column("password_hash", sa.String(255), nullable=True),
        sa.Column("is_guest", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("created_at", sa.DateTime(), nullable=True),
        sa.Column("updated_at", sa.DateTime(), nullable=True),
    )
    op.create_index("ix_users_id", "users", ["id"])
    op.create_index("ix_users_username", "users", ["username"], unique=True)

    op.create_table(
        "exercises",
        sa.Column("id", sa.String(25), primary_key=True),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("category", sa.String(30), nullable=False),
        sa.Column("calories_per_minute", sa.Integer(), nullable=False),
        sa.Column("emoji", sa.String(16), nullable=False),
    )
    op.create_index("ix_exercises_id", "exercises", ["id"])

    op.create_table(
        "workouts",
        sa.Column("id", sa.String(25), primary_key=True),
        sa.Column("user_id", sa.String(64), sa.ForeignKey("users.id"), nullable=False),
        sa.Column("exercise_type", sa.String(100), nullable=False),
        sa.Column("duration", sa.Integer(), nullable=False),
        sa.Column("calories", sa.Integer(), nullable=False),
        sa.Column("intensity", sa.String(10), nullable=False),
        sa.Column("notes", sa.String(500), nullable=True),
        sa.Column("date", sa.DateTime(), nullable=False),
    )
    op.create_index("ix_workouts_id", "workouts", ["id"])
    op.create_index("ix_workouts_user_id", "workouts", ["user_id"])
    op.create_index("ix_workouts_date", "workouts", ["date"])
    op.create_index("ix_workout_user_date", "workouts", ["user_id", "date"])

    op.create_table(
        "goals",
        sa.Column("id", sa.String(25), primary_key=True),
        sa.Column("user_id", sa.String(64), sa.ForeignKey("users.id"), nullable=False),
        sa.Column("type", sa.String(30), nullable=False),
        sa.Column("target", sa.Float(), nullable=False),
        sa.Column("current", sa.Float(), nullable=False, server_default="0"),
        sa.Column("date", sa.DateTime(), nullable=False),
    )
    op.create_index("ix_goals_id", "goals", ["id"])
    op.create_index("ix_goals_user_id", "goals", ["user_id"])


def downgrade() -> None:
    op.drop_table("goals")
    op.drop_table("workouts")
    op.drop_table("exercises")
    op.drop_table("users")
