"""Initial schema: accounts, profiles, workouts, gamification, social, coaching; seed reference data.

Revision ID: 001
Revises:
Create Date: 2025-09-25

"""
import uuid
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

from fitquest.core.seed_data import ACHIEVEMENTS, EXERCISES
from fitquest.db.base import DecimalArray, IntArray, StringArray


revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _id() -> sa.Column:
    return sa.Column("id", sa.Uuid(), nullable=False)


def _created_at(name: str = "created_at") -> sa.Column:
    return sa.Column(name, sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now())


def _owner(name: str = "user_id") -> sa.Column:
    return sa.Column(name, sa.Uuid(), sa.ForeignKey("users.id", ondelete="CASCADE"), nullable=False)


def upgrade() -> None:
    op.create_table(
        "users",
        _id(),
        sa.Column("email", sa.String(length=255), nullable=False),
        sa.Column("hashed_password", sa.String(length=255), nullable=False),
        _created_at(),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_users_email"), "users", ["email"], unique=True)

    op.create_table(
        "profiles",
        _id(),
        _owner(),
        sa.Column("username", sa.String(length=30), nullable=False),
        sa.Column("full_name", sa.String(length=100), nullable=True),
        sa.Column("age", sa.Integer(), nullable=True),
        sa.Column("weight", sa.Numeric(precision=5, scale=2), nullable=True),
        sa.Column("fitness_goals", sa.Text(), nullable=True),
        sa.Column("profile_picture_url", sa.Text(), nullable=True),
        sa.Column("fitness_level", sa.Integer(), nullable=False, server_default="1"),
        sa.Column("total_points", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("rank_title", sa.String(length=50), nullable=False, server_default="Beginner"),
        _created_at(),
        _created_at("updated_at"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("user_id"),
    )
    op.create_index(op.f("ix_profiles_username"), "profiles", ["username"], unique=True)
    op.create_index(op.f("ix_profiles_total_points"), "profiles", ["total_points"], unique=False)

    op.create_table(
        "exercises",
        _id(),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("category", sa.String(length=20), nullable=False),
        sa.Column("muscle_groups", StringArray, nullable=True),
        sa.Column("equipment", sa.String(length=100), nullable=True),
        sa.Column("video_url", sa.Text(), nullable=True),
        sa.Column("instructions", sa.Text(), nullable=True),
        _created_at(),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_exercises_name"), "exercises", ["name"], unique=True)
    op.create_index(op.f("ix_exercises_category"), "exercises", ["category"], unique=False)

    op.create_table(
        "workouts",
        _id(),
        _owner(),
        sa.Column("name", sa.String(length=100), nullable=False),
        sa.Column("notes", sa.Text(), nullable=True),
        sa.Column("duration_minutes", sa.Integer(), nullable=True),
        _created_at(),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_workouts_user_created", "workouts", ["user_id", "created_at"], unique=False)

    op.create_table(
        "workout_exercises",
        _id(),
        sa.Column("workout_id", sa.Uuid(), sa.ForeignKey("workouts.id", ondelete="CASCADE"), nullable=False),
        sa.Column("exercise_id", sa.Uuid(), sa.ForeignKey("exercises.id", ondelete="CASCADE"), nullable=False),
        sa.Column("sets", sa.Integer(), nullable=True),
        sa.Column("reps", IntArray, nullable=True),
        sa.Column("weight", DecimalArray, nullable=True),
        sa.Column("duration_seconds", sa.Integer(), nullable=True),
        sa.Column("distance_km", sa.Numeric(precision=6, scale=3), nullable=True),
        sa.Column("notes", sa.Text(), nullable=True),
        _created_at(),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_workout_exercises_workout_id", "workout_exercises", ["workout_id"], unique=False)

    op.create_table(
        "personal_bests",
        _id(),
        _owner(),
        sa.Column("exercise_id", sa.Uuid(), sa.ForeignKey("exercises.id", ondelete="CASCADE"), nullable=False),
        sa.Column("best_weight", sa.Numeric(precision=6, scale=2), nullable=True),
        sa.Column("best_reps", sa.Integer(), nullable=True),
        sa.Column("best_distance_km", sa.Numeric(precision=6, scale=3), nullable=True),
        sa.Column("best_duration_seconds", sa.Integer(), nullable=True),
        _created_at("achieved_at"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("user_id", "exercise_id", name="uq_personal_bests_user_exercise"),
    )
    op.create_index(op.f("ix_personal_bests_user_id"), "personal_bests", ["user_id"], unique=False)

    achievements = op.create_table(
        "achievements",
        _id(),
        sa.Column("name", sa.String(length=100), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column("points_reward", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("icon", sa.String(length=100), nullable=True),
        sa.Column("requirement_type", sa.String(length=50), nullable=False),
        sa.Column("requirement_value", sa.Integer(), nullable=False),
        _created_at(),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("name"),
    )

    op.create_table(
        "user_achievements",
        _id(),
        _owner(),
        sa.Column("achievement_id", sa.Uuid(), sa.ForeignKey("achievements.id", ondelete="CASCADE"), nullable=False),
        _created_at("earned_at"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("user_id", "achievement_id", name="uq_user_achievements_user_achievement"),
    )
    op.create_index(op.f("ix_user_achievements_user_id"), "user_achievements", ["user_id"], unique=False)

    op.create_table(
        "body_measurements",
        _id(),
        _owner(),
        *[
            sa.Column(name, sa.Float(), nullable=True)
            for name in (
                "weight", "height", "body_fat_percentage", "muscle_mass",
                "chest", "waist", "hips", "biceps", "thighs",
            )
        ],
        sa.Column("notes", sa.Text(), nullable=True),
        _created_at("measured_at"),
        _created_at(),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "ix_body_measurements_user_measured", "body_measurements", ["user_id", "measured_at"], unique=False
    )

    op.create_table(
        "workout_templates",
        _id(),
        _owner("creator_id"),
        sa.Column("name", sa.String(length=100), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("difficulty_level", sa.String(length=20), nullable=True),
        sa.Column("category", sa.String(length=50), nullable=True),
        sa.Column("is_public", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("times_used", sa.Integer(), nullable=False, server_default="0"),
        _created_at(),
        _created_at("updated_at"),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint(
            "difficulty_level IN ('beginner', 'intermediate', 'advanced')",
            name="ck_workout_templates_difficulty",
        ),
    )
    op.create_index(op.f("ix_workout_templates_creator_id"), "workout_templates", ["creator_id"], unique=False)
    op.create_index(op.f("ix_workout_templates_name"), "workout_templates", ["name"], unique=False)

    op.create_table(
        "template_exercises",
        _id(),
        sa.Column(
            "template_id", sa.Uuid(), sa.ForeignKey("workout_templates.id", ondelete="CASCADE"), nullable=False
        ),
        sa.Column("exercise_id", sa.Uuid(), sa.ForeignKey("exercises.id", ondelete="CASCADE"), nullable=False),
        sa.Column("sets", sa.Integer(), nullable=True),
        sa.Column("reps", IntArray, nullable=True),
        sa.Column("weight", DecimalArray, nullable=True),
        sa.Column("notes", sa.Text(), nullable=True),
        sa.Column("order_index", sa.Integer(), nullable=False),
        _created_at(),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_template_exercises_template_id"), "template_exercises", ["template_id"], unique=False)

    op.create_table(
        "user_follows",
        _id(),
        _owner("follower_id"),
        _owner("following_id"),
        _created_at(),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("follower_id", "following_id", name="uq_user_follows_pair"),
        sa.CheckConstraint("follower_id <> following_id", name="ck_user_follows_not_self"),
    )
    op.create_index(op.f("ix_user_follows_follower_id"), "user_follows", ["follower_id"], unique=False)
    op.create_index(op.f("ix_user_follows_following_id"), "user_follows", ["following_id"], unique=False)

    op.create_table(
        "workout_shares",
        _id(),
        sa.Column("workout_id", sa.Uuid(), sa.ForeignKey("workouts.id", ondelete="CASCADE"), nullable=False),
        _owner(),
        sa.Column("caption", sa.Text(), nullable=True),
        sa.Column("likes_count", sa.Integer(), nullable=False, server_default="0"),
        _created_at(),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_workout_shares_user_id"), "workout_shares", ["user_id"], unique=False)
    op.create_index(op.f("ix_workout_shares_created_at"), "workout_shares", ["created_at"], unique=False)

    op.create_table(
        "workout_likes",
        _id(),
        sa.Column("share_id", sa.Uuid(), sa.ForeignKey("workout_shares.id", ondelete="CASCADE"), nullable=False),
        _owner(),
        _created_at(),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("share_id", "user_id", name="uq_workout_likes_share_user"),
    )
    op.create_index(op.f("ix_workout_likes_user_id"), "workout_likes", ["user_id"], unique=False)

    op.create_table(
        "coach_groups",
        _id(),
        _owner("coach_id"),
        sa.Column("name", sa.String(length=100), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.true()),
        _created_at(),
        _created_at("updated_at"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_coach_groups_coach_id"), "coach_groups", ["coach_id"], unique=False)

    op.create_table(
        "group_members",
        _id(),
        sa.Column("group_id", sa.Uuid(), sa.ForeignKey("coach_groups.id", ondelete="CASCADE"), nullable=False),
        _owner(),
        _created_at("joined_at"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("group_id", "user_id", name="uq_group_members_group_user"),
    )
    op.create_index(op.f("ix_group_members_user_id"), "group_members", ["user_id"], unique=False)

    # Reference data
    exercises = sa.table(
        "exercises",
        sa.column("id", sa.Uuid()),
        sa.column("name", sa.String()),
        sa.column("category", sa.String()),
        sa.column("muscle_groups", StringArray),
        sa.column("equipment", sa.String()),
    )
    op.bulk_insert(exercises, [{"id": uuid.uuid4(), **row} for row in EXERCISES])
    op.bulk_insert(achievements, [{"id": uuid.uuid4(), **row} for row in ACHIEVEMENTS])


def downgrade() -> None:
    for table in (
        "group_members",
        "coach_groups",
        "workout_likes",
        "workout_shares",
        "user_follows",
        "template_exercises",
        "workout_templates",
        "body_measurements",
        "user_achievements",
        "achievements",
        "personal_bests",
        "workout_exercises",
        "workouts",
        "exercises",
        "profiles",
        "users",
    ):
        op.drop_table(table)
