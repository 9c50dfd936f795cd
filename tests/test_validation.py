"""Tests for input validation rules and schemas."""

import uuid

import pytest
from pydantic import ValidationError

from fitquest.schemas.account import SignupRequest
from fitquest.schemas.group import CoachGroupUpdate
from fitquest.schemas.profile import ProfileUpdate
from fitquest.schemas.template import WorkoutTemplateUpdate
from fitquest.schemas.validators import required_name, validate_set_arrays, validate_username
from fitquest.schemas.workout import WorkoutCreate, WorkoutExerciseCreate, WorkoutExerciseUpdate, WorkoutUpdate


class TestUsername:
    def test_valid(self):
        assert validate_username("john_doe99") == "john_doe99"

    def test_too_short(self):
        with pytest.raises(ValueError, match="at least 3"):
            validate_username("jo")

    def test_too_long(self):
        with pytest.raises(ValueError, match="less than 30"):
            validate_username("a" * 31)

    def test_bad_characters(self):
        with pytest.raises(ValueError, match="letters, numbers, and underscores"):
            validate_username("john doe!")

    def test_profile_update_rejects_bad_username(self):
        with pytest.raises(ValidationError):
            ProfileUpdate(username="x!")


class TestNames:
    def test_trimmed(self):
        assert required_name("  Leg Day ", "Workout") == "Leg Day"

    def test_blank_rejected(self):
        with pytest.raises(ValueError, match="Workout name is required"):
            required_name("   ", "Workout")

    def test_too_long_rejected(self):
        with pytest.raises(ValueError, match="less than 100"):
            required_name("x" * 101, "Workout")


class TestWorkoutSchema:
    def test_duration_bounds(self):
        assert WorkoutCreate(name="Run", duration_minutes=600).duration_minutes == 600
        with pytest.raises(ValidationError):
            WorkoutCreate(name="Run", duration_minutes=0)
        with pytest.raises(ValidationError):
            WorkoutCreate(name="Run", duration_minutes=601)

    def test_too_many_exercises(self):
        ex = {"exercise_id": str(uuid.uuid4())}
        with pytest.raises(ValidationError):
            WorkoutCreate(name="Everything", exercises=[ex] * 21)

    def test_reps_must_match_sets(self):
        with pytest.raises(ValidationError, match="exactly 3 entries"):
            WorkoutExerciseCreate(exercise_id=uuid.uuid4(), sets=3, reps=[10, 10])

    def test_matching_arrays_accepted(self):
        we = WorkoutExerciseCreate(exercise_id=uuid.uuid4(), sets=2, reps=[8, 6], weight=[60, 70])
        assert we.weight == [60.0, 70.0]


class TestSetArrays:
    def test_sets_range(self):
        with pytest.raises(ValueError, match="between 1 and 50"):
            validate_set_arrays(51, None, None)

    def test_arrays_need_sets(self):
        with pytest.raises(ValueError, match="sets is required"):
            validate_set_arrays(None, [5], None)

    def test_negative_weight(self):
        with pytest.raises(ValueError, match="zero or positive"):
            validate_set_arrays(1, [5], [-10])

    def test_weight_fits_column(self):
        validate_set_arrays(2, [5, 5], [9999.99, 0])
        with pytest.raises(ValueError, match="weight entries must be at most"):
            validate_set_arrays(1, [5], [10000])
        with pytest.raises(ValueError, match="weight entries must be at most"):
            validate_set_arrays(1, [5], [9999.999])

    def test_reps_upper_bound(self):
        validate_set_arrays(1, [10000], None)
        with pytest.raises(ValueError, match="reps entries must be at most 10000"):
            validate_set_arrays(1, [3_000_000_000], None)

    def test_exercise_schema_rejects_huge_weight(self):
        with pytest.raises(ValidationError, match="weight entries must be at most"):
            WorkoutExerciseCreate(exercise_id=uuid.uuid4(), sets=1, reps=[5], weight=[123456])

    def test_duration_seconds_upper_bound(self):
        with pytest.raises(ValidationError):
            WorkoutExerciseUpdate(duration_seconds=86401)


class TestPartialUpdates:
    def test_omitted_fields_stay_unset(self):
        assert WorkoutUpdate(notes="easy").model_dump(exclude_unset=True) == {"notes": "easy"}
        assert CoachGroupUpdate(description="x").model_dump(exclude_unset=True) == {"description": "x"}

    def test_workout_name_cannot_be_cleared(self):
        with pytest.raises(ValidationError, match="Workout name is required"):
            WorkoutUpdate(name=None)

    def test_username_cannot_be_cleared(self):
        with pytest.raises(ValidationError, match="Username is required"):
            ProfileUpdate(username=None)

    def test_template_required_fields(self):
        with pytest.raises(ValidationError, match="Template name is required"):
            WorkoutTemplateUpdate(name=None)
        with pytest.raises(ValidationError, match="is_public cannot be null"):
            WorkoutTemplateUpdate(is_public=None)
        assert WorkoutTemplateUpdate(difficulty_level=None).difficulty_level is None

    def test_group_required_fields(self):
        with pytest.raises(ValidationError, match="Group name is required"):
            CoachGroupUpdate(name=None)
        with pytest.raises(ValidationError, match="is_active cannot be null"):
            CoachGroupUpdate(is_active=None)


class TestSignup:
    def test_email_normalised(self):
        assert SignupRequest(email=" Alice@Example.COM ", password="long-enough").email == "alice@example.com"

    def test_bad_email(self):
        with pytest.raises(ValidationError):
            SignupRequest(email="not-an-email", password="long-enough")

    def test_short_password(self):
        with pytest.raises(ValidationError):
            SignupRequest(email="a@b.co", password="short")
