"""Shared enums for models and API."""

from enum import Enum


class ExerciseCategory(str, Enum):
    """Broad exercise family."""

    STRENGTH = "strength"
    CARDIO = "cardio"
    FLEXIBILITY = "flexibility"


class DifficultyLevel(str, Enum):
    """Template difficulty."""

    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"


class RequirementType(str, Enum):
    """Aggregate an achievement threshold is checked against."""

    WORKOUTS_COUNT = "workouts_count"  # Total workouts logged
    STREAK_DAYS = "streak_days"  # Longest run of consecutive workout days
    TOTAL_WEIGHT = "total_weight"  # Sum of weight x reps over every set
    PERSONAL_BESTS = "personal_bests"  # Exercises with a personal best on record


class TemplateVisibility(str, Enum):
    """Template list filter."""

    ALL = "all"  # Public templates plus your own
    MINE = "mine"
    PUBLIC = "public"


class PersonalBestMetric(str, Enum):
    """Independently tracked personal-best fields."""

    WEIGHT = "weight"  # Heaviest weight
    REPS = "reps"  # Most reps in a set
    DISTANCE = "distance"  # Longest distance
    DURATION = "duration"  # Longest duration
