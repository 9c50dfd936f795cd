"""ORM models - import all so Base.metadata is complete for migrations."""

from fitquest.models.account import User
from fitquest.models.achievement import Achievement, UserAchievement
from fitquest.models.body_measurement import BodyMeasurement
from fitquest.models.coaching import CoachGroup, GroupMember
from fitquest.models.exercise import Exercise
from fitquest.models.personal_best import PersonalBest
from fitquest.models.profile import Profile
from fitquest.models.social import UserFollow, WorkoutLike, WorkoutShare
from fitquest.models.template import TemplateExercise, WorkoutTemplate
from fitquest.models.workout import Workout, WorkoutExercise

__all__ = [
    "Achievement",
    "BodyMeasurement",
    "CoachGroup",
    "Exercise",
    "GroupMember",
    "PersonalBest",
    "Profile",
    "TemplateExercise",
    "User",
    "UserAchievement",
    "UserFollow",
    "Workout",
    "WorkoutExercise",
    "WorkoutLike",
    "WorkoutShare",
    "WorkoutTemplate",
]
