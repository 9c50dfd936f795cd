"""Leaderboard and dashboard aggregate schemas."""

from datetime import date
from uuid import UUID

from pydantic import BaseModel

from fitquest.schemas.profile import LevelProgress


class LeaderboardEntry(BaseModel):
    rank: int
    user_id: UUID
    username: str
    rank_title: str
    total_points: int
    fitness_level: int
    total_workouts: int


class LeaderboardPosition(BaseModel):
    rank: int
    total_profiles: int
    total_points: int


class StreakRead(BaseModel):
    current_streak: int
    longest_streak: int
    last_workout_date: date | None = None


class AnalyticsSummary(BaseModel):
    total_workouts: int
    workouts_this_week: int
    total_exercises: int
    average_workout_minutes: float
    personal_bests: int
    current_streak: int
    longest_streak: int
    level: LevelProgress
