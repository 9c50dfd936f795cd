"""API v1 router aggregation."""

from fastapi import APIRouter

from fitquest.api.v1.endpoints import (
    achievements,
    analytics,
    auth,
    body,
    exercises,
    groups,
    health,
    leaderboard,
    personal_bests,
    profiles,
    social,
    templates,
    workouts,
)

api_router = APIRouter()

api_router.include_router(health.router, prefix="/health", tags=["health"])
api_router.include_router(auth.router, prefix="/auth", tags=["auth"])
api_router.include_router(profiles.router, prefix="/profiles", tags=["profiles"])
api_router.include_router(exercises.router, prefix="/exercises", tags=["exercises"])
api_router.include_router(workouts.router, prefix="/workouts", tags=["workouts"])
api_router.include_router(personal_bests.router, prefix="/personal-bests", tags=["personal-bests"])
api_router.include_router(achievements.router, prefix="/achievements", tags=["achievements"])
api_router.include_router(body.router, prefix="/body", tags=["body"])
api_router.include_router(templates.router, prefix="/templates", tags=["templates"])
api_router.include_router(social.router, prefix="/social", tags=["social"])
api_router.include_router(groups.router, prefix="/groups", tags=["groups"])
api_router.include_router(leaderboard.router, prefix="/leaderboard", tags=["leaderboard"])
api_router.include_router(analytics.router, prefix="/analytics", tags=["analytics"])
