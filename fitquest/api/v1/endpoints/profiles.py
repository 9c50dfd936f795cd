"""Profile endpoints. Profiles are public; only the owner edits theirs."""

from __future__ import annotations

import uuid

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from fitquest.api.deps import get_current_user
from fitquest.db.session import get_db
from fitquest.models import PersonalBest, Profile, User
from fitquest.schemas.personal_best import PersonalBestRead
from fitquest.schemas.profile import LevelProgress, ProfileRead, ProfileUpdate
from fitquest.services.metrics import level_progress
from fitquest.services.policies import readable, writable

router = APIRouter()


@router.get("/me", response_model=ProfileRead)
async def read_my_profile(
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    result = await db.execute(readable(Profile, user.id).where(Profile.user_id == user.id))
    profile = result.scalar_one_or_none()
    if not profile:
        raise HTTPException(status_code=404, detail="Profile not found")
    return profile


@router.patch("/me", response_model=ProfileRead)
async def update_my_profile(
    payload: ProfileUpdate,
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """Partial update. Points, level and title are not editable here."""
    result = await db.execute(writable(Profile, user.id).where(Profile.user_id == user.id))
    profile = result.scalar_one_or_none()
    if not profile:
        raise HTTPException(status_code=404, detail="Profile not found")
    for k, v in payload.model_dump(exclude_unset=True).items():
        setattr(profile, k, v)
    await db.flush()
    await db.refresh(profile)
    return profile


@router.get("/me/progress", response_model=LevelProgress)
async def read_my_level_progress(
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """XP bar: points earned inside the current level and points left to the next."""
    result = await db.execute(readable(Profile, user.id).where(Profile.user_id == user.id))
    profile = result.scalar_one_or_none()
    if not profile:
        raise HTTPException(status_code=404, detail="Profile not found")
    return level_progress(profile.total_points)


@router.get("/{user_id}", response_model=ProfileRead)
async def read_profile(
    user_id: uuid.UUID,
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    result = await db.execute(readable(Profile, user.id).where(Profile.user_id == user_id))
    profile = result.scalar_one_or_none()
    if not profile:
        raise HTTPException(status_code=404, detail="Profile not found")
    return profile


@router.get("/{user_id}/personal-bests", response_model=list[PersonalBestRead])
async def read_profile_personal_bests(
    user_id: uuid.UUID,
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """Personal bests are public, like the leaderboard."""
    result = await db.execute(
        readable(PersonalBest, user.id)
        .where(PersonalBest.user_id == user_id)
        .options(selectinload(PersonalBest.exercise))
        .order_by(PersonalBest.achieved_at.desc())
    )
    return list(result.scalars().all())
