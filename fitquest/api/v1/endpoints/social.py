"""Social feed: follows, shared workouts and likes."""

from __future__ import annotations

import uuid

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from fitquest.api.deps import get_current_user
from fitquest.db.session import get_db
from fitquest.models import Profile, User, UserFollow, Workout, WorkoutShare
from fitquest.schemas.social import (
    FeedItem,
    FollowRead,
    LikeState,
    WorkoutShareCreate,
    WorkoutShareRead,
)
from fitquest.services import likes
from fitquest.services.policies import can_read, can_write, readable, writable

router = APIRouter()


async def _ensure_profile(db: AsyncSession, user_id: uuid.UUID, viewer_id: uuid.UUID) -> None:
    result = await db.execute(select(Profile.id).where(can_read(Profile, viewer_id), Profile.user_id == user_id))
    if result.scalar_one_or_none() is None:
        raise HTTPException(status_code=404, detail="User not found")


async def _ensure_share(db: AsyncSession, share_id: uuid.UUID, viewer_id: uuid.UUID) -> None:
    result = await db.execute(
        select(WorkoutShare.id).where(can_read(WorkoutShare, viewer_id), WorkoutShare.id == share_id)
    )
    if result.scalar_one_or_none() is None:
        raise HTTPException(status_code=404, detail="Share not found")


# ── Follows ──────────────────────────────────────────────────────────────

@router.post("/follows/{user_id}", response_model=FollowRead, status_code=201)
async def follow_user(
    user_id: uuid.UUID,
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """Follow another user. Following twice is a conflict."""
    if user_id == user.id:
        raise HTTPException(status_code=400, detail="You cannot follow yourself")
    await _ensure_profile(db, user_id, user.id)
    follow = UserFollow(follower_id=user.id, following_id=user_id)
    db.add(follow)
    await db.flush()
    await db.refresh(follow)
    return follow


@router.delete("/follows/{user_id}", status_code=204)
async def unfollow_user(
    user_id: uuid.UUID,
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    result = await db.execute(
        delete(UserFollow)
        .where(can_write(UserFollow, user.id), UserFollow.following_id == user_id)
        .execution_options(synchronize_session=False)
    )
    if result.rowcount == 0:
        raise HTTPException(status_code=404, detail="Follow not found")
    return None


@router.get("/followers", response_model=list[FollowRead])
async def list_followers(
    user_id: uuid.UUID | None = None,
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """Who follows `user_id` (default: the caller)."""
    target = user_id or user.id
    result = await db.execute(
        readable(UserFollow, user.id)
        .where(UserFollow.following_id == target)
        .order_by(UserFollow.created_at.desc())
    )
    return list(result.scalars().all())


@router.get("/following", response_model=list[FollowRead])
async def list_following(
    user_id: uuid.UUID | None = None,
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """Whom `user_id` follows (default: the caller)."""
    target = user_id or user.id
    result = await db.execute(
        readable(UserFollow, user.id)
        .where(UserFollow.follower_id == target)
        .order_by(UserFollow.created_at.desc())
    )
    return list(result.scalars().all())


# ── Shares ───────────────────────────────────────────────────────────────

@router.post("/shares", response_model=WorkoutShareRead, status_code=201)
async def share_workout(
    payload: WorkoutShareCreate,
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """Publish one of the caller's own workouts to the feed."""
    result = await db.execute(writable(Workout, user.id).where(Workout.id == payload.workout_id))
    if not result.scalar_one_or_none():
        raise HTTPException(status_code=404, detail="Workout not found")
    share = WorkoutShare(user_id=user.id, workout_id=payload.workout_id, caption=payload.caption)
    db.add(share)
    await db.flush()
    await db.refresh(share)
    return share


@router.delete("/shares/{share_id}", status_code=204)
async def delete_share(
    share_id: uuid.UUID,
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    result = await db.execute(writable(WorkoutShare, user.id).where(WorkoutShare.id == share_id))
    share = result.scalar_one_or_none()
    if not share:
        raise HTTPException(status_code=404, detail="Share not found")
    await db.delete(share)
    return None


@router.get("/feed", response_model=list[FeedItem])
async def feed(
    following_only: bool = False,
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
    skip: int = 0,
    limit: int = 50,
):
    """Shared workouts, newest first, with author and workout summary."""
    stmt = (
        select(
            WorkoutShare,
            Profile.username,
            Profile.profile_picture_url,
            Workout.name,
            Workout.duration_minutes,
        )
        .join(Workout, Workout.id == WorkoutShare.workout_id)
        .join(Profile, Profile.user_id == WorkoutShare.user_id)
        .where(can_read(WorkoutShare, user.id))
    )
    if following_only:
        stmt = stmt.where(
            WorkoutShare.user_id.in_(
                select(UserFollow.following_id).where(UserFollow.follower_id == user.id)
            )
        )
    stmt = stmt.order_by(WorkoutShare.created_at.desc()).offset(skip).limit(limit)
    rows = (await db.execute(stmt)).all()
    mine = await likes.liked_share_ids(db, user.id)
    return [
        FeedItem(
            **WorkoutShareRead.model_validate(share).model_dump(),
            username=username,
            profile_picture_url=picture,
            workout_name=workout_name,
            workout_duration_minutes=duration,
            liked_by_me=share.id in mine,
        )
        for share, username, picture, workout_name, duration in rows
    ]


# ── Likes ────────────────────────────────────────────────────────────────

@router.post("/shares/{share_id}/like", response_model=LikeState, status_code=201)
async def like_share(
    share_id: uuid.UUID,
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """Like a share. Liking a share twice is a conflict (409)."""
    await _ensure_share(db, share_id, user.id)
    count = await likes.like_share(db, share_id, user.id)
    return LikeState(share_id=share_id, liked=True, likes_count=count)


@router.delete("/shares/{share_id}/like", response_model=LikeState)
async def unlike_share(
    share_id: uuid.UUID,
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    await _ensure_share(db, share_id, user.id)
    count = await likes.unlike_share(db, share_id, user.id)
    if count is None:
        raise HTTPException(status_code=404, detail="Like not found")
    return LikeState(share_id=share_id, liked=False, likes_count=count)


@router.get("/likes/mine", response_model=list[uuid.UUID])
async def my_likes(
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """Ids of the shares the caller has liked."""
    return sorted(await likes.liked_share_ids(db, user.id), key=str)
