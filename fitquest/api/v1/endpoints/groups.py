"""Coach groups: coaches manage groups and members; members can see groups they belong to."""

from __future__ import annotations

import uuid

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from fitquest.api.deps import get_current_user
from fitquest.db.session import get_db
from fitquest.models import CoachGroup, GroupMember, Profile, User
from fitquest.schemas.group import (
    CoachGroupCreate,
    CoachGroupRead,
    CoachGroupUpdate,
    GroupMemberCreate,
    GroupMemberRead,
)
from fitquest.services.policies import readable, writable

router = APIRouter()


async def _coached_group(db: AsyncSession, group_id: uuid.UUID, user_id: uuid.UUID) -> CoachGroup:
    result = await db.execute(writable(CoachGroup, user_id).where(CoachGroup.id == group_id))
    group = result.scalar_one_or_none()
    if not group:
        raise HTTPException(status_code=404, detail="Group not found")
    return group


@router.get("", response_model=list[CoachGroupRead])
async def list_groups(
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """Groups the caller coaches or belongs to."""
    result = await db.execute(readable(CoachGroup, user.id).order_by(CoachGroup.created_at.desc()))
    return list(result.scalars().all())


@router.post("", response_model=CoachGroupRead, status_code=201)
async def create_group(
    payload: CoachGroupCreate,
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    group = CoachGroup(coach_id=user.id, **payload.model_dump())
    db.add(group)
    await db.flush()
    await db.refresh(group)
    return group


@router.get("/{group_id}", response_model=CoachGroupRead)
async def get_group(
    group_id: uuid.UUID,
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    result = await db.execute(readable(CoachGroup, user.id).where(CoachGroup.id == group_id))
    group = result.scalar_one_or_none()
    if not group:
        raise HTTPException(status_code=404, detail="Group not found")
    return group


@router.patch("/{group_id}", response_model=CoachGroupRead)
async def update_group(
    group_id: uuid.UUID,
    payload: CoachGroupUpdate,
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    group = await _coached_group(db, group_id, user.id)
    for k, v in payload.model_dump(exclude_unset=True).items():
        setattr(group, k, v)
    await db.flush()
    await db.refresh(group)
    return group


@router.delete("/{group_id}", status_code=204)
async def delete_group(
    group_id: uuid.UUID,
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    group = await _coached_group(db, group_id, user.id)
    await db.delete(group)
    return None


@router.get("/{group_id}/members", response_model=list[GroupMemberRead])
async def list_members(
    group_id: uuid.UUID,
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """The coach sees every member; a member sees only their own membership."""
    group = await db.execute(readable(CoachGroup, user.id).where(CoachGroup.id == group_id))
    if not group.scalar_one_or_none():
        raise HTTPException(status_code=404, detail="Group not found")
    result = await db.execute(
        readable(GroupMember, user.id)
        .where(GroupMember.group_id == group_id)
        .order_by(GroupMember.joined_at)
    )
    return list(result.scalars().all())


@router.post("/{group_id}/members", response_model=GroupMemberRead, status_code=201)
async def add_member(
    group_id: uuid.UUID,
    payload: GroupMemberCreate,
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """Coach adds a user. Adding the same user twice is a conflict."""
    await _coached_group(db, group_id, user.id)
    exists = await db.execute(select(Profile.id).where(Profile.user_id == payload.user_id))
    if exists.scalar_one_or_none() is None:
        raise HTTPException(status_code=404, detail="User not found")
    member = GroupMember(group_id=group_id, user_id=payload.user_id)
    db.add(member)
    await db.flush()
    await db.refresh(member)
    return member


@router.delete("/{group_id}/members/{user_id}", status_code=204)
async def remove_member(
    group_id: uuid.UUID,
    user_id: uuid.UUID,
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """Coach removes a member."""
    result = await db.execute(
        writable(GroupMember, user.id).where(GroupMember.group_id == group_id, GroupMember.user_id == user_id)
    )
    member = result.scalar_one_or_none()
    if not member:
        raise HTTPException(status_code=404, detail="Member not found")
    await db.delete(member)
    return None
