"""Body measurement endpoints: the caller's own time series."""

from __future__ import annotations

import logging
import uuid
from datetime import datetime
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

from fitquest.api.deps import get_current_user
from fitquest.db.session import get_db
from fitquest.models import BodyMeasurement, User
from fitquest.schemas.body import BodyMeasurementCreate, BodyMeasurementRead, BodyMeasurementUpdate
from fitquest.services.activity import as_utc
from fitquest.services.policies import readable, writable

logger = logging.getLogger(__name__)
router = APIRouter()


async def _load_measurement(db: AsyncSession, measurement_id: uuid.UUID, user_id: uuid.UUID) -> BodyMeasurement:
    result = await db.execute(writable(BodyMeasurement, user_id).where(BodyMeasurement.id == measurement_id))
    m = result.scalar_one_or_none()
    if not m:
        raise HTTPException(status_code=404, detail="Measurement not found")
    return m


@router.get("", response_model=list[BodyMeasurementRead])
async def list_measurements(
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
    from_date: datetime | None = None,
    to_date: datetime | None = None,
    limit: int = 365,
):
    """Measurements in chronological order (oldest first, ready for charting)."""
    stmt = readable(BodyMeasurement, user.id)
    if from_date:
        stmt = stmt.where(BodyMeasurement.measured_at >= as_utc(from_date))
    if to_date:
        stmt = stmt.where(BodyMeasurement.measured_at <= as_utc(to_date))
    result = await db.execute(stmt.order_by(BodyMeasurement.measured_at.asc()).limit(limit))
    return list(result.scalars().all())


@router.get("/latest", response_model=Optional[BodyMeasurementRead])
async def latest_measurement(
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """Most recent measurement, or null when none was ever recorded."""
    result = await db.execute(
        readable(BodyMeasurement, user.id).order_by(BodyMeasurement.measured_at.desc()).limit(1)
    )
    return result.scalar_one_or_none()


@router.post("", response_model=BodyMeasurementRead, status_code=201)
async def create_measurement(
    payload: BodyMeasurementCreate,
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    data = payload.model_dump(exclude_none=True)
    if "measured_at" in data:
        data["measured_at"] = as_utc(data["measured_at"])
    m = BodyMeasurement(user_id=user.id, **data)
    db.add(m)
    await db.flush()
    await db.refresh(m)
    logger.debug("Recorded body measurement %s for user %s", m.id, user.id)
    return m


@router.get("/{measurement_id}", response_model=BodyMeasurementRead)
async def get_measurement(
    measurement_id: uuid.UUID,
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    return await _load_measurement(db, measurement_id, user.id)


@router.patch("/{measurement_id}", response_model=BodyMeasurementRead)
async def update_measurement(
    measurement_id: uuid.UUID,
    payload: BodyMeasurementUpdate,
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    m = await _load_measurement(db, measurement_id, user.id)
    data = payload.model_dump(exclude_unset=True)
    if data.get("measured_at") is not None:
        data["measured_at"] = as_utc(data["measured_at"])
    elif "measured_at" in data:
        del data["measured_at"]
    for k, v in data.items():
        setattr(m, k, v)
    await db.flush()
    await db.refresh(m)
    return m


@router.delete("/{measurement_id}", status_code=204)
async def delete_measurement(
    measurement_id: uuid.UUID,
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    m = await _load_measurement(db, measurement_id, user.id)
    await db.delete(m)
    return None
