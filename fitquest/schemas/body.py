"""Body measurement schemas."""

from __future__ import annotations

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class BodyMeasurementCreate(BaseModel):
    weight: Optional[float] = Field(None, ge=20, le=500, description="Body weight in kg")
    height: Optional[float] = Field(None, ge=50, le=300, description="Height in cm")
    body_fat_percentage: Optional[float] = Field(None, ge=0, le=100)
    muscle_mass: Optional[float] = Field(None, gt=0, lt=500)
    chest: Optional[float] = Field(None, gt=0, lt=400)
    waist: Optional[float] = Field(None, gt=0, lt=400)
    hips: Optional[float] = Field(None, gt=0, lt=400)
    biceps: Optional[float] = Field(None, gt=0, lt=200)
    thighs: Optional[float] = Field(None, gt=0, lt=200)
    notes: Optional[str] = Field(None, max_length=500)
    measured_at: Optional[datetime] = Field(None, description="Defaults to now")


class BodyMeasurementUpdate(BodyMeasurementCreate):
    pass


class BodyMeasurementRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    user_id: UUID
    weight: Optional[float] = None
    height: Optional[float] = None
    body_fat_percentage: Optional[float] = None
    muscle_mass: Optional[float] = None
    chest: Optional[float] = None
    waist: Optional[float] = None
    hips: Optional[float] = None
    biceps: Optional[float] = None
    thighs: Optional[float] = None
    notes: Optional[str] = None
    measured_at: datetime
    created_at: datetime
