"""Exercise model: global reference catalogue, read-only for users."""

from __future__ import annotations

import uuid
from datetime import datetime

from sqlalchemy import DateTime, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from fitquest.db.base import Base, StringArray, utcnow


class Exercise(Base):
    """Exercise definition (seeded; users reference it, never edit it)."""

    __tablename__ = "exercises"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    name: Mapped[str] = mapped_column(String(255), nullable=False, unique=True, index=True)
    category: Mapped[str] = mapped_column(String(20), nullable=False, index=True)  # strength, cardio, flexibility
    muscle_groups: Mapped[list[str] | None] = mapped_column(StringArray, nullable=True)
    equipment: Mapped[str | None] = mapped_column(String(100), nullable=True)
    video_url: Mapped[str | None] = mapped_column(Text, nullable=True)
    instructions: Mapped[str | None] = mapped_column(Text, nullable=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow, nullable=False)
