"""PersonalBest model: best value per metric for a (user, exercise) pair."""

from __future__ import annotations

import uuid
from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, Integer, Numeric, UniqueConstraint, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from fitquest.db.base import Base, utcnow


class PersonalBest(Base):
    """Each best_* column moves independently and only ever upwards."""

    __tablename__ = "personal_bests"
    __table_args__ = (UniqueConstraint("user_id", "exercise_id", name="uq_personal_bests_user_exercise"),)

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    user_id: Mapped[uuid.UUID] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    exercise_id: Mapped[uuid.UUID] = mapped_column(
        ForeignKey("exercises.id", ondelete="CASCADE"), nullable=False
    )
    best_weight: Mapped[float | None] = mapped_column(Numeric(6, 2, asdecimal=False), nullable=True)
    best_reps: Mapped[int | None] = mapped_column(Integer, nullable=True)
    best_distance_km: Mapped[float | None] = mapped_column(Numeric(6, 3, asdecimal=False), nullable=True)
    best_duration_seconds: Mapped[int | None] = mapped_column(Integer, nullable=True)
    achieved_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow, nullable=False)

    exercise: Mapped["Exercise"] = relationship("Exercise")
