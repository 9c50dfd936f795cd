"""Profile model: public face of an account, carries points and level."""

from __future__ import annotations

import uuid
from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, Integer, Numeric, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from fitquest.db.base import Base, utcnow
from fitquest.services.metrics import level_for_points, rank_title_for_level


class Profile(Base):
    """One-to-one with a user account; created when the account is created.

    fitness_level and rank_title are derived from total_points and are only
    ever written together with it (see award_points).
    """

    __tablename__ = "profiles"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    user_id: Mapped[uuid.UUID] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"), nullable=False, unique=True
    )
    username: Mapped[str] = mapped_column(String(30), nullable=False, unique=True, index=True)
    full_name: Mapped[str | None] = mapped_column(String(100), nullable=True)
    age: Mapped[int | None] = mapped_column(Integer, nullable=True)
    weight: Mapped[float | None] = mapped_column(Numeric(5, 2, asdecimal=False), nullable=True)
    fitness_goals: Mapped[str | None] = mapped_column(Text, nullable=True)
    profile_picture_url: Mapped[str | None] = mapped_column(Text, nullable=True)
    fitness_level: Mapped[int] = mapped_column(Integer, default=1, nullable=False)
    total_points: Mapped[int] = mapped_column(Integer, default=0, nullable=False, index=True)
    rank_title: Mapped[str] = mapped_column(String(50), default="Beginner", nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow, nullable=False)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utcnow, onupdate=utcnow, nullable=False
    )

    user: Mapped["User"] = relationship("User", back_populates="profile")

    def award_points(self, points: int) -> None:
        """Add points and move level + title in the same mutation."""
        self.total_points = (self.total_points or 0) + points
        self.fitness_level = level_for_points(self.total_points)
        self.rank_title = rank_title_for_level(self.fitness_level)
