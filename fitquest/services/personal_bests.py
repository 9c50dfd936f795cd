"""Personal-best tracking: keep the best value per metric for each (user, exercise)."""

from __future__ import annotations

import logging
import uuid

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from fitquest.core.enums import PersonalBestMetric
from fitquest.db.base import utcnow
from fitquest.models import PersonalBest, WorkoutExercise

logger = logging.getLogger(__name__)

FIELD_BY_METRIC = {
    PersonalBestMetric.WEIGHT: "best_weight",
    PersonalBestMetric.REPS: "best_reps",
    PersonalBestMetric.DISTANCE: "best_distance_km",
    PersonalBestMetric.DURATION: "best_duration_seconds",
}


def candidate_metrics(
    weight: list[float] | None,
    reps: list[int] | None,
    distance_km: float | None,
    duration_seconds: int | None,
) -> dict[PersonalBestMetric, float]:
    """Best value of each metric in one performed exercise. Zero and missing values are no candidate."""
    values = {
        PersonalBestMetric.WEIGHT: max((w for w in weight or [] if w is not None), default=None),
        PersonalBestMetric.REPS: max((r for r in reps or [] if r is not None), default=None),
        PersonalBestMetric.DISTANCE: distance_km,
        PersonalBestMetric.DURATION: duration_seconds,
    }
    return {metric: v for metric, v in values.items() if v is not None and v > 0}


def apply_improvements(pb: PersonalBest, candidates: dict[PersonalBestMetric, float]) -> list[str]:
    """Overwrite each stored field the candidate strictly beats. Returns improved metric names."""
    improved: list[str] = []
    for metric, value in candidates.items():
        field = FIELD_BY_METRIC[metric]
        stored = getattr(pb, field)
        if stored is None or float(value) > float(stored):
            setattr(pb, field, value)
            improved.append(metric.value)
    return improved


async def record_personal_best(
    db: AsyncSession,
    user_id: uuid.UUID,
    workout_exercise: WorkoutExercise,
) -> list[str]:
    """Fold a performed exercise into the user's personal best for that exercise."""
    candidates = candidate_metrics(
        workout_exercise.weight,
        workout_exercise.reps,
        workout_exercise.distance_km,
        workout_exercise.duration_seconds,
    )
    if not candidates:
        return []

    result = await db.execute(
        select(PersonalBest).where(
            PersonalBest.user_id == user_id,
            PersonalBest.exercise_id == workout_exercise.exercise_id,
        )
    )
    pb = result.scalar_one_or_none()
    if pb is None:
        pb = PersonalBest(user_id=user_id, exercise_id=workout_exercise.exercise_id)
        db.add(pb)

    improved = apply_improvements(pb, candidates)
    if improved:
        pb.achieved_at = utcnow()
        logger.info(
            "Personal best for user %s exercise %s improved: %s",
            user_id,
            workout_exercise.exercise_id,
            ", ".join(improved),
        )
    await db.flush()
    return improved
