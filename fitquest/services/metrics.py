"""Derived metrics: pure reductions over rows already fetched from the database.

Nothing here touches the session, so dashboards, the leaderboard and the
achievement evaluator all share one definition of each number.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from datetime import date, datetime, time, timedelta, timezone
from typing import Any, TypeVar
from zoneinfo import ZoneInfo

from fitquest.core.constants import POINTS_PER_LEVEL, RANK_TITLES

T = TypeVar("T")


def start_of_week(now: datetime, tz: str = "UTC") -> datetime:
    """Local Sunday 00:00 of the week containing `now`, as an aware datetime.

    Naive `now` is taken to be UTC.
    """
    zone = ZoneInfo(tz)
    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    local = now.astimezone(zone)
    # Monday=0 ... Sunday=6; days since the last Sunday
    days_back = (local.weekday() + 1) % 7
    sunday = local.date() - timedelta(days=days_back)
    return datetime.combine(sunday, time.min, tzinfo=zone)


def local_date(moment: datetime, tz: str = "UTC") -> date:
    """Calendar date of `moment` in zone `tz` (naive values are UTC)."""
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    return moment.astimezone(ZoneInfo(tz)).date()


def average_duration(minutes: Iterable[int | None]) -> float:
    """Arithmetic mean of the non-null durations; 0.0 when there are none."""
    values = [m for m in minutes if m is not None]
    if not values:
        return 0.0
    return sum(values) / len(values)


def level_for_points(total_points: int) -> int:
    """Level 1 covers 0..999 points, level 2 covers 1000..1999, and so on."""
    return max(total_points, 0) // POINTS_PER_LEVEL + 1


def rank_title_for_level(level: int) -> str:
    title = RANK_TITLES[0][1]
    for min_level, name in RANK_TITLES:
        if level >= min_level:
            title = name
    return title


def level_progress(total_points: int) -> dict[str, Any]:
    """Progress inside the current level.

    1450 points -> level 2, 450 earned in level, 550 to the next.
    """
    points = max(total_points or 0, 0)
    in_level = points % POINTS_PER_LEVEL
    level = level_for_points(points)
    return {
        "level": level,
        "rank_title": rank_title_for_level(level),
        "total_points": points,
        "points_in_level": in_level,
        "points_to_next_level": POINTS_PER_LEVEL - in_level,
        "percent": min(in_level / (POINTS_PER_LEVEL / 100), 100.0),
    }


def compute_streaks(workout_dates: Iterable[date], today: date) -> tuple[int, int]:
    """Return (current_streak, longest_streak) in consecutive calendar days.

    The current streak only counts if the most recent workout was today or
    yesterday. Several workouts on one day count once.
    """
    days = sorted(set(workout_dates), reverse=True)
    if not days:
        return 0, 0

    current = 0
    if days[0] >= today - timedelta(days=1):
        current = 1
        for i in range(1, len(days)):
            if days[i] == days[i - 1] - timedelta(days=1):
                current += 1
            else:
                break

    longest = 1
    run = 1
    for i in range(1, len(days)):
        if days[i] == days[i - 1] - timedelta(days=1):
            run += 1
            longest = max(longest, run)
        else:
            run = 1
    return current, longest


def positional_ranks(rows: Sequence[T]) -> list[tuple[int, T]]:
    """1-based positions in the order given (no dense ranking: ties get distinct ranks)."""
    return [(index + 1, row) for index, row in enumerate(rows)]


def total_volume(sets: Iterable[tuple[Sequence[int] | None, Sequence[float] | None]]) -> float:
    """Sum of weight x reps across (reps[], weight[]) pairs; unmatched entries are ignored."""
    volume = 0.0
    for reps, weights in sets:
        if not reps or not weights:
            continue
        for r, w in zip(reps, weights):
            if r is not None and w is not None:
                volume += float(r) * float(w)
    return volume
