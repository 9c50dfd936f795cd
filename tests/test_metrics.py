"""Tests for derived metrics."""

from datetime import date, datetime, timedelta, timezone

import pytest

from fitquest.services.metrics import (
    average_duration,
    compute_streaks,
    level_for_points,
    level_progress,
    local_date,
    positional_ranks,
    rank_title_for_level,
    start_of_week,
    total_volume,
)


class TestStartOfWeek:
    """Weeks start on Sunday midnight, local time."""

    def test_wednesday_goes_back_to_sunday(self):
        now = datetime(2024, 5, 15, 14, 30, tzinfo=timezone.utc)  # Wednesday
        assert start_of_week(now) == datetime(2024, 5, 12, tzinfo=timezone.utc)

    def test_sunday_is_its_own_week_start(self):
        now = datetime(2024, 5, 12, 9, 0, tzinfo=timezone.utc)
        assert start_of_week(now).date() == date(2024, 5, 12)

    def test_saturday_night_belongs_to_previous_sunday(self):
        now = datetime(2024, 5, 18, 23, 59, tzinfo=timezone.utc)
        assert start_of_week(now).date() == date(2024, 5, 12)

    def test_local_zone_shifts_the_boundary(self):
        # 02:00 UTC Sunday is still Saturday evening in New York
        now = datetime(2024, 5, 12, 2, 0, tzinfo=timezone.utc)
        assert start_of_week(now, "America/New_York").date() == date(2024, 5, 5)

    def test_naive_is_utc(self):
        assert start_of_week(datetime(2024, 5, 15, 12, 0)).date() == date(2024, 5, 12)


class TestLevels:
    """Level and XP progress derive from total points."""

    @pytest.mark.parametrize(
        "points,level",
        [(0, 1), (999, 1), (1000, 2), (1450, 2), (2999, 3), (9999, 10)],
    )
    def test_level_for_points(self, points, level):
        assert level_for_points(points) == level

    def test_progress_inside_level(self):
        progress = level_progress(1450)
        assert progress["level"] == 2
        assert progress["points_in_level"] == 450
        assert progress["points_to_next_level"] == 550
        assert progress["percent"] == pytest.approx(45.0)

    def test_progress_at_exact_boundary(self):
        progress = level_progress(2000)
        assert progress["level"] == 3
        assert progress["points_in_level"] == 0
        assert progress["points_to_next_level"] == 1000

    @pytest.mark.parametrize(
        "level,title",
        [(1, "Beginner"), (2, "Intermediate"), (3, "Intermediate"), (4, "Advanced"), (7, "Elite"), (12, "Legend")],
    )
    def test_rank_titles(self, level, title):
        assert rank_title_for_level(level) == title


class TestStreaks:
    """Consecutive workout days."""

    today = date(2024, 5, 15)

    def test_no_workouts(self):
        assert compute_streaks([], self.today) == (0, 0)

    def test_current_streak_ending_today(self):
        days = [self.today - timedelta(days=i) for i in range(3)]
        assert compute_streaks(days, self.today) == (3, 3)

    def test_current_streak_ending_yesterday_still_counts(self):
        days = [self.today - timedelta(days=i) for i in range(1, 5)]
        assert compute_streaks(days, self.today) == (4, 4)

    def test_broken_streak_keeps_longest(self):
        old_run = [date(2024, 4, 1) + timedelta(days=i) for i in range(5)]
        assert compute_streaks(old_run + [self.today], self.today) == (1, 5)

    def test_stale_streak_is_zero(self):
        days = [self.today - timedelta(days=3), self.today - timedelta(days=4)]
        assert compute_streaks(days, self.today) == (0, 2)

    def test_same_day_counts_once(self):
        assert compute_streaks([self.today, self.today], self.today) == (1, 1)


class TestAggregates:
    def test_average_ignores_missing(self):
        assert average_duration([30, None, 60]) == 45.0

    def test_average_of_nothing_is_zero(self):
        assert average_duration([]) == 0.0
        assert average_duration([None]) == 0.0

    def test_positional_ranks_are_distinct(self):
        assert positional_ranks(["a", "b", "c"]) == [(1, "a"), (2, "b"), (3, "c")]

    def test_total_volume(self):
        assert total_volume([([10, 8], [50.0, 60.0]), (None, [20.0]), ([5], [100])]) == 1480.0

    def test_local_date_crosses_midnight(self):
        moment = datetime(2024, 5, 15, 23, 30, tzinfo=timezone.utc)
        assert local_date(moment, "Asia/Tokyo") == date(2024, 5, 16)
