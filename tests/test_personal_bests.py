"""Tests for personal-best candidate extraction and improvement."""

from fitquest.core.enums import PersonalBestMetric
from fitquest.models import PersonalBest
from fitquest.services.personal_bests import apply_improvements, candidate_metrics


class TestCandidateMetrics:
    def test_best_of_each_array(self):
        c = candidate_metrics([60.0, 80.0, 70.0], [12, 8, 10], None, None)
        assert c == {PersonalBestMetric.WEIGHT: 80.0, PersonalBestMetric.REPS: 12}

    def test_zero_and_missing_values_are_ignored(self):
        assert candidate_metrics([0.0], [0], 0, None) == {}
        assert candidate_metrics(None, None, None, None) == {}

    def test_cardio_metrics(self):
        c = candidate_metrics(None, None, 5.2, 1800)
        assert c == {PersonalBestMetric.DISTANCE: 5.2, PersonalBestMetric.DURATION: 1800}


class TestApplyImprovements:
    def test_first_record_sets_every_metric(self):
        pb = PersonalBest()
        improved = apply_improvements(pb, {PersonalBestMetric.WEIGHT: 100.0, PersonalBestMetric.REPS: 5})
        assert sorted(improved) == ["reps", "weight"]
        assert pb.best_weight == 100.0
        assert pb.best_reps == 5

    def test_lower_values_never_replace(self):
        pb = PersonalBest(best_weight=100.0, best_reps=5)
        improved = apply_improvements(pb, {PersonalBestMetric.WEIGHT: 90.0, PersonalBestMetric.REPS: 8})
        assert improved == ["reps"]
        assert pb.best_weight == 100.0
        assert pb.best_reps == 8

    def test_equal_value_is_not_an_improvement(self):
        pb = PersonalBest(best_duration_seconds=600)
        assert apply_improvements(pb, {PersonalBestMetric.DURATION: 600}) == []

    def test_longer_duration_is_better(self):
        pb = PersonalBest(best_duration_seconds=600)
        assert apply_improvements(pb, {PersonalBestMetric.DURATION: 900}) == ["duration"]
        assert pb.best_duration_seconds == 900
