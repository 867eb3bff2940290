"""Tests for review aggregation."""

import pytest

from collab_matching.models import Review
from collab_matching.scoring.aggregate import (
    average_metric,
    average_overall_rating,
    has_flag,
    metric_averages,
    repeat_hire_rate,
)


class TestAverageOverallRating:
    """Tests for the overall rating mean."""

    def test_mean_of_ratings(self):
        """Test plain arithmetic mean without rounding."""
        reviews = [Review(rating_overall=5), Review(rating_overall=4), Review(rating_overall=4)]
        assert average_overall_rating(reviews) == pytest.approx(13 / 3)

    def test_empty_returns_neutral_default(self):
        """Test that no reviews gives the scale midpoint."""
        assert average_overall_rating([]) == 3

    def test_custom_default(self):
        """Test that the neutral default can be overridden."""
        assert average_overall_rating([], default=2.5) == 2.5


class TestAverageMetric:
    """Tests for per-metric averages."""

    def test_missing_values_are_excluded(self):
        """Test that reviews without the metric don't drag the mean to zero."""
        reviews = [
            Review(rating_overall=5, metrics={"deadlines": 4}),
            Review(rating_overall=1),
            Review(rating_overall=3, metrics={"deadlines": 2, "quality": 5}),
        ]
        assert average_metric(reviews, "deadlines") == pytest.approx(3.0)
        assert average_metric(reviews, "quality") == pytest.approx(5.0)

    def test_no_review_supplies_metric(self):
        """Test neutral default when the metric is absent everywhere."""
        reviews = [Review(rating_overall=5, metrics={"quality": 5})]
        assert average_metric(reviews, "deadlines") == 3

    def test_empty_reviews(self):
        """Test neutral default for an empty review list."""
        assert average_metric([], "deadlines") == 3

    def test_accepts_enum_metric_name(self):
        """Test that ReviewMetricEnum members work as metric names."""
        from collab_matching.models import ReviewMetricEnum

        reviews = [Review(rating_overall=5, metrics={"deadlines": 5})]
        assert average_metric(reviews, ReviewMetricEnum.DEADLINES) == 5


class TestRepeatHireRate:
    """Tests for the would-work-again rate."""

    def test_rate_over_all_reviews(self):
        """Test that unanswered reviews still count in the denominator."""
        reviews = [
            Review(rating_overall=5, would_work_again=True),
            Review(rating_overall=4, would_work_again=False),
            Review(rating_overall=4),
            Review(rating_overall=4, would_work_again=True),
        ]
        assert repeat_hire_rate(reviews) == pytest.approx(0.5)

    def test_undefined_without_reviews(self):
        """Test that the rate is None when there is nothing to measure."""
        assert repeat_hire_rate([]) is None


class TestHasFlag:
    """Tests for flag detection."""

    def test_single_report_is_enough(self):
        """Test logical OR across reviews."""
        reviews = [
            Review(rating_overall=5),
            Review(rating_overall=5),
            Review(rating_overall=1, flags=frozenset({"toxic"})),
        ]
        assert has_flag(reviews, "toxic") is True
        assert has_flag(reviews, "abandoned") is False

    def test_no_reviews_no_flag(self):
        """Test that an empty list never reports a flag."""
        assert has_flag([], "toxic") is False


class TestMetricAverages:
    """Tests for the all-metrics average map."""

    def test_only_supplied_metrics_in_enum_order(self):
        """Test keys appear in metric order and absent metrics are omitted."""
        reviews = [
            Review(rating_overall=5, metrics={"teamwork": 4, "deadlines": 5}),
            Review(rating_overall=5, metrics={"teamwork": 5}),
        ]
        result = metric_averages(reviews)
        assert list(result) == ["deadlines", "teamwork"]
        assert result["teamwork"] == pytest.approx(4.5)

    def test_empty(self):
        """Test that no reviews gives no averages."""
        assert metric_averages([]) == {}
