"""Tests for storage row mapping."""

import pytest

from collab_matching.models import MatchScore, Penalties, ScoreBreakdown
from collab_matching.scoring.weights import ALGORITHM_VERSION
from collab_matching.utils.review_mapper import (
    ReviewRowError,
    candidate_from_row,
    group_reviews_by_reviewee,
    match_score_to_row,
    parse_flags,
    parse_metrics,
    review_from_row,
)


class TestParseMetrics:
    """Tests for metric parsing."""

    def test_drops_nulls_and_non_numbers(self):
        """Test that only numeric values survive."""
        result = parse_metrics({"deadlines": 4, "quality": None, "teamwork": "5", "communication": True})
        assert result == {"deadlines": 4.0}

    def test_camel_case_alias(self):
        """Test problemSolving maps to problem_solving."""
        assert parse_metrics({"problemSolving": 3}) == {"problem_solving": 3.0}

    def test_null_metrics(self):
        """Test that a null metrics column gives no metrics."""
        assert parse_metrics(None) == {}


class TestParseFlags:
    """Tests for flag parsing."""

    def test_dict_keeps_true_only(self):
        """Test that false flags are not reported."""
        assert parse_flags({"toxic": True, "abandoned": False, "broken_rules": None}) == frozenset({"toxic"})

    def test_list_of_names(self):
        """Test list form with the camelCase alias."""
        assert parse_flags(["abandoned", "brokenRules"]) == frozenset({"abandoned", "broken_rules"})

    def test_null_flags(self):
        """Test that null flags means nothing reported."""
        assert parse_flags(None) == frozenset()


class TestReviewFromRow:
    """Tests for review_from_row."""

    def test_full_row(self):
        """Test mapping every stored column."""
        row = {
            "reviewer_id": "r1",
            "reviewee_id": "u1",
            "rating_overall": 4,
            "metrics": {"deadlines": 5},
            "would_work_again": True,
            "recommend": None,
            "comment": "Great to work with",
            "flags": {"toxic": False},
        }
        review = review_from_row(row)

        assert review.rating_overall == 4.0
        assert review.metrics == {"deadlines": 5.0}
        assert review.would_work_again is True
        assert review.recommend is None
        assert review.flags == frozenset()
        assert review.reviewee_id == "u1"
        assert review.comment == "Great to work with"

    def test_minimal_row(self):
        """Test that only rating_overall is required."""
        review = review_from_row({"rating_overall": 3})
        assert review.metrics == {}
        assert review.would_work_again is None
        assert review.comment is None

    @pytest.mark.parametrize("rating", [None, "5", True])
    def test_invalid_rating_raises(self, rating):
        """Test that rows without a numeric rating are rejected."""
        with pytest.raises(ReviewRowError):
            review_from_row({"rating_overall": rating})

    def test_error_is_value_error(self):
        """Test ReviewRowError can be caught as ValueError."""
        with pytest.raises(ValueError):
            review_from_row({})


class TestCandidateFromRow:
    """Tests for candidate_from_row."""

    def test_roles_list_keeps_order_and_duplicates(self):
        """Test that roles are not deduplicated."""
        candidate = candidate_from_row({"id": "u1", "roles": ["Artist", "Writer", "Artist"]})
        assert candidate.roles == ("Artist", "Writer", "Artist")

    def test_joined_user_roles(self):
        """Test the user_roles join shape."""
        candidate = candidate_from_row({"id": 7, "user_roles": [{"role": "Programmer"}, {"role": None}]})
        assert candidate.id == "7"
        assert candidate.roles == ("Programmer",)

    def test_no_roles(self):
        """Test that a null roles column gives an empty tuple."""
        assert candidate_from_row({"id": "u1", "roles": None}).roles == ()


class TestGroupReviewsByReviewee:
    """Tests for group_reviews_by_reviewee."""

    def test_groups_and_skips_unattributed(self):
        """Test grouping by reviewee and skipping rows without one."""
        rows = [
            {"reviewee_id": "u1", "rating_overall": 5},
            {"reviewee_id": "u2", "rating_overall": 2},
            {"reviewee_id": "u1", "rating_overall": 3},
            {"rating_overall": 1},
        ]
        grouped = group_reviews_by_reviewee(rows)

        assert set(grouped) == {"u1", "u2"}
        assert [r.rating_overall for r in grouped["u1"]] == [5.0, 3.0]


class TestMatchScoreToRow:
    """Tests for match_score_to_row."""

    def test_flattens_and_rounds(self):
        """Test the flat row layout."""
        match = MatchScore(
            total=12.3456789,
            breakdown=ScoreBreakdown(skill_match=20, reputation=18, reliability=16, compatibility=10 / 3),
            penalties=Penalties(toxic_flag=True),
            average_rating=3,
        )
        row = match_score_to_row("u1", match, rank=2)

        assert row["candidate_id"] == "u1"
        assert row["match_score"] == 12.345679
        assert row["compatibility_score"] == 3.333333
        assert row["toxic_flag"] is True
        assert row["abandoned_flag"] is False
        assert row["rank"] == 2
        assert row["algorithm_version"] == ALGORITHM_VERSION
