from collab_matching.utils.review_mapper import (
    ReviewRowError,
    candidate_from_row,
    group_reviews_by_reviewee,
    match_score_to_row,
    parse_flags,
    parse_metrics,
    review_from_row,
)

__all__ = [
    "ReviewRowError",
    "candidate_from_row",
    "group_reviews_by_reviewee",
    "match_score_to_row",
    "parse_flags",
    "parse_metrics",
    "review_from_row",
]
