"""Mapping between storage rows and engine types.

Review and profile rows arrive as plain dicts in the storage layout
(snake_case keys, ``metrics`` / ``flags`` possibly null). These helpers turn
them into immutable engine types and turn match scores back into flat rows.
"""

import logging
from collections.abc import Iterable
from numbers import Real
from typing import Any

from collab_matching.models.candidates import CandidateProfile
from collab_matching.models.enums import ReviewFlagEnum, ReviewMetricEnum
from collab_matching.models.matches import MatchScore
from collab_matching.models.reviews import Review
from collab_matching.scoring.weights import ALGORITHM_VERSION

logger = logging.getLogger(__name__)

# Older clients wrote camelCase metric keys
METRIC_KEY_ALIASES: dict[str, str] = {
    "problemSolving": ReviewMetricEnum.PROBLEM_SOLVING.value,
}
FLAG_KEY_ALIASES: dict[str, str] = {
    "brokenRules": ReviewFlagEnum.BROKEN_RULES.value,
}


class ReviewRowError(ValueError):
    """A review row is structurally unusable (no numeric rating_overall)."""


def _is_number(value: Any) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool)


def parse_metrics(metrics_field: Any) -> dict[str, float]:
    """Keep numeric metric values, dropping nulls and anything non-numeric.

    Examples:
        >>> parse_metrics({"deadlines": 4, "quality": None, "problemSolving": 5})
        {'deadlines': 4.0, 'problem_solving': 5.0}

        >>> parse_metrics(None)
        {}
    """
    if not isinstance(metrics_field, dict):
        return {}
    parsed: dict[str, float] = {}
    for key, value in metrics_field.items():
        if not _is_number(value):
            continue
        parsed[METRIC_KEY_ALIASES.get(key, key)] = float(value)
    return parsed


def parse_flags(flags_field: Any) -> frozenset[str]:
    """Return the names of reported flags.

    Supports the stored dict form (only ``True`` entries count) and a plain
    list of flag names.

    Examples:
        >>> sorted(parse_flags({"toxic": True, "abandoned": False}))
        ['toxic']

        >>> sorted(parse_flags(["abandoned", "brokenRules"]))
        ['abandoned', 'broken_rules']
    """
    if isinstance(flags_field, dict):
        names = [key for key, value in flags_field.items() if value is True]
    elif isinstance(flags_field, list | tuple | set | frozenset):
        names = [str(name) for name in flags_field]
    else:
        return frozenset()
    return frozenset(FLAG_KEY_ALIASES.get(name, name) for name in names)


def _optional_bool(value: Any) -> bool | None:
    return value if isinstance(value, bool) else None


def _optional_str(value: Any) -> str | None:
    return str(value) if value is not None else None


def review_from_row(row: dict[str, Any]) -> Review:
    """Build a Review from a stored review row.

    Args:
        row: Dict with ``rating_overall`` and optional ``metrics``,
            ``would_work_again``, ``recommend``, ``flags``, ``reviewer_id``,
            ``reviewee_id`` and ``comment``.

    Returns:
        The immutable Review.

    Raises:
        ReviewRowError: If ``rating_overall`` is missing or not a number.
    """
    rating = row.get("rating_overall")
    if not _is_number(rating):
        raise ReviewRowError(f"Review row has no numeric rating_overall: {rating!r}")

    return Review(
        rating_overall=float(rating),
        metrics=parse_metrics(row.get("metrics")),
        would_work_again=_optional_bool(row.get("would_work_again")),
        recommend=_optional_bool(row.get("recommend")),
        flags=parse_flags(row.get("flags")),
        reviewer_id=_optional_str(row.get("reviewer_id")),
        reviewee_id=_optional_str(row.get("reviewee_id")),
        comment=row.get("comment") or None,
    )


def candidate_from_row(row: dict[str, Any]) -> CandidateProfile:
    """Build a CandidateProfile from a profile row.

    ``roles`` may be a list of strings or the joined ``user_roles`` shape
    (a list of ``{"role": ...}`` dicts); order and duplicates are kept.

    Example:
        >>> candidate_from_row({"id": "u1", "user_roles": [{"role": "Artist"}]}).roles
        ('Artist',)
    """
    raw_roles = row.get("roles")
    if raw_roles is None:
        raw_roles = row.get("user_roles")
    roles: list[str] = []
    for item in raw_roles or []:
        if isinstance(item, dict):
            role = item.get("role")
            if role:
                roles.append(str(role))
        elif item:
            roles.append(str(item))
    return CandidateProfile(id=str(row["id"]), roles=tuple(roles))


def group_reviews_by_reviewee(rows: Iterable[dict[str, Any]]) -> dict[str, list[Review]]:
    """Map reviewee_id -> reviews, preserving row order within each candidate.

    Rows without a reviewee_id cannot be attributed and are skipped.
    """
    grouped: dict[str, list[Review]] = {}
    skipped = 0
    for row in rows:
        review = review_from_row(row)
        if review.reviewee_id is None:
            skipped += 1
            continue
        grouped.setdefault(review.reviewee_id, []).append(review)
    if skipped:
        logger.warning("Skipped %d review rows with no reviewee_id", skipped)
    return grouped


def match_score_to_row(
    candidate_id: str,
    match_score: MatchScore,
    rank: int | None = None,
) -> dict[str, Any]:
    """Flatten a MatchScore into a row dict (scores rounded to 6 places)."""
    breakdown = match_score.breakdown
    return {
        "candidate_id": candidate_id,
        "match_score": round(match_score.total, 6),
        "skill_match_score": round(breakdown.skill_match, 6),
        "reputation_score": round(breakdown.reputation, 6),
        "reliability_score": round(breakdown.reliability, 6),
        "compatibility_score": round(breakdown.compatibility, 6),
        "toxic_flag": match_score.penalties.toxic_flag,
        "abandoned_flag": match_score.penalties.abandoned_flag,
        "average_rating": round(match_score.average_rating, 6),
        "rank": rank,
        "algorithm_version": ALGORITHM_VERSION,
    }
