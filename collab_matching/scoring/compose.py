"""Score composition: one MatchScore per (candidate, reviews, required skills).

Composite (0-100) = skill match + reputation + reliability + compatibility,
minus flat penalties for toxic / abandoned flags, clamped once at the end.
Inputs are not validated; out-of-range ratings flow through arithmetically.
"""

import logging
from collections.abc import Sequence

from collab_matching.models.candidates import CandidateProfile
from collab_matching.models.enums import ReviewFlagEnum
from collab_matching.models.matches import MatchScore, Penalties, ScoreBreakdown
from collab_matching.models.reviews import Review
from collab_matching.scoring.aggregate import (
    average_metric,
    average_overall_rating,
    has_flag,
    repeat_hire_rate,
)
from collab_matching.scoring.weights import DEFAULT_POLICY, ScoringPolicy

logger = logging.getLogger(__name__)


def skill_match_score(
    roles: Sequence[str],
    required_skills: Sequence[str],
    policy: ScoringPolicy = DEFAULT_POLICY,
) -> float:
    """Weight × share of required skills the candidate has (exact, case-insensitive).

    Neutral half credit when the project lists no required skills.
    """
    if not required_skills:
        return policy.neutral_skill_match
    owned = {role.casefold() for role in roles}
    matched = sum(1 for skill in required_skills if skill.casefold() in owned)
    return policy.skill_match_weight * matched / len(required_skills)


def score(
    candidate: CandidateProfile,
    reviews: Sequence[Review],
    required_skills: Sequence[str],
    policy: ScoringPolicy = DEFAULT_POLICY,
) -> MatchScore:
    """Compute the composite match score for a single candidate.

    Args:
        candidate: Profile whose roles are compared to the requirements.
        reviews: All of the candidate's reviews (may be empty).
        required_skills: Skill labels the project needs.
        policy: Weights, penalties and neutral defaults.

    Returns:
        MatchScore with the clamped total, the pre-penalty breakdown, the
        penalty flags and the raw average rating.
    """
    avg_rating = average_overall_rating(reviews, default=policy.neutral_rating)
    reliability_avg = average_metric(
        reviews, policy.reliability_metric, default=policy.neutral_rating
    )
    hire_rate = repeat_hire_rate(reviews)

    breakdown = ScoreBreakdown(
        skill_match=skill_match_score(candidate.roles, required_skills, policy),
        reputation=policy.reputation_weight * avg_rating / policy.rating_scale_max,
        reliability=policy.reliability_weight * reliability_avg / policy.rating_scale_max,
        compatibility=(
            policy.compatibility_weight * hire_rate
            if hire_rate is not None
            else policy.neutral_compatibility
        ),
    )
    penalties = Penalties(
        toxic_flag=has_flag(reviews, ReviewFlagEnum.TOXIC.value),
        abandoned_flag=has_flag(reviews, ReviewFlagEnum.ABANDONED.value),
    )

    total = breakdown.subtotal
    if penalties.toxic_flag:
        total -= policy.toxic_penalty
    if penalties.abandoned_flag:
        total -= policy.abandoned_penalty
    if penalties.toxic_flag or penalties.abandoned_flag:
        logger.debug(
            "Penalised candidate %s (toxic=%s, abandoned=%s): %.2f -> %.2f",
            candidate.id,
            penalties.toxic_flag,
            penalties.abandoned_flag,
            breakdown.subtotal,
            total,
        )

    return MatchScore(
        total=policy.clamp(total),
        breakdown=breakdown,
        penalties=penalties,
        average_rating=avg_rating,
    )
