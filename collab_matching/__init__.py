"""Collaborator matching: rank candidate users against a project's required skills.

The engine is a pure, synchronous function of caller-supplied data:

    from collab_matching import CandidateProfile, Review, rank, score

    match = score(CandidateProfile(id="u1", roles=("Artist",)), reviews, ["Artist"])
    ranked = rank(candidates, reviews_by_candidate_id, required_skills)
"""

from collab_matching.models import (
    CandidateProfile,
    MatchScore,
    Penalties,
    RankedCandidate,
    Review,
    ReviewFlagEnum,
    ReviewMetricEnum,
    ScoreBreakdown,
)
from collab_matching.scoring import (
    DEFAULT_POLICY,
    ReputationSummary,
    ScoringPolicy,
    rank,
    score,
    summarize_reputation,
)

__all__ = [
    "CandidateProfile",
    "Review",
    "ReviewMetricEnum",
    "ReviewFlagEnum",
    "MatchScore",
    "ScoreBreakdown",
    "Penalties",
    "RankedCandidate",
    "ScoringPolicy",
    "DEFAULT_POLICY",
    "score",
    "rank",
    "ReputationSummary",
    "summarize_reputation",
]
