"""Data types for the collaborator matching engine."""

from collab_matching.models.candidates import CandidateProfile
from collab_matching.models.enums import (
    METRIC_BADGE_LABELS,
    ReviewFlagEnum,
    ReviewMetricEnum,
)
from collab_matching.models.matches import (
    MatchScore,
    Penalties,
    RankedCandidate,
    ScoreBreakdown,
)
from collab_matching.models.reviews import Review

__all__ = [
    # Enums
    "ReviewMetricEnum",
    "ReviewFlagEnum",
    "METRIC_BADGE_LABELS",
    # Inputs
    "Review",
    "CandidateProfile",
    # Results
    "ScoreBreakdown",
    "Penalties",
    "MatchScore",
    "RankedCandidate",
]
