"""Match scoring resource: exposes the engine with a configurable policy.

Every weight, penalty and neutral default is a resource field, so a
deployment can retune the policy from run config or environment variables
without touching the composition logic.
"""

from collections.abc import Mapping, Sequence

from dagster import ConfigurableResource, get_dagster_logger
from pydantic import Field

from collab_matching.models.candidates import CandidateProfile
from collab_matching.models.matches import MatchScore, RankedCandidate
from collab_matching.models.reviews import Review
from collab_matching.scoring import weights
from collab_matching.scoring.compose import score
from collab_matching.scoring.rank import rank
from collab_matching.scoring.reputation import ReputationSummary, summarize_reputation


class MatchScoringResource(ConfigurableResource):
    """Scores and ranks candidates for a project's required skills."""

    skill_match_weight: float = Field(
        default=weights.SKILL_MATCH_WEIGHT,
        description="Maximum points for required-skill coverage",
    )
    reputation_weight: float = Field(
        default=weights.REPUTATION_WEIGHT,
        description="Maximum points for the average overall rating",
    )
    reliability_weight: float = Field(
        default=weights.RELIABILITY_WEIGHT,
        description="Maximum points for the average deadlines metric",
    )
    compatibility_weight: float = Field(
        default=weights.COMPATIBILITY_WEIGHT,
        description="Maximum points for the would-work-again rate",
    )
    toxic_penalty: float = Field(
        default=weights.TOXIC_PENALTY,
        description="Points deducted when any review flags the candidate as toxic",
    )
    abandoned_penalty: float = Field(
        default=weights.ABANDONED_PENALTY,
        description="Points deducted when any review flags the candidate as having abandoned a project",
    )
    neutral_rating: float = Field(
        default=weights.NEUTRAL_RATING,
        description="Rating assumed when no review supplies one (scale midpoint)",
    )
    neutral_skill_match: float = Field(
        default=weights.NEUTRAL_SKILL_MATCH,
        description="Skill points when the project lists no required skills",
    )
    neutral_compatibility: float = Field(
        default=weights.NEUTRAL_COMPATIBILITY,
        description="Compatibility points for a candidate with no reviews",
    )
    badge_threshold: float = Field(
        default=weights.BADGE_THRESHOLD,
        description="Metric average needed to earn a reputation badge",
    )

    def policy(self) -> weights.ScoringPolicy:
        """Build the immutable scoring policy from this resource's config."""
        return weights.ScoringPolicy(
            skill_match_weight=self.skill_match_weight,
            reputation_weight=self.reputation_weight,
            reliability_weight=self.reliability_weight,
            compatibility_weight=self.compatibility_weight,
            toxic_penalty=self.toxic_penalty,
            abandoned_penalty=self.abandoned_penalty,
            neutral_rating=self.neutral_rating,
            neutral_skill_match=self.neutral_skill_match,
            neutral_compatibility=self.neutral_compatibility,
        )

    def score(
        self,
        candidate: CandidateProfile,
        reviews: Sequence[Review],
        required_skills: Sequence[str],
    ) -> MatchScore:
        return score(candidate, reviews, required_skills, self.policy())

    def rank(
        self,
        candidates: Sequence[CandidateProfile],
        reviews_by_candidate_id: Mapping[str, Sequence[Review]],
        required_skills: Sequence[str],
    ) -> list[RankedCandidate]:
        """Rank candidates by descending total (ties keep input order)."""
        ranked = rank(candidates, reviews_by_candidate_id, required_skills, self.policy())
        logger = get_dagster_logger()
        penalised = sum(
            1
            for r in ranked
            if r.match_score.penalties.toxic_flag or r.match_score.penalties.abandoned_flag
        )
        logger.info(f"Ranked {len(ranked)} candidates ({penalised} penalised)")
        return ranked

    def summarize(self, reviews: Sequence[Review]) -> ReputationSummary | None:
        return summarize_reputation(reviews, badge_threshold=self.badge_threshold)
