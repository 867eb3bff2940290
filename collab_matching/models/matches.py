"""Match score results produced by the engine."""

from dataclasses import dataclass

from collab_matching.models.candidates import CandidateProfile


@dataclass(frozen=True)
class ScoreBreakdown:
    """Weighted components before penalties (skill ≤40, reputation ≤30, reliability ≤20, compatibility ≤10)."""

    skill_match: float
    reputation: float
    reliability: float
    compatibility: float

    @property
    def subtotal(self) -> float:
        return self.skill_match + self.reputation + self.reliability + self.compatibility


@dataclass(frozen=True)
class Penalties:
    """Misconduct flags reported in any of the candidate's reviews."""

    toxic_flag: bool = False
    abandoned_flag: bool = False


@dataclass(frozen=True)
class MatchScore:
    """Composite score for one candidate against one project, total in [0, 100]."""

    total: float
    breakdown: ScoreBreakdown
    penalties: Penalties
    average_rating: float


@dataclass(frozen=True)
class RankedCandidate:
    """A candidate augmented with its match score."""

    candidate: CandidateProfile
    match_score: MatchScore

    @property
    def candidate_id(self) -> str:
        return self.candidate.id
