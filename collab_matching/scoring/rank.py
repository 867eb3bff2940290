"""Batch scoring and ordering of candidates for one project."""

import logging
from collections.abc import Mapping, Sequence

from collab_matching.models.candidates import CandidateProfile
from collab_matching.models.matches import RankedCandidate
from collab_matching.models.reviews import Review
from collab_matching.scoring.compose import score
from collab_matching.scoring.weights import DEFAULT_POLICY, ScoringPolicy

logger = logging.getLogger(__name__)


def rank(
    candidates: Sequence[CandidateProfile],
    reviews_by_candidate_id: Mapping[str, Sequence[Review]],
    required_skills: Sequence[str],
    policy: ScoringPolicy = DEFAULT_POLICY,
) -> list[RankedCandidate]:
    """Score every candidate and return them by descending total.

    Candidates missing from ``reviews_by_candidate_id`` are scored with no
    reviews. The sort is stable, so exactly tied totals keep their input
    order. Neither input is modified.
    """
    ranked = [
        RankedCandidate(
            candidate=candidate,
            match_score=score(
                candidate,
                reviews_by_candidate_id.get(candidate.id, ()),
                required_skills,
                policy,
            ),
        )
        for candidate in candidates
    ]
    ranked.sort(key=lambda r: r.match_score.total, reverse=True)
    logger.debug("Ranked %d candidates against %d required skills", len(ranked), len(required_skills))
    return ranked
