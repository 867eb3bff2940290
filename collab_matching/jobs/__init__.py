"""Dagster jobs for collaborator matching.

OPS JOBS:
- candidate_ranking_job: Rank the candidates supplied in run config against a
  project's required skills and return one match row per candidate.

USAGE:
The caller fetches candidate profiles and their reviews, then launches the job
with run config like:

    ops:
      rank_candidates:
        config:
          required_skills: ["Artist", "Programmer"]
          candidates:
            - {id: "u1", roles: ["Artist", "Writer"]}
          reviews:
            - {reviewee_id: "u1", rating_overall: 5, metrics: {deadlines: 4}, would_work_again: true}
"""

from dagster import Config, OpExecutionContext, job, op

from collab_matching.models.candidates import CandidateProfile
from collab_matching.utils.review_mapper import group_reviews_by_reviewee, match_score_to_row

# Number of top candidates written to the run log
LOG_TOP_N = 5


class CandidateConfig(Config):
    """One candidate profile: id plus role/skill labels."""

    id: str
    roles: list[str] = []


class ReviewConfig(Config):
    """One review received by ``reviewee_id``."""

    reviewee_id: str
    rating_overall: float
    metrics: dict[str, float] = {}
    would_work_again: bool | None = None
    recommend: bool | None = None
    flags: list[str] = []


class RankCandidatesConfig(Config):
    """Run config for rank_candidates."""

    required_skills: list[str] = []
    candidates: list[CandidateConfig] = []
    reviews: list[ReviewConfig] = []


def _review_row(review: ReviewConfig) -> dict:
    return {
        "reviewee_id": review.reviewee_id,
        "rating_overall": review.rating_overall,
        "metrics": dict(review.metrics),
        "would_work_again": review.would_work_again,
        "recommend": review.recommend,
        "flags": list(review.flags),
    }


@op(
    required_resource_keys={"match_scoring"},
    description="Score and rank candidates for a project's required skills",
)
def rank_candidates(context: OpExecutionContext, config: RankCandidatesConfig) -> list[dict]:
    """Return match rows ordered by descending score, with 1-based ranks."""
    scoring = context.resources.match_scoring

    candidates = [CandidateProfile(id=c.id, roles=tuple(c.roles)) for c in config.candidates]
    reviews_by_candidate = group_reviews_by_reviewee(_review_row(r) for r in config.reviews)
    context.log.info(
        f"Ranking {len(candidates)} candidates "
        f"({sum(len(v) for v in reviews_by_candidate.values())} reviews) "
        f"against {len(config.required_skills)} required skills"
    )

    if not candidates:
        context.log.warning("No candidates to rank")
        return []

    ranked = scoring.rank(candidates, reviews_by_candidate, config.required_skills)

    rows = [
        match_score_to_row(r.candidate_id, r.match_score, rank=position)
        for position, r in enumerate(ranked, start=1)
    ]
    for row in rows[:LOG_TOP_N]:
        context.log.info(f"  {row['rank']}. {row['candidate_id']}: {row['match_score']:.2f}")
    if len(rows) > LOG_TOP_N:
        context.log.info(f"  ... and {len(rows) - LOG_TOP_N} more")
    return rows


@job(description="Rank candidates supplied in run config against required skills")
def candidate_ranking_job():
    """Score every candidate and order them by match score.

    Candidates and reviews come from run config; nothing is read from or
    written to storage.
    """
    rank_candidates()
