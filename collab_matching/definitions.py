"""Dagster definitions for collaborator matching.

Wires the ranking job to a MatchScoringResource whose policy can be tuned
through environment variables (loaded from .env when present):

- MATCH_SKILL_WEIGHT, MATCH_REPUTATION_WEIGHT, MATCH_RELIABILITY_WEIGHT,
  MATCH_COMPATIBILITY_WEIGHT
- MATCH_TOXIC_PENALTY, MATCH_ABANDONED_PENALTY
"""

import os

from dagster import Definitions
from dotenv import load_dotenv

from collab_matching.jobs import candidate_ranking_job
from collab_matching.resources import MatchScoringResource
from collab_matching.scoring import weights

# Load environment variables from .env file (must be before resource initialization)
load_dotenv()


def get_environment() -> str:
    """Get current environment from env var."""
    return os.getenv("ENVIRONMENT", "development")


def _env_float(name: str, default: float) -> float:
    """Read a float from the environment; raises ValueError on a malformed value."""
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return float(raw)
    except ValueError as exc:
        raise ValueError(f"{name} must be a number, got {raw!r}") from exc


def build_match_scoring_resource() -> MatchScoringResource:
    """Build the scoring resource from environment overrides."""
    return MatchScoringResource(
        skill_match_weight=_env_float("MATCH_SKILL_WEIGHT", weights.SKILL_MATCH_WEIGHT),
        reputation_weight=_env_float("MATCH_REPUTATION_WEIGHT", weights.REPUTATION_WEIGHT),
        reliability_weight=_env_float("MATCH_RELIABILITY_WEIGHT", weights.RELIABILITY_WEIGHT),
        compatibility_weight=_env_float(
            "MATCH_COMPATIBILITY_WEIGHT", weights.COMPATIBILITY_WEIGHT
        ),
        toxic_penalty=_env_float("MATCH_TOXIC_PENALTY", weights.TOXIC_PENALTY),
        abandoned_penalty=_env_float("MATCH_ABANDONED_PENALTY", weights.ABANDONED_PENALTY),
    )


def get_resources() -> dict:
    """Get resources based on current environment."""
    # All environments share the same pure scoring resource; only env overrides differ
    return {"match_scoring": build_match_scoring_resource()}


all_jobs = [
    candidate_ranking_job,
]

defs = Definitions(
    jobs=all_jobs,
    resources=get_resources(),
)
