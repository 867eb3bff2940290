"""Dagster resources for collaborator matching."""

from collab_matching.resources.matchmaking import MatchScoringResource

__all__ = [
    "MatchScoringResource",
]
