"""Matching engine: review aggregation, score composition and ranking.

* `aggregate`: reduces a candidate's reviews to averages, rates and flags.
* `compose`: combines them with skill overlap into a 0-100 MatchScore.
* `rank`: scores many candidates and orders them by total.
* `reputation`: profile-level summary of peer feedback.
* `weights`: the scoring policy constants.
"""

from collab_matching.scoring.aggregate import (
    average_metric,
    average_overall_rating,
    has_flag,
    metric_averages,
    repeat_hire_rate,
)
from collab_matching.scoring.compose import score, skill_match_score
from collab_matching.scoring.rank import rank
from collab_matching.scoring.reputation import (
    ReputationBadge,
    ReputationSummary,
    summarize_reputation,
)
from collab_matching.scoring.weights import DEFAULT_POLICY, ScoringPolicy

__all__ = [
    "average_overall_rating",
    "average_metric",
    "repeat_hire_rate",
    "has_flag",
    "metric_averages",
    "score",
    "skill_match_score",
    "rank",
    "ReputationBadge",
    "ReputationSummary",
    "summarize_reputation",
    "ScoringPolicy",
    "DEFAULT_POLICY",
]
