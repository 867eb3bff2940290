"""Scoring policy: component weights, penalties and neutral defaults.

Bump ALGORITHM_VERSION when any default below changes so stored match rows
can be told apart.
"""

from dataclasses import dataclass

from collab_matching.models.enums import ReviewMetricEnum

ALGORITHM_VERSION = "weighted_v1"

# Composite = skill 40 + reputation 30 + reliability 20 + compatibility 10
SKILL_MATCH_WEIGHT = 40.0
REPUTATION_WEIGHT = 30.0
RELIABILITY_WEIGHT = 20.0
COMPATIBILITY_WEIGHT = 10.0

# Flat deductions from the component sum, applied independently
TOXIC_PENALTY = 50.0
ABANDONED_PENALTY = 30.0

# Reviews are rated 1-5; the midpoint stands in for missing data
RATING_SCALE_MAX = 5.0
NEUTRAL_RATING = 3.0
# Half credit when there is nothing to compare against
NEUTRAL_SKILL_MATCH = 20.0
NEUTRAL_COMPATIBILITY = 5.0

SCORE_MIN = 0.0
SCORE_MAX = 100.0

# Only deadlines feeds reliability; the other metrics are not scored
RELIABILITY_METRIC = ReviewMetricEnum.DEADLINES.value

# Metric average needed to earn a reputation badge
BADGE_THRESHOLD = 4.5


@dataclass(frozen=True)
class ScoringPolicy:
    """All tunable numbers used by the composer, bundled so they can be swapped as one."""

    skill_match_weight: float = SKILL_MATCH_WEIGHT
    reputation_weight: float = REPUTATION_WEIGHT
    reliability_weight: float = RELIABILITY_WEIGHT
    compatibility_weight: float = COMPATIBILITY_WEIGHT
    toxic_penalty: float = TOXIC_PENALTY
    abandoned_penalty: float = ABANDONED_PENALTY
    rating_scale_max: float = RATING_SCALE_MAX
    neutral_rating: float = NEUTRAL_RATING
    neutral_skill_match: float = NEUTRAL_SKILL_MATCH
    neutral_compatibility: float = NEUTRAL_COMPATIBILITY
    score_min: float = SCORE_MIN
    score_max: float = SCORE_MAX
    reliability_metric: str = RELIABILITY_METRIC

    def clamp(self, value: float) -> float:
        return max(self.score_min, min(self.score_max, value))


DEFAULT_POLICY = ScoringPolicy()
