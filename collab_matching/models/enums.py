"""Enums shared by reviews and scoring."""

import enum


class ReviewMetricEnum(str, enum.Enum):
    """Per-dimension review metrics, each rated 1-5."""

    DEADLINES = "deadlines"
    QUALITY = "quality"
    COMMUNICATION = "communication"
    TEAMWORK = "teamwork"
    PROFESSIONALISM = "professionalism"
    PROBLEM_SOLVING = "problem_solving"


class ReviewFlagEnum(str, enum.Enum):
    """Misconduct issues a reviewer can report."""

    TOXIC = "toxic"
    ABANDONED = "abandoned"
    BROKEN_RULES = "broken_rules"  # Recorded but not scored


# Labels shown for reputation badges, in display order.
METRIC_BADGE_LABELS: dict[ReviewMetricEnum, str] = {
    ReviewMetricEnum.COMMUNICATION: "Top Communicator",
    ReviewMetricEnum.DEADLINES: "Always On Time",
    ReviewMetricEnum.QUALITY: "Premium Quality",
    ReviewMetricEnum.TEAMWORK: "Team Spirit",
    ReviewMetricEnum.PROFESSIONALISM: "Professional",
    ReviewMetricEnum.PROBLEM_SOLVING: "Problem Solver",
}
