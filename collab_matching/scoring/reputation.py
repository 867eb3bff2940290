"""Reputation summary for a profile page.

Unlike the composer, percentages here only count reviewers who answered the
question, and an empty review list yields no summary at all.
"""

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from types import MappingProxyType

from collab_matching.models.enums import METRIC_BADGE_LABELS
from collab_matching.models.reviews import Review
from collab_matching.scoring.aggregate import metric_averages
from collab_matching.scoring.weights import BADGE_THRESHOLD


@dataclass(frozen=True)
class ReputationBadge:
    metric: str
    label: str


@dataclass(frozen=True)
class ReputationSummary:
    """Aggregated peer feedback for one user."""

    average_rating: float
    review_count: int
    metric_averages: Mapping[str, float] = field(default_factory=dict, hash=False)
    badges: tuple[ReputationBadge, ...] = ()
    would_work_again_percent: int | None = None
    recommend_percent: int | None = None

    def __post_init__(self):
        object.__setattr__(self, "metric_averages", MappingProxyType(dict(self.metric_averages)))


def _answered_percent(answers: list[bool | None]) -> int | None:
    answered = [a for a in answers if a is not None]
    if not answered:
        return None
    return round(100 * sum(1 for a in answered if a) / len(answered))


def summarize_reputation(
    reviews: Sequence[Review],
    badge_threshold: float = BADGE_THRESHOLD,
) -> ReputationSummary | None:
    """Build the reputation summary, or None when the user has no reviews.

    Args:
        reviews: All reviews received by the user.
        badge_threshold: Minimum metric average that earns that metric's badge.

    Returns:
        ReputationSummary with the overall average, per-metric averages,
        earned badges (in METRIC_BADGE_LABELS order) and answered-only
        would-work-again / recommend percentages.
    """
    if not reviews:
        return None

    averages = metric_averages(reviews)
    badges = tuple(
        ReputationBadge(metric=metric.value, label=label)
        for metric, label in METRIC_BADGE_LABELS.items()
        if averages.get(metric.value, 0.0) >= badge_threshold
    )
    return ReputationSummary(
        average_rating=sum(r.rating_overall for r in reviews) / len(reviews),
        review_count=len(reviews),
        metric_averages=averages,
        badges=badges,
        would_work_again_percent=_answered_percent([r.would_work_again for r in reviews]),
        recommend_percent=_answered_percent([r.recommend for r in reviews]),
    )
