"""Review aggregation: reduce a candidate's reviews to scalar summaries.

Every function is a read-only pass over the review list. Missing data is never
treated as zero: averages skip reviews that did not supply a value and fall
back to a neutral default when nobody did.
"""

from collections.abc import Sequence

from collab_matching.models.enums import ReviewMetricEnum
from collab_matching.models.reviews import Review
from collab_matching.scoring.weights import NEUTRAL_RATING


def average_overall_rating(reviews: Sequence[Review], default: float = NEUTRAL_RATING) -> float:
    """Mean of rating_overall, or ``default`` when there are no reviews."""
    if not reviews:
        return default
    return sum(r.rating_overall for r in reviews) / len(reviews)


def average_metric(
    reviews: Sequence[Review],
    metric: str,
    default: float = NEUTRAL_RATING,
) -> float:
    """Mean of one metric over the reviews that supplied it.

    Args:
        reviews: Candidate's reviews.
        metric: Metric name (e.g. "deadlines").
        default: Value returned when no review carries the metric.

    Returns:
        The average, or ``default``.
    """
    values = [v for v in (r.metric(metric) for r in reviews) if v is not None]
    if not values:
        return default
    return sum(values) / len(values)


def repeat_hire_rate(reviews: Sequence[Review]) -> float | None:
    """Share of all reviews answering would_work_again with True; None when there are no reviews.

    Reviews that left the question blank still count in the denominator.
    """
    if not reviews:
        return None
    yes = sum(1 for r in reviews if r.would_work_again is True)
    return yes / len(reviews)


def has_flag(reviews: Sequence[Review], flag: str) -> bool:
    """True if any review reports the flag."""
    return any(r.has_flag(flag) for r in reviews)


def metric_averages(reviews: Sequence[Review]) -> dict[str, float]:
    """Average of every metric that at least one review supplied, keyed by metric name.

    Keys follow the ReviewMetricEnum order; unknown metric names in the data
    are appended after the known ones.
    """
    sums: dict[str, tuple[float, int]] = {}
    for review in reviews:
        for name, value in review.metrics.items():
            if value is None:
                continue
            total, count = sums.get(name, (0.0, 0))
            sums[name] = (total + value, count + 1)

    known = [m.value for m in ReviewMetricEnum if m.value in sums]
    extra = [name for name in sums if name not in known]
    return {name: sums[name][0] / sums[name][1] for name in known + extra}
