"""Peer review records handed to the engine by the caller."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType


@dataclass(frozen=True)
class Review:
    """One completed collaboration, reviewed by a peer.

    Optional fields are unknown when absent: a missing metric is excluded from
    averages, and a flag that is not in ``flags`` was simply not reported.
    Metrics are copied into a read-only mapping on construction.
    """

    rating_overall: float
    metrics: Mapping[str, float] = field(default_factory=dict, hash=False)
    would_work_again: bool | None = None
    recommend: bool | None = None
    flags: frozenset[str] = frozenset()
    reviewer_id: str | None = None
    reviewee_id: str | None = None
    comment: str | None = None

    def __post_init__(self):
        object.__setattr__(self, "metrics", MappingProxyType(dict(self.metrics)))
        object.__setattr__(self, "flags", frozenset(self.flags))

    def metric(self, name: str) -> float | None:
        return self.metrics.get(name)

    def has_flag(self, name: str) -> bool:
        return name in self.flags
