"""Candidate profile as seen by the matching engine."""

from dataclasses import dataclass


@dataclass(frozen=True)
class CandidateProfile:
    """A user being evaluated for a project.

    Roles keep their input order and duplicates; matching against required
    skills is case-insensitive.
    """

    id: str
    roles: tuple[str, ...] = ()
