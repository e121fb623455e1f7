"""Recommendation ranking: stable sort by match score, then truncate."""
from __future__ import annotations

from typing import List, Sequence, TypeVar

from careerpath.models.domain import ScoredCareer

DEFAULT_TOP_N = 3

T = TypeVar("T", bound=ScoredCareer)


def rank(scored: Sequence[T], limit: int = DEFAULT_TOP_N) -> List[T]:
    """
    Highest match score first. ``sorted`` is stable, so careers with equal
    scores keep the order in which they were scored (catalog order).
    Returns fewer than ``limit`` items when fewer were scored; never pads.
    """
    if limit < 0:
        raise ValueError("limit must be non-negative")
    return sorted(scored, key=lambda s: s.match_score, reverse=True)[:limit]
