"""
Label matching used by scoring, roadmap resource lookup and scholarship filters.

There is no canonical skill taxonomy: two labels match when either one
contains the other, ignoring case. Scoring weights are tuned against this
rule, so swap it here (and only here) if a taxonomy is introduced.
"""
from __future__ import annotations

from typing import Iterable, List


def labels_overlap(a: str, b: str) -> bool:
    a, b = a.strip().lower(), b.strip().lower()
    if not a or not b:
        return False
    return a in b or b in a


def overlaps_any(label: str, candidates: Iterable[str]) -> bool:
    return any(labels_overlap(label, c) for c in candidates)


def contained_in(label: str, text: str) -> bool:
    """One-way check: ``label`` appears inside ``text``."""
    label = label.strip().lower()
    return bool(label) and label in text.lower()


def matching_labels(labels: Iterable[str], candidates: Iterable[str]) -> List[str]:
    """Labels (in their original order) that overlap at least one candidate."""
    candidates = list(candidates)
    return [label for label in labels if overlaps_any(label, candidates)]
