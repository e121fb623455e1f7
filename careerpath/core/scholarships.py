"""Scholarship matching for student recommendations."""
from __future__ import annotations

from typing import Iterable, List

from careerpath.models.domain import CareerDefinition, Profile, Scholarship


def scholarship_applies(scholarship: Scholarship, profile: Profile,
                        career: CareerDefinition) -> bool:
    if profile.marks.overall < scholarship.min_marks:
        return False
    if scholarship.career_keywords:
        cid = career.id.lower()
        return any(k.lower() in cid for k in scholarship.career_keywords)
    return True


def filter_scholarships(scholarships: Iterable[Scholarship], profile: Profile,
                        career: CareerDefinition) -> List[Scholarship]:
    """Scholarships whose merit cutoff (inclusive) and field keywords fit."""
    return [s for s in scholarships if scholarship_applies(s, profile, career)]
