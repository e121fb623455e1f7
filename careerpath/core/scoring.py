"""
ScoringEngine
=============
Scores a Profile against catalog careers.

Two weighting schemes, selected by ``profile.kind``:

  general → skill overlap (0.6) + interest overlap (0.4), normalised by the
            size of the career's required-skill list
  student → interests 0.4 + personality 0.3 + subjects 0.2 + goals 0.1,
            after a hard eligibility gate (stream, minimum marks)

Both add a bounded random perturbation and clamp the result to [0, 1].
"""
from __future__ import annotations

import logging
from typing import Iterable, List, Optional, Tuple

from careerpath.core.matching import contained_in, labels_overlap, matching_labels, overlaps_any
from careerpath.core.randomness import RandomSource, SeededRandomSource
from careerpath.models.domain import CareerDefinition, Profile, ProfileKind, ScoredCareer

logger = logging.getLogger(__name__)

# General variant
SKILL_WEIGHT = 0.6
INTEREST_WEIGHT = 0.4
BASELINE_INTEREST_MATCHES = 2

# Student variant (must sum to 1.0)
STUDENT_WEIGHTS = {
    "interests":   0.4,
    "personality": 0.3,
    "subjects":    0.2,
    "goals":       0.1,
}

SALARY_EXPECTATION_BUCKETS = [
    (("high", "10+"),  1_000_000),
    (("medium", "5-10"), 500_000),
    (("low", "3-5"),     300_000),
]
DEFAULT_SALARY_EXPECTATION = 400_000

ABROAD_REASONING_THRESHOLD = 5_000_000
MARKS_REASONING_MARGIN = 10

GENERAL_FALLBACK_REASON = "This career path offers good growth opportunities and matches your profile."
STUDENT_FALLBACK_REASON = "This career path matches your profile and offers good growth opportunities."


def parse_salary_expectation(expectation: Optional[str]) -> int:
    """Map a free-text salary bucket to a representative INR figure."""
    text = (expectation or "").lower()
    for keywords, value in SALARY_EXPECTATION_BUCKETS:
        if any(k in text for k in keywords):
            return value
    return DEFAULT_SALARY_EXPECTATION


def partition_skills(required: Iterable[str], skills: Iterable[str]) -> Tuple[List[str], List[str]]:
    """Split ``required`` into (missing, strength), preserving catalog order."""
    skills = list(skills)
    missing, strength = [], []
    for req in required:
        (strength if overlaps_any(req, skills) else missing).append(req)
    return missing, strength


def is_eligible(profile: Profile, career: CareerDefinition) -> bool:
    """Hard pre-filter for students; general profiles are never gated."""
    if profile.kind != ProfileKind.student or career.eligibility is None:
        return True
    elig = career.eligibility
    if profile.current_stream is not None and profile.current_stream not in elig.stream:
        return False
    return profile.marks.overall >= elig.minimum_marks


def _ratio(matches: int, total: int) -> float:
    return matches / max(total, 1)


class ScoringEngine:
    """Computes match scores and missing/strength skill partitions."""

    def __init__(self, random_source: Optional[RandomSource] = None,
                 perturbation: float = 0.2):
        self.random_source = random_source or SeededRandomSource()
        self.perturbation = perturbation

    # ────────────────────────────────────────────────────────────────────────
    # PUBLIC
    # ────────────────────────────────────────────────────────────────────────

    def score(self, profile: Profile, career: CareerDefinition) -> ScoredCareer:
        if profile.kind == ProfileKind.student:
            return self._score_student(profile, career)
        return self._score_general(profile, career)

    def score_all(self, profile: Profile,
                  careers: Iterable[CareerDefinition]) -> List[ScoredCareer]:
        """Score every eligible career, keeping catalog order."""
        careers = list(careers)
        eligible = [c for c in careers if is_eligible(profile, c)]
        if len(eligible) < len(careers):
            logger.debug("Eligibility gate excluded %d of %d careers",
                         len(careers) - len(eligible), len(careers))
        return [self.score(profile, c) for c in eligible]

    # ────────────────────────────────────────────────────────────────────────
    # GENERAL VARIANT
    # ────────────────────────────────────────────────────────────────────────

    def _score_general(self, profile: Profile, career: CareerDefinition) -> ScoredCareer:
        skill_matches = matching_labels(profile.skills, career.required_skills)
        interest_matches = matching_labels(
            profile.interests, [career.title, career.description, career.industry])

        raw = (len(skill_matches) * SKILL_WEIGHT + len(interest_matches) * INTEREST_WEIGHT) / max(
            len(career.required_skills) * SKILL_WEIGHT + BASELINE_INTEREST_MATCHES * INTEREST_WEIGHT, 1
        )
        missing, strength = partition_skills(career.required_skills, profile.skills)

        return ScoredCareer(
            career=career,
            match_score=self._perturb(raw),
            missing_skills=missing,
            strength_skills=strength,
            reasoning=general_reasoning(profile, skill_matches, interest_matches),
        )

    # ────────────────────────────────────────────────────────────────────────
    # STUDENT VARIANT
    # ────────────────────────────────────────────────────────────────────────

    def _score_student(self, profile: Profile, career: CareerDefinition) -> ScoredCareer:
        interest_matches = [
            i for i in profile.interests
            if overlaps_any(i, career.required_skills)
            or labels_overlap(i, career.title)
            or labels_overlap(i, career.description)
        ]

        skills_text = " ".join(career.required_skills)
        personality_matches = [
            t for t in profile.personality_traits
            if contained_in(t, career.description) or contained_in(t, skills_text)
        ]

        required_subjects = career.eligibility.subjects if career.eligibility else []
        subject_matches = matching_labels(profile.subjects, required_subjects)

        raw = (
            _ratio(len(interest_matches), len(profile.interests)) * STUDENT_WEIGHTS["interests"]
            + _ratio(len(personality_matches), len(profile.personality_traits)) * STUDENT_WEIGHTS["personality"]
            + _ratio(len(subject_matches), len(required_subjects)) * STUDENT_WEIGHTS["subjects"]
            + goal_alignment(profile, career) * STUDENT_WEIGHTS["goals"]
        )
        missing, strength = partition_skills(career.required_skills, profile.skills)

        return ScoredCareer(
            career=career,
            match_score=self._perturb(raw),
            missing_skills=missing,
            strength_skills=strength,
            reasoning=student_reasoning(profile, career, interest_matches, personality_matches),
        )

    def _perturb(self, raw: float) -> float:
        score = raw + self.random_source.next() * self.perturbation
        return min(max(score, 0.0), 1.0)


def goal_alignment(profile: Profile, career: CareerDefinition) -> float:
    """0, 0.5 or 1.0 depending on salary and study-abroad fit."""
    if career.salary_range is None:
        return 0.0
    score = 0.0
    goals = profile.goals
    if goals.salary_expectation:
        if parse_salary_expectation(goals.salary_expectation) <= career.salary_range.india.max:
            score += 0.5
    if goals.study_abroad and career.salary_range.abroad.max > 0:
        score += 0.5
    return score


# ── Reasoning templates ──────────────────────────────────────────────────────

def general_reasoning(profile: Profile, skill_matches: List[str],
                      interest_matches: List[str]) -> str:
    reasons = []
    if skill_matches:
        reasons.append(f"Your skills in {' and '.join(skill_matches[:2])} align well with this role.")
    if interest_matches:
        reasons.append(f"Your interest in {interest_matches[0]} matches this career path.")
    education = profile.education.lower()
    if "computer science" in education or "engineering" in education:
        reasons.append("Your technical education background is relevant for this field.")
    return " ".join(reasons) or GENERAL_FALLBACK_REASON


def student_reasoning(profile: Profile, career: CareerDefinition,
                      interest_matches: List[str], personality_matches: List[str]) -> str:
    reasons = []
    if interest_matches:
        reasons.append(
            f"Your interests in {' and '.join(interest_matches[:2])} align perfectly with this career.")
    if personality_matches:
        reasons.append(f"Your {personality_matches[0]} personality trait is ideal for this field.")
    if career.eligibility and profile.marks.overall >= career.eligibility.minimum_marks + MARKS_REASONING_MARGIN:
        reasons.append(
            f"Your academic performance ({profile.marks.overall:g}%) exceeds the typical requirements.")
    if career.emerging_field:
        reasons.append("This is an emerging field with excellent future prospects and high demand.")
    if (profile.goals.study_abroad and career.salary_range
            and career.salary_range.abroad.max > ABROAD_REASONING_THRESHOLD):
        reasons.append("This career offers excellent opportunities for working abroad.")
    return " ".join(reasons) or STUDENT_FALLBACK_REASON
