"""
Shared fixtures: the bundled catalog, an engine with perturbation disabled,
and small in-memory careers for property checks.
"""
from __future__ import annotations

import pytest

from careerpath.core.catalog import CatalogStore
from careerpath.core.config import settings
from careerpath.core.randomness import ZeroRandomSource
from careerpath.core.scoring import ScoringEngine
from careerpath.models.domain import CareerDefinition, Profile


def make_career(**overrides) -> CareerDefinition:
    data = {
        "id": "test-career",
        "title": "Test Career",
        "description": "A career used in tests.",
        "required_skills": ["Skill A"],
    }
    data.update(overrides)
    return CareerDefinition(**data)


def make_student_career(**overrides) -> CareerDefinition:
    data = {
        "id": "student-career",
        "title": "Student Career",
        "description": "A student career path used in tests.",
        "required_skills": ["Creativity", "Communication"],
        "eligibility": {"stream": ["arts"], "subjects": ["English"], "minimum_marks": 50},
        "salary_range": {"india": {"min": 200_000, "max": 800_000},
                         "abroad": {"min": 1_000_000, "max": 3_000_000}},
        "entrance_exams": ["Some Entrance"],
        "qualifications": ["BA"],
        "job_opportunities": ["Junior Role", "Senior Role"],
        "duration": "3 years",
    }
    data.update(overrides)
    return CareerDefinition(**data)


@pytest.fixture(scope="session")
def catalog() -> CatalogStore:
    return CatalogStore.from_directory(settings.DATA_DIR)


@pytest.fixture
def scorer() -> ScoringEngine:
    return ScoringEngine(ZeroRandomSource())


@pytest.fixture
def general_profile() -> Profile:
    return Profile(
        name="Asha",
        email="asha@example.com",
        skills=["Python", "SQL"],
        interests=["Data Science"],
        education="B.Tech Computer Science",
    )


@pytest.fixture
def student_profile() -> Profile:
    return Profile(
        kind="student",
        name="Ravi",
        email="ravi@example.com",
        interests=["Creative Design", "Communication"],
        skills=["Creativity"],
        personality_traits=["creative"],
        student_class="10",
        current_stream="arts",
        subjects=["English", "Fine Arts"],
        marks={"overall": 72},
        goals={"salary_expectation": "medium (5-10 LPA)", "study_abroad": True},
    )
