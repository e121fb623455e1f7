"""
Scoring engine: both weighting schemes, the eligibility gate and the
perturbation bounds.
"""
from __future__ import annotations

import pytest

from conftest import make_career, make_student_career

from careerpath.core.matching import labels_overlap
from careerpath.core.randomness import FixedRandomSource, SeededRandomSource
from careerpath.core.ranking import rank
from careerpath.core.scoring import (
    GENERAL_FALLBACK_REASON,
    STUDENT_WEIGHTS,
    ScoringEngine,
    is_eligible,
    parse_salary_expectation,
    partition_skills,
)
from careerpath.models.domain import Profile


DATA_SCIENTIST = dict(
    id="data-scientist",
    title="Data Scientist",
    description="Analyze data to help businesses decide.",
    industry="Technology",
    required_skills=["Python", "Statistics", "Machine Learning", "SQL"],
)


class TestLabelMatching:
    def test_containment_either_direction(self):
        assert labels_overlap("Python", "python programming")
        assert labels_overlap("Machine Learning", "learning")

    def test_unrelated_labels(self):
        assert not labels_overlap("Creative Design", "Creativity")


class TestGeneralScoring:
    def test_data_scientist_scenario(self, scorer, general_profile):
        result = scorer.score(general_profile, make_career(**DATA_SCIENTIST))

        assert result.strength_skills == ["Python", "SQL"]
        assert result.missing_skills == ["Statistics", "Machine Learning"]
        assert "Python and SQL" in result.reasoning
        assert "technical education" in result.reasoning
        # "Data Science" is not contained in "Data Scientist", so only skills count:
        # (2*0.6 + 0*0.4) / (4*0.6 + 2*0.4)
        assert result.match_score == pytest.approx(0.375)

    def test_overlapping_interest_adds_weight(self, scorer, general_profile):
        profile = general_profile.model_copy(update={"interests": ["Data"]})
        result = scorer.score(profile, make_career(**DATA_SCIENTIST))
        # (2*0.6 + 1*0.4) / (4*0.6 + 2*0.4)
        assert result.match_score == pytest.approx(0.5)
        assert "Your interest in Data" in result.reasoning

    def test_empty_profile_scores_zero(self, scorer):
        profile = Profile(name="x", email="x@example.com")
        result = scorer.score(profile, make_career(**DATA_SCIENTIST))
        assert result.match_score == 0.0
        assert result.missing_skills == DATA_SCIENTIST["required_skills"]
        assert result.strength_skills == []
        assert result.reasoning == GENERAL_FALLBACK_REASON

    def test_perturbation_is_added(self, general_profile):
        scorer = ScoringEngine(FixedRandomSource([0.5]), perturbation=0.2)
        result = scorer.score(general_profile, make_career(**DATA_SCIENTIST))
        assert result.match_score == pytest.approx(0.475)

    def test_score_clamped_to_one(self):
        scorer = ScoringEngine(FixedRandomSource([0.99]), perturbation=0.2)
        profile = Profile(name="x", email="x@example.com",
                          skills=["Python"], interests=["Python", "Developer"])
        career = make_career(title="Python Developer", required_skills=["Python"])
        assert scorer.score(profile, career).match_score == 1.0

    def test_scores_within_bounds_for_catalog(self, catalog, general_profile):
        scorer = ScoringEngine(SeededRandomSource(7))
        for career in catalog.list_careers():
            assert 0.0 <= scorer.score(general_profile, career).match_score <= 1.0


class TestPartition:
    def test_partition_covers_required_skills(self, catalog, general_profile, student_profile):
        for profile in (general_profile, student_profile):
            for career in catalog.list_careers() + catalog.list_student_careers():
                missing, strength = partition_skills(career.required_skills, profile.skills)
                assert set(missing) | set(strength) == set(career.required_skills)
                assert not set(missing) & set(strength)

    def test_keeps_catalog_order(self):
        missing, strength = partition_skills(["C", "B", "A"], ["a", "c"])
        assert missing == ["B"]
        assert strength == ["C", "A"]


class TestStudentScoring:
    def test_weights_sum_to_one(self):
        assert sum(STUDENT_WEIGHTS.values()) == pytest.approx(1.0)

    def test_weighted_components(self, scorer, student_profile):
        result = scorer.score(student_profile, make_student_career())
        # interests 1/2*0.4 + personality 0 + subjects 1/1*0.2 + goals 1.0*0.1
        assert result.match_score == pytest.approx(0.5)
        assert result.strength_skills == ["Creativity"]
        assert result.missing_skills == ["Communication"]

    def test_interest_containing_title_counts(self, scorer, student_profile):
        profile = _with(student_profile, interests=["Student Career Path"])
        result = scorer.score(profile, make_student_career())
        assert "Your interests in Student Career Path" in result.reasoning

    def test_reasoning_mentions_interest_and_marks(self, scorer, student_profile):
        result = scorer.score(student_profile, make_student_career())
        assert "Communication" in result.reasoning
        assert "72%" in result.reasoning

    def test_fallback_reasoning(self, scorer):
        profile = Profile(kind="student", name="x", email="x@example.com")
        result = scorer.score(profile, make_student_career(eligibility=None, emerging_field=False))
        assert result.reasoning.startswith("This career path matches your profile")


def _with(profile: Profile, **changes) -> Profile:
    return Profile.model_validate({**profile.model_dump(), **changes})


class TestEligibilityGate:
    def test_stream_mismatch_excluded(self, scorer, student_profile):
        science = _with(student_profile, current_stream="science")
        arts_only = make_student_career()
        assert not is_eligible(science, arts_only)
        assert scorer.score_all(science, [arts_only]) == []

    def test_minimum_marks_inclusive(self, student_profile):
        career = make_student_career()
        assert is_eligible(_with(student_profile, marks={"overall": 50}), career)
        assert not is_eligible(_with(student_profile, marks={"overall": 49.5}), career)

    def test_unset_stream_not_checked(self, student_profile):
        profile = _with(student_profile, current_stream=None)
        assert is_eligible(profile, make_student_career())

    def test_general_profiles_never_gated(self, general_profile):
        assert is_eligible(general_profile, make_student_career())

    def test_score_all_keeps_catalog_order(self, scorer, student_profile):
        careers = [make_student_career(id=f"c{i}") for i in range(3)]
        assert [s.career.id for s in scorer.score_all(student_profile, careers)] == ["c0", "c1", "c2"]

    def test_gate_holds_under_maximum_perturbation(self, student_profile):
        scorer = ScoringEngine(FixedRandomSource([0.99]), perturbation=0.2)
        science = _with(student_profile, current_stream="science")
        arts_only = [make_student_career(id=f"arts-{i}") for i in range(3)]
        assert rank(scorer.score_all(science, arts_only), limit=3) == []

        mixed = make_student_career(
            id="mixed",
            eligibility={"stream": ["arts", "science"], "minimum_marks": 50},
        )
        top = rank(scorer.score_all(science, arts_only + [mixed]), limit=3)
        assert [s.career.id for s in top] == ["mixed"]


class TestSalaryExpectation:
    @pytest.mark.parametrize("text,expected", [
        ("high (10+ LPA)", 1_000_000),
        ("Medium 5-10", 500_000),
        ("low (3-5 LPA)", 300_000),
        ("whatever", 400_000),
        (None, 400_000),
    ])
    def test_buckets(self, text, expected):
        assert parse_salary_expectation(text) == expected
