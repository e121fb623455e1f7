from __future__ import annotations

from conftest import make_career, make_student_career

from careerpath.core.advisor import (
    GENERIC_ANSWER,
    analyse_answers,
    canned_answer,
    parent_explanation,
    summarise_skill_gaps,
)
from careerpath.models.domain import Recommendation, Tier


def _rec(career, missing, strength, reasoning="Fits your interests.") -> Recommendation:
    return Recommendation(
        career=career,
        match_score=0.5,
        missing_skills=missing,
        strength_skills=strength,
        reasoning=reasoning,
    )


class TestAssessment:
    def test_keywords_map_to_skills_and_interests(self):
        result = analyse_answers({
            "interest-1": "Working with data and analytics",
            "skill-2": "Excellent - I love data and patterns",
            "skill-4": "Very comfortable - I have a design background",
        })
        assert result.interests == ["Data Science", "Analytics", "UI/UX Design", "Creative Design"]
        assert result.skills == ["Statistics", "Data Analysis", "Design Thinking", "Prototyping"]

    def test_unmatched_answers(self):
        result = analyse_answers({"q": "Balancing solo and team work"})
        assert result.skills == [] and result.interests == []


class TestCannedAnswer:
    def test_salary(self):
        assert "Salaries vary" in canned_answer("What is the pay like?")

    def test_skill_uses_first_interest(self, general_profile):
        assert "Data Science" in canned_answer("Which skills should I learn?", general_profile)

    def test_portfolio(self):
        assert "portfolio" in canned_answer("Portfolio ideas?")

    def test_transition_uses_first_skill(self, general_profile):
        assert "Python" in canned_answer("How long will it take?", general_profile)

    def test_generic(self):
        assert canned_answer("Hello there") == GENERIC_ANSWER


class TestParentExplanation:
    def test_empty(self):
        assert parent_explanation([]) is None

    def test_top_recommendation_summary(self):
        career = make_student_career(title="Graphic Designer", job_demand="high",
                                     emerging_field=True, future_scope="Growing demand.")
        text = parent_explanation([_rec(career, [], ["Creativity"])])
        assert "**Graphic Designer**" in text
        assert "Job demand: HIGH" in text
        assert "₹2.0 - ₹8.0 lakhs per year" in text
        assert "Fits your interests." in text
        assert "emerging field" in text


class TestSkillGaps:
    def test_weighted_by_rank(self):
        recs = [
            _rec(make_career(id="a", required_skills=["A", "B", "X"]), ["A", "B"], ["X"]),
            _rec(make_career(id="b", required_skills=["B", "C", "Y"]), ["B", "C"], ["Y"]),
        ]
        summary = summarise_skill_gaps(recs)
        assert [p.skill for p in summary.priority_skills] == ["A", "B", "C"]
        b = summary.priority_skills[1]
        assert b.count == 2 and b.priority == Tier.high
        assert summary.priority_skills[0].priority == Tier.medium
        assert summary.completion_rate == 33

    def test_empty(self):
        summary = summarise_skill_gaps([])
        assert summary.priority_skills == [] and summary.completion_rate == 0
