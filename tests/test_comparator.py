from __future__ import annotations

import pytest

from conftest import make_career, make_student_career

from careerpath.core.comparator import (
    NEUTRAL_RECOMMENDATION,
    SALARY_UNAVAILABLE,
    compare,
    estimate_cost,
    extract_years,
)

FACTORS = ("duration", "difficulty", "cost", "job_demand", "salary")


@pytest.fixture
def marketing(catalog):
    return catalog.get_career("digital-marketing")


@pytest.fixture
def teaching(catalog):
    return catalog.get_career("teacher")


class TestCompare:
    def test_winners_stable_under_swap(self, marketing, teaching):
        ab = compare(marketing, teaching)
        ba = compare(teaching, marketing)
        for factor in FACTORS:
            assert ab.winners[factor] == ba.winners[factor]

    def test_catalog_pair(self, marketing, teaching):
        result = compare(marketing, teaching)
        assert result.winners == {
            "duration":   None,
            "difficulty": None,
            "cost":       "digital-marketing",
            "job_demand": "digital-marketing",
            "salary":     "digital-marketing",
        }
        assert result.job_demand == "First option has higher job demand (high vs medium)"
        assert result.salary.startswith("First option has higher average salary")
        assert result.salary.endswith("vs ₹5.0L)")
        assert result.recommendation.startswith("Recommendation: ")
        assert "better job prospects" in result.recommendation

    def test_sentence_flips_with_order(self, marketing, teaching):
        assert compare(teaching, marketing).job_demand.startswith("Second option")

    def test_neutral_recommendation(self):
        a = make_student_career(id="a", job_demand="medium", emerging_field=True)
        b = make_student_career(
            id="b", job_demand="medium", emerging_field=True,
            salary_range={"india": {"min": 300_000, "max": 800_000}},
        )
        assert compare(a, b).recommendation == NEUTRAL_RECOMMENDATION

    def test_duration_and_difficulty(self):
        short = make_career(id="short", duration="1 year", difficulty="hard")
        long = make_career(id="long", duration="5 years", difficulty="easy")
        result = compare(short, long)
        assert result.winners["duration"] == "short"
        assert result.winners["difficulty"] == "long"
        assert result.duration == "1 year is shorter than 5 years"

    def test_missing_salary_gives_no_verdict(self):
        unpaid = make_career(id="unpaid", job_demand="medium", emerging_field=False)
        paid = make_student_career(id="paid", job_demand="medium", emerging_field=False)
        for a, b in ((unpaid, paid), (paid, unpaid)):
            result = compare(a, b)
            assert result.winners["salary"] is None
            assert result.salary == SALARY_UNAVAILABLE
            assert "earning potential" not in result.recommendation
        assert compare(unpaid, paid).recommendation == NEUTRAL_RECOMMENDATION


class TestHelpers:
    @pytest.mark.parametrize("text,years", [
        ("3 years (Bachelor)", 3),
        ("6 months - 2 years", 6),
        ("Self-paced learning", 4),
        ("", 4),
    ])
    def test_extract_years(self, text, years):
        assert extract_years(text) == years

    def test_explicit_cost_tier_wins(self):
        assert estimate_cost(make_career(id="doctor-path", cost_tier=1)) == 1

    @pytest.mark.parametrize("career_id,tier", [
        ("doctor", 3), ("software-engineer", 2), ("graphic-design", 1),
        ("digital-marketing-pro", 1), ("chef", 2),
    ])
    def test_id_heuristic(self, career_id, tier):
        assert estimate_cost(make_career(id=career_id)) == tier
