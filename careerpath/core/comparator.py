"""
Side-by-side career comparison.

Each factor yields a sentence plus the id of the favoured career (``None``
when the two are level), so callers can check which career wins regardless of
argument order.
"""
from __future__ import annotations

import re
from typing import Optional, Tuple

from careerpath.models.domain import CareerDefinition, Comparison, Tier

DIFFICULTY_ORDER = {"easy": 1, "medium": 2, "hard": 3}
DEMAND_ORDER = {"low": 1, "medium": 2, "high": 3}

DEFAULT_DURATION_YEARS = 4
DEFAULT_COST_TIER = 2
SALARY_GAP_THRESHOLD = 200_000

NEUTRAL_RECOMMENDATION = (
    "Both careers are excellent choices. Consider your personal interests and long-term goals."
)
SALARY_UNAVAILABLE = "Salary data unavailable for comparison"

Verdict = Tuple[str, Optional[str]]


def extract_years(duration: str) -> int:
    """First integer in the duration text; 4 when there is none."""
    match = re.search(r"\d+", duration or "")
    return int(match.group()) if match else DEFAULT_DURATION_YEARS


def estimate_cost(career: CareerDefinition) -> int:
    """Cost tier 1 (cheap) … 3 (expensive); explicit field wins over the id heuristic."""
    if career.cost_tier is not None:
        return career.cost_tier
    cid = career.id.lower()
    if "doctor" in cid:
        return 3
    if "engineer" in cid:
        return 2
    if "design" in cid or "marketing" in cid:
        return 1
    return DEFAULT_COST_TIER


def salary_midpoint(career: CareerDefinition) -> Optional[float]:
    """Midpoint of the India band; ``None`` when the career carries no salary data."""
    if career.salary_range is None:
        return None
    band = career.salary_range.india
    return (band.min + band.max) / 2


def _lakhs(amount: float) -> str:
    return f"₹{amount / 100_000:.1f}L"


# ── Factors ──────────────────────────────────────────────────────────────────

def compare_duration(c1: CareerDefinition, c2: CareerDefinition) -> Verdict:
    y1, y2 = extract_years(c1.duration), extract_years(c2.duration)
    d1, d2 = c1.duration or "Unspecified duration", c2.duration or "Unspecified duration"
    if y1 < y2:
        return f"{d1} is shorter than {d2}", c1.id
    if y1 > y2:
        return f"{d1} is longer than {d2}", c2.id
    return f"Both have similar duration: {d1}", None


def compare_difficulty(c1: CareerDefinition, c2: CareerDefinition) -> Verdict:
    diff1, diff2 = c1.difficulty.value, c2.difficulty.value
    l1, l2 = DIFFICULTY_ORDER[diff1], DIFFICULTY_ORDER[diff2]
    if l1 < l2:
        return f"First option is easier ({diff1} vs {diff2})", c1.id
    if l1 > l2:
        return f"Second option is easier ({diff2} vs {diff1})", c2.id
    return f"Both have similar difficulty level: {diff1}", None


def compare_cost(c1: CareerDefinition, c2: CareerDefinition) -> Verdict:
    t1, t2 = estimate_cost(c1), estimate_cost(c2)
    if t1 < t2:
        return f"{c1.title} is generally more affordable", c1.id
    if t1 > t2:
        return f"{c2.title} is generally more affordable", c2.id
    return "Both have similar cost structures", None


def compare_job_demand(c1: CareerDefinition, c2: CareerDefinition) -> Verdict:
    dem1, dem2 = c1.job_demand.value, c2.job_demand.value
    l1, l2 = DEMAND_ORDER[dem1], DEMAND_ORDER[dem2]
    if l1 > l2:
        return f"First option has higher job demand ({dem1} vs {dem2})", c1.id
    if l1 < l2:
        return f"Second option has higher job demand ({dem2} vs {dem1})", c2.id
    return f"Both have similar job demand: {dem1}", None


def compare_salary(c1: CareerDefinition, c2: CareerDefinition) -> Verdict:
    avg1, avg2 = salary_midpoint(c1), salary_midpoint(c2)
    if avg1 is None or avg2 is None:
        return SALARY_UNAVAILABLE, None
    if avg1 > avg2:
        return (f"First option has higher average salary "
                f"({_lakhs(avg1)} vs {_lakhs(avg2)})"), c1.id
    if avg1 < avg2:
        return (f"Second option has higher average salary "
                f"({_lakhs(avg2)} vs {_lakhs(avg1)})"), c2.id
    return "Both have similar salary ranges", None


def overall_recommendation(c1: CareerDefinition, c2: CareerDefinition) -> str:
    factors = []

    if c1.job_demand == Tier.high and c2.job_demand != Tier.high:
        factors.append(f"{c1.title} has better job prospects")
    elif c2.job_demand == Tier.high and c1.job_demand != Tier.high:
        factors.append(f"{c2.title} has better job prospects")

    if c1.emerging_field and not c2.emerging_field:
        factors.append(f"{c1.title} is in an emerging field with future growth")
    elif c2.emerging_field and not c1.emerging_field:
        factors.append(f"{c2.title} is in an emerging field with future growth")

    avg1, avg2 = salary_midpoint(c1), salary_midpoint(c2)
    if avg1 is not None and avg2 is not None and abs(avg1 - avg2) > SALARY_GAP_THRESHOLD:
        richer = c1 if avg1 > avg2 else c2
        factors.append(f"{richer.title} offers higher earning potential")

    if not factors:
        return NEUTRAL_RECOMMENDATION
    return f"Recommendation: {', '.join(factors)}."


def compare(c1: CareerDefinition, c2: CareerDefinition) -> Comparison:
    duration, duration_winner = compare_duration(c1, c2)
    difficulty, difficulty_winner = compare_difficulty(c1, c2)
    cost, cost_winner = compare_cost(c1, c2)
    job_demand, demand_winner = compare_job_demand(c1, c2)
    salary, salary_winner = compare_salary(c1, c2)

    return Comparison(
        career1=c1,
        career2=c2,
        duration=duration,
        difficulty=difficulty,
        cost=cost,
        job_demand=job_demand,
        salary=salary,
        recommendation=overall_recommendation(c1, c2),
        winners={
            "duration":   duration_winner,
            "difficulty": difficulty_winner,
            "cost":       cost_winner,
            "job_demand": demand_winner,
            "salary":     salary_winner,
        },
    )
