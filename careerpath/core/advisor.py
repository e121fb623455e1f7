"""
Advisor helpers layered on top of scored recommendations:
assessment analysis, canned chat answers, parent summary, skill-gap summary.
"""
from __future__ import annotations

from typing import Dict, List, Optional, Sequence

from careerpath.models.domain import (
    AssessmentResult,
    PrioritySkill,
    Profile,
    Recommendation,
    ScoredCareer,
    SkillGapSummary,
    Tier,
)

# ── Assessment ───────────────────────────────────────────────────────────────

# (answer keywords, interests added, skills added)
ASSESSMENT_RULES = [
    (("data", "analytics"),         ["Data Science", "Analytics"],                ["Statistics", "Data Analysis"]),
    (("design", "creative"),        ["UI/UX Design", "Creative Design"],          ["Design Thinking", "Prototyping"]),
    (("coding", "programming"),     ["Software Development"],                     ["Problem Solving", "Logic"]),
    (("strategic", "business"),     ["Product Management", "Business Strategy"],  ["Strategic Thinking", "Leadership"]),
]


def analyse_answers(answers: Dict[str, str]) -> AssessmentResult:
    """Derive extra skills and interests from questionnaire answers."""
    skills: List[str] = []
    interests: List[str] = []
    for answer in answers.values():
        lower = answer.lower()
        for keywords, add_interests, add_skills in ASSESSMENT_RULES:
            if any(k in lower for k in keywords):
                interests.extend(add_interests)
                skills.extend(add_skills)
    return AssessmentResult(
        skills=list(dict.fromkeys(skills)),
        interests=list(dict.fromkeys(interests)),
    )


# ── Chat ─────────────────────────────────────────────────────────────────────

GENERIC_ANSWER = (
    "That's a great question! I'm here to help you navigate your career journey. "
    "Based on your profile and goals, I can provide personalized advice on skills "
    "development, career transitions, and growth strategies. What specific aspect "
    "would you like to explore?"
)


def canned_answer(message: str, profile: Optional[Profile] = None) -> str:
    """Keyword-routed answer used when no text generator is available."""
    text = message.lower()
    interests = profile.interests if profile else []
    skills = profile.skills if profile else []

    if "salary" in text or "pay" in text:
        return ("Salaries vary by location and experience. Data Scientists typically earn "
                "$95k-$165k, while Full Stack Developers earn $75k-$130k. Focus on building "
                "strong skills first, and the compensation will follow!")
    if "interview" in text or "preparation" in text:
        return ("For interview prep, I recommend: 1) Practice coding problems on "
                "LeetCode/HackerRank, 2) Prepare STAR method stories for behavioral questions, "
                "3) Research the company and role thoroughly, 4) Practice explaining your "
                "projects clearly. Would you like specific tips for any career?")
    if "skill" in text or "learn" in text:
        focus = interests[0] if interests else "your interests"
        return (f"Based on your profile, I'd recommend focusing on {focus} first. Start with "
                "foundational concepts, then move to hands-on projects. Consistency is key - "
                "even 30 minutes daily makes a big difference!")
    if "project" in text or "portfolio" in text:
        return ("Great question! For your portfolio: 1) Choose projects that solve real "
                "problems, 2) Include a variety of skills, 3) Document your process and "
                "learnings, 4) Deploy your projects live, 5) Write clear README files. "
                "Quality over quantity!")
    if "time" in text or "long" in text:
        current = skills[0] if skills else "your field"
        return ("Career transitions typically take 6-12 months with consistent effort. The key "
                "is setting realistic milestones and celebrating small wins. Your current "
                f"skills in {current} are already valuable!")
    return GENERIC_ANSWER


# ── Parent summary ───────────────────────────────────────────────────────────

def _lakhs(amount: float) -> str:
    return f"₹{amount / 100_000:.1f}"


def parent_explanation(recommendations: Sequence[Recommendation]) -> Optional[str]:
    """Markdown letter to parents about the top student recommendation."""
    if not recommendations:
        return None
    top = recommendations[0]
    career = top.career

    lines = [
        "**Dear Parents,**",
        "",
        f"Based on your child's profile, we recommend **{career.title}** as the top career "
        "option. Here's why this is a smart choice:",
        "",
        "**Future Demand & Job Security:**",
        f"- {career.future_scope or career.description}",
        f"- Job demand: {career.job_demand.value.upper()}",
        "- " + ("This is an emerging field with excellent growth prospects."
                if career.emerging_field else "This is a stable field with consistent demand."),
    ]
    if career.salary_range is not None:
        india, abroad = career.salary_range.india, career.salary_range.abroad
        lines += [
            "",
            "**Earning Potential:**",
            f"- Starting salary: {_lakhs(india.min)} - {_lakhs(india.max)} lakhs per year",
            f"- International opportunities: {_lakhs(abroad.min)} - {_lakhs(abroad.max)} lakhs per year",
        ]
    lines += [
        "",
        "**Why This Matches Your Child:**",
        top.reasoning,
        "",
        "**Common Myths vs Reality:**",
        '- Myth: "Only engineering and medicine are good careers"',
        f"- Reality: Modern careers like {career.title} offer excellent growth and stability",
        '- Myth: "New fields are risky"',
        "- Reality: Emerging fields often provide the best opportunities for early career growth",
        "",
        "**Investment Required:**",
        f"- Duration: {career.duration or 'Varies'}",
        f"- Difficulty level: {career.difficulty.value}",
    ]
    if top.scholarships:
        lines.append(f"- {len(top.scholarships)} scholarship opportunities available")
    lines += [
        "",
        "This recommendation is based on your child's interests, academic performance, and "
        "market trends. We encourage you to support their passion while ensuring practical "
        "career success.",
    ]
    return "\n".join(lines)


# ── Skill-gap summary ────────────────────────────────────────────────────────

MAX_PRIORITY_SKILLS = 8


def summarise_skill_gaps(recommendations: Sequence[ScoredCareer]) -> SkillGapSummary:
    """
    Rank missing skills across recommendations. Better-ranked careers weigh
    more (weight = n - index); a skill missed by two or more careers is high
    priority.
    """
    counts: Dict[str, int] = {}
    weights: Dict[str, float] = {}
    n = len(recommendations)
    for index, rec in enumerate(recommendations):
        for skill in rec.missing_skills:
            counts[skill] = counts.get(skill, 0) + 1
            weights[skill] = weights.get(skill, 0) + (n - index)

    priority_skills = sorted(
        (
            PrioritySkill(
                skill=skill,
                count=count,
                importance=weights[skill] / count,
                priority=Tier.high if count >= 2 else Tier.medium,
            )
            for skill, count in counts.items()
        ),
        key=lambda p: p.importance,
        reverse=True,
    )[:MAX_PRIORITY_SKILLS]

    required = sum(len(r.career.required_skills) for r in recommendations)
    matched = sum(len(r.strength_skills) for r in recommendations)
    completion = round(matched / required * 100) if required else 0

    return SkillGapSummary(priority_skills=priority_skills, completion_rate=completion)
