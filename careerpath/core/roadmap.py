"""
Roadmap generation.

General flow: one "Master {skill}" stage per missing skill (first three, in the
order received), then a fixed project → certification → experience tail.

Student flow: education stages built from career metadata (optional
Class 11-12, optional entrance preparation, then higher education, career start
and career growth).
"""
from __future__ import annotations

from typing import Iterable, List, Optional, Sequence

from careerpath.core.matching import labels_overlap
from careerpath.models.domain import (
    CareerDefinition,
    Profile,
    Resource,
    ResourceType,
    RoadmapProgress,
    RoadmapStage,
    StageType,
    StudentClass,
    StudentRoadmapStage,
    Tier,
)

SKILL_DURATIONS = {
    "python":             "4-6 weeks",
    "javascript":         "6-8 weeks",
    "react":              "3-4 weeks",
    "node.js":            "3-4 weeks",
    "sql":                "2-3 weeks",
    "machine learning":   "8-12 weeks",
    "statistics":         "6-8 weeks",
    "data visualization": "2-3 weeks",
    "html":               "1-2 weeks",
    "css":                "2-3 weeks",
    "git":                "1-2 weeks",
}
DEFAULT_SKILL_DURATION = "3-4 weeks"

MAX_SKILL_STAGES = 3
HIGH_PRIORITY_SKILL_STAGES = 2
RESOURCES_PER_STAGE = 2


def skill_duration(skill: str) -> str:
    return SKILL_DURATIONS.get(skill.strip().lower(), DEFAULT_SKILL_DURATION)


def _has_entrance_exams(career: CareerDefinition) -> bool:
    # Catalog entries use "No ... entrance exams" as a placeholder
    return bool(career.entrance_exams) and not career.entrance_exams[0].lower().startswith("no ")


class RoadmapGenerator:
    """Builds roadmap stages; holds the resource catalog it attaches from."""

    def __init__(self, resources: Sequence[Resource], max_skill_stages: int = MAX_SKILL_STAGES):
        self.resources = list(resources)
        self.max_skill_stages = max_skill_stages

    # ────────────────────────────────────────────────────────────────────────
    # GENERAL FLOW
    # ────────────────────────────────────────────────────────────────────────

    def generate(self, career_title: str, missing_skills: Sequence[str],
                 profile: Optional[Profile] = None) -> List[RoadmapStage]:
        """
        Stage count is ``min(max_skill_stages, len(missing_skills)) + 3``.
        ``profile`` is accepted for symmetry with the student flow; the general
        stages do not depend on it.
        """
        stages: List[RoadmapStage] = []
        career_lower = career_title.lower()

        for skill in list(missing_skills)[: self.max_skill_stages]:
            stages.append(RoadmapStage(
                id=f"step-{len(stages) + 1}",
                title=f"Master {skill}",
                description=(
                    f"Learn the fundamentals of {skill} through structured courses "
                    f"and hands-on practice."
                ),
                duration=skill_duration(skill),
                priority=Tier.high if len(stages) < HIGH_PRIORITY_SKILL_STAGES else Tier.medium,
                type=StageType.skill,
                resources=self.resources_for_skill(skill),
            ))

        stages.append(RoadmapStage(
            id=f"step-{len(stages) + 1}",
            title="Build Portfolio Projects",
            description=f"Create 2-3 projects that showcase your new skills in {career_lower}.",
            duration="6-8 weeks",
            priority=Tier.high,
            type=StageType.project,
        ))
        stages.append(RoadmapStage(
            id=f"step-{len(stages) + 1}",
            title="Get Industry Certification",
            description=f"Pursue relevant certifications to validate your expertise in {career_lower}.",
            duration="2-3 months",
            priority=Tier.medium,
            type=StageType.certification,
            resources=self.certification_resources(),
        ))
        stages.append(RoadmapStage(
            id=f"step-{len(stages) + 1}",
            title="Gain Practical Experience",
            description="Apply for internships, freelance projects, or contribute to open source projects.",
            duration="3-6 months",
            priority=Tier.high,
            type=StageType.experience,
        ))
        return stages

    def resources_for_skill(self, skill: str) -> List[Resource]:
        return [r for r in self.resources if labels_overlap(r.title, skill)][:RESOURCES_PER_STAGE]

    def certification_resources(self) -> List[Resource]:
        return [r for r in self.resources if r.type == ResourceType.certification][:RESOURCES_PER_STAGE]

    # ────────────────────────────────────────────────────────────────────────
    # STUDENT FLOW
    # ────────────────────────────────────────────────────────────────────────

    def generate_student(self, profile: Profile,
                         career: CareerDefinition) -> List[StudentRoadmapStage]:
        stages: List[StudentRoadmapStage] = []
        elig = career.eligibility

        if profile.student_class == StudentClass.class_10 and elig is not None:
            stream = elig.stream[0].value if elig.stream else "a suitable"
            stages.append(StudentRoadmapStage(
                stage="Class 11-12",
                duration="2 years",
                description=f"Choose {stream} stream with subjects: {', '.join(elig.subjects)}",
                requirements=["Minimum 75% in Class 10",
                              f"Focus on {' and '.join(elig.subjects[:2])}"],
                next_options=["Entrance exam preparation", "Skill development courses"],
            ))

        if _has_entrance_exams(career):
            minimum = elig.minimum_marks if elig else 0
            stages.append(StudentRoadmapStage(
                stage="Entrance Preparation",
                duration="1-2 years",
                description=f"Prepare for {' or '.join(career.entrance_exams[:2])}",
                requirements=[f"Class 12 with {minimum:g}%+", "Coaching/Self-study"],
                next_options=["College admission", "Backup options"],
            ))

        qualification = career.qualifications[0] if career.qualifications else f"a degree for {career.title}"
        first_role = career.job_opportunities[0] if career.job_opportunities else career.title
        senior_role = career.job_opportunities[-1] if career.job_opportunities else f"senior {career.title}"

        stages.append(StudentRoadmapStage(
            stage="Higher Education",
            duration=career.duration,
            description=f"Complete {qualification}",
            requirements=["Regular attendance", "Good academic performance", "Practical experience"],
            next_options=["Job placement", "Higher studies", "Entrepreneurship"],
        ))
        stages.append(StudentRoadmapStage(
            stage="Career Start",
            duration="1-2 years",
            description=f"Begin as {first_role}",
            requirements=["Internships", "Portfolio/Projects", "Networking"],
            next_options=["Specialization", "Leadership roles", "Freelancing"],
        ))
        stages.append(StudentRoadmapStage(
            stage="Career Growth",
            duration="5+ years",
            description=f"Advance to {senior_role}",
            requirements=["Continuous learning", "Professional certifications", "Leadership skills"],
            next_options=["Senior management", "Consulting", "Teaching/Training"],
        ))
        return stages


# ── Completion state ─────────────────────────────────────────────────────────

def carry_completion(previous: Iterable[RoadmapStage],
                     regenerated: Iterable[RoadmapStage]) -> List[RoadmapStage]:
    """
    Copy ``completed`` flags from a previous roadmap onto a regenerated one,
    matching stages by title. Regeneration itself never does this.
    """
    done = {s.title for s in previous if s.completed}
    return [s.model_copy(update={"completed": s.title in done}) for s in regenerated]


def roadmap_progress(stages: Sequence[RoadmapStage]) -> RoadmapProgress:
    total = len(stages)
    completed = sum(1 for s in stages if s.completed)
    return RoadmapProgress(
        completed=completed,
        total=total,
        percentage=round(completed / total * 100, 1) if total else 0.0,
    )
