"""
Domain models shared by the recommendation core: profiles, catalog entries,
and everything derived from scoring a profile against the catalog.
"""
from __future__ import annotations

from enum import Enum
from typing import Dict, List, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


# ── Enums ─────────────────────────────────────────────────────────────────────

class ProfileKind(str, Enum):
    general = "general"
    student = "student"


class Stream(str, Enum):
    science    = "science"
    commerce   = "commerce"
    arts       = "arts"
    vocational = "vocational"


class StudentClass(str, Enum):
    class_10 = "10"
    class_12 = "12"
    graduate = "graduate"


class Tier(str, Enum):
    low    = "low"
    medium = "medium"
    high   = "high"


class Difficulty(str, Enum):
    easy   = "easy"
    medium = "medium"
    hard   = "hard"


class StageType(str, Enum):
    skill         = "skill"
    project       = "project"
    certification = "certification"
    experience    = "experience"


class ResourceType(str, Enum):
    course        = "course"
    tutorial      = "tutorial"
    certification = "certification"
    book          = "book"
    practice      = "practice"


class Cost(str, Enum):
    free = "free"
    paid = "paid"


class SkillLevel(str, Enum):
    beginner     = "beginner"
    intermediate = "intermediate"
    advanced     = "advanced"


class CourseMode(str, Enum):
    online  = "online"
    offline = "offline"
    hybrid  = "hybrid"


class QuestionCategory(str, Enum):
    interests   = "interests"
    skills      = "skills"
    personality = "personality"


class SchemeCategory(str, Enum):
    scholarship       = "scholarship"
    skill_development = "skill_development"
    employment        = "employment"


# ── Profile ───────────────────────────────────────────────────────────────────

class Marks(BaseModel):
    overall:      float = Field(default=0.0, ge=0, le=100, description="Overall percentage")
    subject_wise: Dict[str, float] = Field(default_factory=dict)


class Goals(BaseModel):
    salary_expectation: Optional[str]  = Field(None, description="Free-text bucket, e.g. 'high (10+ LPA)'")
    study_abroad:       bool           = False
    preferred_location: Optional[str]  = None
    work_life_balance:  Optional[Tier] = None


class Profile(BaseModel):
    """
    Normalised user input. One type covers both the general (working
    professional / graduate) shape and the student shape; ``kind`` selects
    which scoring algorithm applies.
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    kind:  ProfileKind = ProfileKind.general
    name:  str
    email: str

    skills:             List[str] = Field(default_factory=list)
    interests:          List[str] = Field(default_factory=list)
    personality_traits: List[str] = Field(default_factory=list)

    # General
    education:     str           = ""
    year_of_study: Optional[str] = None
    experience:    Optional[str] = None
    career_goals:  Optional[str] = None

    # Student
    student_class:  Optional[StudentClass] = Field(
        None, validation_alias=AliasChoices("student_class", "class")
    )
    current_stream: Optional[Stream] = None
    subjects:       List[str] = Field(default_factory=list)
    marks:          Marks = Field(default_factory=Marks)
    parent_mode:    bool = False

    goals: Goals = Field(default_factory=Goals)


# ── Catalog ───────────────────────────────────────────────────────────────────

class SalaryBand(BaseModel):
    min: float = 0
    max: float = 0


class SalaryRange(BaseModel):
    india:    SalaryBand
    abroad:   SalaryBand = Field(default_factory=SalaryBand)
    currency: str = "INR"


class Eligibility(BaseModel):
    stream:        List[Stream]
    subjects:      List[str] = Field(default_factory=list)
    minimum_marks: float = 0


class Course(BaseModel):
    id:       str
    title:    str
    provider: str
    type:     CourseMode
    cost:     Cost
    duration: str
    url:      str
    rating:   float


class CareerDefinition(BaseModel):
    model_config = ConfigDict(frozen=True)

    id:              str
    title:           str
    description:     str
    required_skills: List[str] = Field(..., min_length=1)
    industry:        str = ""

    # General-catalog metadata
    average_salary:       Optional[str] = None
    growth_rate:          str = ""
    experience_level:     Optional[str] = None
    education:            List[str] = Field(default_factory=list)
    key_responsibilities: List[str] = Field(default_factory=list)
    work_environment:     Optional[str] = None
    job_outlook:          Optional[str] = None

    # Student-catalog metadata
    eligibility:         Optional[Eligibility] = None
    future_scope:        str = ""
    job_opportunities:   List[str] = Field(default_factory=list)
    salary_range:        Optional[SalaryRange] = None
    entrance_exams:      List[str] = Field(default_factory=list)
    qualifications:      List[str] = Field(default_factory=list)
    recommended_courses: List[Course] = Field(default_factory=list)

    duration:       str = ""
    difficulty:     Difficulty = Difficulty.medium
    job_demand:     Tier = Tier.medium
    emerging_field: bool = False
    cost_tier:      Optional[int] = Field(None, ge=1, le=3, description="1 cheap … 3 expensive")


class Resource(BaseModel):
    id:         str
    title:      str
    url:        str
    type:       ResourceType
    provider:   str
    duration:   str
    cost:       Cost
    rating:     float
    difficulty: SkillLevel


class AssessmentQuestion(BaseModel):
    id:       str
    question: str
    options:  List[str]
    category: QuestionCategory


class Scholarship(BaseModel):
    name:            str
    eligibility:     List[str]
    amount:          str
    deadline:        str
    application_url: str
    min_marks:       float = Field(default=0, description="Merit cutoff, inclusive")
    career_keywords: List[str] = Field(default_factory=list)


class GovernmentScheme(BaseModel):
    id:              str
    name:            str
    description:     str
    eligibility:     List[str]
    amount:          str
    deadline:        str
    application_url: str
    category:        SchemeCategory
    target_audience: List[str]


class SkillProgram(BaseModel):
    id:              str
    name:            str
    description:     str
    duration:        str
    cost:            str
    provider:        str
    skills:          List[str]
    certification:   str
    application_url: str


class DemandSalary(BaseModel):
    min:      float
    max:      float
    currency: str = "INR"


class CareerDemandData(BaseModel):
    career:                 str
    demand_score:           float
    salary_range:           DemandSalary
    job_growth:             float
    skills_in_demand:       List[str]
    top_locations:          List[str]
    government_initiatives: List[str]


class JobMarketData(BaseModel):
    skill:             str
    demand_trend:      float = Field(..., description="Percentage change")
    average_salary:    str
    job_openings:      int
    growth_projection: str
    top_companies:     List[str]
    locations:         List[str]


# ── Derived ───────────────────────────────────────────────────────────────────

class RoadmapStage(BaseModel):
    id:          str
    title:       str
    description: str
    duration:    str
    priority:    Tier
    type:        StageType
    resources:   List[Resource] = Field(default_factory=list)
    completed:   bool = False


class StudentRoadmapStage(BaseModel):
    stage:        str
    duration:     str
    description:  str
    requirements: List[str]
    next_options: List[str]


class ScoredCareer(BaseModel):
    career:          CareerDefinition
    match_score:     float = Field(..., ge=0.0, le=1.0)
    missing_skills:  List[str]
    strength_skills: List[str]
    reasoning:       str = Field(..., min_length=1)


class Recommendation(ScoredCareer):
    roadmap:      List[StudentRoadmapStage] = Field(default_factory=list)
    scholarships: List[Scholarship] = Field(default_factory=list)


class RoadmapResult(BaseModel):
    career_id:    Optional[str] = None
    career_title: str
    found:        bool
    reason:       Optional[str] = None
    stages:       List[RoadmapStage]


class StudentRoadmapResult(BaseModel):
    career_id: str
    found:     bool
    reason:    Optional[str] = None
    stages:    List[StudentRoadmapStage] = Field(default_factory=list)


class RoadmapProgress(BaseModel):
    completed:  int
    total:      int
    percentage: float


class Comparison(BaseModel):
    career1:        CareerDefinition
    career2:        CareerDefinition
    duration:       str
    difficulty:     str
    cost:           str
    job_demand:     str
    salary:         str
    recommendation: str
    winners:        Dict[str, Optional[str]] = Field(
        default_factory=dict,
        description="Per-factor id of the favoured career, None when similar",
    )


class ComparisonResult(BaseModel):
    found:      bool
    reason:     Optional[str] = None
    comparison: Optional[Comparison] = None


class PrioritySkill(BaseModel):
    skill:      str
    count:      int
    importance: float
    priority:   Tier


class SkillGapSummary(BaseModel):
    priority_skills: List[PrioritySkill]
    completion_rate: int = Field(..., description="Matched / required skills across recommendations, %")


class AssessmentResult(BaseModel):
    skills:    List[str]
    interests: List[str]
