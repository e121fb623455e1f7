"""
Pydantic schemas for all API request and response models.
"""
from __future__ import annotations

from enum import Enum
from typing import Dict, List, Optional

from pydantic import BaseModel, Field, field_validator, model_validator

from careerpath.models.domain import (
    CareerDefinition,
    CareerDemandData,
    GovernmentScheme,
    Profile,
    Recommendation,
    RoadmapStage,
    Scholarship,
    SkillProgram,
)


# ── Enums ─────────────────────────────────────────────────────────────────────

class Track(str, Enum):
    general = "general"
    student = "student"


# ── Request models ────────────────────────────────────────────────────────────

class RecommendRequest(BaseModel):
    profile: Profile
    n_recommendations: int = Field(
        default=3, ge=1, le=20,
        description="Number of career recommendations to return"
    )
    enrich_reasoning: bool = Field(
        default=True,
        description="Ask the text generator (when configured) to rewrite the top pick's reasoning"
    )


class RoadmapRequest(BaseModel):
    """
    Either a profile (missing skills are derived from the career's required
    skills) or an explicit ``missing_skills`` list must be given.
    """
    career:         str = Field(..., description="Career id or title")
    profile:        Optional[Profile] = None
    missing_skills: Optional[List[str]] = Field(
        None, description="Skills to learn, in priority order; overrides the profile-derived gap"
    )

    @field_validator("career", mode="before")
    @classmethod
    def clean_career(cls, v):
        return str(v).strip() if v else ""

    @model_validator(mode="after")
    def profile_or_skills(self):
        if self.profile is None and self.missing_skills is None:
            raise ValueError("Provide either 'profile' or 'missing_skills'")
        return self


class StudentRoadmapRequest(BaseModel):
    career_id: str
    profile:   Profile


class RegenerateRequest(BaseModel):
    career:         str
    profile:        Profile
    previous:       List[RoadmapStage] = Field(default_factory=list)
    keep_completed: bool = Field(
        default=False, description="Carry completion flags over from 'previous' by stage title"
    )


class ProgressRequest(BaseModel):
    stages: List[RoadmapStage]


class ScholarshipRequest(BaseModel):
    profile:   Profile
    career_id: str


class SchemesRequest(BaseModel):
    profile: Optional[Profile] = None


class AssessmentRequest(BaseModel):
    answers: Dict[str, str] = Field(..., description="Question id → chosen option")


class ChatRequest(BaseModel):
    message: str = Field(..., min_length=1)
    profile: Optional[Profile] = None

    @field_validator("message", mode="before")
    @classmethod
    def clean_message(cls, v):
        return str(v).strip() if v else ""


class RecommendationsRequest(BaseModel):
    recommendations: List[Recommendation]


# ── Response models ───────────────────────────────────────────────────────────

class RecommendResponse(BaseModel):
    recommendations: List[Recommendation]
    profile_kind:    str
    parent_summary:  Optional[str] = None
    meta: dict = Field(default_factory=dict)


class CareerListResponse(BaseModel):
    careers: List[CareerDefinition]
    total:   int
    track:   Optional[Track] = None


class ScholarshipResponse(BaseModel):
    career_id:    str
    scholarships: List[Scholarship]
    total:        int


class SchemesResponse(BaseModel):
    schemes: List[GovernmentScheme]
    total:   int


class DemandResponse(BaseModel):
    career_id: str
    demand:    CareerDemandData


class SkillProgramsResponse(BaseModel):
    skill:    Optional[str] = None
    programs: List[SkillProgram]
    total:    int


class ChatResponse(BaseModel):
    answer: str


class ParentSummaryResponse(BaseModel):
    summary: Optional[str] = None


class EngineStatus(BaseModel):
    loaded:          bool
    careers:         int
    student_careers: int
    resources:       int
    text_generation: bool


class HealthResponse(BaseModel):
    status: str
    engine: EngineStatus
