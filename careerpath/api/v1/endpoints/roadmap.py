"""
Skill-gap learning roadmaps and student education paths.
"""
from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from careerpath.core.engine import engine
from careerpath.core.roadmap import roadmap_progress
from careerpath.models.domain import RoadmapProgress, RoadmapResult, StudentRoadmapResult
from careerpath.models.schemas import (
    ProgressRequest,
    RegenerateRequest,
    RoadmapRequest,
    StudentRoadmapRequest,
)

router = APIRouter()


def _require_engine():
    if not engine.is_loaded:
        raise HTTPException(503, "Career engine not ready.")


@router.post(
    "/generate",
    response_model=RoadmapResult,
    summary="Generate Learning Roadmap",
    description=(
        "Build up to three 'Master {skill}' stages followed by portfolio, "
        "certification and experience stages. With an explicit missing-skill "
        "list any career title is accepted; with a profile the career must be "
        "in the catalog."
    ),
)
async def generate_roadmap(request: RoadmapRequest, _=Depends(_require_engine)):
    if request.missing_skills is not None:
        return engine.generate_roadmap(request.career, request.missing_skills, request.profile)

    result = engine.roadmap_for(request.career, request.profile)
    if not result.found:
        raise HTTPException(404, result.reason)
    return result


@router.post(
    "/student",
    response_model=StudentRoadmapResult,
    summary="Student Education Roadmap",
    description="Class 11-12 → entrance preparation → higher education → career start → growth.",
)
async def student_roadmap(request: StudentRoadmapRequest, _=Depends(_require_engine)):
    result = engine.generate_student_roadmap(request.career_id, request.profile)
    if not result.found:
        raise HTTPException(404, result.reason)
    return result


@router.post(
    "/regenerate",
    response_model=RoadmapResult,
    summary="Regenerate Roadmap",
    description=(
        "Rebuild the roadmap from the current profile. Completion flags are "
        "reset unless keep_completed is set."
    ),
)
async def regenerate_roadmap(request: RegenerateRequest, _=Depends(_require_engine)):
    result = engine.regenerate(
        request.career,
        request.profile,
        previous=request.previous,
        keep_completed=request.keep_completed,
    )
    if not result.found:
        raise HTTPException(404, result.reason)
    return result


@router.post(
    "/progress",
    response_model=RoadmapProgress,
    summary="Roadmap Progress",
)
async def progress(request: ProgressRequest):
    return roadmap_progress(request.stages)
