"""
Scholarships, government schemes, skill programmes and career demand.
"""
from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from careerpath.core.engine import engine
from careerpath.models.schemas import (
    DemandResponse,
    ScholarshipRequest,
    ScholarshipResponse,
    SchemesRequest,
    SchemesResponse,
    SkillProgramsResponse,
)

router = APIRouter()


def _require_engine():
    if not engine.is_loaded:
        raise HTTPException(503, "Career engine not ready.")


@router.post(
    "/",
    response_model=ScholarshipResponse,
    summary="Scholarships for a Career",
    description="Scholarships whose merit cutoff the student meets and whose field fits the career.",
)
async def scholarships(request: ScholarshipRequest, _=Depends(_require_engine)):
    found = engine.scholarships_for(request.profile, request.career_id)
    if found is None:
        raise HTTPException(404, f"Career '{request.career_id}' not found.")
    return ScholarshipResponse(career_id=request.career_id, scholarships=found, total=len(found))


@router.post(
    "/schemes",
    response_model=SchemesResponse,
    summary="Government Schemes",
    description="Schemes relevant to the profile; every scheme when no profile is given.",
)
async def schemes(request: SchemesRequest, _=Depends(_require_engine)):
    found = await engine.schemes(request.profile)
    return SchemesResponse(schemes=found, total=len(found))


@router.get(
    "/demand/{career_id}",
    response_model=DemandResponse,
    summary="Career Demand Data",
)
async def demand(career_id: str, _=Depends(_require_engine)):
    data = await engine.demand(career_id)
    if data is None:
        raise HTTPException(404, f"No demand data for '{career_id}'.")
    return DemandResponse(career_id=career_id, demand=data)


@router.get(
    "/skill-programs",
    response_model=SkillProgramsResponse,
    summary="Government Skill Development Programmes",
    description="Every programme, or only those teaching a skill that overlaps `skill`.",
)
async def skill_programs(
    skill: Optional[str] = Query(None, description="e.g. Python, AWS"),
    _=Depends(_require_engine),
):
    found = await engine.skill_programs(skill)
    return SkillProgramsResponse(skill=skill, programs=found, total=len(found))
