"""
Career recommendation and catalog endpoints.
"""
from __future__ import annotations

import time
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from careerpath.core.advisor import parent_explanation
from careerpath.core.engine import engine
from careerpath.models.domain import CareerDefinition, ProfileKind
from careerpath.models.schemas import (
    CareerListResponse,
    RecommendRequest,
    RecommendResponse,
    Track,
)

router = APIRouter()


def _require_engine():
    if not engine.is_loaded:
        raise HTTPException(503, "Career engine is not yet loaded. Try again in a moment.")


@router.post(
    "/recommend",
    response_model=RecommendResponse,
    summary="Ranked Career Recommendations",
    description=(
        "Score the profile against the matching catalog "
        "(general careers, or student paths after the eligibility gate), "
        "rank by match score and return the top N with skill partitions and reasoning. "
        "Student recommendations also carry an education roadmap and scholarships."
    ),
)
async def recommend_careers(
    request: RecommendRequest,
    _=Depends(_require_engine),
):
    t0 = time.perf_counter()
    profile = request.profile
    if request.enrich_reasoning:
        recommendations = await engine.recommend_enriched(profile, n=request.n_recommendations)
    else:
        recommendations = engine.recommend(profile, n=request.n_recommendations)

    parent_summary = None
    if profile.kind == ProfileKind.student and profile.parent_mode:
        parent_summary = parent_explanation(recommendations)

    return RecommendResponse(
        recommendations=recommendations,
        profile_kind=profile.kind.value,
        parent_summary=parent_summary,
        meta={
            "n_requested":     request.n_recommendations,
            "n_returned":      len(recommendations),
            "text_generation": engine.text_generator is not None,
            "total_ms":        round((time.perf_counter() - t0) * 1000, 1),
        },
    )


@router.get(
    "/",
    response_model=CareerListResponse,
    summary="List Careers",
    description="Return the general career catalog, the student paths, or both.",
)
async def list_careers(
    track:    Optional[Track] = Query(None, description="general | student"),
    industry: Optional[str]   = Query(None),
    search:   Optional[str]   = Query(None, description="Case-insensitive title search"),
    _=Depends(_require_engine),
):
    catalog = engine.catalog
    if track == Track.general:
        careers = catalog.list_careers()
    elif track == Track.student:
        careers = catalog.list_student_careers()
    else:
        careers = catalog.list_careers() + catalog.list_student_careers()

    if industry:
        careers = [c for c in careers if c.industry.lower() == industry.lower()]
    if search:
        careers = [c for c in careers if search.lower() in c.title.lower()]

    return CareerListResponse(careers=careers, total=len(careers), track=track)


@router.get(
    "/{career_id}",
    response_model=CareerDefinition,
    summary="Get Career Details",
)
async def get_career(career_id: str, _=Depends(_require_engine)):
    career = engine.catalog.get_career(career_id)
    if career is None:
        raise HTTPException(404, f"Career '{career_id}' not found.")
    return career
