"""
Advisor endpoints: career chat, parent summary and skill-gap summary.
"""
from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from careerpath.core.advisor import parent_explanation, summarise_skill_gaps
from careerpath.core.engine import engine
from careerpath.models.domain import SkillGapSummary
from careerpath.models.schemas import (
    ChatRequest,
    ChatResponse,
    ParentSummaryResponse,
    RecommendationsRequest,
)

router = APIRouter()


def _require_engine():
    if not engine.is_loaded:
        raise HTTPException(503, "Career engine not ready.")


@router.post(
    "/chat",
    response_model=ChatResponse,
    summary="Career Chat",
    description="Answer from the text generator when configured, otherwise a keyword-routed canned answer.",
)
async def chat(request: ChatRequest, _=Depends(_require_engine)):
    answer = await engine.answer_question(request.message, request.profile)
    return ChatResponse(answer=answer)


@router.post(
    "/parent-summary",
    response_model=ParentSummaryResponse,
    summary="Explanation for Parents",
)
async def parent_summary(request: RecommendationsRequest):
    return ParentSummaryResponse(summary=parent_explanation(request.recommendations))


@router.post(
    "/skill-gaps",
    response_model=SkillGapSummary,
    summary="Priority Skills Across Recommendations",
)
async def skill_gaps(request: RecommendationsRequest):
    return summarise_skill_gaps(request.recommendations)
