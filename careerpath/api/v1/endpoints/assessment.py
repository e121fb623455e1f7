"""
Onboarding questionnaire.
"""
from __future__ import annotations

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from careerpath.core.advisor import analyse_answers
from careerpath.core.engine import engine
from careerpath.models.domain import AssessmentQuestion, AssessmentResult, QuestionCategory
from careerpath.models.schemas import AssessmentRequest

router = APIRouter()


def _require_engine():
    if not engine.is_loaded:
        raise HTTPException(503, "Career engine not ready.")


@router.get(
    "/questions",
    response_model=List[AssessmentQuestion],
    summary="Assessment Questions",
)
async def questions(
    category: Optional[QuestionCategory] = Query(None, description="interests | skills | personality"),
    _=Depends(_require_engine),
):
    items = engine.catalog.list_questions()
    if category:
        items = [q for q in items if q.category == category]
    return items


@router.post(
    "/analyse",
    response_model=AssessmentResult,
    summary="Analyse Answers",
    description="Map questionnaire answers to extra skills and interests for the profile.",
)
async def analyse(request: AssessmentRequest):
    return analyse_answers(request.answers)
