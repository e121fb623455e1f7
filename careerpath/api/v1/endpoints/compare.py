"""
Career comparison endpoint.
"""
from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query

from careerpath.core.engine import engine
from careerpath.models.domain import Comparison

router = APIRouter()


def _require_engine():
    if not engine.is_loaded:
        raise HTTPException(503, "Career engine not ready.")


@router.get(
    "",
    response_model=Comparison,
    summary="Compare Two Careers",
    description=(
        "Side-by-side duration, difficulty, cost, job demand and salary "
        "analysis, plus an overall recommendation. 'winners' holds the id of "
        "the favoured career per factor (null when similar)."
    ),
)
async def compare_careers(
    career1: str = Query(..., description="First career id"),
    career2: str = Query(..., description="Second career id"),
    _=Depends(_require_engine),
):
    result = engine.compare_by_id(career1, career2)
    if not result.found:
        raise HTTPException(404, result.reason)
    return result.comparison
