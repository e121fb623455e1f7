"""
Dashboard endpoint — aggregated catalog insights for charts.
Covers: demand and difficulty distribution, industry summary, emerging careers,
salary leaderboard and job-market employment trends.
"""
from __future__ import annotations

from typing import Optional

import numpy as np
import pandas as pd

from fastapi import APIRouter, Depends, HTTPException, Query

from careerpath.core.comparator import salary_midpoint
from careerpath.core.engine import engine
from careerpath.models.schemas import Track


def _sf(val, default=0.0):
    """
    Safe float: NaN, Inf, None and non-numeric values become ``default``.
    Careers without a salary range produce NaN midpoints in the frame.
    """
    if val is None:
        return default
    try:
        f = float(val)
        return default if (np.isnan(f) or np.isinf(f)) else f
    except (TypeError, ValueError):
        return default


def _catalog_frame(track: Optional[Track]) -> pd.DataFrame:
    catalog = engine.catalog
    rows = []
    for name, careers in (
        (Track.general.value, catalog.list_careers()),
        (Track.student.value, catalog.list_student_careers()),
    ):
        if track is not None and track.value != name:
            continue
        for c in careers:
            rows.append({
                "id":              c.id,
                "title":           c.title,
                "track":           name,
                "industry":        c.industry or "Unspecified",
                "job_demand":      c.job_demand.value,
                "difficulty":      c.difficulty.value,
                "emerging_field":  c.emerging_field,
                "required_skills": len(c.required_skills),
                "salary_mid":      salary_midpoint(c) if c.salary_range else np.nan,
            })
    return pd.DataFrame(rows)


router = APIRouter()


def _require_engine():
    if not engine.is_loaded:
        raise HTTPException(503, "Career engine not ready.")


@router.get(
    "/",
    summary="Full Dashboard Data",
    description=(
        "Returns all data needed to render the dashboard: demand and difficulty "
        "distribution, industry summary, emerging careers, salary leaderboard "
        "and employment trends."
    ),
)
async def get_dashboard(
    track: Optional[Track] = Query(None, description="general | student"),
    top_n: int = Query(5, ge=1, le=20),
    _=Depends(_require_engine),
):
    df = _catalog_frame(track)
    if df.empty:
        raise HTTPException(404, "No careers in the selected track.")

    # ── 1. Demand / difficulty distribution ───────────────────────────────────
    demand_dist = {k: int(v) for k, v in df["job_demand"].value_counts().to_dict().items()}
    difficulty_dist = {k: int(v) for k, v in df["difficulty"].value_counts().to_dict().items()}

    # ── 2. Industry summary ───────────────────────────────────────────────────
    industries = []
    for industry, group in df.groupby("industry"):
        industries.append({
            "industry":       str(industry),
            "career_count":   int(len(group)),
            "emerging_count": int(group["emerging_field"].sum()),
            "high_demand":    int((group["job_demand"] == "high").sum()),
        })
    industries.sort(key=lambda x: x["career_count"], reverse=True)

    # ── 3. Emerging careers ───────────────────────────────────────────────────
    emerging = [
        {
            "id":         row["id"],
            "title":      row["title"],
            "track":      row["track"],
            "job_demand": row["job_demand"],
        }
        for _, row in df[df["emerging_field"]].iterrows()
    ]

    # ── 4. Salary leaderboard (India midpoint) ────────────────────────────────
    leaderboard = []
    salaried = df.dropna(subset=["salary_mid"])
    for _, row in salaried.nlargest(top_n, "salary_mid").iterrows():
        leaderboard.append({
            "id":         row["id"],
            "title":      row["title"],
            "salary_mid": round(_sf(row["salary_mid"]), 0),
            "job_demand": row["job_demand"],
        })

    # ── 5. Employment trends ──────────────────────────────────────────────────
    employment = []
    market = await engine.employment()
    if market:
        em_df = pd.DataFrame([m.model_dump() for m in market])
        for _, row in em_df.sort_values("demand_trend", ascending=False).iterrows():
            employment.append({
                "skill":             row["skill"],
                "demand_trend":      round(_sf(row["demand_trend"]), 1),
                "job_openings":      int(row["job_openings"]),
                "growth_projection": row["growth_projection"],
            })

    # ── 6. Summary stats ──────────────────────────────────────────────────────
    summary = {
        "total_careers":      int(len(df)),
        "total_industries":   int(df["industry"].nunique()),
        "emerging_count":     int(df["emerging_field"].sum()),
        "high_demand_count":  int((df["job_demand"] == "high").sum()),
        "avg_required_skills": round(_sf(df["required_skills"].mean()), 1),
        "avg_salary_mid":     round(_sf(salaried["salary_mid"].mean()), 0),
    }

    return {
        "summary":            summary,
        "demand_dist":        demand_dist,
        "difficulty_dist":    difficulty_dist,
        "industries":         industries,
        "emerging_careers":   emerging,
        "salary_leaderboard": leaderboard,
        "employment":         employment,
        "filters_applied":    {"track": track.value if track else None},
    }
