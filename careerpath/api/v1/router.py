"""API v1 router — assembles all endpoint sub-routers."""
from fastapi import APIRouter

from careerpath.api.v1.endpoints import advisor, assessment, careers, compare, dashboard, roadmap, scholarships

api_router = APIRouter()

api_router.include_router(careers.router,      prefix="/careers",      tags=["Careers"])
api_router.include_router(roadmap.router,      prefix="/roadmap",      tags=["Roadmap"])
api_router.include_router(compare.router,      prefix="/compare",      tags=["Compare"])
api_router.include_router(scholarships.router, prefix="/scholarships", tags=["Scholarships"])
api_router.include_router(assessment.router,   prefix="/assessment",   tags=["Assessment"])
api_router.include_router(advisor.router,      prefix="/advisor",      tags=["Advisor"])
api_router.include_router(dashboard.router,    prefix="/dashboard",    tags=["Dashboard"])
