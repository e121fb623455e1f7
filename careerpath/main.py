"""
ASGI entry point for the CareerPath service.

    uvicorn careerpath.main:app --reload

The engine singleton is loaded once in the lifespan hook; every API route
lives under ``settings.API_V1_STR`` and ``/health`` reports catalog sizes.
"""

from __future__ import annotations

import logging
import time
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse

from careerpath.api.v1.router import api_router
from careerpath.core.config import settings
from careerpath.core.engine import engine
from careerpath.models.schemas import EngineStatus, HealthResponse

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Tests load the engine with their own random source first; keep theirs.
    if not engine.is_loaded:
        logger.info("Loading career catalog from %s", settings.DATA_DIR)
        engine.load()
    yield
    logger.info("CareerPath engine stopped")


async def _time_request(request: Request, call_next):
    started = time.perf_counter()
    response = await call_next(request)
    elapsed_ms = (time.perf_counter() - started) * 1000
    response.headers["X-Process-Time"] = f"{elapsed_ms:.1f}ms"
    return response


async def _unhandled_error(request: Request, exc: Exception):
    logger.exception("Unhandled %s on %s %s", type(exc).__name__,
                     request.method, request.url.path)
    return JSONResponse(
        status_code=500,
        content={"error": "Internal server error", "detail": str(exc),
                 "path": request.url.path},
    )


def _install_middleware(application: FastAPI) -> None:
    application.add_middleware(GZipMiddleware, minimum_size=1000)
    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.ALLOWED_ORIGINS,
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )
    application.middleware("http")(_time_request)
    application.add_exception_handler(Exception, _unhandled_error)


def create_app() -> FastAPI:
    application = FastAPI(
        title=settings.PROJECT_NAME,
        description=settings.PROJECT_DESCRIPTION,
        version=settings.VERSION,
        lifespan=lifespan,
    )
    _install_middleware(application)
    application.include_router(api_router, prefix=settings.API_V1_STR)
    return application


app = create_app()


# ── Service status ────────────────────────────────────────────────────────────

@app.get("/", tags=["Health"])
async def root():
    return {
        "service": settings.PROJECT_NAME,
        "version": settings.VERSION,
        "status": "operational",
        "engine_loaded": engine.is_loaded,
        "docs": app.docs_url,
    }


@app.get("/health", tags=["Health"], response_model=HealthResponse)
async def health_check():
    return HealthResponse(
        status="healthy" if engine.is_loaded else "loading",
        engine=EngineStatus(
            loaded=engine.is_loaded,
            careers=engine.career_count,
            student_careers=engine.student_career_count,
            resources=engine.resource_count,
            text_generation=engine.text_generator is not None,
        ),
    )
