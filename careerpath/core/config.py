"""Application configuration — reads from environment variables."""
from __future__ import annotations

from pathlib import Path
from typing import List, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # ── Project metadata ──────────────────────────────────────────────────────
    PROJECT_NAME: str = "CareerPath Recommendation Service"
    PROJECT_DESCRIPTION: str = (
        "Career recommendations from a self-reported profile, skill-gap "
        "roadmaps, side-by-side career comparison, and scholarship lookup. "
        "Covers both working professionals and school students (Indian streams)."
    )
    VERSION: str = "1.0.0"
    API_V1_STR: str = "/api/v1"

    # ── CORS ──────────────────────────────────────────────────────────────────
    ALLOWED_ORIGINS: List[str] = ["*"]  # Restrict in production

    # ── Catalog (bundled JSON, loaded once at start-up) ───────────────────────
    DATA_DIR: Path = Path(__file__).resolve().parent.parent / "data"

    # ── Recommendation settings ───────────────────────────────────────────────
    TOP_N_RECOMMENDATIONS: int = 3
    MAX_ROADMAP_SKILLS: int = 3
    SCORE_PERTURBATION: float = 0.2
    RANDOM_SEED: Optional[int] = None

    # ── Text generation (OpenAI-compatible chat endpoint, optional) ───────────
    TEXT_GEN_URL: Optional[str] = None
    TEXT_GEN_API_KEY: Optional[str] = None
    TEXT_GEN_MODEL: str = "gpt-4o-mini"
    TEXT_GEN_TIMEOUT: float = 15.0

    # ── Logging ───────────────────────────────────────────────────────────────
    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


settings = Settings()
