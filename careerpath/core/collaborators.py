"""
External collaborators: text generation and government / market data.

Both are best-effort enrichment. Callers go through ``generate_or_fallback``
(or the engine's fetch helpers), which catch collaborator failures and fall
back to the deterministic path.
"""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Protocol

import httpx
from pydantic import TypeAdapter

from careerpath.core.catalog import load_json
from careerpath.core.matching import overlaps_any
from careerpath.models.domain import (
    CareerDemandData,
    GovernmentScheme,
    JobMarketData,
    Profile,
    SchemeCategory,
    SkillProgram,
)

logger = logging.getLogger(__name__)


# ── Text generation ──────────────────────────────────────────────────────────

class TextGenerator(Protocol):
    async def generate(self, prompt_topic: str, context: Dict[str, Any]) -> str:
        ...


SYSTEM_PROMPT = (
    "You are a career counsellor. Answer in two or three plain sentences. "
    "Use only the facts in the supplied context; do not invent salaries or statistics."
)


class HttpTextGenerator:
    """Client for an OpenAI-compatible ``/chat/completions`` endpoint."""

    def __init__(self, base_url: str, api_key: Optional[str] = None,
                 model: str = "gpt-4o-mini", timeout: float = 15.0,
                 transport: Optional[httpx.AsyncBaseTransport] = None):
        self.base_url = base_url.rstrip("/")
        self.api_key = api_key
        self.model = model
        self.timeout = timeout
        self._transport = transport

    async def generate(self, prompt_topic: str, context: Dict[str, Any]) -> str:
        headers = {"Content-Type": "application/json"}
        if self.api_key:
            headers["Authorization"] = f"Bearer {self.api_key}"
        payload = {
            "model": self.model,
            "messages": [
                {"role": "system", "content": SYSTEM_PROMPT},
                {"role": "user", "content": (
                    f"Topic: {prompt_topic}\nContext:\n"
                    + json.dumps(context, ensure_ascii=False, default=str)
                )},
            ],
        }
        async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
            resp = await client.post(f"{self.base_url}/chat/completions",
                                     json=payload, headers=headers)
            resp.raise_for_status()
            data = resp.json()
        return (data["choices"][0]["message"]["content"] or "").strip()


async def generate_or_fallback(generator: Optional[TextGenerator], prompt_topic: str,
                               context: Dict[str, Any], fallback: str) -> str:
    """One awaited generation call; any failure or empty answer yields ``fallback``."""
    if generator is None:
        return fallback
    try:
        text = await generator.generate(prompt_topic, context)
    except Exception as e:
        logger.warning("Text generation failed for %r (%s: %s); using canned text",
                       prompt_topic, type(e).__name__, e)
        return fallback
    return text.strip() or fallback


# ── Government / market data ─────────────────────────────────────────────────

class GovernmentDataSource(Protocol):
    async def fetch_schemes(self, profile: Optional[Profile] = None) -> List[GovernmentScheme]:
        ...

    async def fetch_demand(self, career_id: str) -> Optional[CareerDemandData]:
        ...

    async def fetch_employment_data(self) -> List[JobMarketData]:
        ...

    async def fetch_skill_programs(self, skill: Optional[str] = None) -> List[SkillProgram]:
        ...


def normalise_career_key(career: str) -> str:
    return "-".join(career.lower().split())


class StaticGovernmentData:
    """Serves the bundled scheme, demand, employment and skill-programme tables."""

    def __init__(self, data_dir: Path):
        self._schemes = TypeAdapter(List[GovernmentScheme]).validate_python(
            load_json(data_dir / "schemes.json"))
        self._demand = TypeAdapter(Dict[str, CareerDemandData]).validate_python(
            load_json(data_dir / "career_demand.json"))
        self._employment = TypeAdapter(List[JobMarketData]).validate_python(
            load_json(data_dir / "employment.json"))
        self._programs = TypeAdapter(List[SkillProgram]).validate_python(
            load_json(data_dir / "skill_programs.json"))

    async def fetch_schemes(self, profile: Optional[Profile] = None) -> List[GovernmentScheme]:
        if profile is None:
            return list(self._schemes)
        return [s for s in self._schemes if scheme_applies(s, profile)]

    async def fetch_demand(self, career_id: str) -> Optional[CareerDemandData]:
        return self._demand.get(normalise_career_key(career_id))

    async def fetch_employment_data(self) -> List[JobMarketData]:
        return list(self._employment)

    async def fetch_skill_programs(self, skill: Optional[str] = None) -> List[SkillProgram]:
        """All programmes, or those teaching a skill that overlaps ``skill``."""
        if not skill:
            return list(self._programs)
        return [p for p in self._programs if overlaps_any(skill, p.skills)]


def scheme_applies(scheme: GovernmentScheme, profile: Profile) -> bool:
    """Scholarships always apply; the rest need a matching profile signal."""
    if scheme.id == "pmkvy" and profile.education.strip().lower() == "high school":
        return True
    if scheme.id == "startup-india" and any(i.lower() == "entrepreneurship" for i in profile.interests):
        return True
    if scheme.id == "digital-india" and any(s.lower() == "technology" for s in profile.skills):
        return True
    return scheme.category == SchemeCategory.scholarship
