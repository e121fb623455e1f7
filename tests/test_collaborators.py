"""
Text generation and government data collaborators.
"""
from __future__ import annotations

import json

import httpx
import pytest

from careerpath.core.collaborators import (
    HttpTextGenerator,
    StaticGovernmentData,
    generate_or_fallback,
    normalise_career_key,
)
from careerpath.core.config import settings
from careerpath.models.domain import Profile


def _completion(content: str) -> dict:
    return {"choices": [{"message": {"role": "assistant", "content": content}}]}


class _FailingGenerator:
    async def generate(self, prompt_topic, context):
        raise httpx.ConnectTimeout("timed out")


class TestHttpTextGenerator:
    @pytest.mark.asyncio
    async def test_posts_chat_completion(self):
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["url"] = str(request.url)
            seen["auth"] = request.headers.get("Authorization")
            seen["body"] = json.loads(request.content)
            return httpx.Response(200, json=_completion("  Great fit.  "))

        gen = HttpTextGenerator("https://llm.example/v1/", api_key="k", model="m",
                                transport=httpx.MockTransport(handler))
        text = await gen.generate("career chat", {"question": "salary?"})

        assert text == "Great fit."
        assert seen["url"] == "https://llm.example/v1/chat/completions"
        assert seen["auth"] == "Bearer k"
        assert seen["body"]["model"] == "m"
        assert "salary?" in seen["body"]["messages"][1]["content"]

    @pytest.mark.asyncio
    async def test_http_error_raises(self):
        gen = HttpTextGenerator(
            "https://llm.example/v1",
            transport=httpx.MockTransport(lambda r: httpx.Response(503)),
        )
        with pytest.raises(httpx.HTTPStatusError):
            await gen.generate("topic", {})


class TestFallback:
    @pytest.mark.asyncio
    async def test_no_generator(self):
        assert await generate_or_fallback(None, "t", {}, "canned") == "canned"

    @pytest.mark.asyncio
    async def test_failure_uses_canned_text(self):
        assert await generate_or_fallback(_FailingGenerator(), "t", {}, "canned") == "canned"

    @pytest.mark.asyncio
    async def test_blank_answer_uses_canned_text(self):
        gen = HttpTextGenerator(
            "https://llm.example/v1",
            transport=httpx.MockTransport(lambda r: httpx.Response(200, json=_completion("   "))),
        )
        assert await generate_or_fallback(gen, "t", {}, "canned") == "canned"


class TestStaticGovernmentData:
    @pytest.fixture
    def source(self):
        return StaticGovernmentData(settings.DATA_DIR)

    @pytest.mark.asyncio
    async def test_all_schemes_without_profile(self, source):
        assert len(await source.fetch_schemes()) == 5

    @pytest.mark.asyncio
    async def test_scheme_filter(self, source):
        profile = Profile(name="x", email="x@example.com", education="High School",
                          interests=["Entrepreneurship"])
        ids = {s.id for s in await source.fetch_schemes(profile)}
        assert {"pmkvy", "startup-india"} <= ids
        assert "digital-india" not in ids

    @pytest.mark.asyncio
    async def test_demand_lookup_normalises_key(self, source):
        data = await source.fetch_demand("Data Scientist")
        assert data is not None and data.career == "Data Scientist"
        assert await source.fetch_demand("astronaut") is None

    @pytest.mark.asyncio
    async def test_employment(self, source):
        assert len(await source.fetch_employment_data()) == 4

    def test_normalise_career_key(self):
        assert normalise_career_key("  Data   Scientist ") == "data-scientist"

    @pytest.mark.asyncio
    async def test_skill_programs(self, source):
        programs = await source.fetch_skill_programs()
        assert [p.id for p in programs] == ["nsdc-ai", "nielit-cloud"]
        assert programs[0].application_url == "https://nsdcindia.org/"

    @pytest.mark.asyncio
    async def test_skill_programs_filtered_by_skill(self, source):
        assert [p.id for p in await source.fetch_skill_programs("machine learning")] == ["nsdc-ai"]
        assert await source.fetch_skill_programs("Pottery") == []
