"""
CareerEngine
============
Singleton that loads the static catalog once and exposes the recommendation
pipeline as a single Python object.

Pipeline order (strictly sequential per profile):
  catalog → eligibility gate → scoring → ranking → roadmap / comparison

Collaborators (text generation, government data) are optional and
best-effort: every call into them falls back to the canned path on failure.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional, Sequence

from careerpath.core import advisor, comparator
from careerpath.core.catalog import CatalogStore
from careerpath.core.collaborators import (
    GovernmentDataSource,
    HttpTextGenerator,
    StaticGovernmentData,
    TextGenerator,
    generate_or_fallback,
)
from careerpath.core.config import settings
from careerpath.core.randomness import RandomSource, SeededRandomSource
from careerpath.core.ranking import rank
from careerpath.core.roadmap import RoadmapGenerator, carry_completion
from careerpath.core.scholarships import filter_scholarships
from careerpath.core.scoring import ScoringEngine, partition_skills
from careerpath.models.domain import (
    CareerDefinition,
    CareerDemandData,
    ComparisonResult,
    GovernmentScheme,
    JobMarketData,
    Profile,
    ProfileKind,
    Recommendation,
    RoadmapResult,
    RoadmapStage,
    ScoredCareer,
    SkillProgram,
    StudentRoadmapResult,
)

logger = logging.getLogger(__name__)


class EngineNotLoadedError(RuntimeError):
    pass


class CareerEngine:
    """Career recommendation engine; call ``load()`` once before use."""

    def __init__(self, text_generator: Optional[TextGenerator] = None,
                 data_source: Optional[GovernmentDataSource] = None):
        self.is_loaded: bool = False
        self.career_count: int = 0
        self.student_career_count: int = 0
        self.resource_count: int = 0

        self.catalog: CatalogStore | None = None
        self.scorer: ScoringEngine | None = None
        self.roadmaps: RoadmapGenerator | None = None

        self.text_generator = text_generator
        self.data_source = data_source

    # ────────────────────────────────────────────────────────────────────────
    # LOADING
    # ────────────────────────────────────────────────────────────────────────

    def load(self, data_dir: Path | None = None,
             random_source: RandomSource | None = None):
        """Load the catalog and wire the pipeline. Safe to call again to rebuild."""
        D = data_dir or settings.DATA_DIR

        self.catalog = CatalogStore.from_directory(D)
        self.scorer = ScoringEngine(
            random_source or SeededRandomSource(settings.RANDOM_SEED),
            perturbation=settings.SCORE_PERTURBATION,
        )
        self.roadmaps = RoadmapGenerator(
            self.catalog.list_resources(), max_skill_stages=settings.MAX_ROADMAP_SKILLS)

        if self.data_source is None:
            try:
                self.data_source = StaticGovernmentData(D)
            except FileNotFoundError as e:
                logger.warning("Government data tables missing (%s); enrichment disabled", e)

        if self.text_generator is None and settings.TEXT_GEN_URL:
            self.text_generator = HttpTextGenerator(
                settings.TEXT_GEN_URL,
                api_key=settings.TEXT_GEN_API_KEY,
                model=settings.TEXT_GEN_MODEL,
                timeout=settings.TEXT_GEN_TIMEOUT,
            )

        self.career_count = len(self.catalog.list_careers())
        self.student_career_count = len(self.catalog.list_student_careers())
        self.resource_count = len(self.catalog.list_resources())
        self.is_loaded = True
        logger.info("Engine loaded | text generation=%s | government data=%s",
                    self.text_generator is not None, self.data_source is not None)

    def _require_loaded(self) -> CatalogStore:
        if not self.is_loaded or self.catalog is None:
            raise EngineNotLoadedError("CareerEngine.load() has not been called")
        return self.catalog

    # ────────────────────────────────────────────────────────────────────────
    # RECOMMENDATION
    # ────────────────────────────────────────────────────────────────────────

    def careers_for(self, profile: Profile) -> List[CareerDefinition]:
        catalog = self._require_loaded()
        if profile.kind == ProfileKind.student:
            return catalog.list_student_careers()
        return catalog.list_careers()

    def score_careers(self, profile: Profile) -> List[ScoredCareer]:
        self._require_loaded()
        return self.scorer.score_all(profile, self.careers_for(profile))

    def recommend(self, profile: Profile, n: int | None = None) -> List[Recommendation]:
        """Top-N recommendations with canned reasoning (no collaborator calls)."""
        catalog = self._require_loaded()
        top = rank(self.score_careers(profile), limit=settings.TOP_N_RECOMMENDATIONS if n is None else n)

        recommendations = []
        for scored in top:
            extras = {}
            if profile.kind == ProfileKind.student:
                extras = {
                    "roadmap": self.roadmaps.generate_student(profile, scored.career),
                    "scholarships": filter_scholarships(
                        catalog.list_scholarships(), profile, scored.career),
                }
            recommendations.append(Recommendation(**dict(scored), **extras))
        return recommendations

    async def recommend_enriched(self, profile: Profile,
                                 n: int | None = None) -> List[Recommendation]:
        """
        Same as ``recommend``, then one text-generation call to rewrite the
        top pick's reasoning. Falls back to the canned text on any failure.
        """
        recommendations = self.recommend(profile, n=n)
        if not recommendations or self.text_generator is None:
            return recommendations

        top = recommendations[0]
        context = {
            "career": top.career.title,
            "match_score": round(top.match_score, 2),
            "strength_skills": top.strength_skills,
            "missing_skills": top.missing_skills,
            "interests": profile.interests,
            "canned_reasoning": top.reasoning,
        }
        reasoning = await generate_or_fallback(
            self.text_generator, "career recommendation reasoning", context, top.reasoning)
        recommendations[0] = top.model_copy(update={"reasoning": reasoning})
        return recommendations

    # ────────────────────────────────────────────────────────────────────────
    # ROADMAPS
    # ────────────────────────────────────────────────────────────────────────

    def roadmap_for(self, career_ref: str, profile: Profile) -> RoadmapResult:
        """
        Roadmap toward a catalog career (id or title). Unknown careers come
        back with ``found=False`` and only the skill-independent stages.
        """
        catalog = self._require_loaded()
        career = catalog.find_career(career_ref)
        if career is None:
            return RoadmapResult(
                career_title=career_ref,
                found=False,
                reason=f"Career '{career_ref}' not found in catalog",
                stages=self.roadmaps.generate(career_ref, [], profile),
            )
        missing, _ = partition_skills(career.required_skills, profile.skills)
        return RoadmapResult(
            career_id=career.id,
            career_title=career.title,
            found=True,
            stages=self.roadmaps.generate(career.title, missing, profile),
        )

    def generate_roadmap(self, career_title: str, missing_skills: Sequence[str],
                            profile: Optional[Profile] = None) -> RoadmapResult:
        """Roadmap from an explicit missing-skill list; the title need not be in the catalog."""
        catalog = self._require_loaded()
        career = catalog.find_career(career_title)
        return RoadmapResult(
            career_id=career.id if career else None,
            career_title=career.title if career else career_title,
            found=career is not None,
            reason=None if career else f"Career '{career_title}' not found in catalog",
            stages=self.roadmaps.generate(career_title, missing_skills, profile),
        )

    def regenerate(self, career_ref: str, profile: Profile,
                           previous: Sequence[RoadmapStage] = (),
                           keep_completed: bool = False) -> RoadmapResult:
        """Rebuild from scratch; completion flags survive only with ``keep_completed``."""
        result = self.roadmap_for(career_ref, profile)
        if keep_completed and previous:
            result = result.model_copy(
                update={"stages": carry_completion(previous, result.stages)})
        return result

    def generate_student_roadmap(self, career_id: str, profile: Profile) -> StudentRoadmapResult:
        catalog = self._require_loaded()
        career = catalog.get_student_career(career_id)
        if career is None:
            return StudentRoadmapResult(
                career_id=career_id,
                found=False,
                reason=f"Student career path '{career_id}' not found in catalog",
            )
        return StudentRoadmapResult(
            career_id=career.id,
            found=True,
            stages=self.roadmaps.generate_student(profile, career),
        )

    # ────────────────────────────────────────────────────────────────────────
    # COMPARISON / SCHOLARSHIPS
    # ────────────────────────────────────────────────────────────────────────

    def compare_by_id(self, career1_id: str, career2_id: str) -> ComparisonResult:
        catalog = self._require_loaded()
        c1, c2 = catalog.get_career(career1_id), catalog.get_career(career2_id)
        missing = [cid for cid, c in ((career1_id, c1), (career2_id, c2)) if c is None]
        if missing:
            return ComparisonResult(
                found=False,
                reason=f"Career paths not found: {', '.join(missing)}",
            )
        return ComparisonResult(found=True, comparison=comparator.compare(c1, c2))

    def scholarships_for(self, profile: Profile, career_id: str):
        """Matching scholarships, or ``None`` when the career id is unknown."""
        catalog = self._require_loaded()
        career = catalog.get_career(career_id)
        if career is None:
            return None
        return filter_scholarships(catalog.list_scholarships(), profile, career)

    # ────────────────────────────────────────────────────────────────────────
    # COLLABORATOR ENRICHMENT (best effort)
    # ────────────────────────────────────────────────────────────────────────

    async def schemes(self, profile: Optional[Profile] = None) -> List[GovernmentScheme]:
        if self.data_source is None:
            return []
        try:
            return await self.data_source.fetch_schemes(profile)
        except Exception as e:
            logger.warning("Scheme lookup failed (%s: %s)", type(e).__name__, e)
            return []

    async def demand(self, career_id: str) -> Optional[CareerDemandData]:
        if self.data_source is None:
            return None
        try:
            return await self.data_source.fetch_demand(career_id)
        except Exception as e:
            logger.warning("Demand lookup failed for %r (%s: %s)", career_id, type(e).__name__, e)
            return None

    async def employment(self) -> List[JobMarketData]:
        if self.data_source is None:
            return []
        try:
            return await self.data_source.fetch_employment_data()
        except Exception as e:
            logger.warning("Employment data lookup failed (%s: %s)", type(e).__name__, e)
            return []

    async def skill_programs(self, skill: Optional[str] = None) -> List[SkillProgram]:
        if self.data_source is None:
            return []
        try:
            return await self.data_source.fetch_skill_programs(skill)
        except Exception as e:
            logger.warning("Skill programme lookup failed (%s: %s)", type(e).__name__, e)
            return []

    async def answer_question(self, message: str, profile: Optional[Profile] = None) -> str:
        fallback = advisor.canned_answer(message, profile)
        context = {"question": message}
        if profile is not None:
            context.update(skills=profile.skills, interests=profile.interests,
                           education=profile.education)
        return await generate_or_fallback(self.text_generator, "career chat", context, fallback)


# ── Global singleton ──────────────────────────────────────────────────────────
engine = CareerEngine()
