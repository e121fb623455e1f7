"""
CatalogStore
============
Static, read-only collections loaded once from the JSON files in
``settings.DATA_DIR``:

  careers.json              → general career catalog
  student_careers.json      → student career paths (with eligibility)
  resources.json            → learning resources attached to roadmap stages
  assessment_questions.json → onboarding questionnaire
  scholarships.json         → scholarship table with merit cutoffs

Careers and resources are mandatory; the other tables degrade to empty.
"""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, List, Optional

from pydantic import TypeAdapter

from careerpath.models.domain import (
    AssessmentQuestion,
    CareerDefinition,
    Resource,
    Scholarship,
)

logger = logging.getLogger(__name__)


def load_json(path: Path) -> Any:
    with open(path, encoding="utf-8") as f:
        return json.load(f)


class CatalogStore:
    """Read-only career / resource catalog."""

    def __init__(
        self,
        careers: List[CareerDefinition],
        student_careers: List[CareerDefinition],
        resources: List[Resource],
        questions: Optional[List[AssessmentQuestion]] = None,
        scholarships: Optional[List[Scholarship]] = None,
    ):
        self._careers = tuple(careers)
        self._student_careers = tuple(student_careers)
        self._resources = tuple(resources)
        self._questions = tuple(questions or [])
        self._scholarships = tuple(scholarships or [])

        ids = [c.id for c in self._careers + self._student_careers]
        duplicates = {i for i in ids if ids.count(i) > 1}
        if duplicates:
            raise ValueError(f"Duplicate career ids in catalog: {sorted(duplicates)}")

    # ────────────────────────────────────────────────────────────────────────
    # LOADING
    # ────────────────────────────────────────────────────────────────────────

    @classmethod
    def from_directory(cls, data_dir: Path) -> "CatalogStore":
        careers = TypeAdapter(List[CareerDefinition]).validate_python(
            load_json(data_dir / "careers.json"))
        student = TypeAdapter(List[CareerDefinition]).validate_python(
            load_json(data_dir / "student_careers.json"))
        resources = TypeAdapter(List[Resource]).validate_python(
            load_json(data_dir / "resources.json"))

        optional = {}
        for key, fname, model in [
            ("questions",    "assessment_questions.json", AssessmentQuestion),
            ("scholarships", "scholarships.json",         Scholarship),
        ]:
            try:
                optional[key] = TypeAdapter(List[model]).validate_python(
                    load_json(data_dir / fname))
            except FileNotFoundError:
                logger.warning("%s not found in %s; table left empty", fname, data_dir)
                optional[key] = []

        store = cls(careers, student, resources, **optional)
        logger.info(
            "Catalog loaded | %d careers | %d student paths | %d resources | "
            "%d questions | %d scholarships",
            len(careers), len(student), len(resources),
            len(optional["questions"]), len(optional["scholarships"]),
        )
        return store

    # ────────────────────────────────────────────────────────────────────────
    # ACCESS
    # ────────────────────────────────────────────────────────────────────────

    def list_careers(self) -> List[CareerDefinition]:
        return list(self._careers)

    def list_student_careers(self) -> List[CareerDefinition]:
        return list(self._student_careers)

    def list_resources(self) -> List[Resource]:
        return list(self._resources)

    def list_questions(self) -> List[AssessmentQuestion]:
        return list(self._questions)

    def list_scholarships(self) -> List[Scholarship]:
        return list(self._scholarships)

    def get_career(self, career_id: str) -> Optional[CareerDefinition]:
        """Look up a career by id across both collections."""
        for career in self._careers + self._student_careers:
            if career.id == career_id:
                return career
        return None

    def get_student_career(self, career_id: str) -> Optional[CareerDefinition]:
        for career in self._student_careers:
            if career.id == career_id:
                return career
        return None

    def find_career(self, ref: str) -> Optional[CareerDefinition]:
        """Resolve an id or an exact (case-insensitive) title."""
        career = self.get_career(ref)
        if career is not None:
            return career
        ref_lower = ref.strip().lower()
        for career in self._careers + self._student_careers:
            if career.title.lower() == ref_lower:
                return career
        return None
