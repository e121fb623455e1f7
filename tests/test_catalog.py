from __future__ import annotations

import json
import shutil

import pytest

from conftest import make_career

from careerpath.core.catalog import CatalogStore
from careerpath.core.config import settings


class TestBundledCatalog:
    def test_collections_loaded(self, catalog):
        assert len(catalog.list_careers()) == 10
        assert len(catalog.list_student_careers()) == 8
        assert catalog.list_resources()
        assert catalog.list_questions()
        assert catalog.list_scholarships()

    def test_required_skills_never_empty(self, catalog):
        for career in catalog.list_careers() + catalog.list_student_careers():
            assert career.required_skills

    def test_student_paths_have_eligibility(self, catalog):
        for career in catalog.list_student_careers():
            assert career.eligibility is not None
            assert career.eligibility.stream

    def test_lookup_by_id_and_title(self, catalog):
        assert catalog.get_career("data-scientist").title == "Data Scientist"
        assert catalog.find_career("data scientist").id == "data-scientist"
        assert catalog.get_career("astronaut") is None
        assert catalog.get_student_career("data-scientist") is None

    def test_lists_are_copies(self, catalog):
        catalog.list_careers().clear()
        assert len(catalog.list_careers()) == 10


class TestLoading:
    def test_duplicate_ids_rejected(self):
        with pytest.raises(ValueError):
            CatalogStore([make_career(id="x")], [make_career(id="x")], [])

    def test_optional_tables_default_empty(self, tmp_path):
        for name in ("careers.json", "student_careers.json", "resources.json"):
            shutil.copy(settings.DATA_DIR / name, tmp_path / name)
        store = CatalogStore.from_directory(tmp_path)
        assert store.list_questions() == []
        assert store.list_scholarships() == []

    def test_missing_careers_file_raises(self, tmp_path):
        (tmp_path / "resources.json").write_text(json.dumps([]))
        with pytest.raises(FileNotFoundError):
            CatalogStore.from_directory(tmp_path)
