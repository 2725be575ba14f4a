"""Unit tests for the content library Configuration Manager."""

import json

import pytest

from contract_wizard.config import (
    ConfigurationError,
    ConfigurationManager,
    ValidationResult,
    default_library,
)
from contract_wizard.checker import check_contract
from contract_wizard.models.enums import IssueType, SectionKind


def _library(**overrides):
    data = {
        "sections": [
            {"id": "parties", "label": "Parties", "keywords": ["Client", " provider "]},
            {"id": "payment", "label": "Payment", "keywords": ["payment"]},
        ],
        "snippets": [{"id": "header", "name": "Header", "snippet": "TITLE"}],
        "legal_clauses": [{"id": "nda", "name": "NDA", "text": "Keep it secret."}],
        "payment_terms": [{"id": "net30", "label": "Net 30", "template": "Due in 30 days."}],
        "legal_terms": [{"key": "Force Majeure", "term": "Force Majeure", "definition": "Acts of God."}],
        "misspellings": {"recieve": "receive"},
    }
    data.update(overrides)
    return data


class TestDefaults:
    """Tests for the built-in library."""

    def test_defaults_are_valid(self):
        manager = ConfigurationManager()

        result = manager.load_defaults()

        assert result.is_valid
        assert manager.is_loaded
        assert [s.id for s in manager.library.get_sections_in_order()] == SectionKind.canonical()
        assert len(manager.library.misspellings) >= 40

    def test_default_library_is_cached(self):
        assert default_library() is default_library()

    def test_default_library_loads_legal_terms(self):
        library = default_library()

        assert library.sections
        assert library.legal_terms
        assert all(term.key == term.key.lower() for term in library.legal_terms)

    def test_checker_runs_on_default_library(self):
        assert check_contract("") == []
        fixes = [i.fix for i in check_contract("We recieve it.") if i.type is IssueType.SPELLING]
        assert fixes == ["receive"]

    def test_lookups(self):
        manager = ConfigurationManager()
        manager.load_defaults()

        assert manager.get_section(SectionKind.PAYMENT).label == "Payment Terms"
        assert manager.get_snippet("header") is not None
        assert manager.get_legal_clause("force_majeure") is not None
        assert manager.get_payment_term("net30") is not None
        assert manager.get_snippet("missing") is None


class TestLoadLibrary:
    """Tests for loading and validating custom libraries."""

    def test_load_from_dict_normalizes(self):
        manager = ConfigurationManager()

        result = manager.load_library(_library())

        assert result.is_valid
        parties = manager.get_section(SectionKind.PARTIES)
        assert parties.keywords == ["client", "provider"]
        assert manager.library.legal_terms[0].key == "force majeure"

    def test_missing_sections_warn(self):
        manager = ConfigurationManager()

        result = manager.load_library(_library())

        assert any("no entry for" in w for w in result.warnings)

    def test_missing_required_field(self):
        manager = ConfigurationManager()
        data = _library(sections=[{"id": "parties", "label": "Parties"}])

        with pytest.raises(ConfigurationError) as exc_info:
            manager.load_library(data)

        assert "Missing required field 'keywords'" in exc_info.value.validation_result.errors[0]
        assert not manager.is_loaded

    def test_unknown_section_id(self):
        data = _library(sections=[{"id": "bogus", "label": "X", "keywords": ["x"]}])

        with pytest.raises(ConfigurationError):
            ConfigurationManager().load_library(data)

    def test_duplicate_section_ids(self):
        section = {"id": "payment", "label": "Payment", "keywords": ["payment"]}

        with pytest.raises(ConfigurationError) as exc_info:
            ConfigurationManager().load_library(_library(sections=[section, dict(section)]))

        assert any("Duplicate section IDs" in e for e in exc_info.value.validation_result.errors)

    def test_duplicate_snippet_ids(self):
        snippet = {"id": "a", "name": "A", "snippet": "text"}

        with pytest.raises(ConfigurationError):
            ConfigurationManager().load_library(_library(snippets=[snippet, dict(snippet)]))

    def test_duplicate_legal_term_keys(self):
        term = {"key": "indemnify", "term": "Indemnify", "definition": "Cover losses."}

        with pytest.raises(ConfigurationError) as exc_info:
            ConfigurationManager().load_library(_library(legal_terms=[term, dict(term)]))

        assert any("Duplicate legal term IDs" in e for e in exc_info.value.validation_result.errors)

    def test_invalid_misspelling(self):
        with pytest.raises(ConfigurationError):
            ConfigurationManager().load_library(_library(misspellings={"two words": "x"}))

    def test_misspellings_default_when_absent(self):
        data = _library()
        del data["misspellings"]
        manager = ConfigurationManager()

        manager.load_library(data)

        assert manager.library.misspellings["recieve"] == "receive"
        assert len(manager.library.misspellings) >= 40

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigurationError):
            ConfigurationManager().load_library(tmp_path / "nope.json")

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "library.json"
        path.write_text("{not json", encoding="utf-8")

        with pytest.raises(ConfigurationError):
            ConfigurationManager().load_library(path)


class TestPersistence:
    def test_save_and_reload(self, tmp_path):
        manager = ConfigurationManager()
        manager.load_library(_library())
        path = manager.save_to_file(tmp_path / "out" / "library.json")

        reloaded = ConfigurationManager()
        reloaded.load_library(path)

        assert reloaded.to_dict() == manager.to_dict()
        assert json.loads(path.read_text(encoding="utf-8"))["snippets"][0]["id"] == "header"

    def test_save_without_path(self):
        manager = ConfigurationManager()
        manager.load_defaults()

        with pytest.raises(ConfigurationError):
            manager.save_to_file()

    def test_reset(self):
        manager = ConfigurationManager()
        manager.load_defaults()

        manager.reset()

        assert not manager.is_loaded
        assert manager.library.sections == []


class TestValidationResult:
    def test_merge(self):
        a = ValidationResult(is_valid=True, warnings=["w"])
        b = ValidationResult(is_valid=True)
        b.add_error("e")

        merged = a.merge(b)

        assert not merged.is_valid
        assert merged.errors == ["e"]
        assert merged.warnings == ["w"]
