"""Configuration Manager for the contract wizard content library.

This module loads, validates and exposes the content library: the section
checklist and its keywords, insertable snippets and legal clauses, payment
term quick inserts, legal term definitions and the misspelling table.
"""

import copy
import functools
import json
import logging
import re
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple, Union

from ..models.enums import SectionKind
from .defaults import DEFAULT_LIBRARY
from .models import (
    ConfigurationError,
    ContentLibrary,
    ContentSnippet,
    LegalClause,
    LegalTermDefinition,
    PaymentTermTemplate,
    SectionDefinition,
    ValidationResult,
)


logger = logging.getLogger(__name__)

LIBRARY_PATH_ENV = "CONTRACT_WIZARD_LIBRARY_PATH"

_WORD_PATTERN = re.compile(r"^[A-Za-z]+$")

Source = Union[str, Path, Dict[str, Any]]


class ConfigurationManager:
    """
    Manager for the content library.

    Handles loading, validation, and access to the section checklist,
    snippets, clauses and lookup tables.
    """

    def __init__(self, library_path: Optional[Union[str, Path]] = None):
        """
        Initialize the configuration manager.

        Args:
            library_path: Optional path of a library JSON file.
        """
        self._library_path = Path(library_path) if library_path else None
        self._library = ContentLibrary()
        self._is_loaded = False

    @property
    def library(self) -> ContentLibrary:
        """Get the current content library."""
        return self._library

    @property
    def is_loaded(self) -> bool:
        """Check if a library has been loaded."""
        return self._is_loaded

    # =========================================================================
    # Loading
    # =========================================================================

    def load_defaults(self) -> ValidationResult:
        """Load the built-in content library."""
        return self.load_library(copy.deepcopy(DEFAULT_LIBRARY))

    def load_library(self, source: Source) -> ValidationResult:
        """
        Load and validate a complete content library.

        Sections that a partial library omits fall back to an empty list,
        except the misspelling table which keeps the defaults when absent.

        Args:
            source: File path or dictionary.

        Returns:
            ValidationResult with warnings for suspicious but usable data.

        Raises:
            ConfigurationError: If validation fails.
        """
        raw_data = self._parse_source(source)
        if not isinstance(raw_data, dict):
            raise ConfigurationError("Content library must be a JSON object")

        result = ValidationResult(is_valid=True)

        sections_result, sections = self._validate_sections(raw_data.get("sections", []))
        result = result.merge(sections_result)

        snippets_result, snippets = self._validate_records(
            raw_data.get("snippets", []), "Snippet", ["id", "name", "snippet"], ContentSnippet
        )
        result = result.merge(snippets_result)

        clauses_result, clauses = self._validate_records(
            raw_data.get("legal_clauses", []), "Legal clause", ["id", "name", "text"], LegalClause
        )
        result = result.merge(clauses_result)

        terms_result, payment_terms = self._validate_records(
            raw_data.get("payment_terms", []),
            "Payment term",
            ["id", "label", "template"],
            PaymentTermTemplate,
        )
        result = result.merge(terms_result)

        legal_result, legal_terms = self._validate_legal_terms(raw_data.get("legal_terms", []))
        result = result.merge(legal_result)

        misspellings_source = raw_data.get("misspellings", DEFAULT_LIBRARY["misspellings"])
        spelling_result, misspellings = self._validate_misspellings(misspellings_source)
        result = result.merge(spelling_result)

        if not result.is_valid:
            raise ConfigurationError(
                "Content library validation failed",
                validation_result=result
            )

        self._library = ContentLibrary(
            sections=sections,
            snippets=snippets,
            legal_clauses=clauses,
            payment_terms=payment_terms,
            legal_terms=legal_terms,
            misspellings=misspellings,
            version=raw_data.get("version", 1),
            metadata=raw_data.get("metadata", {}),
        )
        self._is_loaded = True
        logger.info(
            f"Loaded content library: {len(sections)} sections, "
            f"{len(snippets)} snippets, {len(clauses)} clauses"
        )
        return result

    # =========================================================================
    # Validation
    # =========================================================================

    def _validate_sections(
        self, data: List[Dict[str, Any]]
    ) -> Tuple[ValidationResult, List[SectionDefinition]]:
        """Validate the section checklist."""
        result = ValidationResult(is_valid=True)
        sections: List[SectionDefinition] = []

        if not isinstance(data, list):
            result.add_error("'sections' must be a list")
            return result, sections

        for index, item in enumerate(data):
            prefix = f"Section [{index}]"
            if not isinstance(item, dict):
                result.add_error(f"{prefix}: must be an object")
                continue

            missing = [f for f in ("id", "label", "keywords") if f not in item]
            for name in missing:
                result.add_error(f"{prefix}: Missing required field '{name}'")
            if missing:
                continue

            try:
                kind = SectionKind(item["id"])
            except ValueError:
                result.add_error(f"{prefix}: unknown section id '{item['id']}'")
                continue
            if kind is SectionKind.UNKNOWN:
                result.add_error(f"{prefix}: 'unknown' cannot have a checklist entry")
                continue

            keywords = item["keywords"]
            if not isinstance(keywords, list) or not keywords:
                result.add_error(f"{prefix}: 'keywords' must be a non-empty list")
                continue
            if not all(isinstance(k, str) and k.strip() for k in keywords):
                result.add_error(f"{prefix}: All keywords must be non-empty strings")
                continue

            sections.append(SectionDefinition(
                id=kind,
                label=str(item["label"]).strip(),
                description=str(item.get("description", "")),
                keywords=[k.strip().lower() for k in keywords],
                quick_insert=str(item.get("quick_insert", "")),
            ))

        ids = [s.id for s in sections]
        duplicates = {k.value for k in ids if ids.count(k) > 1}
        if duplicates:
            result.add_error(f"Duplicate section IDs found: {duplicates}")

        missing_kinds = [k.value for k in SectionKind.canonical() if k not in ids]
        if missing_kinds:
            result.add_warning(
                f"Section checklist has no entry for: {missing_kinds}. "
                f"These sections can only be detected by fallback keywords."
            )

        return result, sections

    def _validate_records(
        self,
        data: List[Dict[str, Any]],
        kind: str,
        required_fields: List[str],
        record_type: type,
        id_field: str = "id",
    ) -> Tuple[ValidationResult, List[Any]]:
        """Validate a list of simple string records (snippets, clauses, terms)."""
        result = ValidationResult(is_valid=True)
        records: List[Any] = []

        if not isinstance(data, list):
            result.add_error(f"{kind} list must be a list")
            return result, records

        for index, item in enumerate(data):
            prefix = f"{kind} [{index}]"
            if not isinstance(item, dict):
                result.add_error(f"{prefix}: must be an object")
                continue
            valid = True
            for name in required_fields:
                if name not in item:
                    result.add_error(f"{prefix}: Missing required field '{name}'")
                    valid = False
                elif not isinstance(item[name], str) or not item[name].strip():
                    result.add_error(f"{prefix}: '{name}' must be a non-empty string")
                    valid = False
            if valid:
                records.append(record_type(**{name: item[name] for name in required_fields}))

        ids = [getattr(r, id_field) for r in records]
        duplicates = {i for i in ids if ids.count(i) > 1}
        if duplicates:
            result.add_error(f"Duplicate {kind.lower()} IDs found: {duplicates}")

        return result, records

    def _validate_legal_terms(
        self, data: List[Dict[str, Any]]
    ) -> Tuple[ValidationResult, List[LegalTermDefinition]]:
        """Validate legal term definitions."""
        result, records = self._validate_records(
            data, "Legal term", ["key", "term", "definition"], LegalTermDefinition, id_field="key"
        )
        # Lookup is by lower-cased substring, so keys must be lower case.
        terms: List[LegalTermDefinition] = []
        examples = {
            item.get("key"): item.get("example")
            for item in data if isinstance(item, dict)
        }
        for record in records:
            terms.append(LegalTermDefinition(
                key=record.key.lower(),
                term=record.term,
                definition=record.definition,
                example=examples.get(record.key),
            ))
        return result, terms

    def _validate_misspellings(
        self, data: Dict[str, str]
    ) -> Tuple[ValidationResult, Dict[str, str]]:
        """Validate the misspelling table."""
        result = ValidationResult(is_valid=True)
        table: Dict[str, str] = {}

        if not isinstance(data, dict):
            result.add_error("'misspellings' must be an object")
            return result, table

        for wrong, correct in data.items():
            if not isinstance(wrong, str) or not _WORD_PATTERN.match(wrong):
                result.add_error(f"Misspelling '{wrong}' must be a single word")
                continue
            if not isinstance(correct, str) or not correct.strip():
                result.add_error(f"Correction for '{wrong}' must be a non-empty string")
                continue
            if wrong.lower() == correct.lower():
                result.add_warning(f"Misspelling '{wrong}' maps to itself")
            table[wrong.lower()] = correct

        return result, table

    # =========================================================================
    # Access
    # =========================================================================

    def get_section(self, kind: SectionKind) -> Optional[SectionDefinition]:
        """Get a checklist entry by section kind."""
        return self._library.get_section(kind)

    def get_snippet(self, snippet_id: str) -> Optional[ContentSnippet]:
        """Get a snippet by ID."""
        for snippet in self._library.snippets:
            if snippet.id == snippet_id:
                return snippet
        return None

    def get_legal_clause(self, clause_id: str) -> Optional[LegalClause]:
        """Get a legal clause by ID."""
        for clause in self._library.legal_clauses:
            if clause.id == clause_id:
                return clause
        return None

    def get_payment_term(self, term_id: str) -> Optional[PaymentTermTemplate]:
        """Get a payment-terms quick insert by ID."""
        for term in self._library.payment_terms:
            if term.id == term_id:
                return term
        return None

    # =========================================================================
    # Utility Methods
    # =========================================================================

    def _parse_source(self, source: Source) -> Dict[str, Any]:
        """Parse configuration source to raw data."""
        if isinstance(source, (str, Path)):
            path = Path(source)
            if not path.exists():
                raise ConfigurationError(f"Configuration file not found: {path}")

            try:
                with open(path, "r", encoding="utf-8") as f:
                    data = json.load(f)
            except json.JSONDecodeError as e:
                raise ConfigurationError(f"Invalid JSON in {path}: {e}") from e
            self._library_path = path
            return data

        return source

    def save_to_file(self, path: Optional[Union[str, Path]] = None) -> Path:
        """
        Save the current library as JSON.

        Args:
            path: Target file. Uses the loaded file path if None.

        Returns:
            The path written.
        """
        target = Path(path) if path else self._library_path
        if not target:
            raise ConfigurationError("No library path specified")

        target.parent.mkdir(parents=True, exist_ok=True)
        with open(target, "w", encoding="utf-8") as f:
            json.dump(self.to_dict(), f, indent=2, ensure_ascii=False)
        return target

    def reset(self) -> None:
        """Reset configuration to empty state."""
        self._library = ContentLibrary()
        self._is_loaded = False

    def to_dict(self) -> Dict[str, Any]:
        """Export the current library in its file format."""
        library = self._library
        return {
            "version": library.version,
            "sections": [
                {
                    "id": s.id.value,
                    "label": s.label,
                    "description": s.description,
                    "keywords": s.keywords,
                    "quick_insert": s.quick_insert,
                }
                for s in library.sections
            ],
            "snippets": [
                {"id": s.id, "name": s.name, "snippet": s.snippet}
                for s in library.snippets
            ],
            "legal_clauses": [
                {"id": c.id, "name": c.name, "text": c.text}
                for c in library.legal_clauses
            ],
            "payment_terms": [
                {"id": t.id, "label": t.label, "template": t.template}
                for t in library.payment_terms
            ],
            "legal_terms": [
                {
                    "key": t.key,
                    "term": t.term,
                    "definition": t.definition,
                    "example": t.example,
                }
                for t in library.legal_terms
            ],
            "misspellings": dict(library.misspellings),
            "metadata": library.metadata,
        }


@functools.lru_cache(maxsize=1)
def default_library() -> ContentLibrary:
    """Built-in content library, validated once per process."""
    manager = ConfigurationManager()
    manager.load_defaults()
    return manager.library
