"""Data models for the content library configuration."""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from ..models.enums import SectionKind


@dataclass
class SectionDefinition:
    """
    Checklist entry for one canonical contract section.

    The keywords drive section detection and the checklist; the
    quick-insert text is offered when the section is missing.
    """
    id: SectionKind
    label: str
    description: str
    keywords: List[str]
    quick_insert: str = ""

    def matches(self, text: str) -> bool:
        """Check if any keyword occurs in the text (case-insensitive)."""
        text_lower = text.lower()
        return any(keyword.lower() in text_lower for keyword in self.keywords)


@dataclass
class ContentSnippet:
    """Reusable block inserted at the cursor."""
    id: str
    name: str
    snippet: str


@dataclass
class LegalClause:
    """Standard legal clause offered by the clause library."""
    id: str
    name: str
    text: str


@dataclass
class PaymentTermTemplate:
    """Payment-terms quick insert."""
    id: str
    label: str
    template: str


@dataclass
class LegalTermDefinition:
    """Plain-language definition shown for a legal term."""
    key: str
    term: str
    definition: str
    example: Optional[str] = None


@dataclass
class ValidationResult:
    """Result of configuration validation."""
    is_valid: bool
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    def add_error(self, message: str) -> None:
        """Add an error message."""
        self.errors.append(message)
        self.is_valid = False

    def add_warning(self, message: str) -> None:
        """Add a warning message."""
        self.warnings.append(message)

    def merge(self, other: "ValidationResult") -> "ValidationResult":
        """Merge another validation result into this one."""
        return ValidationResult(
            is_valid=self.is_valid and other.is_valid,
            errors=self.errors + other.errors,
            warnings=self.warnings + other.warnings
        )


class ConfigurationError(Exception):
    """Exception raised for configuration errors."""

    def __init__(self, message: str, validation_result: Optional[ValidationResult] = None):
        super().__init__(message)
        self.message = message
        self.validation_result = validation_result


@dataclass
class ContentLibrary:
    """
    Complete content library.

    Aggregates the section checklist, insertable snippets and clauses,
    legal term definitions and the misspelling table.
    """
    sections: List[SectionDefinition] = field(default_factory=list)
    snippets: List[ContentSnippet] = field(default_factory=list)
    legal_clauses: List[LegalClause] = field(default_factory=list)
    payment_terms: List[PaymentTermTemplate] = field(default_factory=list)
    legal_terms: List[LegalTermDefinition] = field(default_factory=list)
    misspellings: Dict[str, str] = field(default_factory=dict)
    version: int = 1
    metadata: Dict[str, Any] = field(default_factory=dict)

    def get_section(self, kind: SectionKind) -> Optional[SectionDefinition]:
        """Get the checklist entry for a section kind."""
        for section in self.sections:
            if section.id is kind:
                return section
        return None

    def get_sections_in_order(self) -> List[SectionDefinition]:
        """Get checklist entries sorted by canonical order."""
        return sorted(self.sections, key=lambda s: s.id.order)

    def label_for(self, kind: SectionKind) -> str:
        """Human-readable label for a section kind."""
        section = self.get_section(kind)
        return section.label if section else kind.value
