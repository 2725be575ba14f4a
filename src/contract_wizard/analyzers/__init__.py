"""Content analysis components for the contract wizard."""

from .checklist import (
    ChecklistItem,
    SpellingWarning,
    checklist_status,
    legal_terms_in_content,
    spelling_warnings,
    unfilled_placeholders,
    validation_score,
)
from .section_detector import SectionDetector, detect_sections, is_header_line
from .section_patterns import SectionPatternMatcher

__all__ = [
    "ChecklistItem",
    "SpellingWarning",
    "checklist_status",
    "legal_terms_in_content",
    "spelling_warnings",
    "unfilled_placeholders",
    "validation_score",
    "SectionDetector",
    "detect_sections",
    "is_header_line",
    "SectionPatternMatcher",
]
