"""Contract checklist and validation score.

Read-only metrics shown next to the editor: which canonical sections the
content covers, which placeholders are still empty, which words look
misspelled and which legal terms could use an explanation.
"""

import re
from dataclasses import dataclass
from typing import Dict, List, Optional

from ..config.config_manager import default_library
from ..config.models import ContentLibrary, LegalTermDefinition, SectionDefinition
from ..extractors.placeholder_extractor import iter_placeholder_ids
from ..models.fields import FieldValueMap


CHECKLIST_WEIGHT = 100
UNFILLED_PENALTY = 5
SPELLING_PENALTY = 3


@dataclass(frozen=True)
class ChecklistItem:
    """Checklist entry with its status for a given content."""
    section: SectionDefinition
    checked: bool

    def to_dict(self) -> Dict:
        return {
            "id": self.section.id.value,
            "label": self.section.label,
            "description": self.section.description,
            "checked": self.checked,
        }


@dataclass(frozen=True)
class SpellingWarning:
    """Misspelled word with its suggestion and number of occurrences."""
    word: str
    suggestion: str
    count: int

    def to_dict(self) -> Dict:
        return {"word": self.word, "suggestion": self.suggestion, "count": self.count}


def _library(library: Optional[ContentLibrary]) -> ContentLibrary:
    return library or default_library()


def checklist_status(
    content: str, library: Optional[ContentLibrary] = None
) -> List[ChecklistItem]:
    """Mark each checklist section whose keywords appear in the content."""
    lowered = (content or "").lower()
    return [
        ChecklistItem(
            section=section,
            checked=any(keyword.lower() in lowered for keyword in section.keywords),
        )
        for section in _library(library).get_sections_in_order()
    ]


def unfilled_placeholders(content: str, values: FieldValueMap) -> List[str]:
    """Distinct placeholder ids, in order, that have no non-blank value."""
    unfilled: List[str] = []
    for field_id in iter_placeholder_ids(content):
        if not (values.get(field_id) or "").strip() and field_id not in unfilled:
            unfilled.append(field_id)
    return unfilled


def spelling_warnings(
    content: str, library: Optional[ContentLibrary] = None
) -> List[SpellingWarning]:
    """Misspelled words present in the content, in table order."""
    warnings = []
    for wrong, correct in _library(library).misspellings.items():
        matches = re.findall(rf"\b{re.escape(wrong)}\b", content or "", re.IGNORECASE)
        if matches:
            warnings.append(SpellingWarning(word=wrong, suggestion=correct, count=len(matches)))
    return warnings


def legal_terms_in_content(
    content: str, library: Optional[ContentLibrary] = None
) -> List[LegalTermDefinition]:
    """Legal term definitions whose key occurs in the content."""
    lowered = (content or "").lower()
    return [term for term in _library(library).legal_terms if term.key in lowered]


def validation_score(
    content: str,
    values: FieldValueMap,
    library: Optional[ContentLibrary] = None,
) -> int:
    """
    Score the contract from 0 to 100.

    The checklist coverage gives up to 100 points; every unfilled
    placeholder costs 5 and every distinct misspelling costs 3.
    """
    checklist = checklist_status(content, library)
    if not checklist:
        return 0
    checked = sum(1 for item in checklist if item.checked)
    score = CHECKLIST_WEIGHT * checked / len(checklist)
    score -= UNFILLED_PENALTY * len(unfilled_placeholders(content, values))
    score -= SPELLING_PENALTY * len(spelling_warnings(content, library))
    return max(0, min(100, round(score)))
