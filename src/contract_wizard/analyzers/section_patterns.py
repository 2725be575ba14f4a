"""Section pattern matching for contract content.

This module classifies a block of contract text into one of the canonical
section kinds using the keyword table of the content library.
"""

from dataclasses import dataclass
from typing import List, Optional, Tuple

from ..config.models import ContentLibrary, SectionDefinition
from ..models.enums import SectionKind


@dataclass
class FallbackRule:
    """Substring fallback applied when no keyword scores."""
    kind: SectionKind
    needles: Tuple[str, ...]


# Checked in order, against the header line only.
FALLBACK_RULES: List[FallbackRule] = [
    FallbackRule(SectionKind.SIGNATURES, ("agreed", "signature", "accept")),
    FallbackRule(SectionKind.PARTIES, ("party", "client", "provider", "contractor")),
    FallbackRule(SectionKind.PAYMENT, ("payment", "fee", "compensation", "amount")),
    FallbackRule(SectionKind.SCOPE, ("scope", "work", "services")),
    FallbackRule(SectionKind.TIMELINE, ("timeline", "deadline", "schedule")),
]


class SectionPatternMatcher:
    """
    Keyword-scoring classifier for contract sections.

    A keyword found in the header line scores its own length, so longer
    and more specific keywords dominate; a keyword found anywhere in the
    block scores one. The highest score wins and ties go to the kind that
    comes first in canonical order.
    """

    def __init__(self, library: ContentLibrary):
        self._library = library
        self._definitions = library.get_sections_in_order()

    @property
    def definitions(self) -> List[SectionDefinition]:
        """Checklist entries in canonical order."""
        return list(self._definitions)

    def score(self, definition: SectionDefinition, header: str, block: str) -> int:
        """Calculate the score of one section definition."""
        header_lower = header.lower()
        block_lower = block.lower()
        total = 0
        for keyword in definition.keywords:
            keyword_lower = keyword.lower()
            if keyword_lower in header_lower:
                total += len(keyword_lower)
            if keyword_lower in block_lower:
                total += 1
        return total

    def best_match(self, header: str, block: str) -> Tuple[Optional[SectionKind], int]:
        """
        Find the highest scoring section kind.

        Returns:
            Tuple of (kind or None, score).
        """
        best_kind: Optional[SectionKind] = None
        best_score = 0
        for definition in self._definitions:
            current = self.score(definition, header, block)
            if current > best_score:
                best_score = current
                best_kind = definition.id
        return best_kind, best_score

    def fallback(self, header: str) -> Optional[SectionKind]:
        """Apply the substring fallbacks to a header line."""
        header_lower = header.lower()
        for rule in FALLBACK_RULES:
            if any(needle in header_lower for needle in rule.needles):
                return rule.kind
        return None

    def classify(self, header: str, block: str) -> Optional[SectionKind]:
        """
        Classify a block by its header line and full text.

        Args:
            header: The first line of the block.
            block: The whole block text.

        Returns:
            The section kind, or None when nothing matches.
        """
        kind, _ = self.best_match(header, block)
        if kind is None:
            kind = self.fallback(header)
        return kind

    def label_for(self, kind: SectionKind) -> str:
        """Display label of a section kind."""
        return self._library.label_for(kind)

    def get_keywords(self, kind: SectionKind) -> List[str]:
        """Get all keywords for a section kind."""
        definition = self._library.get_section(kind)
        return list(definition.keywords) if definition else []

    def find_keywords(self, text: str, kind: SectionKind) -> List[str]:
        """Keywords of a section kind that occur in the text."""
        text_lower = text.lower()
        return [k for k in self.get_keywords(kind) if k.lower() in text_lower]
