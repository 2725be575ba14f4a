"""Section detection for contract content.

This module segments contract text into labelled logical sections using
header heuristics and keyword scoring.
"""

import logging
import re
from dataclasses import dataclass, field
from typing import List, Optional

from ..config.config_manager import default_library
from ..config.models import ContentLibrary
from ..models.enums import SectionKind
from ..models.sections import ContractSection
from .section_patterns import SectionPatternMatcher


logger = logging.getLogger(__name__)

PARAGRAPH_SPLIT = re.compile(r"\n\s*\n")
UPPERCASE_HEADER = re.compile(r"^[A-Z][A-Z\s&/\-]+$")
NUMBERED_HEADER = re.compile(r"^\d+[.)]\s+[A-Z]")
AGREED_HEADER = re.compile(r"^agreed", re.IGNORECASE)

UNKNOWN_LABEL_LENGTH = 50
UNKNOWN_SECTION_LABEL = "Unknown Section"
WHOLE_CONTENT_LABEL = "Contract Content"


def is_header_line(line: str) -> bool:
    """
    Check if the first line of a paragraph opens a new section.

    Headers are upper-case titles longer than three characters, numbered
    titles such as ``3. PAYMENT``, divider lines containing ``---`` and
    lines starting with "agreed".
    """
    if len(line) > 3 and UPPERCASE_HEADER.match(line):
        return True
    if NUMBERED_HEADER.match(line):
        return True
    return "---" in line or bool(AGREED_HEADER.match(line))


@dataclass
class _OpenSection:
    """Section being accumulated during the scan."""
    kind: SectionKind
    label: str
    paragraphs: List[str] = field(default_factory=list)


class SectionDetector:
    """
    Splits contract content into classified sections.

    Paragraphs are separated by blank lines. A header paragraph closes the
    open section and starts a new one; any other paragraph extends the open
    section. A section is classified when it opens, from its first line and
    its first paragraph; later paragraphs never change its kind.
    """

    def __init__(self, library: Optional[ContentLibrary] = None):
        self._matcher = SectionPatternMatcher(library or default_library())

    @property
    def matcher(self) -> SectionPatternMatcher:
        return self._matcher

    def detect(self, content: str) -> List[ContractSection]:
        """
        Detect the sections of a contract.

        Args:
            content: Contract text, possibly empty.

        Returns:
            Sections in document order. Empty content gives an empty list;
            content without any recognisable section gives a single
            unknown section holding the trimmed content.
        """
        if not content or not content.strip():
            return []

        sections: List[ContractSection] = []
        current: Optional[_OpenSection] = None

        for raw in PARAGRAPH_SPLIT.split(content):
            paragraph = raw.strip()
            if not paragraph:
                continue
            first_line = paragraph.split("\n")[0].strip()

            if is_header_line(first_line):
                if current is not None:
                    sections.append(self._close(current))
                current = self._open(first_line, paragraph, first_line[:UNKNOWN_LABEL_LENGTH])
            elif current is None:
                current = self._open(first_line, paragraph, UNKNOWN_SECTION_LABEL)
            current.paragraphs.append(paragraph)

        if current is not None:
            sections.append(self._close(current))

        if not sections:
            sections.append(ContractSection(
                id=SectionKind.UNKNOWN,
                label=WHOLE_CONTENT_LABEL,
                content=content.strip(),
            ))

        logger.debug(
            f"Detected {len(sections)} sections: "
            f"{[s.id.value for s in sections]}"
        )
        return sections

    def _open(self, first_line: str, paragraph: str, unknown_label: str) -> _OpenSection:
        """Classify the paragraph that starts a section."""
        kind = self._matcher.classify(first_line, paragraph)
        if kind is None:
            return _OpenSection(kind=SectionKind.UNKNOWN, label=unknown_label)
        return _OpenSection(kind=kind, label=self._matcher.label_for(kind))

    @staticmethod
    def _close(section: _OpenSection) -> ContractSection:
        return ContractSection(
            id=section.kind,
            label=section.label,
            content="\n\n".join(section.paragraphs),
        )


def detect_sections(
    content: str, library: Optional[ContentLibrary] = None
) -> List[ContractSection]:
    """Detect sections using the given or the built-in content library."""
    return SectionDetector(library).detect(content)
