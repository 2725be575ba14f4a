"""Section reordering for contract content.

Re-emits detected sections in canonical legal-document order, or moves a
single section up or down on request.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

from ..analyzers.section_detector import SectionDetector
from ..config.models import ContentLibrary
from ..models.enums import SectionKind
from ..models.sections import ContractSection


logger = logging.getLogger(__name__)


class ReorderStatus(Enum):
    """Outcome of an automatic reorder."""
    EMPTY = "empty"
    NO_SECTIONS = "no_sections"
    ALREADY_ORDERED = "already_ordered"
    REORDERED = "reordered"


class MoveDirection(Enum):
    UP = "up"
    DOWN = "down"


@dataclass(frozen=True)
class ReorderResult:
    """Content after an automatic reorder, with what happened to it."""
    content: str
    status: ReorderStatus
    section_count: int = 0

    @property
    def changed(self) -> bool:
        return self.status is ReorderStatus.REORDERED


def canonical_sort(sections: List[ContractSection]) -> List[ContractSection]:
    """Stable sort by canonical order; unknown sections sort last."""
    return sorted(sections, key=lambda s: s.order)


def is_canonically_ordered(sections: List[ContractSection]) -> bool:
    """Check if the section ids already follow canonical order."""
    return [s.id for s in sections] == [s.id for s in canonical_sort(sections)]


def _title_block(title: str, content: str) -> Optional[str]:
    """The title line to prepend, unless the content already mentions it."""
    if title and title.lower() not in (content or "").lower():
        return title
    return None


def _assemble(blocks: List[str]) -> str:
    return "\n\n".join(b for b in blocks if b).strip()


def reorder(
    sections: List[ContractSection],
    title: str = "",
    content: str = "",
) -> str:
    """
    Rebuild contract content in canonical order.

    Known sections come first in canonical order, then unknown sections in
    their original relative order, then every signature section.

    Args:
        sections: Sections as detected from ``content``.
        title: Contract title, prepended when the content lacks it.
        content: The content the sections came from.

    Returns:
        The reordered content, or ``content`` itself when the sections are
        already in canonical order.
    """
    if content and is_canonically_ordered(sections):
        return content

    ordered = canonical_sort(sections)
    known = [
        s for s in ordered
        if s.id not in (SectionKind.UNKNOWN, SectionKind.SIGNATURES)
    ]
    unknown = [s for s in ordered if s.id is SectionKind.UNKNOWN]
    signatures = [s for s in ordered if s.id is SectionKind.SIGNATURES]

    blocks = [_title_block(title, content) or ""]
    blocks.extend(s.content.strip() for s in known + unknown + signatures)
    rebuilt = _assemble(blocks)
    return rebuilt or content


def auto_reorder(
    content: str,
    title: str = "",
    library: Optional[ContentLibrary] = None,
) -> ReorderResult:
    """
    Detect sections and put them in canonical order.

    Content with no distinct sections (nothing, or a single unknown block)
    is returned unchanged with status ``NO_SECTIONS``.
    """
    if not content or not content.strip():
        return ReorderResult(content=content or "", status=ReorderStatus.EMPTY)

    sections = SectionDetector(library).detect(content)
    if not sections or (len(sections) == 1 and sections[0].id is SectionKind.UNKNOWN):
        logger.warning("Reorder skipped: no distinct sections detected")
        return ReorderResult(
            content=content, status=ReorderStatus.NO_SECTIONS, section_count=len(sections)
        )

    if is_canonically_ordered(sections):
        return ReorderResult(
            content=content,
            status=ReorderStatus.ALREADY_ORDERED,
            section_count=len(sections),
        )

    rebuilt = reorder(sections, title=title, content=content)
    logger.info(f"Reordered {len(sections)} sections into canonical order")
    return ReorderResult(
        content=rebuilt, status=ReorderStatus.REORDERED, section_count=len(sections)
    )


def move_section(
    sections: List[ContractSection],
    index: int,
    direction: MoveDirection,
    title: str = "",
    content: str = "",
) -> str:
    """
    Swap a section with its neighbour and rebuild the content.

    The rest of the sections keep their positions; no canonical sort is
    applied. A rejected move returns ``content`` unchanged.
    """
    try:
        direction = MoveDirection(direction)
    except ValueError:
        logger.warning(f"Move rejected: unknown direction {direction!r}")
        return content
    if len(sections) < 2:
        logger.warning("Move rejected: need at least 2 sections")
        return content

    target = index - 1 if direction is MoveDirection.UP else index + 1
    if not (0 <= index < len(sections)) or not (0 <= target < len(sections)):
        return content

    moved = list(sections)
    moved[index], moved[target] = moved[target], moved[index]

    blocks = [_title_block(title, content) or ""]
    blocks.extend(s.content.strip() for s in moved)
    logger.debug(f"Moved '{moved[target].label}' {direction.value}")
    return _assemble(blocks)
