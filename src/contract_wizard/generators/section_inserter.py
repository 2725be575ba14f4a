"""Insertion of quick-insert sections and snippets.

Missing checklist sections are placed where they belong in canonical order;
placeholders of inserted text become fields.
"""

import logging
import re
from dataclasses import dataclass, field
from typing import List, Optional

from ..config.config_manager import default_library
from ..config.models import ContentLibrary
from ..extractors.placeholder_extractor import extract_fields, merge_fields
from ..models.enums import SectionKind
from ..models.fields import ContractField


logger = logging.getLogger(__name__)

HEADER_BLOCK = re.compile(r"^(.*?)(---|\n\n)", re.DOTALL)


@dataclass(frozen=True)
class InsertionResult:
    """Content and fields after inserting text."""
    content: str
    fields: List[ContractField]
    added_fields: List[ContractField] = field(default_factory=list)
    already_present: bool = False


def _insert_position(content: str, kind: SectionKind, library: ContentLibrary) -> int:
    """Offset at which a section of the given kind should be inserted."""
    if kind is SectionKind.SIGNATURES:
        return len(content)

    if kind is SectionKind.PARTIES:
        match = HEADER_BLOCK.match(content)
        return match.end() if match else 0

    lowered = content.lower()
    canonical = SectionKind.canonical()
    for later in canonical[canonical.index(kind) + 1:]:
        definition = library.get_section(later)
        if definition is None:
            continue
        for keyword in definition.keywords:
            keyword_index = lowered.find(keyword.lower())
            if keyword_index > 0:
                line_start = content.rfind("\n", 0, keyword_index)
                if line_start > 0:
                    return line_start
    return len(content)


def insert_missing_section(
    content: str,
    fields: List[ContractField],
    kind: SectionKind,
    library: Optional[ContentLibrary] = None,
) -> InsertionResult:
    """
    Insert the quick-insert text of a checklist section.

    Signatures always go at the end and parties after the header block.
    Other sections go before the line holding the first keyword of a
    section that comes later in canonical order, or at the end.

    Args:
        content: Current contract text.
        fields: Current field list.
        kind: The checklist section to add.
        library: Content library with the quick-insert texts.

    Returns:
        The new content and fields. ``already_present`` reports whether
        the section's keywords were already in the content; the section is
        inserted regardless.
    """
    library = library or default_library()
    content = content or ""
    definition = library.get_section(kind)
    if definition is None or not definition.quick_insert:
        logger.warning(f"No quick insert available for section '{kind.value}'")
        return InsertionResult(content=content, fields=list(fields))

    already_present = definition.matches(content)
    if already_present:
        logger.info(f"Section '{kind.value}' may already exist, adding anyway")

    position = _insert_position(content, kind, library)
    prefix = "\n\n"
    if kind is SectionKind.PARTIES and position == 0:
        prefix = ""

    new_content = content[:position] + prefix + definition.quick_insert + content[position:]
    added = [
        f for f in extract_fields(definition.quick_insert)
        if f.id not in {existing.id for existing in fields}
    ]
    return InsertionResult(
        content=new_content,
        fields=merge_fields(fields, added),
        added_fields=added,
        already_present=already_present,
    )


def insert_snippet(
    content: str,
    fields: List[ContractField],
    snippet: str,
    start: Optional[int] = None,
    end: Optional[int] = None,
) -> InsertionResult:
    """
    Replace the selection ``content[start:end]`` with a snippet.

    Without a selection the snippet is appended. New placeholders in the
    snippet are added to the field list.
    """
    content = content or ""
    if start is None:
        start = len(content)
    if end is None:
        end = start
    start = max(0, min(start, len(content)))
    end = max(start, min(end, len(content)))

    new_content = content[:start] + snippet + content[end:]
    known = {f.id for f in fields}
    added = [f for f in extract_fields(snippet) if f.id not in known]
    if added:
        logger.debug(f"Added {len(added)} fields from snippet")
    return InsertionResult(
        content=new_content,
        fields=merge_fields(fields, added),
        added_fields=added,
    )
