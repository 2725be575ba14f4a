"""Placeholder extraction for contract content.

This module scans free-form contract text for ``{{identifier}}`` tokens and
turns them into an ordered, de-duplicated list of typed fields.
"""

import logging
import re
from typing import Dict, Iterable, List, Optional, Tuple

from ..models.enums import FieldType
from ..models.fields import ContractField, FieldValueMap


logger = logging.getLogger(__name__)

PLACEHOLDER_PATTERN = re.compile(r"\{\{([a-zA-Z_][a-zA-Z0-9_]*)\}\}")

# Checked in order; the first matching group decides the field type.
TYPE_HINTS: List[Tuple[FieldType, Tuple[str, ...]]] = [
    (FieldType.DATE, ("date", "deadline", "expir")),
    (FieldType.NUMBER, (
        "amount", "price", "cost", "rate", "fee", "payment", "total", "deposit",
    )),
    (FieldType.TEXTAREA, (
        "description", "scope", "terms", "details", "address", "notes",
        "comment", "message",
    )),
]

REQUIRED_HINTS = ("name", "date", "amount", "email", "address")


def infer_field_type(identifier: str) -> FieldType:
    """Infer the input type of a placeholder from its identifier."""
    lowered = identifier.lower()
    for field_type, hints in TYPE_HINTS:
        if any(hint in lowered for hint in hints):
            return field_type
    return FieldType.TEXT


def derive_label(identifier: str) -> str:
    """
    Build a human-readable label from an identifier.

    ``due_date`` becomes ``Due Date`` and ``clientName`` becomes
    ``Client Name``.
    """
    label = identifier.replace("_", " ")
    label = re.sub(r"(?<=[a-z0-9])([A-Z])", r" \1", label)
    label = re.sub(r"\b\w", lambda m: m.group(0).upper(), label)
    return label.strip()


def is_required(identifier: str) -> bool:
    """Check if a placeholder should be marked as required."""
    lowered = identifier.lower()
    return any(hint in lowered for hint in REQUIRED_HINTS)


def build_field(identifier: str) -> ContractField:
    """Create the field describing a single placeholder identifier."""
    label = derive_label(identifier)
    return ContractField(
        id=identifier,
        label=label,
        type=infer_field_type(identifier),
        placeholder=f"Enter {label.lower()}",
        required=is_required(identifier),
    )


def iter_placeholder_ids(content: str) -> Iterable[str]:
    """Yield placeholder identifiers in order of appearance (with repeats)."""
    for match in PLACEHOLDER_PATTERN.finditer(content or ""):
        yield match.group(1)


def extract_fields(content: str) -> List[ContractField]:
    """
    Extract the ordered field list from contract content.

    The first occurrence of an identifier wins; later repeats are ignored.

    Args:
        content: Contract text, possibly empty.

    Returns:
        Fields in first-appearance order, one per distinct identifier.
    """
    seen = set()
    fields: List[ContractField] = []
    for identifier in iter_placeholder_ids(content):
        if identifier in seen:
            continue
        seen.add(identifier)
        fields.append(build_field(identifier))
    return fields


def merge_fields(
    existing: List[ContractField], new: Iterable[ContractField]
) -> List[ContractField]:
    """Append fields whose id is not already present, keeping order."""
    merged = list(existing)
    known = {f.id for f in merged}
    for candidate in new:
        if candidate.id not in known:
            known.add(candidate.id)
            merged.append(candidate)
    return merged


def slugify_label(label: str) -> str:
    """Identifier for a custom field: lower case, non-alphanumerics as ``_``."""
    return re.sub(r"[^a-z0-9]+", "_", label.lower())


def field_from_label(
    label: str,
    field_type: FieldType = FieldType.TEXT,
    required: bool = False,
) -> Optional[ContractField]:
    """Build a user-defined field from its label, or None for a blank label."""
    if not label or not label.strip():
        return None
    return ContractField(
        id=slugify_label(label),
        label=label,
        type=field_type,
        placeholder=f"Enter {label.lower()}",
        required=required,
    )


def add_field(
    fields: List[ContractField],
    label: str,
    field_type: FieldType = FieldType.TEXT,
    required: bool = False,
) -> List[ContractField]:
    """
    Return a new field list with a custom field appended.

    A blank label leaves the list unchanged. The field is available in the
    content as ``{{<id>}}``.
    """
    new_field = field_from_label(label, field_type, required)
    if new_field is None:
        logger.warning("Ignoring custom field with a blank label")
        return list(fields)
    logger.debug(f"Added custom field '{new_field.id}'")
    return list(fields) + [new_field]


def remove_field(
    fields: List[ContractField],
    values: FieldValueMap,
    field_id: str,
) -> Tuple[List[ContractField], Dict[str, str]]:
    """Drop a field and its entered value; returns new list and map."""
    remaining = [f for f in fields if f.id != field_id]
    new_values = {k: v for k, v in values.items() if k != field_id}
    return remaining, new_values
