"""Content generation components for the contract wizard."""

from .field_merger import apply_field_values, label_slug, render_preview
from .payment_section import (
    InsertionPoint,
    InsertionStrategy,
    find_insertion_point,
    generate_from_config,
    generate_payment_section,
    has_payment_section,
    insert_payment_section,
)
from .section_inserter import InsertionResult, insert_missing_section, insert_snippet
from .section_reorderer import (
    MoveDirection,
    ReorderResult,
    ReorderStatus,
    auto_reorder,
    canonical_sort,
    is_canonically_ordered,
    move_section,
    reorder,
)

__all__ = [
    "apply_field_values",
    "label_slug",
    "render_preview",
    "InsertionPoint",
    "InsertionStrategy",
    "find_insertion_point",
    "generate_from_config",
    "generate_payment_section",
    "has_payment_section",
    "insert_payment_section",
    "InsertionResult",
    "insert_missing_section",
    "insert_snippet",
    "MoveDirection",
    "ReorderResult",
    "ReorderStatus",
    "auto_reorder",
    "canonical_sort",
    "is_canonically_ordered",
    "move_section",
    "reorder",
]
