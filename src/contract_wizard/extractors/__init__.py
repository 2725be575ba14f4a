"""Placeholder extraction components for the contract wizard."""

from .placeholder_extractor import (
    PLACEHOLDER_PATTERN,
    add_field,
    build_field,
    derive_label,
    extract_fields,
    field_from_label,
    infer_field_type,
    merge_fields,
    remove_field,
)

__all__ = [
    "PLACEHOLDER_PATTERN",
    "add_field",
    "build_field",
    "derive_label",
    "extract_fields",
    "field_from_label",
    "infer_field_type",
    "merge_fields",
    "remove_field",
]
