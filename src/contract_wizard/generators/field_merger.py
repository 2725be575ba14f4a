"""Field-value merging for contract content.

Substitutes entered field values back into ``{{placeholder}}`` tokens to
produce the final contract prose.
"""

import re
from typing import Iterable

from ..models.fields import ContractField, FieldValueMap


def label_slug(label: str) -> str:
    """Legacy placeholder key: lower-cased label without non-alphanumerics."""
    return re.sub(r"[^a-z0-9]", "", label.lower())


def _token(key: str) -> str:
    return r"\{\{" + re.escape(key) + r"\}\}"


def apply_field_values(
    content: str,
    fields: Iterable[ContractField],
    values: FieldValueMap,
) -> str:
    """
    Replace every placeholder of the given fields with its value.

    Each field is tried under three keys: its id (case-sensitive), the
    slug of its label (case-insensitive) and the exact label text
    (case-sensitive). Missing values become empty strings. Values are
    inserted literally.

    Args:
        content: Contract text containing placeholders.
        fields: Fields whose placeholders should be filled.
        values: Entered values keyed by field id.

    Returns:
        The merged contract text.
    """
    result = content or ""
    for contract_field in fields:
        value = values.get(contract_field.id) or ""

        def replacement(_match, value=value):
            return value

        result = re.sub(_token(contract_field.id), replacement, result)

        slug = label_slug(contract_field.label)
        if slug:
            result = re.sub(_token(slug), replacement, result, flags=re.IGNORECASE)

        if contract_field.label:
            result = re.sub(_token(contract_field.label), replacement, result)
    return result


def render_preview(
    content: str,
    fields: Iterable[ContractField],
    values: FieldValueMap,
) -> str:
    """
    Render content for preview and export.

    Filled placeholders show their value; empty ones show ``[Label]`` so
    the reader can see what is still missing.
    """
    result = content or ""
    for contract_field in fields:
        shown = values.get(contract_field.id) or f"[{contract_field.label}]"
        result = re.sub(
            _token(contract_field.id),
            lambda _match, shown=shown: shown,
            result,
            flags=re.IGNORECASE,
        )
    return result
