"""Field and record models for the contract wizard."""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .enums import FieldType

# Mapping from field id to the value entered by the user.
FieldValueMap = Dict[str, str]


@dataclass(frozen=True)
class ContractField:
    """
    Fillable slot corresponding to one ``{{identifier}}`` placeholder.

    The ``id`` is unique within a field list; list order is the order in
    which placeholders first appear in the scanned text.
    """
    id: str
    label: str
    type: FieldType = FieldType.TEXT
    placeholder: str = ""
    required: bool = False

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the wire representation used by templates and drafts."""
        return {
            "id": self.id,
            "label": self.label,
            "type": self.type.value,
            "placeholder": self.placeholder,
            "required": self.required,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ContractField":
        """Build a field from a template or draft payload."""
        if "id" not in data:
            raise ValueError("Missing required field 'id' in ContractField")
        field_id = str(data["id"])
        try:
            field_type = FieldType(data.get("type", FieldType.TEXT.value))
        except ValueError:
            field_type = FieldType.TEXT
        return cls(
            id=field_id,
            label=str(data.get("label") or field_id),
            type=field_type,
            placeholder=str(data.get("placeholder") or ""),
            required=bool(data.get("required", False)),
        )


@dataclass(frozen=True)
class TemplateRecord:
    """Contract template as served by the template store."""
    id: str
    name: str
    content: str
    fields: List[ContractField] = field(default_factory=list)
    category: Optional[str] = None
    description: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TemplateRecord":
        return cls(
            id=str(data.get("id", "")),
            name=str(data.get("name", "")),
            content=str(data.get("content", "")),
            fields=[ContractField.from_dict(f) for f in data.get("fields") or []],
            category=data.get("category"),
            description=data.get("description"),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "content": self.content,
            "fields": [f.to_dict() for f in self.fields],
            "category": self.category,
            "description": self.description,
        }


@dataclass(frozen=True)
class ClientRecord:
    """Client as served by the client store."""
    id: str
    name: str
    email: str
    phone: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ClientRecord":
        return cls(
            id=str(data.get("id", "")),
            name=str(data.get("name", "")),
            email=str(data.get("email", "")),
            phone=data.get("phone"),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "email": self.email,
            "phone": self.phone,
        }
