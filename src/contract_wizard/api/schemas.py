"""Request bodies of the contract wizard API."""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field


class ContentRequest(BaseModel):
    content: str = Field("", description="Contract text.")


class FieldPayload(BaseModel):
    id: str = Field(..., description="Placeholder identifier.")
    label: str = Field("", description="Human-readable label; defaults to the id.")
    type: str = Field("text", description="One of text, textarea, date, number.")
    placeholder: str = ""
    required: bool = False


class ApplyFieldsRequest(BaseModel):
    content: str = ""
    fields: List[FieldPayload] = Field(default_factory=list)
    values: Dict[str, str] = Field(default_factory=dict)
    preview: bool = Field(False, description="Show empty fields as [Label] instead of blanking them.")


class ReorderRequest(BaseModel):
    content: str = ""
    title: str = ""


class MoveSectionRequest(BaseModel):
    content: str = ""
    title: str = ""
    index: int = Field(..., description="Position of the section to move.")
    direction: str = Field(..., pattern="^(up|down)$")


class FixRequest(BaseModel):
    content: str = ""
    issues: Optional[List[Dict[str, Any]]] = Field(
        None, description="Issues from a previous check; the content is re-checked when omitted."
    )
    literal_contractions: bool = True


class PaymentSectionRequest(BaseModel):
    compensation: Dict[str, Any] = Field(
        default_factory=dict, description="Compensation config in camelCase."
    )
    content: Optional[str] = Field(None, description="Contract to insert the section into.")


class ScoreRequest(BaseModel):
    content: str = ""
    values: Dict[str, str] = Field(default_factory=dict)


class ExportRequest(BaseModel):
    title: str = ""
    content: str = ""
    fields: List[FieldPayload] = Field(default_factory=list)
    values: Dict[str, str] = Field(default_factory=dict)
    format: str = Field("txt", pattern="^(txt|docx)$")
