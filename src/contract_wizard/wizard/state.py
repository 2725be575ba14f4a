"""Immutable state of the contract creation wizard."""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from ..models.compensation import CompensationConfig
from ..models.enums import WizardStep
from ..models.fields import ClientRecord, ContractField, FieldValueMap, TemplateRecord


@dataclass(frozen=True)
class NewClient:
    """Client entered inline instead of picked from the client store."""
    name: str
    email: str
    phone: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "NewClient":
        return cls(
            name=str(data.get("name", "")),
            email=str(data.get("email", "")),
            phone=data.get("phone"),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {"name": self.name, "email": self.email, "phone": self.phone}


@dataclass(frozen=True)
class ContractDraftState:
    """
    Everything the wizard knows about the contract being created.

    Transitions never mutate a state; they return a new one. ``client`` and
    ``new_client`` are mutually exclusive.
    """
    step: WizardStep = WizardStep.TEMPLATE
    template_id: Optional[str] = None
    template: Optional[TemplateRecord] = None
    client_id: Optional[str] = None
    client: Optional[ClientRecord] = None
    new_client: Optional[NewClient] = None
    field_values: FieldValueMap = field(default_factory=dict)
    custom_fields: List[ContractField] = field(default_factory=list)
    deposit_amount: str = "0"
    total_amount: str = "0"
    title: str = ""
    content: str = ""
    compensation: CompensationConfig = field(default_factory=CompensationConfig)
    draft_id: Optional[str] = None

    @property
    def has_compensation(self) -> bool:
        return self.compensation.has_compensation

    @property
    def fields(self) -> List[ContractField]:
        """Template fields followed by custom fields."""
        template_fields = list(self.template.fields) if self.template else []
        known = {f.id for f in template_fields}
        return template_fields + [f for f in self.custom_fields if f.id not in known]

    @property
    def client_contact(self) -> Optional[Dict[str, Any]]:
        """Name, email and phone of whichever client is set."""
        if self.new_client is not None:
            return self.new_client.to_dict()
        if self.client is not None:
            return {
                "name": self.client.name,
                "email": self.client.email,
                "phone": self.client.phone,
            }
        return None
