"""Compensation models for payment terms generation."""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .enums import CompensationType, PaymentSchedule


@dataclass(frozen=True)
class MilestonePayment:
    """Single milestone payment: a named amount due on a date."""
    name: str
    amount: str
    due_date: str = ""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "MilestonePayment":
        return cls(
            name=str(data.get("name", "")),
            amount=str(data.get("amount", "0")),
            due_date=str(data.get("dueDate", data.get("due_date", "")) or ""),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {"name": self.name, "amount": self.amount, "dueDate": self.due_date}


@dataclass(frozen=True)
class CompensationConfig:
    """
    Parameters describing how and when the client pays.

    Amounts are decimal strings as entered in the wizard. The payment
    section generator only reads this object.
    """
    has_compensation: bool = False
    compensation_type: CompensationType = CompensationType.NO_COMPENSATION
    total_amount: str = "0"
    deposit_amount: str = "0"
    hourly_rate: Optional[str] = None
    milestone_payments: List[MilestonePayment] = field(default_factory=list)
    payment_schedule: Optional[str] = None
    payment_methods: List[str] = field(default_factory=list)
    payment_terms: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CompensationConfig":
        """Build from the camelCase payload used by the wizard and AI fix API."""
        try:
            comp_type = CompensationType(
                data.get("compensationType") or CompensationType.NO_COMPENSATION.value
            )
        except ValueError:
            comp_type = CompensationType.OTHER
        return cls(
            has_compensation=bool(data.get("hasCompensation", False)),
            compensation_type=comp_type,
            total_amount=str(data.get("totalAmount") or "0"),
            deposit_amount=str(data.get("depositAmount") or "0"),
            hourly_rate=data.get("hourlyRate"),
            milestone_payments=[
                MilestonePayment.from_dict(m) for m in data.get("milestonePayments") or []
            ],
            payment_schedule=data.get("paymentSchedule"),
            payment_methods=list(data.get("paymentMethods") or []),
            payment_terms=data.get("paymentTerms"),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "hasCompensation": self.has_compensation,
            "compensationType": self.compensation_type.value,
            "totalAmount": self.total_amount,
            "depositAmount": self.deposit_amount,
            "hourlyRate": self.hourly_rate,
            "milestonePayments": [m.to_dict() for m in self.milestone_payments],
            "paymentSchedule": self.payment_schedule,
            "paymentMethods": list(self.payment_methods),
            "paymentTerms": self.payment_terms,
        }

    @property
    def schedule(self) -> Optional[PaymentSchedule]:
        """The payment schedule as an enum, or None when unset or unknown."""
        if not self.payment_schedule:
            return None
        try:
            return PaymentSchedule(self.payment_schedule)
        except ValueError:
            return None
