"""Data models and enums for the contract wizard."""

from .enums import (
    CompensationType,
    FieldType,
    IssueType,
    PaymentSchedule,
    SectionKind,
    WizardStep,
)
from .fields import ClientRecord, ContractField, FieldValueMap, TemplateRecord
from .sections import CheckIssue, ContractSection
from .compensation import CompensationConfig, MilestonePayment

__all__ = [
    # Enums
    "CompensationType",
    "FieldType",
    "IssueType",
    "PaymentSchedule",
    "SectionKind",
    "WizardStep",
    # Field models
    "ClientRecord",
    "ContractField",
    "FieldValueMap",
    "TemplateRecord",
    # Section models
    "CheckIssue",
    "ContractSection",
    # Compensation models
    "CompensationConfig",
    "MilestonePayment",
]
