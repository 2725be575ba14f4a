"""Enumerations for the contract wizard."""

from enum import Enum
from typing import List


class FieldType(Enum):
    """Input types for fillable contract fields."""
    TEXT = "text"
    TEXTAREA = "textarea"
    DATE = "date"
    NUMBER = "number"


class SectionKind(Enum):
    """Logical sections of a contract, declared in canonical order."""
    PARTIES = "parties"
    SCOPE = "scope"
    TIMELINE = "timeline"
    PAYMENT = "payment"
    REVISIONS = "revisions"
    OWNERSHIP = "ownership"
    CONFIDENTIALITY = "confidentiality"
    TERMINATION = "termination"
    LIABILITY = "liability"
    SIGNATURES = "signatures"
    UNKNOWN = "unknown"

    @classmethod
    def canonical(cls) -> List["SectionKind"]:
        """The ten known kinds in legal-document order."""
        return [kind for kind in cls if kind is not cls.UNKNOWN]

    @property
    def order(self) -> int:
        """Canonical rank, 999 for unknown sections."""
        if self is SectionKind.UNKNOWN:
            return 999
        return SectionKind.canonical().index(self)


class IssueType(Enum):
    """Categories of problems reported by the contract checker."""
    SPELLING = "spelling"
    PUNCTUATION = "punctuation"
    FORMATTING = "formatting"
    CAPITALIZATION = "capitalization"


class CompensationType(Enum):
    """How the client compensates the service provider."""
    NO_COMPENSATION = "no_compensation"
    FIXED_AMOUNT = "fixed_amount"
    HOURLY = "hourly"
    MILESTONE = "milestone"
    OTHER = "other"


class PaymentSchedule(Enum):
    """When payments fall due."""
    UPFRONT = "upfront"
    PARTIAL = "partial"
    FULL = "full"
    SPLIT = "split"
    INCREMENTAL = "incremental"


class WizardStep(Enum):
    """Steps of the contract creation wizard."""
    TEMPLATE = 1
    CLIENT = 2
    FIELDS = 3
    AMOUNTS = 4
    PREVIEW = 5
