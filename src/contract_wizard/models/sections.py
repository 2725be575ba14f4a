"""Section and checker issue models."""

from dataclasses import dataclass
from typing import Any, Dict, Optional

from .enums import IssueType, SectionKind


@dataclass(frozen=True)
class ContractSection:
    """
    Contiguous, classified block of contract text.

    Sections are derived transiently from the content string; only the
    reassembled content is ever persisted.
    """
    id: SectionKind
    label: str
    content: str

    @property
    def order(self) -> int:
        """Canonical rank of the section (999 for unknown)."""
        return self.id.order

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id.value,
            "label": self.label,
            "content": self.content,
            "order": self.order,
        }


@dataclass(frozen=True)
class CheckIssue:
    """
    Problem detected by the contract checker.

    ``position`` is an offset into the checked content. Issues without
    ``original``/``fix`` are informational and are not applied positionally.
    """
    type: IssueType
    message: str
    position: Optional[int] = None
    original: Optional[str] = None
    fix: Optional[str] = None
    rule: str = ""

    @property
    def is_fixable(self) -> bool:
        """Check if the issue carries enough data for a positional fix."""
        return (
            self.position is not None
            and self.original is not None
            and self.fix is not None
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": self.type.value,
            "message": self.message,
            "position": self.position,
            "original": self.original,
            "fix": self.fix,
            "rule": self.rule,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CheckIssue":
        return cls(
            type=IssueType(data["type"]),
            message=data.get("message", ""),
            position=data.get("position"),
            original=data.get("original"),
            fix=data.get("fix"),
            rule=data.get("rule", ""),
        )
