"""Exceptions raised by the collaborator clients."""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional


@dataclass
class CollaboratorError(Exception):
    """
    A call to an external collaborator failed.

    Attributes:
        message: Human-readable error description.
        status_code: HTTP status of the response, None when no response
            was received.
        endpoint: Path of the endpoint that was called.
        details: Response body or other context.
    """
    message: str
    status_code: Optional[int] = None
    endpoint: Optional[str] = None
    details: Optional[Dict[str, Any]] = field(default_factory=dict)

    def __post_init__(self):
        if self.details is None:
            self.details = {}
        super().__init__(str(self))

    def __str__(self) -> str:
        parts = [self.message]
        if self.status_code is not None:
            parts.append(f"Status: {self.status_code}")
        if self.endpoint:
            parts.append(f"Endpoint: {self.endpoint}")
        return " | ".join(parts)

    @property
    def is_not_found(self) -> bool:
        return self.status_code == 404

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary for logging/serialization."""
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "status_code": self.status_code,
            "endpoint": self.endpoint,
            "details": self.details,
        }
