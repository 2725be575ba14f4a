"""Exceptions for contract import and export."""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


SUPPORTED_IMPORT_FORMATS = [".txt", ".docx", ".pdf"]


@dataclass
class ContractIOError(Exception):
    """
    Base exception for contract import/export errors.

    Attributes:
        message: Human-readable error description.
        file_path: Path to the file that caused the error.
        details: Additional error details.
    """
    message: str
    file_path: Optional[str] = None
    details: Optional[Dict[str, Any]] = field(default_factory=dict)

    def __post_init__(self):
        if self.details is None:
            self.details = {}
        super().__init__(str(self))

    def __str__(self) -> str:
        if self.file_path:
            return f"{self.message} | File: {self.file_path}"
        return self.message

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary for logging/serialization."""
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "file_path": self.file_path,
            "details": self.details,
        }


@dataclass
class UnsupportedFormatError(ContractIOError):
    """The file extension is not one the importer understands."""

    def get_supported_formats(self) -> List[str]:
        return self.details.get("supported_formats", SUPPORTED_IMPORT_FORMATS)


@dataclass
class DocumentCorruptedError(ContractIOError):
    """The file exists but cannot be read as its format."""
