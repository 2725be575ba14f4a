"""Import and export of contract text."""

from .exceptions import (
    SUPPORTED_IMPORT_FORMATS,
    ContractIOError,
    DocumentCorruptedError,
    UnsupportedFormatError,
)
from .exporter import export_docx, export_filename, export_text, render_text
from .importer import ImportedContract, import_contract

__all__ = [
    "SUPPORTED_IMPORT_FORMATS",
    "ContractIOError",
    "DocumentCorruptedError",
    "UnsupportedFormatError",
    "export_docx",
    "export_filename",
    "export_text",
    "render_text",
    "ImportedContract",
    "import_contract",
]
