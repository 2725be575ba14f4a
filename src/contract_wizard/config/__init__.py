"""Content library configuration for the contract wizard."""

from .config_manager import (
    LIBRARY_PATH_ENV,
    ConfigurationManager,
    default_library,
)
from .models import (
    ConfigurationError,
    ContentLibrary,
    ContentSnippet,
    LegalClause,
    LegalTermDefinition,
    PaymentTermTemplate,
    SectionDefinition,
    ValidationResult,
)

__all__ = [
    "LIBRARY_PATH_ENV",
    "ConfigurationManager",
    "default_library",
    "ConfigurationError",
    "ContentLibrary",
    "ContentSnippet",
    "LegalClause",
    "LegalTermDefinition",
    "PaymentTermTemplate",
    "SectionDefinition",
    "ValidationResult",
]
