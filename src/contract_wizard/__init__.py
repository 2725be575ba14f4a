"""
Contract Wizard

Templating and validation engine for service contracts: placeholder fields,
section detection and ordering, proofreading, payment terms and drafts.
"""

__version__ = "0.1.0"

# Export main components
from .extractors import extract_fields, merge_fields
from .models.enums import (
    CompensationType,
    FieldType,
    IssueType,
    PaymentSchedule,
    SectionKind,
    WizardStep,
)
from .models.fields import ClientRecord, ContractField, TemplateRecord
from .models.sections import CheckIssue, ContractSection
from .models.compensation import CompensationConfig, MilestonePayment
from .analyzers import SectionDetector, detect_sections, validation_score
from .generators import (
    apply_field_values,
    auto_reorder,
    generate_payment_section,
    insert_payment_section,
    render_preview,
)
from .checker import ContractChecker, auto_fix_all, check_contract
from .wizard import ContractDraftState
from .clients import CollaboratorError, ContractApiClient
from .storage import DatabaseManager, DraftRepository
from .config import (
    ConfigurationManager,
    ConfigurationError,
    ContentLibrary,
    ValidationResult,
    default_library,
)

__all__ = [
    "extract_fields",
    "merge_fields",
    "CompensationType",
    "FieldType",
    "IssueType",
    "PaymentSchedule",
    "SectionKind",
    "WizardStep",
    "ClientRecord",
    "ContractField",
    "TemplateRecord",
    "CheckIssue",
    "ContractSection",
    "CompensationConfig",
    "MilestonePayment",
    "SectionDetector",
    "detect_sections",
    "validation_score",
    "apply_field_values",
    "auto_reorder",
    "generate_payment_section",
    "insert_payment_section",
    "render_preview",
    "ContractChecker",
    "auto_fix_all",
    "check_contract",
    "ContractDraftState",
    "CollaboratorError",
    "ContractApiClient",
    "DatabaseManager",
    "DraftRepository",
    "ConfigurationManager",
    "ConfigurationError",
    "ContentLibrary",
    "ValidationResult",
    "default_library",
]
