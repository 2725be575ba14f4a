"""Contract checker components for the contract wizard."""

from .contract_checker import CheckReport, ContractChecker, auto_fix_all, check_contract
from .rules import (
    CONTRACTIONS,
    LEGAL_TERMS,
    CapitalizationRule,
    ContractionRule,
    MisspellingRule,
    ParenthesisRule,
    PatternRule,
    Rule,
    TabRule,
    build_rules,
)

__all__ = [
    "CheckReport",
    "ContractChecker",
    "auto_fix_all",
    "check_contract",
    "CONTRACTIONS",
    "LEGAL_TERMS",
    "CapitalizationRule",
    "ContractionRule",
    "MisspellingRule",
    "ParenthesisRule",
    "PatternRule",
    "Rule",
    "TabRule",
    "build_rules",
]
