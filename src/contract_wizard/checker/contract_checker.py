"""Contract checker and auto-fixer.

Runs the rule battery over contract content, reports issues with their
position and suggested fix, and applies all fixes in bulk.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from ..config.config_manager import default_library
from ..models.enums import IssueType
from ..models.sections import CheckIssue
from .rules import GLOBAL_FIX_ORDER, Rule, build_rules


logger = logging.getLogger(__name__)


@dataclass
class CheckReport:
    """Summary of a contract check."""
    issues: List[CheckIssue] = field(default_factory=list)

    @property
    def counts_by_type(self) -> Dict[str, int]:
        counts = {issue_type.value: 0 for issue_type in IssueType}
        for issue in self.issues:
            counts[issue.type.value] += 1
        return counts

    @property
    def is_clean(self) -> bool:
        return not self.issues

    @property
    def fixable_count(self) -> int:
        return sum(1 for issue in self.issues if issue.is_fixable)

    def to_dict(self) -> Dict:
        return {
            "issues": [issue.to_dict() for issue in self.issues],
            "counts_by_type": self.counts_by_type,
            "is_clean": self.is_clean,
        }


class ContractChecker:
    """
    Rule-based contract checker.

    Each rule scans the original content; issues at the same position and
    of the same type collapse to the first one reported.
    """

    def __init__(
        self,
        misspellings: Optional[Dict[str, str]] = None,
        literal_contractions: bool = True,
    ):
        """
        Initialize the checker.

        Args:
            misspellings: Misspelling table; defaults to the content library's.
            literal_contractions: Keep the historical ``ca'nnt`` rewrite for
                contractions instead of the grammatical ``can't``.
        """
        if misspellings is None:
            misspellings = default_library().misspellings
        self._rules = build_rules(misspellings, literal_contractions)
        by_name = {rule.name: rule for rule in self._rules}
        self._global_rules = [by_name[name] for name in GLOBAL_FIX_ORDER]
        self._positional_only = [
            rule for rule in self._rules
            if not rule.global_fix and rule.name not in GLOBAL_FIX_ORDER
        ]

    @property
    def rules(self) -> List[Rule]:
        return list(self._rules)

    def check(self, content: str) -> List[CheckIssue]:
        """
        Check contract content.

        Returns:
            Issues in detection order (rule order, then position).
        """
        if not content or not content.strip():
            return []

        issues: List[CheckIssue] = []
        seen = set()
        for rule in self._rules:
            found = rule.scan(content)
            logger.debug(f"Rule {rule.name}: {len(found)} issues")
            for issue in found:
                key = (issue.position, issue.type)
                if key in seen:
                    continue
                seen.add(key)
                issues.append(issue)
        return issues

    def report(self, content: str) -> CheckReport:
        """Check content and summarize the result."""
        return CheckReport(issues=self.check(content))

    def auto_fix_all(
        self, content: str, issues: Optional[List[CheckIssue]] = None
    ) -> str:
        """
        Apply every fix to the content.

        Positional fixes are applied first, from the end of the text
        backwards; an issue is skipped when the text at its position no
        longer equals its ``original`` or when it overlaps a fix already
        applied. The global versions of the fixable rules then run over the
        whole text. When ``issues`` is None the content is checked first and
        positional-only suggestions are also applied to the settled text.

        Args:
            content: Contract text.
            issues: Issues from a previous ``check`` of this content.

        Returns:
            The corrected content.
        """
        if not content:
            return content or ""

        settle = issues is None
        if issues is None:
            issues = self.check(content)

        fixed = self._apply_positional(content, issues)
        for rule in self._global_rules:
            fixed = rule.fix(fixed)

        if settle:
            for rule in self._positional_only:
                fixed = self._apply_positional(fixed, rule.scan(fixed))

        if fixed != content:
            logger.info(f"Auto-fixed contract content ({len(issues)} issues reported)")
        return fixed

    def _apply_positional(self, content: str, issues: List[CheckIssue]) -> str:
        """Apply positional fixes in descending position order."""
        fixable = sorted(
            (issue for issue in issues if issue.is_fixable),
            key=lambda issue: issue.position,
            reverse=True,
        )
        result = content
        boundary = len(content)
        for issue in fixable:
            start = issue.position
            end = start + len(issue.original)
            if end > boundary:
                logger.debug(f"Skipping overlapping fix at {start} ({issue.rule})")
                continue
            if result[start:end] != issue.original:
                logger.warning(f"Skipping stale fix at {start} ({issue.rule})")
                continue
            result = result[:start] + issue.fix + result[end:]
            boundary = start
        return result


def check_contract(content: str) -> List[CheckIssue]:
    """Check content with the built-in misspelling table."""
    return ContractChecker().check(content)


def auto_fix_all(content: str, issues: Optional[List[CheckIssue]] = None) -> str:
    """Auto-fix content with the built-in misspelling table."""
    return ContractChecker().auto_fix_all(content, issues)
