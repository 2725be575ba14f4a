"""Lint rules for the contract checker.

Every rule can scan text for issues and fix text globally. Rules scan the
original content independently of each other.
"""

import re
from typing import Callable, Dict, List, Optional, Pattern, Sequence, Union

from ..models.enums import IssueType
from ..models.sections import CheckIssue


Replacement = Union[str, Callable[["re.Match"], str]]
Message = Union[str, Callable[["re.Match"], str]]

CONTRACTIONS = (
    "cant", "wont", "dont", "isnt", "arent", "wasnt", "werent",
    "havent", "hasnt", "hadnt", "shouldnt", "couldnt", "wouldnt",
)

LEGAL_TERMS: Dict[str, str] = {
    "contract": "Contract",
    "agreement": "Agreement",
    "party": "Party",
    "client": "Client",
    "service provider": "Service Provider",
}


class Rule:
    """
    Base class for checker rules.

    Attributes:
        name: Identifier reported on every issue.
        issue_type: Category of the reported issues.
        global_fix: Whether ``fix`` runs in the bulk auto-fix pass.
    """

    name = ""
    issue_type = IssueType.FORMATTING
    global_fix = True

    def scan(self, text: str) -> List[CheckIssue]:
        raise NotImplementedError

    def fix(self, text: str) -> str:
        return text

    def _issue(
        self,
        message: str,
        position: Optional[int] = None,
        original: Optional[str] = None,
        fix: Optional[str] = None,
    ) -> CheckIssue:
        return CheckIssue(
            type=self.issue_type,
            message=message,
            position=position,
            original=original,
            fix=fix,
            rule=self.name,
        )


class PatternRule(Rule):
    """Rule backed by a single regular expression."""

    def __init__(
        self,
        name: str,
        issue_type: IssueType,
        pattern: Union[str, Pattern],
        message: Message,
        replacement: Replacement,
        flags: int = 0,
        global_fix: bool = True,
    ):
        self.name = name
        self.issue_type = issue_type
        self.pattern = re.compile(pattern, flags) if isinstance(pattern, str) else pattern
        self.message = message
        self.replacement = replacement
        self.global_fix = global_fix

    def _replace(self, match: "re.Match") -> str:
        if callable(self.replacement):
            return self.replacement(match)
        return match.expand(self.replacement)

    def _message(self, match: "re.Match") -> str:
        if callable(self.message):
            return self.message(match)
        return self.message

    def scan(self, text: str) -> List[CheckIssue]:
        return [
            self._issue(
                self._message(match),
                position=match.start(),
                original=match.group(0),
                fix=self._replace(match),
            )
            for match in self.pattern.finditer(text)
        ]

    def fix(self, text: str) -> str:
        return self.pattern.sub(self._replace, text)


class MisspellingRule(Rule):
    """Whole-word, case-insensitive lookup in the misspelling table."""

    name = "misspelling"
    issue_type = IssueType.SPELLING

    def __init__(self, table: Dict[str, str]):
        self._patterns = [
            (wrong, correct, re.compile(rf"\b{re.escape(wrong)}\b", re.IGNORECASE))
            for wrong, correct in table.items()
        ]

    def scan(self, text: str) -> List[CheckIssue]:
        issues = []
        for wrong, correct, pattern in self._patterns:
            for match in pattern.finditer(text):
                issues.append(self._issue(
                    f'Possible misspelling: "{wrong}" should be "{correct}"',
                    position=match.start(),
                    original=match.group(0),
                    fix=correct,
                ))
        return issues

    def fix(self, text: str) -> str:
        for _, correct, pattern in self._patterns:
            text = pattern.sub(lambda _m, correct=correct: correct, text)
        return text


class CapitalizationRule(Rule):
    """
    Legal terms written in lower case at the start of a sentence or line.

    Suggestions are applied positionally only.
    """

    name = "legal_term_capitalization"
    issue_type = IssueType.CAPITALIZATION
    global_fix = False

    def __init__(self, terms: Optional[Dict[str, str]] = None):
        self._terms = [
            (lower, proper, re.compile(
                rf"(^|\.\s+|\n\s*){re.escape(lower)}\b", re.IGNORECASE
            ))
            for lower, proper in (terms or LEGAL_TERMS).items()
        ]

    def scan(self, text: str) -> List[CheckIssue]:
        issues = []
        for lower, proper, pattern in self._terms:
            for match in pattern.finditer(text):
                found = match.group(0)
                suggested = found.replace(lower, proper, 1)
                if suggested != found:
                    issues.append(self._issue(
                        f'Consider capitalizing "{lower}" -> "{proper}"',
                        position=match.start(),
                        original=found,
                        fix=suggested,
                    ))
        return issues


class ContractionRule(PatternRule):
    """
    Contractions written without an apostrophe.

    The literal rewrite inserts ``'n`` before the final ``nt``, so ``cant``
    becomes ``ca'nnt``; stored contracts depend on that output. With
    ``literal=False`` the grammatical form (``can't``) is used instead.
    """

    def __init__(self, literal: bool = True):
        self.literal = literal
        super().__init__(
            name="missing_apostrophe",
            issue_type=IssueType.PUNCTUATION,
            pattern=r"\b(" + "|".join(CONTRACTIONS) + r")\b",
            flags=re.IGNORECASE,
            message=lambda m: (
                f'Missing apostrophe: "{m.group(0).lower()}" -> '
                f'"{self._rewrite(m.group(0).lower())}"'
            ),
            replacement=lambda m: self._rewrite(m.group(0).lower()),
        )

    def _rewrite(self, word: str) -> str:
        if self.literal:
            return re.sub(r"([a-z])(nt)", r"\1'n\2", word, count=1, flags=re.IGNORECASE)
        return word[:-1] + "'" + word[-1]

    def fix(self, text: str) -> str:
        # Keeps the case of the matched word.
        return self.pattern.sub(lambda m: self._rewrite(m.group(0)), text)


class ParenthesisRule(Rule):
    """Missing space around parentheses; reported, never fixed."""

    name = "parenthesis_spacing"
    issue_type = IssueType.FORMATTING
    global_fix = False

    PATTERN = re.compile(r"[^\s]\(|\)[^\s.,!?;:)]")
    ALLOWED = (re.compile(r"\([A-Z]"), re.compile(r"\d\)"))

    def scan(self, text: str) -> List[CheckIssue]:
        return [
            self._issue("Missing space around parentheses", position=match.start())
            for match in self.PATTERN.finditer(text)
            if not any(allowed.search(match.group(0)) for allowed in self.ALLOWED)
        ]


class TabRule(Rule):
    """Tab characters; one issue for the whole text."""

    name = "tab_characters"
    issue_type = IssueType.FORMATTING

    def scan(self, text: str) -> List[CheckIssue]:
        if "\t" in text:
            return [self._issue("Tab characters found (should use spaces)")]
        return []

    def fix(self, text: str) -> str:
        return text.replace("\t", "  ")


def build_rules(
    misspellings: Dict[str, str], literal_contractions: bool = True
) -> List[Rule]:
    """Build the rule battery in reporting order."""
    return [
        PatternRule(
            "multiple_spaces", IssueType.FORMATTING, r"  +",
            "Double or multiple spaces found", " ",
        ),
        PatternRule(
            "missing_space_after_period", IssueType.PUNCTUATION, r"\.([A-Z])",
            "Missing space after period", r". \1",
        ),
        PatternRule(
            "missing_space_after_comma", IssueType.PUNCTUATION, r",(?=[^\s0-9$%])",
            "Missing space after comma", ", ",
        ),
        MisspellingRule(misspellings),
        CapitalizationRule(),
        PatternRule(
            "excessive_punctuation", IssueType.FORMATTING, r"([!?]){2,}",
            "Excessive punctuation marks (unprofessional)", r"\1",
        ),
        PatternRule(
            "space_before_punctuation", IssueType.PUNCTUATION, r"\s+([,.!?;:])",
            "Space before punctuation", r"\1",
        ),
        ContractionRule(literal=literal_contractions),
        ParenthesisRule(),
        TabRule(),
        PatternRule(
            "trailing_whitespace", IssueType.FORMATTING, r"[ \t]+$",
            "Trailing whitespace at end of line", "", flags=re.MULTILINE,
        ),
        PatternRule(
            "multiple_blank_lines", IssueType.FORMATTING, r"\n{3,}",
            "Multiple blank lines (should be max 2)", "\n\n",
        ),
    ]


# Bulk-fix order. Every rule here leaves the patterns of the earlier rules
# intact, so one pass reaches a fixed point.
GLOBAL_FIX_ORDER: Sequence[str] = (
    "tab_characters",
    "misspelling",
    "missing_apostrophe",
    "multiple_spaces",
    "missing_space_after_period",
    "missing_space_after_comma",
    "space_before_punctuation",
    "excessive_punctuation",
    "trailing_whitespace",
    "multiple_blank_lines",
)
