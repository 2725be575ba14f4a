"""Payment section generation and insertion.

Renders the canonical "PAYMENT TERMS AND COMPENSATION" block from the
compensation parameters and places it at the most plausible position in an
existing contract.
"""

import logging
import re
from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import List, Optional, Sequence, Union

from ..models.compensation import CompensationConfig, MilestonePayment
from ..models.enums import CompensationType, PaymentSchedule


logger = logging.getLogger(__name__)

SECTION_HEADER = "PAYMENT TERMS AND COMPENSATION"

SCHEDULE_SENTENCES = {
    PaymentSchedule.UPFRONT: "Full payment is due upon signing of this Agreement.",
    PaymentSchedule.PARTIAL: (
        "A deposit is due upon signing of this Agreement, with the remaining "
        "balance due upon completion of services."
    ),
    PaymentSchedule.FULL: "Full payment is due upon completion and acceptance of all services.",
    PaymentSchedule.SPLIT: "Payment will be made in multiple installments as agreed by both parties.",
    PaymentSchedule.INCREMENTAL: "Payment will be made incrementally as work progresses.",
}
DEFAULT_SCHEDULE_SENTENCE = "Payment will be made according to the schedule agreed by both parties."

LATE_PAYMENT_NOTICE = (
    "LATE PAYMENTS: Payments not received by the due date may be subject to a "
    "late fee. The Service Provider reserves the right to suspend work until "
    "all outstanding balances are paid in full."
)

EXISTING_SECTION_PATTERN = re.compile(
    r"PAYMENT\s+(?:TERMS|AND|COMPENSATION)|COMPENSATION|PAYMENT\s+SCHEDULE",
    re.IGNORECASE,
)
SERVICES_HEADING = re.compile(r"^\s*\d+[.)]?\s*(?:SCOPE OF SERVICES|SERVICES)\b")
PAYMENT_MENTION = re.compile(r"COMPENSATION|PAYMENT")
SIGNATURE_MARKERS = re.compile(r"AGREED|SIGNED|SIGNATURE|IN WITNESS|WITNESS WHEREOF")

Amount = Union[str, int, float, Decimal, None]

# Amounts outside this magnitude range are treated as zero.
MAX_AMOUNT_EXPONENT = 15
MIN_AMOUNT_EXPONENT = -6


class InsertionStrategy(Enum):
    """Where a generated payment section goes."""
    AFTER_SERVICES = "after_services"
    AFTER_COMPENSATION = "after_compensation"
    BEFORE_SIGNATURES = "before_signatures"
    END = "end"


@dataclass(frozen=True)
class InsertionPoint:
    """Offset into the content and the rule that chose it."""
    index: int
    strategy: InsertionStrategy


def parse_amount(value: Amount) -> Decimal:
    """Parse a money amount; anything unparsable or out of range is zero."""
    if value is None:
        return Decimal("0")
    text = str(value).replace("$", "").replace(",", "").strip()
    if not text:
        return Decimal("0")
    try:
        amount = Decimal(text)
    except InvalidOperation:
        return Decimal("0")
    if not amount.is_finite() or not amount:
        return Decimal("0")
    if not MIN_AMOUNT_EXPONENT <= amount.adjusted() <= MAX_AMOUNT_EXPONENT:
        logger.warning(f"Amount out of range, treated as zero: {text[:20]}")
        return Decimal("0")
    return amount


def format_money(amount: Decimal) -> str:
    return f"${amount:.2f}"


def format_due_date(raw: str) -> str:
    """``2025-01-05`` becomes ``January 5, 2025``; other text is kept."""
    try:
        parsed = datetime.strptime(raw.strip(), "%Y-%m-%d")
    except (ValueError, AttributeError):
        return raw
    return f"{parsed:%B} {parsed.day}, {parsed.year}"


def _schedule_sentence(schedule: Union[PaymentSchedule, str]) -> str:
    try:
        return SCHEDULE_SENTENCES[PaymentSchedule(schedule)]
    except ValueError:
        return DEFAULT_SCHEDULE_SENTENCE


def generate_payment_section(
    total: Amount,
    deposit: Amount,
    compensation_type: Union[CompensationType, str],
    schedule: Optional[Union[PaymentSchedule, str]] = None,
    methods: Optional[Sequence[str]] = None,
    hourly_rate: Amount = None,
    milestones: Optional[Sequence[MilestonePayment]] = None,
) -> str:
    """
    Render the payment terms block.

    Args:
        total: Total contract amount.
        deposit: Deposit due upon signing.
        compensation_type: How the client pays; the hourly type adds a rate line.
        schedule: When payments fall due.
        methods: Accepted payment methods.
        hourly_rate: Rate per hour, used for hourly compensation.
        milestones: Milestone payments in order.

    Returns:
        The section text, without surrounding blank lines.
    """
    total_amount = parse_amount(total)
    deposit_amount = parse_amount(deposit)

    lines: List[str] = [SECTION_HEADER, ""]

    if _is_hourly(compensation_type) and hourly_rate not in (None, ""):
        lines.append(f"Hourly Rate: {format_money(parse_amount(hourly_rate))} per hour")

    lines.append(f"TOTAL CONTRACT AMOUNT: {format_money(total_amount)}")

    if deposit_amount > 0:
        if total_amount:
            percentage = deposit_amount / total_amount * 100
        else:
            percentage = Decimal("0")
        lines.append(f"Deposit: {format_money(deposit_amount)} ({percentage:.1f}%)")
        lines.append(f"Balance Due: {format_money(total_amount - deposit_amount)}")

    if schedule:
        lines.extend(["", "PAYMENT SCHEDULE:", _schedule_sentence(schedule)])

    if milestones:
        lines.extend(["", "MILESTONE PAYMENTS:"])
        for number, milestone in enumerate(milestones, start=1):
            entry = f"{number}. {milestone.name}: {format_money(parse_amount(milestone.amount))}"
            if milestone.due_date:
                entry += f" - Due: {format_due_date(milestone.due_date)}"
            lines.append(entry)

    if methods:
        lines.extend(["", "ACCEPTED PAYMENT METHODS:", ", ".join(methods)])

    lines.extend(["", LATE_PAYMENT_NOTICE])
    return "\n".join(lines)


def _is_hourly(compensation_type: Union[CompensationType, str]) -> bool:
    try:
        return CompensationType(compensation_type) is CompensationType.HOURLY
    except ValueError:
        return False


def generate_from_config(config: CompensationConfig) -> str:
    """Render the payment terms block for a compensation config."""
    return generate_payment_section(
        total=config.total_amount,
        deposit=config.deposit_amount,
        compensation_type=config.compensation_type,
        schedule=config.payment_schedule,
        methods=config.payment_methods,
        hourly_rate=config.hourly_rate,
        milestones=config.milestone_payments,
    )


def has_payment_section(content: str) -> bool:
    """Check if the content already carries payment terms."""
    return bool(EXISTING_SECTION_PATTERN.search(content or ""))


def find_insertion_point(content: str) -> InsertionPoint:
    """
    Choose where a payment section should go.

    Tried in order: after a numbered services heading and the line that
    follows it; after a line mentioning compensation or payment when the
    content has no payment terms yet; before the first signature line;
    otherwise at the end.
    """
    content = content or ""
    lines = content.splitlines(keepends=True)
    offsets = []
    position = 0
    for line in lines:
        offsets.append(position)
        position += len(line)

    for i, line in enumerate(lines):
        if SERVICES_HEADING.match(line):
            last = min(i + 1, len(lines) - 1)
            return InsertionPoint(
                offsets[last] + len(lines[last]), InsertionStrategy.AFTER_SERVICES
            )

    if "PAYMENT TERMS" not in content.upper():
        for i, line in enumerate(lines):
            if PAYMENT_MENTION.search(line):
                return InsertionPoint(
                    offsets[i] + len(line), InsertionStrategy.AFTER_COMPENSATION
                )

    for i, line in enumerate(lines):
        if SIGNATURE_MARKERS.search(line):
            return InsertionPoint(offsets[i], InsertionStrategy.BEFORE_SIGNATURES)

    return InsertionPoint(len(content), InsertionStrategy.END)


def insert_payment_section(content: str, section: str) -> str:
    """
    Insert a payment section unless the content already has one.

    The section is separated from its neighbours by blank lines.
    """
    content = content or ""
    if has_payment_section(content):
        logger.warning("Payment section not inserted: content already has payment terms")
        return content
    if not content.strip():
        return section.strip()

    point = find_insertion_point(content)
    before = content[:point.index].rstrip("\n")
    after = content[point.index:].lstrip("\n")
    parts = [part for part in (before, section.strip(), after) if part]
    logger.info(f"Inserted payment section ({point.strategy.value})")
    return "\n\n".join(parts)
