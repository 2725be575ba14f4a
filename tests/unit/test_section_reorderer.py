"""Unit tests for section reordering."""

from contract_wizard.analyzers import detect_sections
from contract_wizard.generators import (
    MoveDirection,
    ReorderStatus,
    auto_reorder,
    is_canonically_ordered,
    move_section,
    reorder,
)
from contract_wizard.models.enums import SectionKind
from contract_wizard.models.sections import ContractSection


SIGNATURES = "SIGNATURES\n\nSigned by both."
PAYMENT = "PAYMENT TERMS\n\nThe fee is due on receipt."
PARTIES = "PARTIES\nThis agreement is between the Client and the Provider."


def _section(kind, text):
    return ContractSection(id=kind, label=kind.value, content=text)


class TestReorder:
    """Tests for canonical reordering."""

    def test_signatures_move_last(self):
        content = "\n\n".join([SIGNATURES, PAYMENT, PARTIES])

        result = auto_reorder(content)

        assert result.status is ReorderStatus.REORDERED
        assert result.changed
        assert result.content == "\n\n".join([PARTIES, PAYMENT, SIGNATURES])

    def test_already_ordered_is_unchanged(self):
        content = "\n\n".join([PARTIES, PAYMENT, SIGNATURES])

        result = auto_reorder(content)

        assert result.status is ReorderStatus.ALREADY_ORDERED
        assert result.content == content

    def test_empty_and_single_unknown(self):
        assert auto_reorder("").status is ReorderStatus.EMPTY
        assert auto_reorder("just some text").status is ReorderStatus.NO_SECTIONS

    def test_unknown_sections_before_signatures(self):
        sections = [
            _section(SectionKind.SIGNATURES, "SIGN"),
            _section(SectionKind.UNKNOWN, "EXTRA"),
            _section(SectionKind.SCOPE, "SCOPE"),
        ]

        assert reorder(sections) == "SCOPE\n\nEXTRA\n\nSIGN"

    def test_title_prepended_when_missing(self):
        content = "\n\n".join([SIGNATURES, PARTIES])

        result = auto_reorder(content, title="Design Agreement")

        assert result.content.startswith("Design Agreement\n\nPARTIES")
        assert result.content.endswith(SIGNATURES)

    def test_reorder_is_stable_fixed_point(self):
        content = "\n\n".join([SIGNATURES, PAYMENT, PARTIES])
        once = auto_reorder(content).content

        assert is_canonically_ordered(detect_sections(once))
        assert auto_reorder(once).content == once


class TestMoveSection:
    """Tests for moving a single section."""

    def test_move_down_swaps_neighbours(self):
        content = "\n\n".join([PARTIES, PAYMENT, SIGNATURES])
        sections = detect_sections(content)

        moved = move_section(sections, 0, MoveDirection.DOWN, content=content)

        assert moved == "\n\n".join([PAYMENT, PARTIES, SIGNATURES])

    def test_move_accepts_string_direction(self):
        content = "\n\n".join([PARTIES, PAYMENT])
        sections = detect_sections(content)

        assert move_section(sections, 1, "up", content=content) == "\n\n".join([PAYMENT, PARTIES])

    def test_move_past_edges_is_noop(self):
        content = "\n\n".join([PARTIES, PAYMENT])
        sections = detect_sections(content)

        assert move_section(sections, 0, MoveDirection.UP, content=content) == content
        assert move_section(sections, 1, MoveDirection.DOWN, content=content) == content

    def test_unknown_direction_is_noop(self):
        content = "\n\n".join([PARTIES, PAYMENT])
        sections = detect_sections(content)

        assert move_section(sections, 0, "sideways", content=content) == content

    def test_single_section_is_noop(self):
        sections = detect_sections(PARTIES)

        assert move_section(sections, 0, MoveDirection.DOWN, content=PARTIES) == PARTIES
