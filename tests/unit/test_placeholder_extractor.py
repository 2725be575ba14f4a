"""Unit tests for placeholder extraction and custom fields."""

import pytest

from contract_wizard.extractors import (
    add_field,
    derive_label,
    extract_fields,
    infer_field_type,
    merge_fields,
    remove_field,
)
from contract_wizard.models.enums import FieldType
from contract_wizard.models.fields import ContractField


class TestExtractFields:
    """Tests for extract_fields."""

    def test_first_appearance_order_without_duplicates(self):
        fields = extract_fields("Hi {{name}}, due {{due_date}}, due {{name}}")

        assert [f.id for f in fields] == ["name", "due_date"]
        assert fields[0].type is FieldType.TEXT
        assert fields[1].type is FieldType.DATE

    def test_empty_content(self):
        assert extract_fields("") == []
        assert extract_fields(None) == []

    def test_invalid_identifiers_are_ignored(self):
        fields = extract_fields("{{1abc}} {{ spaced }} {{ok_1}} {{}}")

        assert [f.id for f in fields] == ["ok_1"]

    def test_labels_and_placeholders(self):
        fields = extract_fields("{{clientName}} {{service_description}}")

        assert fields[0].label == "Client Name"
        assert fields[0].placeholder == "Enter client name"
        assert fields[1].label == "Service Description"
        assert fields[1].type is FieldType.TEXTAREA

    def test_required_flag(self):
        fields = {f.id: f for f in extract_fields("{{clientEmail}} {{notes}} {{projectAddress}}")}

        assert fields["clientEmail"].required
        assert not fields["notes"].required
        assert fields["projectAddress"].required


class TestTypeInference:
    """Tests for type inference precedence."""

    @pytest.mark.parametrize(
        "identifier,expected",
        [
            ("start_date", FieldType.DATE),
            ("projectDeadline", FieldType.DATE),
            ("expiration", FieldType.DATE),
            ("total_amount", FieldType.NUMBER),
            ("hourlyRate", FieldType.NUMBER),
            ("scope", FieldType.TEXTAREA),
            ("clientAddress", FieldType.TEXTAREA),
            ("clientName", FieldType.TEXT),
        ],
    )
    def test_infer_field_type(self, identifier, expected):
        assert infer_field_type(identifier) is expected

    def test_date_wins_over_number(self):
        assert infer_field_type("payment_date") is FieldType.DATE

    def test_number_wins_over_textarea(self):
        assert infer_field_type("payment_terms") is FieldType.NUMBER


class TestDeriveLabel:
    def test_snake_and_camel_case(self):
        assert derive_label("due_date") == "Due Date"
        assert derive_label("clientName") == "Client Name"
        assert derive_label("client_Name") == "Client Name"


class TestCustomFields:
    """Tests for adding and removing user-defined fields."""

    def test_add_field_slugifies_label(self):
        fields = add_field([], "Project Code #", FieldType.TEXT, required=True)

        assert len(fields) == 1
        assert fields[0].id == "project_code_"
        assert fields[0].label == "Project Code #"
        assert fields[0].required

    def test_blank_label_is_ignored(self):
        existing = [ContractField(id="a", label="A")]

        assert add_field(existing, "   ") == existing

    def test_remove_field_drops_value(self):
        fields = [ContractField(id="a", label="A"), ContractField(id="b", label="B")]

        remaining, values = remove_field(fields, {"a": "1", "b": "2"}, "a")

        assert [f.id for f in remaining] == ["b"]
        assert values == {"b": "2"}

    def test_merge_fields_keeps_existing(self):
        existing = [ContractField(id="a", label="Old")]
        merged = merge_fields(existing, [ContractField(id="a", label="New"), ContractField(id="b", label="B")])

        assert [(f.id, f.label) for f in merged] == [("a", "Old"), ("b", "B")]
