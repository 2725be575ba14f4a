"""Unit tests for merging field values into contract content."""

from contract_wizard.generators import apply_field_values, label_slug, render_preview
from contract_wizard.models.fields import ContractField


CLIENT = ContractField(id="clientName", label="Client Name")
DUE = ContractField(id="due_date", label="Due Date")


class TestApplyFieldValues:
    """Tests for apply_field_values."""

    def test_replaces_every_occurrence(self):
        content = "Dear {{clientName}}, thanks {{clientName}}."

        result = apply_field_values(content, [CLIENT], {"clientName": "Acme"})

        assert result == "Dear Acme, thanks Acme."

    def test_missing_value_becomes_empty(self):
        result = apply_field_values("Due: {{due_date}}.", [DUE], {})

        assert result == "Due: ."

    def test_label_slug_and_label_keys(self):
        content = "{{CLIENTNAME}} / {{Client Name}} / {{clientname}}"

        result = apply_field_values(content, [CLIENT], {"clientName": "Acme"})

        assert result == "Acme / Acme / Acme"

    def test_id_match_is_case_sensitive(self):
        field = ContractField(id="amount_due", label="Total")

        result = apply_field_values("{{AMOUNT_DUE}}", [field], {"amount_due": "5"})

        assert result == "{{AMOUNT_DUE}}"

    def test_values_are_literal(self):
        result = apply_field_values("{{clientName}}", [CLIENT], {"clientName": r"A\1 $5 \g<0>"})

        assert result == r"A\1 $5 \g<0>"

    def test_unknown_placeholders_survive(self):
        result = apply_field_values("{{other}} {{clientName}}", [CLIENT], {"clientName": "X"})

        assert result == "{{other}} X"

    def test_label_slug(self):
        assert label_slug("Client's Name (legal)") == "clientsnamelegal"


class TestRenderPreview:
    def test_empty_values_show_label(self):
        result = render_preview("{{clientName}} on {{due_date}}", [CLIENT, DUE], {"due_date": "May 1"})

        assert result == "[Client Name] on May 1"

    def test_case_insensitive_ids(self):
        result = render_preview("{{CLIENTNAME}}", [CLIENT], {"clientName": "Acme"})

        assert result == "Acme"
