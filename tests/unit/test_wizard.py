"""Unit tests for the contract creation wizard state machine."""

import dataclasses

import pytest

from contract_wizard.models.compensation import CompensationConfig
from contract_wizard.models.enums import CompensationType, WizardStep
from contract_wizard.models.fields import ClientRecord, ContractField, TemplateRecord
from contract_wizard.wizard import (
    ContractDraftState,
    NewClient,
    contract_payload,
    draft_payload,
    go_back,
    missing_required_fields,
    restore_draft,
    select_client,
    select_template,
    submit_amounts,
    submit_fields,
    use_new_client,
)


TEMPLATE = TemplateRecord(
    id="tpl-1",
    name="Design Contract",
    content="Client: {{clientName}}. Start: {{start_date}}.",
    fields=[
        ContractField(id="clientName", label="Client Name", required=True),
        ContractField(id="start_date", label="Start Date"),
    ],
)
CLIENT = ClientRecord(id="c-1", name="Acme", email="ops@acme.test", phone="555")
PAID = CompensationConfig(has_compensation=True, compensation_type=CompensationType.FIXED_AMOUNT)


@pytest.fixture
def at_fields():
    state = select_template(ContractDraftState(), TEMPLATE)
    return select_client(state, CLIENT)


class TestForwardTransitions:
    """Tests for moving through the wizard."""

    def test_select_template(self):
        state = select_template(ContractDraftState(), TEMPLATE)

        assert state.step is WizardStep.CLIENT
        assert state.title == "Design Contract"
        assert state.content == TEMPLATE.content

    def test_blank_template(self):
        state = select_template(ContractDraftState(), None)

        assert state.step is WizardStep.CLIENT
        assert state.template_id is None
        assert state.content == ""

    def test_select_client(self, at_fields):
        assert at_fields.step is WizardStep.FIELDS
        assert at_fields.client_id == "c-1"

    def test_new_client_requires_name_and_email(self):
        state = select_template(ContractDraftState(), TEMPLATE)

        rejected = use_new_client(state, NewClient(name="Bob", email=" "))
        accepted = use_new_client(state, NewClient(name="Bob", email="bob@x.test"))

        assert rejected is state
        assert accepted.step is WizardStep.FIELDS
        assert accepted.client is None

    def test_submit_fields_without_compensation_skips_amounts(self, at_fields):
        state = submit_fields(at_fields, {"clientName": "Acme", "start_date": "May 1"})

        assert state.step is WizardStep.PREVIEW
        assert state.content == "Client: Acme. Start: May 1."

    def test_submit_fields_with_compensation(self, at_fields):
        state = submit_fields(at_fields, {"clientName": "Acme"}, compensation=PAID)

        assert state.step is WizardStep.AMOUNTS
        assert state.content == "Client: Acme. Start: ."

    def test_submit_amounts(self, at_fields):
        state = submit_fields(at_fields, {}, compensation=PAID)

        state = submit_amounts(state, "200", "1000")

        assert state.step is WizardStep.PREVIEW
        assert state.total_amount == "1000"
        assert state.compensation.deposit_amount == "200"

    def test_transitions_only_from_their_step(self, at_fields):
        assert select_template(at_fields, TEMPLATE) is at_fields
        assert submit_amounts(at_fields, "1", "2") is at_fields

    def test_states_are_not_mutated(self):
        initial = ContractDraftState()

        select_template(initial, TEMPLATE)

        assert initial.step is WizardStep.TEMPLATE
        assert initial.template is None


class TestGoBack:
    def test_preview_skips_disabled_amounts(self, at_fields):
        state = submit_fields(at_fields, {})

        assert go_back(state).step is WizardStep.FIELDS

    def test_preview_returns_to_amounts(self, at_fields):
        state = submit_amounts(submit_fields(at_fields, {}, compensation=PAID), "0", "10")

        assert go_back(state).step is WizardStep.AMOUNTS

    def test_first_step_stays(self):
        state = ContractDraftState()

        assert go_back(state) is state


class TestDrafts:
    """Tests for restoring and serializing drafts."""

    def test_missing_draft_starts_fresh(self):
        assert restore_draft(None) == ContractDraftState()

    @pytest.mark.parametrize(
        "draft,step",
        [
            ({"clientId": "c-1", "templateId": "t"}, WizardStep.FIELDS),
            ({"templateId": "t"}, WizardStep.CLIENT),
            ({"title": "x"}, WizardStep.TEMPLATE),
        ],
    )
    def test_resume_step(self, draft, step):
        assert restore_draft(draft).step is step

    def test_round_trip_through_payload(self, at_fields):
        state = submit_fields(at_fields, {"clientName": "Acme"}, compensation=PAID)

        payload = draft_payload(state)
        restored = restore_draft(dict(payload, id="d-1"), template=TEMPLATE, client=CLIENT)

        assert payload["metadata"]["step"] == WizardStep.AMOUNTS.value
        assert "id" not in payload
        assert restored.field_values == {"clientName": "Acme"}
        assert restored.compensation.has_compensation
        assert restored.draft_id == "d-1"
        assert draft_payload(restored)["id"] == "d-1"

    def test_contract_payload(self, at_fields):
        state = submit_amounts(submit_fields(at_fields, {}, compensation=PAID), "200", "1000")

        payload = contract_payload(state)

        assert payload["totalAmount"] == 1000.0
        assert payload["depositAmount"] == 200.0
        assert payload["compensationType"] == "fixed_amount"
        assert payload["clientEmail"] == "ops@acme.test"

    def test_contract_payload_without_compensation(self):
        state = ContractDraftState(total_amount="abc")

        payload = contract_payload(state)

        assert payload["totalAmount"] == 0.0
        assert payload["compensationType"] == "no_compensation"
        assert "clientName" not in payload

    def test_missing_required_fields(self, at_fields):
        custom = ContractField(id="po_number", label="PO Number", required=True)
        state = submit_fields(at_fields, {"start_date": "x"})

        state = dataclasses.replace(state, custom_fields=[custom])

        assert missing_required_fields(state) == ["clientName", "po_number"]
