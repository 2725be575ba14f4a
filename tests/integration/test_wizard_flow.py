"""Integration tests for the contract creation flow.

Walks a template through the wizard, the payment generator, the checker and
the reorderer, then stores, restores and exports the draft.
"""

import pytest

from contract_wizard.analyzers import detect_sections, validation_score
from contract_wizard.checker import ContractChecker
from contract_wizard.extractors import add_field, extract_fields
from contract_wizard.generators import (
    auto_reorder,
    generate_from_config,
    insert_missing_section,
    insert_payment_section,
    render_preview,
)
from contract_wizard.io import export_docx, import_contract
from contract_wizard.models.compensation import CompensationConfig
from contract_wizard.models.enums import SectionKind, WizardStep
from contract_wizard.models.fields import ClientRecord, TemplateRecord
from contract_wizard.storage import DatabaseManager, DraftRepository
from contract_wizard.wizard import (
    ContractDraftState,
    draft_payload,
    go_back,
    restore_draft,
    select_client,
    select_template,
    submit_amounts,
    submit_fields,
)


TEMPLATE_CONTENT = (
    "AGREED AND ACCEPTED\n\nProvider: ________  Client: ________\n\n"
    "PARTIES\nThis agreement is between {{providerName}} and the client {{clientName}}.\n\n"
    "SCOPE OF WORK\n\nThe services include {{service_description}}, starting {{start_date}}."
)


@pytest.fixture
def repository():
    db_manager = DatabaseManager("sqlite://")
    db_manager.init_database()
    yield DraftRepository(db_manager)
    db_manager.close()


@pytest.fixture
def template():
    return TemplateRecord(
        id="tpl-web",
        name="Web Design Agreement",
        content=TEMPLATE_CONTENT,
        fields=extract_fields(TEMPLATE_CONTENT),
    )


class TestWizardFlow:
    """End-to-end contract creation."""

    def test_paid_contract_from_template(self, template, repository, tmp_path):
        compensation = CompensationConfig.from_dict({
            "hasCompensation": True,
            "compensationType": "fixed_amount",
            "paymentSchedule": "partial",
            "paymentMethods": ["Bank Transfer"],
        })

        state = select_template(ContractDraftState(), template)
        state = select_client(state, ClientRecord(id="c-9", name="Acme", email="hi@acme.test"))
        values = {
            "providerName": "Studio",
            "clientName": "Acme",
            "service_description": "a new website",
            "start_date": "2025-03-01",
        }
        state = submit_fields(state, values, compensation=compensation)
        assert state.step is WizardStep.AMOUNTS

        state = submit_amounts(state, "500", "2000")
        assert state.step is WizardStep.PREVIEW
        assert go_back(state).step is WizardStep.AMOUNTS

        section = generate_from_config(state.compensation)
        content = insert_payment_section(state.content, section)
        assert "Deposit: $500.00 (25.0%)" in content
        assert content.index("PAYMENT TERMS AND COMPENSATION") < content.index("AGREED AND ACCEPTED")

        result = auto_reorder(content, title=state.title)
        kinds = [s.id for s in detect_sections(result.content)]
        assert kinds[-1] is SectionKind.SIGNATURES
        assert kinds.index(SectionKind.PARTIES) < kinds.index(SectionKind.SCOPE)
        assert result.content.startswith("Web Design Agreement")

        checker = ContractChecker()
        fixed = checker.auto_fix_all(result.content)
        assert checker.auto_fix_all(fixed) == fixed
        assert validation_score(fixed, values) > 0

        saved = repository.save(draft_payload(state))
        restored = restore_draft(repository.get(saved["id"]), template=template)
        assert restored.step is WizardStep.FIELDS
        assert restored.compensation.total_amount == "2000"
        assert restored.field_values == values

        exported = export_docx(state.title, fixed, tmp_path / "contract.docx")
        imported = import_contract(exported)
        assert imported.title == "Web Design Agreement"
        assert "Acme" in imported.content

    def test_unpaid_contract_with_custom_field(self, template):
        state = select_template(ContractDraftState(), template)
        state = select_client(state, ClientRecord(id="c-1", name="Bo", email="bo@x.test"))
        state = submit_fields(state, {"clientName": "Bo"})

        assert state.step is WizardStep.PREVIEW
        assert go_back(state).step is WizardStep.FIELDS

        fields = add_field(state.fields, "PO Number")
        inserted = insert_missing_section(state.content + "\n\n{{po_number}}", fields, SectionKind.CONFIDENTIALITY)
        preview = render_preview(inserted.content, inserted.fields, {"po_number": "PO-7"})

        assert "PO-7" in preview
        assert "CONFIDENTIALITY" in preview
        assert "[Client Email]" not in preview
