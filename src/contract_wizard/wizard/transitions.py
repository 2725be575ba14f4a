"""Transition functions of the contract creation wizard.

Each function takes the current state and the user's input for one step
and returns the next state. Invalid transitions return the state unchanged.
"""

import dataclasses
import logging
from typing import Any, Dict, List, Optional

from ..generators.field_merger import apply_field_values
from ..models.compensation import CompensationConfig
from ..models.enums import CompensationType, WizardStep
from ..models.fields import ClientRecord, ContractField, FieldValueMap, TemplateRecord
from .state import ContractDraftState, NewClient


logger = logging.getLogger(__name__)


def _reject(state: ContractDraftState, action: str, reason: str) -> ContractDraftState:
    logger.warning(f"Wizard rejected {action} at step {state.step.name}: {reason}")
    return state


def select_template(
    state: ContractDraftState, template: Optional[TemplateRecord]
) -> ContractDraftState:
    """
    Pick a template, or start from a blank contract with None.

    The template's name and content become the draft's title and content.
    """
    if state.step is not WizardStep.TEMPLATE:
        return _reject(state, "select_template", "not on the template step")
    if template is None:
        return dataclasses.replace(
            state,
            template_id=None,
            template=None,
            title="",
            content="",
            step=WizardStep.CLIENT,
        )
    return dataclasses.replace(
        state,
        template_id=template.id,
        template=template,
        title=template.name,
        content=template.content,
        step=WizardStep.CLIENT,
    )


def select_client(
    state: ContractDraftState, client: ClientRecord
) -> ContractDraftState:
    """Pick an existing client."""
    if state.step is not WizardStep.CLIENT:
        return _reject(state, "select_client", "not on the client step")
    return dataclasses.replace(
        state,
        client_id=client.id,
        client=client,
        new_client=None,
        step=WizardStep.FIELDS,
    )


def use_new_client(
    state: ContractDraftState, new_client: NewClient
) -> ContractDraftState:
    """Enter a client that is not yet in the client store."""
    if state.step is not WizardStep.CLIENT:
        return _reject(state, "use_new_client", "not on the client step")
    if not new_client.name.strip() or not new_client.email.strip():
        return _reject(state, "use_new_client", "name and email are required")
    return dataclasses.replace(
        state,
        client_id=None,
        client=None,
        new_client=new_client,
        step=WizardStep.FIELDS,
    )


def submit_fields(
    state: ContractDraftState,
    values: FieldValueMap,
    compensation: Optional[CompensationConfig] = None,
) -> ContractDraftState:
    """
    Merge the entered values into the content.

    Only the template's fields are merged. The wizard moves on to the
    amounts step when compensation is enabled, otherwise straight to the
    preview.
    """
    if state.step is not WizardStep.FIELDS:
        return _reject(state, "submit_fields", "not on the fields step")

    content = state.content
    if state.template is not None:
        content = apply_field_values(content, state.template.fields, values)

    compensation = compensation if compensation is not None else state.compensation
    next_step = WizardStep.AMOUNTS if compensation.has_compensation else WizardStep.PREVIEW
    return dataclasses.replace(
        state,
        field_values=dict(values),
        content=content,
        compensation=compensation,
        step=next_step,
    )


def submit_amounts(
    state: ContractDraftState, deposit_amount: str, total_amount: str
) -> ContractDraftState:
    """Record the deposit and total amounts and go to the preview."""
    if state.step is not WizardStep.AMOUNTS:
        return _reject(state, "submit_amounts", "not on the amounts step")
    if not state.has_compensation:
        return _reject(state, "submit_amounts", "compensation is disabled")
    compensation = dataclasses.replace(
        state.compensation,
        deposit_amount=deposit_amount,
        total_amount=total_amount,
    )
    return dataclasses.replace(
        state,
        deposit_amount=deposit_amount,
        total_amount=total_amount,
        compensation=compensation,
        step=WizardStep.PREVIEW,
    )


def go_back(state: ContractDraftState) -> ContractDraftState:
    """Return to the previous step; the preview skips disabled amounts."""
    if state.step is WizardStep.TEMPLATE:
        return state
    if state.step is WizardStep.PREVIEW and not state.has_compensation:
        previous = WizardStep.FIELDS
    else:
        previous = WizardStep(state.step.value - 1)
    return dataclasses.replace(state, step=previous)


def restore_draft(
    draft: Optional[Dict[str, Any]],
    template: Optional[TemplateRecord] = None,
    client: Optional[ClientRecord] = None,
) -> ContractDraftState:
    """
    Rebuild the wizard state from a stored draft.

    A missing draft starts a fresh wizard. A draft with a client resumes at
    the fields step, a draft with only a template at the client step.
    """
    if not draft:
        logger.warning("Draft not found, starting a new contract")
        return ContractDraftState()

    client_id = draft.get("clientId")
    template_id = draft.get("templateId")
    if client_id:
        step = WizardStep.FIELDS
    elif template_id:
        step = WizardStep.CLIENT
    else:
        step = WizardStep.TEMPLATE

    metadata = draft.get("metadata") or {}
    compensation = CompensationConfig.from_dict(metadata.get("compensation") or {})

    return ContractDraftState(
        step=step,
        template_id=template_id,
        template=template,
        client_id=client_id,
        client=client,
        field_values=dict(draft.get("fieldValues") or {}),
        custom_fields=[ContractField.from_dict(f) for f in draft.get("customFields") or []],
        deposit_amount=str(draft.get("depositAmount") or "0"),
        total_amount=str(draft.get("totalAmount") or "0"),
        title=draft.get("title") or "",
        content=draft.get("content") or "",
        compensation=compensation,
        draft_id=draft.get("id"),
    )


def draft_payload(state: ContractDraftState) -> Dict[str, Any]:
    """Body of a save request to the draft store."""
    payload: Dict[str, Any] = {
        "title": state.title,
        "content": state.content,
        "fieldValues": dict(state.field_values),
        "customFields": [f.to_dict() for f in state.custom_fields],
        "depositAmount": state.deposit_amount,
        "totalAmount": state.total_amount,
        "clientId": state.client_id,
        "templateId": state.template_id,
        "metadata": {
            "step": state.step.value,
            "compensation": state.compensation.to_dict(),
        },
    }
    if state.draft_id:
        payload["id"] = state.draft_id
    return payload


def _to_number(value: str) -> float:
    try:
        return float(value)
    except (TypeError, ValueError):
        return 0.0


def contract_payload(state: ContractDraftState) -> Dict[str, Any]:
    """Body of the request that turns the draft into a contract."""
    compensation = state.compensation
    payload: Dict[str, Any] = {
        "title": state.title,
        "content": state.content,
        "depositAmount": _to_number(state.deposit_amount),
        "totalAmount": _to_number(state.total_amount),
        "hasCompensation": compensation.has_compensation,
        "compensationType": (
            compensation.compensation_type.value
            if compensation.has_compensation
            else CompensationType.NO_COMPENSATION.value
        ),
        "paymentTerms": compensation.payment_terms,
    }
    contact = state.client_contact
    if contact:
        payload["clientName"] = contact["name"]
        payload["clientEmail"] = contact["email"]
        payload["clientPhone"] = contact["phone"]
    return payload


def missing_required_fields(state: ContractDraftState) -> List[str]:
    """Ids of required fields that have no value yet."""
    return [
        f.id for f in state.fields
        if f.required and not (state.field_values.get(f.id) or "").strip()
    ]
