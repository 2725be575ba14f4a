"""Contract creation wizard as an explicit state machine."""

from .state import ContractDraftState, NewClient
from .transitions import (
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

__all__ = [
    "ContractDraftState",
    "NewClient",
    "contract_payload",
    "draft_payload",
    "go_back",
    "missing_required_fields",
    "restore_draft",
    "select_client",
    "select_template",
    "submit_amounts",
    "submit_fields",
    "use_new_client",
]
