"""Draft repository backed by SQLAlchemy.

Mirrors the draft store's semantics: a save with the id of an existing
draft updates it, a save without an id creates a new draft. Concurrent
saves of one draft are last-writer-wins.
"""

import logging
import uuid
from typing import Any, Dict, List, Optional

from sqlalchemy import delete, select

from .database import DatabaseManager
from .models import DraftModel


logger = logging.getLogger(__name__)

# Wire key -> model attribute
_FIELD_MAP = {
    "title": "title",
    "content": "content",
    "fieldValues": "field_values",
    "customFields": "custom_fields",
    "depositAmount": "deposit_amount",
    "totalAmount": "total_amount",
    "clientId": "client_id",
    "templateId": "template_id",
    "metadata": "metadata_",
}
_STRING_FIELDS = ("deposit_amount", "total_amount")


def _parse_uuid(value: Any) -> Optional[uuid.UUID]:
    if value is None or value == "":
        return None
    try:
        return uuid.UUID(str(value))
    except (ValueError, AttributeError, TypeError):
        return None


class DraftRepository:
    """
    Persistence for contract drafts.

    Drafts are exchanged as dictionaries in the draft store's camelCase
    wire format.
    """

    def __init__(self, db_manager: DatabaseManager):
        self._db = db_manager

    def _apply(self, model: DraftModel, payload: Dict[str, Any]) -> None:
        for key, attribute in _FIELD_MAP.items():
            if key not in payload:
                continue
            value = payload[key]
            if attribute in _STRING_FIELDS and value is not None:
                value = str(value)
            setattr(model, attribute, value)

    def save(self, payload: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        """
        Create or update a draft.

        A payload whose ``id`` is a valid UUID updates that draft, and
        returns None when no such draft exists. Any other payload creates a
        new draft.

        Returns:
            The stored draft, or None for an unknown id.
        """
        draft_id = _parse_uuid(payload.get("id"))
        with self._db.get_session() as session:
            if draft_id is not None:
                model = session.get(DraftModel, draft_id)
                if model is None:
                    logger.warning(f"Draft {draft_id} not found, nothing saved")
                    return None
            else:
                model = DraftModel(
                    title="",
                    content="",
                    field_values={},
                    custom_fields=[],
                    metadata_={},
                )
                session.add(model)

            self._apply(model, payload)
            session.flush()
            result = model.to_dict()

        logger.info(f"Saved draft {result['id']}")
        return result

    def get(self, draft_id: str) -> Optional[Dict[str, Any]]:
        """Get a draft by id, or None."""
        parsed = _parse_uuid(draft_id)
        if parsed is None:
            return None
        with self._db.get_session() as session:
            model = session.get(DraftModel, parsed)
            return model.to_dict() if model else None

    def list(self) -> List[Dict[str, Any]]:
        """All drafts, most recently updated first."""
        with self._db.get_session() as session:
            models = session.scalars(
                select(DraftModel).order_by(DraftModel.updated_at.desc())
            ).all()
            return [model.to_dict() for model in models]

    def delete(self, draft_id: str) -> bool:
        """Delete a draft; returns whether it existed."""
        parsed = _parse_uuid(draft_id)
        if parsed is None:
            return False
        with self._db.get_session() as session:
            model = session.get(DraftModel, parsed)
            if model is None:
                return False
            session.delete(model)
        logger.info(f"Deleted draft {parsed}")
        return True

    def delete_all(self) -> int:
        """Delete every draft; returns how many were removed."""
        with self._db.get_session() as session:
            result = session.execute(delete(DraftModel))
            count = result.rowcount or 0
        logger.info(f"Deleted {count} drafts")
        return count
