"""SQLAlchemy models for locally stored drafts."""

from datetime import datetime, timezone
from typing import Any, Dict
import uuid

from sqlalchemy import JSON, Column, DateTime, Index, String, Text, Uuid
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import DeclarativeBase
from sqlalchemy.types import TypeDecorator


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class JSONType(TypeDecorator):
    """Platform-independent JSON type.

    Uses JSONB for PostgreSQL and JSON for other databases (like SQLite).
    """
    impl = JSON
    cache_ok = True

    def load_dialect_impl(self, dialect):
        if dialect.name == "postgresql":
            return dialect.type_descriptor(JSONB())
        return dialect.type_descriptor(JSON())


class Base(DeclarativeBase):
    """Base class for all SQLAlchemy models."""
    pass


class DraftModel(Base):
    """Contract draft table model."""
    __tablename__ = "contract_drafts"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    title = Column(String(255), nullable=False, default="")
    content = Column(Text, nullable=False, default="")
    field_values = Column(JSONType)
    custom_fields = Column(JSONType)
    deposit_amount = Column(String(32), default="0")
    total_amount = Column(String(32), default="0")
    client_id = Column(String(100), nullable=True)
    template_id = Column(String(100), nullable=True)
    metadata_ = Column("metadata", JSONType)
    created_at = Column(DateTime(timezone=True), default=_utcnow)
    updated_at = Column(DateTime(timezone=True), default=_utcnow, onupdate=_utcnow)

    __table_args__ = (
        Index("idx_contract_drafts_updated_at", "updated_at"),
        Index("idx_contract_drafts_client_id", "client_id"),
    )

    def to_dict(self) -> Dict[str, Any]:
        """Draft in the draft store's wire format."""
        return {
            "id": str(self.id),
            "title": self.title,
            "content": self.content,
            "fieldValues": self.field_values or {},
            "customFields": self.custom_fields or [],
            "depositAmount": self.deposit_amount,
            "totalAmount": self.total_amount,
            "clientId": self.client_id,
            "templateId": self.template_id,
            "metadata": self.metadata_ or {},
            "createdAt": self.created_at.isoformat() if self.created_at else None,
            "updatedAt": self.updated_at.isoformat() if self.updated_at else None,
        }
