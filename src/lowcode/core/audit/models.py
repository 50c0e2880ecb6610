"""Audit log database model.

Stores one entry per committed change to a model definition or record:
who did it, what changed, and from where.
"""

from datetime import datetime
from typing import Any

from sqlalchemy import JSON, DateTime, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from lowcode.core.constants import (
    ID_LENGTH,
    MAX_ACTION_LENGTH,
    MAX_ENTITY_TYPE_LENGTH,
    MAX_IPV6_LENGTH,
    MAX_MODEL_NAME_LENGTH,
    MAX_REQUEST_ID_LENGTH,
)
from lowcode.core.database.base import Base, IDMixin, utcnow


class AuditLog(Base, IDMixin):
    """Audit log entry.

    Attributes:
        user_id: The principal who performed the action
        action: CREATE, UPDATE or DELETE
        entity_type: model_definition or data_record
        entity_id: Record id, or model name for definitions
        entity_name: Model name the entity belongs to
        changes: ``{"before": ..., "after": ...}`` snapshots
        ip_address: Client IP address
        user_agent: Client user agent string
        request_id: Correlation ID for request tracing
        created_at: When the action occurred
    """

    __tablename__ = "audit_logs"

    user_id: Mapped[str] = mapped_column(
        String(ID_LENGTH),
        nullable=False,
        index=True,
    )

    action: Mapped[str] = mapped_column(
        String(MAX_ACTION_LENGTH),
        nullable=False,
        index=True,
    )
    entity_type: Mapped[str] = mapped_column(
        String(MAX_ENTITY_TYPE_LENGTH),
        nullable=False,
        index=True,
    )
    entity_id: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        index=True,
    )
    entity_name: Mapped[str] = mapped_column(
        String(MAX_MODEL_NAME_LENGTH),
        nullable=False,
    )

    changes: Mapped[dict[str, Any]] = mapped_column(
        JSON,
        nullable=False,
        default=dict,
    )

    ip_address: Mapped[str | None] = mapped_column(
        String(MAX_IPV6_LENGTH),
        nullable=True,
    )
    user_agent: Mapped[str | None] = mapped_column(
        Text,
        nullable=True,
    )
    request_id: Mapped[str | None] = mapped_column(
        String(MAX_REQUEST_ID_LENGTH),
        nullable=True,
        index=True,
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utcnow,
        nullable=False,
        index=True,
    )

    def __repr__(self) -> str:
        return (
            f"<AuditLog(id={self.id}, action={self.action}, "
            f"entity_type={self.entity_type}, entity_id={self.entity_id})>"
        )
