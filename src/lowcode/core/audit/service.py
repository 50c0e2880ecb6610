"""Audit service for logging changes.

Provides a manual logging API and ``AuditRecorder``, the change-hook
subscriber that writes an entry for every ChangeEvent.
"""

from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from typing import Any
from uuid import UUID

import structlog
from sqlalchemy.ext.asyncio import AsyncSession

from lowcode.core.audit.models import AuditLog
from lowcode.core.events import ChangeEvent


log = structlog.get_logger()


def serialize_value(value: Any) -> Any:
    """Convert a value to JSON-compatible primitives, recursively."""
    if value is None or isinstance(value, str | int | float | bool):
        return value

    result: Any
    if isinstance(value, UUID):
        result = str(value)
    elif isinstance(value, datetime | date):
        result = value.isoformat()
    elif isinstance(value, Decimal):
        result = str(value)
    elif isinstance(value, Enum):
        result = value.value
    elif isinstance(value, dict):
        result = {str(k): serialize_value(v) for k, v in value.items()}
    elif isinstance(value, list | tuple | set | frozenset):
        result = [serialize_value(item) for item in value]
    else:
        result = str(value)

    return result


class AuditContext:
    """Request-level information included in every audit entry."""

    def __init__(
        self,
        ip_address: str | None = None,
        user_agent: str | None = None,
        request_id: str | None = None,
    ) -> None:
        self.ip_address = ip_address
        self.user_agent = user_agent
        self.request_id = request_id


class AuditService:
    """Service for creating audit log entries."""

    def __init__(
        self,
        session: AsyncSession,
        context: AuditContext | None = None,
    ) -> None:
        self.session = session
        self.context = context or AuditContext()

    async def log(
        self,
        user_id: str,
        action: str,
        entity_type: str,
        entity_id: str,
        entity_name: str,
        changes: dict[str, Any] | None = None,
    ) -> AuditLog:
        """Create an audit log entry.

        Args:
            user_id: The acting principal's id
            action: CREATE, UPDATE or DELETE
            entity_type: model_definition or data_record
            entity_id: Id of the affected entity
            entity_name: Model name the entity belongs to
            changes: Before/after snapshots

        Returns:
            Created audit log entry
        """
        entry = AuditLog(
            user_id=user_id,
            action=action,
            entity_type=entity_type,
            entity_id=entity_id,
            entity_name=entity_name,
            changes=serialize_value(changes or {}),
            ip_address=self.context.ip_address,
            user_agent=self.context.user_agent,
            request_id=self.context.request_id,
        )

        self.session.add(entry)
        await self.session.flush()

        log.info(
            "audit_log_created",
            action=action,
            entity_type=entity_type,
            entity_id=entity_id,
            user_id=user_id,
        )

        return entry


class AuditRecorder:
    """Change-hook subscriber writing one audit entry per event."""

    def __init__(self, service: AuditService) -> None:
        self.service = service

    async def __call__(self, event: ChangeEvent) -> None:
        await self.service.log(
            user_id=event.actor.id,
            action=event.action.value,
            entity_type=event.entity_type.value,
            entity_id=event.entity_id,
            entity_name=event.entity_name,
            changes={"before": event.before, "after": event.after},
        )
