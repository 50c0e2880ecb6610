"""Pydantic schemas for audit log responses."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict


class AuditLogResponse(BaseModel):
    """One audit log entry."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    user_id: str
    action: str
    entity_type: str
    entity_id: str
    entity_name: str
    changes: dict[str, Any] | None
    ip_address: str | None
    user_agent: str | None
    request_id: str | None
    created_at: datetime


class AuditLogListResponse(BaseModel):
    items: list[AuditLogResponse]
    total: int
    limit: int
    offset: int
