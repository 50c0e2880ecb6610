"""Audit logging of model definition and record changes."""

from lowcode.core.audit.models import AuditLog
from lowcode.core.audit.service import (
    AuditContext,
    AuditRecorder,
    AuditService,
    serialize_value,
)


__all__ = [
    "AuditContext",
    "AuditLog",
    "AuditRecorder",
    "AuditService",
    "serialize_value",
]
