"""Audit log browsing."""

from typing import Annotated

from fastapi import Depends

from lowcode.core.constants import MAX_AUDIT_PAGE_SIZE
from lowcode.modules.audit.repos import AuditLogFilter, AuditLogRepo
from lowcode.modules.audit.schemas import AuditLogListResponse, AuditLogResponse


class AuditLogService:
    """Paged, filtered access to the audit trail."""

    def __init__(self, repo: AuditLogRepo) -> None:
        self.repo = repo

    async def list_logs(
        self,
        filters: AuditLogFilter,
        limit: int,
        offset: int,
    ) -> AuditLogListResponse:
        """List matching entries, newest first. ``limit`` is capped."""
        limit = min(limit, MAX_AUDIT_PAGE_SIZE)
        entries, total = await self.repo.find(filters, limit, offset)
        return AuditLogListResponse(
            items=[AuditLogResponse.model_validate(e) for e in entries],
            total=total,
            limit=limit,
            offset=offset,
        )


# Type alias for dependency injection
AuditLogSvc = Annotated[AuditLogService, Depends(AuditLogService)]
