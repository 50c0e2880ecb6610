"""Audit log repository for read queries."""

from dataclasses import dataclass
from typing import Annotated

from fastapi import Depends
from sqlalchemy import Select, func, select

from lowcode.api.dependencies import DBSession
from lowcode.core.audit.models import AuditLog


@dataclass(frozen=True)
class AuditLogFilter:
    """Optional equality filters; ``search`` matches part of the entity name."""

    user_id: str | None = None
    action: str | None = None
    entity_type: str | None = None
    entity_id: str | None = None
    search: str | None = None

    def apply(self, stmt: Select) -> Select:
        if self.user_id:
            stmt = stmt.where(AuditLog.user_id == self.user_id)
        if self.action:
            stmt = stmt.where(AuditLog.action == self.action)
        if self.entity_type:
            stmt = stmt.where(AuditLog.entity_type == self.entity_type)
        if self.entity_id:
            stmt = stmt.where(AuditLog.entity_id == self.entity_id)
        if self.search:
            stmt = stmt.where(AuditLog.entity_name.contains(self.search))
        return stmt


class AuditLogRepository:
    """Repository for AuditLog queries. Entries are written by AuditService."""

    def __init__(self, session: DBSession) -> None:
        self.session = session

    async def find(
        self,
        filters: AuditLogFilter,
        limit: int,
        offset: int,
    ) -> tuple[list[AuditLog], int]:
        """Find entries matching the filters, newest first.

        Returns:
            Tuple of (page of entries, total matching count)
        """
        count_stmt = filters.apply(select(func.count()).select_from(AuditLog))
        total = (await self.session.execute(count_stmt)).scalar_one()

        stmt = (
            filters.apply(select(AuditLog))
            .order_by(AuditLog.created_at.desc(), AuditLog.id.desc())
            .offset(offset)
            .limit(limit)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all()), total


# Type alias for dependency injection
AuditLogRepo = Annotated[AuditLogRepository, Depends(AuditLogRepository)]
