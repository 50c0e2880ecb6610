"""Audit log API routes. Admin only."""

from fastapi import Query

from lowcode.core.auth.dependencies import AdminPrincipal
from lowcode.core.constants import DEFAULT_AUDIT_PAGE_SIZE, MAX_AUDIT_PAGE_SIZE
from lowcode.core.events import ChangeAction, EntityType
from lowcode.modules.audit import router
from lowcode.modules.audit.repos import AuditLogFilter
from lowcode.modules.audit.schemas import AuditLogListResponse
from lowcode.modules.audit.services import AuditLogSvc


LimitQuery = Query(
    DEFAULT_AUDIT_PAGE_SIZE,
    ge=1,
    description=f"Maximum number of entries, capped at {MAX_AUDIT_PAGE_SIZE}",
)
OffsetQuery = Query(0, ge=0, description="Number of entries to skip")


@router.get(
    "",
    response_model=AuditLogListResponse,
    summary="List audit logs",
    description="List audit entries, newest first, with optional filters.",
)
async def list_audit_logs(
    service: AuditLogSvc,
    principal: AdminPrincipal,  # noqa: ARG001 - required for auth
    limit: int = LimitQuery,
    offset: int = OffsetQuery,
    user_id: str | None = Query(None, alias="userId"),
    action: ChangeAction | None = Query(None),
    entity_type: EntityType | None = Query(None, alias="entityType"),
    entity_id: str | None = Query(None, alias="entityId"),
    search: str | None = Query(None, description="Part of the model name"),
) -> AuditLogListResponse:
    """List audit log entries."""
    filters = AuditLogFilter(
        user_id=user_id,
        action=action.value if action else None,
        entity_type=entity_type.value if entity_type else None,
        entity_id=entity_id,
        search=search,
    )
    return await service.list_logs(filters, limit, offset)


@router.get(
    "/user/{user_id}",
    response_model=AuditLogListResponse,
    summary="List audit logs of a user",
    description="List the audit entries of one user, newest first.",
)
async def list_user_audit_logs(
    user_id: str,
    service: AuditLogSvc,
    principal: AdminPrincipal,  # noqa: ARG001 - required for auth
    limit: int = LimitQuery,
    offset: int = OffsetQuery,
) -> AuditLogListResponse:
    """List audit log entries of a user."""
    return await service.list_logs(AuditLogFilter(user_id=user_id), limit, offset)


@router.get(
    "/entity/{entity_type}/{entity_id}",
    response_model=AuditLogListResponse,
    summary="List audit logs of an entity",
    description="List the audit entries of one model definition or record, newest first.",
)
async def list_entity_audit_logs(
    entity_type: EntityType,
    entity_id: str,
    service: AuditLogSvc,
    principal: AdminPrincipal,  # noqa: ARG001 - required for auth
    limit: int = LimitQuery,
    offset: int = OffsetQuery,
) -> AuditLogListResponse:
    """List audit log entries of an entity."""
    filters = AuditLogFilter(entity_type=entity_type.value, entity_id=entity_id)
    return await service.list_logs(filters, limit, offset)
