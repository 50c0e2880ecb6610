"""Change-hook wiring for request handlers.

Builds the ChangeHooks a service emits to: audit logging and model
version recording, both bound to the request's database session.
"""

from typing import Annotated

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from lowcode.api.dependencies import DBSession
from lowcode.core.audit import AuditContext, AuditRecorder, AuditService
from lowcode.core.events import ChangeHooks
from lowcode.core.logging.middleware import get_client_ip
from lowcode.modules.versions.repos import ModelVersionRepository
from lowcode.modules.versions.services import ModelVersionRecorder


def get_audit_context(request: Request) -> AuditContext:
    """Collect client details for audit entries."""
    return AuditContext(
        ip_address=get_client_ip(request),
        user_agent=request.headers.get("User-Agent"),
        request_id=getattr(request.state, "request_id", None),
    )


def build_change_hooks(db: AsyncSession, context: AuditContext | None = None) -> ChangeHooks:
    """Hooks writing audit entries and model versions through ``db``."""
    audit = AuditService(db, context)
    return ChangeHooks(
        [
            AuditRecorder(audit),
            ModelVersionRecorder(ModelVersionRepository(db)),
        ]
    )


async def get_change_hooks(db: DBSession, request: Request) -> ChangeHooks:
    """Dependency providing the change hooks for this request."""
    return build_change_hooks(db, get_audit_context(request))


Hooks = Annotated[ChangeHooks, Depends(get_change_hooks)]
