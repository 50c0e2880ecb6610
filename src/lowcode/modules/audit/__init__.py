"""Audit module - browsing the audit trail."""

from fastapi import APIRouter


router = APIRouter(prefix="/audit-logs", tags=["audit"])

# Import routes to register them (must be after router is defined)
from lowcode.modules.audit import routes  # noqa: F401, E402


# Module metadata
__module__ = {
    "name": "audit",
    "version": "1.0.0",
    "description": "Audit trail of model and record changes",
    "dependencies": [],
}
