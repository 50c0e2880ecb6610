"""Probe and metadata endpoints, mounted outside ``/api/v1``.

Readiness requires the database to answer and every table of the
service to exist, since tables may be created by ``lowcode init-db``
rather than at startup.
"""

from typing import Any

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel
from sqlalchemy import inspect, text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from lowcode import __version__
from lowcode.api.dependencies import DBSession
from lowcode.config import settings
from lowcode.core.database import Base
from lowcode.core.permissions import Action
from lowcode.core.permissions.roles import Role
from lowcode.core.validation import FieldType


router = APIRouter(tags=["health"])


class HealthResponse(BaseModel):
    status: str


class ReadinessResponse(BaseModel):
    """Outcome of each readiness check, ``ok`` when it passed."""

    status: str
    checks: dict[str, str]


def _existing_tables(session: Session) -> set[str]:
    return set(inspect(session.connection()).get_table_names())


async def _check_schema(db: DBSession) -> str:
    missing = sorted(set(Base.metadata.tables) - await db.run_sync(_existing_tables))
    if missing:
        return f"missing tables: {', '.join(missing)}"
    return "ok"


@router.get(
    "/health/live",
    response_model=HealthResponse,
    summary="Liveness probe",
    description="Returns 200 while the process is running.",
)
async def liveness() -> HealthResponse:
    return HealthResponse(status="alive")


@router.get(
    "/health/ready",
    response_model=ReadinessResponse,
    summary="Readiness probe",
    description="Checks that the database answers and that all tables exist.",
)
async def readiness(db: DBSession) -> JSONResponse:
    """Readiness probe; 503 when any check fails."""
    checks: dict[str, str] = {}

    try:
        await db.execute(text("SELECT 1"))
        checks["database"] = "ok"
        checks["schema"] = await _check_schema(db)
    except SQLAlchemyError as e:
        checks["database"] = type(e).__name__

    ready = all(v == "ok" for v in checks.values())
    return JSONResponse(
        status_code=status.HTTP_200_OK if ready else status.HTTP_503_SERVICE_UNAVAILABLE,
        content=ReadinessResponse(
            status="ready" if ready else "degraded",
            checks=checks,
        ).model_dump(),
    )


@router.get(
    "/info",
    summary="Service info",
    description="Version plus the roles, actions and field types model definitions may use.",
)
async def info() -> dict[str, Any]:
    return {
        "app": settings.app_name,
        "version": __version__,
        "environment": settings.environment,
        "roles": [role.value for role in Role],
        "actions": [action.value for action in Action],
        "field_types": [field_type.value for field_type in FieldType],
    }
