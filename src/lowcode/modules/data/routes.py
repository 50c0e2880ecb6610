"""Record API routes for runtime-defined models.

Authorization depends on each model's permission rule and owner field,
so every route only requires authentication and leaves the decisions
to RecordService.
"""

from typing import Any

from fastapi import Body, status

from lowcode.core.auth.dependencies import CurrentPrincipal
from lowcode.modules.data import router
from lowcode.modules.data.schemas import RecordListResponse
from lowcode.modules.data.services import RecordSvc


@router.get(
    "/{model_name}",
    response_model=RecordListResponse,
    summary="List records",
    description="List the records of a model that the caller may see.",
)
async def list_records(
    model_name: str,
    principal: CurrentPrincipal,
    service: RecordSvc,
) -> RecordListResponse:
    """List visible records of a model."""
    records = await service.list_records(principal, model_name)
    return RecordListResponse(items=records, total=len(records))


@router.post(
    "/{model_name}",
    status_code=status.HTTP_201_CREATED,
    summary="Create record",
    description="Validate and store a new record. The owner field, if any, is set to the caller.",
)
async def create_record(
    model_name: str,
    principal: CurrentPrincipal,
    service: RecordSvc,
    payload: dict[str, Any] = Body(...),
) -> dict[str, Any]:
    """Create a record."""
    return await service.create_record(principal, model_name, payload)


@router.get(
    "/{model_name}/{record_id}",
    summary="Get record",
    description="Get a single record by id.",
)
async def get_record(
    model_name: str,
    record_id: str,
    principal: CurrentPrincipal,
    service: RecordSvc,
) -> dict[str, Any]:
    """Get a record."""
    return await service.get_record(principal, model_name, record_id)


@router.put(
    "/{model_name}/{record_id}",
    summary="Update record",
    description="Merge the given values into a record. The id and owner field cannot change.",
)
async def update_record(
    model_name: str,
    record_id: str,
    principal: CurrentPrincipal,
    service: RecordSvc,
    payload: dict[str, Any] = Body(...),
) -> dict[str, Any]:
    """Update a record."""
    return await service.update_record(principal, model_name, record_id, payload)


@router.delete(
    "/{model_name}/{record_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete record",
    description="Delete a record.",
)
async def delete_record(
    model_name: str,
    record_id: str,
    principal: CurrentPrincipal,
    service: RecordSvc,
) -> None:
    """Delete a record."""
    await service.delete_record(principal, model_name, record_id)
