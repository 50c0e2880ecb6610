"""Model version API routes. Admin only."""

from lowcode.core.auth.dependencies import AdminPrincipal
from lowcode.modules.versions import router
from lowcode.modules.versions.schemas import (
    ModelVersionListResponse,
    ModelVersionResponse,
)
from lowcode.modules.versions.services import ModelVersionSvc


@router.get(
    "/{model_name}",
    response_model=ModelVersionListResponse,
    summary="List model versions",
    description="List every recorded version of a model, newest first.",
)
async def list_versions(
    model_name: str,
    service: ModelVersionSvc,
    principal: AdminPrincipal,  # noqa: ARG001 - required for auth
) -> ModelVersionListResponse:
    """List versions of a model."""
    versions = await service.list_versions(model_name)
    return ModelVersionListResponse(
        items=[ModelVersionResponse.model_validate(v) for v in versions],
        total=len(versions),
    )


@router.get(
    "/{model_name}/{version}",
    response_model=ModelVersionResponse,
    summary="Get model version",
    description="Get one recorded version of a model.",
)
async def get_version(
    model_name: str,
    version: int,
    service: ModelVersionSvc,
    principal: AdminPrincipal,  # noqa: ARG001 - required for auth
) -> ModelVersionResponse:
    """Get a single model version."""
    found = await service.get_version(model_name, version)
    return ModelVersionResponse.model_validate(found)
