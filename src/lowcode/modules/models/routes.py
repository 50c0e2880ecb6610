"""Model definition API routes.

Any authenticated principal may read definitions; only Admin may
create, replace or delete them.
"""

from fastapi import status

from lowcode.core.auth.dependencies import AdminPrincipal, CurrentPrincipal
from lowcode.core.validation.schemas import ModelDefinition
from lowcode.modules.models import router
from lowcode.modules.models.schemas import (
    ModelDefinitionCreate,
    ModelDefinitionListResponse,
)
from lowcode.modules.models.services import ModelDefinitionSvc


@router.get(
    "",
    response_model=ModelDefinitionListResponse,
    summary="List models",
    description="List every model definition, ordered by name.",
)
async def list_models(
    service: ModelDefinitionSvc,
    principal: CurrentPrincipal,  # noqa: ARG001 - required for auth
) -> ModelDefinitionListResponse:
    """List model definitions."""
    models = await service.list_models()
    return ModelDefinitionListResponse(items=models, total=len(models))


@router.get(
    "/{name}",
    response_model=ModelDefinition,
    summary="Get model",
    description="Get a single model definition by name.",
)
async def get_model(
    name: str,
    service: ModelDefinitionSvc,
    principal: CurrentPrincipal,  # noqa: ARG001 - required for auth
) -> ModelDefinition:
    """Get a model definition."""
    return await service.get_model(name)


@router.post(
    "",
    response_model=ModelDefinition,
    summary="Save model",
    description=(
        "Create a model definition, or replace the one with the same name. "
        "Requires the Admin role."
    ),
)
async def save_model(
    data: ModelDefinitionCreate,
    service: ModelDefinitionSvc,
    principal: AdminPrincipal,
) -> ModelDefinition:
    """Create or replace a model definition."""
    return await service.save_model(principal, data)


@router.delete(
    "/{name}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete model",
    description="Delete a model definition. Requires the Admin role.",
)
async def delete_model(
    name: str,
    service: ModelDefinitionSvc,
    principal: AdminPrincipal,
) -> None:
    """Delete a model definition."""
    await service.delete_model(principal, name)
