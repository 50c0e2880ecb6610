"""Model definition business logic."""

from typing import Annotated, Any

import structlog
from fastapi import Depends

from lowcode.api.hooks import Hooks
from lowcode.core.auth.schemas import Principal
from lowcode.core.database.base import utcnow
from lowcode.core.errors import NotFoundError
from lowcode.core.events import ChangeAction, ChangeEvent, ChangeHooks, EntityType
from lowcode.core.permissions.models import default_permission_rule
from lowcode.core.stores import ModelDefinitionStore
from lowcode.core.validation.schemas import ModelDefinition
from lowcode.modules.models.repos import ModelDefinitionRepo
from lowcode.modules.models.schemas import ModelDefinitionCreate


log = structlog.get_logger()


def snapshot(model: ModelDefinition) -> dict[str, Any]:
    """JSON form of a definition as stored in audit entries and versions."""
    return model.model_dump(mode="json", by_alias=True)


class ModelDefinitionService:
    """Service for managing model definitions.

    Role gating happens at the route; this service assumes the caller
    may manage definitions.
    """

    def __init__(self, repo: ModelDefinitionRepo, hooks: Hooks) -> None:
        self.repo: ModelDefinitionStore = repo
        self.hooks: ChangeHooks = hooks

    async def list_models(self) -> list[ModelDefinition]:
        return await self.repo.list()

    async def get_model(self, name: str) -> ModelDefinition:
        """Get a model definition by name.

        Raises:
            NotFoundError: If no model has that name
        """
        model = await self.repo.get(name)
        if not model:
            raise NotFoundError("Model not found", resource="model", resource_id=name)
        return model

    async def save_model(
        self,
        principal: Principal,
        payload: ModelDefinitionCreate,
    ) -> ModelDefinition:
        """Create a model definition or replace the one with the same name.

        Args:
            principal: The admin saving the model
            payload: The new definition

        Returns:
            The stored definition
        """
        existing = await self.repo.get(payload.name)
        now = utcnow()

        model = ModelDefinition(
            name=payload.name,
            fields=payload.fields,
            owner_field=payload.owner_field,
            permissions=payload.permissions or default_permission_rule(),
            created_at=existing.created_at if existing else now,
            updated_at=now,
        )
        saved = await self.repo.save(model)

        action = ChangeAction.UPDATE if existing else ChangeAction.CREATE
        log.info(
            "model_definition_saved",
            model_name=saved.name,
            action=action.value,
            field_count=len(saved.fields),
            user_id=principal.id,
        )

        await self.hooks.emit(
            ChangeEvent(
                action=action,
                entity_type=EntityType.MODEL_DEFINITION,
                entity_id=saved.name,
                entity_name=saved.name,
                before=snapshot(existing) if existing else None,
                after=snapshot(saved),
                actor=principal,
            )
        )
        return saved

    async def delete_model(self, principal: Principal, name: str) -> None:
        """Delete a model definition.

        Records stored under the model are left in place.

        Raises:
            NotFoundError: If no model has that name
        """
        existing = await self.get_model(name)
        await self.repo.delete(name)

        log.info("model_definition_deleted", model_name=name, user_id=principal.id)

        await self.hooks.emit(
            ChangeEvent(
                action=ChangeAction.DELETE,
                entity_type=EntityType.MODEL_DEFINITION,
                entity_id=name,
                entity_name=name,
                before=snapshot(existing),
                after=None,
                actor=principal,
            )
        )


# Type alias for dependency injection
ModelDefinitionSvc = Annotated[ModelDefinitionService, Depends(ModelDefinitionService)]
