"""Model version history."""

from typing import Annotated

import structlog
from fastapi import Depends

from lowcode.core.errors import NotFoundError
from lowcode.core.events import ChangeAction, ChangeEvent, EntityType
from lowcode.modules.versions.models import ModelVersion
from lowcode.modules.versions.repos import ModelVersionRepo, ModelVersionRepository


log = structlog.get_logger()

_DESCRIPTIONS = {
    ChangeAction.CREATE: "Created model {name}",
    ChangeAction.UPDATE: "Updated model {name}",
}


class ModelVersionRecorder:
    """Change-hook subscriber that snapshots every saved model definition.

    Deletions are not versioned; record events are ignored.
    """

    def __init__(self, repo: ModelVersionRepository) -> None:
        self.repo = repo

    async def __call__(self, event: ChangeEvent) -> None:
        if event.entity_type != EntityType.MODEL_DEFINITION:
            return
        if event.action not in _DESCRIPTIONS or event.after is None:
            return

        version = await self.repo.add(
            model_name=event.entity_name,
            definition=event.after,
            change_description=_DESCRIPTIONS[event.action].format(name=event.entity_name),
            created_by=event.actor.id,
        )
        log.info(
            "model_version_recorded",
            model_name=event.entity_name,
            version=version.version,
        )


class ModelVersionService:
    """Read access to model version history."""

    def __init__(self, repo: ModelVersionRepo) -> None:
        self.repo = repo

    async def list_versions(self, model_name: str) -> list[ModelVersion]:
        return await self.repo.list_for_model(model_name)

    async def get_version(self, model_name: str, version: int) -> ModelVersion:
        """Get one version of a model.

        Raises:
            NotFoundError: If the model has no such version
        """
        found = await self.repo.get(model_name, version)
        if not found:
            raise NotFoundError(
                "Model version not found",
                resource="model_version",
                resource_id=f"{model_name}@{version}",
            )
        return found


# Type alias for dependency injection
ModelVersionSvc = Annotated[ModelVersionService, Depends(ModelVersionService)]
