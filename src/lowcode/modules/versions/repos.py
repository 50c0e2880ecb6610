"""Model version repository for database operations."""

from typing import Annotated, Any

from fastapi import Depends
from sqlalchemy import func, select

from lowcode.api.dependencies import DBSession
from lowcode.modules.versions.models import ModelVersion


class ModelVersionRepository:
    """Repository for ModelVersion database operations."""

    def __init__(self, session: DBSession) -> None:
        self.session = session

    async def latest_version(self, model_name: str) -> int:
        """Return the highest version number of a model, 0 if none."""
        stmt = select(func.max(ModelVersion.version)).where(
            ModelVersion.model_name == model_name
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none() or 0

    async def add(
        self,
        model_name: str,
        definition: dict[str, Any],
        change_description: str,
        created_by: str,
    ) -> ModelVersion:
        """Record the next version of a model.

        Returns:
            The created version
        """
        version = ModelVersion(
            model_name=model_name,
            version=await self.latest_version(model_name) + 1,
            definition=definition,
            change_description=change_description,
            created_by=created_by,
        )
        self.session.add(version)
        await self.session.flush()
        return version

    async def list_for_model(self, model_name: str) -> list[ModelVersion]:
        """List versions of a model, newest first."""
        stmt = (
            select(ModelVersion)
            .where(ModelVersion.model_name == model_name)
            .order_by(ModelVersion.version.desc())
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def get(self, model_name: str, version: int) -> ModelVersion | None:
        stmt = select(ModelVersion).where(
            ModelVersion.model_name == model_name,
            ModelVersion.version == version,
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()


# Type alias for dependency injection
ModelVersionRepo = Annotated[ModelVersionRepository, Depends(ModelVersionRepository)]
