"""Model definition repository for database operations."""

from typing import Annotated

from fastapi import Depends
from sqlalchemy import select

from lowcode.api.dependencies import DBSession
from lowcode.core.database.base import utcnow
from lowcode.core.validation.schemas import ModelDefinition
from lowcode.modules.models.models import ModelDefinitionRow


def _to_definition(row: ModelDefinitionRow) -> ModelDefinition:
    return ModelDefinition.model_validate(
        {
            "name": row.name,
            "fields": row.fields,
            "ownerField": row.owner_field,
            "permissions": row.permissions,
            "createdAt": row.created_at,
            "updatedAt": row.updated_at,
        }
    )


class ModelDefinitionRepository:
    """SQLAlchemy-backed ModelDefinitionStore."""

    def __init__(self, session: DBSession) -> None:
        self.session = session

    async def _get_row(self, name: str) -> ModelDefinitionRow | None:
        stmt = select(ModelDefinitionRow).where(ModelDefinitionRow.name == name)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get(self, name: str) -> ModelDefinition | None:
        """Get a model definition by name."""
        row = await self._get_row(name)
        return _to_definition(row) if row else None

    async def list(self) -> list[ModelDefinition]:
        """List all model definitions, ordered by name."""
        stmt = select(ModelDefinitionRow).order_by(ModelDefinitionRow.name)
        result = await self.session.execute(stmt)
        return [_to_definition(row) for row in result.scalars().all()]

    async def save(self, model: ModelDefinition) -> ModelDefinition:
        """Insert or replace a definition by name.

        Args:
            model: The definition to store; its timestamps are kept when set

        Returns:
            The stored definition
        """
        data = model.model_dump(mode="json", by_alias=True)
        now = utcnow()

        row = await self._get_row(model.name)
        if row is None:
            row = ModelDefinitionRow(
                name=model.name,
                created_at=model.created_at or now,
            )
            self.session.add(row)

        row.fields = data["fields"]
        row.owner_field = model.owner_field
        row.permissions = data["permissions"]
        row.updated_at = model.updated_at or now

        await self.session.flush()
        return _to_definition(row)

    async def delete(self, name: str) -> bool:
        """Delete a definition; False if it did not exist."""
        row = await self._get_row(name)
        if row is None:
            return False

        await self.session.delete(row)
        await self.session.flush()
        return True


# Type alias for dependency injection
ModelDefinitionRepo = Annotated[ModelDefinitionRepository, Depends(ModelDefinitionRepository)]
