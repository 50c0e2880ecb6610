"""Storage contracts consumed by the services.

Services receive implementations of these protocols instead of reaching
for global state. The SQLAlchemy repositories in ``lowcode.modules``
implement them; unit tests substitute AsyncMocks.
"""

from collections.abc import Mapping
from typing import Any, Protocol

from lowcode.core.validation.schemas import ModelDefinition


Record = dict[str, Any]


class ModelDefinitionStore(Protocol):
    """Persistence of model definitions, keyed by model name."""

    async def get(self, name: str) -> ModelDefinition | None: ...

    async def list(self) -> list[ModelDefinition]: ...

    async def save(self, model: ModelDefinition) -> ModelDefinition:
        """Insert or replace the definition with the same name."""
        ...

    async def delete(self, name: str) -> bool: ...


class RecordStore(Protocol):
    """Persistence of dynamic records, scoped by model name."""

    async def list(self, model_name: str) -> list[Record]: ...

    async def get_by_id(self, model_name: str, record_id: str) -> Record | None: ...

    async def create(self, model_name: str, data: Mapping[str, Any]) -> Record:
        """Store a new record and return it with its assigned ``id``."""
        ...

    async def update(
        self, model_name: str, record_id: str, data: Mapping[str, Any]
    ) -> Record | None:
        """Merge ``data`` into a record; None if it does not exist."""
        ...

    async def delete(self, model_name: str, record_id: str) -> bool: ...
