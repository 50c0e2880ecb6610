"""Record repository for database operations."""

from collections.abc import Mapping
from typing import Annotated, Any

from fastapi import Depends
from sqlalchemy import select

from lowcode.api.dependencies import DBSession
from lowcode.core.database.base import generate_id
from lowcode.core.stores import Record
from lowcode.modules.data.models import RecordRow


def _to_record(row: RecordRow) -> Record:
    return {"id": row.id, **{k: v for k, v in row.data.items() if k != "id"}}


def _without_id(data: Mapping[str, Any]) -> dict[str, Any]:
    return {k: v for k, v in data.items() if k != "id"}


class RecordRepository:
    """SQLAlchemy-backed RecordStore.

    Record payloads live in a JSON column; the id is the row's primary
    key and is never taken from the payload.
    """

    def __init__(self, session: DBSession) -> None:
        self.session = session

    async def _get_row(self, model_name: str, record_id: str) -> RecordRow | None:
        stmt = select(RecordRow).where(
            RecordRow.model_name == model_name,
            RecordRow.id == record_id,
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def list(self, model_name: str) -> list[Record]:
        """List a model's records in creation order."""
        stmt = (
            select(RecordRow)
            .where(RecordRow.model_name == model_name)
            .order_by(RecordRow.created_at, RecordRow.id)
        )
        result = await self.session.execute(stmt)
        return [_to_record(row) for row in result.scalars().all()]

    async def get_by_id(self, model_name: str, record_id: str) -> Record | None:
        row = await self._get_row(model_name, record_id)
        return _to_record(row) if row else None

    async def create(self, model_name: str, data: Mapping[str, Any]) -> Record:
        """Store a new record under a freshly generated id."""
        row = RecordRow(
            id=generate_id(),
            model_name=model_name,
            data=_without_id(data),
        )
        self.session.add(row)
        await self.session.flush()
        return _to_record(row)

    async def update(
        self,
        model_name: str,
        record_id: str,
        data: Mapping[str, Any],
    ) -> Record | None:
        """Merge ``data`` over the stored values; None if the record is gone."""
        row = await self._get_row(model_name, record_id)
        if row is None:
            return None

        # Assign a new dict so the JSON column is flagged as modified
        row.data = {**row.data, **_without_id(data)}
        await self.session.flush()
        return _to_record(row)

    async def delete(self, model_name: str, record_id: str) -> bool:
        row = await self._get_row(model_name, record_id)
        if row is None:
            return False

        await self.session.delete(row)
        await self.session.flush()
        return True


# Type alias for dependency injection
RecordRepo = Annotated[RecordRepository, Depends(RecordRepository)]
