"""Dynamic record database model."""

from typing import Any

from sqlalchemy import JSON, String
from sqlalchemy.orm import Mapped, mapped_column

from lowcode.core.constants import MAX_MODEL_NAME_LENGTH
from lowcode.core.database.base import Base, IDMixin, TimestampMixin


class RecordRow(Base, IDMixin, TimestampMixin):
    """One record of a runtime-defined model.

    Attributes:
        model_name: Name of the model the record belongs to
        data: The record's field values (JSON), without the id
    """

    __tablename__ = "data_records"

    model_name: Mapped[str] = mapped_column(
        String(MAX_MODEL_NAME_LENGTH),
        nullable=False,
        index=True,
    )
    data: Mapped[dict[str, Any]] = mapped_column(
        JSON,
        nullable=False,
        default=dict,
    )

    def __repr__(self) -> str:
        return f"<RecordRow(id={self.id}, model_name={self.model_name})>"
