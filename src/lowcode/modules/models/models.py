"""Model definition database model."""

from typing import Any

from sqlalchemy import JSON, String
from sqlalchemy.orm import Mapped, mapped_column

from lowcode.core.constants import MAX_FIELD_NAME_LENGTH, MAX_MODEL_NAME_LENGTH
from lowcode.core.database.base import Base, IDMixin, TimestampMixin


class ModelDefinitionRow(Base, IDMixin, TimestampMixin):
    """Persisted schema of one dynamic model.

    Attributes:
        name: Unique model name
        fields: Ordered field definitions (JSON, camelCase keys)
        owner_field: Name of the row-owner field, if any
        permissions: Per-action role lists (JSON)
    """

    __tablename__ = "model_definitions"

    name: Mapped[str] = mapped_column(
        String(MAX_MODEL_NAME_LENGTH),
        nullable=False,
        unique=True,
        index=True,
    )
    fields: Mapped[list[dict[str, Any]]] = mapped_column(
        JSON,
        nullable=False,
        default=list,
    )
    owner_field: Mapped[str | None] = mapped_column(
        String(MAX_FIELD_NAME_LENGTH),
        nullable=True,
    )
    permissions: Mapped[dict[str, Any]] = mapped_column(
        JSON,
        nullable=False,
        default=dict,
    )

    def __repr__(self) -> str:
        return f"<ModelDefinitionRow(name={self.name}, fields={len(self.fields)})>"
