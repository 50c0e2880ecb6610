"""Model version database model."""

from datetime import datetime
from typing import Any

from sqlalchemy import JSON, DateTime, Integer, String, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from lowcode.core.constants import ID_LENGTH, MAX_MODEL_NAME_LENGTH
from lowcode.core.database.base import Base, IDMixin, utcnow


class ModelVersion(Base, IDMixin):
    """Snapshot of a model definition taken each time it is saved.

    Attributes:
        model_name: Name of the versioned model
        version: 1 for the first save, incremented by one per save
        definition: The saved definition (JSON, camelCase keys)
        change_description: Short description of the change
        created_by: Id of the admin who saved it
        created_at: When the version was recorded
    """

    __tablename__ = "model_versions"
    __table_args__ = (
        UniqueConstraint("model_name", "version", name="uq_model_version"),
    )

    model_name: Mapped[str] = mapped_column(
        String(MAX_MODEL_NAME_LENGTH),
        nullable=False,
        index=True,
    )
    version: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
    )
    definition: Mapped[dict[str, Any]] = mapped_column(
        JSON,
        nullable=False,
    )
    change_description: Mapped[str] = mapped_column(
        Text,
        nullable=False,
    )
    created_by: Mapped[str] = mapped_column(
        String(ID_LENGTH),
        nullable=False,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utcnow,
        nullable=False,
    )

    def __repr__(self) -> str:
        return f"<ModelVersion(model_name={self.model_name}, version={self.version})>"
