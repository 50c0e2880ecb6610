"""Database layer - session management, base models, and mixins."""

from lowcode.core.database.base import Base, IDMixin, TimestampMixin, generate_id
from lowcode.core.database.session import (
    async_engine,
    async_session_factory,
    get_db,
    init_models,
)


__all__ = [
    "Base",
    "IDMixin",
    "TimestampMixin",
    "async_engine",
    "async_session_factory",
    "generate_id",
    "get_db",
    "init_models",
]
