"""Async database session management."""

from collections.abc import AsyncGenerator
from typing import Any

import structlog
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from lowcode.config import settings
from lowcode.core.database.base import Base


logger = structlog.get_logger()


def _engine_options() -> dict[str, Any]:
    # SQLite uses a single-connection pool; pool sizing only applies elsewhere
    if settings.is_sqlite:
        return {"echo": settings.database_echo}
    return {
        "echo": settings.database_echo,
        "pool_size": settings.database_pool_size,
        "max_overflow": settings.database_max_overflow,
        "pool_pre_ping": True,
    }


async_engine = create_async_engine(settings.database_url, **_engine_options())

async_session_factory = async_sessionmaker(
    bind=async_engine,
    class_=AsyncSession,
    expire_on_commit=False,
    autoflush=False,
)


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """Dependency that provides a database session.

    The session commits when the request handler returns and rolls
    back if it raises.
    """
    async with async_session_factory() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise


async def init_models(engine: AsyncEngine | None = None) -> None:
    """Create all tables that don't exist yet."""
    # Import table modules so they register with Base.metadata
    import lowcode.core.audit.models  # noqa: F401, PLC0415
    import lowcode.modules.data.models  # noqa: F401, PLC0415
    import lowcode.modules.models.models  # noqa: F401, PLC0415
    import lowcode.modules.users.models  # noqa: F401, PLC0415
    import lowcode.modules.versions.models  # noqa: F401, PLC0415

    engine = engine or async_engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    logger.info("database_tables_created", tables=sorted(Base.metadata.tables))
