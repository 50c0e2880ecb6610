"""Pytest configuration and shared fixtures."""

import os


# Settings are read at import time; point them at test values first
os.environ.setdefault("LOWCODE_ENVIRONMENT", "test")
os.environ.setdefault("LOWCODE_DATABASE_URL", "sqlite+aiosqlite:///:memory:")

from collections.abc import AsyncGenerator  # noqa: E402

import pytest  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

# Import all models to ensure they're registered with Base.metadata
from lowcode.core.audit.models import AuditLog  # noqa: E402, F401
from lowcode.core.database import Base, get_db  # noqa: E402
from lowcode.core.permissions.roles import Role  # noqa: E402
from lowcode.main import create_app  # noqa: E402
from lowcode.modules.data.models import RecordRow  # noqa: E402, F401
from lowcode.modules.models.models import ModelDefinitionRow  # noqa: E402, F401
from lowcode.modules.users.models import User  # noqa: E402
from lowcode.modules.versions.models import ModelVersion  # noqa: E402, F401
from tests.factories.auth import headers_for  # noqa: E402


TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest.fixture
async def engine():
    """Create a fresh in-memory database per test."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest.fixture
async def db(engine) -> AsyncGenerator[AsyncSession, None]:
    """Provide a transactional database session for tests.

    Each test runs in its own transaction that is rolled back
    after the test completes.
    """
    session_factory = async_sessionmaker(
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )

    async with engine.connect() as conn:
        await conn.begin()

        async with session_factory(bind=conn) as session:
            yield session

        await conn.rollback()


@pytest.fixture
async def app(db: AsyncSession):
    """Create test application instance."""
    application = create_app()

    # Override database dependency
    async def override_get_db() -> AsyncGenerator[AsyncSession, None]:
        yield db

    application.dependency_overrides[get_db] = override_get_db

    yield application

    application.dependency_overrides.clear()


@pytest.fixture
async def client(app) -> AsyncGenerator[AsyncClient, None]:
    """Provide async HTTP client for API testing."""
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as client:
        yield client


# ============================================================
# User and Principal Fixtures
# ============================================================


async def _make_user(db: AsyncSession, email: str, name: str, role: Role) -> User:
    # Tests authenticate with minted tokens, so the hash is never checked
    user = User(email=email, name=name, password_hash="not-a-bcrypt-hash", role=role.value)
    db.add(user)
    await db.flush()
    return user


@pytest.fixture
async def admin_user(db: AsyncSession) -> User:
    return await _make_user(db, "admin@example.com", "Admin User", Role.ADMIN)


@pytest.fixture
async def manager_user(db: AsyncSession) -> User:
    return await _make_user(db, "manager@example.com", "Manager User", Role.MANAGER)


@pytest.fixture
async def other_manager_user(db: AsyncSession) -> User:
    return await _make_user(db, "manager2@example.com", "Second Manager", Role.MANAGER)


@pytest.fixture
async def viewer_user(db: AsyncSession) -> User:
    return await _make_user(db, "viewer@example.com", "Viewer User", Role.VIEWER)


@pytest.fixture
def admin_headers(admin_user: User) -> dict[str, str]:
    return headers_for(admin_user)


@pytest.fixture
def manager_headers(manager_user: User) -> dict[str, str]:
    return headers_for(manager_user)


@pytest.fixture
def other_manager_headers(other_manager_user: User) -> dict[str, str]:
    return headers_for(other_manager_user)


@pytest.fixture
def viewer_headers(viewer_user: User) -> dict[str, str]:
    return headers_for(viewer_user)
