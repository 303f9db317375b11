"""Shared test fixtures.

API tests run against an in-memory SQLite database (aiosqlite) with the
schema created from the ORM metadata, and call the app through
httpx.AsyncClient over ASGITransport. Auth runs in local-first mode with
DEFAULT_USER_ID pointing at the test user.
"""

import uuid
from collections.abc import AsyncGenerator

import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from recrutas.core.config import settings
from recrutas.core.database import get_db
from recrutas.core.rate_limiting import limiter
from recrutas.main import app
from recrutas.models import Base, User

# In-memory database shared by every session through a single connection
TEST_DATABASE_URL = "sqlite+aiosqlite://"

# Test user ID (consistent across tests for predictable auth)
TEST_USER_ID = uuid.UUID("00000000-0000-0000-0000-000000000001")
TEST_USER_EMAIL = "candidate@test.com"

API_PREFIX = "/api/v1"


@pytest_asyncio.fixture
async def db_engine() -> AsyncGenerator[AsyncEngine, None]:
    """Create an in-memory database with all tables."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def session_factory(
    db_engine: AsyncEngine,
) -> async_sessionmaker[AsyncSession]:
    """Session factory bound to the test engine."""
    return async_sessionmaker(db_engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture
async def db_session(
    session_factory: async_sessionmaker[AsyncSession],
) -> AsyncGenerator[AsyncSession, None]:
    """Database session for arranging and inspecting test data."""
    async with session_factory() as session:
        yield session


@pytest_asyncio.fixture
async def test_user(db_session: AsyncSession) -> User:
    """Create the test user (no role yet)."""
    user = User(id=TEST_USER_ID, email=TEST_USER_EMAIL)
    db_session.add(user)
    await db_session.commit()
    return user


async def _override_app(
    session_factory: async_sessionmaker[AsyncSession],
    default_user_id: uuid.UUID | None,
) -> AsyncGenerator[AsyncClient, None]:
    async def override_get_db() -> AsyncGenerator[AsyncSession, None]:
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    original_auth_enabled = settings.auth_enabled
    original_default_user_id = settings.default_user_id
    settings.auth_enabled = False
    settings.default_user_id = default_user_id
    limiter.reset()

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    settings.auth_enabled = original_auth_enabled
    settings.default_user_id = original_default_user_id
    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def client(
    session_factory: async_sessionmaker[AsyncSession],
    test_user: User,  # noqa: ARG001 - ensures the user exists
) -> AsyncGenerator[AsyncClient, None]:
    """Async HTTP client authenticated as the test user (local-first mode).

    Yields:
        AsyncClient with base_url http://test.
    """
    async for ac in _override_app(session_factory, TEST_USER_ID):
        yield ac


@pytest_asyncio.fixture
async def unauthenticated_client(
    session_factory: async_sessionmaker[AsyncSession],
) -> AsyncGenerator[AsyncClient, None]:
    """Async HTTP client with no user context (DEFAULT_USER_ID unset)."""
    async for ac in _override_app(session_factory, None):
        yield ac
