"""
Retro Board Backend — Test Configuration (conftest.py)
=======================================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.
Who:   Used by all test files in the tests/ directory.
When:  Every fixture here is function-scoped: each test gets a fresh database.

Fixture Hierarchy:
    db_engine: In-memory SQLite engine with every table created
    ├── db_session: AsyncSession for service-level tests
    └── test_client: HTTPX AsyncClient whose requests use db_engine
        └── auth_user: a signed-up user {user_id, username, access_token}
"""

import os

# Override settings for testing BEFORE any app imports
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///./test.db"
os.environ["LOG_LEVEL"] = "WARNING"  # Reduce noise during tests
os.environ["CORS_ORIGINS"] = "*"

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from retroapi.database import get_db_session, init_db


# ══════════════════════════════════════════════════════════════════════════
# Database Fixtures
# ══════════════════════════════════════════════════════════════════════════

@pytest_asyncio.fixture
async def db_engine():
    """
    Provides an in-memory SQLite engine with the schema created.

    StaticPool keeps a single connection open, so every session sees the
    same in-memory database for the duration of the test.
    """
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    await init_db(engine)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(db_engine):
    return async_sessionmaker(db_engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture
async def db_session(session_factory):
    """
    Provides an AsyncSession bound to the test engine.

    Usage:
        async def test_signup(db_session):
            result = await user_service.signup(db_session, "alice", "secret")
    """
    async with session_factory() as session:
        yield session


# ══════════════════════════════════════════════════════════════════════════
# API Fixtures
# ══════════════════════════════════════════════════════════════════════════

@pytest_asyncio.fixture
async def test_client(session_factory):
    """
    Provides an async HTTP test client for endpoint testing.

    What:    HTTPX AsyncClient configured to talk to our FastAPI app.
    How:     ASGITransport routes requests directly to the app; the
             get_db_session dependency is swapped for one that opens
             sessions on the in-memory test engine.

    Usage:
        async def test_health(test_client):
            response = await test_client.get("/health")
            assert response.status_code == 200
    """
    from retroapi.main import app

    async def override_get_db_session():
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db_session] = override_get_db_session
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
    app.dependency_overrides.clear()


@pytest.fixture
def signup(test_client):
    """
    Returns a coroutine function that signs a user up through the API.

    Usage:
        bob = await signup("bob")
        bob["access_token"]
    """

    async def _signup(username: str, password: str = "secret123") -> dict:
        response = await test_client.post("/signup", json={"username": username, "password": password})
        assert response.status_code == 201, response.text
        return response.json()["response"]

    return _signup


@pytest_asyncio.fixture
async def auth_user(signup):
    """A signed-up user; pass `auth_user["access_token"]` as the Authorization header."""
    return await signup("alice")


@pytest.fixture
def auth_headers(auth_user):
    return {"Authorization": auth_user["access_token"]}
