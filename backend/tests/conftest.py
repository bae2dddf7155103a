"""Root conftest - in-memory store and FastAPI test client shared by all suites.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - get_db dependency overridden to use the test session factory
    - app.state.db points at a manager wrapping the test engine (health check)

Design Decisions:
    - SQLite in-memory: fast, no external dependency; the filter builder renders
      SQLite spellings for tag overlap and case-insensitive search
"""

import os

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///test.db")

import pytest  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import (  # noqa: E402
    AsyncSession, async_sessionmaker, create_async_engine,
)

import formservice.models  # noqa: E402,F401
from formservice.db.base import Base  # noqa: E402
from formservice.infrastructure.database import (  # noqa: E402
    DatabaseSessionManager, get_db,
)
from formservice.main import app  # noqa: E402


@pytest.fixture
async def test_engine():
    engine = create_async_engine("sqlite+aiosqlite:///:memory:", echo=False)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
def fake_manager(test_engine, test_session_factory):
    manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    manager.engine = test_engine
    manager._session_factory = test_session_factory
    return manager


@pytest.fixture
async def client(fake_manager):
    """FastAPI test client with the store dependency overridden."""
    async def override_get_db():
        async with fake_manager.session() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    original = getattr(app.state, "db", None)
    app.state.db = fake_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    app.state.db = original
