"""Shared fixtures: a fresh SQLite database per test plus an API client.

Each test gets its own database file under ``tmp_path`` so that the setup
session and request sessions use separate connections, as they would against
a real server.
"""

import os

os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("SECURITY__SECRET_KEY", "test-secret-key")
os.environ.setdefault("DATABASE__URL", "sqlite+aiosqlite:///./agromove-test.db")

import pytest  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine  # noqa: E402

from agromove.db import models  # noqa: E402,F401
from agromove.infrastructure.database.base import Base  # noqa: E402
from agromove.interfaces.http.deps.database import get_db_session  # noqa: E402
from agromove.main import app  # noqa: E402


@pytest.fixture
async def test_engine(tmp_path):
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}", echo=False)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(test_engine):
    return async_sessionmaker(test_engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
async def db_session(session_factory):
    async with session_factory() as session:
        yield session


@pytest.fixture
async def client(session_factory):
    """API client whose request sessions come from the test database."""

    async def override_get_db_session():
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db_session] = override_get_db_session
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as c:
        yield c
    app.dependency_overrides.clear()
