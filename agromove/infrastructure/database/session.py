"""Engine and unit-of-work sessions for the AgroMove database.

One engine per process, created on first use. Each request gets its own
``AsyncSession`` from ``get_session``: it commits when the handler returns
and rolls back if anything raises.
"""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from typing import Any

from sqlalchemy import event
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine

from agromove.core.config import DatabaseSettings, get_settings
from agromove.infrastructure.database.base import Base

logger = logging.getLogger(__name__)

_engine: AsyncEngine | None = None
_session_factory: async_sessionmaker[AsyncSession] | None = None


def _enable_sqlite_foreign_keys(dbapi_connection, _connection_record) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def create_engine_from_settings(database: DatabaseSettings, *, debug: bool = False) -> AsyncEngine:
    options: dict[str, Any] = {"echo": database.echo or debug}
    for name in ("pool_size", "max_overflow"):
        value = getattr(database, name)
        if value is not None:
            options[name] = value

    engine = create_async_engine(database.url, **options)
    if make_url(database.url).get_backend_name() == "sqlite":
        event.listen(engine.sync_engine, "connect", _enable_sqlite_foreign_keys)
    return engine


def get_engine() -> AsyncEngine:
    global _engine, _session_factory
    if _engine is None:
        settings = get_settings()
        _engine = create_engine_from_settings(settings.database, debug=settings.debug)
        _session_factory = async_sessionmaker(_engine, expire_on_commit=False)
        logger.info("Database engine ready (%s)", _engine.url.render_as_string(hide_password=True))
    return _engine


def get_session_factory() -> async_sessionmaker[AsyncSession]:
    get_engine()
    assert _session_factory is not None
    return _session_factory


async def get_session() -> AsyncIterator[AsyncSession]:
    async with get_session_factory()() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise


async def init_db() -> None:
    """Create missing tables; deployed environments run Alembic instead."""
    from agromove.db import models  # noqa: F401

    async with get_engine().begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def dispose_engine() -> None:
    global _engine, _session_factory
    if _engine is None:
        return
    await _engine.dispose()
    _engine = None
    _session_factory = None
