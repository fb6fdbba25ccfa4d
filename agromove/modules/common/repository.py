"""Shared base for SQLAlchemy-backed repositories."""

from __future__ import annotations

from typing import Generic, TypeVar

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm.exc import StaleDataError

from agromove.core.errors import ConflictError

ModelT = TypeVar("ModelT")


class AsyncRepository(Generic[ModelT]):
    """Base repository holding the unit-of-work session.

    Repositories only flush; committing is left to whoever owns the session so
    that several writes from one operation land in the same transaction.
    """

    conflict_message = "Record was modified by another request, please retry"

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    @property
    def session(self) -> AsyncSession:
        return self._session

    async def add(self, instance: ModelT) -> ModelT:
        self.session.add(instance)
        await self.flush()
        return instance

    async def flush(self) -> None:
        try:
            await self.session.flush()
        except StaleDataError as exc:
            raise ConflictError(self.conflict_message) from exc
