"""SQLAlchemy implementations of Flusher and TransactionManager."""

from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncSession


class SqlaFlusher:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def flush(self) -> None:
        await self._session.flush()


class SqlaTransactionManager:
    """Transaction manager."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def commit(self) -> None:
        await self._session.commit()

    async def rollback(self) -> None:
        await self._session.rollback()
