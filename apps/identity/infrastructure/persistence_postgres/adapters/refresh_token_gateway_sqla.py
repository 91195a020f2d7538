"""SQLAlchemy implementation of the refresh token gateway."""

from __future__ import annotations

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from apps.identity.domain.entities import RefreshToken
from apps.identity.infrastructure.persistence_postgres.mappings import refresh_tokens_table


class SqlaRefreshTokenGateway:
    """Refresh token persistence."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    def add(self, token: RefreshToken) -> None:
        self._session.add(token)

    async def get_by_hash(self, token_hash: str) -> RefreshToken | None:
        result = await self._session.execute(
            select(RefreshToken).where(refresh_tokens_table.c.token_hash == token_hash)
        )
        return result.scalar_one_or_none()

    async def delete_by_hash(self, token_hash: str) -> bool:
        result = await self._session.execute(
            delete(refresh_tokens_table).where(refresh_tokens_table.c.token_hash == token_hash)
        )
        return result.rowcount > 0

    async def delete_all_for_user(self, user_id: int) -> int:
        result = await self._session.execute(
            delete(refresh_tokens_table).where(refresh_tokens_table.c.user_id == user_id)
        )
        return result.rowcount
