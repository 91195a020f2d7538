"""RefreshTokenGateway Port."""

from typing import Protocol

from apps.identity.domain.entities import RefreshToken


class RefreshTokenGateway(Protocol):
    """Refresh token persistence.

    Implementations:
        - SqlaRefreshTokenGateway (infrastructure/persistence_postgres/)
    """

    def add(self, token: RefreshToken) -> None: ...

    async def get_by_hash(self, token_hash: str) -> RefreshToken | None: ...

    async def delete_by_hash(self, token_hash: str) -> bool:
        """Delete one token.

        Returns:
            False if no row was deleted (already used or revoked)
        """
        ...

    async def delete_all_for_user(self, user_id: int) -> int: ...
