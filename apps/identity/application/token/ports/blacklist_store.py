"""TokenBlacklist Port."""

from typing import Protocol


class TokenBlacklist(Protocol):
    """Revoked session token ids.

    Implementations:
        - RedisTokenBlacklist (infrastructure/persistence_redis/)
    """

    async def add(self, jti: str, ttl_seconds: int) -> None: ...

    async def contains(self, jti: str) -> bool: ...
