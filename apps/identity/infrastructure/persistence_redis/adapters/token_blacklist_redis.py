"""Redis Token Blacklist.

TokenBlacklist implementation.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from apps.identity.infrastructure.persistence_redis.constants import BLACKLIST_KEY_PREFIX

if TYPE_CHECKING:
    import redis.asyncio as aioredis


class RedisTokenBlacklist:
    """Redis-backed session token blacklist.

    Entries expire together with the token they revoke.
    """

    def __init__(self, redis: "aioredis.Redis") -> None:
        self._redis = redis

    async def add(self, jti: str, ttl_seconds: int) -> None:
        await self._redis.setex(f"{BLACKLIST_KEY_PREFIX}{jti}", max(ttl_seconds, 1), "1")

    async def contains(self, jti: str) -> bool:
        return await self._redis.exists(f"{BLACKLIST_KEY_PREFIX}{jti}") > 0
