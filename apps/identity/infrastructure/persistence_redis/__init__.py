"""Redis persistence."""

from apps.identity.infrastructure.persistence_redis.adapters import (
    RedisStateStore,
    RedisTokenBlacklist,
)

__all__ = ["RedisStateStore", "RedisTokenBlacklist"]
