from apps.identity.infrastructure.persistence_redis.adapters.state_store_redis import (
    RedisStateStore,
)
from apps.identity.infrastructure.persistence_redis.adapters.token_blacklist_redis import (
    RedisTokenBlacklist,
)

__all__ = ["RedisStateStore", "RedisTokenBlacklist"]
