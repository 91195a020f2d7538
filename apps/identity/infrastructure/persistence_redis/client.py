"""Redis clients.

The blacklist and OAuth state may live in different Redis databases. Clients
are cached per URL, so pointing both settings at one URL shares one pool.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from redis.asyncio.retry import Retry
from redis.backoff import ExponentialBackoff
from redis.exceptions import ConnectionError, TimeoutError

if TYPE_CHECKING:
    import redis.asyncio as aioredis

logger = logging.getLogger(__name__)

MAX_RETRIES = 3
CONNECT_TIMEOUT_SECONDS = 5.0
COMMAND_TIMEOUT_SECONDS = 5.0
HEALTH_CHECK_INTERVAL_SECONDS = 30
POOL_SIZE = 50

_clients: dict[str, "aioredis.Redis"] = {}


def _client_for(url: str) -> "aioredis.Redis":
    client = _clients.get(url)
    if client is None:
        import redis.asyncio as aioredis

        client = aioredis.from_url(
            url,
            decode_responses=True,
            socket_keepalive=True,
            socket_connect_timeout=CONNECT_TIMEOUT_SECONDS,
            socket_timeout=COMMAND_TIMEOUT_SECONDS,
            health_check_interval=HEALTH_CHECK_INTERVAL_SECONDS,
            max_connections=POOL_SIZE,
            retry=Retry(ExponentialBackoff(), retries=MAX_RETRIES),
            retry_on_error=[ConnectionError, TimeoutError],
        )
        _clients[url] = client
    return client


def get_blacklist_redis() -> "aioredis.Redis":
    """Client for revoked session jtis (IDENTITY_REDIS_BLACKLIST_URL)."""
    from apps.identity.setup.config import get_settings

    return _client_for(get_settings().redis_blacklist_url)


def get_oauth_state_redis() -> "aioredis.Redis":
    """Client for pending OAuth states (IDENTITY_REDIS_OAUTH_STATE_URL)."""
    from apps.identity.setup.config import get_settings

    return _client_for(get_settings().redis_oauth_state_url)


async def close_redis_clients() -> None:
    """Close every cached client and drop it from the cache."""
    while _clients:
        _, client = _clients.popitem()
        await client.aclose()
    logger.info("Redis clients closed")
