"""Redis-backed OAuthStateStore."""

from __future__ import annotations

import json
import logging
from dataclasses import asdict
from typing import TYPE_CHECKING

from apps.identity.application.oauth.ports import OAuthState
from apps.identity.infrastructure.persistence_redis.constants import STATE_KEY_PREFIX

if TYPE_CHECKING:
    import redis.asyncio as aioredis

logger = logging.getLogger(__name__)


def _state_key(state: str) -> str:
    return f"{STATE_KEY_PREFIX}{state}"


class RedisStateStore:
    """Single-use OAuth states stored as JSON under `oauth_state:<state>`.

    `consume` is one GETDEL round trip, so of two callbacks racing on the
    same state at most one gets the payload back.
    """

    def __init__(self, redis: "aioredis.Redis") -> None:
        self._redis = redis

    async def save(self, state: str, data: OAuthState, ttl_seconds: int = 600) -> None:
        await self._redis.setex(_state_key(state), ttl_seconds, json.dumps(asdict(data)))

    async def consume(self, state: str) -> OAuthState | None:
        raw = await self._redis.getdel(_state_key(state))
        if raw is None:
            return None

        try:
            payload = json.loads(raw)
            return OAuthState(
                provider=payload["provider"],
                code_verifier=payload.get("code_verifier"),
            )
        except (ValueError, KeyError, TypeError):
            # Unreadable entries are already deleted; treat them as unknown.
            logger.warning("Discarding malformed OAuth state entry", extra={"state_prefix": state[:8]})
            return None
