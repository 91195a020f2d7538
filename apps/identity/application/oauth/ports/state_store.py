"""OAuthStateStore Port.

Short-TTL store for single-use anti-forgery state values.
"""

from dataclasses import dataclass
from typing import Protocol


@dataclass(frozen=True, slots=True)
class OAuthState:
    """Data bound to an issued state value."""

    provider: str
    code_verifier: str | None = None


class OAuthStateStore(Protocol):
    """OAuth state store.

    Implementations:
        - RedisStateStore (infrastructure/persistence_redis/)
    """

    async def save(self, state: str, data: OAuthState, ttl_seconds: int) -> None: ...

    async def consume(self, state: str) -> OAuthState | None:
        """Atomically read and delete the state.

        Returns None if the state is unknown, expired or already consumed.
        """
        ...
