"""RefreshToken Entity.

Only the SHA-256 digest of the token value is stored.
The raw value exists in the client's cookie and in the issuing response.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone


@dataclass(eq=False)
class RefreshToken:
    """Persisted refresh token bound to a single user."""

    user_id: int
    token_hash: str
    expires_at: datetime
    id: int | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def is_expired(self, now: datetime | None = None) -> bool:
        """Expiry is checked at use time."""
        now = now or datetime.now(timezone.utc)
        return self.expires_at <= now
