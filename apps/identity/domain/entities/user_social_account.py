"""UserSocialAccount Entity.

Links a user to one external provider identity.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone


@dataclass(eq=False)
class UserSocialAccount:
    """Social account entity.

    Attributes:
        user_id: owning user
        provider: provider name (google, telegram, instagram)
        provider_user_id: stable user id at the provider
        id: numeric identifier, assigned by the database on flush
        created_at: creation time
        last_login_at: last login through this provider
    """

    user_id: int | None
    provider: str
    provider_user_id: str
    id: int | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    last_login_at: datetime | None = None

    def update_login_time(self) -> None:
        self.last_login_at = datetime.now(timezone.utc)
