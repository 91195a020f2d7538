"""User Entity.

Pure domain entity, independent of the ORM.
The SQLAlchemy mapping lives in infrastructure/persistence_postgres/mappings/users.py.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone


@dataclass(eq=False)
class User:
    """User entity.

    Attributes:
        email: unique login email (a placeholder for providers without email)
        id: numeric identifier, assigned by the database on flush
        password_hash: bcrypt hash, None for OAuth-only accounts
        name: given name
        surname: family name
        username: public login name
        image_url: external profile image URL
        roles: granted roles (ROLE_*)
        is_active: soft-disable flag
        created_at: creation time
        updated_at: last modification time
        last_login_at: last successful login time
    """

    email: str
    id: int | None = None
    password_hash: str | None = None
    name: str | None = None
    surname: str | None = None
    username: str | None = None
    image_url: str | None = None
    roles: list[str] = field(default_factory=list)
    is_active: bool = True
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    last_login_at: datetime | None = None

    def touch(self) -> None:
        self.updated_at = datetime.now(timezone.utc)

    def update_login_time(self) -> None:
        """Record a successful login."""
        now = datetime.now(timezone.utc)
        self.last_login_at = now
        self.updated_at = now

    def __repr__(self) -> str:
        return f"User(id={self.id}, email={self.email!r})"
