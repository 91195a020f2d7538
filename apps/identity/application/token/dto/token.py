"""Token DTOs."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime


@dataclass(frozen=True, slots=True)
class SessionToken:
    """Signed session token (JWT)."""

    token: str
    jti: str
    expires_at: int


@dataclass(frozen=True, slots=True)
class SessionTokenPayload:
    """Verified session token claims."""

    user_id: int
    jti: str
    exp: int
    iat: int
    roles: list[str] = field(default_factory=list)
    email: str | None = None


@dataclass(frozen=True, slots=True)
class IssuedRefreshToken:
    """Freshly issued refresh token.

    `value` is the raw opaque token; it is never persisted.
    """

    value: str
    user_id: int
    expires_at: datetime


@dataclass(frozen=True, slots=True)
class RefreshCookie:
    """Framework-independent description of the refresh-token cookie."""

    name: str
    value: str
    path: str
    expires: datetime
    max_age: int
    httponly: bool
    secure: bool
    samesite: str
    domain: str | None = None


@dataclass(frozen=True, slots=True)
class SessionGrant:
    """Session token plus refresh token issued for one login."""

    token: SessionToken
    refresh_token: IssuedRefreshToken


@dataclass(frozen=True, slots=True)
class RefreshRequest:
    refresh_token: str | None


@dataclass(frozen=True, slots=True)
class RefreshResult:
    """Refresh result; the refresh token is rotated on every use."""

    user_id: int
    token: SessionToken
    refresh_token: IssuedRefreshToken


@dataclass(frozen=True, slots=True)
class LogoutRequest:
    access_token: str | None
