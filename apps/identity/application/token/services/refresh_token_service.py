"""RefreshTokenService - opaque, rotating refresh tokens.

Tokens are high-entropy random strings, independent from the session
token. Only their SHA-256 digest is stored. Every successful refresh
deletes the presented token and issues a new one (rotation on use).
"""

from __future__ import annotations

import hashlib
import logging
from datetime import datetime, timedelta, timezone
from typing import TYPE_CHECKING

from apps.identity.application.common.services import generate_urlsafe_token
from apps.identity.application.token.dto import (
    IssuedRefreshToken,
    RefreshCookie,
    RefreshResult,
)
from apps.identity.application.token.exceptions import InvalidRefreshTokenError
from apps.identity.domain.entities import RefreshToken

if TYPE_CHECKING:
    from apps.identity.application.token.ports import (
        RefreshTokenGateway,
        SessionTokenIssuer,
    )
    from apps.identity.application.users.ports import UserQueryGateway
    from apps.identity.domain.entities import User

logger = logging.getLogger(__name__)

REFRESH_TOKEN_BYTES = 64


def hash_refresh_token(value: str) -> str:
    """Digest used as the storage key for a refresh token."""
    return hashlib.sha256(value.encode()).hexdigest()


class RefreshTokenService:
    """Refresh token service.

    Responsibilities:
        - issue and persist refresh tokens
        - describe the refresh cookie
        - exchange a refresh token for a new session token (rotating it)
        - revoke all tokens of a user

    Collaborators:
        - RefreshTokenGateway: persistence
        - UserQueryGateway: owner lookup on refresh
        - SessionTokenIssuer: session token minting
    """

    def __init__(
        self,
        *,
        gateway: "RefreshTokenGateway",
        user_query_gateway: "UserQueryGateway",
        token_issuer: "SessionTokenIssuer",
        ttl_seconds: int = 1296000,
        cookie_name: str = "refresh_token",
        cookie_path: str = "/api/token/refresh",
        cookie_secure: bool = True,
        cookie_samesite: str = "lax",
        cookie_domain: str | None = None,
    ) -> None:
        self._gateway = gateway
        self._user_query_gateway = user_query_gateway
        self._token_issuer = token_issuer
        self._ttl = timedelta(seconds=ttl_seconds)
        self._cookie_name = cookie_name
        self._cookie_path = cookie_path
        self._cookie_secure = cookie_secure
        self._cookie_samesite = cookie_samesite
        self._cookie_domain = cookie_domain

    @property
    def cookie_name(self) -> str:
        return self._cookie_name

    def create_refresh_token(self, user: "User") -> IssuedRefreshToken:
        """Generate and stage a refresh token for `user`.

        The row is added to the current unit of work; the caller commits.

        Raises:
            RandomGenerationError: secure randomness unavailable
        """
        value = generate_urlsafe_token(REFRESH_TOKEN_BYTES)
        expires_at = datetime.now(timezone.utc) + self._ttl

        self._gateway.add(
            RefreshToken(
                user_id=user.id,
                token_hash=hash_refresh_token(value),
                expires_at=expires_at,
            )
        )
        return IssuedRefreshToken(value=value, user_id=user.id, expires_at=expires_at)

    def create_refresh_token_cookie(self, token: IssuedRefreshToken) -> RefreshCookie:
        """Describe the cookie carrying `token`; expiry matches the token's."""
        max_age = int((token.expires_at - datetime.now(timezone.utc)).total_seconds())
        return RefreshCookie(
            name=self._cookie_name,
            value=token.value,
            path=self._cookie_path,
            expires=token.expires_at,
            max_age=max(max_age, 0),
            httponly=True,
            secure=self._cookie_secure,
            samesite=self._cookie_samesite,
            domain=self._cookie_domain,
        )

    async def refresh(self, cookie_value: str | None) -> RefreshResult:
        """Exchange a refresh token for a new session token.

        The presented token is deleted and replaced.

        Raises:
            InvalidRefreshTokenError: missing, unknown, expired or reused token,
                or the owner no longer exists or is disabled
        """
        if not cookie_value:
            raise InvalidRefreshTokenError("Refresh token is required")

        token_hash = hash_refresh_token(cookie_value)
        stored = await self._gateway.get_by_hash(token_hash)
        if stored is None:
            raise InvalidRefreshTokenError("Refresh token not found")

        if stored.is_expired():
            logger.info("Expired refresh token presented", extra={"user_id": stored.user_id})
            raise InvalidRefreshTokenError("Refresh token expired")

        user = await self._user_query_gateway.get_by_id(stored.user_id)
        if user is None or not user.is_active:
            raise InvalidRefreshTokenError("Refresh token owner is unavailable")

        # Rotation: a concurrent refresh with the same token deletes nothing.
        if not await self._gateway.delete_by_hash(token_hash):
            logger.warning("Refresh token reuse detected", extra={"user_id": user.id})
            raise InvalidRefreshTokenError("Refresh token already used")

        session_token = self._token_issuer.issue(user_id=user.id, roles=user.roles, email=user.email)
        new_refresh_token = self.create_refresh_token(user)

        return RefreshResult(
            user_id=user.id,
            token=session_token,
            refresh_token=new_refresh_token,
        )

    async def revoke_all(self, user_id: int) -> int:
        """Delete every refresh token of the user."""
        return await self._gateway.delete_all_for_user(user_id)
