"""SessionService - issues the credentials returned by every login."""

from __future__ import annotations

from typing import TYPE_CHECKING

from apps.identity.application.token.dto import SessionGrant

if TYPE_CHECKING:
    from apps.identity.application.token.ports import SessionTokenIssuer
    from apps.identity.application.token.services.refresh_token_service import (
        RefreshTokenService,
    )
    from apps.identity.domain.entities import User


class SessionService:
    """Mints a session token and a refresh token for a user."""

    def __init__(
        self,
        token_issuer: "SessionTokenIssuer",
        refresh_token_service: "RefreshTokenService",
    ) -> None:
        self._token_issuer = token_issuer
        self._refresh_token_service = refresh_token_service

    def start_session(self, user: "User") -> SessionGrant:
        """Issue credentials for `user`.

        The refresh token row is staged in the current unit of work.
        """
        token = self._token_issuer.issue(user_id=user.id, roles=user.roles, email=user.email)
        refresh_token = self._refresh_token_service.create_refresh_token(user)
        return SessionGrant(token=token, refresh_token=refresh_token)
