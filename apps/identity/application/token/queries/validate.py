"""ValidateSessionToken Query.

Verifies a bearer session token and rejects revoked ones.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from apps.identity.application.token.dto import SessionTokenPayload
from apps.identity.application.token.exceptions import InvalidTokenError, TokenRevokedError

if TYPE_CHECKING:
    from apps.identity.application.token.ports import SessionTokenIssuer, TokenBlacklist

logger = logging.getLogger(__name__)


class ValidateSessionTokenQuery:
    """Session token validation.

    Workflow:
        1. Verify signature, expiry and type (SessionTokenIssuer)
        2. Check the revocation blacklist (TokenBlacklist)
    """

    def __init__(
        self,
        token_issuer: "SessionTokenIssuer",
        token_blacklist: "TokenBlacklist",
    ) -> None:
        self._token_issuer = token_issuer
        self._token_blacklist = token_blacklist

    async def execute(self, token: str | None) -> SessionTokenPayload:
        """Validate `token`.

        Raises:
            InvalidTokenError: missing or malformed token
            TokenExpiredError: token expired
            TokenRevokedError: token was logged out
        """
        if not token:
            raise InvalidTokenError("Missing bearer token")

        payload = self._token_issuer.decode(token)

        if await self._token_blacklist.contains(payload.jti):
            logger.info("Revoked session token presented", extra={"user_id": payload.user_id})
            raise TokenRevokedError()

        return payload
