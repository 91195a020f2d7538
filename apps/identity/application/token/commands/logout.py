"""Logout Command."""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING

from apps.identity.application.token.dto import LogoutRequest

if TYPE_CHECKING:
    from apps.identity.application.common.ports import Flusher, TransactionManager
    from apps.identity.application.token.ports import TokenBlacklist
    from apps.identity.application.token.queries import ValidateSessionTokenQuery
    from apps.identity.application.token.services import RefreshTokenService

logger = logging.getLogger(__name__)


class LogoutInteractor:
    """Logout interactor.

    Workflow:
        1. Validate the session token
        2. Revoke all refresh tokens of the user
        3. Blacklist the session token for its remaining lifetime
        4. Commit
    """

    def __init__(
        self,
        validate_query: "ValidateSessionTokenQuery",
        refresh_token_service: "RefreshTokenService",
        token_blacklist: "TokenBlacklist",
        flusher: "Flusher",
        transaction_manager: "TransactionManager",
    ) -> None:
        self._validate_query = validate_query
        self._refresh_token_service = refresh_token_service
        self._token_blacklist = token_blacklist
        self._flusher = flusher
        self._transaction_manager = transaction_manager

    async def execute(self, request: LogoutRequest) -> None:
        """Log the bearer out of every device.

        Raises:
            InvalidTokenError / TokenExpiredError / TokenRevokedError
        """
        payload = await self._validate_query.execute(request.access_token)

        try:
            revoked = await self._refresh_token_service.revoke_all(payload.user_id)
            await self._flusher.flush()
            await self._transaction_manager.commit()
        except Exception:
            await self._transaction_manager.rollback()
            raise

        remaining = max(payload.exp - int(time.time()), 1)
        await self._token_blacklist.add(payload.jti, remaining)

        logger.info(
            "User logged out",
            extra={"user_id": payload.user_id, "revoked_refresh_tokens": revoked},
        )
