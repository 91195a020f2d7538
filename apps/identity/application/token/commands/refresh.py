"""RefreshSession Command.

Exchanges the refresh-token cookie for a new session token.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from apps.identity.application.token.dto import RefreshRequest, RefreshResult

if TYPE_CHECKING:
    from apps.identity.application.common.ports import Flusher, TransactionManager
    from apps.identity.application.token.services import RefreshTokenService

logger = logging.getLogger(__name__)


class RefreshSessionInteractor:
    """Session refresh interactor.

    Workflow:
        1. Validate and rotate the refresh token (RefreshTokenService)
        2. Flush and commit (deletion of the old token + insert of the new one)

    Dependencies:
        Services:
            - refresh_token_service: validation, rotation, session token minting

        Ports:
            - flusher: DB flush
            - transaction_manager: transaction control
    """

    def __init__(
        self,
        refresh_token_service: "RefreshTokenService",
        flusher: "Flusher",
        transaction_manager: "TransactionManager",
    ) -> None:
        self._refresh_token_service = refresh_token_service
        self._flusher = flusher
        self._transaction_manager = transaction_manager

    async def execute(self, request: RefreshRequest) -> RefreshResult:
        """Refresh the session.

        Raises:
            InvalidRefreshTokenError: the refresh token cannot be used
        """
        try:
            result = await self._refresh_token_service.refresh(request.refresh_token)
            await self._flusher.flush()
            await self._transaction_manager.commit()
        except Exception:
            await self._transaction_manager.rollback()
            raise

        logger.info("Session refreshed", extra={"user_id": result.user_id})
        return result
