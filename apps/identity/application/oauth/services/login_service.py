"""OAuthLoginService - shared tail of every provider login.

Provisions the user and issues credentials in a single transaction.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from apps.identity.application.login.exceptions import AccountDisabledError
from apps.identity.application.oauth.dto import OAuthLoginResult

if TYPE_CHECKING:
    from apps.identity.application.common.ports import Flusher, TransactionManager
    from apps.identity.application.oauth.ports import OAuthProfile
    from apps.identity.application.token.services import SessionService
    from apps.identity.application.users.services import UserManagementService

logger = logging.getLogger(__name__)


class OAuthLoginService:
    """Completes a login once the provider identity is established.

    Workflow:
        1. Find or create the user (UserManagementService); disabled users stop here
        2. Issue session and refresh tokens (SessionService)
        3. Flush and commit; roll back on any failure
    """

    def __init__(
        self,
        user_management: "UserManagementService",
        session_service: "SessionService",
        flusher: "Flusher",
        transaction_manager: "TransactionManager",
    ) -> None:
        self._user_management = user_management
        self._session_service = session_service
        self._flusher = flusher
        self._transaction_manager = transaction_manager

    async def complete_login(
        self,
        profile: "OAuthProfile",
        role: str | None = None,
    ) -> OAuthLoginResult:
        try:
            provisioning = await self._user_management.find_or_create_user(profile, role)
            if not provisioning.user.is_active:
                raise AccountDisabledError()
            await self._flusher.flush()
            grant = self._session_service.start_session(provisioning.user)
            await self._flusher.flush()
            await self._transaction_manager.commit()
        except Exception:
            await self._transaction_manager.rollback()
            raise

        logger.info(
            "OAuth login successful",
            extra={
                "user_id": provisioning.user.id,
                "provider": profile.provider,
                "is_new_user": provisioning.is_new_user,
            },
        )
        return OAuthLoginResult(
            user=provisioning.user,
            token=grant.token,
            refresh_token=grant.refresh_token,
            is_new_user=provisioning.is_new_user,
        )
