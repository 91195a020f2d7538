"""PasswordLogin Command.

Use case: email + password login.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from apps.identity.application.login.dto import PasswordLoginRequest, PasswordLoginResult
from apps.identity.domain.services.user_service import normalize_email
from apps.identity.application.login.exceptions import (
    AccountDisabledError,
    InvalidCredentialsError,
)

if TYPE_CHECKING:
    from apps.identity.application.common.ports import Flusher, TransactionManager
    from apps.identity.application.login.ports import PasswordHasher
    from apps.identity.application.token.services import SessionService
    from apps.identity.application.users.ports import UserQueryGateway

logger = logging.getLogger(__name__)


class PasswordLoginInteractor:
    """Password login interactor.

    Workflow:
        1. Look up the user by email
        2. Verify the password hash
        3. Issue session and refresh tokens, commit

    OAuth-only accounts have no password and cannot log in here.
    """

    def __init__(
        self,
        user_query_gateway: "UserQueryGateway",
        password_hasher: "PasswordHasher",
        session_service: "SessionService",
        flusher: "Flusher",
        transaction_manager: "TransactionManager",
    ) -> None:
        self._user_query_gateway = user_query_gateway
        self._password_hasher = password_hasher
        self._session_service = session_service
        self._flusher = flusher
        self._transaction_manager = transaction_manager

    async def execute(self, request: PasswordLoginRequest) -> PasswordLoginResult:
        """Authenticate by email and password.

        Raises:
            InvalidCredentialsError: unknown email, no password set, or wrong password
            AccountDisabledError: user is disabled
        """
        user = await self._user_query_gateway.get_by_email(normalize_email(request.email))
        if user is None or not user.password_hash:
            raise InvalidCredentialsError()

        if not self._password_hasher.verify(request.password, user.password_hash):
            logger.info("Password login rejected", extra={"user_id": user.id})
            raise InvalidCredentialsError()

        if not user.is_active:
            raise AccountDisabledError()

        try:
            user.update_login_time()
            grant = self._session_service.start_session(user)
            await self._flusher.flush()
            await self._transaction_manager.commit()
        except Exception:
            await self._transaction_manager.rollback()
            raise

        logger.info("Password login successful", extra={"user_id": user.id})
        return PasswordLoginResult(user=user, token=grant.token, refresh_token=grant.refresh_token)
