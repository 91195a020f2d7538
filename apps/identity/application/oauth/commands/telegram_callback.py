"""TelegramCallback Command.

Use case: log in with a Telegram Login Widget payload.
Telegram has no code/state pair; the payload is authenticated by its hash.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from apps.identity.application.oauth.dto import OAuthLoginResult, TelegramCallbackRequest

if TYPE_CHECKING:
    from apps.identity.application.oauth.ports import SignedLoginVerifier
    from apps.identity.application.oauth.services import OAuthLoginService


class TelegramCallbackInteractor:
    """Telegram login interactor.

    Workflow:
        1. Verify the payload hash and confirm the account (SignedLoginVerifier)
        2. Provision user and issue credentials (OAuthLoginService)
    """

    def __init__(
        self,
        verifier: "SignedLoginVerifier",
        login_service: "OAuthLoginService",
    ) -> None:
        self._verifier = verifier
        self._login_service = login_service

    async def execute(self, request: TelegramCallbackRequest) -> OAuthLoginResult:
        """Raises InvalidSignatureError before any provisioning on a bad hash."""
        profile = await self._verifier.verify_signed_login(request.payload)
        return await self._login_service.complete_login(profile, request.role)
