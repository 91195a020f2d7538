"""OAuthCallback Command.

Use case: handle the authorization code returned by a code-flow provider.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from apps.identity.application.oauth.dto import OAuthCallbackRequest, OAuthLoginResult

if TYPE_CHECKING:
    from apps.identity.application.oauth.services import OAuthFlowService, OAuthLoginService


class OAuthCallbackInteractor:
    """OAuth callback interactor.

    Workflow:
        1. Verify state, exchange code, fetch profile (OAuthFlowService)
        2. Provision user and issue credentials in one transaction (OAuthLoginService)

    Any failure terminates the attempt; no user state is committed unless
    every step succeeds.

    Dependencies:
        Services:
            - oauth_service: state check and provider calls
            - login_service: provisioning and token issuance
    """

    def __init__(
        self,
        oauth_service: "OAuthFlowService",
        login_service: "OAuthLoginService",
    ) -> None:
        self._oauth_service = oauth_service
        self._login_service = login_service

    async def execute(self, request: OAuthCallbackRequest) -> OAuthLoginResult:
        """Handle the callback.

        Raises:
            InvalidStateError: state verification failed
            ExchangeError: code exchange failed
            ProfileFetchError: profile fetch failed
            UnverifiedEmailError: provider email not verified
            AccountLinkConflictError: email linked to another provider account
            UserProvisioningError: user could not be created
        """
        profile = await self._oauth_service.validate_and_fetch_profile(
            provider=request.provider,
            code=request.code,
            state=request.state,
        )
        return await self._login_service.complete_login(profile, request.role)
