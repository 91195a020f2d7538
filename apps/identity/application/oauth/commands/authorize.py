"""OAuthAuthorize Command.

Use case: build the provider redirect URL.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from apps.identity.application.oauth.dto import AuthorizationUrl, OAuthAuthorizeRequest

if TYPE_CHECKING:
    from apps.identity.application.oauth.services import OAuthFlowService


class OAuthAuthorizeInteractor:
    """OAuth authorization URL interactor.

    Workflow:
        1. Generate and store a single-use state (plus PKCE verifier where supported)
        2. Return the provider authorization URL

    Dependencies:
        Services:
            - oauth_service: state storage and URL building
    """

    def __init__(self, oauth_service: "OAuthFlowService") -> None:
        self._oauth_service = oauth_service

    async def execute(self, request: OAuthAuthorizeRequest) -> AuthorizationUrl:
        return await self._oauth_service.generate_oauth_redirect_uri(request.provider)
