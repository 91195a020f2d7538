"""OAuthFlowService - provider-independent OAuth code flow.

Generates redirect URLs with a single-use state, and on callback verifies
the state before any call to the provider.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from apps.identity.application.common.services import generate_urlsafe_token
from apps.identity.application.oauth.dto import AuthorizationUrl
from apps.identity.application.oauth.exceptions import InvalidStateError
from apps.identity.application.oauth.ports import OAuthState

if TYPE_CHECKING:
    from apps.identity.application.oauth.ports import (
        OAuthProfile,
        OAuthProviderGateway,
        OAuthStateStore,
    )

logger = logging.getLogger(__name__)

STATE_BYTES = 32
CODE_VERIFIER_BYTES = 64


class OAuthFlowService:
    """OAuth flow service.

    Responsibilities:
        - state generation and storage (CSRF protection)
        - state verification and consumption (replay protection)
        - code exchange and profile fetch through the provider gateway

    Collaborators:
        - OAuthStateStore: short-TTL state storage
        - OAuthProviderGateway: provider communication
    """

    def __init__(
        self,
        state_store: "OAuthStateStore",
        provider_gateway: "OAuthProviderGateway",
        state_ttl_seconds: int = 600,
    ) -> None:
        self._state_store = state_store
        self._provider_gateway = provider_gateway
        self._state_ttl_seconds = state_ttl_seconds

    async def generate_oauth_redirect_uri(self, provider: str) -> AuthorizationUrl:
        """Build the provider authorization URL.

        Raises:
            UnsupportedProviderError: provider unknown or disabled
            RandomGenerationError: secure randomness unavailable
        """
        if not self._provider_gateway.requires_state(provider):
            return AuthorizationUrl(
                url=self._provider_gateway.get_authorization_url(provider, state=None),
            )

        state = generate_urlsafe_token(STATE_BYTES)
        code_verifier = None
        if self._provider_gateway.supports_pkce(provider):
            code_verifier = generate_urlsafe_token(CODE_VERIFIER_BYTES)

        await self._state_store.save(
            state,
            OAuthState(provider=provider, code_verifier=code_verifier),
            self._state_ttl_seconds,
        )

        url = self._provider_gateway.get_authorization_url(
            provider,
            state=state,
            code_verifier=code_verifier,
        )
        return AuthorizationUrl(url=url, state=state)

    async def validate_and_fetch_profile(
        self,
        *,
        provider: str,
        code: str,
        state: str,
    ) -> "OAuthProfile":
        """Verify the state, then exchange the code and fetch the profile.

        Raises:
            InvalidStateError: state missing, expired, reused or issued for another provider
            ExchangeError: code exchange failed
            ProfileFetchError: profile fetch failed
        """
        # 1. Verify and consume state (single use)
        state_data = await self._state_store.consume(state) if state else None
        if state_data is None:
            logger.warning("Invalid or expired OAuth state", extra={"provider": provider})
            raise InvalidStateError("Invalid or expired state")

        if state_data.provider != provider:
            logger.warning(
                "State provider mismatch",
                extra={"expected": state_data.provider, "actual": provider},
            )
            raise InvalidStateError("State provider mismatch")

        # 2. Exchange code
        tokens = await self._provider_gateway.exchange_code_for_tokens(
            provider,
            code=code,
            code_verifier=state_data.code_verifier,
        )

        # 3. Fetch profile
        profile = await self._provider_gateway.fetch_user_data(provider, tokens)

        logger.info(
            "OAuth profile fetched successfully",
            extra={"provider": provider, "provider_user_id": profile.provider_user_id},
        )
        return profile
