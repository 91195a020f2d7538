"""OAuth Client Implementation.

Implements OAuthProviderGateway on top of the provider registry.
Each call opens its own httpx client with a bounded timeout; nothing is retried.
"""

from __future__ import annotations

import base64
import hashlib
import logging
from typing import TYPE_CHECKING

import httpx

from apps.identity.application.oauth.exceptions import ExchangeError, ProfileFetchError
from apps.identity.infrastructure.oauth.providers import ProviderResponseError

if TYPE_CHECKING:
    from apps.identity.application.oauth.ports import OAuthProfile, OAuthTokens
    from apps.identity.infrastructure.oauth.registry import ProviderRegistry

logger = logging.getLogger(__name__)


def compute_code_challenge(code_verifier: str) -> str:
    """PKCE code_challenge (S256)."""
    digest = hashlib.sha256(code_verifier.encode()).digest()
    return base64.urlsafe_b64encode(digest).rstrip(b"=").decode()


class OAuthClientImpl:
    """OAuth client.

    OAuthProviderGateway implementation.
    """

    def __init__(
        self,
        registry: "ProviderRegistry",
        timeout_seconds: float,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """
        Args:
            registry: provider registry
            timeout_seconds: HTTP timeout (from settings)
            transport: optional httpx transport
        """
        self._registry = registry
        self._timeout = timeout_seconds
        self._transport = transport

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(timeout=self._timeout, transport=self._transport)

    def requires_state(self, provider: str) -> bool:
        return self._registry.get(provider).requires_state

    def supports_pkce(self, provider: str) -> bool:
        return self._registry.get(provider).supports_pkce

    def get_authorization_url(
        self,
        provider: str,
        *,
        state: str | None,
        code_verifier: str | None = None,
    ) -> str:
        oauth_provider = self._registry.get(provider)

        code_challenge = None
        if code_verifier and oauth_provider.supports_pkce:
            code_challenge = compute_code_challenge(code_verifier)

        return oauth_provider.build_authorization_url(state=state, code_challenge=code_challenge)

    async def exchange_code_for_tokens(
        self,
        provider: str,
        *,
        code: str,
        code_verifier: str | None = None,
    ) -> "OAuthTokens":
        oauth_provider = self._registry.get_code_provider(provider)

        try:
            async with self._client() as client:
                return await oauth_provider.exchange_code(
                    client=client,
                    code=code,
                    code_verifier=code_verifier if oauth_provider.supports_pkce else None,
                )
        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            logger.warning(
                "OAuth token exchange rejected",
                extra={"provider": provider, "status": status},
            )
            if 400 <= status < 500:
                raise ExchangeError(
                    provider,
                    "The code may be expired or invalid",
                    client_error=True,
                ) from e
            raise ExchangeError(provider, f"API error: {status}") from e
        except httpx.HTTPError as e:
            logger.warning("OAuth token exchange failed", extra={"provider": provider, "error": str(e)})
            raise ExchangeError(provider, "Provider unreachable") from e
        except (ProviderResponseError, ValueError) as e:
            raise ExchangeError(provider, str(e)) from e

    async def fetch_user_data(self, provider: str, tokens: "OAuthTokens") -> "OAuthProfile":
        oauth_provider = self._registry.get_code_provider(provider)

        try:
            async with self._client() as client:
                return await oauth_provider.fetch_profile(client=client, tokens=tokens)
        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            logger.warning("OAuth profile request rejected", extra={"provider": provider, "status": status})
            raise ProfileFetchError(provider, f"API error: {status}") from e
        except httpx.HTTPError as e:
            logger.warning("OAuth profile request failed", extra={"provider": provider, "error": str(e)})
            raise ProfileFetchError(provider, "Provider unreachable") from e
        except (ProviderResponseError, ValueError) as e:
            raise ProfileFetchError(provider, str(e)) from e
