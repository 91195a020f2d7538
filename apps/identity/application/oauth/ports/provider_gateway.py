"""OAuth provider ports.

Interfaces for talking to external identity providers.
Code-flow providers (Google, Instagram) go through OAuthProviderGateway;
Telegram's signed widget payload goes through SignedLoginVerifier.
"""

from dataclasses import dataclass, field
from typing import Any, Protocol


@dataclass
class OAuthProfile:
    """Normalized provider profile.

    A None field means the provider did not supply it.
    """

    provider: str
    provider_user_id: str
    email: str | None = None
    name: str | None = None
    surname: str | None = None
    username: str | None = None
    image_url: str | None = None


@dataclass
class OAuthTokens:
    """Provider token response."""

    access_token: str
    refresh_token: str | None = None
    token_type: str = "Bearer"
    expires_in: int | None = None
    id_token: str | None = None
    raw: dict[str, Any] = field(default_factory=dict)


class TokenExchanger(Protocol):
    """Exchanges a one-time authorization code for provider tokens."""

    async def exchange_code_for_tokens(
        self,
        provider: str,
        *,
        code: str,
        code_verifier: str | None = None,
    ) -> OAuthTokens:
        """Exchange an authorization code.

        Raises:
            ExchangeError: code rejected or provider unreachable
        """
        ...


class UserDataFetcher(Protocol):
    """Retrieves the authenticated profile from the provider."""

    async def fetch_user_data(self, provider: str, tokens: OAuthTokens) -> OAuthProfile:
        """Fetch and normalize the provider profile.

        Raises:
            ProfileFetchError: network failure or rejected access token
        """
        ...


class OAuthProviderGateway(TokenExchanger, UserDataFetcher, Protocol):
    """Provider gateway.

    Implementations:
        - OAuthClientImpl (infrastructure/oauth/)
    """

    def requires_state(self, provider: str) -> bool:
        """Whether the provider flow round-trips an anti-forgery state."""
        ...

    def supports_pkce(self, provider: str) -> bool: ...

    def get_authorization_url(
        self,
        provider: str,
        *,
        state: str | None,
        code_verifier: str | None = None,
    ) -> str:
        """Build the provider authorization URL.

        Raises:
            UnsupportedProviderError: provider unknown or disabled
        """
        ...


class SignedLoginVerifier(Protocol):
    """Verifies a provider-signed login payload (Telegram Login Widget).

    Implementations:
        - TelegramLoginProvider (infrastructure/oauth/providers/telegram.py)
    """

    async def verify_signed_login(self, payload: dict[str, Any]) -> OAuthProfile:
        """Verify the payload signature and return the profile it asserts.

        Raises:
            InvalidSignatureError: hash mismatch or stale payload
            ProfileFetchError: account could not be confirmed
        """
        ...
