"""OAuth Provider Base Classes."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import httpx

    from apps.identity.application.oauth.ports import OAuthProfile, OAuthTokens


class ProviderResponseError(RuntimeError):
    """Provider answered with an unusable payload."""

    pass


class OAuthProvider(ABC):
    """Abstract provider: anything that can build a login URL."""

    name: str
    supports_pkce: bool = False
    requires_state: bool = True

    def __init__(
        self,
        *,
        client_id: str,
        client_secret: str | None,
        redirect_uri: str | None,
    ) -> None:
        self.client_id = client_id
        self.client_secret = client_secret
        self.redirect_uri = redirect_uri

    @property
    def default_scopes(self) -> tuple[str, ...]:
        return ()

    @abstractmethod
    def build_authorization_url(
        self,
        *,
        state: str | None,
        code_challenge: str | None,
    ) -> str:
        """Build the provider authorization URL."""
        raise NotImplementedError


class CodeExchangeProvider(OAuthProvider):
    """Authorization-code provider."""

    @abstractmethod
    async def exchange_code(
        self,
        *,
        client: "httpx.AsyncClient",
        code: str,
        code_verifier: str | None,
    ) -> "OAuthTokens":
        """Exchange the authorization code for tokens."""
        raise NotImplementedError

    @abstractmethod
    async def fetch_profile(
        self,
        *,
        client: "httpx.AsyncClient",
        tokens: "OAuthTokens",
    ) -> "OAuthProfile":
        """Fetch the user profile."""
        raise NotImplementedError


def tokens_from_response(data: dict) -> "OAuthTokens":
    """Build OAuthTokens from a standard token endpoint response."""
    from apps.identity.application.oauth.ports import OAuthTokens

    access_token = data.get("access_token")
    if not access_token:
        raise ProviderResponseError("Token response has no access_token")
    return OAuthTokens(
        access_token=access_token,
        refresh_token=data.get("refresh_token"),
        token_type=data.get("token_type", "Bearer"),
        expires_in=data.get("expires_in"),
        id_token=data.get("id_token"),
        raw=data,
    )
