"""Instagram OAuth Provider (Instagram API with Instagram Login)."""

from __future__ import annotations

from typing import TYPE_CHECKING
from urllib.parse import urlencode

from apps.identity.application.oauth.ports import OAuthProfile, OAuthTokens
from apps.identity.infrastructure.oauth.providers.base import (
    CodeExchangeProvider,
    ProviderResponseError,
    tokens_from_response,
)

if TYPE_CHECKING:
    import httpx

INSTAGRAM_AUTH_URL = "https://www.instagram.com/oauth/authorize"
INSTAGRAM_TOKEN_URL = "https://api.instagram.com/oauth/access_token"
INSTAGRAM_PROFILE_URL = "https://graph.instagram.com/me"
INSTAGRAM_PROFILE_FIELDS = ("id", "username", "name", "profile_picture_url")


def split_full_name(full_name: str | None) -> tuple[str | None, str | None]:
    """Split "First Last Name" on the first space."""
    if not full_name or not full_name.strip():
        return None, None
    first, _, rest = full_name.strip().partition(" ")
    return first, (rest.strip() or None)


class InstagramOAuthProvider(CodeExchangeProvider):
    """Instagram OAuth provider."""

    name = "instagram"

    @property
    def default_scopes(self) -> tuple[str, ...]:
        return ("instagram_business_basic",)

    def build_authorization_url(
        self,
        *,
        state: str | None,
        code_challenge: str | None,
    ) -> str:
        params = {
            "force_reauth": "true",
            "client_id": self.client_id,
            "redirect_uri": self.redirect_uri,
            "response_type": "code",
            "scope": ",".join(self.default_scopes),
            "state": state,
        }
        return f"{INSTAGRAM_AUTH_URL}?{urlencode(params)}"

    async def exchange_code(
        self,
        *,
        client: "httpx.AsyncClient",
        code: str,
        code_verifier: str | None,
    ) -> OAuthTokens:
        data = {
            "client_id": self.client_id,
            "client_secret": self.client_secret,
            "grant_type": "authorization_code",
            "redirect_uri": self.redirect_uri,
            "code": code,
        }
        response = await client.post(INSTAGRAM_TOKEN_URL, data=data)
        response.raise_for_status()
        payload = response.json()
        # Some API versions wrap the token in a one-element "data" list.
        if isinstance(payload.get("data"), list) and payload["data"]:
            payload = payload["data"][0]
        return tokens_from_response(payload)

    async def fetch_profile(
        self,
        *,
        client: "httpx.AsyncClient",
        tokens: OAuthTokens,
    ) -> OAuthProfile:
        params = {
            "fields": ",".join(INSTAGRAM_PROFILE_FIELDS),
            "access_token": tokens.access_token,
        }
        response = await client.get(INSTAGRAM_PROFILE_URL, params=params)
        response.raise_for_status()
        data = response.json()

        if not data.get("id"):
            raise ProviderResponseError("Instagram profile has no id")

        name, surname = split_full_name(data.get("name"))
        return OAuthProfile(
            provider=self.name,
            provider_user_id=str(data["id"]),
            email=None,
            name=name,
            surname=surname,
            username=data.get("username"),
            image_url=data.get("profile_picture_url"),
        )
