"""Google OAuth Provider."""

from __future__ import annotations

from typing import TYPE_CHECKING
from urllib.parse import urlencode

from apps.identity.application.oauth.exceptions import UnverifiedEmailError
from apps.identity.application.oauth.ports import OAuthProfile, OAuthTokens
from apps.identity.infrastructure.oauth.providers.base import (
    CodeExchangeProvider,
    ProviderResponseError,
    tokens_from_response,
)

if TYPE_CHECKING:
    import httpx

GOOGLE_AUTH_URL = "https://accounts.google.com/o/oauth2/v2/auth"
GOOGLE_TOKEN_URL = "https://oauth2.googleapis.com/token"
GOOGLE_PROFILE_URL = "https://www.googleapis.com/oauth2/v3/userinfo"


def _is_true(value) -> bool:
    return value is True or (isinstance(value, str) and value.lower() == "true")


class GoogleOAuthProvider(CodeExchangeProvider):
    """Google OAuth provider."""

    name = "google"
    supports_pkce = True

    @property
    def default_scopes(self) -> tuple[str, ...]:
        return ("openid", "email", "profile")

    def build_authorization_url(
        self,
        *,
        state: str | None,
        code_challenge: str | None,
    ) -> str:
        params = {
            "client_id": self.client_id,
            "redirect_uri": self.redirect_uri,
            "response_type": "code",
            "state": state,
            "scope": " ".join(self.default_scopes),
            "access_type": "offline",
            "include_granted_scopes": "true",
            "prompt": "consent",
        }
        if code_challenge:
            params["code_challenge"] = code_challenge
            params["code_challenge_method"] = "S256"
        return f"{GOOGLE_AUTH_URL}?{urlencode(params)}"

    async def exchange_code(
        self,
        *,
        client: "httpx.AsyncClient",
        code: str,
        code_verifier: str | None,
    ) -> OAuthTokens:
        data = {
            "grant_type": "authorization_code",
            "client_id": self.client_id,
            "client_secret": self.client_secret,
            "redirect_uri": self.redirect_uri,
            "code": code,
        }
        if code_verifier:
            data["code_verifier"] = code_verifier
        response = await client.post(GOOGLE_TOKEN_URL, data=data)
        response.raise_for_status()
        return tokens_from_response(response.json())

    async def fetch_profile(
        self,
        *,
        client: "httpx.AsyncClient",
        tokens: OAuthTokens,
    ) -> OAuthProfile:
        headers = {"Authorization": f"Bearer {tokens.access_token}"}
        response = await client.get(GOOGLE_PROFILE_URL, headers=headers)
        response.raise_for_status()
        data = response.json()

        if not data.get("sub"):
            raise ProviderResponseError("Google profile has no subject")

        email = data.get("email")
        if email and not _is_true(data.get("email_verified")):
            raise UnverifiedEmailError(self.name)

        return OAuthProfile(
            provider=self.name,
            provider_user_id=str(data["sub"]),
            email=email,
            name=data.get("given_name"),
            surname=data.get("family_name"),
            image_url=data.get("picture"),
        )
