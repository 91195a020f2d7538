"""Telegram Login Provider.

Telegram Login Widget does not use an authorization code. The widget
returns the user's fields signed with HMAC-SHA256, keyed by SHA-256 of
the bot token. See https://core.telegram.org/widgets/login.
"""

from __future__ import annotations

import hashlib
import hmac
import logging
import time
from typing import Any
from urllib.parse import urlencode

import httpx

from apps.identity.application.oauth.exceptions import InvalidSignatureError, ProfileFetchError
from apps.identity.application.oauth.ports import OAuthProfile
from apps.identity.infrastructure.oauth.providers.base import OAuthProvider

logger = logging.getLogger(__name__)

TELEGRAM_AUTH_URL = "https://oauth.telegram.org/auth"
TELEGRAM_API_URL = "https://api.telegram.org"
MAX_CLOCK_SKEW_SECONDS = 60


def build_data_check_string(payload: dict[str, Any]) -> str:
    """Sorted key=value lines of every signed field (everything except hash)."""
    return "\n".join(
        f"{key}={payload[key]}"
        for key in sorted(payload)
        if key != "hash" and payload[key] is not None
    )


def compute_login_hash(payload: dict[str, Any], bot_token: str) -> str:
    secret_key = hashlib.sha256(bot_token.encode()).digest()
    return hmac.new(
        secret_key,
        build_data_check_string(payload).encode(),
        hashlib.sha256,
    ).hexdigest()


class TelegramLoginProvider(OAuthProvider):
    """Telegram login provider.

    `client_id` is the numeric bot id, `client_secret` the bot token.
    """

    name = "telegram"
    requires_state = False

    def __init__(
        self,
        *,
        bot_token: str,
        redirect_uri: str | None,
        origin: str,
        max_age_seconds: int = 86400,
        confirm_account: bool = True,
        timeout_seconds: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        super().__init__(
            client_id=bot_token.split(":", 1)[0],
            client_secret=bot_token,
            redirect_uri=redirect_uri,
        )
        self._origin = origin
        self._max_age_seconds = max_age_seconds
        self._confirm_account = confirm_account
        self._timeout = timeout_seconds
        self._transport = transport

    def build_authorization_url(
        self,
        *,
        state: str | None,
        code_challenge: str | None,
    ) -> str:
        params = {
            "bot_id": self.client_id,
            "origin": self._origin,
            "request_access": "write",
        }
        if self.redirect_uri:
            params["return_to"] = self.redirect_uri
        return f"{TELEGRAM_AUTH_URL}?{urlencode(params)}"

    async def verify_signed_login(self, payload: dict[str, Any]) -> OAuthProfile:
        """Verify the widget payload and return its profile.

        Raises:
            InvalidSignatureError: missing or wrong hash, stale or future auth_date,
                or no bot token configured
            ProfileFetchError: the Telegram account could not be confirmed
        """
        if not self.client_secret:
            raise InvalidSignatureError("Telegram login is not configured")

        received_hash = payload.get("hash")
        if not received_hash:
            raise InvalidSignatureError("Telegram payload is not signed")

        expected_hash = compute_login_hash(payload, self.client_secret)
        if not hmac.compare_digest(expected_hash, str(received_hash).lower()):
            logger.warning("Telegram signature mismatch", extra={"telegram_id": payload.get("id")})
            raise InvalidSignatureError("Telegram signature mismatch")

        try:
            auth_date = int(payload.get("auth_date") or 0)
        except (TypeError, ValueError) as e:
            raise InvalidSignatureError("Telegram auth_date is invalid") from e
        age = time.time() - auth_date
        if age > self._max_age_seconds:
            raise InvalidSignatureError("Telegram login payload has expired")
        if age < -MAX_CLOCK_SKEW_SECONDS:
            raise InvalidSignatureError("Telegram auth_date is in the future")

        telegram_id = str(payload["id"])
        if self._confirm_account:
            await self._confirm_chat_exists(telegram_id)

        return OAuthProfile(
            provider=self.name,
            provider_user_id=telegram_id,
            email=None,
            name=payload.get("first_name"),
            surname=payload.get("last_name"),
            username=payload.get("username"),
            image_url=payload.get("photo_url"),
        )

    async def _confirm_chat_exists(self, telegram_id: str) -> None:
        url = f"{TELEGRAM_API_URL}/bot{self.client_secret}/getChat"
        try:
            async with httpx.AsyncClient(timeout=self._timeout, transport=self._transport) as client:
                response = await client.get(url, params={"chat_id": telegram_id})
                data = response.json()
        except (httpx.HTTPError, ValueError) as e:
            raise ProfileFetchError(self.name, "Telegram API unavailable") from e

        if data.get("ok") is not True:
            raise ProfileFetchError(self.name, "Telegram user not found")
