"""Provider Registry.

Providers are selected by configuration (IDENTITY_OAUTH_PROVIDERS).
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from apps.identity.application.oauth.exceptions import UnsupportedProviderError
from apps.identity.infrastructure.oauth.providers import (
    CodeExchangeProvider,
    GoogleOAuthProvider,
    InstagramOAuthProvider,
    OAuthProvider,
    TelegramLoginProvider,
)

if TYPE_CHECKING:
    from apps.identity.setup.config import Settings

logger = logging.getLogger(__name__)


class ProviderRegistry:
    """Name -> provider lookup."""

    def __init__(self, providers: list[OAuthProvider] | None = None) -> None:
        self._providers: dict[str, OAuthProvider] = {}
        for provider in providers or []:
            self.register(provider)

    def register(self, provider: OAuthProvider) -> None:
        self._providers[provider.name] = provider

    def names(self) -> list[str]:
        return sorted(self._providers)

    def get(self, name: str) -> OAuthProvider:
        provider = self._providers.get(name.lower())
        if provider is None:
            raise UnsupportedProviderError(name)
        return provider

    def get_code_provider(self, name: str) -> CodeExchangeProvider:
        provider = self.get(name)
        if not isinstance(provider, CodeExchangeProvider):
            raise UnsupportedProviderError(name)
        return provider

    def get_telegram(self) -> TelegramLoginProvider:
        provider = self.get(TelegramLoginProvider.name)
        if not isinstance(provider, TelegramLoginProvider):
            raise UnsupportedProviderError(TelegramLoginProvider.name)
        return provider


def _str_or_none(value) -> str | None:
    return str(value) if value else None


def _skip_unconfigured(name: str, *missing: str) -> None:
    logger.warning(
        "OAuth provider enabled without credentials, not registering it",
        extra={"provider": name, "missing": list(missing)},
    )


def build_provider_registry(settings: "Settings") -> ProviderRegistry:
    """Register every enabled provider that has its credentials configured.

    A provider listed in IDENTITY_OAUTH_PROVIDERS but missing credentials is
    left out, so its routes answer UnsupportedProviderError.
    """
    registry = ProviderRegistry()
    enabled = settings.enabled_providers

    if "google" in enabled:
        if settings.google_client_id and settings.google_client_secret:
            registry.register(
                GoogleOAuthProvider(
                    client_id=settings.google_client_id,
                    client_secret=settings.google_client_secret,
                    redirect_uri=_str_or_none(settings.google_redirect_uri),
                )
            )
        else:
            _skip_unconfigured(
                "google", "IDENTITY_GOOGLE_CLIENT_ID", "IDENTITY_GOOGLE_CLIENT_SECRET"
            )
    if "instagram" in enabled:
        if settings.instagram_client_id and settings.instagram_client_secret:
            registry.register(
                InstagramOAuthProvider(
                    client_id=settings.instagram_client_id,
                    client_secret=settings.instagram_client_secret,
                    redirect_uri=_str_or_none(settings.instagram_redirect_uri),
                )
            )
        else:
            _skip_unconfigured(
                "instagram", "IDENTITY_INSTAGRAM_CLIENT_ID", "IDENTITY_INSTAGRAM_CLIENT_SECRET"
            )
    if "telegram" in enabled:
        # Never verify widget hashes against an empty bot token.
        if settings.telegram_bot_token:
            registry.register(
                TelegramLoginProvider(
                    bot_token=settings.telegram_bot_token,
                    redirect_uri=_str_or_none(settings.telegram_redirect_uri),
                    origin=settings.frontend_url,
                    max_age_seconds=settings.telegram_auth_max_age_seconds,
                    confirm_account=settings.telegram_confirm_account,
                    timeout_seconds=settings.provider_timeout_seconds,
                )
            )
        else:
            _skip_unconfigured("telegram", "IDENTITY_TELEGRAM_BOT_TOKEN")

    unknown = set(enabled) - {"google", "instagram", "telegram"}
    if unknown:
        logger.warning("Ignoring unknown OAuth providers", extra={"providers": sorted(unknown)})
    return registry
