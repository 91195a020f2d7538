"""OAuth Providers."""

from apps.identity.infrastructure.oauth.providers.base import (
    CodeExchangeProvider,
    OAuthProvider,
    ProviderResponseError,
)
from apps.identity.infrastructure.oauth.providers.google import GoogleOAuthProvider
from apps.identity.infrastructure.oauth.providers.instagram import InstagramOAuthProvider
from apps.identity.infrastructure.oauth.providers.telegram import TelegramLoginProvider

__all__ = [
    "CodeExchangeProvider",
    "OAuthProvider",
    "ProviderResponseError",
    "GoogleOAuthProvider",
    "InstagramOAuthProvider",
    "TelegramLoginProvider",
]
