"""OAuth infrastructure."""

from apps.identity.infrastructure.oauth.client import OAuthClientImpl
from apps.identity.infrastructure.oauth.registry import ProviderRegistry, build_provider_registry

__all__ = ["OAuthClientImpl", "ProviderRegistry", "build_provider_registry"]
