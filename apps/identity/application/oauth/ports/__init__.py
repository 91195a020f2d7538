"""OAuth ports."""

from apps.identity.application.oauth.ports.provider_gateway import (
    OAuthProfile,
    OAuthProviderGateway,
    OAuthTokens,
    SignedLoginVerifier,
    TokenExchanger,
    UserDataFetcher,
)
from apps.identity.application.oauth.ports.state_store import (
    OAuthState,
    OAuthStateStore,
)

__all__ = [
    "OAuthProfile",
    "OAuthProviderGateway",
    "OAuthTokens",
    "SignedLoginVerifier",
    "TokenExchanger",
    "UserDataFetcher",
    "OAuthState",
    "OAuthStateStore",
]
