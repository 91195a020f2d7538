from apps.identity.application.oauth.dto.oauth import (
    AuthorizationUrl,
    OAuthAuthorizeRequest,
    OAuthCallbackRequest,
    OAuthLoginResult,
    TelegramCallbackRequest,
)

__all__ = [
    "AuthorizationUrl",
    "OAuthAuthorizeRequest",
    "OAuthCallbackRequest",
    "OAuthLoginResult",
    "TelegramCallbackRequest",
]
