from apps.identity.presentation.http.schemas.auth import (
    AuthorizationUrlResponse,
    CallbackRequest,
    LoginRequest,
    LoginResponse,
    LogoutResponse,
    TelegramCallbackRequest,
    TokenResponse,
    UserResponse,
)

__all__ = [
    "AuthorizationUrlResponse",
    "CallbackRequest",
    "LoginRequest",
    "LoginResponse",
    "LogoutResponse",
    "TelegramCallbackRequest",
    "TokenResponse",
    "UserResponse",
]
