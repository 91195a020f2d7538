from apps.identity.application.token.dto.token import (
    IssuedRefreshToken,
    LogoutRequest,
    RefreshCookie,
    RefreshRequest,
    RefreshResult,
    SessionGrant,
    SessionToken,
    SessionTokenPayload,
)

__all__ = [
    "IssuedRefreshToken",
    "LogoutRequest",
    "RefreshCookie",
    "RefreshRequest",
    "RefreshResult",
    "SessionGrant",
    "SessionToken",
    "SessionTokenPayload",
]
