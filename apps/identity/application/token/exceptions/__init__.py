from apps.identity.application.token.exceptions.token import (
    InvalidRefreshTokenError,
    InvalidTokenError,
    TokenExpiredError,
    TokenRevokedError,
)

__all__ = [
    "InvalidRefreshTokenError",
    "InvalidTokenError",
    "TokenExpiredError",
    "TokenRevokedError",
]
