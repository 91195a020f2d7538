"""Token Exceptions."""

from apps.identity.application.common.exceptions.base import ApplicationError


class InvalidRefreshTokenError(ApplicationError):
    """Refresh token is missing, unknown, expired or already used."""

    def __init__(self, reason: str = "Invalid refresh token") -> None:
        super().__init__(reason)


class InvalidTokenError(ApplicationError):
    """Session token failed verification."""

    def __init__(self, reason: str = "Invalid token") -> None:
        super().__init__(reason)


class TokenExpiredError(ApplicationError):
    def __init__(self, reason: str = "Token has expired") -> None:
        super().__init__(reason)


class TokenRevokedError(ApplicationError):
    def __init__(self, reason: str = "Token has been revoked") -> None:
        super().__init__(reason)
