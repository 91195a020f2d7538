"""SessionTokenIssuer Port."""

from typing import Protocol

from apps.identity.application.token.dto import SessionToken, SessionTokenPayload


class SessionTokenIssuer(Protocol):
    """Mints and verifies session tokens.

    Implementations:
        - JwtTokenService (infrastructure/security/)
    """

    def issue(self, *, user_id: int, roles: list[str], email: str | None = None) -> SessionToken:
        ...

    def decode(self, token: str) -> SessionTokenPayload:
        """Verify signature, expiry and token type.

        Raises:
            TokenExpiredError: token expired
            InvalidTokenError: any other verification failure
        """
        ...
