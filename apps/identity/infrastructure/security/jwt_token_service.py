"""JWT Token Service.

Implements the SessionTokenIssuer port.
"""

from __future__ import annotations

import time
import uuid
from datetime import timedelta
from typing import Any

from jose import JWTError, jwt

from apps.identity.application.token.dto import SessionToken, SessionTokenPayload
from apps.identity.application.token.exceptions import InvalidTokenError, TokenExpiredError

ACCESS_TOKEN_TYPE = "access"


class JwtTokenService:
    """JWT session token service.

    SessionTokenIssuer implementation.
    """

    def __init__(
        self,
        *,
        secret_key: str,
        algorithm: str = "HS256",
        issuer: str = "identity-api",
        audience: str = "api",
        access_token_expire_minutes: int = 60,
    ) -> None:
        self._secret_key = secret_key
        self._algorithm = algorithm
        self._issuer = issuer
        self._audience = audience
        self._access_token_expire = timedelta(minutes=access_token_expire_minutes)

    def _now_timestamp(self) -> int:
        return int(time.time())

    def issue(self, *, user_id: int, roles: list[str], email: str | None = None) -> SessionToken:
        """Mint a signed session token for the user."""
        jti = str(uuid.uuid4())
        now = self._now_timestamp()
        expires_at = now + int(self._access_token_expire.total_seconds())

        payload: dict[str, Any] = {
            "sub": str(user_id),
            "jti": jti,
            "type": ACCESS_TOKEN_TYPE,
            "roles": list(roles),
            "exp": expires_at,
            "iat": now,
            "nbf": now,
            "iss": self._issuer,
            "aud": self._audience,
        }
        if email:
            payload["email"] = email

        token = jwt.encode(payload, self._secret_key, algorithm=self._algorithm)
        return SessionToken(token=token, jti=jti, expires_at=expires_at)

    def decode(self, token: str) -> SessionTokenPayload:
        """Verify and decode a session token.

        Raises:
            TokenExpiredError: exp has passed
            InvalidTokenError: bad signature, audience, issuer, type or claims
        """
        try:
            payload = jwt.decode(
                token,
                self._secret_key,
                algorithms=[self._algorithm],
                audience=self._audience,
                issuer=self._issuer,
            )
        except JWTError as e:
            if "expired" in str(e).lower():
                raise TokenExpiredError() from e
            raise InvalidTokenError(str(e)) from e

        if payload.get("type") != ACCESS_TOKEN_TYPE:
            raise InvalidTokenError("Unexpected token type")

        try:
            return SessionTokenPayload(
                user_id=int(payload["sub"]),
                jti=payload["jti"],
                exp=payload["exp"],
                iat=payload["iat"],
                roles=list(payload.get("roles") or []),
                email=payload.get("email"),
            )
        except (KeyError, TypeError, ValueError) as e:
            raise InvalidTokenError("Malformed token claims") from e
