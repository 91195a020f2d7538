"""OAuth DTOs."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any
from urllib.parse import unquote

if TYPE_CHECKING:
    from apps.identity.application.token.dto import IssuedRefreshToken, SessionToken
    from apps.identity.domain.entities import User


@dataclass(frozen=True, slots=True)
class OAuthAuthorizeRequest:
    provider: str


@dataclass(frozen=True, slots=True)
class AuthorizationUrl:
    """Provider authorization URL; `state` is None for stateless flows (Telegram)."""

    url: str
    state: str | None = None


@dataclass(frozen=True, slots=True)
class OAuthCallbackRequest:
    """Code-flow callback input."""

    provider: str
    code: str
    state: str
    role: str | None = None

    @classmethod
    def from_raw(
        cls,
        *,
        provider: str,
        code: str,
        state: str,
        role: str | None = None,
    ) -> "OAuthCallbackRequest":
        """Normalize values copied from the provider redirect.

        The code may arrive URL-encoded and the state may carry a
        trailing URL fragment.
        """
        return cls(
            provider=provider,
            code=unquote(code.strip()),
            state=state.strip().split("#", 1)[0],
            role=role or None,
        )


@dataclass(frozen=True, slots=True)
class TelegramCallbackRequest:
    """Telegram Login Widget payload (id, names, photo_url, auth_date, hash)."""

    payload: dict[str, Any]
    role: str | None = None


@dataclass(frozen=True, slots=True)
class OAuthLoginResult:
    user: "User"
    token: "SessionToken"
    refresh_token: "IssuedRefreshToken"
    is_new_user: bool
