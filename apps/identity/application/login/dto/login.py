"""Login DTOs."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from apps.identity.application.token.dto import IssuedRefreshToken, SessionToken
    from apps.identity.domain.entities import User


@dataclass(frozen=True, slots=True)
class PasswordLoginRequest:
    email: str
    password: str


@dataclass(frozen=True, slots=True)
class PasswordLoginResult:
    user: "User"
    token: "SessionToken"
    refresh_token: "IssuedRefreshToken"
