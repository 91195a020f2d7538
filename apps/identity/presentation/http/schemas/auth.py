"""Auth HTTP Schemas."""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel, Field

if TYPE_CHECKING:
    from apps.identity.domain.entities import User


class LoginRequest(BaseModel):
    """Password login request."""

    email: str = Field(..., min_length=3, max_length=320, description="Email")
    password: str = Field(..., min_length=1, description="Password")


class CallbackRequest(BaseModel):
    """OAuth code-flow callback request."""

    code: str = Field(..., min_length=1, description="Authorization code from the provider")
    state: str = Field(..., min_length=1, description="State returned by the provider")
    role: str | None = Field(None, description="Requested role for new users (client/master)")


class TelegramCallbackRequest(BaseModel):
    """Telegram Login Widget payload."""

    id: int = Field(..., description="Telegram user id")
    first_name: str | None = Field(None, description="First name")
    last_name: str | None = Field(None, description="Last name")
    username: str | None = Field(None, description="Telegram username")
    photo_url: str | None = Field(None, description="Profile photo URL")
    auth_date: int = Field(..., description="Unix time of the login")
    hash: str = Field(..., min_length=1, description="HMAC-SHA256 of the payload")
    role: str | None = Field(None, description="Requested role for new users (client/master)")

    def signed_payload(self) -> dict:
        """Widget fields covered by the hash."""
        return self.model_dump(exclude={"role"}, exclude_none=True)


class UserResponse(BaseModel):
    """User info."""

    id: int = Field(..., description="User id")
    email: str = Field(..., description="Email")
    name: str | None = Field(None, description="First name")
    surname: str | None = Field(None, description="Last name")
    username: str | None = Field(None, description="Username")
    image_url: str | None = Field(None, description="Profile image URL")
    roles: list[str] = Field(default_factory=list, description="Roles")

    @classmethod
    def from_entity(cls, user: "User") -> "UserResponse":
        return cls(
            id=user.id,
            email=user.email,
            name=user.name,
            surname=user.surname,
            username=user.username,
            image_url=user.image_url,
            roles=list(user.roles),
        )


class LoginResponse(BaseModel):
    """Login result; the refresh token travels in a cookie."""

    user: UserResponse = Field(..., description="Authenticated user")
    token: str = Field(..., description="Session token (JWT)")


class AuthorizationUrlResponse(BaseModel):
    """Provider authorization URL."""

    url: str = Field(..., description="Provider authorization URL")
    state: str | None = Field(None, description="Single-use state (absent for Telegram)")


class TokenResponse(BaseModel):
    token: str = Field(..., description="New session token (JWT)")


class LogoutResponse(BaseModel):
    message: str = Field("Logged out", description="Result message")
