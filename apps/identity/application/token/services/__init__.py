from apps.identity.application.token.services.refresh_token_service import (
    RefreshTokenService,
    hash_refresh_token,
)
from apps.identity.application.token.services.session_service import SessionService

__all__ = ["RefreshTokenService", "SessionService", "hash_refresh_token"]
