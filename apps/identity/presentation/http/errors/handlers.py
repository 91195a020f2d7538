"""Exception Handlers.

Translates application exceptions into HTTP responses.
Client-caused failures map to 4xx, provider and internal failures to 5xx.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from apps.identity.application.common.exceptions import ApplicationError, RandomGenerationError
from apps.identity.application.login.exceptions import (
    AccountDisabledError,
    InvalidCredentialsError,
)
from apps.identity.application.oauth.exceptions import (
    ExchangeError,
    InvalidSignatureError,
    InvalidStateError,
    ProfileFetchError,
    UnsupportedProviderError,
    UnverifiedEmailError,
)
from apps.identity.application.token.exceptions import (
    InvalidRefreshTokenError,
    InvalidTokenError,
    TokenExpiredError,
    TokenRevokedError,
)
from apps.identity.application.users.exceptions import (
    AccountLinkConflictError,
    UserProvisioningError,
)

logger = logging.getLogger(__name__)


def _error_response(status_code: int, exc: ApplicationError, code: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"detail": exc.message, "code": code},
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register exception handlers."""

    @app.exception_handler(InvalidStateError)
    async def invalid_state_handler(request: Request, exc: InvalidStateError):
        return _error_response(400, exc, "INVALID_STATE")

    @app.exception_handler(ExchangeError)
    async def exchange_error_handler(request: Request, exc: ExchangeError):
        if exc.client_error:
            return _error_response(400, exc, "INVALID_AUTHORIZATION_CODE")
        logger.error(
            "OAuth token exchange failed",
            extra={"provider": exc.provider, "error": exc.message},
        )
        return _error_response(502, exc, "OAUTH_EXCHANGE_FAILED")

    @app.exception_handler(ProfileFetchError)
    async def profile_fetch_handler(request: Request, exc: ProfileFetchError):
        logger.error(
            "OAuth profile fetch failed",
            extra={"provider": exc.provider, "error": exc.message},
        )
        return _error_response(502, exc, "OAUTH_PROFILE_FAILED")

    @app.exception_handler(InvalidSignatureError)
    async def invalid_signature_handler(request: Request, exc: InvalidSignatureError):
        return _error_response(401, exc, "INVALID_SIGNATURE")

    @app.exception_handler(UnsupportedProviderError)
    async def unsupported_provider_handler(request: Request, exc: UnsupportedProviderError):
        return _error_response(404, exc, "UNSUPPORTED_PROVIDER")

    @app.exception_handler(UnverifiedEmailError)
    async def unverified_email_handler(request: Request, exc: UnverifiedEmailError):
        return _error_response(403, exc, "EMAIL_NOT_VERIFIED")

    @app.exception_handler(AccountLinkConflictError)
    async def account_link_conflict_handler(request: Request, exc: AccountLinkConflictError):
        return _error_response(409, exc, "ACCOUNT_LINK_CONFLICT")

    @app.exception_handler(UserProvisioningError)
    async def user_provisioning_handler(request: Request, exc: UserProvisioningError):
        logger.error("User provisioning failed", extra={"error": exc.message})
        return _error_response(500, exc, "USER_PROVISIONING_FAILED")

    @app.exception_handler(RandomGenerationError)
    async def random_generation_handler(request: Request, exc: RandomGenerationError):
        logger.error("Secure random generation failed", extra={"error": exc.message})
        return _error_response(500, exc, "RANDOM_GENERATION_FAILED")

    @app.exception_handler(InvalidRefreshTokenError)
    async def invalid_refresh_token_handler(request: Request, exc: InvalidRefreshTokenError):
        return _error_response(401, exc, "INVALID_REFRESH_TOKEN")

    @app.exception_handler(InvalidCredentialsError)
    async def invalid_credentials_handler(request: Request, exc: InvalidCredentialsError):
        return _error_response(401, exc, "INVALID_CREDENTIALS")

    @app.exception_handler(AccountDisabledError)
    async def account_disabled_handler(request: Request, exc: AccountDisabledError):
        return _error_response(403, exc, "ACCOUNT_DISABLED")

    @app.exception_handler(InvalidTokenError)
    async def invalid_token_handler(request: Request, exc: InvalidTokenError):
        return _error_response(401, exc, "INVALID_TOKEN")

    @app.exception_handler(TokenExpiredError)
    async def token_expired_handler(request: Request, exc: TokenExpiredError):
        return _error_response(401, exc, "TOKEN_EXPIRED")

    @app.exception_handler(TokenRevokedError)
    async def token_revoked_handler(request: Request, exc: TokenRevokedError):
        return _error_response(401, exc, "TOKEN_REVOKED")

    @app.exception_handler(ApplicationError)
    async def application_error_handler(request: Request, exc: ApplicationError):
        return _error_response(400, exc, "APPLICATION_ERROR")
