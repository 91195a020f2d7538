"""Exception handler status mapping tests."""

from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from apps.identity.application.common.exceptions import ApplicationError, RandomGenerationError
from apps.identity.application.login.exceptions import AccountDisabledError, InvalidCredentialsError
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
from apps.identity.setup.dependencies import (
    get_oauth_callback_interactor,
    get_refresh_token_service,
)


@pytest.fixture
def app() -> FastAPI:
    from apps.identity.main import create_app

    return create_app()


@pytest.mark.parametrize(
    ("error", "status_code", "code"),
    [
        (InvalidStateError(), 400, "INVALID_STATE"),
        (
            ExchangeError("google", "invalid_grant", client_error=True),
            400,
            "INVALID_AUTHORIZATION_CODE",
        ),
        (ExchangeError("google", "API error: 503"), 502, "OAUTH_EXCHANGE_FAILED"),
        (ProfileFetchError("google", "API error: 500"), 502, "OAUTH_PROFILE_FAILED"),
        (InvalidSignatureError(), 401, "INVALID_SIGNATURE"),
        (UnsupportedProviderError("github"), 404, "UNSUPPORTED_PROVIDER"),
        (UnverifiedEmailError("google"), 403, "EMAIL_NOT_VERIFIED"),
        (AccountLinkConflictError("google"), 409, "ACCOUNT_LINK_CONFLICT"),
        (UserProvisioningError(), 500, "USER_PROVISIONING_FAILED"),
        (RandomGenerationError(), 500, "RANDOM_GENERATION_FAILED"),
        (InvalidRefreshTokenError(), 401, "INVALID_REFRESH_TOKEN"),
        (InvalidCredentialsError(), 401, "INVALID_CREDENTIALS"),
        (AccountDisabledError(), 403, "ACCOUNT_DISABLED"),
        (InvalidTokenError(), 401, "INVALID_TOKEN"),
        (TokenExpiredError(), 401, "TOKEN_EXPIRED"),
        (TokenRevokedError(), 401, "TOKEN_REVOKED"),
        (ApplicationError("other"), 400, "APPLICATION_ERROR"),
    ],
)
def test_error_status_mapping(app: FastAPI, error: Exception, status_code: int, code: str) -> None:
    # Arrange
    interactor = MagicMock()
    interactor.execute = AsyncMock(side_effect=error)
    app.dependency_overrides[get_oauth_callback_interactor] = lambda: interactor
    app.dependency_overrides[get_refresh_token_service] = lambda: MagicMock()
    client = TestClient(app)

    # Act
    response = client.post("/api/auth/google/callback", json={"code": "c", "state": "s"})

    # Assert
    assert response.status_code == status_code
    assert response.json() == {"detail": error.message, "code": code}
