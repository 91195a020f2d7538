"""Callback Controllers.

Complete an OAuth login. Telegram posts its signed widget payload;
code-flow providers post the code and state from their redirect.
"""

import logging

from fastapi import APIRouter, Depends, Response

from apps.identity.application.oauth.commands import (
    OAuthCallbackInteractor,
    TelegramCallbackInteractor,
)
from apps.identity.application.oauth.dto import (
    OAuthCallbackRequest,
    OAuthLoginResult,
    TelegramCallbackRequest as TelegramLoginRequest,
)
from apps.identity.application.token.services import RefreshTokenService
from apps.identity.presentation.http.auth.cookie_params import apply_refresh_cookie
from apps.identity.presentation.http.schemas import (
    CallbackRequest,
    LoginResponse,
    TelegramCallbackRequest,
    UserResponse,
)
from apps.identity.setup.dependencies import (
    get_oauth_callback_interactor,
    get_refresh_token_service,
    get_telegram_callback_interactor,
)

logger = logging.getLogger(__name__)

router = APIRouter()


def _login_response(
    response: Response,
    result: OAuthLoginResult,
    refresh_token_service: RefreshTokenService,
) -> LoginResponse:
    apply_refresh_cookie(
        response,
        refresh_token_service.create_refresh_token_cookie(result.refresh_token),
    )
    return LoginResponse(user=UserResponse.from_entity(result.user), token=result.token.token)


# Registered before /{provider}/callback so the literal path wins.
@router.post(
    "/telegram/callback",
    response_model=LoginResponse,
    summary="Telegram login",
)
async def telegram_callback(
    body: TelegramCallbackRequest,
    response: Response,
    interactor: TelegramCallbackInteractor = Depends(get_telegram_callback_interactor),
    refresh_token_service: RefreshTokenService = Depends(get_refresh_token_service),
) -> LoginResponse:
    """Verify the Telegram widget payload and log the user in."""
    result = await interactor.execute(
        TelegramLoginRequest(payload=body.signed_payload(), role=body.role)
    )
    return _login_response(response, result, refresh_token_service)


@router.post(
    "/{provider}/callback",
    response_model=LoginResponse,
    summary="OAuth callback",
)
async def callback(
    provider: str,
    body: CallbackRequest,
    response: Response,
    interactor: OAuthCallbackInteractor = Depends(get_oauth_callback_interactor),
    refresh_token_service: RefreshTokenService = Depends(get_refresh_token_service),
) -> LoginResponse:
    """Complete a code-flow login.

    1. Verify and consume the state
    2. Exchange the code and fetch the profile
    3. Find or create the user
    4. Issue the session token and the refresh-token cookie
    """
    result = await interactor.execute(
        OAuthCallbackRequest.from_raw(
            provider=provider.lower(),
            code=body.code,
            state=body.state,
            role=body.role,
        )
    )
    logger.info(
        "OAuth callback success",
        extra={"provider": provider, "user_id": result.user.id, "is_new_user": result.is_new_user},
    )
    return _login_response(response, result, refresh_token_service)
