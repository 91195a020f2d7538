"""Login Controller.

Password login endpoint.
"""

import logging

from fastapi import APIRouter, Depends, Response

from apps.identity.application.login.commands import PasswordLoginInteractor
from apps.identity.application.login.dto import PasswordLoginRequest
from apps.identity.application.token.services import RefreshTokenService
from apps.identity.presentation.http.auth.cookie_params import apply_refresh_cookie
from apps.identity.presentation.http.schemas import LoginRequest, LoginResponse, UserResponse
from apps.identity.setup.dependencies import (
    get_password_login_interactor,
    get_refresh_token_service,
)

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "/authentication_token",
    response_model=LoginResponse,
    summary="Password login",
)
async def authentication_token(
    body: LoginRequest,
    response: Response,
    interactor: PasswordLoginInteractor = Depends(get_password_login_interactor),
    refresh_token_service: RefreshTokenService = Depends(get_refresh_token_service),
) -> LoginResponse:
    """Log in with email and password.

    Returns the session token and sets the refresh-token cookie.
    """
    result = await interactor.execute(
        PasswordLoginRequest(email=body.email, password=body.password)
    )

    apply_refresh_cookie(
        response,
        refresh_token_service.create_refresh_token_cookie(result.refresh_token),
    )
    return LoginResponse(user=UserResponse.from_entity(result.user), token=result.token.token)
