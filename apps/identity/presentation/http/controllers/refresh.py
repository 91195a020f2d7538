"""Refresh Controller.

Session refresh endpoint. The refresh token is read from its cookie,
which is scoped to this path only.
"""

from fastapi import APIRouter, Depends, Request, Response

from apps.identity.application.token.commands import RefreshSessionInteractor
from apps.identity.application.token.dto import RefreshRequest
from apps.identity.application.token.services import RefreshTokenService
from apps.identity.presentation.http.auth.cookie_params import apply_refresh_cookie
from apps.identity.presentation.http.schemas import TokenResponse
from apps.identity.setup.dependencies import (
    get_refresh_session_interactor,
    get_refresh_token_service,
)

router = APIRouter()


@router.post(
    "/token/refresh",
    response_model=TokenResponse,
    summary="Refresh session token",
)
async def refresh(
    request: Request,
    response: Response,
    interactor: RefreshSessionInteractor = Depends(get_refresh_session_interactor),
    refresh_token_service: RefreshTokenService = Depends(get_refresh_token_service),
) -> TokenResponse:
    """Exchange the refresh-token cookie for a new session token.

    The refresh token is rotated: the old one stops working and a new
    cookie is set.
    """
    cookie_value = request.cookies.get(refresh_token_service.cookie_name)
    result = await interactor.execute(RefreshRequest(refresh_token=cookie_value))

    apply_refresh_cookie(
        response,
        refresh_token_service.create_refresh_token_cookie(result.refresh_token),
    )
    return TokenResponse(token=result.token.token)
