"""Logout Controller."""

from typing import Optional

from fastapi import APIRouter, Depends, Response

from apps.identity.application.token.commands import LogoutInteractor
from apps.identity.application.token.dto import LogoutRequest
from apps.identity.presentation.http.auth.cookie_params import clear_refresh_cookie
from apps.identity.presentation.http.auth.dependencies import get_bearer_token
from apps.identity.presentation.http.schemas import LogoutResponse
from apps.identity.setup.config import Settings, get_settings
from apps.identity.setup.dependencies import get_logout_interactor

router = APIRouter()


@router.post(
    "/logout",
    response_model=LogoutResponse,
    summary="Logout",
)
async def logout(
    response: Response,
    access_token: Optional[str] = Depends(get_bearer_token),
    interactor: LogoutInteractor = Depends(get_logout_interactor),
    settings: Settings = Depends(get_settings),
) -> LogoutResponse:
    """Revoke every refresh token of the user and blacklist the session token.

    Expects `Authorization: Bearer <session token>`.
    """
    await interactor.execute(LogoutRequest(access_token=access_token))

    clear_refresh_cookie(
        response,
        name=settings.refresh_cookie_name,
        path=settings.refresh_cookie_path,
        domain=settings.cookie_domain,
        secure=settings.refresh_cookie_secure,
        samesite=settings.refresh_samesite,
    )
    return LogoutResponse(message="Logged out")
