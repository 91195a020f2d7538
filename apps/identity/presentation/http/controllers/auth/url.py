"""Authorization URL Controller."""

from fastapi import APIRouter, Depends

from apps.identity.application.oauth.commands import OAuthAuthorizeInteractor
from apps.identity.application.oauth.dto import OAuthAuthorizeRequest
from apps.identity.presentation.http.schemas import AuthorizationUrlResponse
from apps.identity.setup.dependencies import get_oauth_authorize_interactor

router = APIRouter()


@router.get(
    "/{provider}/url",
    response_model=AuthorizationUrlResponse,
    summary="Provider authorization URL",
)
async def authorization_url(
    provider: str,
    interactor: OAuthAuthorizeInteractor = Depends(get_oauth_authorize_interactor),
) -> AuthorizationUrlResponse:
    """Return the URL the frontend should send the user to.

    For code-flow providers a single-use state is stored and returned.
    """
    result = await interactor.execute(OAuthAuthorizeRequest(provider=provider.lower()))
    return AuthorizationUrlResponse(url=result.url, state=result.state)
