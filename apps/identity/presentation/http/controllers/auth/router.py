"""Auth Router.

OAuth endpoints under /auth.
"""

from fastapi import APIRouter

from apps.identity.presentation.http.controllers.auth.callback import router as callback_router
from apps.identity.presentation.http.controllers.auth.url import router as url_router

router = APIRouter()

router.include_router(url_router)
router.include_router(callback_router)
