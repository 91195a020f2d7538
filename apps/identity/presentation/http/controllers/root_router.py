"""Root Router.

Combines every API router; mounted under the configured API prefix.
"""

from fastapi import APIRouter

from apps.identity.presentation.http.controllers.auth.router import router as auth_router
from apps.identity.presentation.http.controllers.login import router as login_router
from apps.identity.presentation.http.controllers.logout import router as logout_router
from apps.identity.presentation.http.controllers.refresh import router as refresh_router

router = APIRouter()

router.include_router(login_router, tags=["auth"])
router.include_router(logout_router, tags=["auth"])
router.include_router(refresh_router, tags=["token"])
router.include_router(auth_router, prefix="/auth", tags=["oauth"])
