"""Dependency Injection Setup.

FastAPI Depends providers. Imports are lazy so the HTTP layer can be
imported (and overridden in tests) without a database or Redis.
"""

from __future__ import annotations

from functools import lru_cache
from typing import TYPE_CHECKING, AsyncGenerator

from fastapi import Depends

from apps.identity.setup.config import Settings, get_settings

if TYPE_CHECKING:
    import redis.asyncio as aioredis
    from sqlalchemy.ext.asyncio import AsyncSession

    from apps.identity.infrastructure.oauth import ProviderRegistry


# ============================================================
# Infrastructure Dependencies
# ============================================================


async def get_db_session() -> AsyncGenerator["AsyncSession", None]:
    """DB session provider."""
    from apps.identity.infrastructure.persistence_postgres.session import get_async_session

    async for session in get_async_session():
        yield session


def get_blacklist_redis() -> "aioredis.Redis":
    """Redis client for the session token blacklist."""
    from apps.identity.infrastructure.persistence_redis.client import get_blacklist_redis

    return get_blacklist_redis()


def get_oauth_state_redis() -> "aioredis.Redis":
    """Redis client for OAuth state."""
    from apps.identity.infrastructure.persistence_redis.client import get_oauth_state_redis

    return get_oauth_state_redis()


@lru_cache
def get_provider_registry() -> "ProviderRegistry":
    """Enabled OAuth providers, built once from settings."""
    from apps.identity.infrastructure.oauth import build_provider_registry

    return build_provider_registry(get_settings())


def get_oauth_client(settings: Settings = Depends(get_settings)):
    """OAuthProviderGateway / TokenExchanger / UserDataFetcher provider."""
    from apps.identity.infrastructure.oauth import OAuthClientImpl

    return OAuthClientImpl(get_provider_registry(), settings.provider_timeout_seconds)


def get_telegram_verifier():
    """SignedLoginVerifier provider (Telegram)."""
    return get_provider_registry().get_telegram()


def get_token_issuer(settings: Settings = Depends(get_settings)):
    """SessionTokenIssuer provider."""
    from apps.identity.infrastructure.security import JwtTokenService

    return JwtTokenService(
        secret_key=settings.jwt_secret_key,
        algorithm=settings.jwt_algorithm,
        issuer=settings.jwt_issuer,
        audience=settings.jwt_audience,
        access_token_expire_minutes=settings.access_token_exp_minutes,
    )


def get_password_hasher(settings: Settings = Depends(get_settings)):
    from apps.identity.infrastructure.security import BcryptPasswordHasher

    return BcryptPasswordHasher(rounds=settings.bcrypt_rounds)


# ============================================================
# Gateway Dependencies (Adapters)
# ============================================================


async def get_user_query_gateway(
    session: "AsyncSession" = Depends(get_db_session),
):
    from apps.identity.infrastructure.persistence_postgres.adapters import SqlaUserQueryGateway

    return SqlaUserQueryGateway(session)


async def get_user_command_gateway(
    session: "AsyncSession" = Depends(get_db_session),
):
    from apps.identity.infrastructure.persistence_postgres.adapters import SqlaUserCommandGateway

    return SqlaUserCommandGateway(session)


async def get_refresh_token_gateway(
    session: "AsyncSession" = Depends(get_db_session),
):
    from apps.identity.infrastructure.persistence_postgres.adapters import SqlaRefreshTokenGateway

    return SqlaRefreshTokenGateway(session)


async def get_flusher(
    session: "AsyncSession" = Depends(get_db_session),
):
    from apps.identity.infrastructure.persistence_postgres.adapters import SqlaFlusher

    return SqlaFlusher(session)


async def get_transaction_manager(
    session: "AsyncSession" = Depends(get_db_session),
):
    from apps.identity.infrastructure.persistence_postgres.adapters import SqlaTransactionManager

    return SqlaTransactionManager(session)


# ============================================================
# Redis Gateway Dependencies
# ============================================================


def get_state_store(
    redis: "aioredis.Redis" = Depends(get_oauth_state_redis),
):
    """OAuthStateStore provider."""
    from apps.identity.infrastructure.persistence_redis import RedisStateStore

    return RedisStateStore(redis)


def get_token_blacklist(
    redis: "aioredis.Redis" = Depends(get_blacklist_redis),
):
    """TokenBlacklist provider."""
    from apps.identity.infrastructure.persistence_redis import RedisTokenBlacklist

    return RedisTokenBlacklist(redis)


# ============================================================
# Service Dependencies
# ============================================================


def get_user_service(settings: Settings = Depends(get_settings)):
    from apps.identity.domain.services import UserService

    return UserService(placeholder_email_domain=settings.frontend_host)


def get_user_management_service(
    user_service=Depends(get_user_service),
    query_gateway=Depends(get_user_query_gateway),
    command_gateway=Depends(get_user_command_gateway),
):
    from apps.identity.application.users.services import UserManagementService

    return UserManagementService(
        user_service=user_service,
        query_gateway=query_gateway,
        command_gateway=command_gateway,
    )


def get_refresh_token_service(
    settings: Settings = Depends(get_settings),
    gateway=Depends(get_refresh_token_gateway),
    user_query_gateway=Depends(get_user_query_gateway),
    token_issuer=Depends(get_token_issuer),
):
    from apps.identity.application.token.services import RefreshTokenService

    return RefreshTokenService(
        gateway=gateway,
        user_query_gateway=user_query_gateway,
        token_issuer=token_issuer,
        ttl_seconds=settings.refresh_token_ttl_seconds,
        cookie_name=settings.refresh_cookie_name,
        cookie_path=settings.refresh_cookie_path,
        cookie_secure=settings.refresh_cookie_secure,
        cookie_samesite=settings.refresh_samesite,
        cookie_domain=settings.cookie_domain,
    )


def get_session_service(
    token_issuer=Depends(get_token_issuer),
    refresh_token_service=Depends(get_refresh_token_service),
):
    from apps.identity.application.token.services import SessionService

    return SessionService(
        token_issuer=token_issuer,
        refresh_token_service=refresh_token_service,
    )


def get_oauth_flow_service(
    settings: Settings = Depends(get_settings),
    state_store=Depends(get_state_store),
    oauth_client=Depends(get_oauth_client),
):
    from apps.identity.application.oauth.services import OAuthFlowService

    return OAuthFlowService(
        state_store=state_store,
        provider_gateway=oauth_client,
        state_ttl_seconds=settings.oauth_state_ttl_seconds,
    )


def get_oauth_login_service(
    user_management=Depends(get_user_management_service),
    session_service=Depends(get_session_service),
    flusher=Depends(get_flusher),
    transaction_manager=Depends(get_transaction_manager),
):
    from apps.identity.application.oauth.services import OAuthLoginService

    return OAuthLoginService(
        user_management=user_management,
        session_service=session_service,
        flusher=flusher,
        transaction_manager=transaction_manager,
    )


def get_validate_session_token_query(
    token_issuer=Depends(get_token_issuer),
    token_blacklist=Depends(get_token_blacklist),
):
    from apps.identity.application.token.queries import ValidateSessionTokenQuery

    return ValidateSessionTokenQuery(token_issuer=token_issuer, token_blacklist=token_blacklist)


# ============================================================
# Interactor Dependencies
# ============================================================


def get_oauth_authorize_interactor(
    oauth_service=Depends(get_oauth_flow_service),
):
    """OAuthAuthorizeInteractor provider."""
    from apps.identity.application.oauth.commands import OAuthAuthorizeInteractor

    return OAuthAuthorizeInteractor(oauth_service=oauth_service)


def get_oauth_callback_interactor(
    oauth_service=Depends(get_oauth_flow_service),
    login_service=Depends(get_oauth_login_service),
):
    """OAuthCallbackInteractor provider."""
    from apps.identity.application.oauth.commands import OAuthCallbackInteractor

    return OAuthCallbackInteractor(oauth_service=oauth_service, login_service=login_service)


def get_telegram_callback_interactor(
    verifier=Depends(get_telegram_verifier),
    login_service=Depends(get_oauth_login_service),
):
    """TelegramCallbackInteractor provider."""
    from apps.identity.application.oauth.commands import TelegramCallbackInteractor

    return TelegramCallbackInteractor(verifier=verifier, login_service=login_service)


def get_password_login_interactor(
    user_query_gateway=Depends(get_user_query_gateway),
    password_hasher=Depends(get_password_hasher),
    session_service=Depends(get_session_service),
    flusher=Depends(get_flusher),
    transaction_manager=Depends(get_transaction_manager),
):
    """PasswordLoginInteractor provider."""
    from apps.identity.application.login.commands import PasswordLoginInteractor

    return PasswordLoginInteractor(
        user_query_gateway=user_query_gateway,
        password_hasher=password_hasher,
        session_service=session_service,
        flusher=flusher,
        transaction_manager=transaction_manager,
    )


def get_refresh_session_interactor(
    refresh_token_service=Depends(get_refresh_token_service),
    flusher=Depends(get_flusher),
    transaction_manager=Depends(get_transaction_manager),
):
    """RefreshSessionInteractor provider."""
    from apps.identity.application.token.commands import RefreshSessionInteractor

    return RefreshSessionInteractor(
        refresh_token_service=refresh_token_service,
        flusher=flusher,
        transaction_manager=transaction_manager,
    )


def get_logout_interactor(
    validate_query=Depends(get_validate_session_token_query),
    refresh_token_service=Depends(get_refresh_token_service),
    token_blacklist=Depends(get_token_blacklist),
    flusher=Depends(get_flusher),
    transaction_manager=Depends(get_transaction_manager),
):
    """LogoutInteractor provider."""
    from apps.identity.application.token.commands import LogoutInteractor

    return LogoutInteractor(
        validate_query=validate_query,
        refresh_token_service=refresh_token_service,
        token_blacklist=token_blacklist,
        flusher=flusher,
        transaction_manager=transaction_manager,
    )
