"""SQLAlchemy implementation of the user gateways."""

from __future__ import annotations

import logging

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from apps.identity.application.users.exceptions import IdentityConflictError
from apps.identity.application.users.ports import UserWithSocialAccount
from apps.identity.domain.entities import User, UserSocialAccount
from apps.identity.infrastructure.persistence_postgres.mappings import (
    user_social_accounts_table,
    users_table,
)

logger = logging.getLogger(__name__)


class SqlaUserQueryGateway:
    """User lookups by id, email and provider identity."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get_by_id(self, user_id: int) -> User | None:
        return await self._session.get(User, user_id)

    async def get_by_email(self, email: str) -> User | None:
        result = await self._session.execute(select(User).where(users_table.c.email == email))
        return result.scalar_one_or_none()

    async def get_by_provider_identity(
        self,
        provider: str,
        provider_user_id: str,
    ) -> UserWithSocialAccount | None:
        result = await self._session.execute(
            select(UserSocialAccount).where(
                user_social_accounts_table.c.provider == provider,
                user_social_accounts_table.c.provider_user_id == provider_user_id,
            )
        )
        social = result.scalar_one_or_none()
        if social is None:
            return None

        user = await self._session.get(User, social.user_id)
        if user is None:
            return None
        return UserWithSocialAccount(user=user, social_account=social)

    async def get_social_account(self, user_id: int, provider: str) -> UserSocialAccount | None:
        result = await self._session.execute(
            select(UserSocialAccount).where(
                user_social_accounts_table.c.user_id == user_id,
                user_social_accounts_table.c.provider == provider,
            )
        )
        return result.scalar_one_or_none()


class SqlaUserCommandGateway:
    """User inserts.

    Each insert runs in a SAVEPOINT so a unique violation rolls back only
    the insert and the request transaction stays usable for the retry lookup.
    """

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def add_user_with_social_account(
        self,
        user: User,
        social_account: UserSocialAccount,
    ) -> None:
        try:
            async with self._session.begin_nested():
                self._session.add(user)
                await self._session.flush()
                social_account.user_id = user.id
                self._session.add(social_account)
                await self._session.flush()
        except IntegrityError as e:
            logger.info(
                "User insert hit a unique constraint",
                extra={"provider": social_account.provider},
            )
            raise IdentityConflictError("User identity already exists") from e

    async def add_social_account(self, social_account: UserSocialAccount) -> None:
        try:
            async with self._session.begin_nested():
                self._session.add(social_account)
                await self._session.flush()
        except IntegrityError as e:
            raise IdentityConflictError("Social account already linked") from e
