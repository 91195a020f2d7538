"""UserManagementService unit tests.

Uses the in-memory user store, whose uniqueness rules match the database.
"""

import asyncio
from unittest.mock import AsyncMock, MagicMock

import pytest

from apps.identity.application.users.exceptions import (
    AccountLinkConflictError,
    IdentityConflictError,
    UserProvisioningError,
)
from apps.identity.application.users.services import UserManagementService
from apps.identity.domain.entities import User, UserSocialAccount
from apps.identity.domain.services import UserService
from apps.identity.tests.unit.factories import InMemoryUserStore, make_profile


class TestFindOrCreateUser:
    """Find-or-create semantics."""

    @pytest.fixture
    def store(self) -> InMemoryUserStore:
        return InMemoryUserStore()

    @pytest.fixture
    def service(self, user_service: UserService, store: InMemoryUserStore) -> UserManagementService:
        return UserManagementService(
            user_service=user_service,
            query_gateway=store,
            command_gateway=store,
        )

    @pytest.mark.asyncio
    async def test_first_login_creates_user(
        self,
        service: UserManagementService,
        store: InMemoryUserStore,
    ) -> None:
        # Act
        result = await service.find_or_create_user(
            make_profile(provider_user_id="42", name="A", email="a@x.com"),
            role="client",
        )

        # Assert
        assert result.is_new_user is True
        assert result.user.id is not None
        assert result.user.roles == ["ROLE_CLIENT"]
        assert len(store.users) == 1
        assert len(store.social_accounts) == 1

    @pytest.mark.asyncio
    async def test_repeat_login_updates_supplied_fields_only(
        self,
        service: UserManagementService,
        store: InMemoryUserStore,
    ) -> None:
        # Arrange
        first = await service.find_or_create_user(
            make_profile(provider_user_id="42", name="A", email="a@x.com"),
            role="client",
        )

        # Act
        second = await service.find_or_create_user(make_profile(provider_user_id="42", name="B"))

        # Assert
        assert second.is_new_user is False
        assert second.user.id == first.user.id
        assert second.user.name == "B"
        assert second.user.email == "a@x.com"
        assert second.user.roles == ["ROLE_CLIENT"]
        assert len(store.users) == 1

    @pytest.mark.asyncio
    async def test_repeat_logins_leave_one_user(
        self,
        service: UserManagementService,
        store: InMemoryUserStore,
    ) -> None:
        profile = make_profile(provider="telegram", provider_user_id="555", name="T")

        for _ in range(3):
            await service.find_or_create_user(profile)

        assert len(store.users) == 1
        assert len(store.social_accounts) == 1

    @pytest.mark.asyncio
    async def test_email_match_links_new_provider(
        self,
        service: UserManagementService,
        store: InMemoryUserStore,
    ) -> None:
        # Arrange
        existing = User(email="a@x.com", name="A")
        await store.add_user_with_social_account(
            existing,
            UserSocialAccount(user_id=None, provider="instagram", provider_user_id="ig-1"),
        )

        # Act
        result = await service.find_or_create_user(
            make_profile(provider="google", provider_user_id="g-1", email="A@X.com")
        )

        # Assert
        assert result.is_new_user is False
        assert result.user.id == existing.id
        assert {s.provider for s in store.social_accounts} == {"instagram", "google"}

    @pytest.mark.asyncio
    async def test_email_owner_linked_to_other_account_conflicts(
        self,
        service: UserManagementService,
        store: InMemoryUserStore,
    ) -> None:
        # Arrange
        await store.add_user_with_social_account(
            User(email="a@x.com"),
            UserSocialAccount(user_id=None, provider="google", provider_user_id="g-1"),
        )

        # Act / Assert
        with pytest.raises(AccountLinkConflictError):
            await service.find_or_create_user(
                make_profile(provider="google", provider_user_id="g-2", email="a@x.com")
            )
        assert len(store.users) == 1

    @pytest.mark.asyncio
    async def test_concurrent_first_logins_create_one_user(
        self,
        service: UserManagementService,
        store: InMemoryUserStore,
    ) -> None:
        # Arrange
        profile = make_profile(provider_user_id="42", name="A", email="a@x.com")

        # Act
        first, second = await asyncio.gather(
            service.find_or_create_user(profile, "client"),
            service.find_or_create_user(profile, "client"),
        )

        # Assert
        assert len(store.users) == 1
        assert store.conflicts == 1
        assert first.user.id == second.user.id
        assert sorted([first.is_new_user, second.is_new_user]) == [False, True]

    @pytest.mark.asyncio
    async def test_concurrent_links_to_existing_email_user_link_once(
        self,
        service: UserManagementService,
        store: InMemoryUserStore,
    ) -> None:
        # Arrange
        existing = User(email="a@x.com", name="A")
        await store.add_user_with_social_account(
            existing,
            UserSocialAccount(user_id=None, provider="instagram", provider_user_id="ig-1"),
        )
        profile = make_profile(provider="google", provider_user_id="g-1", email="a@x.com")

        # Act
        results = await asyncio.gather(
            service.find_or_create_user(profile),
            service.find_or_create_user(profile),
            return_exceptions=True,
        )

        # Assert
        assert all(not isinstance(result, BaseException) for result in results)
        assert {result.user.id for result in results} == {existing.id}
        assert store.conflicts == 1
        assert len(store.users) == 1
        assert [s.provider for s in store.social_accounts].count("google") == 1

    @pytest.mark.asyncio
    async def test_conflict_without_visible_user_raises_provisioning_error(
        self,
        user_service: UserService,
    ) -> None:
        # Arrange
        query_gateway = MagicMock()
        query_gateway.get_by_provider_identity = AsyncMock(return_value=None)
        query_gateway.get_by_email = AsyncMock(return_value=None)
        command_gateway = MagicMock()
        command_gateway.add_user_with_social_account = AsyncMock(
            side_effect=IdentityConflictError()
        )
        service = UserManagementService(user_service, query_gateway, command_gateway)

        # Act / Assert
        with pytest.raises(UserProvisioningError):
            await service.find_or_create_user(make_profile(email="a@x.com"))
        assert query_gateway.get_by_provider_identity.await_count == 2
