"""SQLAlchemy gateway tests with a mocked AsyncSession."""

from datetime import datetime, timedelta, timezone
from unittest.mock import AsyncMock, MagicMock

import pytest
from sqlalchemy.exc import IntegrityError

from apps.identity.application.users.exceptions import IdentityConflictError
from apps.identity.domain.entities import RefreshToken, User, UserSocialAccount
from apps.identity.infrastructure.persistence_postgres.adapters import (
    SqlaFlusher,
    SqlaRefreshTokenGateway,
    SqlaTransactionManager,
    SqlaUserCommandGateway,
)


@pytest.fixture
def mock_session() -> MagicMock:
    session = MagicMock()
    savepoint = MagicMock()
    savepoint.__aenter__ = AsyncMock(return_value=None)
    savepoint.__aexit__ = AsyncMock(return_value=False)
    session.begin_nested.return_value = savepoint
    session.flush = AsyncMock()
    session.execute = AsyncMock()
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    return session


def _integrity_error() -> IntegrityError:
    return IntegrityError("INSERT INTO identity.users", {}, Exception("duplicate key"))


class TestSqlaUserCommandGateway:
    @pytest.mark.asyncio
    async def test_insert_links_social_account(self, mock_session: MagicMock) -> None:
        # Arrange
        user = User(email="a@x.com")
        social = UserSocialAccount(user_id=None, provider="google", provider_user_id="42")

        async def assign_id() -> None:
            user.id = 11

        mock_session.flush.side_effect = assign_id
        gateway = SqlaUserCommandGateway(mock_session)

        # Act
        await gateway.add_user_with_social_account(user, social)

        # Assert
        assert social.user_id == 11
        mock_session.begin_nested.assert_called_once()
        assert mock_session.add.call_count == 2

    @pytest.mark.asyncio
    async def test_unique_violation_becomes_identity_conflict(
        self,
        mock_session: MagicMock,
    ) -> None:
        mock_session.flush.side_effect = _integrity_error()
        gateway = SqlaUserCommandGateway(mock_session)

        with pytest.raises(IdentityConflictError):
            await gateway.add_user_with_social_account(
                User(email="a@x.com"),
                UserSocialAccount(user_id=None, provider="google", provider_user_id="42"),
            )

    @pytest.mark.asyncio
    async def test_social_account_conflict(self, mock_session: MagicMock) -> None:
        mock_session.flush.side_effect = _integrity_error()
        gateway = SqlaUserCommandGateway(mock_session)

        with pytest.raises(IdentityConflictError):
            await gateway.add_social_account(
                UserSocialAccount(user_id=1, provider="google", provider_user_id="42")
            )


class TestSqlaRefreshTokenGateway:
    def test_add(self, mock_session: MagicMock) -> None:
        token = RefreshToken(
            user_id=1,
            token_hash="h" * 64,
            expires_at=datetime.now(timezone.utc) + timedelta(days=1),
        )

        SqlaRefreshTokenGateway(mock_session).add(token)

        mock_session.add.assert_called_once_with(token)

    @pytest.mark.asyncio
    @pytest.mark.parametrize(("rowcount", "expected"), [(1, True), (0, False)])
    async def test_delete_by_hash_reports_deletion(
        self,
        mock_session: MagicMock,
        rowcount: int,
        expected: bool,
    ) -> None:
        mock_session.execute.return_value = MagicMock(rowcount=rowcount)

        assert await SqlaRefreshTokenGateway(mock_session).delete_by_hash("h") is expected

    @pytest.mark.asyncio
    async def test_delete_all_for_user(self, mock_session: MagicMock) -> None:
        mock_session.execute.return_value = MagicMock(rowcount=3)

        assert await SqlaRefreshTokenGateway(mock_session).delete_all_for_user(1) == 3


class TestSqlaTransactionManager:
    @pytest.mark.asyncio
    async def test_delegates_to_session(self, mock_session: MagicMock) -> None:
        await SqlaFlusher(mock_session).flush()
        await SqlaTransactionManager(mock_session).commit()
        await SqlaTransactionManager(mock_session).rollback()

        mock_session.flush.assert_awaited_once()
        mock_session.commit.assert_awaited_once()
        mock_session.rollback.assert_awaited_once()
