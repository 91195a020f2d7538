"""OAuth login, Telegram login and password login interactor tests."""

from unittest.mock import AsyncMock, MagicMock

import pytest

from apps.identity.application.login.commands import PasswordLoginInteractor
from apps.identity.application.login.dto import PasswordLoginRequest
from apps.identity.application.login.exceptions import (
    AccountDisabledError,
    InvalidCredentialsError,
)
from apps.identity.application.oauth.commands import (
    OAuthCallbackInteractor,
    TelegramCallbackInteractor,
)
from apps.identity.application.oauth.dto import OAuthCallbackRequest, TelegramCallbackRequest
from apps.identity.application.oauth.exceptions import InvalidSignatureError, InvalidStateError
from apps.identity.application.oauth.services import OAuthLoginService
from apps.identity.application.token.dto import IssuedRefreshToken, SessionGrant, SessionToken
from apps.identity.application.users.exceptions import UserProvisioningError
from apps.identity.application.users.services import ProvisioningResult
from apps.identity.domain.entities import User
from apps.identity.tests.unit.factories import make_profile


@pytest.fixture
def grant(now) -> SessionGrant:
    return SessionGrant(
        token=SessionToken(token="session.jwt", jti="jti-1", expires_at=2000000000),
        refresh_token=IssuedRefreshToken(value="opaque", user_id=7, expires_at=now),
    )


@pytest.fixture
def mock_session_service(grant: SessionGrant) -> MagicMock:
    service = MagicMock()
    service.start_session.return_value = grant
    return service


class TestOAuthLoginService:
    @pytest.fixture
    def mock_user_management(self, active_user: User) -> MagicMock:
        service = MagicMock()
        service.find_or_create_user = AsyncMock(
            return_value=ProvisioningResult(user=active_user, is_new_user=True)
        )
        return service

    @pytest.fixture
    def login_service(
        self,
        mock_user_management: MagicMock,
        mock_session_service: MagicMock,
        mock_flusher: AsyncMock,
        mock_transaction_manager: AsyncMock,
    ) -> OAuthLoginService:
        return OAuthLoginService(
            user_management=mock_user_management,
            session_service=mock_session_service,
            flusher=mock_flusher,
            transaction_manager=mock_transaction_manager,
        )

    @pytest.mark.asyncio
    async def test_complete_login_commits(
        self,
        login_service: OAuthLoginService,
        mock_user_management: MagicMock,
        mock_transaction_manager: AsyncMock,
        active_user: User,
    ) -> None:
        # Act
        result = await login_service.complete_login(make_profile(), "client")

        # Assert
        assert result.user is active_user
        assert result.token.token == "session.jwt"
        assert result.refresh_token.value == "opaque"
        assert result.is_new_user is True
        mock_user_management.find_or_create_user.assert_awaited_once()
        mock_transaction_manager.commit.assert_awaited_once()
        mock_transaction_manager.rollback.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_failure_rolls_back(
        self,
        login_service: OAuthLoginService,
        mock_user_management: MagicMock,
        mock_session_service: MagicMock,
        mock_transaction_manager: AsyncMock,
    ) -> None:
        # Arrange
        mock_user_management.find_or_create_user.side_effect = UserProvisioningError()

        # Act / Assert
        with pytest.raises(UserProvisioningError):
            await login_service.complete_login(make_profile())
        mock_session_service.start_session.assert_not_called()
        mock_transaction_manager.rollback.assert_awaited_once()
        mock_transaction_manager.commit.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_disabled_user_gets_no_session(
        self,
        login_service: OAuthLoginService,
        mock_session_service: MagicMock,
        mock_transaction_manager: AsyncMock,
        active_user: User,
    ) -> None:
        # Arrange
        active_user.is_active = False

        # Act / Assert
        with pytest.raises(AccountDisabledError):
            await login_service.complete_login(make_profile(provider_user_id="42"))
        mock_session_service.start_session.assert_not_called()
        mock_transaction_manager.rollback.assert_awaited_once()
        mock_transaction_manager.commit.assert_not_awaited()


class TestOAuthCallbackInteractor:
    @pytest.mark.asyncio
    async def test_invalid_state_skips_provisioning(self) -> None:
        # Arrange
        oauth_service = MagicMock()
        oauth_service.validate_and_fetch_profile = AsyncMock(side_effect=InvalidStateError())
        login_service = MagicMock()
        login_service.complete_login = AsyncMock()
        interactor = OAuthCallbackInteractor(oauth_service, login_service)

        # Act / Assert
        with pytest.raises(InvalidStateError):
            await interactor.execute(
                OAuthCallbackRequest(provider="google", code="c", state="s")
            )
        login_service.complete_login.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_passes_profile_and_role(self) -> None:
        # Arrange
        profile = make_profile()
        oauth_service = MagicMock()
        oauth_service.validate_and_fetch_profile = AsyncMock(return_value=profile)
        login_service = MagicMock()
        login_service.complete_login = AsyncMock(return_value="result")
        interactor = OAuthCallbackInteractor(oauth_service, login_service)

        # Act
        result = await interactor.execute(
            OAuthCallbackRequest.from_raw(
                provider="google",
                code="4%2F0Ab",
                state="abc#_=_",
                role="master",
            )
        )

        # Assert
        assert result == "result"
        oauth_service.validate_and_fetch_profile.assert_awaited_once_with(
            provider="google",
            code="4/0Ab",
            state="abc",
        )
        login_service.complete_login.assert_awaited_once_with(profile, "master")


class TestTelegramCallbackInteractor:
    @pytest.mark.asyncio
    async def test_bad_signature_skips_provisioning(self) -> None:
        verifier = MagicMock()
        verifier.verify_signed_login = AsyncMock(side_effect=InvalidSignatureError())
        login_service = MagicMock()
        login_service.complete_login = AsyncMock()
        interactor = TelegramCallbackInteractor(verifier, login_service)

        with pytest.raises(InvalidSignatureError):
            await interactor.execute(TelegramCallbackRequest(payload={"id": 1, "hash": "x"}))

        login_service.complete_login.assert_not_awaited()


class TestPasswordLoginInteractor:
    @pytest.fixture
    def query_gateway(self, active_user: User) -> MagicMock:
        gateway = MagicMock()
        gateway.get_by_email = AsyncMock(return_value=active_user)
        return gateway

    @pytest.fixture
    def password_hasher(self) -> MagicMock:
        hasher = MagicMock()
        hasher.verify.return_value = True
        return hasher

    @pytest.fixture
    def interactor(
        self,
        query_gateway: MagicMock,
        password_hasher: MagicMock,
        mock_session_service: MagicMock,
        mock_flusher: AsyncMock,
        mock_transaction_manager: AsyncMock,
    ) -> PasswordLoginInteractor:
        return PasswordLoginInteractor(
            user_query_gateway=query_gateway,
            password_hasher=password_hasher,
            session_service=mock_session_service,
            flusher=mock_flusher,
            transaction_manager=mock_transaction_manager,
        )

    @pytest.mark.asyncio
    async def test_success(
        self,
        interactor: PasswordLoginInteractor,
        query_gateway: MagicMock,
        mock_transaction_manager: AsyncMock,
        active_user: User,
    ) -> None:
        # Act
        result = await interactor.execute(
            PasswordLoginRequest(email=" User@Example.com ", password="secret")
        )

        # Assert
        assert result.user is active_user
        assert result.token.token == "session.jwt"
        assert active_user.last_login_at is not None
        query_gateway.get_by_email.assert_awaited_once_with("user@example.com")
        mock_transaction_manager.commit.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_wrong_password(
        self,
        interactor: PasswordLoginInteractor,
        password_hasher: MagicMock,
        mock_session_service: MagicMock,
    ) -> None:
        password_hasher.verify.return_value = False

        with pytest.raises(InvalidCredentialsError):
            await interactor.execute(PasswordLoginRequest(email="user@example.com", password="x"))

        mock_session_service.start_session.assert_not_called()

    @pytest.mark.asyncio
    async def test_unknown_email(
        self,
        interactor: PasswordLoginInteractor,
        query_gateway: MagicMock,
    ) -> None:
        query_gateway.get_by_email.return_value = None

        with pytest.raises(InvalidCredentialsError):
            await interactor.execute(PasswordLoginRequest(email="nobody@example.com", password="x"))

    @pytest.mark.asyncio
    async def test_oauth_only_account_cannot_use_password(
        self,
        interactor: PasswordLoginInteractor,
        password_hasher: MagicMock,
        active_user: User,
    ) -> None:
        active_user.password_hash = None

        with pytest.raises(InvalidCredentialsError):
            await interactor.execute(PasswordLoginRequest(email="user@example.com", password="x"))

        password_hasher.verify.assert_not_called()

    @pytest.mark.asyncio
    async def test_disabled_account(
        self,
        interactor: PasswordLoginInteractor,
        active_user: User,
    ) -> None:
        active_user.is_active = False

        with pytest.raises(AccountDisabledError):
            await interactor.execute(PasswordLoginRequest(email="user@example.com", password="s"))
