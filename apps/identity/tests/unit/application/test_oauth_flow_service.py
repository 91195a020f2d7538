"""OAuthFlowService unit tests."""

from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from apps.identity.application.common.exceptions import RandomGenerationError
from apps.identity.application.oauth.exceptions import ExchangeError, InvalidStateError
from apps.identity.application.oauth.ports import OAuthState, OAuthTokens
from apps.identity.application.oauth.services import OAuthFlowService
from apps.identity.tests.unit.factories import InMemoryStateStore, make_profile


class TestOAuthFlowService:
    """State issue, verification and provider calls."""

    @pytest.fixture
    def state_store(self) -> InMemoryStateStore:
        return InMemoryStateStore()

    @pytest.fixture
    def provider_gateway(self) -> MagicMock:
        gateway = MagicMock()
        gateway.requires_state.return_value = True
        gateway.supports_pkce.side_effect = lambda provider: provider == "google"
        gateway.get_authorization_url.return_value = "https://provider.example/auth?x=1"
        gateway.exchange_code_for_tokens = AsyncMock(
            return_value=OAuthTokens(access_token="provider-access")
        )
        gateway.fetch_user_data = AsyncMock(return_value=make_profile(email="a@x.com"))
        return gateway

    @pytest.fixture
    def service(
        self,
        state_store: InMemoryStateStore,
        provider_gateway: MagicMock,
    ) -> OAuthFlowService:
        return OAuthFlowService(
            state_store=state_store,
            provider_gateway=provider_gateway,
            state_ttl_seconds=600,
        )

    @pytest.mark.asyncio
    async def test_redirect_stores_state_with_pkce_verifier(
        self,
        service: OAuthFlowService,
        state_store: InMemoryStateStore,
        provider_gateway: MagicMock,
    ) -> None:
        # Act
        result = await service.generate_oauth_redirect_uri("google")

        # Assert
        assert result.url == "https://provider.example/auth?x=1"
        assert result.state is not None
        assert len(result.state) >= 40
        stored = state_store.states[result.state]
        assert stored.provider == "google"
        assert stored.code_verifier is not None
        assert state_store.ttls[result.state] == 600
        provider_gateway.get_authorization_url.assert_called_once_with(
            "google",
            state=result.state,
            code_verifier=stored.code_verifier,
        )

    @pytest.mark.asyncio
    async def test_redirect_without_pkce(
        self,
        service: OAuthFlowService,
        state_store: InMemoryStateStore,
    ) -> None:
        result = await service.generate_oauth_redirect_uri("instagram")

        assert state_store.states[result.state].code_verifier is None

    @pytest.mark.asyncio
    async def test_stateless_provider_gets_no_state(
        self,
        service: OAuthFlowService,
        state_store: InMemoryStateStore,
        provider_gateway: MagicMock,
    ) -> None:
        # Arrange
        provider_gateway.requires_state.return_value = False

        # Act
        result = await service.generate_oauth_redirect_uri("telegram")

        # Assert
        assert result.state is None
        assert state_store.states == {}

    @pytest.mark.asyncio
    async def test_states_are_unique(self, service: OAuthFlowService) -> None:
        first = await service.generate_oauth_redirect_uri("google")
        second = await service.generate_oauth_redirect_uri("google")

        assert first.state != second.state

    @pytest.mark.asyncio
    async def test_random_failure_stores_nothing(
        self,
        service: OAuthFlowService,
        state_store: InMemoryStateStore,
    ) -> None:
        with patch(
            "apps.identity.application.common.services.secure_random.secrets.token_urlsafe",
            side_effect=OSError("no entropy"),
        ):
            with pytest.raises(RandomGenerationError):
                await service.generate_oauth_redirect_uri("google")

        assert state_store.states == {}

    @pytest.mark.asyncio
    async def test_valid_state_exchanges_code_with_verifier(
        self,
        service: OAuthFlowService,
        provider_gateway: MagicMock,
        state_store: InMemoryStateStore,
    ) -> None:
        # Arrange
        issued = await service.generate_oauth_redirect_uri("google")
        verifier = state_store.states[issued.state].code_verifier

        # Act
        profile = await service.validate_and_fetch_profile(
            provider="google",
            code="auth-code",
            state=issued.state,
        )

        # Assert
        assert profile.provider_user_id == "42"
        provider_gateway.exchange_code_for_tokens.assert_awaited_once_with(
            "google",
            code="auth-code",
            code_verifier=verifier,
        )
        provider_gateway.fetch_user_data.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_replayed_state_fails(
        self,
        service: OAuthFlowService,
        provider_gateway: MagicMock,
    ) -> None:
        # Arrange
        issued = await service.generate_oauth_redirect_uri("google")
        await service.validate_and_fetch_profile(provider="google", code="c1", state=issued.state)

        # Act / Assert
        with pytest.raises(InvalidStateError):
            await service.validate_and_fetch_profile(
                provider="google",
                code="c2",
                state=issued.state,
            )
        assert provider_gateway.exchange_code_for_tokens.await_count == 1

    @pytest.mark.asyncio
    async def test_unknown_state_never_calls_exchange(
        self,
        service: OAuthFlowService,
        provider_gateway: MagicMock,
    ) -> None:
        with pytest.raises(InvalidStateError):
            await service.validate_and_fetch_profile(
                provider="google",
                code="auth-code",
                state="forged-state",
            )

        provider_gateway.exchange_code_for_tokens.assert_not_awaited()
        provider_gateway.fetch_user_data.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_empty_state_never_calls_exchange(
        self,
        service: OAuthFlowService,
        provider_gateway: MagicMock,
    ) -> None:
        with pytest.raises(InvalidStateError):
            await service.validate_and_fetch_profile(provider="google", code="c", state="")

        provider_gateway.exchange_code_for_tokens.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_state_issued_for_other_provider_fails(
        self,
        service: OAuthFlowService,
        state_store: InMemoryStateStore,
        provider_gateway: MagicMock,
    ) -> None:
        # Arrange
        await state_store.save("s-1", OAuthState(provider="instagram"), 600)

        # Act / Assert
        with pytest.raises(InvalidStateError):
            await service.validate_and_fetch_profile(provider="google", code="c", state="s-1")
        provider_gateway.exchange_code_for_tokens.assert_not_awaited()
        assert "s-1" not in state_store.states

    @pytest.mark.asyncio
    async def test_exchange_error_propagates_and_state_stays_consumed(
        self,
        service: OAuthFlowService,
        state_store: InMemoryStateStore,
        provider_gateway: MagicMock,
    ) -> None:
        # Arrange
        issued = await service.generate_oauth_redirect_uri("google")
        provider_gateway.exchange_code_for_tokens.side_effect = ExchangeError(
            "google", "invalid_grant", client_error=True
        )

        # Act / Assert
        with pytest.raises(ExchangeError):
            await service.validate_and_fetch_profile(provider="google", code="c", state=issued.state)
        assert issued.state not in state_store.states
        provider_gateway.fetch_user_data.assert_not_awaited()
