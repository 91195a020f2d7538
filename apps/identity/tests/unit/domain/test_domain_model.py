"""Entity and enum unit tests."""

from datetime import datetime, timedelta, timezone

import pytest

from apps.identity.domain.entities import RefreshToken, User
from apps.identity.domain.enums import OAuthProvider, Role


class TestRole:
    @pytest.mark.parametrize(
        ("requested", "expected"),
        [
            ("client", Role.CLIENT),
            ("CLIENT", Role.CLIENT),
            ("master", Role.MASTER),
            ("admin", Role.USER),
            ("", Role.USER),
            (None, Role.USER),
        ],
    )
    def test_from_requested(self, requested, expected) -> None:
        assert Role.from_requested(requested) is expected

    def test_values_are_stored_role_names(self) -> None:
        assert Role.CLIENT.value == "ROLE_CLIENT"


class TestOAuthProvider:
    def test_supported_providers(self) -> None:
        assert {p.value for p in OAuthProvider} == {"google", "telegram", "instagram"}


class TestUser:
    def test_update_login_time(self) -> None:
        user = User(email="a@x.com")

        user.update_login_time()

        assert user.last_login_at is not None
        assert user.updated_at == user.last_login_at


class TestRefreshToken:
    def test_is_expired(self) -> None:
        now = datetime.now(timezone.utc)
        token = RefreshToken(user_id=1, token_hash="h", expires_at=now - timedelta(seconds=1))

        assert token.is_expired(now) is True

    def test_not_expired(self) -> None:
        now = datetime.now(timezone.utc)
        token = RefreshToken(user_id=1, token_hash="h", expires_at=now + timedelta(days=1))

        assert token.is_expired(now) is False
