"""User Domain Service.

Domain rules for creating users from external identities and refreshing
their profile on repeat logins.
"""

from __future__ import annotations

from datetime import datetime, timezone

from apps.identity.domain.entities.user import User
from apps.identity.domain.entities.user_social_account import UserSocialAccount
from apps.identity.domain.enums import OAuthProvider, Role


def normalize_email(email: str) -> str:
    return email.strip().lower()


class UserService:
    """User domain service.

    Holds pure domain logic only.
    Storage access (DB, cache) is handled in the application layer.
    """

    def __init__(self, placeholder_email_domain: str) -> None:
        self._placeholder_email_domain = placeholder_email_domain

    def placeholder_email(self, provider: str, provider_user_id: str) -> str:
        """Synthesized email for providers that do not share one."""
        return f"{provider}.{provider_user_id}@{self._placeholder_email_domain}"

    def create_user_from_oauth_profile(
        self,
        *,
        provider: str,
        provider_user_id: str,
        role: str | None = None,
        email: str | None = None,
        name: str | None = None,
        surname: str | None = None,
        username: str | None = None,
        image_url: str | None = None,
    ) -> tuple[User, UserSocialAccount]:
        """Create a new user from a provider profile.

        Args:
            provider: provider name (google, telegram, instagram)
            provider_user_id: stable user id at the provider
            role: role requested by the client ("client", "master")
            email: email supplied by the provider (optional)
            name: given name (optional)
            surname: family name (optional)
            username: login name (optional)
            image_url: profile image URL (optional)

        Returns:
            The new (User, UserSocialAccount) pair, not yet persisted
        """
        now = datetime.now(timezone.utc)

        if username is None and provider == OAuthProvider.TELEGRAM.value:
            username = f"telegram_user_{provider_user_id}"

        user = User(
            email=(
                normalize_email(email)
                if email
                else self.placeholder_email(provider, provider_user_id)
            ),
            password_hash=None,
            name=name,
            surname=surname,
            username=username,
            image_url=image_url,
            roles=[Role.from_requested(role).value],
            is_active=True,
            created_at=now,
            updated_at=now,
            last_login_at=now,
        )
        social_account = UserSocialAccount(
            user_id=None,
            provider=provider,
            provider_user_id=provider_user_id,
            created_at=now,
            last_login_at=now,
        )
        return user, social_account

    def link_social_account(
        self,
        user: User,
        *,
        provider: str,
        provider_user_id: str,
    ) -> UserSocialAccount:
        """Link an external identity to an existing user."""
        now = datetime.now(timezone.utc)
        return UserSocialAccount(
            user_id=user.id,
            provider=provider,
            provider_user_id=provider_user_id,
            created_at=now,
            last_login_at=now,
        )

    def apply_profile_update(
        self,
        user: User,
        *,
        name: str | None = None,
        surname: str | None = None,
        username: str | None = None,
        image_url: str | None = None,
    ) -> bool:
        """Partially update a user from a provider profile.

        Only supplied (non-None) fields overwrite stored values.
        Email is an identity key and is never rewritten here.

        Returns:
            True if any stored field changed
        """
        changed = False
        for attr, value in (
            ("name", name),
            ("surname", surname),
            ("username", username),
            ("image_url", image_url),
        ):
            if value is not None and getattr(user, attr) != value:
                setattr(user, attr, value)
                changed = True
        if changed:
            user.touch()
        return changed

    def update_user_login(
        self,
        user: User,
        social_account: UserSocialAccount | None = None,
    ) -> None:
        """Update login timestamps."""
        user.update_login_time()
        if social_account is not None:
            social_account.update_login_time()
