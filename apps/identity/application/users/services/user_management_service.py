"""UserManagementService - find-or-create users from provider profiles.

Lookup order:
    1. linked social account (provider, provider_user_id)
    2. user with the same email, when the provider supplies one
    3. create a new user

Uniqueness is enforced by the database. A lost creation or linking race surfaces as
IdentityConflictError and is retried once as a lookup.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from apps.identity.application.users.exceptions import (
    AccountLinkConflictError,
    IdentityConflictError,
    UserProvisioningError,
)
from apps.identity.domain.services.user_service import normalize_email

if TYPE_CHECKING:
    from apps.identity.application.oauth.ports import OAuthProfile
    from apps.identity.application.users.ports import UserCommandGateway, UserQueryGateway
    from apps.identity.domain.entities import User
    from apps.identity.domain.services import UserService

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ProvisioningResult:
    user: "User"
    is_new_user: bool


class UserManagementService:
    """Finds or creates the local user for an external identity.

    Collaborators:
        - UserService: domain rules (creation, partial update)
        - UserQueryGateway: lookups
        - UserCommandGateway: inserts
    """

    def __init__(
        self,
        user_service: "UserService",
        query_gateway: "UserQueryGateway",
        command_gateway: "UserCommandGateway",
    ) -> None:
        self._user_service = user_service
        self._query_gateway = query_gateway
        self._command_gateway = command_gateway

    async def find_or_create_user(
        self,
        profile: "OAuthProfile",
        role: str | None = None,
    ) -> ProvisioningResult:
        """Return the user bound to `profile`, creating it on first login.

        Args:
            profile: normalized provider profile
            role: requested role for a new user ("client", "master")

        Returns:
            ProvisioningResult with the user and whether it was created

        Raises:
            AccountLinkConflictError: email owner linked to another provider account
            UserProvisioningError: user could neither be created nor found
        """
        try:
            existing = await self._find_existing(profile)
            if existing is not None:
                return existing
            return await self._create(profile, role)
        except IdentityConflictError:
            logger.info(
                "Concurrent provisioning detected, retrying as lookup",
                extra={
                    "provider": profile.provider,
                    "provider_user_id": profile.provider_user_id,
                },
            )

        try:
            existing = await self._find_existing(profile)
        except IdentityConflictError as e:
            raise UserProvisioningError(f"Could not link {profile.provider} identity") from e

        if existing is None:
            logger.error(
                "User provisioning failed after conflict",
                extra={
                    "provider": profile.provider,
                    "provider_user_id": profile.provider_user_id,
                },
            )
            raise UserProvisioningError("User could not be created or found")
        return existing

    def update_user_data(self, user: "User", profile: "OAuthProfile") -> bool:
        """Apply the supplied profile fields; absent fields stay untouched."""
        return self._user_service.apply_profile_update(
            user,
            name=profile.name,
            surname=profile.surname,
            username=profile.username,
            image_url=profile.image_url,
        )

    async def _find_existing(self, profile: "OAuthProfile") -> ProvisioningResult | None:
        linked = await self._query_gateway.get_by_provider_identity(
            profile.provider,
            profile.provider_user_id,
        )
        if linked is not None:
            self._user_service.update_user_login(linked.user, linked.social_account)
            self.update_user_data(linked.user, profile)
            return ProvisioningResult(user=linked.user, is_new_user=False)

        if not profile.email:
            return None

        user = await self._query_gateway.get_by_email(normalize_email(profile.email))
        if user is None:
            return None

        social_account = await self._query_gateway.get_social_account(user.id, profile.provider)
        if social_account is not None and social_account.provider_user_id != profile.provider_user_id:
            raise AccountLinkConflictError(profile.provider)

        if social_account is None:
            social_account = self._user_service.link_social_account(
                user,
                provider=profile.provider,
                provider_user_id=profile.provider_user_id,
            )
            await self._command_gateway.add_social_account(social_account)
            logger.info(
                "Linked provider identity to existing user",
                extra={"user_id": user.id, "provider": profile.provider},
            )

        self._user_service.update_user_login(user, social_account)
        self.update_user_data(user, profile)
        return ProvisioningResult(user=user, is_new_user=False)

    async def _create(self, profile: "OAuthProfile", role: str | None) -> ProvisioningResult:
        user, social_account = self._user_service.create_user_from_oauth_profile(
            provider=profile.provider,
            provider_user_id=profile.provider_user_id,
            role=role,
            email=profile.email,
            name=profile.name,
            surname=profile.surname,
            username=profile.username,
            image_url=profile.image_url,
        )
        await self._command_gateway.add_user_with_social_account(user, social_account)
        logger.info(
            "User created from provider profile",
            extra={"user_id": user.id, "provider": profile.provider},
        )
        return ProvisioningResult(user=user, is_new_user=True)
