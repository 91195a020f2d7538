"""User gateway ports.

Read and write access to users and their linked social accounts.
"""

from dataclasses import dataclass
from typing import Protocol

from apps.identity.domain.entities import User, UserSocialAccount


@dataclass(frozen=True, slots=True)
class UserWithSocialAccount:
    user: User
    social_account: UserSocialAccount


class UserQueryGateway(Protocol):
    """User lookups.

    Implementations:
        - SqlaUserQueryGateway (infrastructure/persistence_postgres/)
    """

    async def get_by_id(self, user_id: int) -> User | None: ...

    async def get_by_email(self, email: str) -> User | None: ...

    async def get_by_provider_identity(
        self,
        provider: str,
        provider_user_id: str,
    ) -> UserWithSocialAccount | None: ...

    async def get_social_account(
        self,
        user_id: int,
        provider: str,
    ) -> UserSocialAccount | None: ...


class UserCommandGateway(Protocol):
    """User writes.

    Both methods flush inside a savepoint so a unique violation leaves
    the surrounding transaction usable.

    Implementations:
        - SqlaUserCommandGateway (infrastructure/persistence_postgres/)
    """

    async def add_user_with_social_account(
        self,
        user: User,
        social_account: UserSocialAccount,
    ) -> None:
        """Insert a user and its first social account.

        Raises:
            IdentityConflictError: email or provider identity already taken
        """
        ...

    async def add_social_account(self, social_account: UserSocialAccount) -> None:
        """Raises IdentityConflictError if the identity is already linked."""
        ...
