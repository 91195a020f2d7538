"""User Exceptions."""

from apps.identity.application.common.exceptions.base import ApplicationError


class IdentityConflictError(ApplicationError):
    """A unique constraint (email or provider identity) rejected an insert.

    Raised by gateways; the provisioning service resolves it by
    retrying the insert as a lookup.
    """

    def __init__(self, reason: str = "Identity already exists") -> None:
        super().__init__(reason)


class UserProvisioningError(ApplicationError):
    """User could neither be created nor found."""

    def __init__(self, reason: str = "User provisioning failed") -> None:
        super().__init__(reason)


class AccountLinkConflictError(ApplicationError):
    """The email owner is already linked to another account at the provider."""

    def __init__(self, provider: str) -> None:
        self.provider = provider
        super().__init__(f"This email is already associated with another {provider} account")

