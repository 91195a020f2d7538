from apps.identity.application.users.exceptions.users import (
    AccountLinkConflictError,
    IdentityConflictError,
    UserProvisioningError,
)

__all__ = [
    "AccountLinkConflictError",
    "IdentityConflictError",
    "UserProvisioningError",
]
