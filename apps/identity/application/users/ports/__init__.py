from apps.identity.application.users.ports.user_gateway import (
    UserCommandGateway,
    UserQueryGateway,
    UserWithSocialAccount,
)

__all__ = ["UserCommandGateway", "UserQueryGateway", "UserWithSocialAccount"]
