from apps.identity.domain.entities.refresh_token import RefreshToken
from apps.identity.domain.entities.user import User
from apps.identity.domain.entities.user_social_account import UserSocialAccount

__all__ = ["RefreshToken", "User", "UserSocialAccount"]
