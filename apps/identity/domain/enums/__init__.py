from apps.identity.domain.enums.oauth_provider import OAuthProvider
from apps.identity.domain.enums.role import Role

__all__ = ["OAuthProvider", "Role"]
