from apps.identity.application.token.ports.blacklist_store import TokenBlacklist
from apps.identity.application.token.ports.refresh_token_gateway import RefreshTokenGateway
from apps.identity.application.token.ports.token_issuer import SessionTokenIssuer

__all__ = ["RefreshTokenGateway", "SessionTokenIssuer", "TokenBlacklist"]
