from apps.identity.infrastructure.security.jwt_token_service import JwtTokenService
from apps.identity.infrastructure.security.password_hasher_bcrypt import BcryptPasswordHasher

__all__ = ["BcryptPasswordHasher", "JwtTokenService"]
