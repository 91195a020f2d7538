from apps.identity.application.login.ports.password_hasher import PasswordHasher

__all__ = ["PasswordHasher"]
