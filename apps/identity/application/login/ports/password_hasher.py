"""PasswordHasher Port."""

from typing import Protocol


class PasswordHasher(Protocol):
    """Implementations:
        - BcryptPasswordHasher (infrastructure/security/)
    """

    def hash(self, password: str) -> str: ...

    def verify(self, password: str, password_hash: str) -> bool: ...
