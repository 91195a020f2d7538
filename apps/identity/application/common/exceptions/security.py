"""Security Exceptions."""

from apps.identity.application.common.exceptions.base import ApplicationError


class RandomGenerationError(ApplicationError):
    """Secure randomness is unavailable."""

    def __init__(self, reason: str = "Secure random generation failed") -> None:
        super().__init__(reason)
