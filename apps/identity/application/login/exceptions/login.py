"""Login Exceptions."""

from apps.identity.application.common.exceptions.base import ApplicationError


class InvalidCredentialsError(ApplicationError):
    def __init__(self, reason: str = "Invalid credentials") -> None:
        super().__init__(reason)


class AccountDisabledError(ApplicationError):
    def __init__(self, reason: str = "Account is disabled") -> None:
        super().__init__(reason)
