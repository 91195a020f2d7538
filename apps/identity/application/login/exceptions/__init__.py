from apps.identity.application.login.exceptions.login import (
    AccountDisabledError,
    InvalidCredentialsError,
)

__all__ = ["AccountDisabledError", "InvalidCredentialsError"]
