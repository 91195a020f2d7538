"""OAuth Exceptions."""

from apps.identity.application.common.exceptions.base import ApplicationError


class InvalidStateError(ApplicationError):
    """OAuth state verification failed (CSRF or replay)."""

    def __init__(self, reason: str = "Invalid or expired state") -> None:
        super().__init__(reason)


class InvalidSignatureError(ApplicationError):
    """Signed login payload failed verification."""

    def __init__(self, reason: str = "Invalid login signature") -> None:
        super().__init__(reason)


class UnsupportedProviderError(ApplicationError):
    """Provider is unknown or not enabled."""

    def __init__(self, provider: str) -> None:
        self.provider = provider
        super().__init__(f"Unsupported OAuth provider: {provider}")


class ExchangeError(ApplicationError):
    """Authorization code could not be exchanged for tokens.

    `client_error` is True when the provider rejected the code itself
    (invalid, expired or already used) as opposed to failing.
    """

    def __init__(self, provider: str, reason: str, *, client_error: bool = False) -> None:
        self.provider = provider
        self.client_error = client_error
        super().__init__(f"Token exchange failed ({provider}): {reason}")


class ProfileFetchError(ApplicationError):
    """Provider profile could not be fetched."""

    def __init__(self, provider: str, reason: str) -> None:
        self.provider = provider
        super().__init__(f"Profile fetch failed ({provider}): {reason}")


class UnverifiedEmailError(ApplicationError):
    """Provider reports the account email as unverified."""

    def __init__(self, provider: str) -> None:
        self.provider = provider
        super().__init__(f"Email is not verified by {provider}")
