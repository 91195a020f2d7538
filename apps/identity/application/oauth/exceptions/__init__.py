"""OAuth exceptions."""

from apps.identity.application.oauth.exceptions.oauth import (
    ExchangeError,
    InvalidSignatureError,
    InvalidStateError,
    ProfileFetchError,
    UnsupportedProviderError,
    UnverifiedEmailError,
)

__all__ = [
    "ExchangeError",
    "InvalidSignatureError",
    "InvalidStateError",
    "ProfileFetchError",
    "UnsupportedProviderError",
    "UnverifiedEmailError",
]
