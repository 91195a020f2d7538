"""Secure random token generation."""

import secrets

from apps.identity.application.common.exceptions import RandomGenerationError


def generate_urlsafe_token(nbytes: int = 32) -> str:
    """Return a URL-safe token with `nbytes` bytes of entropy.

    Raises:
        RandomGenerationError: the OS entropy source is unavailable
    """
    try:
        return secrets.token_urlsafe(nbytes)
    except (NotImplementedError, OSError) as e:
        raise RandomGenerationError(f"Secure random generation failed: {e}") from e
