"""OAuth Provider Enum."""

from enum import Enum


class OAuthProvider(str, Enum):
    """Supported external identity providers."""

    GOOGLE = "google"
    TELEGRAM = "telegram"
    INSTAGRAM = "instagram"
