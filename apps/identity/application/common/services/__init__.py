from apps.identity.application.common.services.secure_random import generate_urlsafe_token

__all__ = ["generate_urlsafe_token"]
