from apps.identity.domain.services.user_service import UserService, normalize_email

__all__ = ["UserService", "normalize_email"]
