from apps.identity.application.login.dto.login import PasswordLoginRequest, PasswordLoginResult

__all__ = ["PasswordLoginRequest", "PasswordLoginResult"]
