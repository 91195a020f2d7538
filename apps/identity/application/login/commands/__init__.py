from apps.identity.application.login.commands.password_login import PasswordLoginInteractor

__all__ = ["PasswordLoginInteractor"]
